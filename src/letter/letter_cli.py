"""
Letter CLI Entrypoint.

A thin driver over the Letter front end: it reads source, parses it and prints
the resulting tree, or reports the first syntax error.

Features:
    - Read source from `.letter` files or inline strings.
    - Print the AST as a dataclass repr (default) or as indented JSON.
    - Dump the raw token stream instead of parsing.
    - Write output to a file.

Example usage:
    letter program.letter
    letter -s "let x = 42;" --json
    letter -s "x += 1;" --tokens
    letter program.letter --json -o program.json

Functions:
    run_letter(source: str, is_string: bool = False, as_json: bool = False,
               tokens: bool = False, out: Optional[str] = None) -> str:
        Runs the pipeline (lex → parse → render) and emits the result.

    main(argv: Optional[list[str]] = None) -> int:
        Parses CLI arguments, calls `run_letter`, maps syntax errors to exit 1.
"""

import argparse
import json
import sys

from letter.letter_errors import LetterSyntaxError
from letter.letter_lexer import tokenize
from letter.letter_parser import Parser


def run_letter(
    source: str,
    is_string: bool = False,
    as_json: bool = False,
    tokens: bool = False,
    out: str | None = None,
) -> str:
    """
    Run the Letter front end and print or write the rendered result.

    Args:
        source (str): Letter source code, or a path to a `.letter` file.
        is_string (bool): If True, treats `source` as raw code. Defaults to False.
        as_json (bool): Render the tree via `to_dict()` as indented JSON.
        tokens (bool): Render the token stream instead of parsing.
        out (str | None): Optional output path. If None, prints to stdout.

    Returns:
        str: The rendered output.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.letter'.
        LetterSyntaxError: On the first lexical or grammar error.
    """
    if not is_string and not source.endswith(".letter"):
        raise ValueError("Only .letter files are supported.")
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    if tokens:
        stream = tokenize(source)
        if as_json:
            rendered = json.dumps(
                [
                    {"type": t.type.value, "value": t.value, "line": t.line, "col": t.col}
                    for t in stream
                ],
                indent=2,
            )
        else:
            rendered = "\n".join(repr(t) for t in stream)
    else:
        tree = Parser(source).parse()
        rendered = json.dumps(tree.to_dict(), indent=2) if as_json else repr(tree)

    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(rendered + "\n")
    else:
        print(rendered)
    return rendered


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the Letter CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `--json`: Print the tree (or tokens) as JSON.
        - `--tokens`: Print the token stream instead of the tree.
        - `-o`, `--out`: Write output to a file.

    Returns:
        int: Process exit status, 1 when the source has a syntax error.
    """
    parser = argparse.ArgumentParser(prog="letter")
    parser.add_argument("source", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Print output as JSON"
    )
    parser.add_argument(
        "--tokens", action="store_true", help="Print tokens instead of the tree"
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")

    args = parser.parse_args(argv)

    try:
        run_letter(
            source=args.source,
            is_string=args.string,
            as_json=args.as_json,
            tokens=args.tokens,
            out=args.out,
        )
    except LetterSyntaxError as e:
        print(f"SyntaxError: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
