"""
The single error kind raised by the Letter lexer and parser.

Lexing and parsing are all-or-nothing: the first problem raises
`LetterSyntaxError` and nothing downstream sees a partial tree.
"""


class LetterSyntaxError(SyntaxError):
    """A syntax error with a human-readable message.

    Subclasses the built-in `SyntaxError` so callers can keep catching that,
    while `__str__` returns the bare message instead of the interpreter's
    `msg (file, line N)` rendering.

    Attributes:
        message (str): The diagnostic text.
        line (int): 1-based line of the offending token, 0 when unknown.
        col (int): 1-based column of the offending token, 0 when unknown.
    """

    def __init__(self, message: str, line: int = 0, col: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.col = col

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"LetterSyntaxError({self.message!r})"


__all__ = ["LetterSyntaxError"]
