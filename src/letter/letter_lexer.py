"""
Lexical analyzer for the Letter scripting language.

This module turns raw source text into tokens, one at a time, on demand:

Classes:
    CharacterStream: Source string plus a cursor with line/column tracking.
    Token: A single classified lexeme with its source location.
    Lexer: Pulls the next Token from a CharacterStream using the ordered
        pattern table in `letter_constants.TOKEN_SPEC`.

Features:
    - Skips whitespace, `//` line comments and `/* ... */` block comments
    - First-match-wins over an ordered table, so keywords beat identifiers
      and `==`, `+=`, `||` beat `=`, `+`, `|`
    - Returns an EOF token forever once the input is exhausted

Raises:
    LetterSyntaxError: If no pattern matches at the cursor. The cursor is left
        where it was, so polling again reports the same character.

Example:
    >>> lexer = Lexer(CharacterStream("let x = 42;"))
    >>> lexer.next_token()
    Token(LET, let)

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenize
"""

from typing import Any

from letter.letter_constants import TOKEN_SPEC, TokenType
from letter.letter_errors import LetterSyntaxError


class CharacterStream:
    """
    A cursor over a source string with line and column tracking.

    The lexer never copies the remaining input; patterns are matched directly
    against `source` starting at `position`.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            LetterSyntaxError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise LetterSyntaxError(
                f"Attempted to read past end of source at position {self.position}",
                self.line,
                self.column,
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def advance(self, count: int) -> str:
        """Consumes `count` characters and returns them as one string."""
        return "".join(self.next() for _ in range(count))

    def peek(self, offset: int = 0) -> str:
        """Returns the character `offset` places ahead, or "" when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Token:
    """Represents a single lexical token.

    Attributes:
        type (TokenType): The token's category.
        value (str): The exact source text of the lexeme ("" for EOF).
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    __slots__ = ("type", "value", "line", "col")

    def __init__(self, type_: TokenType, value: str, line: int = 0, col: int = 0):
        object.__setattr__(self, "type", type_)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "col", col)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Token is immutable, cannot set {name!r}")

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.type, self.value, self.line, self.col))


class Lexer:
    """Lexical analyzer for the Letter language.

    Each call to `next_token` scans forward from the stream's cursor; the
    lexer holds no state other than the stream itself.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def has_tokens(self) -> bool:
        return not self.stream.end_of_file()

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Ignorable matches (whitespace, comments) are consumed and scanning
        continues with the next pattern search.

        Raises:
            LetterSyntaxError: If no pattern matches at the current position.
        """
        stream = self.stream
        while self.has_tokens():
            line, col = stream.line, stream.column
            for pattern, kind in TOKEN_SPEC:
                match = pattern.match(stream.source, stream.position)
                if match is None or not match.group(0):
                    continue
                text = stream.advance(len(match.group(0)))
                if kind is None:
                    break
                return Token(kind, text, line, col)
            else:
                raise LetterSyntaxError(
                    f"Unexpected token: {stream.peek()}", line, col
                )
        return Token(TokenType.EOF, "", stream.line, stream.column)

    def __iter__(self) -> "Lexer":
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token.type is TokenType.EOF:
            raise StopIteration
        return token


def tokenize(source: str) -> list[Token]:
    """Lexes `source` completely and returns every token before EOF."""
    return list(Lexer(CharacterStream(source)))


__all__ = ["CharacterStream", "Lexer", "Token", "tokenize"]
