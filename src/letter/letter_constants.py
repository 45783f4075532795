"""
Token vocabulary for the Letter scripting language.

Exports:
    TokenType: Closed enumeration of every lexeme category.
    TOKEN_SPEC: Ordered (pattern, kind) table consumed by the lexer. A kind of
        None marks an ignorable match (whitespace and comments).
    KEYWORDS: Reserved words and the token kind each one produces.
    ASSIGNMENT_OPERATORS, LITERAL_TOKENS, ITERATION_KEYWORDS: Groupings used by
        the parser's single-token dispatch.

Ordering in TOKEN_SPEC is significant: the first pattern matching a non-empty
prefix wins, so keywords come before identifiers and two-character operators
come before their one-character prefixes.
"""

import re
from enum import Enum


class TokenType(str, Enum):
    """Category of a lexeme. The value doubles as the name shown in errors."""

    EOF = "EOF"

    # Literals
    NUMBER = "NUMBER"
    STRING = "STRING"

    # Delimiters
    SEMICOLON = "SEMICOLON"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    COMMA = "COMMA"
    DOT = "DOT"
    LBRACK = "LBRACK"
    RBRACK = "RBRACK"

    # Operators
    ADDITIVE = "ADDITIVE"
    MULTIPLICATIVE = "MULTIPLICATIVE"
    RELATIONAL = "RELATIONAL"
    EQUALITY = "EQUALITY"
    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    ASSIGN = "ASSIGN"
    COMPOUND_ASSIGN = "COMPOUND_ASSIGN"

    IDENT = "IDENT"

    # Keywords
    LET = "LET"
    IF = "IF"
    ELSE = "ELSE"
    TRUE = "TRUE"
    FALSE = "FALSE"
    NULL = "NULL"
    WHILE = "WHILE"
    DO = "DO"
    FOR = "FOR"
    FUNCTION = "FUNCTION"
    RETURN = "RETURN"
    CLASS = "CLASS"
    EXTENDS = "EXTENDS"
    CONSTRUCTOR = "CONSTRUCTOR"
    GET = "GET"
    SET = "SET"
    THIS = "THIS"
    SUPER = "SUPER"
    NEW = "NEW"

    def __str__(self) -> str:
        return self.value


KEYWORDS: dict[str, TokenType] = {
    "let": TokenType.LET,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "null": TokenType.NULL,
    "while": TokenType.WHILE,
    "do": TokenType.DO,
    "for": TokenType.FOR,
    "function": TokenType.FUNCTION,
    "return": TokenType.RETURN,
    "class": TokenType.CLASS,
    "extends": TokenType.EXTENDS,
    "constructor": TokenType.CONSTRUCTOR,
    "get": TokenType.GET,
    "set": TokenType.SET,
    "this": TokenType.THIS,
    "super": TokenType.SUPER,
    "new": TokenType.NEW,
}

_RAW_SPEC: list[tuple[str, TokenType | None]] = [
    # Ignored
    (r"\s+", None),
    (r"//.*", None),
    (r"/\*[\s\S]*?\*/", None),
    # Delimiters
    (r";", TokenType.SEMICOLON),
    (r"\{", TokenType.LBRACE),
    (r"\}", TokenType.RBRACE),
    (r"\(", TokenType.LPAREN),
    (r"\)", TokenType.RPAREN),
    (r",", TokenType.COMMA),
    (r"\.", TokenType.DOT),
    (r"\[", TokenType.LBRACK),
    (r"\]", TokenType.RBRACK),
    # Keywords, anchored on a trailing word boundary so `lettuce` stays whole
    *[(rf"{word}\b", kind) for word, kind in KEYWORDS.items()],
    # Literals
    (r"\d+", TokenType.NUMBER),
    (r'".*?"', TokenType.STRING),
    (r"'.*?'", TokenType.STRING),
    (r"\w+", TokenType.IDENT),
    # Operators
    (r"[=!]=", TokenType.EQUALITY),
    (r"&&", TokenType.AND),
    (r"\|\|", TokenType.OR),
    (r"!", TokenType.NOT),
    (r"=", TokenType.ASSIGN),
    (r"[-+*/]=", TokenType.COMPOUND_ASSIGN),
    (r"[+-]", TokenType.ADDITIVE),
    (r"[*/]", TokenType.MULTIPLICATIVE),
    (r"[<>]=?", TokenType.RELATIONAL),
]

TOKEN_SPEC: list[tuple[re.Pattern[str], TokenType | None]] = [
    (re.compile(pattern), kind) for pattern, kind in _RAW_SPEC
]

ASSIGNMENT_OPERATORS: frozenset[TokenType] = frozenset(
    {TokenType.ASSIGN, TokenType.COMPOUND_ASSIGN}
)

LITERAL_TOKENS: frozenset[TokenType] = frozenset(
    {
        TokenType.NUMBER,
        TokenType.STRING,
        TokenType.TRUE,
        TokenType.FALSE,
        TokenType.NULL,
        TokenType.THIS,
        TokenType.SUPER,
    }
)

ITERATION_KEYWORDS: frozenset[TokenType] = frozenset(
    {TokenType.WHILE, TokenType.DO, TokenType.FOR}
)

__all__ = [
    "ASSIGNMENT_OPERATORS",
    "ITERATION_KEYWORDS",
    "KEYWORDS",
    "LITERAL_TOKENS",
    "TOKEN_SPEC",
    "TokenType",
]
