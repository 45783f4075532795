import pytest
from hypothesis import given
from hypothesis import strategies as st

from letter.letter_constants import KEYWORDS, TokenType
from letter.letter_errors import LetterSyntaxError
from letter.letter_lexer import CharacterStream, Lexer, Token, tokenize


def types(source: str) -> list[TokenType]:
    return [tok.type for tok in tokenize(source)]


def test_single_char_tokens() -> None:
    code = "; { } ( ) , . [ ] + - * / < > ! ="
    expected = [
        TokenType.SEMICOLON,
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.LPAREN,
        TokenType.RPAREN,
        TokenType.COMMA,
        TokenType.DOT,
        TokenType.LBRACK,
        TokenType.RBRACK,
        TokenType.ADDITIVE,
        TokenType.ADDITIVE,
        TokenType.MULTIPLICATIVE,
        TokenType.MULTIPLICATIVE,
        TokenType.RELATIONAL,
        TokenType.RELATIONAL,
        TokenType.NOT,
        TokenType.ASSIGN,
    ]
    assert types(code) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("==", TokenType.EQUALITY),
        ("!=", TokenType.EQUALITY),
        ("<=", TokenType.RELATIONAL),
        (">=", TokenType.RELATIONAL),
        ("&&", TokenType.AND),
        ("||", TokenType.OR),
        ("+=", TokenType.COMPOUND_ASSIGN),
        ("-=", TokenType.COMPOUND_ASSIGN),
        ("*=", TokenType.COMPOUND_ASSIGN),
        ("/=", TokenType.COMPOUND_ASSIGN),
    ],
)  # type: ignore[misc]
def test_two_char_operators_beat_prefixes(source: str, expected: TokenType) -> None:
    tokens = tokenize(source)
    assert len(tokens) == 1
    assert tokens[0].type == expected
    assert tokens[0].value == source


def test_number_token() -> None:
    tok = Lexer(CharacterStream("123")).next_token()
    assert tok.type == TokenType.NUMBER
    assert tok.value == "123"


def test_string_tokens_keep_quotes() -> None:
    assert [t.value for t in tokenize("\"hello\" 'world'")] == ['"hello"', "'world'"]
    assert types("\"a\" 'b'") == [TokenType.STRING, TokenType.STRING]


def test_identifier_token() -> None:
    tok = Lexer(CharacterStream("myVar_2")).next_token()
    assert tok.type == TokenType.IDENT
    assert tok.value == "myVar_2"


@pytest.mark.parametrize("word,kind", sorted(KEYWORDS.items()))  # type: ignore[misc]
def test_keywords(word: str, kind: TokenType) -> None:
    assert types(word) == [kind]


@pytest.mark.parametrize(
    "source", ["lettuce", "iffy", "classes", "newer", "this_", "getter", "do2"]
)  # type: ignore[misc]
def test_keyword_prefix_is_identifier(source: str) -> None:
    tokens = tokenize(source)
    assert len(tokens) == 1
    assert tokens[0].type == TokenType.IDENT
    assert tokens[0].value == source


def test_number_then_identifier() -> None:
    assert [(t.type, t.value) for t in tokenize("12ab")] == [
        (TokenType.NUMBER, "12"),
        (TokenType.IDENT, "ab"),
    ]


def test_line_and_column_tracking() -> None:
    tokens = tokenize("x = 1;\n  y = 2;")
    y = tokens[4]
    assert y.value == "y"
    assert y.line == 2
    assert y.col == 3


def test_skip_whitespace_and_comments() -> None:
    source = "  // a comment\n /* block\n comment */ 42 /**/ ;"
    assert [(t.type, t.value) for t in tokenize(source)] == [
        (TokenType.NUMBER, "42"),
        (TokenType.SEMICOLON, ";"),
    ]


def test_division_is_not_a_comment() -> None:
    assert types("a / b") == [
        TokenType.IDENT,
        TokenType.MULTIPLICATIVE,
        TokenType.IDENT,
    ]


def test_token_eof_is_sticky() -> None:
    lexer = Lexer(CharacterStream("   "))
    for _ in range(3):
        tok = lexer.next_token()
        assert tok.type == TokenType.EOF
        assert tok.value == ""


def test_unknown_character_raises() -> None:
    lexer = Lexer(CharacterStream("@"))
    with pytest.raises(LetterSyntaxError, match="Unexpected token: @"):
        lexer.next_token()


def test_unknown_character_error_is_reproducible() -> None:
    lexer = Lexer(CharacterStream("x #"))
    assert lexer.next_token().value == "x"
    messages = []
    for _ in range(2):
        with pytest.raises(LetterSyntaxError) as exc:
            lexer.next_token()
        messages.append(str(exc.value))
    assert messages == ["Unexpected token: #", "Unexpected token: #"]
    assert lexer.stream.peek() == "#"


def test_unterminated_string_is_an_error() -> None:
    with pytest.raises(LetterSyntaxError, match='Unexpected token: "'):
        tokenize('"abc')


def test_token_is_immutable() -> None:
    tok = Token(TokenType.IDENT, "x", 1, 1)
    with pytest.raises(AttributeError):
        tok.value = "y"  # type: ignore[misc]


def test_token_equality_and_hash() -> None:
    a = Token(TokenType.IDENT, "x", 1, 1)
    b = Token(TokenType.IDENT, "x", 1, 1)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Token(TokenType.IDENT, "x", 1, 2)
    assert repr(a) == "Token(IDENT, x)"


def test_character_stream_next_past_end() -> None:
    stream = CharacterStream("a")
    assert stream.next() == "a"
    assert stream.end_of_file()
    with pytest.raises(LetterSyntaxError):
        stream.next()


@given(
    word=st.from_regex(r"[a-zA-Z_][a-zA-Z0-9_]{0,10}", fullmatch=True).filter(
        lambda w: w not in KEYWORDS
    )
)  # type: ignore[misc]
def test_non_keyword_words_are_identifiers(word: str) -> None:
    assert [(t.type, t.value) for t in tokenize(word)] == [(TokenType.IDENT, word)]


@given(n=st.integers(min_value=0, max_value=10**12))  # type: ignore[misc]
def test_integers_lex_as_numbers(n: int) -> None:
    assert [(t.type, t.value) for t in tokenize(str(n))] == [
        (TokenType.NUMBER, str(n))
    ]
