import pytest
from hypothesis import given
from hypothesis import strategies as st

from cooldata.cooldata_errors import LexError
from cooldata.cooldata_lexer import CharacterStream, Lexer, Token, TokenKind, tokenize


def kinds(source: str) -> list[TokenKind]:
    return [tok.kind for tok in tokenize(source)]


def test_single_char_tokens() -> None:
    assert kinds("{ } [ ] , =") == [
        TokenKind.LEFT_BRACE,
        TokenKind.RIGHT_BRACE,
        TokenKind.LEFT_BRACKET,
        TokenKind.RIGHT_BRACKET,
        TokenKind.COMMA,
        TokenKind.EQUALS,
    ]


def test_field_tokens() -> None:
    tokens = tokenize("port = 80")
    assert tokens == [
        Token(TokenKind.IDENTIFIER, "port", 1, 1),
        Token(TokenKind.EQUALS, "=", 1, 6),
        Token(TokenKind.INT, "80", 1, 8),
    ]


def test_string_token() -> None:
    tok = tokenize('"hello world"')[0]
    assert tok.kind == TokenKind.STRING
    assert tok.text == "hello world"


def test_string_keeps_backslashes() -> None:
    tok = tokenize('"C:\\temp\\n"')[0]
    assert tok.text == "C:\\temp\\n"


def test_empty_string() -> None:
    assert tokenize('""') == [Token(TokenKind.STRING, "", 1, 1)]


def test_int_token() -> None:
    tok = tokenize("123")[0]
    assert tok.kind == TokenKind.INT
    assert tok.text == "123"


def test_float_token() -> None:
    tok = tokenize("123.456")[0]
    assert tok.kind == TokenKind.FLOAT
    assert tok.text == "123.456"


def test_trailing_period_is_float() -> None:
    tok = tokenize("7.")[0]
    assert tok.kind == TokenKind.FLOAT
    assert tok.text == "7."


def test_identifier_stops_at_digit() -> None:
    tokens = tokenize("abc1")
    assert tokens == [
        Token(TokenKind.IDENTIFIER, "abc", 1, 1),
        Token(TokenKind.INT, "1", 1, 4),
    ]


def test_identifier_stops_at_equals() -> None:
    assert kinds("a=1") == [TokenKind.IDENTIFIER, TokenKind.EQUALS, TokenKind.INT]


def test_unicode_letters_are_identifiers() -> None:
    tok = tokenize("größe")[0]
    assert tok.kind == TokenKind.IDENTIFIER
    assert tok.text == "größe"


def test_underscore_is_rejected() -> None:
    with pytest.raises(LexError, match="unexpected character '_'") as excinfo:
        tokenize("snake_case = 1")
    assert (excinfo.value.line, excinfo.value.column) == (1, 6)


def test_newline_token_location() -> None:
    tokens = tokenize("a\nb")
    assert tokens[1] == Token(TokenKind.NEWLINE, "\n", 1, 2)
    assert tokens[2] == Token(TokenKind.IDENTIFIER, "b", 2, 1)


def test_line_and_column_tracking() -> None:
    tokens = tokenize('label = "hi there"\n  count = 10')
    assert tokens[2].location == (1, 9)
    assert tokens[3].kind == TokenKind.NEWLINE
    assert tokens[4].location == (2, 3)
    assert tokens[6].location == (2, 11)


def test_columns_after_long_tokens() -> None:
    tokens = tokenize("alpha=12345,\"xyz\"}")
    assert [t.col for t in tokens] == [1, 6, 7, 12, 13, 18]


def test_whitespace_is_skipped() -> None:
    assert kinds(" \t a \r = \t1  ") == [
        TokenKind.IDENTIFIER,
        TokenKind.EQUALS,
        TokenKind.INT,
    ]


def test_crlf_produces_one_newline() -> None:
    assert kinds("a = 1\r\nb = 2") == [
        TokenKind.IDENTIFIER,
        TokenKind.EQUALS,
        TokenKind.INT,
        TokenKind.NEWLINE,
        TokenKind.IDENTIFIER,
        TokenKind.EQUALS,
        TokenKind.INT,
    ]


def test_empty_input() -> None:
    assert tokenize("") == []


def test_double_period_reports_second_period() -> None:
    with pytest.raises(LexError, match="double period") as excinfo:
        tokenize("a = 1.2.3")
    err = excinfo.value
    assert (err.line, err.column) == (1, 8)
    assert err.literal_start == (1, 5)


def test_adjacent_periods() -> None:
    with pytest.raises(LexError) as excinfo:
        tokenize("123..456")
    assert excinfo.value.column == 5


def test_newline_in_string_raises() -> None:
    with pytest.raises(LexError, match="un-allowed newline") as excinfo:
        tokenize('x = "abc\ndef"')
    assert (excinfo.value.line, excinfo.value.column) == (1, 5)


def test_unclosed_string_raises() -> None:
    with pytest.raises(LexError, match="unterminated string") as excinfo:
        tokenize('\n"abc')
    assert (excinfo.value.line, excinfo.value.column) == (2, 1)


def test_unexpected_character() -> None:
    with pytest.raises(LexError) as excinfo:
        tokenize("a = 1\nb = -2")
    err = excinfo.value
    assert err.message == "unexpected character '-'"
    assert (err.line, err.column) == (2, 5)
    assert str(err) == "unexpected character '-' at 2:5"


def test_comments_are_not_supported() -> None:
    with pytest.raises(LexError, match="'#'"):
        tokenize("# comment")


def test_lex_error_is_syntax_error() -> None:
    with pytest.raises(SyntaxError):
        tokenize("@")


def test_next_token_returns_none_at_eof() -> None:
    lexer = Lexer(CharacterStream("  "))
    assert lexer.next_token() is None


def test_character_stream_methods() -> None:
    stream = CharacterStream("a\nb")
    assert stream.peek() == "a"
    assert stream.next() == "a"
    assert (stream.line, stream.column) == (1, 2)
    assert stream.next() == "\n"
    assert (stream.line, stream.column) == (2, 1)
    assert stream.peek(1) == ""
    stream.next()
    assert stream.end_of_file()


def test_character_stream_next_past_eof_raises() -> None:
    with pytest.raises(LexError, match="unexpected end of input"):
        CharacterStream("").next()


def test_token_repr_and_eq() -> None:
    t1 = Token(TokenKind.INT, "42", 1, 2)
    t2 = Token(TokenKind.INT, "42", 1, 2)
    t3 = Token(TokenKind.FLOAT, "42", 1, 2)

    assert repr(t1) == "Token(INT, '42', 1:2)"
    assert t1 == t2
    assert t1 != t3
    assert t1 != "42"
    assert len({t1, t2, t3}) == 2


@given(st.text(max_size=100))  # type: ignore[misc]
def test_lexer_raises_only_lex_errors(text: str) -> None:
    try:
        tokens = tokenize(text)
    except LexError:
        return
    assert all(tok.line >= 1 and tok.col >= 1 for tok in tokens)


@given(
    st.lists(
        st.one_of(
            st.from_regex(r"[a-zA-Z]{1,8}", fullmatch=True),
            st.from_regex(r"[0-9]{1,6}(\.[0-9]{0,4})?", fullmatch=True),
            st.sampled_from(["{", "}", "[", "]", ",", "="]),
        ),
        max_size=20,
    )
)  # type: ignore[misc]
def test_space_separated_lexemes_round_trip(lexemes: list[str]) -> None:
    tokens = tokenize(" ".join(lexemes))
    assert [tok.text for tok in tokens] == lexemes
