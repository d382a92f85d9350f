import pytest

from weilang.token import Position, Token, TokenType, lookup_ident


@pytest.mark.parametrize(
    "word, expected",
    [
        ("class", TokenType.CLASS),
        ("fn", TokenType.FUNCTION),
        ("var", TokenType.VAR),
        ("con", TokenType.CON),
        ("true", TokenType.TRUE),
        ("false", TokenType.FALSE),
        ("if", TokenType.IF),
        ("else", TokenType.ELSE),
        ("return", TokenType.RETURN),
        ("null", TokenType.NULL),
        ("while", TokenType.WHILE),
        ("continue", TokenType.CONTINUE),
        ("break", TokenType.BREAK),
        ("not", TokenType.NOT),
        ("and", TokenType.AND),
        ("or", TokenType.OR),
        ("for", TokenType.FOR),
        ("in", TokenType.IN),
        ("wei", TokenType.WEI),
    ],
)
def test_keywords_are_recognised(word, expected):
    assert lookup_ident(word) is expected


@pytest.mark.parametrize("word", ["foobar", "x", "function", "Fn", "export", "import"])
def test_non_keywords_are_identifiers(word):
    assert lookup_ident(word) is TokenType.IDENT


def test_token_type_string_is_its_value():
    assert str(lookup_ident("fn")) == "FUNCTION"
    assert str(lookup_ident("var")) == "var"
    assert f"{lookup_ident('foobar')}" == "IDENT"
    tok = Token(TokenType.SEMICOLON, ";")
    assert str(tok.type) == "SEMICOLON"


def test_position_zero():
    assert Position().is_zero()
    assert Position(0, 0).is_zero()
    assert not Position(1, 0).is_zero()
    assert not Position(0, 3).is_zero()


def test_position_equality():
    assert Position(2, 5) == Position(2, 5)
    assert not (Position(2, 5) == Position(5, 2))


def test_token_type_checks():
    tok = Token(TokenType.IDENT, "foobar", Position(0, 0), Position(0, 6))
    assert tok.type_is(TokenType.IDENT)
    assert not tok.type_is(TokenType.INT)
    assert tok.type_in(TokenType.INT, TokenType.IDENT)
    assert not tok.type_in(TokenType.INT, TokenType.STRING)
    assert not tok.type_in()


def test_token_literal_check():
    tok = Token(TokenType.IDENT, "export")
    assert tok.literal_is("export")
    assert not tok.literal_is("import")
    assert tok.start.is_zero() and tok.end.is_zero()