"""Token kinds, source positions and keyword lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TokenType(str, Enum):
    """Every kind of token the lexer can produce."""

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    IDENT = "IDENT"
    INT = "INT"
    STRING = "STRING"
    COMMENT = "comment"

    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    MODULO = "%"
    DOT = "."

    LESS_THAN = "<"
    LESS_EQUAL_THAN = "<="
    GREAT_THAN = ">"
    GREAT_EQUAL_THAN = ">="

    EQ = "=="
    NOT_EQ = "!="

    COMMA = ","
    SEMICOLON = "SEMICOLON"
    COLON = ":"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"

    LEFT_SHIFT = "<<"
    RIGHT_SHIFT = ">>"
    BITWISE_AND = "&"
    BITWISE_XOR = "^"
    BITWISE_OR = "|"
    BITWISE_NOT = "~"

    CLASS = "class"
    FUNCTION = "FUNCTION"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"
    VAR = "var"
    CON = "con"
    NULL = "null"
    WHILE = "while"
    CONTINUE = "continue"
    BREAK = "break"
    NOT = "not"
    AND = "and"
    OR = "or"
    FOR = "for"
    IN = "in"
    WEI = "wei"

    # Keeps one statement per line.
    NEWLINE = "newline"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Position:
    """A zero-based line and column in the source text."""

    line: int = 0
    column: int = 0

    def is_zero(self) -> bool:
        return self.line == 0 and self.column == 0


@dataclass
class Token:
    """A single lexical token with its span in the source."""

    type: TokenType
    literal: str
    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    def type_is(self, token_type: TokenType) -> bool:
        return self.type == token_type

    def type_in(self, *args: TokenType) -> bool:
        return any(self.type == token_type for token_type in args)

    def literal_is(self, literal: str) -> bool:
        return self.literal == literal


_KEYWORDS: dict[str, TokenType] = {
    "class": TokenType.CLASS,
    "fn": TokenType.FUNCTION,
    "var": TokenType.VAR,
    "con": TokenType.CON,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "null": TokenType.NULL,
    "while": TokenType.WHILE,
    "continue": TokenType.CONTINUE,
    "break": TokenType.BREAK,
    "not": TokenType.NOT,
    "and": TokenType.AND,
    "or": TokenType.OR,
    "for": TokenType.FOR,
    "in": TokenType.IN,
    "wei": TokenType.WEI,
}


def lookup_ident(ident: str) -> TokenType:
    """Return the keyword token type for ``ident``, or IDENT if it is not one."""
    return _KEYWORDS.get(ident, TokenType.IDENT)