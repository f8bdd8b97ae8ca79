"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer, a small frozen `Token` dataclass that pairs a token type with the
exact lexeme it was matched from, and `lookup_ident()` which resolves a run
of letters to either a keyword kind or a plain identifier. Tokens are the
atomic units produced by the lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum
from dataclasses import dataclass
from typing import Dict


class TokenType(Enum):
    # Special
    ILLEGAL = "Illegal"
    EOF = "Eof"

    # Identifiers and literals
    IDENTIFIER = "Identifier"
    INTEGER = "Integer"

    # Operators
    ASSIGN = "Assign"
    PLUS = "Plus"
    MINUS = "Minus"
    BANG = "Bang"
    ASTERISK = "Asterisk"
    SLASH = "Slash"

    # Comparison operators
    LT = "Lt"
    GT = "Gt"
    EQ = "Eq"
    NOT_EQ = "NotEq"

    # Delimiters
    COMMA = "Comma"
    SEMICOLON = "Semicolon"
    LPAREN = "LParen"
    RPAREN = "RParen"
    LBRACE = "LBrace"
    RBRACE = "RBrace"

    # Keywords
    FUNCTION = "Function"
    LET = "Let"
    TRUE = "True"
    FALSE = "False"
    IF = "If"
    ELSE = "Else"
    RETURN = "Return"

    def __str__(self) -> str:
        return self.value


KEYWORDS: Dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}


def lookup_ident(ident: str) -> TokenType:
    """Map a letter run to its keyword token type, or IDENTIFIER."""
    return KEYWORDS.get(ident, TokenType.IDENTIFIER)


@dataclass(frozen=True)
class Token:
    type: TokenType
    literal: str

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.literal)})"
