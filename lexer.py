"""
Lexer for the monkeyball language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`, one token per call to `next_token()`.
- It recognizes keywords (`fn`, `let`, `true`, `false`, `if`, `else`,
    `return`), identifiers, integer literals, the two-character operators
    `==` and `!=`, single-character operators and delimiters, and skips
    whitespace (space, tab, carriage return, newline).

Examples:
    Input:  "let five = 5;"
    Tokens: [Let('let'), Identifier('five'), Assign('='), Integer('5'), Semicolon(';')]

Implementation notes:
- The scanner keeps `position` (start of the current character),
    `read_position` (next unread character) and `ch` (the character at
    `position`). Past the end of the input `ch` is the NUL sentinel, which is
    what produces the `Eof` token, so `next_token()` keeps returning `Eof`
    once the input is exhausted.
- Only one character of lookahead (`peek_char`) is ever needed, for `==`
    and `!=`. Identifiers and integers are scanned with maximal munch.
- Unrecognized characters are not errors: they come out as `Illegal` tokens
    and flow on to the parser like any other token.
"""

from __future__ import annotations
from typing import Iterator, List
from tokens import Token, TokenType, lookup_ident

NUL = "\0"
WHITESPACE = (" ", "\t", "\n", "\r")


def is_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.position = 0
        self.read_position = 0
        self.ch = NUL
        self.read_char()

    def read_char(self) -> None:
        """Advance to next character."""
        if self.read_position >= len(self.text):
            self.ch = NUL
        else:
            self.ch = self.text[self.read_position]

        self.position = self.read_position
        self.read_position += 1

    def peek_char(self) -> str:
        """Look at next character without consuming it."""
        if self.read_position >= len(self.text):
            return NUL
        return self.text[self.read_position]

    def skip_whitespace(self) -> None:
        while self.ch in WHITESPACE:
            self.read_char()

    def read_identifier(self) -> str:
        start = self.position
        while is_letter(self.ch):
            self.read_char()
        return self.text[start : self.position]

    def read_number(self) -> str:
        start = self.position
        while is_digit(self.ch):
            self.read_char()
        return self.text[start : self.position]

    def next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        self.skip_whitespace()

        # Two-character operators look one character ahead so `==` is not
        # lexed as `=` `=`.
        match self.ch:
            case "=":
                if self.peek_char() == "=":
                    self.read_char()
                    token = Token(TokenType.EQ, "==")
                else:
                    token = Token(TokenType.ASSIGN, "=")
            case "!":
                if self.peek_char() == "=":
                    self.read_char()
                    token = Token(TokenType.NOT_EQ, "!=")
                else:
                    token = Token(TokenType.BANG, "!")
            case "+":
                token = Token(TokenType.PLUS, self.ch)
            case "-":
                token = Token(TokenType.MINUS, self.ch)
            case "/":
                token = Token(TokenType.SLASH, self.ch)
            case "*":
                token = Token(TokenType.ASTERISK, self.ch)
            case "<":
                token = Token(TokenType.LT, self.ch)
            case ">":
                token = Token(TokenType.GT, self.ch)
            case ";":
                token = Token(TokenType.SEMICOLON, self.ch)
            case "(":
                token = Token(TokenType.LPAREN, self.ch)
            case ")":
                token = Token(TokenType.RPAREN, self.ch)
            case ",":
                token = Token(TokenType.COMMA, self.ch)
            case "{":
                token = Token(TokenType.LBRACE, self.ch)
            case "}":
                token = Token(TokenType.RBRACE, self.ch)
            case "\0":
                # The sentinel is never consumed, so EOF repeats.
                return Token(TokenType.EOF, NUL)
            case _:
                # Identifier/number scanning already leaves `ch` on the first
                # character after the run, so return without advancing.
                if is_letter(self.ch):
                    ident = self.read_identifier()
                    return Token(lookup_ident(ident), ident)
                if is_digit(self.ch):
                    return Token(TokenType.INTEGER, self.read_number())
                token = Token(TokenType.ILLEGAL, self.ch)

        self.read_char()
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, EOF."""
        while True:
            token = self.next_token()
            if token.type == TokenType.EOF:
                return
            yield token

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string (without the EOF token)."""
        return list(self)
