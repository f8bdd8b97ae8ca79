"""
Parser for the monkeyball language.

Overview and approach:
- This is a small, hand-written recursive-descent parser over the token
    stream of a `Lexer`. It keeps a two-token window: `current_token` and
    `peek_token`. Advancing copies the peek token into the current slot and
    pulls a fresh peek token from the lexer.
- Only top-level `let` and `return` statements are recognized. Expression
    parsing is not implemented: the right-hand side of a `let` and the value
    of a `return` are read and thrown away up to the terminating `;`.

Error handling:
- Malformed input never raises. When `expect_peek()` sees the wrong token
    kind it records a diagnostic of the form
    "expected next token to be <kind>, got <kind> instead" and the statement
    is abandoned without advancing. The main loop then advances by exactly
    one token, so at most one token is dropped per failed statement and one
    malformed line can produce several diagnostics.
- Top-level tokens that start neither a `let` nor a `return` are skipped
    silently, without a diagnostic.

Examples:
    program, errors = Parser(Lexer("let x = 5;")).parse_program()
    # program.statements == [LetStatementNode(name=IdentifierNode(value="x"))]
    # errors == []

Notes:
- `parse_program()` consumes the parser: the lexer cannot be rewound, so a
    second call raises `RuntimeError`.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
from tokens import Token, TokenType
from lexer import Lexer
from ast_nodes import (
    IdentifierNode,
    LetStatementNode,
    ProgramNode,
    ReturnStatementNode,
    Statement,
)


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self._errors: List[str] = []
        self._consumed = False

        self.current_token: Token = lexer.next_token()
        self.peek_token: Token = lexer.next_token()

    @property
    def errors(self) -> List[str]:
        """Diagnostics collected so far, in the order they were recorded."""
        return list(self._errors)

    def next_token(self) -> None:
        """Move to next token."""
        self.current_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def current_token_is(self, token_type: TokenType) -> bool:
        return self.current_token.type == token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def peek_error(self, expected_type: TokenType) -> None:
        self._errors.append(
            f"expected next token to be {expected_type}, "
            f"got {self.peek_token.type} instead"
        )

    def expect_peek(self, expected_type: TokenType) -> bool:
        """Advance if the peek token has the expected type, else record an error."""
        if self.peek_token_is(expected_type):
            self.next_token()
            return True

        self.peek_error(expected_type)
        return False

    def skip_to_semicolon(self) -> None:
        """Discard tokens until the current token is `;`.

        Stops at EOF as well so an unterminated statement cannot loop forever.
        """
        while self.current_token.type not in (TokenType.SEMICOLON, TokenType.EOF):
            self.next_token()

    def parse_let_statement(self) -> Optional[LetStatementNode]:
        """Parse `let <identifier> = ...;`."""
        if not self.expect_peek(TokenType.IDENTIFIER):
            return None

        name = IdentifierNode(value=self.current_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        # TODO: parse the bound expression once expression nodes exist.
        self.skip_to_semicolon()

        return LetStatementNode(name=name)

    def parse_return_statement(self) -> ReturnStatementNode:
        """Parse `return ...;`."""
        self.next_token()

        # TODO: parse the return value once expression nodes exist.
        self.skip_to_semicolon()

        return ReturnStatementNode()

    def parse_statement(self) -> Optional[Statement]:
        match self.current_token.type:
            case TokenType.LET:
                return self.parse_let_statement()
            case TokenType.RETURN:
                return self.parse_return_statement()
            case _:
                return None

    def parse_program(self) -> Tuple[ProgramNode, List[str]]:
        """Parse the whole token stream into a program and its diagnostics."""
        if self._consumed:
            raise RuntimeError("parse_program() has already been called on this parser")
        self._consumed = True

        program = ProgramNode()

        while not self.current_token_is(TokenType.EOF):
            statement = self.parse_statement()
            if statement is not None:
                program.add_statement(statement)

            self.next_token()

        return program, list(self._errors)
