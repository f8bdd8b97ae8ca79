"""AST node definitions for the monkeyball language.

This module defines the AST node dataclasses produced by the parser. The
`NodeType` enum identifies node kinds and is used by the pretty-printer, the
JSON exporter and the Graphviz renderer.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`).
- `Statement` is the closed set of top-level statement nodes. Code that
    consumes statements matches on the concrete classes and treats anything
    else as an internal error.
- Expressions are not parsed yet: a `let` statement only records the bound
    name and a `return` statement records nothing.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Union


class NodeType(Enum):
    IDENTIFIER = auto()
    LET_STMT = auto()
    RETURN_STMT = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType


# Expression Nodes
@dataclass
class IdentifierNode(ASTNode):
    type: NodeType = NodeType.IDENTIFIER
    value: str = ""


# Statement Nodes
@dataclass
class LetStatementNode(ASTNode):
    type: NodeType = NodeType.LET_STMT
    name: IdentifierNode = field(default_factory=IdentifierNode)


@dataclass
class ReturnStatementNode(ASTNode):
    type: NodeType = NodeType.RETURN_STMT


Statement = Union[LetStatementNode, ReturnStatementNode]


# Program Node
@dataclass
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: List[Statement] = field(default_factory=list)

    def add_statement(self, statement: Statement) -> None:
        self.statements.append(statement)
