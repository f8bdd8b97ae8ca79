"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders a single node as one line of source-like text. Both are meant
for debugging, tests and the command-line driver rather than for producing
final source code.

Examples:
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from typing import Optional
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: Optional[ASTNode], indent: int = 0, prefix: str = "") -> str:
        """Pretty print an AST node and its children as an indented tree."""
        if node is None:
            return ""

        indent_str = " " * indent
        lines = []

        match node:
            case IdentifierNode(value=v):
                lines.append(f"{indent_str}{prefix}Identifier({v})")

            case LetStatementNode(name=name):
                lines.append(f"{indent_str}{prefix}LetStatement")
                lines.append(PrettyPrinter.print_ast(name, indent + 2, "name: "))

            case ReturnStatementNode():
                lines.append(f"{indent_str}{prefix}ReturnStatement")

            case ProgramNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: Optional[ASTNode]) -> str:
        """Return a compact, surface-syntax-like one-line representation of an AST node.

        Discarded expressions are shown as `...` since the parser does not
        keep them.
        """
        if node is None:
            return ""

        match node:
            case IdentifierNode(value=v):
                return v
            case LetStatementNode(name=name):
                return f"let {name.value} = ...;"
            case ReturnStatementNode():
                return "return ...;"
            case ProgramNode(statements=stmts):
                return " ".join(PrettyPrinter.print_surface(s) for s in stmts)
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
