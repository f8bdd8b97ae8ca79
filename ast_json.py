"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node, and `program_to_json`
which bundles a parsed program with its diagnostics.
"""

from typing import Any, Dict, List, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    if isinstance(node, IdentifierNode):
        return {"node_type": "Identifier", "value": node.value}
    if isinstance(node, LetStatementNode):
        return {"node_type": "LetStatement", "name": ast_to_json(node.name)}
    if isinstance(node, ReturnStatementNode):
        return {"node_type": "ReturnStatement"}
    if isinstance(node, ProgramNode):
        return {
            "node_type": "Program",
            "statements": [ast_to_json(s) for s in node.statements],
        }

    raise TypeError(f"Cannot serialize AST node of type {type(node).__name__}")


def program_to_json(program: ProgramNode, errors: List[str]) -> Dict[str, Any]:
    return {"program": ast_to_json(program), "errors": list(errors)}
