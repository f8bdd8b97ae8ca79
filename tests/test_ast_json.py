import json

import pytest

from ast_json import ast_to_json, program_to_json
from ast_nodes import ASTNode, NodeType
from tests.utils import parse_text


def test_ast_to_json_shape():
    program, _ = parse_text("let x = 1; return 2;")
    assert ast_to_json(program) == {
        "node_type": "Program",
        "statements": [
            {
                "node_type": "LetStatement",
                "name": {"node_type": "Identifier", "value": "x"},
            },
            {"node_type": "ReturnStatement"},
        ],
    }
    assert ast_to_json(None) is None


def test_program_to_json_includes_errors_and_serializes():
    program, errors = parse_text("let 5; let y = 2;")
    data = program_to_json(program, errors)
    assert data["errors"] == ["expected next token to be Identifier, got Integer instead"]
    assert len(data["program"]["statements"]) == 1
    assert json.loads(json.dumps(data)) == data


def test_unknown_node_is_rejected():
    with pytest.raises(TypeError):
        ast_to_json(ASTNode(type=NodeType.PROGRAM))
