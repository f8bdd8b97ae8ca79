"""Graphviz visualization helpers for parsed programs.

Provides `render_ast_dot(program, errors=None)` which returns a
`graphviz.Digraph` object (not rendered). `write_and_render` writes and
renders the file to disk.

Layout: the program is the root node, each statement hangs off it in source
order, and a `let` statement links to its bound identifier. Diagnostics, if
given, are listed in a separate note node so a partial parse can be read
together with what went wrong.
"""

from typing import List, Optional
import html
from graphviz import Digraph
from ast_nodes import *


def _label(text: str, detail: Optional[str] = None) -> str:
    escaped = html.escape(text)
    if detail is None:
        return f"<{escaped}>"
    return f'<{escaped}<BR/><FONT POINT-SIZE="8">{html.escape(detail)}</FONT>>'


def render_ast_dot(program: ProgramNode, errors: Optional[List[str]] = None) -> Digraph:
    """Return a graphviz.Digraph for the given program.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontname="Helvetica")

    dot.node("program", label=_label("Program", f"{len(program.statements)} statements"))

    for i, stmt in enumerate(program.statements):
        stmt_id = f"stmt_{i}"
        match stmt:
            case LetStatementNode(name=name):
                dot.node(stmt_id, label=_label("LetStatement"))
                ident_id = f"{stmt_id}_name"
                dot.node(ident_id, label=_label("Identifier", name.value), shape="ellipse")
                dot.edge(stmt_id, ident_id, label="name")
            case ReturnStatementNode():
                dot.node(stmt_id, label=_label("ReturnStatement"))
            case _:
                raise TypeError(f"Unexpected statement node: {stmt!r}")
        dot.edge("program", stmt_id, label=f"stmt[{i}]")

    if errors:
        rows = "".join(
            f'<TR><TD ALIGN="LEFT">{html.escape(e)}</TD></TR>' for e in errors
        )
        table_html = (
            '<<TABLE BORDER="0" CELLBORDER="1" CELLSPACING="0" BGCOLOR="#ffefef">'
            f"<TR><TD><B>errors</B></TD></TR>{rows}</TABLE>>"
        )
        dot.node("errors", label=table_html, shape="plaintext")

    return dot


def write_and_render(
    program: ProgramNode,
    out_path: str,
    errors: Optional[List[str]] = None,
    fmt: str = "svg",
) -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(program, 'out/ast', fmt='png') will create
    out/ast.png (requires Graphviz)."""
    dot = render_ast_dot(program, errors=errors)
    dot.format = fmt
    # render appends the extension itself
    dot.render(out_path, cleanup=True)
