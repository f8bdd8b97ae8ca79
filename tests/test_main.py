import io

from main import lex, parse_text, process_program, start_repl
from tokens import TokenType


def test_lex_excludes_eof():
    tokens = lex("let x = 5;")
    assert [t.type for t in tokens] == [
        TokenType.LET,
        TokenType.IDENTIFIER,
        TokenType.ASSIGN,
        TokenType.INTEGER,
        TokenType.SEMICOLON,
    ]


def test_parse_text_returns_program_and_errors():
    program, errors = parse_text("let x = 5; let 6;")
    assert [s.name.value for s in program.statements] == ["x"]
    assert errors == ["expected next token to be Identifier, got Integer instead"]


def test_repl_prints_tokens_per_line():
    stdin = io.StringIO("let x = 5;\n==\n")
    stdout = io.StringIO()
    start_repl(stdin, stdout)

    out = stdout.getvalue()
    assert out == (
        ">> "
        "Token(Let, 'let')\n"
        "Token(Identifier, 'x')\n"
        "Token(Assign, '=')\n"
        "Token(Integer, '5')\n"
        "Token(Semicolon, ';')\n"
        ">> "
        "Token(Eq, '==')\n"
        ">> "
    )
    assert "Eof" not in out


def test_process_program_prints_ast_and_errors(capsys):
    process_program("let x = 1; let = 2;", print_tokens=True)
    out = capsys.readouterr().out
    assert "Tokens (9):" in out
    assert "Identifier(x)" in out
    assert "Parser error: expected next token to be Identifier, got Assign instead" in out


def test_process_program_dumps_json(tmp_path, capsys):
    path = tmp_path / "ast.json"
    process_program("return 1;", print_ast=False, dump_ast_path=str(path))
    assert path.read_text(encoding="utf-8").count("ReturnStatement") == 1
    assert f"Wrote AST JSON to {path}" in capsys.readouterr().out
