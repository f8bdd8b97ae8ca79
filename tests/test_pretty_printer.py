from pretty_printer import PrettyPrinter
from tests.utils import parse_text


def test_print_ast_lists_statements_in_order():
    program, _ = parse_text("let x = 5; return x; let y = 1;")
    s = PrettyPrinter.print_ast(program)
    assert s.splitlines() == [
        "Program",
        "    stmt[0]: LetStatement",
        "      name: Identifier(x)",
        "    stmt[1]: ReturnStatement",
        "    stmt[2]: LetStatement",
        "      name: Identifier(y)",
    ]


def test_print_ast_empty_program_and_none():
    program, _ = parse_text("")
    assert PrettyPrinter.print_ast(program) == "Program"
    assert PrettyPrinter.print_ast(None) == ""


def test_print_surface():
    program, _ = parse_text("let answer = 6 * 7; return answer;")
    let_stmt, ret_stmt = program.statements
    assert PrettyPrinter.print_surface(let_stmt) == "let answer = ...;"
    assert PrettyPrinter.print_surface(ret_stmt) == "return ...;"
    assert PrettyPrinter.print_surface(let_stmt.name) == "answer"
    assert PrettyPrinter.print_surface(program) == "let answer = ...; return ...;"
