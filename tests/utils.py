from lexer import Lexer
from parser import Parser


def lex(text: str):
    """Return a list of tokens for the given source text (no EOF)."""
    return Lexer(text).tokenize()


def parse_text(text: str):
    """Convenience: lex+parse a source text into (program, errors)."""
    return Parser(Lexer(text)).parse_program()
