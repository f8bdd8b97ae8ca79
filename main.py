from __future__ import annotations
from typing import List, Optional, TextIO, Tuple
import json
import sys
from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser
from pretty_printer import PrettyPrinter
from ast_json import program_to_json
from ast_viz import write_and_render

PROMPT = ">>"


def lex(text: str) -> List[Token]:
    """Tokenize input string (EOF is not included)."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_text(text: str) -> Tuple[ProgramNode, List[str]]:
    """Parse source text into a program and its diagnostics."""
    parser = Parser(Lexer(text))
    return parser.parse_program()


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> None:
    """Process a single program: lex, parse and optionally print/export stages.

    Flags control which parts are printed; parser diagnostics are always
    printed.
    """
    try:
        if print_tokens:
            tokens = lex(text)
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens[:50]):
                print(f"  {i:3}: {token}")
            if len(tokens) > 50:
                print(f"  ... and {len(tokens) - 50} more")

        program, errors = parse_text(text)
        if print_ast:
            print("\nAST:")
            print(PrettyPrinter.print_ast(program))

        if errors:
            print(f"\n✗ {len(errors)} parser error(s):")
            for err in errors:
                print(f"Parser error: {err}")
        elif print_ast:
            print("\n✓ Parse completed without errors")

        if dump_ast_path:
            try:
                with open(dump_ast_path, "w", encoding="utf-8") as fh:
                    json.dump(program_to_json(program, errors), fh, indent=2)
                print(f"Wrote AST JSON to {dump_ast_path}")
            except OSError as e:
                print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

        if viz_path:
            try:
                write_and_render(program, viz_path, errors=errors, fmt=viz_format)
                print(f"Wrote AST visualization to {viz_path}.{viz_format}")
            except Exception as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}")

    except Exception as e:
        print(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()


def start_repl(in_stream: TextIO, out_stream: TextIO, prompt: str = PROMPT) -> None:
    """Read lines from `in_stream` and write the tokens of each one to `out_stream`.

    A fresh lexer is built for every line. The loop ends at end of input.
    """
    while True:
        out_stream.write(f"{prompt} ")
        out_stream.flush()

        line = in_stream.readline()
        if not line:
            break

        for token in Lexer(line):
            out_stream.write(f"{token!r}\n")

        out_stream.flush()


def interactive_mode() -> None:
    """Run the token REPL on stdin/stdout."""
    print("Welcome to the monkeyball programming language!")
    print("Feel free to type in commands...")

    try:
        start_repl(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        print("\n\nExiting...")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Lex and parse a monkeyball file, or tokenize stdin interactively"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive token REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.set_defaults(print_tokens=False, print_ast=True)
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write AST+errors JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    args = parser.parse_args()

    if args.interactive:
        interactive_mode()
    elif args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            sys.exit(1)

        process_program(
            text,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            dump_ast_path=args.dump_ast,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
        )
    else:
        parser.print_help()
