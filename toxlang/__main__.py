"""CLI entry point for the Tox interpreter.

Usage:
    python -m toxlang [-v|-vv|-vvv] [program_file]
    python -m toxlang [-v...] --emit-ast <program_file>
    python -m toxlang [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given .tox file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a program file an interactive prompt is started. Debug information
is written to `debug.txt` in the current directory when verbosity is
greater than zero.
"""

import argparse
import builtins
import json
import sys
from pathlib import Path

from .ast_json import ast_to_obj, program_from_obj
from .diagnostics import ErrorReporter
from .interpreter import Interpreter, parse_program

EXIT_SYNTAX_ERROR = 65
EXIT_RUNTIME_ERROR = 70


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def load_ast(path: Path) -> list:
    try:
        return program_from_obj(json.loads(read_source(path)))
    except (ValueError, KeyError, TypeError) as e:
        print(f"Error: invalid AST file {path}: {e}", file=sys.stderr)
        sys.exit(1)


def run_file(path: Path, debug_level: int) -> None:
    reporter = ErrorReporter()
    statements = parse_program(read_source(path), reporter)
    if reporter.had_error:
        sys.exit(EXIT_SYNTAX_ERROR)
    interpreter = Interpreter(reporter=reporter, debug_level=debug_level)
    try:
        interpreter.interpret(statements)
    finally:
        interpreter.close()
    if reporter.had_runtime_error:
        sys.exit(EXIT_RUNTIME_ERROR)


def run_prompt(debug_level: int) -> None:
    reporter = ErrorReporter()
    interpreter = Interpreter(reporter=reporter, debug_level=debug_level)
    print("To exit type 'exit'")
    try:
        while True:
            try:
                line = builtins.input('> ')
            except EOFError:
                break
            if line.strip() == 'exit':
                break
            reporter.reset()
            statements = parse_program(line, reporter)
            if reporter.had_error:
                continue
            interpreter.interpret(statements)
    finally:
        interpreter.close()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Tox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='TOX_FILE', help='emit AST JSON for the given .tox file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Tox program file (.tox) to execute')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        reporter = ErrorReporter()
        statements = parse_program(read_source(program_file), reporter)
        if reporter.had_error:
            sys.exit(EXIT_SYNTAX_ERROR)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(ast_to_obj(statements), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        statements = load_ast(Path(args.ast))
        reporter = ErrorReporter()
        interpreter = Interpreter(reporter=reporter, debug_level=args.v)
        try:
            interpreter.interpret(statements)
        finally:
            interpreter.close()
        if reporter.had_runtime_error:
            sys.exit(EXIT_RUNTIME_ERROR)
        return

    if args.program:
        run_file(Path(args.program), args.v)
    else:
        run_prompt(args.v)


if __name__ == '__main__':
    main()
