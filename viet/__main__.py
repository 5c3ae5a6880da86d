"""CLI entry point for the Viet interpreter.

Usage:
    python -m viet [-v|-vv|-vvv] [--bindings] <program_file>
    python -m viet [-v...] --emit-ast <program_file>
    python -m viet [-v...] [--bindings] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --bindings    After the output, print the final variable bindings
  --emit-ast    Parse the given .viet file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path
from .errors import VietError
from .interpreter import Interpreter, RunResult, run
from .parser import parse_program
from .ast_json import ast_to_obj, ast_from_obj
from .values import to_display


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def report(result: RunResult, show_bindings: bool) -> None:
    for line in result.output:
        print(line)
    if show_bindings:
        for name, value in result.bindings.items():
            print(f"{name} = {to_display(value)}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Viet language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--bindings', action='store_true', help='print final variable bindings after the output')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='VIET_FILE', help='emit AST JSON for the given .viet file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Viet program file (.viet) to execute')
    args = parser.parse_args(argv)

    try:
        # Emit AST mode
        if args.emit_ast:
            program_file = Path(args.emit_ast)
            ast_program = parse_program(read_source(program_file))
            obj = ast_to_obj(ast_program)
            out_path = program_file.with_name(program_file.name + '.ast.json')
            with open(out_path, 'w', encoding='utf-8') as out:
                json.dump(obj, out, ensure_ascii=False, indent=2)
            print(str(out_path))
            return

        # Execute from AST JSON
        if args.ast:
            ast_path = Path(args.ast)
            try:
                data = json.loads(read_source(ast_path))
                ast_program = ast_from_obj(data)
            except (ValueError, KeyError, TypeError) as e:
                # json.JSONDecodeError is a ValueError
                print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
                sys.exit(1)
            interpreter = Interpreter(debug_level=args.v)
            report(interpreter.interpret(ast_program), args.bindings)
            return

        # Default: execute source file
        if not args.program:
            parser.error('missing program file; or use --emit-ast/--ast')
        source = read_source(Path(args.program))
        report(run(source, debug_level=args.v), args.bindings)
    except VietError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
