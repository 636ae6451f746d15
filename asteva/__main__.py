"""CLI entry point for the Asteva interpreter.

Usage:
    python -m asteva [-v|-vv|-vvv|-vvvv] <program_file>
    python -m asteva [-v...] --emit-ast <program_file>
    python -m asteva [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given program and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. Errors are reported on stderr as
`<kind>: <message>` and the process exits with status 1.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .ast_json import ast_to_obj, ast_from_obj
from .errors import AstevaError
from .interpreter import Interpreter, interpret
from .parser import parse_program


def read_file(path_arg: str) -> Optional[str]:
    path = Path(path_arg)
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        return None
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(prog='asteva', description="Asteva language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PROGRAM_FILE', help='emit AST JSON for the given program file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='program file to execute')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        source = read_file(args.emit_ast)
        if source is None:
            return 1
        try:
            ast_program = parse_program(source)
        except AstevaError as e:
            print(f"{e.kind}: {e.message}", file=sys.stderr)
            return 1
        program_file = Path(args.emit_ast)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(ast_to_obj(ast_program), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return 0

    # Execute from AST JSON
    if args.ast:
        text = read_file(args.ast)
        if text is None:
            return 1
        try:
            ast_program = ast_from_obj(json.loads(text))
            Interpreter(debug_level=args.v).run(ast_program)
        except json.JSONDecodeError as e:
            print(f"ParseError: invalid AST JSON: {e}", file=sys.stderr)
            return 1
        except AstevaError as e:
            print(f"{e.kind}: {e.message}", file=sys.stderr)
            return 1
        return 0

    # Default: execute source file
    if not args.program:
        parser.error('missing program file; or use --emit-ast/--ast')
    source = read_file(args.program)
    if source is None:
        return 1
    outcome = interpret(source, debug_level=args.v)
    if not outcome.ok:
        print(f"{outcome.error.name}: {outcome.error.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
