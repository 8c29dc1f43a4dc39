from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .api import RunOptions, run_string
from .errors import InterpreterError, LexicalRejection
from .lexer import detokenize
from .render import render_tape


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bfrw",
        description="Run a < > + - tape program and print the final tape.",
    )
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument("file", nargs="?", help="Program file (default: stdin)")
    source_group.add_argument("-e", "--expr", help="Program text given on the command line")
    parser.add_argument("--markers", action="store_true", help="Show cells as bracketed markers instead of integers")
    parser.add_argument("--max-steps", type=int, default=None, help="Abort after this many instructions")
    parser.add_argument("--trace", action="store_true", help="Print one line per executed instruction to stderr")
    args = parser.parse_args(argv)

    if args.expr is not None:
        source = args.expr
    elif args.file:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                source = f.read()
        except FileNotFoundError:
            print(f"Couldn't find file: {args.file}", file=sys.stderr)
            return 1
    else:
        source = sys.stdin.read()

    try:
        options = RunOptions(
            display='markers' if args.markers else 'int',
            max_steps=args.max_steps,
            trace=args.trace,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        result = run_string(source, options=options)
    except LexicalRejection as e:
        print(e, file=sys.stderr)
        return 1
    except InterpreterError as e:
        print(e, file=sys.stderr)
        print(f"Remaining program: {detokenize(e.remaining)}", file=sys.stderr)
        if e.tape is not None:
            print("Last tape:", file=sys.stderr)
            sys.stderr.write(render_tape(e.tape, options.display))
        return 1

    for line in result.trace:
        print(line, file=sys.stderr)
    sys.stdout.write(result.text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
