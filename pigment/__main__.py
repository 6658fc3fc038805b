"""CLI entry point for the Pigment interpreter.

Usage:
    python -m pigment [-v|-vv] <script_file>
    python -m pigment --ast <script_file>
    python -m pigment --canvas 80x24 <script_file>
    python -m pigment --value <script_file>
    echo '(paint 1 2 255 0 0)' | python -m pigment -

Options:
  -v            Increase log verbosity (can be repeated)
  --ast         Print the parsed program instead of running it
  --max-steps   Stop after this many loop iterations and calls
  --timeout     Stop after this many seconds
  --canvas WxH  Apply the commands to a canvas and report how many landed
  --value       Print the value of the last top-level form after the commands

Each paint command is printed as `paint x y r g b`. Errors go to stderr and
the exit status is 1; commands painted before the error are still printed.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from pigment.config import get_limits
from pigment.debug_utils.pprint import format_value, pprint_program
from pigment.host import Canvas, run_script
from pigment.reader.lexer import Lexer
from pigment.reader.parser import Parser
from pigment.types.errors import PigmentError


def _canvas_size(text: str) -> tuple[int, int]:
    try:
        width, height = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"canvas size must be positive, got {text!r}")
    return width, height


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pigment", description="Pigment script interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase log verbosity (can be repeated)')
    parser.add_argument('--ast', action='store_true', help='print the parsed program and exit')
    parser.add_argument('--max-steps', type=int, default=None, help='loop iteration and call budget')
    parser.add_argument('--timeout', type=float, default=None, help='wall-clock budget in seconds')
    parser.add_argument('--canvas', type=_canvas_size, default=None, metavar='WxH',
                        help='apply the commands to a canvas of this size')
    parser.add_argument('--value', action='store_true', help='print the value of the last top-level form')
    parser.add_argument('script', help="script file to run, or '-' for stdin")
    args = parser.parse_args(argv)

    level = logging.WARNING if args.v == 0 else logging.INFO if args.v == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.script == '-':
        source = sys.stdin.read()
    else:
        script_file = Path(args.script)
        if not script_file.exists():
            print(f"Error: file {script_file} not found", file=sys.stderr)
            return 1
        source = script_file.read_text(encoding='utf-8')

    try:
        limits = get_limits()
    except PigmentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    overrides = {}
    if args.max_steps is not None:
        overrides['max_steps'] = args.max_steps
    if args.timeout is not None:
        overrides['timeout'] = args.timeout
    limits = dataclasses.replace(limits, **overrides)

    if args.ast:
        try:
            program = Parser(Lexer(source), max_nesting=limits.max_nesting).program()
        except PigmentError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(pprint_program(program, color=sys.stdout.isatty()))
        return 0

    result = run_script(source, limits)
    for command in result.commands:
        print(command)
    if args.canvas is not None:
        canvas = Canvas(*args.canvas)
        applied = canvas.apply(result.commands)
        print(f"{applied} of {len(result.commands)} commands landed on a {canvas.width}x{canvas.height} canvas")
    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1
    if args.value:
        print(format_value(result.value))
    return 0


if __name__ == '__main__':
    sys.exit(main())
