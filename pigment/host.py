"""Host side of the scripting boundary.

The interpreter itself performs no I/O. A host hands it source text, gets a
sequence of PaintCommands back and draws them on its own surface. This
module provides that call sequence with the error contract hosts rely on
(`run_script` never raises a PigmentError) plus a numpy-backed Canvas that
applies commands as positioned colours.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

import numpy as np

from pigment import Node, Value
from pigment.config import Limits, get_limits
from pigment.interpreter import Interpreter
from pigment.reader.lexer import Lexer
from pigment.reader.parser import Parser
from pigment.types.command import PaintCommand
from pigment.types.errors import PigmentError

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    commands: list[PaintCommand] = field(default_factory=list)
    error: Optional[str] = None
    program: list[Node] = field(default_factory=list)
    # Value of the last top-level form; 0 when the run failed or was empty
    value: Value = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


def run_script(source: str, limits: Optional[Limits] = None) -> RunResult:
    """Lex, parse and execute `source`.

    On failure, including an invalid PIGMENT_* setting when `limits` is not
    given, `error` holds the message and `commands` whatever was painted
    before the failing top-level form.
    """
    try:
        limits = limits if limits is not None else get_limits()
        program = Parser(Lexer(source), max_nesting=limits.max_nesting).program()
    except PigmentError as e:
        logger.warning("script failed before execution: %s", e)
        return RunResult(error=str(e))

    interp = Interpreter(program, limits)
    try:
        commands = interp.execute()
    except PigmentError as e:
        logger.warning("script failed: %s", e)
        return RunResult(list(interp.commands), str(e), program)
    return RunResult(commands, None, program, interp.result)


class Canvas:
    """An RGB drawing surface of `height` rows by `width` columns."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: np.ndarray = np.zeros((height, width, 3), dtype=np.uint8)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def apply(self, commands: Iterable[PaintCommand]) -> int:
        """Draw each command in order; returns how many landed on the canvas."""
        applied = 0
        for cmd in commands:
            if not self.contains(cmd.x, cmd.y):
                logger.debug("skipping off-canvas paint at %s", cmd.position)
                continue
            self.pixels[cmd.y, cmd.x] = cmd.color
            applied += 1
        return applied

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def clear(self) -> None:
        self.pixels.fill(0)
