from __future__ import annotations

import logging
import threading
from typing import Optional

from pigment import Node, Value
from pigment.config import Limits, get_limits
from pigment.evaluation.context import EvalContext
from pigment.evaluation.evaluator import evaluate
from pigment.reader.lexer import Lexer
from pigment.reader.parser import Parser
from pigment.types.command import PaintCommand
from pigment.types.environment import Environment
from pigment.types.errors import PigmentEvalError, PigmentRecursionError

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runs a parsed Pigment program.
    Owns one scope stack and one command log; nothing is shared between
    instances, so several interpreters can run side by side.
    """

    def __init__(
        self,
        program: Optional[list[Node]] = None,
        limits: Optional[Limits] = None,
    ):
        self.program: list[Node] = list(program) if program is not None else []
        self.limits: Limits = limits if limits is not None else get_limits()
        self.ctx: EvalContext = EvalContext(
            Environment(), self.limits, cancel_event=threading.Event()
        )
        # Paint commands produced directly by top-level forms
        self.top_level_commands: list[PaintCommand] = []
        # Value of the last top-level form of the latest run
        self.result: Value = 0.0

    @classmethod
    def from_source(cls, source: str, limits: Optional[Limits] = None) -> Interpreter:
        limits = limits if limits is not None else get_limits()
        parser = Parser(Lexer(source), max_nesting=limits.max_nesting)
        return cls(parser.program(), limits)

    @property
    def env(self) -> Environment:
        return self.ctx.env

    @property
    def commands(self) -> list[PaintCommand]:
        return self.ctx.commands

    def cancel(self) -> None:
        """Ask a running program to stop at its next loop iteration or call.

        The flag is cleared when the next `execute()` starts.
        """
        self.ctx.cancel_event.set()

    def _evaluate(self, expr: Node) -> Value:
        try:
            return evaluate(expr, self.ctx)
        except RecursionError as e:
            raise PigmentRecursionError("Evaluation nested too deeply.") from e

    def execute(self) -> list[PaintCommand]:
        """Evaluate every top-level form in order and return the command log.

        An error aborts the rest of the run. Commands emitted before it stay in
        `self.commands` and are attached to the exception as `commands`.
        """
        self.ctx.start_run()
        self.top_level_commands = []
        self.result = 0.0
        for index, form in enumerate(self.program):
            logger.debug("executing top-level form %d", index)
            try:
                value = self._evaluate(form)
            except PigmentEvalError as e:
                e.commands = list(self.ctx.commands)
                raise
            self.result = value
            if isinstance(value, PaintCommand):
                self.top_level_commands.append(value)
            elif isinstance(value, list):
                self.top_level_commands.extend(
                    v for v in value if isinstance(v, PaintCommand)
                )
        return list(self.ctx.commands)

    def eval(self, source: str) -> Value:
        """Parse and evaluate a snippet against the live environment.

        Returns the value of the last form, or 0 when there is none. Commands
        it paints are appended to the current log.
        """
        parser = Parser(Lexer(source), max_nesting=self.limits.max_nesting)
        self.ctx.reset_budget()
        result: Value = 0.0
        for form in parser.program():
            result = self._evaluate(form)
        return result
