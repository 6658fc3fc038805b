"""Per-run evaluation state.

An EvalContext bundles what a single run owns: the scope stack, the command
log that `paint` appends to, and the run budget (steps, call depth,
wall-clock time, cancellation). It is threaded through every evaluator call
instead of living in module globals, so interpreters never share state.
"""

from __future__ import annotations

import logging
import threading
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from pigment.config import Limits
from pigment.types.command import PaintCommand
from pigment.types.environment import Environment
from pigment.types.errors import (
    PigmentBudgetExceeded,
    PigmentCancelled,
    PigmentRecursionError,
)

logger = logging.getLogger(__name__)


class EvalContext:
    __slots__ = ("env", "commands", "limits", "cancel_event", "steps", "call_depth", "_deadline")

    def __init__(
        self,
        env: Optional[Environment] = None,
        limits: Optional[Limits] = None,
        cancel_event: Optional[threading.Event] = None,
    ):
        self.env: Environment = env if env is not None else Environment()
        self.commands: list[PaintCommand] = []
        self.limits: Limits = limits if limits is not None else Limits()
        self.cancel_event: threading.Event = cancel_event or threading.Event()
        self.steps = 0
        self.call_depth = 0
        self._deadline: Optional[float] = None

    def start_run(self) -> None:
        """Reset the budget, command log and cancel flag for a fresh run."""
        self.commands = []
        self.cancel_event.clear()
        self.reset_budget()

    def reset_budget(self) -> None:
        self.steps = 0
        self.call_depth = 0
        self._deadline = (
            time.monotonic() + self.limits.timeout
            if self.limits.timeout is not None
            else None
        )

    def emit(self, command: PaintCommand) -> PaintCommand:
        self.commands.append(command)
        return command

    def tick(self) -> None:
        """Consume one step; called once per loop iteration and per function call."""
        if self.cancel_event.is_set():
            raise PigmentCancelled("Execution was cancelled.")
        self.steps += 1
        max_steps = self.limits.max_steps
        if max_steps is not None and self.steps > max_steps:
            raise PigmentBudgetExceeded(f"Step budget of {max_steps} exceeded.")
        if self._deadline is not None and time.monotonic() > self._deadline:
            raise PigmentBudgetExceeded(
                f"Time budget of {self.limits.timeout}s exceeded."
            )

    @contextmanager
    def call_frame(self) -> Iterator[None]:
        """Enter a user-function call: new scope, depth accounting, budget tick."""
        self.tick()
        if self.call_depth >= self.limits.max_depth:
            raise PigmentRecursionError(
                f"Function calls nested deeper than {self.limits.max_depth}."
            )
        self.call_depth += 1
        try:
            with self.env.scope():
                yield
        finally:
            self.call_depth -= 1
