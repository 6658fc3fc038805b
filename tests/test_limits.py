import threading
import time

import pytest

from pigment.config import Limits
from pigment.interpreter import Interpreter
from pigment.types.command import PaintCommand
from pigment.types.errors import (
    PigmentBudgetExceeded,
    PigmentCancelled,
    PigmentRecursionError,
)


def test_infinite_loop_hits_step_budget():
    interp = Interpreter.from_source("(loop 1 0)", Limits(max_steps=100))
    with pytest.raises(PigmentBudgetExceeded, match="Step budget of 100"):
        interp.execute()
    assert interp.ctx.steps == 101


def test_loop_within_budget_completes():
    source = "(set i 0) (loop (< i 10) (set i (+ i 1)))"
    interp = Interpreter.from_source(source, Limits(max_steps=10))
    interp.execute()
    assert interp.eval("i") == 10.0


def test_function_calls_consume_steps():
    source = "(set f (func {} 1)) (f) (f) (f)"
    with pytest.raises(PigmentBudgetExceeded):
        Interpreter.from_source(source, Limits(max_steps=2)).execute()


def test_runaway_recursion_is_bounded():
    interp = Interpreter.from_source("(set f (func {n} (f (+ n 1)))) (f 0)", Limits(max_depth=30))
    with pytest.raises(PigmentRecursionError, match="deeper than 30"):
        interp.execute()
    assert interp.env.depth == 1
    assert interp.ctx.call_depth == 0


def test_commands_before_budget_error_are_kept():
    source = "(paint 0 0 1 2 3) (loop 1 0)"
    interp = Interpreter.from_source(source, Limits(max_steps=5))
    with pytest.raises(PigmentBudgetExceeded) as info:
        interp.execute()
    assert info.value.commands == [PaintCommand(0, 0, 1, 2, 3)]


def test_timeout_stops_infinite_loop():
    interp = Interpreter.from_source("(loop 1 0)", Limits(timeout=0.05))
    with pytest.raises(PigmentBudgetExceeded, match="Time budget"):
        interp.execute()


def test_cancel_from_another_thread():
    interp = Interpreter.from_source("(loop 1 0)", Limits())
    errors = []

    def target():
        try:
            interp.execute()
        except PigmentCancelled as e:
            errors.append(e)

    worker = threading.Thread(target=target, daemon=True)
    worker.start()
    # execute() clears the flag on entry, so wait for the loop to be running
    while worker.is_alive() and interp.ctx.steps == 0:
        time.sleep(0.001)
    interp.cancel()
    worker.join(timeout=10)
    assert not worker.is_alive()
    assert len(errors) == 1


def test_cancelled_interpreter_runs_again():
    source = "(set i 0) (loop (< i 100) (set i (+ i 1))) (paint i 0 1 2 3)"
    interp = Interpreter.from_source(source, Limits())
    interp.cancel()
    assert interp.execute() == [PaintCommand(100, 0, 1, 2, 3)]
    assert not interp.ctx.cancel_event.is_set()
