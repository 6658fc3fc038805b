"""Built-in operators for the Pigment runtime.

Every operator here takes already-evaluated arguments. The evaluator checks
the arity recorded in BUILTINS before evaluating any argument, so the
functions can index `args` directly.

Numbers have no boolean type of their own: comparisons return 1.0 or 0.0.
"""
from __future__ import annotations

import math
from typing import Callable, NamedTuple, Optional

from pigment import Value
from pigment.evaluation.context import EvalContext
from pigment.types.command import PaintCommand
from pigment.types.errors import PigmentIndexError, PigmentTypeError
from pigment.types.function import Function
from pigment.types.ast import Symbol

TRUE = 1.0
FALSE = 0.0


def type_name(value: Value) -> str:
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "vector"
    if isinstance(value, Function):
        return "function"
    if isinstance(value, PaintCommand):
        return "command"
    return type(value).__name__


def to_number(value: Value) -> float:
    if isinstance(value, float):
        return value
    raise PigmentTypeError(
        f"the value was expected to be a number, but it is a {type_name(value)}."
    )


def to_vector(value: Value) -> list[Value]:
    if isinstance(value, list):
        return value
    raise PigmentTypeError(
        f"the value was expected to be a vector, but it is a {type_name(value)}."
    )


def _number_or_string_pair(op: str, a: Value, b: Value) -> bool:
    """True for two numbers, False for two strings, type error otherwise."""
    if isinstance(a, float) and isinstance(b, float):
        return True
    if isinstance(a, str) and isinstance(b, str):
        return False
    raise PigmentTypeError(
        f"'{op}' expects two numbers or two strings, got {type_name(a)} and {type_name(b)}."
    )


# -------------------------------
# Arithmetic
# -------------------------------
def add(ctx: EvalContext, args: list[Value]) -> Value:
    """Numeric sum, or concatenation when both operands are strings."""
    a, b = args
    _number_or_string_pair("+", a, b)
    return a + b


def subtract(ctx: EvalContext, args: list[Value]) -> float:
    return to_number(args[0]) - to_number(args[1])


def multiply(ctx: EvalContext, args: list[Value]) -> float:
    return to_number(args[0]) * to_number(args[1])


def divide(ctx: EvalContext, args: list[Value]) -> float:
    """IEEE division: a zero divisor gives a signed infinity, or nan for 0/0."""
    a, b = to_number(args[0]), to_number(args[1])
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def modulo(ctx: EvalContext, args: list[Value]) -> float:
    """Remainder with the sign of the dividend; nan for a zero divisor."""
    a, b = to_number(args[0]), to_number(args[1])
    if b == 0.0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


# -------------------------------
# Comparison
# -------------------------------
def _truth(flag: bool) -> float:
    return TRUE if flag else FALSE


def equals(ctx: EvalContext, args: list[Value]) -> float:
    a, b = args
    _number_or_string_pair("==", a, b)
    return _truth(a == b)


def not_equals(ctx: EvalContext, args: list[Value]) -> float:
    a, b = args
    _number_or_string_pair("!=", a, b)
    return _truth(a != b)


def less(ctx: EvalContext, args: list[Value]) -> float:
    return _truth(to_number(args[0]) < to_number(args[1]))


def greater(ctx: EvalContext, args: list[Value]) -> float:
    return _truth(to_number(args[0]) > to_number(args[1]))


def less_equal(ctx: EvalContext, args: list[Value]) -> float:
    return _truth(to_number(args[0]) <= to_number(args[1]))


def greater_equal(ctx: EvalContext, args: list[Value]) -> float:
    return _truth(to_number(args[0]) >= to_number(args[1]))


# -------------------------------
# Vectors
# -------------------------------
def make_vector(ctx: EvalContext, args: list[Value]) -> list[Value]:
    return list(args)


def vector_at(ctx: EvalContext, args: list[Value]) -> Value:
    """Element at an index truncated toward zero; out of range is an error."""
    vec = to_vector(args[0])
    index = to_number(args[1])
    if math.isnan(index) or math.isinf(index):
        raise PigmentIndexError(f"index {index} is out of range for a vector of length {len(vec)}.")
    i = int(index)
    if i < 0 or i >= len(vec):
        raise PigmentIndexError(f"index {i} is out of range for a vector of length {len(vec)}.")
    return vec[i]


# -------------------------------
# Side effects
# -------------------------------
def paint(ctx: EvalContext, args: list[Value]) -> PaintCommand:
    """Queue a positioned colour and return it as a value."""
    x, y, r, g, b = (to_number(a) for a in args)
    return ctx.emit(PaintCommand.from_numbers(x, y, r, g, b))


class Builtin(NamedTuple):
    fn: Callable[[EvalContext, list[Value]], Value]
    arity: Optional[int]  # None means any number of arguments


BUILTINS: dict[Symbol, Builtin] = {
    Symbol("+"): Builtin(add, 2),
    Symbol("-"): Builtin(subtract, 2),
    Symbol("*"): Builtin(multiply, 2),
    Symbol("/"): Builtin(divide, 2),
    Symbol("%"): Builtin(modulo, 2),
    Symbol("=="): Builtin(equals, 2),
    Symbol("!="): Builtin(not_equals, 2),
    Symbol("<"): Builtin(less, 2),
    Symbol(">"): Builtin(greater, 2),
    Symbol("<="): Builtin(less_equal, 2),
    Symbol(">="): Builtin(greater_equal, 2),
    Symbol("vec"): Builtin(make_vector, None),
    Symbol("at"): Builtin(vector_at, 2),
    Symbol("paint"): Builtin(paint, 5),
}
