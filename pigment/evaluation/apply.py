"""Application of user-defined functions.

Calls share the interpreter's single scope stack: arguments are evaluated in
the caller's scope, then a new scope is pushed on top of the caller's and the
parameters are bound into it. Names the body does not bind itself resolve
through the caller's live scopes.
"""

from __future__ import annotations

import logging

from pigment import EvaluatorFn, Node, Value
from pigment.evaluation.context import EvalContext
from pigment.types.errors import PigmentArityError, PigmentNotCallable, PigmentUnboundSymbol
from pigment.types.function import Function
from pigment.types.ast import Symbol

logger = logging.getLogger(__name__)


def resolve_function(name: Symbol, ctx: EvalContext) -> Function:
    """Look up a call head, which must be bound to a Function."""
    binding = ctx.env.find(name)
    if binding is None:
        raise PigmentUnboundSymbol(f"invalid operator '{name}'.")
    if not isinstance(binding.value, Function):
        raise PigmentNotCallable(f"variable '{name}' is not function.")
    return binding.value


def apply_function(
    fn: Function,
    arg_exprs: list[Node],
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
    name: str = "<func>",
) -> Value:
    """Call `fn` with unevaluated argument expressions.

    - Arity is checked before any argument is evaluated.
    - Arguments are evaluated left to right in the caller's scope.
    - The body runs in a fresh scope that is popped on return or on error.
    - The result is the last body statement's value.
    """
    if len(arg_exprs) != fn.arity:
        raise PigmentArityError(
            f"'{name}' expected {fn.arity} arguments, but gave {len(arg_exprs)} arguments."
        )
    args = [evaluate_fn(expr, ctx) for expr in arg_exprs]

    result: Value = 0.0
    with ctx.call_frame():
        logger.debug("call %s depth=%d scopes=%d", name, ctx.call_depth, ctx.env.depth)
        for param, value in zip(fn.params, args):
            ctx.env.define(Symbol(param), value)
        for statement in fn.body:
            result = evaluate_fn(statement, ctx)
    return result
