from pigment import EvaluatorFn
from pigment import Node, Value
from pigment.evaluation.context import EvalContext
from pigment.types.errors import PigmentArityError, PigmentTypeError
from pigment.types.ast import Symbol


def _bind(
    form: str,
    tail: list[Node],
    ctx: EvalContext,
    evaluate_fn: EvaluatorFn,
    mutable: bool,
) -> Value:
    if len(tail) != 2:
        raise PigmentArityError(
            f"{form} requires exactly 2 arguments: ({form} name value), got {len(tail)}."
        )
    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise PigmentTypeError(f"{form} first argument must be an identifier.")
    value = evaluate_fn(val_expr, ctx)
    if mutable:
        ctx.env.define(name, value)
    else:
        ctx.env.define_const(name, value)
    return value


def set_form(tail: list[Node], ctx: EvalContext, evaluate_fn: EvaluatorFn) -> Value:
    """
    (set name value)
    Binds in the innermost scope; fails if that scope holds `name` as a constant.
    """
    return _bind("set", tail, ctx, evaluate_fn, mutable=True)


def const_form(tail: list[Node], ctx: EvalContext, evaluate_fn: EvaluatorFn) -> Value:
    """
    (const name value)
    Like set, but the binding can no longer be replaced within the same scope.
    """
    return _bind("const", tail, ctx, evaluate_fn, mutable=False)
