"""The (loop condition body) special form.

The condition is re-evaluated before every iteration. Each iteration also
spends one step of the run budget, which is what stops a loop whose
condition never becomes false.
"""

from pigment import EvaluatorFn
from pigment import Node, Value
from pigment.builtin.operators import to_number
from pigment.evaluation.context import EvalContext
from pigment.types.errors import PigmentArityError


def loop_form(tail: list[Node], ctx: EvalContext, evaluate_fn: EvaluatorFn) -> Value:
    if len(tail) != 2:
        raise PigmentArityError(
            f"loop requires a condition and a body, got {len(tail)} argument(s)."
        )
    cond_expr, body = tail
    result: Value = 0.0
    while to_number(evaluate_fn(cond_expr, ctx)) != 0.0:
        ctx.tick()
        result = evaluate_fn(body, ctx)
    return result
