from pigment import EvaluatorFn
from pigment import Node, Value
from pigment.builtin.operators import to_number
from pigment.evaluation.context import EvalContext
from pigment.types.errors import PigmentArityError


def if_form(tail: list[Node], ctx: EvalContext, evaluate_fn: EvaluatorFn) -> Value:
    if len(tail) != 3:
        raise PigmentArityError(
            f"if requires a condition, a then-branch and an else-branch, got {len(tail)} argument(s)."
        )
    cond = to_number(evaluate_fn(tail[0], ctx))
    # Only the chosen branch is evaluated
    if cond != 0.0:
        return evaluate_fn(tail[1], ctx)
    return evaluate_fn(tail[2], ctx)
