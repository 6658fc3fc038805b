from pigment import EvaluatorFn
from pigment import Node, Value
from pigment.evaluation.context import EvalContext
from pigment.types.ast import ParamList
from pigment.types.errors import PigmentArityError, PigmentTypeError
from pigment.types.function import Function


def func_form(tail: list[Node], ctx: EvalContext, evaluate_fn: EvaluatorFn) -> Value:
    # (func {params...} body...) with one or more body statements,
    # evaluated in order when the function is called.
    if len(tail) < 2:
        raise PigmentArityError(
            f"func requires a parameter list and at least one body statement, got {len(tail)} argument(s)."
        )
    params, *body = tail
    if not isinstance(params, ParamList):
        raise PigmentTypeError("you must provide a list of arguments.")
    return Function(params.names, body)
