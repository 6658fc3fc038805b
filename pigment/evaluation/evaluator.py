"""Core evaluator for the Pigment interpreter.

Dispatches on the node type: literals evaluate to themselves, Symbols are
looked up in the scope stack, Blocks run their items in order, and Forms go
to the special-form table, then the operator table, then user functions.
"""

from __future__ import annotations

from pigment import Node, Value
from pigment.builtin.operators import BUILTINS
from pigment.evaluation.apply import apply_function, resolve_function
from pigment.evaluation.context import EvalContext
from pigment.evaluation.special_forms import SPECIAL_FORMS
from pigment.types.ast import Block, Form, ParamList, Symbol
from pigment.types.errors import PigmentArityError, PigmentTypeError


def evaluate(expr: Node, ctx: EvalContext) -> Value:
    """Evaluate one node against the context's live scope stack."""
    match expr:
        case float() | str():
            return expr

        case Symbol():
            return ctx.env.lookup(expr)

        case Block(items=items):
            result: Value = 0.0
            for item in items:
                result = evaluate(item, ctx)
            return result

        case Form(head=head, args=args):
            # --- Special forms handling ---
            if head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](args, ctx, evaluate)

            # --- Operators: arity first, then arguments left to right ---
            builtin = BUILTINS.get(head)
            if builtin is not None:
                if builtin.arity is not None and len(args) != builtin.arity:
                    raise PigmentArityError(
                        f"'{head}' expected {builtin.arity} arguments, but gave {len(args)} arguments."
                    )
                return builtin.fn(ctx, [evaluate(arg, ctx) for arg in args])

            # --- User function call ---
            fn = resolve_function(head, ctx)
            return apply_function(fn, args, ctx, evaluate, name=head.id)

        case ParamList():
            raise PigmentTypeError("a parameter list can only appear as the first argument of func.")

    raise PigmentTypeError(f"invalid node {expr!r}.")
