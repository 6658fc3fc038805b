"""Registry of special forms for the Pigment evaluator.

Maps Symbols to handlers that receive their arguments unevaluated. The
evaluator consults this table before the operator table and before falling
back to a user-function call.
"""

from pigment.types.ast import Symbol
from pigment.evaluation.special_forms.set_form import set_form, const_form
from pigment.evaluation.special_forms.func_form import func_form
from pigment.evaluation.special_forms.if_form import if_form
from pigment.evaluation.special_forms.loop_form import loop_form

SPECIAL_FORMS = {
    Symbol("set"): set_form,
    Symbol("const"): const_form,
    Symbol("func"): func_form,
    Symbol("if"): if_form,
    Symbol("loop"): loop_form,
}
