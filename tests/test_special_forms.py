import pytest

from pigment.types.errors import (
    PigmentArityError,
    PigmentConstantError,
    PigmentTypeError,
    PigmentUnboundSymbol,
)
from pigment.types.ast import Symbol
from pigment.types.function import Function


def test_set_returns_value_and_binds(interp):
    assert interp.eval("(set x 5)") == 5.0
    assert interp.eval("x") == 5.0


def test_set_then_const_then_reassign(interp):
    interp.eval("(set x 5)")
    interp.eval("(const y 5)")
    with pytest.raises(PigmentConstantError):
        interp.eval("(set y 6)")
    interp.eval("(set x 6)")
    assert interp.eval("x") == 6.0
    assert interp.eval("y") == 5.0


def test_set_and_const_binding_flags(interp):
    interp.eval("(set x 1) (const y 2)")
    assert interp.env.find(Symbol("x")).mutable
    assert not interp.env.find(Symbol("y")).mutable


def test_const_cannot_be_redeclared(interp):
    interp.eval("(const y 1)")
    with pytest.raises(PigmentConstantError):
        interp.eval("(const y 2)")


def test_const_shadowed_inside_function(interp):
    interp.eval("(const y 1)")
    interp.eval("(set f (func {} (set y 2) y))")
    assert interp.eval("(f)") == 2.0
    assert interp.eval("y") == 1.0


@pytest.mark.parametrize("source", ["(set x)", "(set x 1 2)", "(const y)"])
def test_set_arity(interp, source):
    with pytest.raises(PigmentArityError):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(set 1 2)", '(const "y" 2)', "(set (vec) 2)"])
def test_set_requires_identifier(interp, source):
    with pytest.raises(PigmentTypeError, match="must be an identifier"):
        interp.eval(source)


def test_undefined_variable(interp):
    with pytest.raises(PigmentUnboundSymbol, match="Variable 'nope' is not defined."):
        interp.eval("nope")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if (< 1 2) 10 20)", 10.0),
        ("(if (< 2 1) 10 20)", 20.0),
        ("(if 0.5 1 2)", 1.0),
        ("(if (- 0 1) 1 2)", 1.0),
        ('(if 0 "yes" "no")', "no"),
    ],
)
def test_if(interp, source, expected):
    assert interp.eval(source) == expected


def test_if_evaluates_only_one_branch(interp):
    assert interp.eval("(if 1 (paint 0 0 1 1 1) undefined_name)") is not None
    assert len(interp.commands) == 1
    interp.eval("(if 0 (paint 9 9 1 1 1) 3)")
    assert len(interp.commands) == 1


def test_if_condition_must_be_numeric(interp):
    with pytest.raises(PigmentTypeError):
        interp.eval('(if "yes" 1 2)')


@pytest.mark.parametrize("source", ["(if 1 2)", "(if 1 2 3 4)"])
def test_if_arity(interp, source):
    with pytest.raises(PigmentArityError):
        interp.eval(source)


def test_loop_runs_until_condition_false(interp):
    interp.eval("(set i 0)")
    interp.eval("(set n 0)")
    result = interp.eval("(loop (< i 3) [(set n (+ n 1)) (set i (+ i 1))])")
    assert interp.eval("n") == 3.0
    assert result == 3.0


def test_loop_that_never_runs_yields_zero(interp):
    assert interp.eval("(loop 0 (paint 0 0 0 0 0))") == 0.0
    assert interp.commands == []


def test_loop_arity(interp):
    with pytest.raises(PigmentArityError):
        interp.eval("(loop 1)")


def test_block_value_is_last_item(interp):
    assert interp.eval("[1 2 3]") == 3.0
    assert interp.eval("[]") == 0.0


def test_func_builds_function_value(interp):
    fn = interp.eval("(func {a b} (* a b) (+ a b))")
    assert isinstance(fn, Function)
    assert fn.params == ["a", "b"]
    assert len(fn.body) == 2


def test_func_needs_parameter_list(interp):
    with pytest.raises(PigmentTypeError, match="list of arguments"):
        interp.eval("(func a (* a a))")


def test_func_needs_a_body(interp):
    with pytest.raises(PigmentArityError):
        interp.eval("(func {a})")


def test_param_list_outside_func(interp):
    with pytest.raises(PigmentTypeError):
        interp.eval("{a b}")
