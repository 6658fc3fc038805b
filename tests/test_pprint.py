import math

import pytest

from pigment.debug_utils.pprint import format_node, format_number, format_value, pprint_program
from pigment.reader.parser import parse_program
from pigment.types.command import PaintCommand
from pigment.types.function import Function


@pytest.mark.parametrize(
    "num,expected",
    [(12.0, "12"), (1.5, "1.5"), (-3.0, "-3"), (0.1, "0.1"), (math.inf, "inf"), (math.nan, "NaN")],
)
def test_format_number(num, expected):
    assert format_number(num) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", "(+ 1 2 )"),
        ('"hi"', '"hi"'),
        ("[1 x]", "'( 1 x )"),
        ("(func {a b} (* a b))", "(func [ a b ] (* a b ) )"),
        ("(vec)", "(vec )"),
    ],
)
def test_format_node(source, expected):
    [node] = parse_program(source)
    assert format_node(node) == expected


def test_color_output_wraps_symbols():
    [node] = parse_program("(if x 1 2)")
    text = format_node(node, color=True)
    assert "\033[" in text
    assert "if" in text


@pytest.mark.parametrize(
    "value,expected",
    [
        (12.0, "12"),
        ("s", '"s"'),
        ([1.0, "a", [2.0]], '[1 "a" [2]]'),
        (Function(["a", "b"], []), "<func {a b}>"),
        (PaintCommand(1, 2, 255, 0, 0), "paint(1, 2, 255, 0, 0)"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_pprint_program_one_form_per_line():
    assert pprint_program(parse_program("(set x 1) x")) == "(set x 1 )\nx"
