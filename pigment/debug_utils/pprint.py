from __future__ import annotations

import math

from pigment import Node, Value
from pigment.types.ast import Block, Form, ParamList, Symbol
from pigment.types.command import PaintCommand
from pigment.types.function import Function

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_STRING = "\033[92m"
COLOR_NUMBER = "\033[93m"

SPECIAL_FORMS = {"set", "const", "func", "if", "loop"}


def format_number(num: float) -> str:
    """Shortest display form: whole numbers print without a fractional part."""
    if math.isnan(num):
        return "NaN"
    if math.isinf(num):
        return "inf" if num > 0 else "-inf"
    if num.is_integer() and abs(num) < 1e16:
        return str(int(num))
    return repr(num)


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{RESET}" if enabled else text


def format_node(node: Node, color: bool = False) -> str:
    """Render a syntax node back into bracketed source-like text."""
    if isinstance(node, float):
        return _paint(format_number(node), COLOR_NUMBER, color)
    if isinstance(node, str):
        return _paint(f'"{node}"', COLOR_STRING, color)
    if isinstance(node, Symbol):
        return _paint(node.id, COLOR_SYMBOL, color)
    if isinstance(node, Block):
        inner = "".join(format_node(item, color) + " " for item in node.items)
        return f"'( {inner})"
    if isinstance(node, ParamList):
        inner = "".join(name + " " for name in node.names)
        return f"[ {inner}]"
    if isinstance(node, Form):
        head = node.name
        if head in SPECIAL_FORMS:
            head = _paint(head, COLOR_SPECIAL_FORM, color)
        inner = "".join(format_node(arg, color) + " " for arg in node.args)
        return f"({head} {inner})"
    return repr(node)


def format_value(value: Value) -> str:
    """Render a runtime value for display to the user."""
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, Function):
        return str(value)
    if isinstance(value, PaintCommand):
        return f"paint({value.x}, {value.y}, {value.r}, {value.g}, {value.b})"
    if isinstance(value, list):
        return "[" + " ".join(format_value(v) for v in value) + "]"
    return repr(value)


def pprint_program(program: list[Node], color: bool = False) -> str:
    return "\n".join(format_node(form, color) for form in program)
