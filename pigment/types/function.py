"""User-defined function values."""

from __future__ import annotations

from io import StringIO

from pigment import Node


class Function:
    """A first-class function: parameter names and body statements.

    No environment is captured. Names in the body resolve against whatever
    scopes are live when the function is called.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: list[str], body: list[Node]):
        self.params: list[str] = list(params)
        self.body: list[Node] = list(body)

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Function)
            and self.params == other.params
            and self.body == other.body
        )

    __hash__ = None  # mutable lists inside

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<func {")
            buffer.write(" ".join(self.params))
            buffer.write("}>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Function({self.params!r}, {len(self.body)} statement(s))"
