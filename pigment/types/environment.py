"""Runtime environment for Pigment.

The Environment is a stack of scopes, innermost last. Each scope maps a
Symbol to a Binding (value plus a mutable flag). Lookups walk the stack from
the innermost scope outwards and the first hit wins. Function calls push onto
this same stack, so a callee sees the caller's live bindings (dynamic scoping).
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from io import StringIO
from typing import Iterator, Optional

from pigment import Value
from pigment.types.errors import PigmentConstantError, PigmentUnboundSymbol
from pigment.types.ast import Symbol


@dataclass
class Binding:
    value: Value
    mutable: bool = True


class Environment:
    """Stack of scopes mapping Symbols to Bindings."""

    __slots__ = ("scopes",)

    def __init__(self):
        # The global scope is never popped
        self.scopes: list[dict[Symbol, Binding]] = [{}]

    @property
    def depth(self) -> int:
        return len(self.scopes)

    def push_scope(self) -> None:
        self.scopes.append({})

    def pop_scope(self) -> None:
        if len(self.scopes) == 1:
            raise RuntimeError("Cannot pop the global scope")
        self.scopes.pop()

    @contextmanager
    def scope(self) -> Iterator[dict[Symbol, Binding]]:
        """Push a fresh scope for the duration of the block, popping it even on error."""
        self.push_scope()
        try:
            yield self.scopes[-1]
        finally:
            self.pop_scope()

    def find(self, name: Symbol) -> Optional[Binding]:
        """Find the innermost binding for `name`, or None."""
        for frame in reversed(self.scopes):
            binding = frame.get(name)
            if binding is not None:
                return binding
        return None

    def lookup(self, name: Symbol) -> Value:
        """Look up the value bound to `name`.

        Raises PigmentUnboundSymbol if no scope binds it.
        """
        binding = self.find(name)
        if binding is None:
            raise PigmentUnboundSymbol(f"Variable '{name}' is not defined.")
        return binding.value

    def define(self, name: Symbol, value: Value, mutable: bool = True) -> None:
        """Bind `name` in the innermost scope.

        A name already bound as a constant in the innermost scope cannot be
        rebound, whichever flag the new binding carries. Outer scopes are
        never consulted, so shadowing always succeeds.
        """
        frame = self.scopes[-1]
        existing = frame.get(name)
        if existing is not None and not existing.mutable:
            raise PigmentConstantError(
                f"The variable '{name}' is a constant but you are trying to reassign it."
            )
        frame[name] = Binding(value, mutable)

    def define_const(self, name: Symbol, value: Value) -> None:
        self.define(name, value, mutable=False)

    @staticmethod
    def _write_vars(frame: dict[Symbol, Binding], buffer: StringIO) -> None:
        """Write one scope's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, binding in frame.items():
            if not first:
                buffer.write(", ")
            marker = "" if binding.mutable else "const "
            buffer.write(f"{marker}{k}: {binding.value!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost scope with an indicator for the scopes beneath it."""
        with StringIO() as buffer:
            self._write_vars(self.scopes[-1], buffer)
            if len(self.scopes) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment stack: ")
            chain = []
            for frame in reversed(self.scopes):
                frame_buf = StringIO()
                self._write_vars(frame, frame_buf)
                chain.append(frame_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
