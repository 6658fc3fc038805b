"""Syntax nodes produced by the parser.

Number and string literals need no class of their own: they are floats and
strs. Identifiers are interned Symbols, and the three bracketed constructs
get a node type each:

    (head arg...)  -> Form
    [expr...]      -> Block
    {name...}      -> ParamList
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from pigment import Node


@dataclass(frozen=True)
class Symbol:
    """An identifier. Names are interned so equality and hashing stay cheap."""

    id: str

    def __post_init__(self):
        object.__setattr__(self, "id", sys.intern(self.id))

    def __str__(self):
        return self.id


@dataclass(frozen=True)
class Form:
    """A call or special form: the head name and its unevaluated arguments."""

    head: Symbol
    args: list[Node] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.head.id


@dataclass(frozen=True)
class Block:
    """A sequence evaluated for side effects; its value is the last item's."""

    items: list[Node] = field(default_factory=list)


@dataclass(frozen=True)
class ParamList:
    """Formal parameter names of a func."""

    names: list[str] = field(default_factory=list)
