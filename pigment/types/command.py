from __future__ import annotations

import math
from dataclasses import dataclass

CHANNEL_MAX = 255


def to_channel(value: float) -> int:
    """Truncate toward zero and saturate into an 8-bit colour channel."""
    if math.isnan(value):
        return 0
    if value >= CHANNEL_MAX:
        return CHANNEL_MAX
    if value <= 0:
        return 0
    return int(value)


COORD_MAX = 2**63 - 1
COORD_MIN = -(2**63)


def to_coordinate(value: float) -> int:
    """Truncate toward zero and saturate into int64; nan maps to 0."""
    if math.isnan(value):
        return 0
    if value >= COORD_MAX:
        return COORD_MAX
    if value <= COORD_MIN:
        return COORD_MIN
    return int(value)


@dataclass(frozen=True)
class PaintCommand:
    """A positioned colour directive queued by `paint` for the host to draw."""

    x: int
    y: int
    r: int
    g: int
    b: int

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    @property
    def color(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    @classmethod
    def from_numbers(cls, x: float, y: float, r: float, g: float, b: float) -> PaintCommand:
        return cls(
            to_coordinate(x),
            to_coordinate(y),
            to_channel(r),
            to_channel(g),
            to_channel(b),
        )

    def __str__(self) -> str:
        return f"paint {self.x} {self.y} {self.r} {self.g} {self.b}"
