"""Small value types shared across the package: vectors, rectangles and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence


def _to_u8(value: float) -> int:
    """Convert a float to a byte the saturating way: truncate, clamp, NaN to 0."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= 255:
        return 255
    return int(value)


@dataclass(frozen=True)
class Vec2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class Rect:
    """An axis-aligned rectangle with its top-left corner at (x, y)."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains(self, point) -> bool:
        """True if the point lies inside; left/top edges are inclusive, right/bottom exclusive."""
        px, py = point
        return self.left <= px < self.right and self.top <= py < self.bottom

    def overlaps(self, other: Rect) -> bool:
        """True if the two rectangles touch or intersect."""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top <= other.bottom
            and self.bottom >= other.top
        )


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels in 0..1."""

    r: float
    g: float
    b: float
    a: float

    @staticmethod
    def from_rgba(r: int, g: int, b: int, a: int) -> Color:
        """Build a colour from byte channels in 0..255."""
        return Color(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def to_bytes(self) -> bytes:
        """The colour as four RGBA bytes, channels truncated and saturated."""
        return bytes(_to_u8(channel * 255.0) for channel in (self.r, self.g, self.b, self.a))

    @staticmethod
    def from_bytes(data: Sequence[int]) -> Color:
        """Build a colour from a four-byte RGBA sequence."""
        if len(data) != 4:
            raise ValueError(f"expected 4 colour bytes, got {len(data)}")
        r, g, b, a = data
        return Color.from_rgba(r, g, b, a)


WHITE = Color(1.0, 1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
BLANK = Color(0.0, 0.0, 0.0, 0.0)