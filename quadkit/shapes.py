"""2D shape tessellation into triangle geometry collected on a canvas."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any, Sequence

from .primitives import WHITE, Color, Vec2

_F32_EPSILON = 1.1920929e-07
_TAU = math.pi * 2.0


class DrawMode(enum.Enum):
    """How a draw call's indices are interpreted."""

    TRIANGLES = "triangles"
    LINES = "lines"


@dataclass(frozen=True)
class Vertex:
    """A position, texture coordinate and colour."""

    x: float
    y: float
    z: float
    u: float
    v: float
    color: Color


@dataclass
class DrawCall:
    """One batch of geometry with its texture and draw mode."""

    vertices: list[Vertex]
    indices: list[int]
    texture: Any = None
    mode: DrawMode = DrawMode.TRIANGLES


@dataclass
class DrawRectangleParams:
    """Extra parameters for Canvas.draw_rectangle_ex."""

    offset: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0
    color: Color = WHITE


def _check_sides(sides: int) -> None:
    if not 1 <= sides <= 255:
        raise ValueError(f"sides must be between 1 and 255, got {sides}")


class Canvas:
    """Collects the geometry produced by drawing calls."""

    def __init__(self) -> None:
        self.draw_calls: list[DrawCall] = []
        self.draw_mode = DrawMode.TRIANGLES

    def geometry(self, vertices: Sequence[Vertex], indices: Sequence[int], texture: Any = None) -> None:
        """Record a batch of indexed triangles."""
        self.draw_calls.append(DrawCall(list(vertices), list(indices), texture, self.draw_mode))

    def draw_triangle(self, v1: Vec2, v2: Vec2, v3: Vec2, color: Color) -> None:
        """A solid triangle."""
        vertices = [Vertex(p.x, p.y, 0.0, 0.0, 0.0, color) for p in (v1, v2, v3)]
        self.geometry(vertices, [0, 1, 2])

    def draw_triangle_lines(self, v1: Vec2, v2: Vec2, v3: Vec2, thickness: float, color: Color) -> None:
        """A triangle outline."""
        for a, b in ((v1, v2), (v2, v3), (v3, v1)):
            self.draw_line(a.x, a.y, b.x, b.y, thickness, color)

    def draw_rectangle(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        """A solid rectangle with its top-left corner at (x, y)."""
        vertices = [
            Vertex(x, y, 0.0, 0.0, 0.0, color),
            Vertex(x + w, y, 0.0, 1.0, 0.0, color),
            Vertex(x + w, y + h, 0.0, 1.0, 1.0, color),
            Vertex(x, y + h, 0.0, 0.0, 1.0, color),
        ]
        self.geometry(vertices, [0, 1, 2, 0, 2, 3])

    def draw_rectangle_lines(
        self, x: float, y: float, w: float, h: float, thickness: float, color: Color
    ) -> None:
        """A rectangle outline whose line lies inside the rectangle."""
        t = thickness / 2.0
        vertices = [
            Vertex(x, y, 0.0, 0.0, 1.0, color),
            Vertex(x + w, y, 0.0, 1.0, 0.0, color),
            Vertex(x + w, y + h, 0.0, 1.0, 1.0, color),
            Vertex(x, y + h, 0.0, 0.0, 0.0, color),
            Vertex(x + t, y + t, 0.0, 0.0, 0.0, color),
            Vertex(x + w - t, y + t, 0.0, 0.0, 0.0, color),
            Vertex(x + w - t, y + h - t, 0.0, 0.0, 0.0, color),
            Vertex(x + t, y + h - t, 0.0, 0.0, 0.0, color),
        ]
        indices = [0, 1, 4, 1, 4, 5, 1, 5, 6, 1, 2, 6, 3, 7, 2, 2, 7, 6, 0, 4, 3, 3, 4, 7]
        self.geometry(vertices, indices)

    def draw_rectangle_ex(
        self, x: float, y: float, w: float, h: float, params: DrawRectangleParams | None = None
    ) -> None:
        """A solid rectangle positioned at (x, y), offset and rotated by params."""
        params = params or DrawRectangleParams()
        cos_r, sin_r = math.cos(params.rotation), math.sin(params.rotation)
        ox, oy = params.offset.x, params.offset.y

        def transform(px: float, py: float) -> tuple[float, float]:
            sx, sy = px * w, py * h
            return x + sx * cos_r - sy * sin_r, y + sx * sin_r + sy * cos_r

        corners = [
            transform(0.0 - ox, 0.0 - oy),
            transform(0.0 - ox, 1.0 - oy),
            transform(1.0 - ox, 1.0 - oy),
            transform(1.0 - ox, 0.0 - oy),
        ]
        uvs = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
        vertices = [
            Vertex(cx, cy, 0.0, u, v, params.color) for (cx, cy), (u, v) in zip(corners, uvs)
        ]
        self.geometry(vertices, [0, 1, 2, 0, 2, 3])

    def draw_hexagon(
        self,
        x: float,
        y: float,
        size: float,
        border: float,
        vertical: bool,
        border_color: Color,
        fill_color: Color,
    ) -> None:
        """A filled hexagon with an optional outline; vertical points along y."""
        rotation = 90.0 if vertical else 0.0
        self.draw_poly(x, y, 6, size, rotation, fill_color)
        if border > 0.0:
            self.draw_poly_lines(x, y, 6, size, rotation, border, border_color)

    def draw_poly(
        self, x: float, y: float, sides: int, radius: float, rotation: float, color: Color
    ) -> None:
        """A solid regular polygon; rotation in degrees, clockwise."""
        _check_sides(sides)
        rot = math.radians(rotation)
        vertices = [Vertex(x, y, 0.0, 0.0, 0.0, color)]
        indices: list[int] = []
        for i in range(sides + 1):
            angle = i / sides * _TAU + rot
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.append(Vertex(x + radius * rx, y + radius * ry, 0.0, rx, ry, color))
            if i != sides:
                indices.extend((0, i + 1, i + 2))
        self.geometry(vertices, indices)

    def draw_poly_lines(
        self,
        x: float,
        y: float,
        sides: int,
        radius: float,
        rotation: float,
        thickness: float,
        color: Color,
    ) -> None:
        """A regular polygon outline; rotation in degrees, clockwise."""
        _check_sides(sides)
        rot = math.radians(rotation)

        def point(i: int) -> tuple[float, float]:
            angle = i / sides * _TAU + rot
            return x + radius * math.cos(angle), y + radius * math.sin(angle)

        for i in range(sides):
            (x0, y0), (x1, y1) = point(i), point(i + 1)
            self.draw_line(x0, y0, x1, y1, thickness, color)

    def draw_circle(self, x: float, y: float, r: float, color: Color) -> None:
        """A solid circle, drawn as a 20-sided polygon."""
        self.draw_poly(x, y, 20, r, 0.0, color)

    def draw_circle_lines(self, x: float, y: float, r: float, thickness: float, color: Color) -> None:
        """A circle outline, drawn as a 20-sided polygon."""
        self.draw_poly_lines(x, y, 20, r, 0.0, thickness, color)

    @staticmethod
    def _ellipse_point(
        i: int, sides: int, x: float, y: float, w: float, h: float, sr: float, cr: float
    ) -> tuple[float, float, float, float]:
        angle = i / sides * _TAU
        rx, ry = math.cos(angle), math.sin(angle)
        px, py = w * rx, h * ry
        return x + px * cr - py * sr, y + py * cr + px * sr, rx, ry

    def draw_ellipse(
        self, x: float, y: float, w: float, h: float, rotation: float, color: Color
    ) -> None:
        """A solid ellipse with radii (w, h); rotation in degrees, clockwise."""
        sides = 20
        rot = math.radians(rotation)
        sr, cr = math.sin(rot), math.cos(rot)
        vertices = [Vertex(x, y, 0.0, 0.0, 0.0, color)]
        indices: list[int] = []
        for i in range(sides + 1):
            vx, vy, rx, ry = self._ellipse_point(i, sides, x, y, w, h, sr, cr)
            vertices.append(Vertex(vx, vy, 0.0, rx, ry, color))
            if i != sides:
                indices.extend((0, i + 1, i + 2))
        self.geometry(vertices, indices)

    def draw_ellipse_lines(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        rotation: float,
        thickness: float,
        color: Color,
    ) -> None:
        """An ellipse outline with radii (w, h); rotation in degrees, clockwise."""
        sides = 20
        rot = math.radians(rotation)
        sr, cr = math.sin(rot), math.cos(rot)
        for i in range(sides):
            x0, y0, _, _ = self._ellipse_point(i, sides, x, y, w, h, sr, cr)
            x1, y1, _, _ = self._ellipse_point(i + 1, sides, x, y, w, h, sr, cr)
            self.draw_line(x0, y0, x1, y1, thickness, color)

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, thickness: float, color: Color
    ) -> None:
        """A line of the given thickness; nothing is drawn for a degenerate line."""
        nx, ny = -(y2 - y1), x2 - x1
        length = math.sqrt(nx * nx + ny * ny)
        half = thickness * 0.5
        if half != 0.0:
            tlen = length / half
        elif length == 0.0:
            tlen = math.nan
        else:
            tlen = math.inf
        if tlen < _F32_EPSILON:
            return
        tx, ty = nx / tlen, ny / tlen
        vertices = [
            Vertex(x1 + tx, y1 + ty, 0.0, 0.0, 0.0, color),
            Vertex(x1 - tx, y1 - ty, 0.0, 0.0, 0.0, color),
            Vertex(x2 + tx, y2 + ty, 0.0, 0.0, 0.0, color),
            Vertex(x2 - tx, y2 - ty, 0.0, 0.0, 0.0, color),
        ]
        self.geometry(vertices, [0, 1, 2, 2, 1, 3])