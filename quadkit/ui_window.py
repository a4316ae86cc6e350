"""Geometry and per-frame state of one UI window."""

from __future__ import annotations

from dataclasses import dataclass

from .primitives import Rect, Vec2


@dataclass(frozen=True)
class RectOffset:
    """Margins on each side of a rectangle."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


class UiWindow:
    """A window: its placement, title bar, layout area and child windows."""

    def __init__(
        self,
        id: int,
        parent: int | None,
        position: Vec2,
        size: Vec2,
        title_height: float = 0.0,
        window_margin: RectOffset | None = None,
        margin: float = 0.0,
        movable: bool = False,
        force_focus: bool = False,
    ) -> None:
        self.id = id
        self.parent = parent
        self.position = position
        self.size = size
        self.title_height = title_height
        self.window_margin = window_margin if window_margin is not None else RectOffset()
        self.margin = margin
        self.movable = movable
        self.force_focus = force_focus
        self.vertical_scroll_bar_width = 0.0
        self.active = False
        self.was_active = False
        self.want_close = False
        self.children: list[int] = []
        self.clipping_zone: Rect | None = None
        self.next_same_line: float | None = None
        self.cursor_area = self._layout_area()

    def __repr__(self) -> str:
        return f"UiWindow(id={self.id}, parent={self.parent}, position={self.position}, size={self.size})"

    def _layout_area(self) -> Rect:
        m = self.window_margin
        return Rect(
            self.position.x + m.left,
            self.position.y + self.title_height + m.top,
            self.size.x - m.left - m.right,
            self.size.y - self.title_height - m.top - m.bottom,
        )

    def resize(self, size: Vec2) -> None:
        """Change the size and lay the content area out afresh."""
        self.size = size
        self.next_same_line = None
        self.cursor_area = self._layout_area()

    def top_level(self) -> bool:
        """True for a window without a parent."""
        return self.parent is None

    def full_rect(self) -> Rect:
        """The whole window including its title bar."""
        return Rect(self.position.x, self.position.y, self.size.x, self.size.y)

    def content_rect(self) -> Rect:
        """The area below the title bar, without the vertical scroll bar."""
        return Rect(
            self.position.x,
            self.position.y + self.title_height,
            self.size.x - self.vertical_scroll_bar_width,
            self.size.y - self.title_height,
        )

    def title_rect(self) -> Rect:
        """The title bar."""
        return Rect(self.position.x, self.position.y, self.size.x, self.title_height)

    def set_position(self, position: Vec2) -> None:
        """Move the window, keeping the size of its content area."""
        self.position = position
        self.cursor_area.x = position.x + self.window_margin.left
        self.cursor_area.y = position.y + self.title_height + self.window_margin.top

    def same_line(self, x: float) -> None:
        """Place the next widget on the current line at horizontal offset x."""
        self.next_same_line = x