"""Per-frame input state consumed by the immediate mode UI."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .primitives import Vec2


class KeyCode(enum.Enum):
    """Keys the UI reacts to."""

    UP = enum.auto()
    DOWN = enum.auto()
    RIGHT = enum.auto()
    LEFT = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    DELETE = enum.auto()
    BACKSPACE = enum.auto()
    TAB = enum.auto()
    Z = enum.auto()
    Y = enum.auto()
    C = enum.auto()
    X = enum.auto()
    V = enum.auto()
    A = enum.auto()
    ESCAPE = enum.auto()
    ENTER = enum.auto()
    CONTROL = enum.auto()


@dataclass(frozen=True)
class InputCharacter:
    """A typed character or a pressed key, with its modifiers."""

    key: str | KeyCode
    modifier_shift: bool = False
    modifier_ctrl: bool = False


@dataclass
class UiInput:
    """Mouse and keyboard state for the current frame."""

    mouse_position: Vec2 = field(default_factory=Vec2)
    mouse_wheel: Vec2 = field(default_factory=Vec2)
    is_mouse_down: bool = False
    click_down: bool = False
    click_up: bool = False
    input_buffer: list[InputCharacter] = field(default_factory=list)
    cursor_grabbed: bool = False
    window_active: bool = False
    modifier_ctrl: bool = False
    escape: bool = False
    enter: bool = False

    def reset(self) -> None:
        """Forget the events of the finished frame; held state is kept."""
        self.click_down = False
        self.click_up = False
        self.mouse_wheel = Vec2()
        self.input_buffer.clear()
        self.escape = False
        self.enter = False

    def tab_pressed(self) -> bool:
        """True if Tab was pressed this frame, with or without Shift."""
        return any(event.key == KeyCode.TAB for event in self.input_buffer)

    def shift_tab_pressed(self) -> bool:
        """True if Shift+Tab was pressed this frame."""
        return any(
            event.key == KeyCode.TAB and event.modifier_shift for event in self.input_buffer
        )