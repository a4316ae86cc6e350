"""Keyboard focus cycling between selectable widgets with Tab and Shift+Tab."""

from __future__ import annotations

from dataclasses import dataclass

from .ui_input import UiInput


@dataclass
class TabSelector:
    """Counts selectable widgets each frame and moves focus on Tab / Shift+Tab."""

    counter: int = 0
    wants: int | None = None
    to_change: int | None = None

    def new_frame(self) -> None:
        """Turn last frame's request into the widget that gains focus this frame."""
        if self.wants == -1:
            self.to_change = self.counter - 1
        elif self.wants is not None and self.wants == self.counter:
            self.to_change = 0
        else:
            self.to_change = self.wants
        self.wants = None
        self.counter = 0

    def register_selectable_widget(self, has_focus: bool, input: UiInput) -> bool:
        """Register the next widget; True if it should gain focus from a Tab press."""
        if has_focus:
            if input.shift_tab_pressed():
                self.wants = self.counter - 1
            elif input.tab_pressed():
                self.wants = self.counter + 1

        result = self.to_change is not None and self.to_change == self.counter
        if result:
            self.to_change = None

        self.counter += 1
        return result