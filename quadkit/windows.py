"""Window bookkeeping for the immediate mode UI: focus, hovering, moving and input."""

from __future__ import annotations

from .primitives import Rect, Vec2
from .tab_selector import TabSelector
from .ui_input import InputCharacter, KeyCode, UiInput
from .ui_storage import AnyStorage, DragPhase, DragState
from .ui_window import RectOffset, UiWindow

ROOT_ID = 0


class WindowManager:
    """Owns every UI window, the focus order and the input of the current frame."""

    def __init__(
        self,
        screen_width: float,
        screen_height: float,
        *,
        title_height: float = 14.0,
        margin: float = 2.0,
        window_margin: RectOffset | None = None,
    ) -> None:
        self.screen_size = Vec2(screen_width, screen_height)
        self.title_height = title_height
        self.margin = margin
        self.window_margin = window_margin if window_margin is not None else RectOffset()

        self.input = UiInput()
        self.frame = 0
        self.time = 0.0

        self.windows: dict[int, UiWindow] = {}
        self.windows_focus_order: list[int] = []
        self.modal: UiWindow | None = None
        self.root_window = UiWindow(ROOT_ID, None, Vec2(), self.screen_size, force_focus=True)
        self.root_window.active = True
        self.root_window.was_active = True

        self.storage_u32: dict[int, int] = {}
        self.storage_any = AnyStorage()

        self.dragging: tuple[int, DragState] | None = None
        self.drag_hovered: int | None = None
        self.drag_hovered_previous_frame: int | None = None
        self.active_window: int | None = None
        self.hovered_window = ROOT_ID
        self.in_modal = False
        self.child_window_stack: list[int] = []

        self.last_item_clicked = False
        self.last_item_hovered = False

        self.clipboard_selection = ""
        self.clipboard = ""

        self.tab_selector = TabSelector()
        self.input_focus: int | None = None
        self._moving: tuple[int, Vec2] | None = None

    # window lifetime

    def begin_window(
        self,
        id: int,
        parent: int | None,
        position: Vec2,
        size: Vec2,
        titlebar: bool = True,
        movable: bool = True,
    ) -> UiWindow:
        """Open a window for this frame, creating it on first use."""
        if parent is not None:
            self.child_window_stack.append(
                self.active_window if self.active_window is not None else ROOT_ID
            )
        self.input.window_active = self._is_input_hovered(id)
        self.active_window = id

        title_height = self.title_height if titlebar else 0.0

        if parent == ROOT_ID:
            parent_force_focus = True
        elif parent is not None:
            parent_window = self.windows.get(parent)
            parent_force_focus = parent_window is not None and parent_window.force_focus
        else:
            parent_force_focus = False

        parent_clip: Rect | None = None
        if parent is not None and parent in self.windows:
            parent_clip = self.windows[parent].clipping_zone

        window = self.windows.get(id)
        if window is None:
            if parent is None:
                self.windows_focus_order.append(id)
            window = UiWindow(
                id,
                parent,
                position,
                size,
                title_height,
                self.window_margin,
                self.margin,
                movable,
                parent_force_focus,
            )
            self.windows[id] = window

        if not window.movable:
            window.set_position(position)
        window.size = size
        window.want_close = False
        window.active = True
        window.clipping_zone = parent_clip

        # child windows follow their parent every frame
        if parent is not None:
            window.set_position(position)
            holder = self.root_window if parent == ROOT_ID else self.windows.get(parent)
            if holder is not None and id not in holder.children:
                holder.children.append(id)

        return window

    def end_window(self) -> None:
        """Close the current window and return to its parent."""
        self.active_window = self.child_window_stack.pop() if self.child_window_stack else None
        self.input.window_active = self._is_input_hovered(
            self.active_window if self.active_window is not None else ROOT_ID
        )

    def begin_modal(self, id: int, position: Vec2, size: Vec2) -> UiWindow:
        """Open the modal window, which is drawn above everything else."""
        self.input.window_active = True
        self.in_modal = True
        if self.modal is None:
            self.modal = UiWindow(id, None, position, size, force_focus=True)
        modal = self.modal
        modal.parent = self.active_window
        modal.size = size
        modal.want_close = False
        modal.active = True
        modal.clipping_zone = Rect(position.x, position.y, size.x, size.y)
        modal.set_position(position)
        return modal

    def end_modal(self) -> None:
        """Close the modal window."""
        self.in_modal = False
        self.input.window_active = self._is_input_hovered(
            self.active_window if self.active_window is not None else ROOT_ID
        )

    # input events

    def mouse_down(self, position: tuple[float, float]) -> None:
        """Press the left button: start moving a title bar and raise the clicked window."""
        pos = Vec2(*position)
        self.input.is_mouse_down = True
        self.input.click_down = True
        self.input.mouse_position = pos

        modal = self.modal
        if modal is not None and modal.was_active and modal.full_rect().contains(pos):
            return

        for n, window_id in enumerate(self.windows_focus_order):
            window = self.windows[window_id]
            if not window.was_active:
                continue
            if window.top_level() and window.movable and window.title_rect().contains(pos):
                self._moving = (window.id, pos - window.position)
            if window.top_level() and window.full_rect().contains(pos):
                self.windows_focus_order.insert(0, self.windows_focus_order.pop(n))
                return

    def mouse_up(self, position: tuple[float, float]) -> None:
        """Release the left button."""
        self.input.is_mouse_down = False
        self.input.click_up = True
        self._moving = None

    def mouse_wheel(self, x: float, y: float) -> None:
        self.input.mouse_wheel = Vec2(x, y)

    def mouse_move(self, position: tuple[float, float]) -> None:
        """Track the pointer: find the hovered window and move a grabbed one."""
        pos = Vec2(*position)

        self.hovered_window = ROOT_ID
        for window_id in self.windows_focus_order:
            window = self.windows[window_id]
            if window.top_level() and window.was_active and window.full_rect().contains(pos):
                self.hovered_window = window.id
                break

        modal = self.modal
        if modal is not None and (modal.was_active or modal.active):
            if modal.full_rect().contains(pos):
                self.hovered_window = modal.id

        self.input.mouse_position = pos
        if self._moving is not None:
            window_id, grab = self._moving
            self.windows[window_id].set_position(pos - grab)

    def char_event(self, character: str, shift: bool, ctrl: bool) -> None:
        """A typed character."""
        self.input.modifier_ctrl = ctrl
        self.input.input_buffer.append(InputCharacter(character, shift, ctrl))

    def key_down(self, key: KeyCode, shift: bool, ctrl: bool) -> None:
        """A pressed key; Ctrl+C and Ctrl+X copy the current selection."""
        self.input.modifier_ctrl = ctrl
        if key is KeyCode.ESCAPE:
            self.input.escape = True
        if key is KeyCode.ENTER:
            self.input.enter = True
        if ctrl and key in (KeyCode.C, KeyCode.X):
            self.clipboard = self.clipboard_selection
        if key is not KeyCode.CONTROL:
            self.input.input_buffer.append(InputCharacter(key, shift, ctrl))

    # queries and commands

    def is_mouse_over(self, mouse_position: Vec2) -> bool:
        """True if the point lies over any window shown last frame."""
        for window_id in self.windows_focus_order:
            window = self.windows[window_id]
            if window.was_active and window.full_rect().contains(mouse_position):
                return True
        modal = self.modal
        return modal is not None and modal.was_active and modal.full_rect().contains(mouse_position)

    def is_mouse_captured(self) -> bool:
        return self.input.cursor_grabbed

    def is_dragging(self) -> bool:
        return self.dragging is not None

    def active_window_focused(self) -> bool:
        return self.active_window is not None and self._is_focused(self.active_window)

    def focus_window(self, id: int) -> None:
        """Raise a top-level window to the front."""
        if id in self.windows_focus_order:
            self.windows_focus_order.remove(id)
            self.windows_focus_order.insert(0, id)

    def move_window(self, id: int, position: Vec2) -> None:
        window = self.windows.get(id)
        if window is not None:
            window.set_position(position)

    def set_input_focus(self, id: int) -> None:
        self.input_focus = id

    def clear_input_focus(self) -> None:
        self.input_focus = None

    def get_bool(self, id: int) -> bool:
        """A flag kept under id, False until set through storage_any."""
        return self.storage_any.get_or_default(id, bool)

    def render_order(self) -> list[tuple[int, Vec2]]:
        """Window ids in drawing order, each with the offset it is drawn at."""
        order: list[tuple[int, Vec2]] = []
        self._collect(self.root_window, Vec2(), order)
        for window_id in reversed(self.windows_focus_order):
            window = self.windows[window_id]
            if window.was_active:
                self._collect(window, Vec2(), order)
        if self.modal is not None and self.modal.was_active:
            self._collect(self.modal, Vec2(), order)
        if self.dragging is not None:
            window_id, state = self.dragging
            if state.phase is DragPhase.DRAGGING:
                offset = self.input.mouse_position - state.position
                self._collect(self.windows[window_id], offset, order)
        return order

    def new_frame(self, delta: float) -> None:
        """Finish the frame: roll window activity over and clear per-frame input."""
        self.root_window.resize(self.screen_size)
        self.frame += 1
        self.time += delta

        self.last_item_clicked = False
        self.last_item_hovered = False

        self.drag_hovered_previous_frame = self.drag_hovered
        self.drag_hovered = None
        self.input.reset()
        self.input.window_active = self.hovered_window == ROOT_ID

        self.tab_selector.new_frame()

        windows = list(self.windows.values())
        if self.modal is not None:
            windows.append(self.modal)
        for window in windows:
            window.next_same_line = None
            window.was_active = window.active
            window.active = False
            window.children.clear()

        self.root_window.next_same_line = None
        self.root_window.children.clear()

    # helpers

    def _collect(self, window: UiWindow, offset: Vec2, order: list[tuple[int, Vec2]]) -> None:
        order.append((window.id, offset))
        for child_id in window.children:
            child = self.windows[child_id]
            if window.content_rect().overlaps(child.full_rect()):
                self._collect(child, offset, order)

    def _is_input_hovered(self, id: int) -> bool:
        if id == self.hovered_window:
            return True
        if self.in_modal:
            return True
        return bool(self.child_window_stack) and self.child_window_stack[0] == self.hovered_window

    def _is_focused(self, id: int) -> bool:
        window = self.windows.get(id)
        if window is not None and window.force_focus:
            return True
        focused = next(
            (
                wid
                for wid in self.windows_focus_order
                if self.windows[wid].was_active or self.windows[wid].active
            ),
            None,
        )
        if focused is not None:
            if id == focused:
                return True
            if self.child_window_stack:
                return self.child_window_stack[0] == focused
        return False