from quadkit.primitives import Vec2
from quadkit.ui_input import InputCharacter, KeyCode
from quadkit.ui_storage import DragState
from quadkit.windows import WindowManager


def make():
    return WindowManager(800.0, 600.0)


def two_windows(manager):
    manager.begin_window(1, None, Vec2(0.0, 0.0), Vec2(100.0, 100.0))
    manager.end_window()
    manager.begin_window(2, None, Vec2(300.0, 300.0), Vec2(100.0, 100.0))
    manager.end_window()


def test_begin_window_registers_top_level_window():
    manager = make()
    window = manager.begin_window(1, None, Vec2(10.0, 10.0), Vec2(100.0, 100.0))
    manager.end_window()
    assert manager.windows_focus_order == [1]
    assert manager.windows[1] is window
    assert window.active
    assert window.top_level()


def test_child_window_not_in_focus_order_but_in_parent_children():
    manager = make()
    manager.begin_window(1, None, Vec2(0.0, 0.0), Vec2(200.0, 200.0))
    manager.begin_window(5, 1, Vec2(10.0, 30.0), Vec2(50.0, 50.0))
    assert manager.active_window == 5
    manager.end_window()
    assert manager.active_window == 1
    manager.end_window()
    assert manager.active_window is None
    assert manager.windows_focus_order == [1]
    assert manager.windows[1].children == [5]
    assert not manager.windows[5].top_level()


def test_mouse_down_brings_window_to_front():
    manager = make()
    two_windows(manager)
    manager.new_frame(0.016)
    manager.mouse_down((350.0, 350.0))
    assert manager.windows_focus_order == [2, 1]
    assert manager.input.is_mouse_down


def test_mouse_down_ignores_windows_not_shown_last_frame():
    manager = make()
    two_windows(manager)
    manager.mouse_down((350.0, 350.0))
    assert manager.windows_focus_order == [1, 2]


def test_dragging_title_bar_moves_window():
    manager = make()
    window = manager.begin_window(1, None, Vec2(10.0, 10.0), Vec2(100.0, 100.0))
    manager.end_window()
    manager.new_frame(0.016)
    before = window.position
    click, target = Vec2(20.0, 15.0), Vec2(50.0, 60.0)
    manager.mouse_down(tuple(click))
    manager.mouse_move(tuple(target))
    assert window.position == before + (target - click)
    assert window.cursor_area.x == window.position.x


def test_mouse_up_stops_moving():
    manager = make()
    window = manager.begin_window(1, None, Vec2(10.0, 10.0), Vec2(100.0, 100.0))
    manager.end_window()
    manager.new_frame(0.016)
    manager.mouse_down((20.0, 15.0))
    manager.mouse_up((20.0, 15.0))
    before = window.position
    manager.mouse_move((200.0, 200.0))
    assert window.position == before
    assert manager.input.click_up


def test_non_movable_window_is_not_moved():
    manager = make()
    window = manager.begin_window(1, None, Vec2(10.0, 10.0), Vec2(100.0, 100.0), True, False)
    manager.end_window()
    manager.new_frame(0.016)
    manager.mouse_down((20.0, 15.0))
    manager.mouse_move((200.0, 200.0))
    assert window.position == Vec2(10.0, 10.0)


def test_mouse_move_sets_hovered_window():
    manager = make()
    two_windows(manager)
    manager.new_frame(0.016)
    manager.mouse_move((320.0, 320.0))
    assert manager.hovered_window == 2
    manager.mouse_move((700.0, 50.0))
    assert manager.hovered_window == 0
    assert manager.input.mouse_position == Vec2(700.0, 50.0)


def test_is_mouse_over_only_after_window_was_shown():
    manager = make()
    two_windows(manager)
    assert not manager.is_mouse_over(Vec2(50.0, 50.0))
    manager.new_frame(0.016)
    assert manager.is_mouse_over(Vec2(50.0, 50.0))
    assert not manager.is_mouse_over(Vec2(200.0, 200.0))


def test_focus_window_and_move_window():
    manager = make()
    two_windows(manager)
    manager.focus_window(2)
    assert manager.windows_focus_order == [2, 1]
    manager.focus_window(99)
    assert manager.windows_focus_order == [2, 1]
    manager.move_window(1, Vec2(40.0, 40.0))
    assert manager.windows[1].position == Vec2(40.0, 40.0)
    manager.move_window(99, Vec2(1.0, 1.0))
    assert set(manager.windows) == {1, 2}


def test_active_window_focused():
    manager = make()
    manager.begin_window(1, None, Vec2(0.0, 0.0), Vec2(100.0, 100.0))
    assert manager.active_window_focused()
    manager.end_window()
    manager.begin_window(2, None, Vec2(300.0, 300.0), Vec2(100.0, 100.0))
    assert not manager.active_window_focused()
    manager.end_window()
    assert not manager.active_window_focused()


def test_input_focus_set_and_clear():
    manager = make()
    manager.set_input_focus(12)
    assert manager.input_focus == 12
    manager.clear_input_focus()
    assert manager.input_focus is None


def test_get_bool_defaults_false_and_reads_storage():
    manager = make()
    assert manager.get_bool(3) is False
    manager.storage_any[3] = not manager.get_bool(3)
    assert manager.get_bool(3) is True


def test_ctrl_c_copies_selection():
    manager = make()
    manager.clipboard_selection = "selected text"
    manager.key_down(KeyCode.C, False, True)
    assert manager.clipboard == "selected text"
    assert manager.input.modifier_ctrl


def test_key_down_flags_and_buffer():
    manager = make()
    manager.key_down(KeyCode.ESCAPE, False, False)
    manager.key_down(KeyCode.ENTER, True, False)
    manager.key_down(KeyCode.CONTROL, False, True)
    assert manager.input.escape and manager.input.enter
    assert manager.input.input_buffer == [
        InputCharacter(KeyCode.ESCAPE, False, False),
        InputCharacter(KeyCode.ENTER, True, False),
    ]


def test_char_event_buffers_character():
    manager = make()
    manager.char_event("a", True, False)
    assert manager.input.input_buffer == [InputCharacter("a", True, False)]


def test_mouse_wheel_recorded_and_reset():
    manager = make()
    manager.mouse_wheel(0.0, -3.0)
    assert manager.input.mouse_wheel == Vec2(0.0, -3.0)
    manager.new_frame(0.016)
    assert manager.input.mouse_wheel == Vec2()


def test_new_frame_rolls_activity_over():
    manager = make()
    window = manager.begin_window(1, None, Vec2(0.0, 0.0), Vec2(100.0, 100.0))
    manager.end_window()
    manager.char_event("x", False, False)
    manager.new_frame(0.5)
    assert manager.frame == 1
    assert manager.time == 0.5
    assert window.was_active and not window.active
    assert manager.input.input_buffer == []
    manager.new_frame(0.5)
    assert not window.was_active


def test_render_order_follows_reverse_focus_order():
    manager = make()
    two_windows(manager)
    assert [wid for wid, _ in manager.render_order()] == [0]
    manager.new_frame(0.016)
    assert [wid for wid, _ in manager.render_order()] == [0, 2, 1]


def test_render_order_includes_children_after_parent():
    manager = make()
    for _ in range(2):
        manager.begin_window(1, None, Vec2(0.0, 0.0), Vec2(200.0, 200.0))
        manager.begin_window(5, 1, Vec2(10.0, 30.0), Vec2(50.0, 50.0))
        manager.end_window()
        manager.end_window()
        if _ == 0:
            manager.new_frame(0.016)
    assert [wid for wid, _ in manager.render_order()] == [0, 1, 5]


def test_render_order_draws_dragged_window_at_offset():
    manager = make()
    two_windows(manager)
    anchor = Vec2(5.0, 5.0)
    manager.dragging = (1, DragState.dragging(anchor))
    manager.mouse_move((20.0, 20.0))
    assert manager.is_dragging()
    assert manager.render_order()[-1] == (1, Vec2(20.0, 20.0) - anchor)


def test_modal_blocks_focus_change():
    manager = make()
    two_windows(manager)
    modal = manager.begin_modal(9, Vec2(280.0, 280.0), Vec2(200.0, 200.0))
    manager.end_modal()
    assert not manager.in_modal
    assert modal.parent is None
    manager.new_frame(0.016)
    assert manager.is_mouse_over(Vec2(450.0, 450.0))
    manager.mouse_down((350.0, 350.0))
    assert manager.windows_focus_order == [1, 2]
    manager.mouse_move((350.0, 350.0))
    assert manager.hovered_window == 9