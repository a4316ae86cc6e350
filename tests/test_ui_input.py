from quadkit.primitives import Vec2
from quadkit.ui_input import InputCharacter, KeyCode, UiInput


def test_reset_clears_frame_events_but_keeps_held_state():
    state = UiInput()
    state.mouse_position = Vec2(3.0, 4.0)
    state.is_mouse_down = True
    state.click_down = True
    state.click_up = True
    state.escape = True
    state.enter = True
    state.mouse_wheel = Vec2(0.0, 2.0)
    state.input_buffer.append(InputCharacter("a"))

    state.reset()

    assert state.input_buffer == []
    assert (state.click_down, state.click_up, state.escape, state.enter) == (False,) * 4
    assert state.mouse_wheel == Vec2()
    assert state.mouse_position == Vec2(3.0, 4.0)
    assert state.is_mouse_down is True


def test_tab_detection():
    state = UiInput()
    assert state.tab_pressed() is False
    state.input_buffer.append(InputCharacter(KeyCode.TAB))
    assert state.tab_pressed() is True
    assert state.shift_tab_pressed() is False


def test_shift_tab_detection():
    state = UiInput(input_buffer=[InputCharacter(KeyCode.TAB, modifier_shift=True)])
    assert state.shift_tab_pressed() is True
    assert state.tab_pressed() is True


def test_typed_characters_are_not_tab():
    state = UiInput(input_buffer=[InputCharacter("\t", modifier_shift=True)])
    assert state.tab_pressed() is False
    assert state.shift_tab_pressed() is False


def test_input_character_defaults():
    event = InputCharacter(KeyCode.ENTER)
    assert (event.modifier_shift, event.modifier_ctrl) == (False, False)
    assert event.key is KeyCode.ENTER