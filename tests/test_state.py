import pytest

from stickynote.shortcuts import Action, Command, ResizeDirection
from stickynote.state import (
    DEFAULT_SCALE,
    DEFAULT_SIZE,
    INCREMENT,
    MIN_SCALE,
    MIN_SIZE,
    SCALE_STEP,
    STEP,
    StickieState,
    ViewportAction,
    ViewportCommand,
)


def resize(direction, shift=False):
    return Command(Action.RESIZE, direction, shift)


def test_defaults():
    state = StickieState()
    assert state.window_size == DEFAULT_SIZE
    assert state.ui_scale == DEFAULT_SCALE
    assert state.text == ""


def test_focus_request_is_taken_once():
    state = StickieState()
    assert state.take_focus_request() is True
    assert state.take_focus_request() is False


def test_focus_editor_requests_focus_again():
    state = StickieState(should_focus=False)
    assert state.apply(Command(Action.FOCUS_EDITOR)) == []
    assert state.take_focus_request() is True


def test_zoom_in_and_reset():
    state = StickieState()
    result = state.apply(Command(Action.ZOOM_IN))
    assert state.ui_scale == pytest.approx(DEFAULT_SCALE + SCALE_STEP)
    assert result[0].action is ViewportAction.SET_SCALE
    assert result[0].scale == state.ui_scale
    state.apply(Command(Action.ZOOM_RESET))
    assert state.ui_scale == DEFAULT_SCALE


def test_zoom_out_is_clamped():
    state = StickieState(ui_scale=MIN_SCALE)
    state.apply(Command(Action.ZOOM_OUT))
    assert state.ui_scale == MIN_SCALE


@pytest.mark.parametrize("shift, amount", [(False, STEP), (True, INCREMENT)])
def test_up_grows_height(shift, amount):
    state = StickieState()
    result = state.apply(resize(ResizeDirection.UP, shift))
    assert state.window_size == (DEFAULT_SIZE[0], DEFAULT_SIZE[1] + amount)
    assert result == [ViewportCommand(ViewportAction.INNER_SIZE, size=state.window_size)]


def test_right_grows_width():
    state = StickieState()
    state.apply(resize(ResizeDirection.RIGHT, True))
    assert state.window_size == (DEFAULT_SIZE[0] + INCREMENT, DEFAULT_SIZE[1])


def test_shrinking_stops_at_minimum():
    state = StickieState(window_size=(MIN_SIZE + 5, MIN_SIZE + 5))
    state.apply(resize(ResizeDirection.DOWN))
    state.apply(resize(ResizeDirection.LEFT, True))
    assert state.window_size == (MIN_SIZE, MIN_SIZE)


def test_both_grows_and_shrinks():
    state = StickieState()
    state.apply(resize(ResizeDirection.BOTH, False))
    assert state.window_size == (DEFAULT_SIZE[0] + INCREMENT, DEFAULT_SIZE[1] + INCREMENT)
    state.apply(resize(ResizeDirection.BOTH, True))
    assert state.window_size == DEFAULT_SIZE


def test_reset_size():
    state = StickieState(window_size=(MIN_SIZE, MIN_SIZE))
    result = state.apply(Command(Action.RESET_SIZE))
    assert state.window_size == DEFAULT_SIZE
    assert result[0].size == DEFAULT_SIZE


def test_resize_without_direction_raises():
    with pytest.raises(ValueError):
        StickieState().apply(Command(Action.RESIZE))


@pytest.mark.parametrize(
    "action, expected",
    [
        (Action.NEW_WINDOW, ViewportAction.SPAWN_COPY),
        (Action.DUPLICATE, ViewportAction.SPAWN_COPY),
        (Action.CLOSE_WINDOW, ViewportAction.CLOSE),
        (Action.START_DRAG, ViewportAction.START_DRAG),
    ],
)
def test_window_actions(action, expected):
    assert StickieState().apply(Command(action)) == [ViewportCommand(expected)]


@pytest.mark.parametrize("action", [Action.COPY_ALL, Action.HIDE_OTHERS])
def test_actions_without_effect(action):
    state = StickieState()
    assert state.apply(Command(action)) == []
    assert state == StickieState()