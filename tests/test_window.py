import sys
from unittest import mock

import pytest

from stickynote.shortcuts import Action, Command, Key, ResizeDirection, detect
from stickynote.window import (
    ALT_MASK,
    COMMAND_MASK,
    SHIFT_MASK,
    input_from_click,
    input_from_key_event,
    spawn_copy,
)


def test_command_equal_zooms_in():
    state = input_from_key_event("equal", COMMAND_MASK)
    assert state.pressed == frozenset({Key.EQUALS})
    assert state.modifiers.command
    assert detect(state) == Command(Action.ZOOM_IN)


def test_shifted_letter_maps_to_key():
    state = input_from_key_event("C", COMMAND_MASK | SHIFT_MASK)
    assert detect(state) == Command(Action.COPY_ALL)


def test_alt_shift_arrow_resizes():
    state = input_from_key_event("Up", ALT_MASK | SHIFT_MASK)
    assert detect(state) == Command(Action.RESIZE, ResizeDirection.UP, True)


def test_alt_minus_shrinks_both():
    state = input_from_key_event("minus", ALT_MASK)
    assert detect(state) == Command(Action.RESIZE, ResizeDirection.BOTH, True)


def test_unknown_keysym_presses_nothing():
    state = input_from_key_event("F5", COMMAND_MASK)
    assert state.pressed == frozenset()
    assert detect(state) is None


def test_plain_typing_has_no_command():
    assert detect(input_from_key_event("n", 0)) is None


@pytest.mark.parametrize("mask, expected", [(COMMAND_MASK, Command(Action.START_DRAG)), (0, None)])
def test_click(mask, expected):
    state = input_from_click(mask)
    assert state.primary_pressed
    assert detect(state) == expected


def test_spawn_copy_starts_module():
    with mock.patch("subprocess.Popen") as popen:
        result = spawn_copy()
    popen.assert_called_once_with([sys.executable, "-m", "stickynote.window"])
    assert result is popen.return_value


def test_spawn_copy_ignores_failure():
    with mock.patch("subprocess.Popen", side_effect=OSError):
        assert spawn_copy() is None