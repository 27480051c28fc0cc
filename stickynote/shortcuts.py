"""Keyboard and pointer shortcuts, mapped to note commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Optional


class Key(Enum):
    """Keys that take part in a shortcut."""

    EQUALS = auto()
    MINUS = auto()
    NUM0 = auto()
    N = auto()
    W = auto()
    D = auto()
    C = auto()
    H = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()


@dataclass(frozen=True)
class Modifiers:
    """Held modifier keys; ``command`` is Cmd on macOS and Ctrl elsewhere."""

    command: bool = False
    shift: bool = False
    alt: bool = False


@dataclass(frozen=True)
class InputState:
    """One frame of input: modifiers, keys pressed this frame, primary click."""

    modifiers: Modifiers = field(default_factory=Modifiers)
    pressed: frozenset = frozenset()
    primary_pressed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "pressed", frozenset(self.pressed))

    def key_pressed(self, key: Key) -> bool:
        return key in self.pressed


class Action(Enum):
    """Every user-facing command in the app."""

    ZOOM_IN = auto()
    ZOOM_OUT = auto()
    ZOOM_RESET = auto()
    RESIZE = auto()
    RESET_SIZE = auto()
    NEW_WINDOW = auto()
    CLOSE_WINDOW = auto()
    DUPLICATE = auto()
    START_DRAG = auto()
    COPY_ALL = auto()
    HIDE_OTHERS = auto()
    FOCUS_EDITOR = auto()


class ResizeDirection(Enum):
    """Which way to resize on Alt+Arrow or Alt+plus/minus."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    BOTH = auto()


@dataclass(frozen=True)
class Command:
    """An action; resize commands also carry a direction and the shift flag."""

    action: Action
    direction: Optional[ResizeDirection] = None
    shift: bool = False


_COMMAND_KEYS: tuple[tuple[Key, Action], ...] = (
    (Key.EQUALS, Action.ZOOM_IN),
    (Key.MINUS, Action.ZOOM_OUT),
    (Key.NUM0, Action.ZOOM_RESET),
    (Key.N, Action.NEW_WINDOW),
    (Key.W, Action.CLOSE_WINDOW),
    (Key.D, Action.DUPLICATE),
)

_COMMAND_SHIFT_KEYS: tuple[tuple[Key, Action], ...] = (
    (Key.C, Action.COPY_ALL),
    (Key.H, Action.HIDE_OTHERS),
)

_ARROWS: tuple[tuple[Key, ResizeDirection], ...] = (
    (Key.ARROW_UP, ResizeDirection.UP),
    (Key.ARROW_DOWN, ResizeDirection.DOWN),
    (Key.ARROW_LEFT, ResizeDirection.LEFT),
    (Key.ARROW_RIGHT, ResizeDirection.RIGHT),
)


def _first(state: InputState, table: Iterable[tuple[Key, Action]]) -> Optional[Action]:
    return next((action for key, action in table if state.key_pressed(key)), None)


def detect(state: InputState) -> Optional[Command]:
    """Return the one command the input asks for, or None."""
    mods = state.modifiers

    if mods.command:
        action = _first(state, _COMMAND_KEYS)
        if action is None and mods.shift:
            action = _first(state, _COMMAND_SHIFT_KEYS)
        if action is None and state.primary_pressed:
            action = Action.START_DRAG
        if action is not None:
            return Command(action)

    if mods.alt:
        if state.key_pressed(Key.NUM0):
            return Command(Action.RESET_SIZE)
        for key, direction in _ARROWS:
            if state.key_pressed(key):
                return Command(Action.RESIZE, direction, mods.shift)
        if state.key_pressed(Key.EQUALS):
            return Command(Action.RESIZE, ResizeDirection.BOTH, False)
        if state.key_pressed(Key.MINUS):
            return Command(Action.RESIZE, ResizeDirection.BOTH, True)

    return None