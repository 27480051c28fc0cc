"""Note state and how commands change it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .shortcuts import Action, Command, ResizeDirection

INCREMENT = 30.0
STEP = 10.0
DEFAULT_SIZE = (200.0 + 2 * INCREMENT, 200.0 + 2 * INCREMENT)
MIN_SIZE = 150.0
DEFAULT_SCALE = 1.15
SCALE_STEP = 0.1
MIN_SCALE = 0.5


class ViewportAction(Enum):
    """What the window must do after a command."""

    INNER_SIZE = auto()
    SET_SCALE = auto()
    CLOSE = auto()
    START_DRAG = auto()
    SPAWN_COPY = auto()


@dataclass(frozen=True)
class ViewportCommand:
    action: ViewportAction
    size: Optional[tuple[float, float]] = None
    scale: Optional[float] = None


@dataclass
class StickieState:
    """Text, window size in points, UI scale and a pending focus request."""

    text: str = ""
    window_size: tuple[float, float] = DEFAULT_SIZE
    ui_scale: float = DEFAULT_SCALE
    should_focus: bool = True

    def apply(self, command: Command) -> list[ViewportCommand]:
        """Update the state and return what the window has to do."""
        action = command.action
        if action is Action.ZOOM_IN:
            return self._set_scale(self.ui_scale + SCALE_STEP)
        if action is Action.ZOOM_OUT:
            return self._set_scale(max(self.ui_scale - SCALE_STEP, MIN_SCALE))
        if action is Action.ZOOM_RESET:
            return self._set_scale(DEFAULT_SCALE)
        if action is Action.RESIZE:
            self.window_size = self._resized(command.direction, command.shift)
            return [self._size_command()]
        if action is Action.RESET_SIZE:
            self.window_size = DEFAULT_SIZE
            return [self._size_command()]
        if action in (Action.NEW_WINDOW, Action.DUPLICATE):
            return [ViewportCommand(ViewportAction.SPAWN_COPY)]
        if action is Action.CLOSE_WINDOW:
            return [ViewportCommand(ViewportAction.CLOSE)]
        if action is Action.START_DRAG:
            return [ViewportCommand(ViewportAction.START_DRAG)]
        if action is Action.FOCUS_EDITOR:
            self.should_focus = True
        # Copying and hiding other notes have no effect on a single note.
        return []

    def take_focus_request(self) -> bool:
        """Return whether the editor should take focus, clearing the request."""
        wanted, self.should_focus = self.should_focus, False
        return wanted

    def _set_scale(self, scale: float) -> list[ViewportCommand]:
        self.ui_scale = scale
        return [ViewportCommand(ViewportAction.SET_SCALE, scale=scale)]

    def _size_command(self) -> ViewportCommand:
        return ViewportCommand(ViewportAction.INNER_SIZE, size=self.window_size)

    def _resized(
        self, direction: Optional[ResizeDirection], shift: bool
    ) -> tuple[float, float]:
        x, y = self.window_size
        amount = INCREMENT if shift else STEP
        if direction is ResizeDirection.UP:
            y += amount
        elif direction is ResizeDirection.DOWN:
            y = max(y - amount, MIN_SIZE)
        elif direction is ResizeDirection.LEFT:
            x = max(x - amount, MIN_SIZE)
        elif direction is ResizeDirection.RIGHT:
            x += amount
        elif direction is ResizeDirection.BOTH:
            delta = -INCREMENT if shift else INCREMENT
            x = max(x + delta, MIN_SIZE)
            y = max(y + delta, MIN_SIZE)
        else:
            raise ValueError("resize command without a direction")
        return (x, y)