"""The borderless, always-on-top note window."""

from __future__ import annotations

import argparse
import subprocess
import sys
from typing import Optional, Sequence

from .shortcuts import Action, InputState, Key, Modifiers, detect
from .state import MIN_SIZE, StickieState, ViewportAction, ViewportCommand
from .theme import BODY_BG, FOCUS_STROKE_COLOR, TITLE_TEXT_COLOR

TITLE = "Stickie"
HINT_TEXT = "Type your note here…"
BASE_FONT_SIZE = 11
TITLE_BAR_HEIGHT = 28

SHIFT_MASK = 0x0001
CONTROL_MASK = 0x0004
if sys.platform == "darwin":
    COMMAND_MASK = 0x0008
    ALT_MASK = 0x0010
else:
    COMMAND_MASK = CONTROL_MASK
    ALT_MASK = 0x0008 | 0x20000

_KEYSYMS = {
    "equal": Key.EQUALS,
    "plus": Key.EQUALS,
    "minus": Key.MINUS,
    "underscore": Key.MINUS,
    "0": Key.NUM0,
    "parenright": Key.NUM0,
    "kp_0": Key.NUM0,
    "n": Key.N,
    "w": Key.W,
    "d": Key.D,
    "c": Key.C,
    "h": Key.H,
    "up": Key.ARROW_UP,
    "down": Key.ARROW_DOWN,
    "left": Key.ARROW_LEFT,
    "right": Key.ARROW_RIGHT,
}


def _modifiers(mask: int) -> Modifiers:
    return Modifiers(
        command=bool(mask & COMMAND_MASK),
        shift=bool(mask & SHIFT_MASK),
        alt=bool(mask & ALT_MASK),
    )


def input_from_key_event(keysym: str, modifier_mask: int) -> InputState:
    """Build the input state for one key press from a Tk keysym and state mask."""
    key = _KEYSYMS.get(keysym.lower())
    return InputState(_modifiers(modifier_mask), {key} if key else set())


def input_from_click(modifier_mask: int) -> InputState:
    """Build the input state for a primary-button press."""
    return InputState(_modifiers(modifier_mask), primary_pressed=True)


def spawn_copy() -> Optional[subprocess.Popen]:
    """Start another note window; failures are ignored."""
    try:
        return subprocess.Popen([sys.executable, "-m", "stickynote.window"])
    except OSError:
        return None


class StickieWindow:
    """A note window driven by a StickieState."""

    def __init__(self, state: Optional[StickieState] = None) -> None:
        import tkinter as tk
        from tkinter import font as tkfont

        self.state = state or StickieState()
        self._drag_offset: Optional[tuple[int, int]] = None

        self.root = tk.Tk()
        self.root.title(TITLE)
        self.root.overrideredirect(True)
        self.root.attributes("-topmost", True)
        self.root.configure(
            background=BODY_BG.hex(),
            highlightthickness=1,
            highlightbackground=BODY_BG.hex(),
        )
        self._font = tkfont.Font(family="Inter", size=BASE_FONT_SIZE)

        bar = tk.Frame(self.root, height=TITLE_BAR_HEIGHT, background=BODY_BG.hex())
        bar.pack(side="top", fill="x", padx=8, pady=4)
        label = tk.Label(
            bar, text=TITLE, font=self._font,
            background=BODY_BG.hex(), foreground=TITLE_TEXT_COLOR.hex(),
        )
        label.pack(side="left")
        close = tk.Label(
            bar, text="x", font=self._font, cursor="hand2",
            background=BODY_BG.hex(), foreground=TITLE_TEXT_COLOR.hex(),
        )
        close.pack(side="right")
        close.bind("<Button-1>", lambda _e: self.root.destroy())
        for widget in (bar, label):
            widget.bind("<Button-1>", self._begin_drag)
            widget.bind("<B1-Motion>", self._drag)
            widget.bind("<ButtonRelease-1>", self._end_drag)

        body = tk.Frame(self.root, background=BODY_BG.hex())
        body.pack(side="top", fill="both", expand=True, padx=8, pady=8)
        scrollbar = tk.Scrollbar(body, orient="vertical")
        scrollbar.pack(side="right", fill="y")
        self.text = tk.Text(
            body, wrap="word", height=10, font=self._font, borderwidth=0,
            highlightthickness=0, background=BODY_BG.hex(),
            foreground=TITLE_TEXT_COLOR.hex(), insertbackground=TITLE_TEXT_COLOR.hex(),
            yscrollcommand=scrollbar.set,
        )
        self.text.pack(side="left", fill="both", expand=True)
        scrollbar.configure(command=self.text.yview)
        self.text.insert("1.0", self.state.text)
        self.text.edit_modified(False)

        hint_colour = FOCUS_STROKE_COLOR.blend_over(TITLE_TEXT_COLOR).hex()
        self._hint = tk.Label(
            self.text, text=HINT_TEXT, font=self._font,
            background=BODY_BG.hex(), foreground=hint_colour,
        )
        self._hint.bind("<Button-1>", lambda _e: self.text.focus_set())
        self._update_hint()

        self.text.bind("<KeyPress>", self._on_key)
        self.text.bind("<Button-1>", self._on_click)
        self.text.bind("<B1-Motion>", self._on_motion)
        self.text.bind("<ButtonRelease-1>", self._end_drag)
        self.text.bind("<<Modified>>", self._on_modified)
        self.root.bind("<FocusIn>", lambda _e: self._set_glow(True))
        self.root.bind("<FocusOut>", lambda _e: self._set_glow(False))

        self._apply_size()
        self.root.after_idle(self._focus_if_requested)

    def run(self) -> None:
        """Show the window until it is closed."""
        self.root.mainloop()

    def _set_glow(self, focused: bool) -> None:
        colour = FOCUS_STROKE_COLOR.blend_over(BODY_BG) if focused else BODY_BG
        self.root.configure(highlightbackground=colour.hex())

    def _update_hint(self) -> None:
        if self.state.text:
            self._hint.place_forget()
        else:
            self._hint.place(x=0, y=0)

    def _on_modified(self, _event) -> None:
        self.state.text = self.text.get("1.0", "end-1c")
        self._update_hint()
        self.text.edit_modified(False)

    def _on_key(self, event):
        command = detect(input_from_key_event(event.keysym, event.state))
        if command is None:
            return None
        self._perform(self.state.apply(command), event)
        return "break"

    def _on_click(self, event):
        command = detect(input_from_click(event.state))
        if command is None or command.action is not Action.START_DRAG:
            return None
        self._perform(self.state.apply(command), event)
        return "break"

    def _on_motion(self, event):
        if self._drag_offset is None:
            return None
        self._drag(event)
        return "break"

    def _perform(self, commands: list[ViewportCommand], event=None) -> None:
        for command in commands:
            if command.action is ViewportAction.INNER_SIZE:
                self._apply_size()
            elif command.action is ViewportAction.SET_SCALE:
                self._font.configure(size=max(1, round(BASE_FONT_SIZE * self.state.ui_scale)))
                self._apply_size()
            elif command.action is ViewportAction.CLOSE:
                self.root.destroy()
                return
            elif command.action is ViewportAction.START_DRAG and event is not None:
                self._begin_drag(event)
            elif command.action is ViewportAction.SPAWN_COPY:
                spawn_copy()
        self._focus_if_requested()

    def _apply_size(self) -> None:
        scale = self.state.ui_scale
        width, height = (round(v * scale) for v in self.state.window_size)
        minimum = round(MIN_SIZE * scale)
        self.root.minsize(minimum, minimum)
        self.root.geometry(f"{width}x{height}")

    def _focus_if_requested(self) -> None:
        if self.state.take_focus_request():
            self.text.focus_set()
            self.text.tag_add("sel", "1.0", "end-1c")
            self.text.mark_set("insert", "end-1c")

    def _begin_drag(self, event) -> None:
        self._drag_offset = (
            event.x_root - self.root.winfo_x(),
            event.y_root - self.root.winfo_y(),
        )

    def _drag(self, event) -> None:
        if self._drag_offset is None:
            return
        dx, dy = self._drag_offset
        self.root.geometry(f"+{event.x_root - dx}+{event.y_root - dy}")

    def _end_drag(self, _event) -> None:
        self._drag_offset = None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="stickynote", description="A small sticky note.")
    parser.parse_args(argv)
    StickieWindow().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())