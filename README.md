# stickynote

A tiny sticky note for your desktop: a frameless, always-on-top window
with a dark One-Dark body, a slim title bar and a plain text area. Every
action is reachable from the keyboard.

The window is drawn with Tk, which ships with most Python installations;
no other libraries are needed. The text uses the Inter font when it is
installed, and Tk's fallback font otherwise.

## Installing

```
pip install .
```

## Running

```
stickynote
```

or

```
python -m stickynote.window
```

Each run opens one note. The text area takes focus as soon as the note
appears, and a faint hint ("Type your note here…") shows while it is
empty. A thin border lights up while the note has focus. Drag the title
bar to move the note, or click the `x` in its corner to close it.

## Shortcuts

The shortcuts work while the text area has focus. "Cmd" is the Command
key on macOS and Control elsewhere.

| Keys                 | Action                                   |
|----------------------|------------------------------------------|
| Cmd + `=`            | Zoom in (step 0.1)                       |
| Cmd + `-`            | Zoom out (never below 0.5)               |
| Cmd + `0`            | Reset zoom to the default of 1.15        |
| Cmd + N              | Open a new note                          |
| Cmd + D              | Open a new note                          |
| Cmd + W              | Close this note                          |
| Cmd + Shift + C      | Copy all (reserved, does nothing yet)    |
| Cmd + Shift + H      | Hide other notes (reserved, does nothing yet) |
| Cmd + click          | Drag the note from the text area         |
| Alt + `0`            | Reset the note to its default size       |
| Alt + Up             | Taller by 10 (30 with Shift)             |
| Alt + Down           | Shorter by 10 (30 with Shift)            |
| Alt + Right          | Wider by 10 (30 with Shift)              |
| Alt + Left           | Narrower by 10 (30 with Shift)           |
| Alt + `=`            | Grow both sides by 30                    |
| Alt + `-`            | Shrink both sides by 30                  |

Sizes are in points: a note never shrinks below 150 × 150, and its
default size is 260 × 260. Zooming scales the font and the window
together.

## Using it as a library

The note's behaviour does not depend on the window toolkit.

- `stickynote.shortcuts` has `InputState` (the held `Modifiers`, the set
  of `Key`s pressed and whether the primary button was pressed) and
  `detect`, which turns it into a `Command` (an `Action`, plus a
  `ResizeDirection` and shift flag for resizes) or `None`.
- `stickynote.state` has `StickieState`, holding the text, window size,
  UI scale and a focus request. `StickieState.apply(command)` updates it
  and returns a list of `ViewportCommand`s (resize, set scale, close,
  start drag, open another note) for the window to carry out;
  `take_focus_request()` reports and clears the pending focus request.
- `stickynote.theme` has the `Colour` type and the palette constants.
- `stickynote.window` has `StickieWindow`, the Tk window, along with
  `input_from_key_event` and `input_from_click`, which build an
  `InputState` from Tk events, and `spawn_copy`, which starts another
  note process.

```python
from stickynote.shortcuts import InputState, Key, Modifiers, detect
from stickynote.state import StickieState

state = StickieState()
command = detect(InputState(Modifiers(alt=True), {Key.ARROW_UP}))
print(state.apply(command))   # one INNER_SIZE command
print(state.window_size)      # (260.0, 270.0)
```

## What it does not do

Notes are not saved: the text lives only as long as its window, and is
gone once the note is closed. "Copy all" and "hide other notes" are
recognised as shortcuts but have no effect. Each note is its own
process, with no link to the others.

## Development

```
pip install -e ".[test]"
pytest
```