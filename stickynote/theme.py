"""Colour palette for the note window."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Colour:
    """An RGBA colour with premultiplied alpha, one byte per channel."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name}={value} is outside 0..255")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Colour:
        """An opaque colour."""
        return cls(r, g, b, 255)

    @classmethod
    def from_white_alpha(cls, alpha: int) -> Colour:
        """Translucent white, premultiplied: every channel equals ``alpha``."""
        return cls(alpha, alpha, alpha, alpha)

    def hex(self) -> str:
        """``#rrggbb`` for opaque colours, ``#rrggbbaa`` otherwise."""
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return text if self.a == 255 else f"{text}{self.a:02x}"

    def blend_over(self, background: Colour) -> Colour:
        """Composite this colour over ``background``."""
        keep = 255 - self.a

        def mix(front: int, back: int) -> int:
            return min(255, front + round(back * keep / 255))

        return Colour(
            mix(self.r, background.r),
            mix(self.g, background.g),
            mix(self.b, background.b),
            mix(self.a, background.a),
        )


BODY_BG = Colour.from_rgb(40, 44, 52)
"""One-Dark base background for the note body."""
TOP_BAR_BG = Colour.from_rgb(62, 68, 81)
"""Top bar accent from the One-Dark theme."""
FOCUS_STROKE_COLOR = Colour.from_white_alpha(5)
"""Border colour while the window has focus."""
GLOW_STROKE_WIDTH = 1.0
CORNER_RADIUS = 12.0
TITLE_TEXT_COLOR = Colour.from_rgb(171, 178, 191)
"""Title and button text colour."""
BUTTON_HOVER_BG = Colour.from_white_alpha(10)