"""Fixed-width measurer: every character has the same advance."""

from __future__ import annotations

from statement_preview.measurers.base import BaseMeasurer


class FixedWidthMeasurer(BaseMeasurer):
    """Measures text as ``len(text) * char_width``.

    Deterministic and fast; used by tests and as a monospace stand-in.
    """

    def __init__(self, char_width: float = 1.0) -> None:
        if char_width <= 0:
            raise ValueError("char_width must be > 0, got {!r}".format(char_width))
        self.char_width = float(char_width)

    @property
    def name(self) -> str:
        return "Fixed width"

    def measure(self, text: str) -> float:
        return len(text) * self.char_width
