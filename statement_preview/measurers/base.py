"""Abstract base for width measurers.

WHY: The line-fit engine only needs ``measure(text) -> width``. The host
chooses how widths are produced (fixed width, glyph table, real font). A
common base keeps the CLI and the API able to work with any of them.

HOW: BaseMeasurer is an ABC with a ``name`` property and a ``measure()``
method. Instances are callable, so they can be handed to form_fit directly.

RULES:
- measure() must be deterministic for a given instance.
- Widths are non-negative floats in points.
- Widths need not be additive (kerning may apply).
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseMeasurer(ABC):
    """Abstract base for all width measurers.

    To add a new measurer:
    1. Create a new file in measurers/
    2. Subclass BaseMeasurer
    3. Implement measure() and name
    4. Register in MEASURERS dict in measurers/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable measurer name, e.g. 'Times-Roman glyph table'."""

    @abstractmethod
    def measure(self, text: str) -> float:
        """Return the rendered width of ``text`` in points."""

    def __call__(self, text: str) -> float:
        return self.measure(text)
