"""Pillow measurer backed by a real TrueType/OpenType font.

WHY: The glyph table ignores kerning and the exact font the form uses. When
the host has the real font file, FreeType shaping gives the widths the
printed form will actually show.

HOW: ImageFont.truetype() loads the font at the requested size and
FreeTypeFont.getlength() returns the advance of a run. Pillow sizes are in
pixels; treating one pixel as one point (72 dpi) keeps widths in points.
Loaded fonts are cached per (path, size) because loading is the slow part.

RULES:
- Widths are NOT additive (kerning applies across glyph pairs).
- A missing font file raises FileNotFoundError at construction time.
- The cached font objects are only read after loading.
- Fractional point sizes are passed through as-is (needs Pillow 10.1+).
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path

from PIL import ImageFont

from statement_preview.measurers.base import BaseMeasurer

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=16)
def load_font(font_path: str, font_size_pt: float) -> ImageFont.FreeTypeFont:
    """Load and cache a FreeType font at the given point size."""
    logger.info("Loading font %s at %.1fpt", font_path, font_size_pt)
    return ImageFont.truetype(font_path, size=font_size_pt)


class PillowFontMeasurer(BaseMeasurer):
    """Measures text with FreeType via Pillow."""

    def __init__(self, font_path: str, font_size_pt: float = 12.0) -> None:
        path = Path(font_path)
        if not path.is_file():
            raise FileNotFoundError("Font file not found: {}".format(font_path))
        self.font_path = str(path)
        self.font_size_pt = float(font_size_pt)
        self._font = load_font(self.font_path, self.font_size_pt)

    @property
    def name(self) -> str:
        return "Pillow font ({})".format(Path(self.font_path).name)

    def measure(self, text: str) -> float:
        return float(self._font.getlength(text))
