"""Width measurer registry.

WHY: The CLI and the API let callers pick how text is measured. A central
dict makes the choice a name lookup and adding a measurer a one-line change.

HOW: MEASURERS maps string keys to measurer *classes*. build_measurer()
constructs one from the common knobs (font size, font path).

RULES:
- Keys are snake_case identifiers (used in CLI flags and API requests).
- Unknown keys raise ValueError.
- The fixed_width measurer ignores font settings and uses one unit per char.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from statement_preview.config import load_font_path
from statement_preview.measurers.fixed_width import FixedWidthMeasurer
from statement_preview.measurers.glyph_table import GlyphTableMeasurer
from statement_preview.measurers.pillow_font import PillowFontMeasurer

if TYPE_CHECKING:
    from statement_preview.measurers.base import BaseMeasurer

MEASURERS: dict[str, type[BaseMeasurer]] = {
    "fixed_width": FixedWidthMeasurer,
    "times_table": GlyphTableMeasurer,
    "pillow": PillowFontMeasurer,
}


def build_measurer(
    name: str,
    font_size_pt: float = 12.0,
    font_path: Optional[str] = None,
) -> BaseMeasurer:
    """Construct a measurer by registry key.

    Raises:
        ValueError: If the name is unknown, or the pillow measurer has no font.
        FileNotFoundError: If the pillow measurer's font file does not exist.
    """
    if name not in MEASURERS:
        raise ValueError(
            "Unknown measurer '{}'. Available: {}".format(name, ", ".join(MEASURERS.keys()))
        )
    if name == "fixed_width":
        return FixedWidthMeasurer()
    if name == "pillow":
        return PillowFontMeasurer(load_font_path(font_path), font_size_pt)
    return GlyphTableMeasurer(font_size_pt)
