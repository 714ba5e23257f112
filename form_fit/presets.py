"""Form presets, spacing markers and fill thresholds.

WHY: Each printed form has a fixed physical line width, font and line budget.
Centralizing them as importable constants lets callers pick a form by name
and keeps the engine free of hidden defaults.

HOW: Each preset is a plain dict. ``target_width_pt()`` turns a preset's
physical width into a width budget in points, the unit the shipped
measurers report. The marker code points and fill thresholds used by the
analyzer live here too.

RULES:
- Presets are frozen constants. Never mutate them at runtime; copy first.
- Widths are in points (1 inch = 72 pt = 25.4 mm).
- Award statements allow 2 or 3 lines; the default AF1206 preset uses 3.
"""

import copy
from typing import Dict

# ---------------------------------------------------------------------------
# Spacing marker code points
# ---------------------------------------------------------------------------

EXPANDED_SPACE = "\u2004"  # three-per-em space
COMPRESSED_SPACE = "\u2006"  # six-per-em space
THIN_SPACE = "\u2009"

SPACING_MARKERS = (EXPANDED_SPACE, THIN_SPACE, COMPRESSED_SPACE)
NARROW_SPACES = (COMPRESSED_SPACE, THIN_SPACE)

# ---------------------------------------------------------------------------
# Fill thresholds (percent of target width)
# ---------------------------------------------------------------------------

OVERFLOW_PERCENT = 100
OPTIMAL_MIN_PERCENT = 95
WELL_FILLED_MIN_PERCENT = 85

# ---------------------------------------------------------------------------
# Form presets
# ---------------------------------------------------------------------------

POINTS_PER_INCH = 72.0
MM_PER_INCH = 25.4

# AF Form 1206 narrative block, 12 pt Times New Roman
PRESET_AF1206: Dict = {
    "label": "AF Form 1206 (3 lines)",
    "line_width_mm": 202.321,
    "padding_pt": 0.0,
    "font_size_pt": 12.0,
    "max_lines": 3,
}

PRESET_AF1206_TWO_LINE: Dict = {
    "label": "AF Form 1206 (2 lines)",
    "line_width_mm": 202.321,
    "padding_pt": 0.0,
    "font_size_pt": 12.0,
    "max_lines": 2,
}

PRESETS: Dict[str, Dict] = {
    "af1206": PRESET_AF1206,
    "af1206-2": PRESET_AF1206_TWO_LINE,
}


def get_preset(name: str) -> Dict:
    """Return a copy of the named form preset.

    Raises:
        ValueError: If the preset name is not recognized.
    """
    if name not in PRESETS:
        raise ValueError(
            "Unknown form '{}'. Available: {}".format(name, ", ".join(PRESETS.keys()))
        )
    return copy.deepcopy(PRESETS[name])


def mm_to_pt(mm: float) -> float:
    return mm / MM_PER_INCH * POINTS_PER_INCH


def target_width_pt(preset: Dict) -> float:
    """Usable line width of a preset in points (physical width minus padding)."""
    return mm_to_pt(preset["line_width_mm"]) - 2 * preset.get("padding_pt", 0.0)
