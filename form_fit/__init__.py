"""Fixed-width line-fit engine for printed-form narrative statements.

WHY: Statements written for a standardized form must fit a fixed number of
physical lines, and writers tune wording and spacing until every line is
nearly full. This package decides exactly how a statement wraps on the
form and how full each line is, so the editor can show honest fill bars.

HOW: The single high-level entry point is preview_statement(text, measure,
target_width). It breaks the text into lines, measures each one and rolls
the metrics into a status. The lower-level stages (split_tokens,
fit_lines, analyze_lines, summarize_lines) are exported for callers that
need only part of the pipeline.

RULES:
- The width measurer is always passed in. This package never measures
  text by itself and holds no global state.
- Text content is never modified; only line boundaries are computed.
- Line segment offsets are absolute in the original statement text.
"""

from typing import Optional

from .core import (
    LINE_ACTIONS,
    LineActions,
    MeasurementError,
    analyze_lines,
    classify_spacing,
    count_sentences,
    fill_status,
    fit_lines,
    preview_statement,
    request_line_action,
    spacing_modes,
    split_tokens,
    summarize_lines,
)
from .models import (
    FillBand,
    FillStatus,
    LineMetric,
    LineSegment,
    PreviewSummary,
    SpacingMode,
    StatementPreview,
    Token,
)
from .presets import PRESETS, get_preset, target_width_pt

__all__ = [
    "preview_form_statement",
    "preview_statement",
    "fit_lines",
    "split_tokens",
    "analyze_lines",
    "summarize_lines",
    "fill_status",
    "count_sentences",
    "classify_spacing",
    "spacing_modes",
    "request_line_action",
    "LineActions",
    "LINE_ACTIONS",
    "MeasurementError",
    "FillBand",
    "FillStatus",
    "LineMetric",
    "LineSegment",
    "PreviewSummary",
    "SpacingMode",
    "StatementPreview",
    "Token",
    "PRESETS",
    "get_preset",
    "target_width_pt",
]


def preview_form_statement(
    text: str,
    measure,
    form: str = "af1206",
    target_width: Optional[float] = None,
) -> StatementPreview:
    """Preview a statement against a named form preset.

    RULES:
    - form must be a key of PRESETS; unknown names raise ValueError.
    - target_width overrides the preset's width but keeps its line budget.
    - The measurer must report widths in points to match preset widths.

    Args:
        text: Statement text.
        measure: Width measurer, ``measure(run) -> width``.
        form: Preset name. Default: "af1206".
        target_width: Optional width override in the measurer's units.

    Returns:
        StatementPreview for the statement.
    """
    preset = get_preset(form)
    width = target_width if target_width is not None else target_width_pt(preset)
    return preview_statement(text, measure, width, max_lines=preset["max_lines"])
