"""Text and JSON renderings of a statement preview.

WHY: The CLI prints fill bars for a human, and both the CLI (--json) and
the HTTP API hand the same structure to programs. One module owns both
renderings so they never drift apart.

HOW: preview_to_dict() flattens a StatementPreview into plain JSON types.
render_text_report() draws one bar per line plus the status message.

RULES:
- Enum values are emitted as their string values.
- Bars are clamped to the bar width; the percentage is not.
"""

from __future__ import annotations

from typing import Any, Dict, List

from form_fit import LineMetric, StatementPreview

BAR_WIDTH = 20


def metric_to_dict(metric: LineMetric) -> Dict[str, Any]:
    return {
        "text": metric.text,
        "start_index": metric.start_index,
        "end_index": metric.end_index,
        "width": metric.width,
        "fill_percent": metric.fill_percent,
        "is_overflow": metric.is_overflow,
        "is_compressed": metric.is_compressed,
        "is_expanded": metric.is_expanded,
        "band": metric.band.value,
    }


def preview_to_dict(preview: StatementPreview) -> Dict[str, Any]:
    """Flatten a preview into JSON-serializable types."""
    summary = preview.summary
    return {
        "target_width": preview.target_width,
        "lines": [metric_to_dict(m) for m in preview.lines],
        "summary": {
            "status": summary.status.value,
            "message": summary.message,
            "sentence_count": summary.sentence_count,
            "line_count": summary.line_count,
            "char_count": summary.char_count,
            "overflow_count": summary.overflow_count,
            "is_compressed": summary.is_compressed,
            "is_expanded": summary.is_expanded,
            "max_lines": summary.max_lines,
            "exceeds_max_lines": summary.exceeds_max_lines,
        },
    }


def _bar(fill_percent: int) -> str:
    filled = min(BAR_WIDTH, max(0, round(fill_percent * BAR_WIDTH / 100)))
    return "[" + "#" * filled + "." * (BAR_WIDTH - filled) + "]"


def _plural(count: int, noun: str) -> str:
    return "{} {}{}".format(count, noun, "" if count == 1 else "s")


def render_text_report(preview: StatementPreview) -> str:
    """Render the preview as a plain-text fill report.

    Example::

        L1  [###################.]   97%  Led 36 Amn in O&M of 730 servers...
        1 sentence | 1 line | 48 chars
        Optimal fill! All lines 95-100%.
    """
    summary = preview.summary
    lines = []  # type: List[str]
    for i, metric in enumerate(preview.lines, 1):
        flag = " !" if metric.is_overflow else ""
        lines.append("L{:<3d}{}  {:>4d}%{}  {}".format(
            i, _bar(metric.fill_percent), metric.fill_percent, flag, metric.text.rstrip()
        ))

    counts = [
        _plural(summary.sentence_count, "sentence"),
        _plural(summary.line_count, "line"),
        "{} chars".format(summary.char_count),
    ]
    if summary.is_compressed:
        counts.append("compressed")
    if summary.is_expanded:
        counts.append("expanded")
    lines.append(" | ".join(counts))

    if summary.exceeds_max_lines:
        lines.append("Exceeds the form's {}-line limit.".format(summary.max_lines))
    if summary.message:
        lines.append(summary.message)
    return "\n".join(lines)
