"""Core line-fit logic: token splitting, line breaking, fill analysis, summary.

WHY: A statement typed into a printed form must wrap exactly the way the
form's PDF renderer wraps it, otherwise the fill bars lie. This module
reproduces that renderer's convention: greedy word/punctuation-level
wrapping, with a character-level fallback for runs that cannot break.

HOW: The pipeline has four stages:
  1. split_tokens(): cut a run into break-candidate tokens at whitespace,
     spacing markers and a few punctuation marks (lookahead required).
  2. fit_lines(): peel one line at a time off the remaining text: whole-run
     fit check, token-level greedy scan, or character-level estimate-and-scan.
  3. analyze_lines(): measure every line and derive fill percent, overflow
     and spacing flags.
  4. summarize_lines(): roll the metrics into one status for display.

RULES:
- The width measurer is an explicit parameter of every call. No globals.
- Widths are never assumed additive: every candidate prefix is re-measured.
- Break points are reproduced as-is. The character-level cut is an estimate
  followed by a local scan, NOT a binary search. Do not "improve" it.
- No-progress guards end the loop whenever a cut would consume nothing.
- A measurer that returns a non-finite or negative width is a caller bug:
  raise MeasurementError instead of emitting a layout.
"""

import logging
import math
import numbers
import re
from typing import Callable, List, Optional, Tuple

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
from .presets import (
    COMPRESSED_SPACE,
    EXPANDED_SPACE,
    NARROW_SPACES,
    OPTIMAL_MIN_PERCENT,
    OVERFLOW_PERCENT,
    SPACING_MARKERS,
    WELL_FILLED_MIN_PERCENT,
)

logger = logging.getLogger(__name__)

Measure = Callable[[str], float]


class MeasurementError(ValueError):
    """Raised when a width measurer returns something that is not a width."""


# =============================================================================
# Argument checks
# =============================================================================

def _check_target_width(target_width: float) -> float:
    if (isinstance(target_width, bool)
            or not isinstance(target_width, numbers.Real)
            or not math.isfinite(target_width)
            or target_width <= 0):
        raise ValueError(
            "target_width must be a finite number > 0, got {!r}".format(target_width)
        )
    return float(target_width)


def _checked(measure: Measure) -> Measure:
    """Wrap a measurer so every width it reports is validated."""

    def width_of(run: str) -> float:
        width = measure(run)
        if (isinstance(width, bool)
                or not isinstance(width, numbers.Real)
                or not math.isfinite(width)
                or width < 0):
            raise MeasurementError(
                "Measurer returned {!r} for run {!r}".format(width, run)
            )
        return float(width)

    return width_of


# =============================================================================
# Token Splitting
# =============================================================================

# The renderer's whitespace set. Python's str.isspace() and re's \s differ:
# they add \x1c-\x1f and \x85 and leave out \ufeff.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

BREAK_CHARS = "".join(SPACING_MARKERS) + WHITESPACE + "?/|-%!"

# Break after whitespace, a spacing marker or ? / | - % ! but only when a
# letter, digit, "+" or backslash follows.
BREAK_RE = re.compile("([" + re.escape(BREAK_CHARS) + r"])(?=[a-zA-Z0-9+\\])")


def _rstrip(run: str) -> str:
    return run.rstrip(WHITESPACE)


def split_tokens(text: str) -> List[Token]:
    """Split a run into break-candidate tokens.

    WHY: Line breaks may only fall at the same opportunities the form's
    renderer uses. Each token is the smallest unit that can start a line.

    HOW: re.split() with a capturing group keeps each boundary character as
    its own piece; empty pieces are dropped. Offsets are accumulated so each
    token knows where it sits in ``text``.

    RULES:
    - "".join(t.text for t in tokens) == text, always.
    - A string with no qualifying boundary comes back as a single token.
    - The empty string yields no tokens.

    Args:
        text: The run to split.

    Returns:
        Ordered list of Token objects.
    """
    tokens = []
    pos = 0
    for piece in BREAK_RE.split(text):
        if not piece:
            continue
        tokens.append(Token(text=piece, start=pos))
        pos += len(piece)
    return tokens


# =============================================================================
# Line Breaking
# =============================================================================

def fit_lines(
    text: str,
    measure: Measure,
    target_width: float,
    base_offset: int = 0,
) -> List[LineSegment]:
    """Break a statement into physical lines for a fixed line width.

    WHY: Downstream fill bars and per-line actions need to know exactly which
    characters land on which printed line, as absolute offsets.

    HOW: Repeatedly peels the first line off the remaining text with
    _break_line() and advances the offset by the consumed length. The loop
    stands in for the renderer's recursion so deep inputs cannot exhaust the
    interpreter stack.

    RULES:
    - Concatenating the returned segment texts reproduces ``text`` exactly.
    - segment[i].end_index == segment[i + 1].start_index.
    - A run that already fits is never split.
    - Each pass consumes at least one character, so there are at most
      max(1, len(text)) segments.

    Args:
        text: Statement text (may contain spacing marker characters).
        measure: Width measurer, ``measure(run) -> width``.
        target_width: Per-line width budget in the measurer's units.
        base_offset: Offset of ``text`` within a larger original text.

    Returns:
        Ordered list of LineSegment objects.

    Raises:
        ValueError: If target_width is not a finite positive number.
        MeasurementError: If the measurer returns an invalid width.
    """
    target_width = _check_target_width(target_width)
    width_of = _checked(measure)

    segments = []  # type: List[LineSegment]
    remaining = text
    offset = base_offset

    while True:
        line, rest = _break_line(remaining, width_of, target_width)
        segments.append(LineSegment(text=line, start_index=offset, end_index=offset + len(line)))
        if rest is None:
            return segments
        offset += len(line)
        remaining = rest


def _break_line(
    text: str, width_of: Measure, target_width: float
) -> Tuple[str, Optional[str]]:
    """Return (first_line, remainder); remainder is None when text is done."""
    # Nothing visible to lay out
    if not text or not text.strip(WHITESPACE):
        return text, None

    full_width = width_of(_rstrip(text))
    if full_width <= target_width:
        return text, None

    tokens = split_tokens(text)

    if tokens and width_of(_rstrip(tokens[0].text)) < target_width:
        cut = _greedy_token_cut(tokens, width_of, target_width)
    else:
        logger.debug("First token of %r exceeds %.2f, breaking by character", text, target_width)
        cut = _character_cut(text, full_width, width_of, target_width)

    line, rest = text[:cut], text[cut:]
    if rest == text or not rest:
        logger.debug("No progress breaking %r, emitting it as one overflowing line", text)
        return text, None
    return line, rest


def _greedy_token_cut(tokens: List[Token], width_of: Measure, target_width: float) -> int:
    """Length of the longest token prefix that still fits.

    Scans forward re-measuring the accumulated prefix after each token and
    stops at the first prefix that overflows.
    """
    answer = 0
    accumulated = ""
    for i, token in enumerate(tokens, 1):
        accumulated += token.text
        if width_of(_rstrip(accumulated)) > target_width:
            answer = i - 1
            break
    return sum(len(t.text) for t in tokens[:answer])


def _character_cut(
    text: str, full_width: float, width_of: Measure, target_width: float
) -> int:
    """Estimate a character cut from the average glyph width, then scan locally."""
    avg_char_width = full_width / len(text)
    guess = int(math.floor(target_width / avg_char_width))
    answer = guess

    if width_of(text[:guess]) > target_width:
        for i in range(guess - 1, 0, -1):
            if width_of(text[:i]) < target_width:
                answer = i
                break
    else:
        for i in range(guess, len(text) + 1):
            if width_of(text[:i]) > target_width:
                answer = i - 1
                break

    return answer


# =============================================================================
# Spacing Inspection
# =============================================================================

def classify_spacing(char: str) -> SpacingMode:
    """Classify one character by the spacing marker it is (if any)."""
    if char == EXPANDED_SPACE:
        return SpacingMode.expanded
    if char in NARROW_SPACES:
        return SpacingMode.compressed
    return SpacingMode.normal


def spacing_modes(text: str) -> List[SpacingMode]:
    return [classify_spacing(c) for c in text]


def text_spacing_flags(text: str) -> Tuple[bool, bool]:
    """Return (is_compressed, is_expanded) by literal marker containment."""
    return COMPRESSED_SPACE in text, EXPANDED_SPACE in text


# =============================================================================
# Fill Analysis
# =============================================================================

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


def fill_band(fill_percent: int) -> FillBand:
    if fill_percent > OVERFLOW_PERCENT:
        return FillBand.overflow
    if fill_percent >= OPTIMAL_MIN_PERCENT:
        return FillBand.optimal
    if fill_percent >= WELL_FILLED_MIN_PERCENT:
        return FillBand.good
    return FillBand.under


def analyze_lines(
    segments: List[LineSegment], measure: Measure, target_width: float
) -> List[LineMetric]:
    """Measure each line and derive its fill metrics.

    RULES:
    - Width is measured on the right-trimmed line text.
    - fill_percent is not clamped; values above 100 show overflow size.
    - is_overflow is derived from fill_percent, not from the raw width.
    """
    target_width = _check_target_width(target_width)
    width_of = _checked(measure)

    metrics = []
    for segment in segments:
        width = width_of(_rstrip(segment.text))
        fill_percent = round_half_up(width / target_width * 100)
        is_compressed, is_expanded = text_spacing_flags(segment.text)
        metrics.append(LineMetric(
            segment=segment,
            width=width,
            fill_percent=fill_percent,
            is_overflow=fill_percent > OVERFLOW_PERCENT,
            is_compressed=is_compressed,
            is_expanded=is_expanded,
            band=fill_band(fill_percent),
        ))
    return metrics


# =============================================================================
# Preview Summary
# =============================================================================

SENTENCE_SPLIT_RE = re.compile(r"[.!?]")


def count_sentences(text: str) -> int:
    return sum(1 for s in SENTENCE_SPLIT_RE.split(text) if s.strip(WHITESPACE))


def fill_status(metrics: List[LineMetric]) -> FillStatus:
    """Classify a set of line metrics.

    RULES:
    - Precedence: empty, overflow, optimal, room_to_add, well_filled.
    - Any overflowing line wins over everything else.
    """
    if not metrics:
        return FillStatus.empty
    if any(m.is_overflow for m in metrics):
        return FillStatus.overflow
    if all(OPTIMAL_MIN_PERCENT <= m.fill_percent <= OVERFLOW_PERCENT for m in metrics):
        return FillStatus.optimal
    if any(m.fill_percent < WELL_FILLED_MIN_PERCENT for m in metrics):
        return FillStatus.room_to_add
    return FillStatus.well_filled


def summarize_lines(
    text: str,
    metrics: List[LineMetric],
    max_lines: Optional[int] = None,
) -> PreviewSummary:
    """Roll line metrics up into a single PreviewSummary.

    Args:
        text: The statement the metrics were computed for.
        metrics: Output of analyze_lines().
        max_lines: Optional line budget of the target form.

    Returns:
        PreviewSummary with status, counts and spacing flags.
    """
    is_compressed, is_expanded = text_spacing_flags(text)
    return PreviewSummary(
        status=fill_status(metrics),
        sentence_count=count_sentences(text),
        line_count=len(metrics),
        char_count=len(text),
        overflow_count=sum(1 for m in metrics if m.is_overflow),
        is_compressed=is_compressed,
        is_expanded=is_expanded,
        max_lines=max_lines,
        exceeds_max_lines=max_lines is not None and len(metrics) > max_lines,
    )


def preview_statement(
    text: str,
    measure: Measure,
    target_width: float,
    max_lines: Optional[int] = None,
) -> StatementPreview:
    """Run the full pipeline: fit_lines() -> analyze_lines() -> summarize_lines()."""
    segments = fit_lines(text, measure, target_width)
    metrics = analyze_lines(segments, measure, target_width)
    return StatementPreview(
        text=text,
        target_width=float(target_width),
        lines=metrics,
        summary=summarize_lines(text, metrics, max_lines),
    )


# =============================================================================
# Line Actions
# =============================================================================

LineCallback = Callable[[int, LineSegment], None]

LINE_ACTIONS = ("compress", "normalize")


class LineActions:
    """Host callbacks for per-line spacing requests.

    The engine never edits text. A "compress" or "normalize" request is
    forwarded to the host with the line index and its segment so the host
    can rewrite the characters in ``[start_index, end_index)``.
    """

    def __init__(
        self,
        on_compress: Optional[LineCallback] = None,
        on_normalize: Optional[LineCallback] = None,
    ) -> None:
        self.on_compress = on_compress
        self.on_normalize = on_normalize

    def callback_for(self, action: str) -> Optional[LineCallback]:
        if action not in LINE_ACTIONS:
            raise ValueError(
                "Unknown line action '{}'. Available: {}".format(action, ", ".join(LINE_ACTIONS))
            )
        return self.on_compress if action == "compress" else self.on_normalize


def request_line_action(
    preview: StatementPreview,
    index: int,
    action: str,
    hooks: LineActions,
) -> bool:
    """Forward a per-line spacing request to the host.

    Args:
        preview: The preview the user is looking at.
        index: Zero-based line index within ``preview.lines``.
        action: "compress" or "normalize".
        hooks: Host callbacks.

    Returns:
        True if a callback was invoked, False if the host registered none.

    Raises:
        IndexError: If index does not name a line of the preview.
        ValueError: If action is not a known line action.
    """
    callback = hooks.callback_for(action)
    if index < 0 or index >= len(preview.lines):
        raise IndexError(
            "Line index {} out of range for {} line(s)".format(index, len(preview.lines))
        )
    if callback is None:
        return False
    callback(index, preview.lines[index].segment)
    return True
