"""Data models for the form line-fit engine.

WHY: Every stage of the fitting pipeline (split, break, analyze, summarize)
hands structured values to the next one. Keeping them as small dataclasses
gives the CLI, the HTTP service and the tests one shared vocabulary.

HOW: Tokens and line segments carry absolute offsets into the original
statement text. LineMetric wraps a segment with its measured fill. The
enums are str-based so they serialize to JSON without converters.

RULES:
- Segment offsets are ALWAYS absolute positions in the top-level text.
- Models are throwaway values: recompute them, never patch them.
- LineSegment.text == original[start_index:end_index] for every segment.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional


class SpacingMode(str, enum.Enum):
    """Per-character spacing classification inferred from marker code points."""

    normal = "normal"
    compressed = "compressed"
    expanded = "expanded"


class FillBand(str, enum.Enum):
    """Colour band of a single line's fill bar."""

    overflow = "overflow"
    optimal = "optimal"
    good = "good"
    under = "under"


class FillStatus(str, enum.Enum):
    """Aggregate status of a statement preview.

    RULES:
    - Evaluated in order: empty, overflow, optimal, room_to_add, well_filled.
    - ``message`` is the text the presentation layer shows under the bars.
    """

    empty = "empty"
    overflow = "overflow"
    optimal = "optimal"
    room_to_add = "room_to_add"
    well_filled = "well_filled"

    @property
    def message(self) -> str:
        return _STATUS_MESSAGES[self]


_STATUS_MESSAGES = {
    FillStatus.empty: "",
    FillStatus.overflow: "Text overflows - compress spacing or shorten text.",
    FillStatus.optimal: "Optimal fill! All lines 95-100%.",
    FillStatus.room_to_add: "Room to add more impact details.",
    FillStatus.well_filled: "Well-filled, could optimize further.",
}


@dataclass(frozen=True)
class Token:
    """A break-candidate substring.

    Attributes:
        text: The token text (boundary characters are tokens of their own).
        start: Offset of the token within the run it was split from.
    """

    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True)
class LineSegment:
    """One physical line produced by the line breaker.

    Attributes:
        text: The exact characters on this line, trailing spaces included.
        start_index: Absolute offset of the first character in the original text.
        end_index: Absolute offset one past the last character.
    """

    text: str
    start_index: int
    end_index: int


@dataclass(frozen=True)
class LineMetric:
    """Measured view of a LineSegment.

    Attributes:
        segment: The line this metric describes.
        width: Measured width of the right-trimmed line text.
        fill_percent: round(width / target_width * 100), never clamped.
        is_overflow: True when fill_percent exceeds 100.
        is_compressed: Line contains the compressed-spacing marker.
        is_expanded: Line contains the expanded-spacing marker.
        band: Fill bar colour band for this line.
    """

    segment: LineSegment
    width: float
    fill_percent: int
    is_overflow: bool
    is_compressed: bool
    is_expanded: bool
    band: FillBand

    @property
    def text(self) -> str:
        return self.segment.text

    @property
    def start_index(self) -> int:
        return self.segment.start_index

    @property
    def end_index(self) -> int:
        return self.segment.end_index


@dataclass(frozen=True)
class PreviewSummary:
    """Roll-up of every line metric for one statement."""

    status: FillStatus
    sentence_count: int
    line_count: int
    char_count: int
    overflow_count: int
    is_compressed: bool
    is_expanded: bool
    max_lines: Optional[int] = None
    exceeds_max_lines: bool = False

    @property
    def message(self) -> str:
        return self.status.message


@dataclass(frozen=True)
class StatementPreview:
    """Full fitting result for one (text, target width) pair."""

    text: str
    target_width: float
    lines: List[LineMetric] = field(default_factory=list)
    summary: Optional[PreviewSummary] = None

    @property
    def segments(self) -> List[LineSegment]:
        return [m.segment for m in self.lines]
