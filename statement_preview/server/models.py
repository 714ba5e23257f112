"""Pydantic request/response models for the preview HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: One request model for POST /preview and one response model per
endpoint. Status and band fields reuse the engine's str enums directly.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Status and band fields are typed with form_fit.FillStatus / FillBand
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from form_fit import FillBand, FillStatus


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class PreviewRequest(BaseModel):
    """A statement to lay out on a form.

    RULES:
    - form defaults to the configured default form
    - width overrides the form's line width (measurer units)
    - measurer defaults to the configured default measurer
    """

    text: str = Field(description="Statement text, spacing markers included.")
    form: Optional[str] = Field(
        default=None,
        description="Form preset key (e.g. 'af1206'). Defaults to the server default.",
    )
    width: Optional[float] = Field(
        default=None,
        gt=0,
        description="Line width override, in the measurer's units.",
    )
    measurer: Optional[str] = Field(
        default=None,
        description="Measurer key (e.g. 'times_table'). Defaults to the server default.",
    )
    font_size_pt: Optional[float] = Field(
        default=None,
        gt=0,
        description="Font size in points for font-based measurers.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "Led 36 Amn in O&M of 730 servers across 4 bases.",
                "form": "af1206",
                "measurer": "times_table",
            }
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class LineMetricModel(BaseModel):
    """Fill metrics of one physical line."""

    text: str = Field(description="Exact characters on this line.")
    start_index: int = Field(description="Offset of the first character in the statement.")
    end_index: int = Field(description="Offset one past the last character.")
    width: float = Field(description="Measured width of the right-trimmed line.")
    fill_percent: int = Field(description="Width as a percentage of the line width (not clamped).")
    is_overflow: bool = Field(description="True when fill_percent exceeds 100.")
    is_compressed: bool = Field(description="Line contains compressed spacing.")
    is_expanded: bool = Field(description="Line contains expanded spacing.")
    band: FillBand = Field(description="Fill bar colour band.")


class SummaryModel(BaseModel):
    """Aggregate view of all lines."""

    status: FillStatus = Field(description="Aggregate fill status.")
    message: str = Field(description="Human-readable status message.")
    sentence_count: int = Field(description="Non-empty sentences split on . ! ?")
    line_count: int = Field(description="Number of physical lines.")
    char_count: int = Field(description="Characters in the statement.")
    overflow_count: int = Field(description="Lines that overflow.")
    is_compressed: bool = Field(description="Statement contains compressed spacing.")
    is_expanded: bool = Field(description="Statement contains expanded spacing.")
    max_lines: Optional[int] = Field(default=None, description="Line budget of the form.")
    exceeds_max_lines: bool = Field(description="More lines than the form allows.")


class PreviewResponse(BaseModel):
    """Line-fit preview of a statement."""

    target_width: float = Field(description="Line width used, in measurer units.")
    lines: List[LineMetricModel] = Field(description="Lines in reading order.")
    summary: SummaryModel = Field(description="Aggregate status and counts.")


class FormInfo(BaseModel):
    """Description of an available form preset."""

    key: str = Field(description="Form identifier used in requests.")
    label: str = Field(description="Human-readable form name.")
    target_width: float = Field(description="Usable line width in points.")
    font_size_pt: float = Field(description="Font size the form is set in.")
    max_lines: int = Field(description="Lines allowed per statement.")


class MeasurerInfo(BaseModel):
    """Description of an available width measurer."""

    key: str = Field(description="Measurer identifier used in requests.")
    needs_font: bool = Field(description="True if a font file must be configured.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
