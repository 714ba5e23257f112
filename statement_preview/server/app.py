"""FastAPI application serving statement line-fit previews.

WHY: The statement editor recomputes fill bars on every keystroke. An HTTP
endpoint lets any front end (or script) get the exact line layout without
embedding the engine, and exposes the available forms and measurers.

HOW: A single FastAPI app exposes four endpoints. POST /preview builds the
requested measurer, runs form_fit.preview_form_statement() synchronously
and converts the result with report.preview_to_dict().

RULES:
- Every preview is a pure recomputation; the app keeps no per-request state
- Caller errors (unknown form/measurer, missing font) return 400 ErrorResponse
- Measurers are built per request; Pillow fonts are cached by the measurer
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException

from form_fit import PRESETS, preview_form_statement, target_width_pt
from statement_preview import __version__
from statement_preview.config import (
    API_HOST,
    API_PORT,
    DEFAULT_FONT_SIZE_PT,
    DEFAULT_FORM,
    DEFAULT_MEASURER,
    configure_logging,
)
from statement_preview.measurers import MEASURERS, build_measurer
from statement_preview.report import preview_to_dict
from statement_preview.server.models import (
    ErrorResponse,
    FormInfo,
    HealthResponse,
    MeasurerInfo,
    PreviewRequest,
    PreviewResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Statement Line-Fit Preview API",
    description=(
        "Lays out narrative statements on fixed-width printed forms and "
        "reports how full each physical line is."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Endpoints: Preview
# ---------------------------------------------------------------------------


@app.post(
    "/preview",
    response_model=PreviewResponse,
    tags=["preview"],
    summary="Preview a statement",
    description=(
        "Break the statement into physical lines for the chosen form and "
        "return per-line fill metrics plus an aggregate status."
    ),
    responses={400: {"model": ErrorResponse, "description": "Unknown form or measurer."}},
)
def create_preview(request: PreviewRequest) -> PreviewResponse:
    form = request.form or DEFAULT_FORM
    measurer_key = request.measurer or DEFAULT_MEASURER
    font_size = request.font_size_pt or DEFAULT_FONT_SIZE_PT

    try:
        measurer = build_measurer(measurer_key, font_size)
        preview = preview_form_statement(
            request.text, measurer, form=form, target_width=request.width
        )
    except (ValueError, FileNotFoundError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "Preview: %d chars, form=%s, measurer=%s -> %d line(s), %s",
        len(request.text), form, measurer_key,
        preview.summary.line_count, preview.summary.status.value,
    )
    return PreviewResponse(**preview_to_dict(preview))


# ---------------------------------------------------------------------------
# Endpoints: Discovery
# ---------------------------------------------------------------------------


@app.get(
    "/forms",
    response_model=List[FormInfo],
    tags=["forms"],
    summary="List form presets",
)
def list_forms() -> List[FormInfo]:
    return [
        FormInfo(
            key=key,
            label=preset["label"],
            target_width=target_width_pt(preset),
            font_size_pt=preset["font_size_pt"],
            max_lines=preset["max_lines"],
        )
        for key, preset in PRESETS.items()
    ]


@app.get(
    "/measurers",
    response_model=List[MeasurerInfo],
    tags=["measurers"],
    summary="List width measurers",
)
def list_measurers() -> List[MeasurerInfo]:
    return [MeasurerInfo(key=key, needs_font=(key == "pillow")) for key in MEASURERS]


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api() -> None:
    """Entry point for the form-fit-api console script."""
    import uvicorn

    configure_logging()
    uvicorn.run(app, host=API_HOST, port=API_PORT)
