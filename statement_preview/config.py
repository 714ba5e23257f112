"""Configuration constants, .env loading and logging setup.

WHY: The preview host needs a handful of deployment knobs (default form,
measurer, font file, API bind address). Keeping them in one module makes
them easy to find and to override per machine without code changes.

HOW: python-dotenv loads the .env file on import. Constants are read from
the environment with defaults. load_font_path() gives a clear error when a
font-backed measurer is requested without a font configured.

RULES:
- Every default can be overridden via environment variables.
- Font sizes are in points; widths reported by measurers are in points.
- configure_logging() is only called by entry points (CLI, API server),
  never on import.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Engine defaults
# ---------------------------------------------------------------------------

DEFAULT_FORM = os.getenv("FORM_FIT_DEFAULT_FORM", "af1206")
DEFAULT_MEASURER = os.getenv("FORM_FIT_DEFAULT_MEASURER", "times_table")
DEFAULT_FONT_SIZE_PT = float(os.getenv("FORM_FIT_FONT_SIZE_PT", "12"))
FONT_PATH = os.getenv("FORM_FIT_FONT_PATH", "")

# ---------------------------------------------------------------------------
# API server
# ---------------------------------------------------------------------------

API_HOST = os.getenv("FORM_FIT_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("FORM_FIT_API_PORT", "8000"))

LOG_LEVEL = os.getenv("FORM_FIT_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_font_path(explicit: Optional[str] = None) -> str:
    """Resolve the TrueType font used by the Pillow measurer.

    RULES:
    - An explicit path wins over FORM_FIT_FONT_PATH.
    - Raises ValueError if neither is set.
    """
    path = (explicit or FONT_PATH or "").strip()
    if not path:
        raise ValueError(
            "No font configured for the pillow measurer. "
            "Pass --font or set FORM_FIT_FONT_PATH in the .env file."
        )
    return path


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for CLI and server entry points."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
