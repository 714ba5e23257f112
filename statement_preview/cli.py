"""Command-line interface for the statement line-fit preview.

WHY: Writers and scripts need a quick way to check how a statement fits a
form without starting the web service: paste text, see the fill bars.

HOW: Uses argparse to accept an input file (or "-" for stdin), a form
preset, an optional width override, a measurer and font settings. Builds
the measurer from the registry, runs form_fit.preview_form_statement() and
prints a text report (or JSON with --json) to stdout.

RULES:
- Positional argument: text file path, or "-" / omitted for stdin
- Trailing newlines from files/stdin are stripped; inner text is untouched
- Errors go to stderr with exit code 1; the report goes to stdout
- --width is in the measurer's units (points for times_table and pillow)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from form_fit import PRESETS, preview_form_statement
from statement_preview.config import (
    DEFAULT_FONT_SIZE_PT,
    DEFAULT_FORM,
    DEFAULT_MEASURER,
    configure_logging,
)
from statement_preview.measurers import MEASURERS, build_measurer
from statement_preview.report import preview_to_dict, render_text_report

logger = logging.getLogger(__name__)


def _error(msg: str) -> None:
    """Print an error message to stderr."""
    print("Error: {}".format(msg), file=sys.stderr, flush=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="form-fit",
        description="Preview how a statement wraps on a fixed-width printed form.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Text file with the statement, or '-' for stdin (default).",
    )
    parser.add_argument(
        "--form",
        default=DEFAULT_FORM,
        choices=sorted(PRESETS.keys()),
        help="Form preset (default: %(default)s).",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=None,
        help="Override the line width, in the measurer's units.",
    )
    parser.add_argument(
        "--measurer",
        default=DEFAULT_MEASURER,
        choices=sorted(MEASURERS.keys()),
        help="Width measurer (default: %(default)s).",
    )
    parser.add_argument(
        "--font",
        default=None,
        help="TrueType font file for the pillow measurer.",
    )
    parser.add_argument(
        "--font-size",
        type=float,
        default=DEFAULT_FONT_SIZE_PT,
        help="Font size in points (default: %(default)s).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the preview as JSON instead of a text report.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: FORM_FIT_LOG_LEVEL or INFO).",
    )
    return parser


def _read_text(path: str) -> str:
    if path == "-":
        raw = sys.stdin.read()
    else:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    return raw.rstrip("\r\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the preview CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Process exit code: 0 on success, 1 on error.
    """
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        text = _read_text(args.input)
    except OSError as e:
        _error("Cannot read {}: {}".format(args.input, e))
        return 1

    try:
        measurer = build_measurer(args.measurer, args.font_size, args.font)
        preview = preview_form_statement(
            text, measurer, form=args.form, target_width=args.width
        )
    except (ValueError, FileNotFoundError) as e:
        _error(str(e))
        return 1

    logger.debug(
        "Previewed %d chars with %s: %d line(s)",
        len(text), measurer.name, preview.summary.line_count,
    )

    if args.json:
        print(json.dumps(preview_to_dict(preview), ensure_ascii=False, indent=2))
    else:
        print(render_text_report(preview))
    return 0


if __name__ == "__main__":
    sys.exit(main())
