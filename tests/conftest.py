"""Shared test fixtures for the line-fit test suite.

WHY: Most tests need the same deterministic measurer and the same sample
statements. Centralizing them keeps expected break points in one place.

HOW: The fixed-width measurer reports one unit per character, so expected
line breaks can be worked out by counting characters. Sample statements
live in tests/utils.py and are wrapped in fixtures here.

RULES:
- Tests never depend on installed fonts unless they skip without one.
- Widths in tests are in "characters" when the fixed measurer is used.
"""

import pytest

from statement_preview.measurers.fixed_width import FixedWidthMeasurer

from .utils import STATEMENT_200, UNBREAKABLE_90


@pytest.fixture
def fixed():
    """One unit per character."""
    return FixedWidthMeasurer()


@pytest.fixture
def statement_200():
    return STATEMENT_200


@pytest.fixture
def unbreakable_90():
    return UNBREAKABLE_90
