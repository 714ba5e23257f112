"""Shared sample statements and measurer helpers for tests."""

from typing import Callable, Dict

SCENARIO_A = "Led 36 Amn in O&M of 730 servers across 4 bases."

# 33 five-letter words, last one extended to bring the total to 200 chars
STATEMENT_200 = " ".join(["alpha"] * 33) + "xyz"

# 90 characters, no break opportunities at all
UNBREAKABLE_90 = "Abc123" * 15


def weighted_measurer(weights: Dict[str, float], default: float = 1.0) -> Callable[[str], float]:
    """Additive measurer with per-character widths."""

    def measure(text: str) -> float:
        return sum(weights.get(c, default) for c in text)

    return measure
