"""Unit tests for fit_lines().

WHY: The line breaker must reproduce the form renderer's break points
exactly, never lose a character, and always terminate, even with hostile
measurers.

HOW: Uses the fixed-width measurer (one unit per character) so expected
breaks can be counted by hand, plus a few custom measurers to reach the
character-level fallback branches and the no-progress guard.

RULES:
- Every test checks reconstruction where segments are produced.
- Expected break points are the renderer's, including its quirks.
"""

import math

import pytest

from form_fit import LineSegment, MeasurementError, analyze_lines, fit_lines

from .utils import SCENARIO_A, weighted_measurer


def _texts(segments):
    return [s.text for s in segments]


def _assert_well_formed(text, segments, base_offset=0):
    assert "".join(_texts(segments)) == text
    assert segments[0].start_index == base_offset
    assert segments[-1].end_index == base_offset + len(text)
    for prev, nxt in zip(segments, segments[1:]):
        assert prev.end_index == nxt.start_index
    for seg in segments:
        assert text[seg.start_index - base_offset:seg.end_index - base_offset] == seg.text


class TestDegenerateInput:
    """Empty and whitespace-only runs."""

    def test_empty_text_yields_one_empty_segment(self, fixed):
        assert fit_lines("", fixed, 10) == [LineSegment("", 0, 0)]

    def test_whitespace_only_is_one_segment_kept_verbatim(self, fixed):
        assert fit_lines("    ", fixed, 2) == [LineSegment("    ", 0, 4)]

    def test_base_offset_applies_to_empty_segment(self, fixed):
        assert fit_lines("", fixed, 10, base_offset=7) == [LineSegment("", 7, 7)]


class TestWholeRunFit:
    """A run that fits is never split."""

    def test_scenario_a_single_segment(self, fixed):
        segments = fit_lines(SCENARIO_A, fixed, 60)
        assert segments == [LineSegment(SCENARIO_A, 0, len(SCENARIO_A))]
        metrics = analyze_lines(segments, fixed, 60)
        assert metrics[0].is_overflow is False

    def test_exact_fit_is_not_split(self, fixed):
        text = "aaaa bbbb"
        assert _texts(fit_lines(text, fixed, 9)) == [text]

    def test_trailing_spaces_do_not_count(self, fixed):
        assert _texts(fit_lines("abc   ", fixed, 3)) == ["abc   "]


class TestTokenGreedy:
    """Word/punctuation-level greedy wrapping."""

    def test_scenario_b_three_lines(self, fixed, statement_200):
        assert len(statement_200) == 200
        segments = fit_lines(statement_200, fixed, 80)
        assert len(segments) == 3
        _assert_well_formed(statement_200, segments)
        starts = [s.start_index for s in segments]
        assert starts == sorted(set(starts))

    def test_scenario_b_break_points(self, fixed, statement_200):
        segments = fit_lines(statement_200, fixed, 80)
        # 13 words + 13 spaces per full line
        assert [len(s.text) for s in segments] == [78, 78, 44]
        assert segments[0].text.endswith(" ")

    def test_longest_fitting_prefix_wins_ties(self, fixed):
        segments = fit_lines("aaaa bbbb cccc", fixed, 9)
        assert _texts(segments) == ["aaaa bbbb ", "cccc"]

    def test_breaks_after_slash_and_hyphen(self, fixed):
        segments = fit_lines("network/server cross-trained", fixed, 15)
        assert _texts(segments) == ["network/server ", "cross-trained"]
        _assert_well_formed("network/server cross-trained", segments)

    def test_base_offset_makes_offsets_absolute(self, fixed):
        text = "aaaa bbbb cccc"
        segments = fit_lines(text, fixed, 9, base_offset=100)
        assert segments == [
            LineSegment("aaaa bbbb ", 100, 110),
            LineSegment("cccc", 110, 114),
        ]


class TestCharacterFallback:
    """Character-level breaking for unbreakable runs."""

    def test_scenario_c_unbreakable_run(self, fixed, unbreakable_90):
        segments = fit_lines(unbreakable_90, fixed, 40)
        assert len(segments) >= 2
        assert all(" " not in s.text for s in segments)
        assert [len(s.text) for s in segments] == [40, 40, 10]
        _assert_well_formed(unbreakable_90, segments)

    def test_first_token_exactly_target_uses_fallback(self, fixed):
        # "aaaaa" is not strictly narrower than 5, so the cut is by character
        segments = fit_lines("aaaaa bb", fixed, 5)
        assert _texts(segments) == ["aaaaa", " bb"]

    def test_backward_scan_keeps_estimate_heuristic(self):
        measure = weighted_measurer({"W": 3.0})
        text = "WWWWW" + "a" * 15
        segments = fit_lines(text, measure, 10)
        # Line two stops at "WWaaa" (width 9) although "WWaaaa" is exactly 10:
        # the backward scan wants a prefix strictly narrower than the target.
        assert _texts(segments) == ["WWW", "WWaaa", "a" * 10, "aa"]
        _assert_well_formed(text, segments)

    def test_one_character_per_line_when_every_glyph_is_wide(self):
        measure = weighted_measurer({}, default=10.0)
        text = "abcdefghij"
        segments = fit_lines(text, measure, 15)
        assert _texts(segments) == list(text)


class TestNoProgressGuard:
    """The loop stops when a cut would consume nothing."""

    def test_unplaceable_text_emitted_as_one_overflowing_line(self):
        measure = weighted_measurer({}, default=10.0)
        segments = fit_lines("ab cd", measure, 5)
        assert segments == [LineSegment("ab cd", 0, 5)]
        metrics = analyze_lines(segments, measure, 5)
        assert metrics[0].is_overflow is True

    def test_zero_width_prefix_scan_terminates(self):
        # Measurer that only reports a width for the full string
        def measure(text):
            return 100.0 if len(text) >= 6 else 0.0

        segments = fit_lines("abcdef", measure, 50)
        _assert_well_formed("abcdef", segments)


class TestProperties:
    """Reconstruction, offsets, idempotence and bounded passes."""

    SAMPLES = [
        "Led 36 Amn in O&M of 730 servers across 4 bases.",
        "Drove 15% cut in mx delays/saved $2.1M--#1 of 12 sq's in AFGSC!",
        "Supercalifragilisticexpialidocious" * 4,
        "  spaced   out    words    everywhere   ",
        "a\u2006b\u2006c\u2004d " * 12,
    ]

    @pytest.mark.parametrize("text", SAMPLES)
    @pytest.mark.parametrize("width", [7, 23, 50])
    def test_reconstruction_and_offsets(self, fixed, text, width):
        segments = fit_lines(text, fixed, width)
        _assert_well_formed(text, segments)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, fixed, text):
        assert fit_lines(text, fixed, 17) == fit_lines(text, fixed, 17)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_segment_count_bounded_by_length(self, text):
        wide = weighted_measurer({}, default=10.0)
        assert len(fit_lines(text, wide, 3)) <= max(1, len(text))

    @pytest.mark.parametrize("text", SAMPLES)
    def test_fits_or_flagged(self, fixed, text):
        target = 23
        segments = fit_lines(text, fixed, target)
        for metric in analyze_lines(segments, fixed, target):
            if fixed(metric.text.rstrip()) > target:
                assert metric.is_overflow

    def test_non_additive_measurer(self):
        # Kerning-like measurer: "AV" pairs are narrower than their parts
        def measure(text):
            return len(text) - 0.4 * text.count("AV")

        text = "AVAVAV AVAV AVAVAVAV AV AVAVA"
        segments = fit_lines(text, measure, 8)
        _assert_well_formed(text, segments)

    def test_long_input_does_not_recurse(self):
        wide = weighted_measurer({}, default=10.0)
        text = "x" * 2000
        segments = fit_lines(text, wide, 15)
        assert len(segments) == 2000


class TestContractViolations:
    """Bad widths and bad measurers fail fast."""

    @pytest.mark.parametrize("target", [0, -5, math.nan, math.inf, True, "80"])
    def test_invalid_target_width(self, fixed, target):
        with pytest.raises(ValueError, match="target_width"):
            fit_lines("some text", fixed, target)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -1.0, None, "12"])
    def test_invalid_measured_width(self, bad):
        with pytest.raises(MeasurementError):
            fit_lines("some text", lambda t: bad, 10)

    def test_measurer_exception_propagates(self):
        def measure(text):
            raise RuntimeError("font backend gone")

        with pytest.raises(RuntimeError, match="font backend gone"):
            fit_lines("some text", measure, 10)
