"""Tests for the form-fit command-line interface.

WHY: The CLI is the quickest way to check a statement. Its JSON output is
consumed by scripts, so the shape is pinned with a JSON Schema.

HOW: Calls cli.main() directly with an argv list and captures stdout and
stderr with capsys. Input comes from tmp_path files or a patched stdin.

RULES:
- No test starts a subprocess
- Measurer and form are always passed explicitly
"""

import io
import json

import jsonschema
import pytest

import statement_preview.config as config
from statement_preview import cli

from .utils import SCENARIO_A, STATEMENT_200

LINE_SCHEMA = {
    "type": "object",
    "required": [
        "text", "start_index", "end_index", "width", "fill_percent",
        "is_overflow", "is_compressed", "is_expanded", "band",
    ],
    "properties": {
        "text": {"type": "string"},
        "start_index": {"type": "integer", "minimum": 0},
        "end_index": {"type": "integer", "minimum": 0},
        "width": {"type": "number", "minimum": 0},
        "fill_percent": {"type": "integer", "minimum": 0},
        "is_overflow": {"type": "boolean"},
        "is_compressed": {"type": "boolean"},
        "is_expanded": {"type": "boolean"},
        "band": {"enum": ["overflow", "optimal", "good", "under"]},
    },
}

PREVIEW_SCHEMA = {
    "type": "object",
    "required": ["target_width", "lines", "summary"],
    "properties": {
        "target_width": {"type": "number", "exclusiveMinimum": 0},
        "lines": {"type": "array", "items": LINE_SCHEMA},
        "summary": {
            "type": "object",
            "required": [
                "status", "message", "sentence_count", "line_count",
                "char_count", "overflow_count", "is_compressed",
                "is_expanded", "max_lines", "exceeds_max_lines",
            ],
            "properties": {
                "status": {"enum": ["empty", "overflow", "optimal", "room_to_add", "well_filled"]},
                "message": {"type": "string"},
                "line_count": {"type": "integer", "minimum": 0},
                "max_lines": {"type": ["integer", "null"]},
                "exceeds_max_lines": {"type": "boolean"},
            },
        },
    },
}


@pytest.fixture
def statement_file(tmp_path):
    path = tmp_path / "statement.txt"
    path.write_text(STATEMENT_200 + "\n", encoding="utf-8")
    return path


class TestTextReport:
    """Default human-readable output."""

    def test_prints_one_bar_per_line(self, statement_file, capsys):
        code = cli.main([str(statement_file), "--measurer", "fixed_width", "--width", "80"])
        out = capsys.readouterr().out
        assert code == 0
        assert "L1" in out and "L2" in out and "L3" in out
        assert "96%" in out
        assert "1 sentence | 3 lines | 200 chars" in out
        assert "Room to add more impact details." in out

    def test_line_budget_warning(self, statement_file, capsys):
        code = cli.main([
            str(statement_file), "--measurer", "fixed_width", "--width", "80", "--form", "af1206-2",
        ])
        assert code == 0
        assert "Exceeds the form's 2-line limit." in capsys.readouterr().out

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(SCENARIO_A + "\n"))
        code = cli.main(["-", "--measurer", "times_table", "--form", "af1206"])
        out = capsys.readouterr().out
        assert code == 0
        assert SCENARIO_A in out
        assert "1 line " in out


class TestJsonOutput:
    """--json output."""

    def test_matches_schema(self, statement_file, capsys):
        code = cli.main([str(statement_file), "--measurer", "fixed_width", "--width", "80", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        jsonschema.validate(data, PREVIEW_SCHEMA)

    def test_trailing_newline_is_stripped(self, statement_file, capsys):
        cli.main([str(statement_file), "--measurer", "fixed_width", "--width", "80", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert "".join(l["text"] for l in data["lines"]) == STATEMENT_200
        assert data["summary"]["char_count"] == 200

    def test_markers_survive_as_characters(self, tmp_path, capsys):
        path = tmp_path / "compressed.txt"
        path.write_text("a\u2006b", encoding="utf-8")
        cli.main([str(path), "--measurer", "fixed_width", "--width", "10", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["lines"][0]["text"] == "a\u2006b"
        assert data["lines"][0]["is_compressed"] is True


class TestErrors:
    """Exit codes and stderr."""

    def test_missing_file(self, tmp_path, capsys):
        code = cli.main([str(tmp_path / "nope.txt"), "--measurer", "fixed_width"])
        assert code == 1
        assert capsys.readouterr().err.startswith("Error: Cannot read")

    def test_pillow_without_font(self, statement_file, monkeypatch, capsys):
        monkeypatch.setattr(config, "FONT_PATH", "")
        code = cli.main([str(statement_file), "--measurer", "pillow"])
        assert code == 1
        assert "No font configured" in capsys.readouterr().err

    def test_unknown_form_is_rejected_by_argparse(self, statement_file):
        with pytest.raises(SystemExit) as exc:
            cli.main([str(statement_file), "--form", "af9999"])
        assert exc.value.code == 2
