"""Unit tests for CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.main import build_parser, main
from tests.fixture_paths import fixture_path

_SOURCE = str(fixture_path("games.json"))


def test_build_parser_requires_a_command() -> None:
    """The parser should reject an empty argument vector."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_browse_prints_filtered_page(capsys: pytest.CaptureFixture[str]) -> None:
    """Browse should print counts, matching games, and the canonical query."""
    exit_code = main(["--source", _SOURCE, "browse", "category=Party&page=9"])
    lines = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert lines[:3] == ["total_count=3", "page=1", "total_pages=1"]
    assert lines[3].startswith("musical-chairs\t")
    assert lines[-1] == "query=category=Party"


def test_facets_lists_values_with_labels(capsys: pytest.CaptureFixture[str]) -> None:
    """Facet values can be narrowed by key and substring."""
    exit_code = main(["--source", _SOURCE, "facets", "--key", "tags", "--search", "hide"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0
    assert output == "tags\thide-and-seek\tHide And Seek"


def test_show_prints_game_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Show should print the normalized game."""
    exit_code = main(["--source", _SOURCE, "show", "hide-and-seek"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert (payload["age_min"], payload["age_max"]) == (5, 12)
    assert payload["prep_level"] is None


def test_show_unknown_game_returns_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Unknown ids should exit non-zero with a friendly message."""
    exit_code = main(["--source", _SOURCE, "show", "missing"])
    output = capsys.readouterr().out

    assert exit_code == 1 and output.startswith("error=")


def test_missing_source_returns_error(
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    """A missing source file should not produce a traceback."""
    exit_code = main(["--source", str(tmp_path / "missing.json"), "browse"])
    output = capsys.readouterr().out

    assert exit_code == 1 and "does not exist" in output


def test_diagnostics_writes_report(
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    """Diagnostics should summarize exclusions and write the JSON report."""
    output_path = tmp_path / "quality.json"

    exit_code = main(["--source", _SOURCE, "diagnostics", "--output", str(output_path)])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "included_count=5" in output
    assert "Name is required" in output
    assert "bad-record" in output
    assert json.loads(output_path.read_text(encoding="utf-8"))["summary"]["totalCount"] == 11
