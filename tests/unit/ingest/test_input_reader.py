"""Unit tests for raw record readers."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import GameCatalogIngestError
from ingest.input_reader import read_raw_records
from tests.fixture_paths import fixture_path


def test_read_raw_records_reads_json_array() -> None:
    """Every array element should be returned untouched and in order."""
    records = read_raw_records(fixture_path("games.json"))

    assert len(records) == 11
    assert records[9] == "not a game"


def test_read_raw_records_reads_jsonl_skipping_blank_lines() -> None:
    """JSONL sources yield one record per non-blank line."""
    records = read_raw_records(fixture_path("games.jsonl"))

    assert records == [
        {"id": "tag", "name": "Tag"},
        {"name": "Red Rover", "category": "Group"},
    ]


def test_read_raw_records_raises_for_missing_path(tmp_path: Path) -> None:
    """Reader should fail when source path is missing."""
    missing_path = tmp_path / "does-not-exist.json"

    with pytest.raises(GameCatalogIngestError):
        read_raw_records(missing_path)


def test_read_raw_records_raises_for_invalid_json(tmp_path: Path) -> None:
    """Broken JSON documents are a hard ingest failure."""
    source_path = tmp_path / "games.json"
    source_path.write_text('[{"name": "Tag"', encoding="utf-8")

    with pytest.raises(GameCatalogIngestError, match="Invalid JSON"):
        read_raw_records(source_path)


def test_read_raw_records_raises_for_invalid_jsonl_line() -> None:
    """A malformed JSONL line should name its line number."""
    with pytest.raises(GameCatalogIngestError, match=":2"):
        read_raw_records(fixture_path("bad_games.jsonl"))


def test_read_raw_records_raises_for_non_array_document() -> None:
    """Top-level objects are not record sequences."""
    with pytest.raises(GameCatalogIngestError, match="JSON array"):
        read_raw_records(fixture_path("not_an_array.json"))


def test_read_raw_records_rejects_unsupported_extension(tmp_path: Path) -> None:
    """Only JSON and JSONL sources are supported."""
    source_path = tmp_path / "games.csv"
    source_path.write_text("name\nTag\n", encoding="utf-8")

    with pytest.raises(GameCatalogIngestError, match="Unsupported"):
        read_raw_records(source_path)
