"""Raw record readers for catalogue ingestion.

This module loads untrusted game records from a JSON array document
or a JSONL file. Only document-level problems raise; the shape of each
record is left to the normalization pipeline.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.constants import SUPPORTED_SOURCE_EXTENSIONS
from core.errors import GameCatalogIngestError
from core.types import JsonValue


def read_raw_records(source_path: Path) -> list[JsonValue]:
    """Load raw records from a local JSON or JSONL file.

    Args:
        source_path: Path to a ``.json`` array document or ``.jsonl`` file.

    Returns:
        Ordered raw records.

    Raises:
        GameCatalogIngestError: If the file is missing, unsupported, or not valid JSON.
    """
    resolved_path = source_path.expanduser()
    if not resolved_path.is_file():
        raise GameCatalogIngestError(
            f"Failed to read games source at {resolved_path}: file does not exist. "
            "Set GAMECATALOG_SOURCE or pass --source with an existing file."
        )
    suffix = resolved_path.suffix.lower()
    if suffix not in SUPPORTED_SOURCE_EXTENSIONS:
        raise GameCatalogIngestError(
            f"Unsupported games source {resolved_path}. "
            f"Supported extensions: {SUPPORTED_SOURCE_EXTENSIONS}."
        )
    text = _read_text(resolved_path)
    if suffix == ".jsonl":
        return _parse_jsonl_records(resolved_path, text)
    return _parse_json_array(resolved_path, text)


def _read_text(source_path: Path) -> str:
    try:
        return source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise GameCatalogIngestError(
            f"Failed to read games source at {source_path}: {error}."
        ) from error


def _parse_json_array(source_path: Path, text: str) -> list[JsonValue]:
    """Parse a JSON document whose top level is an array of records.

    Raises:
        GameCatalogIngestError: If JSON is invalid or the top level is not an array.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise GameCatalogIngestError(
            f"Invalid JSON in {source_path}: {error.msg} "
            f"(line {error.lineno}, column {error.colno}). Fix the JSON syntax and retry."
        ) from error
    if not isinstance(payload, list):
        raise GameCatalogIngestError(
            f"Invalid games document {source_path}: expected a JSON array at top level, "
            f"got {type(payload).__name__}."
        )
    return payload


def _parse_jsonl_records(source_path: Path, text: str) -> list[JsonValue]:
    """Parse one JSON value per non-blank line.

    Raises:
        GameCatalogIngestError: If any line is not valid JSON.
    """
    records: list[JsonValue] = []
    for line_number, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as error:
            raise GameCatalogIngestError(
                f"Failed to parse JSONL record at {source_path}:{line_number}: "
                f"{error.msg}. Fix the JSON syntax and retry."
            ) from error
    return records
