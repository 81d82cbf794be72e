"""Unit tests for structured logging configuration."""

from __future__ import annotations

import json

import pytest

from core.logging_config import get_logger


def test_get_logger_writes_json_lines_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Info events should render as JSON with event name and fields."""
    logger = get_logger("tests.logging")

    logger.info("catalog_built", input_count=3)

    payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert payload["event"] == "catalog_built"
    assert payload["input_count"] == 3 and payload["level"] == "info"


def test_get_logger_drops_debug_events(capsys: pytest.CaptureFixture[str]) -> None:
    """Debug events are below the configured level."""
    logger = get_logger("tests.logging")

    logger.debug("record_excluded", index=1)

    assert capsys.readouterr().err == ""
