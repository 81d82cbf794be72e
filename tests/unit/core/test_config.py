"""Unit tests for core config parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import GameCatalogConfig
from core.constants import DEFAULT_PAGE_SIZE, DEFAULT_SIMILARITY_THRESHOLD
from core.errors import GameCatalogConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to defaults when nothing is set."""
    for name in (
        "GAMECATALOG_SOURCE",
        "GAMECATALOG_PAGE_SIZE",
        "GAMECATALOG_SIMILARITY_THRESHOLD",
        "GAMECATALOG_QUERY_DEBOUNCE_MS",
        "GAMECATALOG_SETTINGS_FILE",
    ):
        monkeypatch.delenv(name, raising=False)

    config = GameCatalogConfig.from_env()

    assert config.page_size == DEFAULT_PAGE_SIZE
    assert config.similarity_threshold == DEFAULT_SIMILARITY_THRESHOLD
    assert config.query_debounce_ms == 300


def test_from_env_reads_source_and_page_size(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve source path and page size from environment."""
    monkeypatch.delenv("GAMECATALOG_SETTINGS_FILE", raising=False)
    monkeypatch.setenv("GAMECATALOG_SOURCE", "./data/games.json")
    monkeypatch.setenv("GAMECATALOG_PAGE_SIZE", "24")

    config = GameCatalogConfig.from_env()

    assert config.source_path.name == "games.json" and config.page_size == 24


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("GAMECATALOG_PAGE_SIZE", "zero"),
        ("GAMECATALOG_PAGE_SIZE", "0"),
        ("GAMECATALOG_SIMILARITY_THRESHOLD", "1.5"),
        ("GAMECATALOG_QUERY_DEBOUNCE_MS", "-10"),
    ],
)
def test_from_env_raises_for_invalid_values(
    monkeypatch: pytest.MonkeyPatch,
    name: str,
    value: str,
) -> None:
    """Config should fail for values outside their accepted range."""
    monkeypatch.delenv("GAMECATALOG_SETTINGS_FILE", raising=False)
    monkeypatch.setenv(name, value)

    with pytest.raises(GameCatalogConfigError):
        GameCatalogConfig.from_env()


def test_from_env_reads_settings_file_with_env_override(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """Settings file values apply unless an environment variable overrides them."""
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text(
        "page_size: 6\nsimilarity_threshold: 0.25\nsource_path: catalogue.json\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("GAMECATALOG_SETTINGS_FILE", str(settings_path))
    monkeypatch.setenv("GAMECATALOG_PAGE_SIZE", "9")
    monkeypatch.delenv("GAMECATALOG_SOURCE", raising=False)
    monkeypatch.delenv("GAMECATALOG_SIMILARITY_THRESHOLD", raising=False)

    config = GameCatalogConfig.from_env()

    assert config.page_size == 9
    assert config.similarity_threshold == 0.25
    assert config.source_path == Path("catalogue.json")
