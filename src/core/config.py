"""Runtime configuration model for the game catalogue.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

from core.constants import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_QUERY_DEBOUNCE_MS,
    DEFAULT_SIMILARITY_THRESHOLD,
    DEFAULT_SOURCE_PATH,
)
from core.errors import GameCatalogConfigError
from core.settings_file import load_settings_file


@dataclass(frozen=True)
class GameCatalogConfig:
    """Validated runtime configuration.

    Attributes:
        source_path: Raw games document (JSON array or JSONL).
        page_size: Games per result page.
        similarity_threshold: Maximum fuzzy-match distance in [0, 1].
        query_debounce_ms: Quiet period before a typed query is applied.
    """

    source_path: Path
    page_size: int = DEFAULT_PAGE_SIZE
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    query_debounce_ms: int = DEFAULT_QUERY_DEBOUNCE_MS

    @classmethod
    def from_env(cls) -> "GameCatalogConfig":
        """Build config from an optional settings file and environment variables.

        Environment values take precedence over settings file values.

        Returns:
            A validated config object.

        Raises:
            GameCatalogConfigError: If any value is invalid.
        """
        settings_path = os.getenv("GAMECATALOG_SETTINGS_FILE")
        file_settings = load_settings_file(settings_path) if settings_path else {}
        source_value = _pick(file_settings, "source_path", "GAMECATALOG_SOURCE")
        page_size_value = _pick(file_settings, "page_size", "GAMECATALOG_PAGE_SIZE")
        threshold_value = _pick(
            file_settings, "similarity_threshold", "GAMECATALOG_SIMILARITY_THRESHOLD"
        )
        debounce_value = _pick(
            file_settings, "query_debounce_ms", "GAMECATALOG_QUERY_DEBOUNCE_MS"
        )
        source_path = Path(str(source_value or DEFAULT_SOURCE_PATH)).expanduser()
        return cls(
            source_path=source_path,
            page_size=_parse_positive_int(
                page_size_value, DEFAULT_PAGE_SIZE, "GAMECATALOG_PAGE_SIZE"
            ),
            similarity_threshold=_parse_threshold(threshold_value),
            query_debounce_ms=_parse_non_negative_int(
                debounce_value, DEFAULT_QUERY_DEBOUNCE_MS, "GAMECATALOG_QUERY_DEBOUNCE_MS"
            ),
        )


def _pick(file_settings: Mapping[str, object], file_key: str, env_name: str) -> object:
    """Return the env value when set, else the settings file value."""
    env_value = os.getenv(env_name)
    if env_value is not None:
        return env_value
    return file_settings.get(file_key)


def _parse_positive_int(raw_value: object, default: int, name: str) -> int:
    """Parse a strictly positive integer setting.

    Raises:
        GameCatalogConfigError: If value is not an integer >= 1.
    """
    value = _parse_non_negative_int(raw_value, default, name)
    if value < 1:
        raise GameCatalogConfigError(
            f"Invalid {name} value: expected integer >= 1, got '{raw_value}'."
        )
    return value


def _parse_non_negative_int(raw_value: object, default: int, name: str) -> int:
    """Parse a non-negative integer setting.

    Raises:
        GameCatalogConfigError: If value cannot be parsed or is negative.
    """
    if raw_value is None:
        return default
    if isinstance(raw_value, bool):
        raise GameCatalogConfigError(
            f"Invalid {name} value: expected integer, got '{raw_value}'."
        )
    try:
        value = int(str(raw_value).strip())
    except ValueError as error:
        raise GameCatalogConfigError(
            f"Invalid {name} value: expected integer, got '{raw_value}'. "
            f"Set {name} to a numeric value."
        ) from error
    if value < 0:
        raise GameCatalogConfigError(
            f"Invalid {name} value: expected a non-negative integer, got '{raw_value}'."
        )
    return value


def _parse_threshold(raw_value: object) -> float:
    """Parse the similarity threshold into [0, 1].

    Raises:
        GameCatalogConfigError: If value is not a float in range.
    """
    if raw_value is None:
        return DEFAULT_SIMILARITY_THRESHOLD
    try:
        value = float(str(raw_value).strip())
    except ValueError as error:
        raise GameCatalogConfigError(
            "Invalid GAMECATALOG_SIMILARITY_THRESHOLD value: "
            f"expected number, got '{raw_value}'."
        ) from error
    if not 0.0 <= value <= 1.0:
        raise GameCatalogConfigError(
            "Invalid GAMECATALOG_SIMILARITY_THRESHOLD value: "
            f"expected a number between 0 and 1, got '{raw_value}'."
        )
    return value
