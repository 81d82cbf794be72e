"""YAML settings file parsing for catalogue configuration.

This module loads an optional YAML mapping whose keys mirror the
environment variables consumed by ``GameCatalogConfig``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, cast

from core.errors import GameCatalogConfigError, GameCatalogDependencyError

SUPPORTED_SETTINGS_KEYS = (
    "source_path",
    "page_size",
    "similarity_threshold",
    "query_debounce_ms",
)


def load_settings_file(settings_path: str) -> dict[str, object]:
    """Load and validate a YAML settings file.

    Args:
        settings_path: File path to YAML settings.

    Returns:
        Mapping of supported setting names to raw values.

    Raises:
        GameCatalogDependencyError: If PyYAML is unavailable.
        GameCatalogConfigError: If the file is missing, invalid, or has unknown keys.
    """
    payload = _load_yaml_payload(settings_path)
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise GameCatalogConfigError(
            f"Invalid settings file {settings_path}: expected a mapping at top level, "
            f"got {type(payload).__name__}."
        )
    settings: dict[str, object] = {}
    for key, value in payload.items():
        if key not in SUPPORTED_SETTINGS_KEYS:
            supported = ", ".join(SUPPORTED_SETTINGS_KEYS)
            raise GameCatalogConfigError(
                f"Unsupported settings key '{key}' in {settings_path}. "
                f"Use one of: {supported}."
            )
        settings[str(key)] = value
    return settings


def _load_yaml_payload(settings_path: str) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise GameCatalogDependencyError(
            "YAML settings support requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    settings_file = Path(settings_path).expanduser().resolve()
    if not settings_file.exists():
        raise GameCatalogConfigError(
            f"Settings file does not exist at {settings_file}. "
            "Set GAMECATALOG_SETTINGS_FILE to an existing YAML file."
        )
    try:
        return cast(object, yaml.safe_load(settings_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise GameCatalogConfigError(
            f"Failed to read settings at {settings_file}: {error}. Check file permissions."
        ) from error
    except yaml.YAMLError as error:
        raise GameCatalogConfigError(
            f"Failed to parse YAML settings at {settings_file}: {error}. Fix YAML syntax."
        ) from error
