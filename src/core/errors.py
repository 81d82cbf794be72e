"""Game catalogue exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Record-level data problems are diagnostics, not exceptions; these
types cover configuration, IO, and programming-contract failures.
"""

from __future__ import annotations


class GameCatalogError(Exception):
    """Base exception for all game catalogue failures."""


class GameCatalogConfigError(GameCatalogError):
    """Raised for invalid runtime configuration."""


class GameCatalogIngestError(GameCatalogError):
    """Raised when a raw record source cannot be read or parsed."""


class GameCatalogDependencyError(GameCatalogError):
    """Raised when an optional runtime dependency is missing."""


class GameCatalogQueryError(GameCatalogError):
    """Raised for invalid filter evaluation arguments."""


class GameCatalogNotFoundError(GameCatalogError):
    """Raised when a requested game id is not in the catalogue."""


class GameCatalogStoreError(GameCatalogError):
    """Raised when diagnostics or other outputs cannot be persisted."""
