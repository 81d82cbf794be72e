"""Public SDK surface for the game catalogue.

This module provides a stable import path for library users.
It re-exports the primary client, pipeline entry points, and typed models.
"""

from __future__ import annotations

from core.config import GameCatalogConfig
from core.diagnostics_types import DiagnosticsReport, RejectionRecord
from core.game_schema import FACET_KEYS, FacetKey
from core.types import FilterResult, FilterState, Game
from ingest.input_reader import read_raw_records
from ingest.pipeline import CatalogBuild, build_catalog, run_catalog_pipeline
from search.browse_session import BrowseContext, BrowseSession
from search.filter_engine import evaluate
from search.search_index import SearchIndex
from search.url_state import canonicalize_state, decode_state, encode_state
from store.catalog import Catalog
from store.catalog_sdk import GameCatalogClient
from store.facet_index import build_facet_index

__all__ = [
    "FACET_KEYS",
    "BrowseContext",
    "BrowseSession",
    "Catalog",
    "CatalogBuild",
    "DiagnosticsReport",
    "FacetKey",
    "FilterResult",
    "FilterState",
    "Game",
    "GameCatalogClient",
    "GameCatalogConfig",
    "RejectionRecord",
    "SearchIndex",
    "build_catalog",
    "build_facet_index",
    "canonicalize_state",
    "decode_state",
    "encode_state",
    "evaluate",
    "read_raw_records",
    "run_catalog_pipeline",
]
