"""Python SDK for browsing a game catalogue.

This module exposes a high-level client that loads raw records once,
builds the catalogue, facet index, and search index, and serves
browse queries and diagnostics from that shared triad.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import GameCatalogConfig
from core.diagnostics_types import DiagnosticsReport
from core.types import FilterResult, FilterState, Game
from ingest.input_reader import read_raw_records
from ingest.pipeline import CatalogBuild, run_catalog_pipeline
from search.browse_session import BrowseContext, BrowseSession
from search.filter_engine import evaluate
from search.search_index import SearchIndex
from search.url_state import decode_state
from store.catalog import Catalog
from store.facet_index import FacetIndex, build_facet_index


class GameCatalogClient:
    """Primary SDK entry point for catalogue browse workflows."""

    def __init__(
        self,
        config: GameCatalogConfig | None = None,
        build: CatalogBuild | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            build: Optional pre-built catalogue; the configured source is
                read when omitted.

        Raises:
            GameCatalogIngestError: If the configured source cannot be read.
        """
        self._config = config or GameCatalogConfig.from_env()
        self._build = build or run_catalog_pipeline(read_raw_records(self._config.source_path))
        catalog = self._build.catalog
        self._context = BrowseContext(
            catalog=catalog,
            facet_index=build_facet_index(catalog),
            search_index=SearchIndex(catalog, self._config.similarity_threshold),
            page_size=self._config.page_size,
            query_debounce_ms=self._config.query_debounce_ms,
        )

    @property
    def config(self) -> GameCatalogConfig:
        """Return the runtime configuration."""
        return self._config

    @property
    def catalog(self) -> Catalog:
        """Return the accepted games."""
        return self._context.catalog

    @property
    def facets(self) -> FacetIndex:
        """Return sorted facet values per facet key."""
        return self._context.facet_index

    @property
    def report(self) -> DiagnosticsReport:
        """Return diagnostics for the catalogue build."""
        return self._build.report

    def game(self, game_id: str) -> Game:
        """Look up one game by id.

        Raises:
            GameCatalogNotFoundError: If the id is unknown.
        """
        return self.catalog.require(game_id)

    def browse(self, state: FilterState) -> FilterResult:
        """Evaluate a browse state into a result page."""
        context = self._context
        return evaluate(
            context.catalog,
            context.facet_index,
            context.search_index,
            state,
            context.page_size,
        )

    def browse_query(self, query_string: str) -> FilterResult:
        """Evaluate a URL query string into a result page."""
        return self.browse(decode_state(query_string))

    def session(self, query_string: str = "") -> BrowseSession:
        """Start a browse session over the shared catalogue triad."""
        return BrowseSession(self._context, query_string)

    def with_source(self, source_path: str) -> "GameCatalogClient":
        """Clone the client reading another source file.

        Args:
            source_path: Raw games document path.

        Returns:
            New SDK client instance.
        """
        resolved = Path(source_path).expanduser()
        return GameCatalogClient(replace(self._config, source_path=resolved))
