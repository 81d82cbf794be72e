"""Browse session scheduling and URL synchronization.

This module keeps one user's ``FilterState`` and decides when edits
take effect. Typed queries wait for a quiet period before they apply;
facet, sort, and page changes apply immediately. The session holds no
timers: callers pass a monotonic ``now`` in seconds, and a newer edit
simply supersedes a pending one.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import DEFAULT_PAGE_SIZE, DEFAULT_QUERY_DEBOUNCE_MS
from core.game_schema import FacetKey
from core.types import FilterResult, FilterState, SortOrder
from search.filter_engine import evaluate
from search.search_index import SearchIndex
from search.url_state import canonicalize_state, decode_state, encode_state
from store.catalog import Catalog
from store.facet_index import FacetIndex


@dataclass(frozen=True)
class BrowseContext:
    """Once-built catalogue triad shared by every browse session.

    Attributes:
        catalog: Accepted games.
        facet_index: Sorted facet values.
        search_index: Fuzzy index over the catalogue.
        page_size: Games per result page.
        query_debounce_ms: Quiet period before a typed query applies.
    """

    catalog: Catalog
    facet_index: FacetIndex
    search_index: SearchIndex
    page_size: int = DEFAULT_PAGE_SIZE
    query_debounce_ms: int = DEFAULT_QUERY_DEBOUNCE_MS


@dataclass(frozen=True)
class _PendingQuery:
    text: str
    typed_at: float


class BrowseSession:
    """Mutable browse state for one session over a shared context."""

    def __init__(self, context: BrowseContext, query_string: str = "") -> None:
        """Start a session from an incoming URL query string.

        Args:
            context: Shared catalogue triad and browse settings.
            query_string: Address-bar query string; empty for defaults.
        """
        self._context = context
        self._state = decode_state(query_string)
        self._pending: _PendingQuery | None = None

    @property
    def state(self) -> FilterState:
        """Return the effective browse state."""
        return self._state

    @property
    def pending_query(self) -> str | None:
        """Return typed query text that has not applied yet."""
        return self._pending.text if self._pending is not None else None

    def type_query(self, text: str, now: float) -> None:
        """Record a keystroke; the query applies after the quiet period."""
        self._pending = _PendingQuery(text=text, typed_at=now)

    def flush(self, now: float) -> bool:
        """Apply the pending query once the quiet period has elapsed.

        Returns:
            Whether the effective state changed.
        """
        if self._pending is None:
            return False
        quiet_seconds = self._context.query_debounce_ms / 1000.0
        if now - self._pending.typed_at < quiet_seconds:
            return False
        text = self._pending.text
        self._pending = None
        if text == self._state.query:
            return False
        return self._apply(self._state.with_query(text))

    def toggle_facet(self, key: FacetKey, value: str) -> bool:
        """Select or deselect one facet value immediately."""
        return self._apply(self._state.toggle_facet_value(key, value))

    def clear_facets(self) -> bool:
        """Remove every facet selection immediately."""
        return self._apply(self._state.clear_facets())

    def set_sort(self, sort: SortOrder) -> bool:
        """Change the result order immediately."""
        return self._apply(self._state.with_sort(sort))

    def set_page(self, page: int) -> bool:
        """Request another page immediately."""
        return self._apply(self._state.with_page(page))

    def sync_from_url(self, query_string: str) -> bool:
        """Apply address-bar state only when it differs from the current state.

        Re-applying an identical state would trigger another URL write, so
        equal states are ignored.

        Returns:
            Whether the effective state changed.
        """
        decoded = decode_state(query_string)
        if decoded == canonicalize_state(self._state):
            return False
        self._pending = None
        self._state = decoded
        return True

    def query_string(self) -> str:
        """Return the canonical query string for the address bar."""
        return encode_state(self._state)

    def results(self) -> FilterResult:
        """Evaluate the effective state into a result page."""
        context = self._context
        return evaluate(
            context.catalog,
            context.facet_index,
            context.search_index,
            self._state,
            context.page_size,
        )

    def _apply(self, state: FilterState) -> bool:
        canonical = canonicalize_state(state)
        if canonical == canonicalize_state(self._state):
            return False
        self._state = canonical
        return True
