"""Facet filtering, sorting, and pagination over the catalogue.

This module evaluates a ``FilterState`` against the catalogue triad.
Within one facet selected values combine with OR; across facets they
combine with AND. Evaluation is pure and never mutates its inputs.
"""

from __future__ import annotations

import math
from typing import Sequence

from core.constants import MISSING_AGE_SORT_VALUE
from core.errors import GameCatalogQueryError
from core.game_schema import FacetKey
from core.logging_config import get_logger
from core.types import FilterResult, FilterState, Game, SortOrder
from search.search_index import SearchIndex
from store.catalog import Catalog
from store.facet_index import FacetIndex, facet_values

_LOGGER = get_logger(__name__)


def evaluate(
    catalog: Catalog,
    facet_index: FacetIndex,
    search_index: SearchIndex,
    state: FilterState,
    page_size: int,
) -> FilterResult:
    """Evaluate one browse state into a result page.

    Args:
        catalog: Accepted games in catalogue order.
        facet_index: Facet values; selections on keys absent here are ignored.
        search_index: Fuzzy index built over ``catalog``.
        state: Browse state to evaluate.
        page_size: Games per page.

    Returns:
        Effective page of games with total counts.

    Raises:
        GameCatalogQueryError: If ``page_size`` is smaller than 1.
    """
    if page_size < 1:
        raise GameCatalogQueryError(
            f"Invalid page size {page_size}: expected an integer >= 1."
        )
    query = state.query.strip()
    candidates: Sequence[Game] = search_index.search(query) if query else catalog.games
    selections = _active_selections(facet_index, state)
    matched = [game for game in candidates if _matches_all(game, selections)]
    ordered = sort_games(matched, state.sort)
    total_count = len(ordered)
    total_pages = math.ceil(total_count / page_size)
    page = clamp_page(state.page, total_pages)
    start = (page - 1) * page_size
    return FilterResult(
        games=tuple(ordered[start : start + page_size]),
        page=page,
        total_pages=total_pages,
        total_count=total_count,
    )


def clamp_page(requested_page: int, total_pages: int) -> int:
    """Clamp a requested page into ``[1, max(1, total_pages)]``."""
    return min(max(requested_page, 1), max(total_pages, 1))


def sort_games(games: Sequence[Game], sort: SortOrder) -> list[Game]:
    """Return games in the requested order.

    ``relevance`` keeps the incoming search-rank or catalogue order.
    Sorting is stable so ties keep that order too.
    """
    if sort == "name_asc":
        return sorted(games, key=lambda game: game.name.casefold())
    if sort == "age_asc":
        return sorted(
            games,
            key=lambda game: game.age_min if game.age_min is not None else MISSING_AGE_SORT_VALUE,
        )
    return list(games)


def _active_selections(
    facet_index: FacetIndex,
    state: FilterState,
) -> dict[FacetKey, frozenset[str]]:
    """Collect non-empty selections on recognized facet keys."""
    selections: dict[FacetKey, frozenset[str]] = {}
    for key, values in state.facets.items():
        if key not in facet_index:
            _LOGGER.warning("facet_key_ignored", facet_key=key)
            continue
        if values:
            selections[key] = frozenset(values)
    return selections


def _matches_all(game: Game, selections: dict[FacetKey, frozenset[str]]) -> bool:
    for key, selected in selections.items():
        if selected.isdisjoint(facet_values(game, key)):
            return False
    return True
