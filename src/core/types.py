"""Shared typed models.

This module defines immutable data models used by ingest, store,
and search layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal, Mapping, Union

from core.constants import DEFAULT_SORT_ORDER
from core.game_schema import FacetKey

JsonValue = Union[
    None,
    bool,
    int,
    float,
    str,
    list["JsonValue"],
    dict[str, "JsonValue"],
]

SortOrder = Literal["relevance", "name_asc", "age_asc"]


@dataclass(frozen=True)
class Game:
    """Canonical catalogue entry produced by the ingest pipeline.

    Attributes:
        id: Unique, non-empty identifier (explicit or slugified from name).
        name: Non-empty display name.
        age_min: Youngest suggested age; never greater than ``age_max``.
        players_min: Smallest group size; never greater than ``players_max``.
        general_rules: Ordered rule steps.
        tags: Tag-like labels; order is not meaningful.
    """

    id: str
    name: str
    description: str | None = None
    equipment: str | None = None
    category: str | None = None
    traditionality: str | None = None
    prep_level: str | None = None
    recommended_players_text: str | None = None
    historical_notes: str | None = None
    notes: str | None = None
    age_min: int | None = None
    age_max: int | None = None
    players_min: int | None = None
    players_max: int | None = None
    general_rules: tuple[str, ...] = ()
    variations: tuple[str, ...] = ()
    skills_developed: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    regional_popularity: tuple[str, ...] = ()
    regional_names: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    related_games: tuple[str, ...] = ()
    links: tuple[str, ...] = ()


@dataclass(frozen=True)
class FilterState:
    """User browse state mirrored in the address bar.

    Attributes:
        query: Free-text search query; may be empty.
        page: Requested one-based page number.
        facets: Selected values per facet key.
        sort: Result ordering applied after filtering.
    """

    query: str = ""
    page: int = 1
    facets: Mapping[FacetKey, tuple[str, ...]] = field(default_factory=dict)
    sort: SortOrder = DEFAULT_SORT_ORDER

    def selected(self, key: FacetKey) -> tuple[str, ...]:
        """Return selected values for one facet key."""
        return tuple(self.facets.get(key, ()))

    def with_query(self, query: str) -> "FilterState":
        """Return a copy with a new query and the first page selected."""
        return replace(self, query=query, page=1)

    def with_page(self, page: int) -> "FilterState":
        """Return a copy requesting another page."""
        return replace(self, page=page)

    def with_sort(self, sort: SortOrder) -> "FilterState":
        """Return a copy with another sort order and the first page selected."""
        return replace(self, sort=sort, page=1)

    def toggle_facet_value(self, key: FacetKey, value: str) -> "FilterState":
        """Add or remove one facet value and return to the first page."""
        current = self.selected(key)
        if value in current:
            updated = tuple(item for item in current if item != value)
        else:
            updated = tuple(sorted((*current, value)))
        facets = dict(self.facets)
        if updated:
            facets[key] = updated
        else:
            facets.pop(key, None)
        return replace(self, facets=facets, page=1)

    def clear_facets(self) -> "FilterState":
        """Return a copy with every facet selection removed."""
        return replace(self, facets={}, page=1)


@dataclass(frozen=True)
class FilterResult:
    """One evaluated result page.

    Attributes:
        games: Games on the effective page.
        page: Effective page after clamping.
        total_pages: ``ceil(total_count / page_size)``; zero when nothing matched.
        total_count: Number of games matching query and facets.
    """

    games: tuple[Game, ...]
    page: int
    total_pages: int
    total_count: int


@dataclass(frozen=True)
class SearchHit:
    """Ranked fuzzy-search match."""

    game_id: str
    distance: float
