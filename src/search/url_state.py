"""Two-way codec between browse state and URL query strings.

This module produces one canonical query string per browse state:
defaults are omitted and facet values are trimmed, de-duplicated, and
sorted. Decoding is lenient and falls back to defaults for anything it
cannot interpret, so ``decode_state(encode_state(s))`` reproduces the
canonical form of ``s``.
"""

from __future__ import annotations

from typing import Iterable, cast
from urllib.parse import parse_qsl, urlencode

from core.constants import (
    DEFAULT_SORT_ORDER,
    PAGE_PARAM,
    QUERY_PARAM,
    SORT_PARAM,
    SUPPORTED_SORT_ORDERS,
)
from core.game_schema import FACET_KEYS, FacetKey
from core.types import FilterState, SortOrder


def canonicalize_state(state: FilterState) -> FilterState:
    """Apply the codec's trimming, de-duplication, and default rules.

    Args:
        state: Any browse state.

    Returns:
        Equivalent state in canonical form.
    """
    facets: dict[FacetKey, tuple[str, ...]] = {}
    for key in FACET_KEYS:
        values = canonical_values(state.facets.get(key, ()))
        if values:
            facets[key] = values
    sort = state.sort if state.sort in SUPPORTED_SORT_ORDERS else DEFAULT_SORT_ORDER
    return FilterState(
        query=state.query if state.query.strip() else "",
        page=state.page if state.page >= 1 else 1,
        facets=facets,
        sort=sort,
    )


def encode_state(state: FilterState) -> str:
    """Serialize a browse state into its canonical query string.

    Args:
        state: Browse state.

    Returns:
        Query string without a leading ``?``; empty for the default state.
    """
    canonical = canonicalize_state(state)
    pairs: list[tuple[str, str]] = []
    if canonical.query:
        pairs.append((QUERY_PARAM, canonical.query))
    for key in FACET_KEYS:
        pairs.extend((key, value) for value in canonical.selected(key))
    if canonical.sort != DEFAULT_SORT_ORDER:
        pairs.append((SORT_PARAM, canonical.sort))
    if canonical.page != 1:
        pairs.append((PAGE_PARAM, str(canonical.page)))
    return urlencode(pairs)


def decode_state(query_string: str) -> FilterState:
    """Parse a query string into a canonical browse state.

    Unknown parameters are ignored; malformed page or sort values fall
    back to their defaults.

    Args:
        query_string: Raw query string, with or without a leading ``?``.

    Returns:
        Canonical browse state.
    """
    pairs = parse_qsl(query_string.lstrip("?"), keep_blank_values=True)
    query_value: str | None = None
    page_value: str | None = None
    sort_value: str | None = None
    collected: dict[FacetKey, list[str]] = {key: [] for key in FACET_KEYS}
    for name, value in pairs:
        if name == QUERY_PARAM and query_value is None:
            query_value = value
        elif name == PAGE_PARAM and page_value is None:
            page_value = value
        elif name == SORT_PARAM and sort_value is None:
            sort_value = value
        elif name in collected:
            collected[cast(FacetKey, name)].append(value)
    state = FilterState(
        query=query_value or "",
        page=_parse_page(page_value),
        facets={key: tuple(values) for key, values in collected.items()},
        sort=_parse_sort(sort_value),
    )
    return canonicalize_state(state)


def states_equal(left: FilterState, right: FilterState) -> bool:
    """Compare two states by their canonical forms."""
    return canonicalize_state(left) == canonicalize_state(right)


def canonical_values(values: Iterable[str]) -> tuple[str, ...]:
    """Trim, drop empties, de-duplicate, and sort facet values."""
    return tuple(sorted({value.strip() for value in values if value.strip()}))


def _parse_page(raw_value: str | None) -> int:
    if raw_value is None:
        return 1
    try:
        page = int(raw_value.strip())
    except ValueError:
        return 1
    return page if page >= 1 else 1


def _parse_sort(raw_value: str | None) -> SortOrder:
    if raw_value in SUPPORTED_SORT_ORDERS:
        return cast(SortOrder, raw_value)
    return DEFAULT_SORT_ORDER
