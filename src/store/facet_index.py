"""Facet value indexes derived from the catalogue.

This module collects, per facet key, the sorted distinct values that
appear in accepted games, plus helpers the facet sidebar uses to
search and label those values.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, Mapping

from core.game_schema import FACET_ATTRIBUTES, FACET_KEYS, FacetKey
from core.types import Game
from store.catalog import Catalog

FacetIndex = Mapping[FacetKey, tuple[str, ...]]

_LABEL_SEPARATORS = re.compile(r"[-_]")


def build_facet_index(catalog: Catalog) -> FacetIndex:
    """Collect sorted distinct values for every facet key.

    Args:
        catalog: Accepted games.

    Returns:
        Read-only mapping of facet key to code-point sorted values.
    """
    index = {key: tuple(sorted(_collect_values(catalog, key))) for key in FACET_KEYS}
    return MappingProxyType(index)


def facet_values(game: Game, key: FacetKey) -> tuple[str, ...]:
    """Return a game's values for one facet as a tuple.

    Scalar facets yield zero or one value; list facets yield members.
    """
    value = getattr(game, FACET_ATTRIBUTES[key])
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    return tuple(item for item in value if item)


def filter_facet_options(options: Iterable[str], term: str) -> tuple[str, ...]:
    """Return options containing a search term, ignoring case.

    Args:
        options: Facet values in display order.
        term: Sidebar search text; blank keeps every option.

    Returns:
        Matching options in their original order.
    """
    needle = term.strip().lower()
    if not needle:
        return tuple(options)
    return tuple(option for option in options if needle in option.lower())


def prettify_facet_value(value: str) -> str:
    """Build a display label for lower-case facet values.

    ``"hide-and-seek"`` becomes ``"Hide And Seek"``; values that already
    carry capitals are returned unchanged.
    """
    if value != value.lower():
        return value
    parts = _LABEL_SEPARATORS.split(value)
    return " ".join(
        " ".join(word[:1].upper() + word[1:] for word in part.split(" ")) for part in parts
    )


def _collect_values(catalog: Catalog, key: FacetKey) -> set[str]:
    values: set[str] = set()
    for game in catalog:
        values.update(facet_values(game, key))
    return values
