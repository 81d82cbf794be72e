"""Raw field tables for game records.

This module maps raw camelCase record keys onto ``Game`` attributes.
Normalization, validation, faceting, and coverage share these tables.
"""

from __future__ import annotations

from typing import Literal

FacetKey = Literal[
    "category",
    "tags",
    "traditionality",
    "prepLevel",
    "skillsDeveloped",
    "regionalPopularity",
]

FACET_KEYS: tuple[FacetKey, ...] = (
    "category",
    "tags",
    "traditionality",
    "prepLevel",
    "skillsDeveloped",
    "regionalPopularity",
)

FACET_ATTRIBUTES: dict[FacetKey, str] = {
    "category": "category",
    "tags": "tags",
    "traditionality": "traditionality",
    "prepLevel": "prep_level",
    "skillsDeveloped": "skills_developed",
    "regionalPopularity": "regional_popularity",
}

REQUIRED_STRING_FIELDS: tuple[tuple[str, str], ...] = (
    ("id", "id"),
    ("name", "name"),
)

OPTIONAL_STRING_FIELDS: tuple[tuple[str, str], ...] = (
    ("description", "description"),
    ("equipment", "equipment"),
    ("category", "category"),
    ("traditionality", "traditionality"),
    ("prepLevel", "prep_level"),
    ("recommendedPlayersText", "recommended_players_text"),
    ("historicalNotes", "historical_notes"),
    ("notes", "notes"),
)

INTEGER_FIELDS: tuple[tuple[str, str], ...] = (
    ("ageMin", "age_min"),
    ("ageMax", "age_max"),
    ("playersMin", "players_min"),
    ("playersMax", "players_max"),
)

RANGE_FIELD_PAIRS: tuple[tuple[str, str], ...] = (
    ("ageMin", "ageMax"),
    ("playersMin", "playersMax"),
)

STRING_LIST_FIELDS: tuple[tuple[str, str], ...] = (
    ("generalRules", "general_rules"),
    ("variations", "variations"),
    ("skillsDeveloped", "skills_developed"),
    ("tags", "tags"),
    ("regionalPopularity", "regional_popularity"),
    ("regionalNames", "regional_names"),
    ("keywords", "keywords"),
    ("relatedGames", "related_games"),
    ("links", "links"),
)
