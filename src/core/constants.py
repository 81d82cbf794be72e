"""Core constants used across gamecatalog modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_SOURCE_PATH = Path("games.json")
DEFAULT_PAGE_SIZE = 12
DEFAULT_SIMILARITY_THRESHOLD = 0.4
DEFAULT_QUERY_DEBOUNCE_MS = 300
SUPPORTED_SOURCE_EXTENSIONS = (".json", ".jsonl")
NULLISH_STRING_SENTINELS = ("", "null", "null,")
MISSING_AGE_SORT_VALUE = 99
QUERY_PARAM = "q"
PAGE_PARAM = "page"
SORT_PARAM = "sort"
DEFAULT_SORT_ORDER = "relevance"
SUPPORTED_SORT_ORDERS = ("relevance", "name_asc", "age_asc")
SEARCH_KEYS = ("name", "description", "keywords")
