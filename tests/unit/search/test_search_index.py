"""Unit tests for fuzzy search ranking."""

from __future__ import annotations

from search.search_index import SearchIndex
from store.catalog import Catalog
from tests.catalog_builders import make_game


def _catalog() -> Catalog:
    return Catalog(
        [
            make_game(
                "tag",
                name="Tag",
                description="Chase your friends around the playground.",
                keywords=["chase"],
            ),
            make_game(
                "hide-and-seek",
                name="Hide-and-Seek",
                description="One player counts while everyone else hides.",
                keywords=["hiding"],
            ),
            make_game(
                "sardines",
                name="Sardines",
                description="Reverse hide and seek where seekers squeeze in together.",
            ),
        ]
    )


def test_search_returns_fuzzy_name_match_and_excludes_unrelated() -> None:
    """A partial name query finds the game and leaves unrelated ones out."""
    index = SearchIndex(_catalog())

    names = [game.name for game in index.search("hide")]

    assert "Hide-and-Seek" in names
    assert "Tag" not in names


def test_rank_orders_by_ascending_distance() -> None:
    """Closer matches come first and every distance is within the threshold."""
    index = SearchIndex(_catalog())

    hits = index.rank("hide-and-seek")

    assert hits[0].game_id == "hide-and-seek"
    assert [hit.distance for hit in hits] == sorted(hit.distance for hit in hits)
    assert all(hit.distance <= index.similarity_threshold for hit in hits)


def test_search_matches_keywords() -> None:
    """Keywords are searchable alongside name and description."""
    index = SearchIndex(_catalog())

    assert [game.id for game in index.search("chase")][0] == "tag"


def test_search_tolerates_typos() -> None:
    """Approximate matching should survive a small typo."""
    index = SearchIndex(_catalog())

    assert "sardines" in [game.id for game in index.search("sardnes")]


def test_blank_query_returns_no_hits() -> None:
    """Blank queries mean no search is applied."""
    index = SearchIndex(_catalog())

    assert index.search("   ") == ()
    assert index.rank("") == ()


def test_zero_threshold_requires_exact_match() -> None:
    """A zero threshold keeps only perfect-score matches."""
    index = SearchIndex(_catalog(), similarity_threshold=0.0)

    assert [game.id for game in index.search("tag")] == ["tag"]
