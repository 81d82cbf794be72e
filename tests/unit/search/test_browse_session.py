"""Unit tests for browse session scheduling and URL sync."""

from __future__ import annotations

from search.browse_session import BrowseSession
from tests.catalog_builders import make_context, make_game


def _session(query_string: str = "") -> BrowseSession:
    games = [
        make_game("tag", name="Tag", category="Group", tags=["active"]),
        make_game("hide-and-seek", name="Hide-and-Seek", category="Wide"),
        make_game("musical-chairs", name="Musical Chairs", category="Party", tags=["music"]),
    ]
    return BrowseSession(make_context(games, page_size=2, query_debounce_ms=300), query_string)


def test_session_starts_from_url_state() -> None:
    """The initial state is decoded from the incoming query string."""
    session = _session("category=Party&page=3")

    assert session.state.selected("category") == ("Party",)
    assert session.results().page == 1


def test_typed_query_waits_for_quiet_period() -> None:
    """Keystrokes only apply after 300ms without further typing."""
    session = _session()
    session.type_query("hi", now=0.0)
    session.type_query("hide", now=0.2)

    assert session.flush(now=0.4) is False
    assert session.state.query == ""
    assert session.pending_query == "hide"
    assert session.flush(now=0.5) is True
    assert session.state.query == "hide"
    assert session.pending_query is None


def test_newer_keystroke_supersedes_pending_query() -> None:
    """Only the latest pending text is ever applied."""
    session = _session()
    session.type_query("tag", now=0.0)
    session.type_query("musical", now=0.25)
    session.flush(now=1.0)

    assert session.state.query == "musical"


def test_facet_and_page_changes_apply_immediately() -> None:
    """Discrete events bypass the debounce."""
    session = _session()

    assert session.set_page(2) is True
    assert session.state.page == 2
    assert session.toggle_facet("category", "Party") is True
    assert session.state.page == 1
    assert [game.id for game in session.results().games] == ["musical-chairs"]
    assert session.toggle_facet("category", "Party") is True
    assert session.state.selected("category") == ()


def test_sync_from_url_ignores_identical_state() -> None:
    """Re-reading the URL the session just wrote must not re-apply state."""
    session = _session()
    session.toggle_facet("tags", "music")
    written = session.query_string()

    assert session.sync_from_url(written) is False
    assert session.sync_from_url("?" + written) is False


def test_sync_from_url_applies_navigation_changes() -> None:
    """Back/forward navigation to a different state is applied."""
    session = _session("tags=music")
    session.type_query("tag", now=0.0)

    assert session.sync_from_url("q=hide") is True
    assert session.state.query == "hide"
    assert session.state.selected("tags") == ()
    assert session.pending_query is None


def test_query_string_is_canonical() -> None:
    """The address bar receives the canonical encoding."""
    session = _session("tags=music&tags=active&page=1")

    assert session.query_string() == "tags=active&tags=music"


def test_clear_facets_and_sort_apply_immediately() -> None:
    """Sort changes and clearing filters take effect at once."""
    session = _session("category=Party")

    assert session.set_sort("name_asc") is True
    assert session.clear_facets() is True
    assert [game.id for game in session.results().games] == ["hide-and-seek", "musical-chairs"]
    assert session.clear_facets() is False
