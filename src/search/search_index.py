"""Fuzzy text search over the catalogue.

This module wraps rapidfuzz behind a narrow ``search(query)`` contract.
Searchable text is pre-processed once at build time; queries are ranked
by ascending dissimilarity and cut off at a fixed similarity threshold.
"""

from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz import fuzz, utils

from core.constants import DEFAULT_SIMILARITY_THRESHOLD
from core.logging_config import get_logger
from core.types import Game, SearchHit
from store.catalog import Catalog

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class _IndexedGame:
    """Game with pre-processed searchable texts."""

    position: int
    game: Game
    texts: tuple[str, ...]


class SearchIndex:
    """Read-only fuzzy index keyed on name, description, and keywords."""

    def __init__(
        self,
        catalog: Catalog,
        similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    ) -> None:
        """Build the index once over a catalogue.

        Args:
            catalog: Accepted games.
            similarity_threshold: Maximum allowed distance in [0, 1].
        """
        self._threshold = similarity_threshold
        self._entries = tuple(
            _IndexedGame(position=position, game=game, texts=_searchable_texts(game))
            for position, game in enumerate(catalog)
        )
        self._by_id = {entry.game.id: entry.game for entry in self._entries}
        _LOGGER.info(
            "search_index_built",
            game_count=len(self._entries),
            similarity_threshold=similarity_threshold,
        )

    @property
    def similarity_threshold(self) -> float:
        """Return the maximum distance a match may have."""
        return self._threshold

    def rank(self, query: str) -> tuple[SearchHit, ...]:
        """Rank games against a query.

        Args:
            query: Free-text query. Blank queries return no hits; callers
                use catalogue order instead.

        Returns:
            Hits sorted by ascending distance, ties in catalogue order.
        """
        processed_query = utils.default_process(query)
        if not processed_query:
            return ()
        score_cutoff = (1.0 - self._threshold) * 100.0
        scored: list[tuple[float, int, Game]] = []
        for entry in self._entries:
            score = _best_score(processed_query, entry.texts, score_cutoff)
            if score is None:
                continue
            scored.append((1.0 - score / 100.0, entry.position, entry.game))
        scored.sort(key=lambda item: (item[0], item[1]))
        return tuple(SearchHit(game_id=game.id, distance=distance) for distance, _, game in scored)

    def search(self, query: str) -> tuple[Game, ...]:
        """Return games matching a query, most relevant first."""
        return tuple(self._by_id[hit.game_id] for hit in self.rank(query))


def _searchable_texts(game: Game) -> tuple[str, ...]:
    texts = [game.name, game.description or "", *game.keywords]
    processed = (utils.default_process(text) for text in texts)
    return tuple(text for text in processed if text)


def _best_score(query: str, texts: tuple[str, ...], score_cutoff: float) -> float | None:
    """Return the best weighted ratio at or above the cutoff, else None."""
    best: float | None = None
    for text in texts:
        score = fuzz.WRatio(query, text, score_cutoff=score_cutoff)
        if score and score >= score_cutoff and (best is None or score > best):
            best = score
    return best
