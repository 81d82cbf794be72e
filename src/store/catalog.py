"""Immutable catalogue of accepted games.

This module holds the ordered, deduplicated, schema-valid games that
search and filtering read from. A catalogue is built once and shared
by reference; nothing mutates it afterwards.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator

from core.errors import GameCatalogNotFoundError
from core.types import Game


class Catalog:
    """Frozen, ordered set of games keyed by unique id."""

    __slots__ = ("_games", "_by_id")

    def __init__(self, games: Iterable[Game]) -> None:
        ordered = tuple(games)
        by_id: dict[str, Game] = {}
        for game in ordered:
            if game.id in by_id:
                raise ValueError(f"Duplicate game id '{game.id}' in catalogue input.")
            by_id[game.id] = game
        self._games = ordered
        self._by_id = MappingProxyType(by_id)

    @property
    def games(self) -> tuple[Game, ...]:
        """Return games in catalogue order."""
        return self._games

    def get(self, game_id: str) -> Game | None:
        """Return a game by id, or ``None`` when absent."""
        return self._by_id.get(game_id)

    def require(self, game_id: str) -> Game:
        """Return a game by id.

        Raises:
            GameCatalogNotFoundError: If the id is not in the catalogue.
        """
        game = self._by_id.get(game_id)
        if game is None:
            raise GameCatalogNotFoundError(
                f"Game '{game_id}' is not in the catalogue. "
                "Check the id against the browse results."
            )
        return game

    def __len__(self) -> int:
        return len(self._games)

    def __iter__(self) -> Iterator[Game]:
        return iter(self._games)

    def __contains__(self, game_id: object) -> bool:
        return game_id in self._by_id

    def __repr__(self) -> str:
        return f"Catalog(games={len(self._games)})"
