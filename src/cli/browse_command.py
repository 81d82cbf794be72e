"""Browse command wiring for the game catalogue CLI."""

from __future__ import annotations

import argparse
from typing import Any

from search.url_state import decode_state, encode_state
from store.catalog_sdk import GameCatalogClient


def add_browse_command(subparsers: Any) -> None:
    """Register browse subcommand."""
    parser = subparsers.add_parser(
        "browse",
        help="Evaluate a URL query string such as 'q=tag&tags=active&page=2'",
    )
    parser.add_argument(
        "query_string",
        nargs="?",
        default="",
        help="Browse state as a URL query string",
    )


def run_browse_command(client: GameCatalogClient, args: argparse.Namespace) -> int:
    """Evaluate browse state and print the result page."""
    state = decode_state(args.query_string)
    result = client.browse(state)
    print(f"total_count={result.total_count}")
    print(f"page={result.page}")
    print(f"total_pages={result.total_pages}")
    for game in result.games:
        print(f"{game.id}\t{game.name}")
    print(f"query={encode_state(state.with_page(result.page))}")
    return 0
