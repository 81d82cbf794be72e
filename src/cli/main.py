"""Game catalogue CLI entry points.
This module exposes browse, facet, lookup, and diagnostics commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, replace
from pathlib import Path
from typing import Any, Sequence

from cli.browse_command import add_browse_command, run_browse_command
from cli.diagnostics_command import add_diagnostics_command, run_diagnostics_command
from core.config import GameCatalogConfig
from core.errors import GameCatalogError
from core.game_schema import FACET_KEYS
from store.catalog_sdk import GameCatalogClient
from store.facet_index import filter_facet_options, prettify_facet_value


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="gamecatalog", description="Game catalogue CLI")
    parser.add_argument("--source", help="Override GAMECATALOG_SOURCE for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_browse_command(subparsers)
    _add_facets_command(subparsers)
    _add_show_command(subparsers)
    add_diagnostics_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game catalogue CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.source)
        if args.command == "browse":
            return run_browse_command(client, args)
        if args.command == "facets":
            return _run_facets_command(client, args)
        if args.command == "show":
            return _run_show_command(client, args)
        if args.command == "diagnostics":
            return run_diagnostics_command(client, args)
    except GameCatalogError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(source: str | None) -> GameCatalogClient:
    """Build SDK client with optional source override.

    Args:
        source: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = GameCatalogConfig.from_env()
    if source:
        config = replace(config, source_path=Path(source).expanduser())
    return GameCatalogClient(config)


def _run_facets_command(client: GameCatalogClient, args: argparse.Namespace) -> int:
    """Handle facets command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    keys = (args.key,) if args.key else FACET_KEYS
    for key in keys:
        options = filter_facet_options(client.facets[key], args.search or "")
        for value in options:
            print(f"{key}\t{value}\t{prettify_facet_value(value)}")
    return 0


def _run_show_command(client: GameCatalogClient, args: argparse.Namespace) -> int:
    """Handle show command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    game = client.game(args.game_id)
    print(json.dumps(asdict(game), indent=2))
    return 0


def _add_facets_command(subparsers: Any) -> None:
    """Register facets subcommand."""
    parser = subparsers.add_parser("facets", help="List facet values present in the catalogue")
    parser.add_argument("--key", choices=FACET_KEYS, help="Only list one facet")
    parser.add_argument("--search", help="Case-insensitive substring filter for values")


def _add_show_command(subparsers: Any) -> None:
    """Register show subcommand."""
    parser = subparsers.add_parser("show", help="Print one game as JSON")
    parser.add_argument("game_id", help="Game identifier")
