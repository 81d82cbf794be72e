"""Catalogue diagnostics aggregation.

This module computes field coverage over accepted games and assembles
the report handed to the external data-quality dashboard.
"""

from __future__ import annotations

from typing import Callable, Iterable

from core.diagnostics_types import (
    DiagnosticsReport,
    DuplicateGroup,
    FieldCoverage,
    RejectionRecord,
)
from core.types import Game
from store.catalog import Catalog

_COVERAGE_FIELDS: tuple[tuple[str, Callable[[Game], bool]], ...] = (
    ("Description", lambda game: game.description is not None),
    ("Category", lambda game: game.category is not None),
    ("Age range", lambda game: game.age_min is not None or game.age_max is not None),
    ("Player count", lambda game: game.players_min is not None or game.players_max is not None),
    ("Equipment", lambda game: game.equipment is not None),
    ("Prep level", lambda game: game.prep_level is not None),
    ("Traditionality", lambda game: game.traditionality is not None),
    ("Rules", lambda game: bool(game.general_rules)),
    ("Variations", lambda game: bool(game.variations)),
    ("Skills", lambda game: bool(game.skills_developed)),
    ("Tags", lambda game: bool(game.tags)),
    ("Regional popularity", lambda game: bool(game.regional_popularity)),
    ("Keywords", lambda game: bool(game.keywords)),
    ("Links", lambda game: bool(game.links)),
)


def compute_field_coverage(catalog: Catalog) -> tuple[FieldCoverage, ...]:
    """Count how many accepted games populate each tracked field.

    Args:
        catalog: Accepted games only.

    Returns:
        One coverage row per tracked field, in fixed order.
    """
    total = len(catalog)
    return tuple(
        FieldCoverage(
            field_label=label,
            present_count=sum(1 for game in catalog if is_present(game)),
            total_count=total,
        )
        for label, is_present in _COVERAGE_FIELDS
    )


def build_diagnostics_report(
    records: Iterable[RejectionRecord],
    duplicate_groups: Iterable[DuplicateGroup],
    catalog: Catalog,
) -> DiagnosticsReport:
    """Assemble the diagnostics report for one catalogue build."""
    return DiagnosticsReport(
        records=tuple(records),
        duplicate_groups=tuple(duplicate_groups),
        coverage=compute_field_coverage(catalog),
    )
