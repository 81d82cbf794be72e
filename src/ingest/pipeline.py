"""Catalogue build orchestration.

This module runs every raw record through normalization, validation,
and identifier deduplication, then freezes the accepted games into a
``Catalog`` alongside a per-record diagnostics report. Each record is
evaluated independently; a bad record never halts the build.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from core.diagnostics_types import DiagnosticsReport, RecordIssue, RejectionRecord
from core.logging_config import get_logger
from core.types import Game, JsonValue
from store.catalog import Catalog
from store.diagnostics import build_diagnostics_report
from transforms.identifier_deduplication import IdentifierDeduplicator
from transforms.normalization import NormalizedCandidate, normalize_record
from transforms.validation import ValidationOutcome, validate_candidate

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class CatalogBuild:
    """Result of one catalogue build.

    Attributes:
        catalog: Accepted, deduplicated games in input order.
        report: Diagnostics for every input record.
    """

    catalog: Catalog
    report: DiagnosticsReport


@dataclass(frozen=True)
class _RecordTrace:
    """Intermediate per-record state collected during the first pass."""

    index: int
    candidate: NormalizedCandidate
    outcome: ValidationOutcome | None
    duplicate_of: int | None


class CatalogPipelineRunner:
    """One-shot runner turning raw records into a catalogue build."""

    def __init__(self) -> None:
        self._deduplicator = IdentifierDeduplicator()
        self._accepted: list[Game] = []
        self._traces: list[_RecordTrace] = []

    def run(self, raw_records: Iterable[JsonValue]) -> CatalogBuild:
        """Process every raw record and return the catalogue build."""
        for index, raw_record in enumerate(raw_records):
            self._traces.append(self._process_record(index, raw_record))
        catalog = Catalog(self._accepted)
        records = [self._build_rejection_record(trace) for trace in self._traces]
        report = build_diagnostics_report(
            records, self._deduplicator.duplicate_groups(), catalog
        )
        _log_build_completion(report)
        return CatalogBuild(catalog=catalog, report=report)

    def _process_record(self, index: int, raw_record: JsonValue) -> _RecordTrace:
        candidate = normalize_record(raw_record)
        if _is_malformed(candidate):
            return _RecordTrace(index=index, candidate=candidate, outcome=None, duplicate_of=None)
        outcome = validate_candidate(candidate.fields)
        duplicate_of = None
        if outcome.game is not None:
            duplicate_of = self._deduplicator.claim(outcome.game.id, index, outcome.game.name)
            if duplicate_of is None:
                self._accepted.append(outcome.game)
        return _RecordTrace(
            index=index,
            candidate=candidate,
            outcome=outcome,
            duplicate_of=duplicate_of,
        )

    def _build_rejection_record(self, trace: _RecordTrace) -> RejectionRecord:
        candidate = trace.candidate
        issues = list(candidate.issues)
        validation_issues = trace.outcome.issues if trace.outcome is not None else ()
        if validation_issues:
            issues.append(
                RecordIssue(
                    kind="schema_violation",
                    message=f"{len(validation_issues)} field(s) failed schema validation.",
                )
            )
        if trace.duplicate_of is not None:
            issues.append(
                RecordIssue(
                    kind="duplicate_identifier",
                    message=(
                        f"Identifier '{candidate.derived_id}' was already used by "
                        f"record {trace.duplicate_of}."
                    ),
                )
            )
        validated = trace.outcome is not None and trace.outcome.is_valid
        included = validated and not issues
        group_size = self._deduplicator.group_size(candidate.derived_id) if validated else 0
        record = RejectionRecord(
            index=trace.index,
            derived_id=candidate.derived_id,
            explicit_id=candidate.explicit_id,
            name=_display_name(candidate),
            issues=tuple(issues),
            warnings=candidate.warnings,
            validation_issues=validation_issues,
            included=included,
            duplicate_count=group_size if group_size > 1 else None,
            duplicate_of=trace.duplicate_of,
        )
        if not included:
            _LOGGER.debug(
                "record_excluded",
                index=record.index,
                derived_id=record.derived_id,
                issue_kinds=[issue.kind for issue in record.issues],
            )
        return record


def run_catalog_pipeline(raw_records: Iterable[JsonValue]) -> CatalogBuild:
    """Build a catalogue and diagnostics from raw records.

    Args:
        raw_records: Ordered, untrusted JSON-like records.

    Returns:
        Frozen catalogue plus per-record diagnostics.
    """
    return CatalogPipelineRunner().run(raw_records)


def build_catalog(raw_records: Iterable[JsonValue]) -> Catalog:
    """Build only the catalogue from raw records.

    Args:
        raw_records: Ordered, untrusted JSON-like records.

    Returns:
        Frozen catalogue of accepted games.
    """
    return run_catalog_pipeline(raw_records).catalog


def _is_malformed(candidate: NormalizedCandidate) -> bool:
    return any(issue.kind == "malformed_input" for issue in candidate.issues)


def _display_name(candidate: NormalizedCandidate) -> str:
    name = candidate.fields.get("name")
    return name if isinstance(name, str) else ""


def _log_build_completion(report: DiagnosticsReport) -> None:
    """Log catalogue build completion with aggregate counts."""
    _LOGGER.info(
        "catalog_built",
        input_count=report.total_count,
        included_count=report.included_count,
        excluded_count=report.excluded_count,
        duplicate_group_count=len(report.duplicate_groups),
    )
