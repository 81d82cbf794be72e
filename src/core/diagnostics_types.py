"""Typed models for catalogue build diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from core.types import JsonValue

IssueKind = Literal[
    "malformed_input",
    "missing_identifier",
    "duplicate_identifier",
    "schema_violation",
]


@dataclass(frozen=True)
class RecordIssue:
    """Structural problem that excludes a record from the catalogue."""

    kind: IssueKind
    message: str


@dataclass(frozen=True)
class ValidationIssue:
    """One schema violation found on a normalized candidate.

    Attributes:
        field: Dotted raw field path, e.g. ``tags.2``.
        message: Human-readable violation message.
        value: Offending raw value.
    """

    field: str
    message: str
    value: JsonValue = None


@dataclass(frozen=True)
class RejectionRecord:
    """Per-input diagnostic trace of the catalogue decision.

    Attributes:
        index: Zero-based position in the raw input sequence.
        derived_id: Identifier used for the catalogue, empty when none.
        explicit_id: Raw ``id`` value when it was a string.
        name: Display name, empty when missing.
        issues: Structural exclusion reasons.
        warnings: Corrections applied without exclusion.
        validation_issues: Schema violations.
        included: Whether the record reached the catalogue.
        duplicate_count: Size of the duplicate group sharing this id.
        duplicate_of: Index of the first occurrence for excluded duplicates.
    """

    index: int
    derived_id: str
    explicit_id: str | None
    name: str
    issues: tuple[RecordIssue, ...]
    warnings: tuple[str, ...]
    validation_issues: tuple[ValidationIssue, ...]
    included: bool
    duplicate_count: int | None = None
    duplicate_of: int | None = None


@dataclass(frozen=True)
class DuplicateGroup:
    """Records sharing one identifier, first occurrence first."""

    shared_id: str
    member_indices: tuple[int, ...]
    names: tuple[str, ...]


@dataclass(frozen=True)
class FieldCoverage:
    """How many accepted games populate one field."""

    field_label: str
    present_count: int
    total_count: int


@dataclass(frozen=True)
class DiagnosticsReport:
    """Aggregated diagnostics for one catalogue build."""

    records: tuple[RejectionRecord, ...]
    duplicate_groups: tuple[DuplicateGroup, ...]
    coverage: tuple[FieldCoverage, ...]

    @property
    def total_count(self) -> int:
        """Count raw input records."""
        return len(self.records)

    @property
    def included_count(self) -> int:
        """Count records accepted into the catalogue."""
        return sum(1 for record in self.records if record.included)

    @property
    def excluded_count(self) -> int:
        """Count records excluded from the catalogue."""
        return self.total_count - self.included_count
