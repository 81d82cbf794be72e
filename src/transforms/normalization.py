"""Structural normalization of raw game records.

This module trims string leaves, derives identifiers, maps empty-ish
string sentinels to null, and repairs inverted numeric ranges.
It is the first stage of the catalogue build pipeline and never raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from core.constants import NULLISH_STRING_SENTINELS
from core.diagnostics_types import RecordIssue
from core.game_schema import OPTIONAL_STRING_FIELDS, RANGE_FIELD_PAIRS
from core.types import JsonValue

_NON_SLUG_CHARACTERS = re.compile(r"[^\w\s-]", re.ASCII)
_SLUG_SEPARATOR_RUNS = re.compile(r"[\s_-]+", re.ASCII)


@dataclass(frozen=True)
class NormalizedCandidate:
    """Normalized record awaiting schema validation.

    Attributes:
        fields: Normalized raw-keyed fields; ``id`` and ``name`` always present.
        derived_id: Identifier chosen for the record, empty when none.
        explicit_id: Raw string ``id`` value when one was supplied.
        warnings: Corrections applied during normalization.
        issues: Structural problems that exclude the record.
    """

    fields: dict[str, JsonValue]
    derived_id: str
    explicit_id: str | None
    warnings: tuple[str, ...] = ()
    issues: tuple[RecordIssue, ...] = ()


def normalize_record(raw_record: JsonValue) -> NormalizedCandidate:
    """Normalize one untrusted raw record.

    Args:
        raw_record: Arbitrary JSON-like value.

    Returns:
        Candidate with normalized fields, warnings, and structural issues.
        Records without a derivable identifier carry an empty id.
    """
    trimmed = trim_strings(raw_record)
    if not isinstance(trimmed, dict):
        issue = RecordIssue(
            kind="malformed_input",
            message=f"Expected a JSON object, got {_describe_type(trimmed)}.",
        )
        return NormalizedCandidate(
            fields={"id": "", "name": ""},
            derived_id="",
            explicit_id=None,
            issues=(issue,),
        )
    raw_id = trimmed.get("id")
    explicit_id = raw_id if isinstance(raw_id, str) else None
    name = normalize_nullish_string(trimmed.get("name"))
    derived_id = explicit_id if explicit_id else slugify(name or "")
    fields = dict(trimmed)
    fields["id"] = derived_id
    fields["name"] = name or ""
    for raw_key, _ in OPTIONAL_STRING_FIELDS:
        value = fields.get(raw_key)
        if isinstance(value, str):
            fields[raw_key] = normalize_nullish_string(value)
    warnings = _correct_ranges(fields)
    issues: tuple[RecordIssue, ...] = ()
    if not derived_id:
        issues = (_missing_identifier_issue(name),)
    return NormalizedCandidate(
        fields=fields,
        derived_id=derived_id,
        explicit_id=explicit_id,
        warnings=warnings,
        issues=issues,
    )


def trim_strings(value: JsonValue) -> JsonValue:
    """Trim every string leaf of a JSON-like value.

    Args:
        value: Any JSON-like value.

    Returns:
        Structurally identical value with stripped strings.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, list):
        return [trim_strings(item) for item in value]
    if isinstance(value, dict):
        return {key: trim_strings(item) for key, item in value.items()}
    return value


def slugify(text: str) -> str:
    """Derive a URL-safe identifier from a display name.

    Args:
        text: Display name.

    Returns:
        Lower-case hyphenated slug, possibly empty.
    """
    slug = _NON_SLUG_CHARACTERS.sub("", text.lower().strip())
    slug = _SLUG_SEPARATOR_RUNS.sub("-", slug)
    return slug.strip("-")


def normalize_nullish_string(value: object) -> str | None:
    """Map non-strings and empty-ish sentinels to ``None``.

    Args:
        value: Raw field value.

    Returns:
        Trimmed string, or ``None`` for ``""``, ``"null"`` and ``"null,"``.
    """
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if trimmed.lower() in NULLISH_STRING_SENTINELS:
        return None
    return trimmed


def _correct_ranges(fields: dict[str, JsonValue]) -> tuple[str, ...]:
    """Swap inverted min/max pairs in place and describe each swap."""
    warnings: list[str] = []
    for min_key, max_key in RANGE_FIELD_PAIRS:
        low = fields.get(min_key)
        high = fields.get(max_key)
        if not (_is_number(low) and _is_number(high)):
            continue
        if low > high:  # type: ignore[operator]
            fields[min_key], fields[max_key] = high, low
            warnings.append(
                f"{min_key} ({low}) was greater than {max_key} ({high}); values swapped."
            )
    return tuple(warnings)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _missing_identifier_issue(name: str | None) -> RecordIssue:
    if name:
        message = f"Name '{name}' does not produce an identifier and no id was given."
    else:
        message = "Record has no id and no name to derive one from."
    return RecordIssue(kind="missing_identifier", message=message)


def _describe_type(value: JsonValue) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "array"
