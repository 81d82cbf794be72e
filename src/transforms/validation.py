"""Schema validation for normalized game candidates.

This module turns a normalized candidate into a typed ``Game`` or an
ordered list of field violations. Failure is an expected outcome for
dirty input and is reported, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core.diagnostics_types import ValidationIssue
from core.game_schema import (
    INTEGER_FIELDS,
    OPTIONAL_STRING_FIELDS,
    STRING_LIST_FIELDS,
)
from core.types import Game, JsonValue


@dataclass(frozen=True)
class ValidationOutcome:
    """Validation result for one candidate.

    Attributes:
        game: Typed game when validation succeeded.
        issues: Ordered violations when validation failed.
    """

    game: Game | None
    issues: tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Return whether the candidate produced a game."""
        return self.game is not None


def validate_candidate(fields: dict[str, JsonValue]) -> ValidationOutcome:
    """Validate normalized fields against the game schema.

    Args:
        fields: Raw-keyed normalized fields.

    Returns:
        Outcome with a game, or with every violation found.
    """
    issues: list[ValidationIssue] = []
    values: dict[str, Any] = {}
    values["id"] = _check_required_string(fields, "id", "Identifier is required", issues)
    values["name"] = _check_required_string(fields, "name", "Name is required", issues)
    for raw_key, attribute in OPTIONAL_STRING_FIELDS:
        values[attribute] = _check_optional_string(fields, raw_key, issues)
    for raw_key, attribute in INTEGER_FIELDS:
        values[attribute] = _check_optional_integer(fields, raw_key, issues)
    for raw_key, attribute in STRING_LIST_FIELDS:
        values[attribute] = _check_string_list(fields, raw_key, issues)
    if issues:
        return ValidationOutcome(game=None, issues=tuple(issues))
    return ValidationOutcome(game=Game(**values))


def _check_required_string(
    fields: dict[str, JsonValue],
    key: str,
    empty_message: str,
    issues: list[ValidationIssue],
) -> str:
    value = fields.get(key)
    if not isinstance(value, str):
        issues.append(
            ValidationIssue(field=key, message=_expected("string", value), value=value)
        )
        return ""
    if not value:
        issues.append(ValidationIssue(field=key, message=empty_message, value=value))
    return value


def _check_optional_string(
    fields: dict[str, JsonValue],
    key: str,
    issues: list[ValidationIssue],
) -> str | None:
    value = fields.get(key)
    if value is None or isinstance(value, str):
        return value
    issues.append(ValidationIssue(field=key, message=_expected("string", value), value=value))
    return None


def _check_optional_integer(
    fields: dict[str, JsonValue],
    key: str,
    issues: list[ValidationIssue],
) -> int | None:
    value = fields.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        issues.append(
            ValidationIssue(field=key, message=_expected("number", value), value=value)
        )
        return None
    if isinstance(value, float) and not value.is_integer():
        issues.append(
            ValidationIssue(field=key, message="Expected integer, received float", value=value)
        )
        return None
    return int(value)


def _check_string_list(
    fields: dict[str, JsonValue],
    key: str,
    issues: list[ValidationIssue],
) -> tuple[str, ...]:
    value = fields.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        issues.append(ValidationIssue(field=key, message=_expected("array", value), value=value))
        return ()
    items: list[str] = []
    for position, item in enumerate(value):
        if isinstance(item, str):
            items.append(item)
            continue
        issues.append(
            ValidationIssue(
                field=f"{key}.{position}",
                message=_expected("string", item),
                value=item,
            )
        )
    return tuple(items)


def _expected(expected_type: str, value: JsonValue) -> str:
    return f"Expected {expected_type}, received {_received_type(value)}"


def _received_type(value: JsonValue) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"
