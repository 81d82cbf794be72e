"""Unit tests for candidate schema validation."""

from __future__ import annotations

from transforms.normalization import normalize_record
from transforms.validation import validate_candidate


def test_validate_candidate_builds_typed_game() -> None:
    """Valid candidates should become games with tuple list fields."""
    outcome = validate_candidate(
        {
            "id": "tag",
            "name": "Tag",
            "ageMin": 4,
            "ageMax": 10.0,
            "prepLevel": "None",
            "tags": ["active", "chase"],
        }
    )

    assert outcome.is_valid and outcome.game is not None
    assert outcome.game.age_max == 10 and isinstance(outcome.game.age_max, int)
    assert outcome.game.prep_level == "None"
    assert outcome.game.tags == ("active", "chase")
    assert outcome.game.general_rules == ()


def test_validate_candidate_requires_name() -> None:
    """Empty names should be rejected with a readable message."""
    outcome = validate_candidate({"id": "nameless", "name": ""})

    assert outcome.game is None
    assert [(issue.field, issue.message) for issue in outcome.issues] == [
        ("name", "Name is required")
    ]


def test_validate_candidate_reports_every_violation_in_order() -> None:
    """All typed-field problems should be collected, not just the first."""
    outcome = validate_candidate(
        {
            "id": "",
            "name": "Broken",
            "description": 5,
            "ageMin": "seven",
            "playersMax": 2.5,
            "tags": ["ok", 7],
            "links": "https://example.com",
        }
    )

    assert [issue.field for issue in outcome.issues] == [
        "id",
        "description",
        "ageMin",
        "playersMax",
        "tags.1",
        "links",
    ]
    assert outcome.issues[4].value == 7


def test_validate_candidate_rejects_boolean_numbers() -> None:
    """Booleans are not integers for schema purposes."""
    outcome = validate_candidate({"id": "x", "name": "X", "ageMin": True})

    assert outcome.issues[0].message == "Expected number, received boolean"


def test_validate_candidate_defaults_missing_and_null_lists() -> None:
    """Missing or null list fields should become empty tuples."""
    outcome = validate_candidate({"id": "x", "name": "X", "keywords": None})

    assert outcome.game is not None and outcome.game.keywords == ()


def test_validate_candidate_ignores_unknown_fields() -> None:
    """Extra keys in raw records are not schema violations."""
    outcome = validate_candidate({"id": "x", "name": "X", "popularity": {"uk": 3}})

    assert outcome.is_valid


def test_validate_candidate_accepts_normalized_record() -> None:
    """Normalizer output for a clean record should validate."""
    candidate = normalize_record({"name": "Tag", "ageMin": 12, "ageMax": 8})

    outcome = validate_candidate(candidate.fields)

    assert outcome.game is not None
    assert (outcome.game.age_min, outcome.game.age_max) == (8, 12)
