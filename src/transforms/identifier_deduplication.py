"""Identifier-based deduplication transform.

This module keeps the first validated record for each identifier and
links every later record sharing that id back to the first occurrence.
Near-duplicate names with different ids are not detected.
"""

from __future__ import annotations

from core.diagnostics_types import DuplicateGroup


class IdentifierDeduplicator:
    """Insertion-ordered registry of identifiers claimed by validated records."""

    def __init__(self) -> None:
        self._members: dict[str, list[int]] = {}
        self._names: dict[str, list[str]] = {}

    def claim(self, record_id: str, index: int, name: str = "") -> int | None:
        """Claim an identifier for a validated record.

        Args:
            record_id: Validated record identifier.
            index: Position of the record in the raw input.
            name: Display name kept for duplicate grouping.

        Returns:
            ``None`` when this is the first occurrence, otherwise the
            input index of the first occurrence.
        """
        members = self._members.setdefault(record_id, [])
        self._names.setdefault(record_id, []).append(name)
        members.append(index)
        if len(members) == 1:
            return None
        return members[0]

    def group_size(self, record_id: str) -> int:
        """Return how many records claimed an identifier."""
        return len(self._members.get(record_id, ()))

    def duplicate_groups(self) -> tuple[DuplicateGroup, ...]:
        """Return groups of two or more records, in first-seen order."""
        return tuple(
            DuplicateGroup(
                shared_id=record_id,
                member_indices=tuple(members),
                names=tuple(self._names[record_id]),
            )
            for record_id, members in self._members.items()
            if len(members) > 1
        )
