"""Diagnostics report serialization.

This module isolates JSON IO for the data-quality report so the
pipeline stays focused on building the catalogue.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from core.diagnostics_types import DiagnosticsReport
from core.errors import GameCatalogStoreError


def diagnostics_to_dict(report: DiagnosticsReport) -> dict[str, Any]:
    """Convert a diagnostics report into a JSON-ready dictionary.

    Args:
        report: Report to convert.

    Returns:
        Dictionary with camelCase keys for the reporting dashboard.
    """
    return {
        "summary": {
            "totalCount": report.total_count,
            "includedCount": report.included_count,
            "excludedCount": report.excluded_count,
        },
        "records": [_record_to_dict(asdict(record)) for record in report.records],
        "duplicateGroups": [
            {
                "sharedId": group.shared_id,
                "memberIndices": list(group.member_indices),
                "names": list(group.names),
            }
            for group in report.duplicate_groups
        ],
        "coverage": [
            {
                "fieldLabel": row.field_label,
                "presentCount": row.present_count,
                "totalCount": row.total_count,
            }
            for row in report.coverage
        ],
    }


def write_diagnostics_report(report: DiagnosticsReport, output_path: Path) -> Path:
    """Write a diagnostics report as indented JSON.

    Args:
        report: Report to persist.
        output_path: Destination file path.

    Returns:
        Resolved output path.

    Raises:
        GameCatalogStoreError: If the file cannot be written.
    """
    resolved_path = output_path.expanduser().resolve()
    payload = json.dumps(diagnostics_to_dict(report), indent=2) + "\n"
    try:
        resolved_path.parent.mkdir(parents=True, exist_ok=True)
        resolved_path.write_text(payload, encoding="utf-8")
    except OSError as error:
        raise GameCatalogStoreError(
            f"Failed to write diagnostics report to {resolved_path}: {error}. "
            "Choose a writable output path."
        ) from error
    return resolved_path


def _record_to_dict(record: dict[str, Any]) -> dict[str, Any]:
    payload = {
        "index": record["index"],
        "derivedId": record["derived_id"],
        "explicitId": record["explicit_id"],
        "name": record["name"],
        "issues": record["issues"],
        "warnings": list(record["warnings"]),
        "validationIssues": record["validation_issues"],
        "included": record["included"],
    }
    if record["duplicate_count"] is not None:
        payload["duplicateCount"] = record["duplicate_count"]
    if record["duplicate_of"] is not None:
        payload["duplicateOf"] = record["duplicate_of"]
    return payload
