"""Diagnostics command wiring for the game catalogue CLI."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from store.catalog_sdk import GameCatalogClient
from store.diagnostics_io import write_diagnostics_report


def add_diagnostics_command(subparsers: Any) -> None:
    """Register diagnostics subcommand."""
    parser = subparsers.add_parser(
        "diagnostics",
        help="Summarize excluded records, duplicates, and field coverage",
    )
    parser.add_argument("--output", help="Optional JSON report path")


def run_diagnostics_command(client: GameCatalogClient, args: argparse.Namespace) -> int:
    """Print diagnostics summary and optionally write the JSON report."""
    report = client.report
    print(f"total_count={report.total_count}")
    print(f"included_count={report.included_count}")
    print(f"excluded_count={report.excluded_count}")
    print(f"duplicate_groups={len(report.duplicate_groups)}")
    for record in report.records:
        if record.included:
            continue
        label = record.derived_id or f"row-{record.index + 1}"
        for issue in record.issues:
            print(f"excluded\t{record.index}\t{label}\t{issue.kind}\t{issue.message}")
        for violation in record.validation_issues:
            print(f"violation\t{record.index}\t{label}\t{violation.field}\t{violation.message}")
    for row in report.coverage:
        print(f"coverage\t{row.field_label}\t{row.present_count}/{row.total_count}")
    if args.output:
        report_path = write_diagnostics_report(report, Path(args.output))
        print(f"report_path={report_path}")
    return 0
