"""Command-line interface for importing results and computing benchmarks."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import Any, Sequence

from rosterbench.benchmark import (
    COMPARISON_MODES,
    CohortSpec,
    InvalidCohortError,
    cohort_averages,
    cohort_best_values,
    compare_player,
    dashboard_summary,
    player_neighborhood,
)
from rosterbench.config import POSITIONS, UNITS, Settings
from rosterbench.config_loader import ColumnProfile
from rosterbench.ingest import load_entries_csv, load_positions_csv
from rosterbench.persistence import EntryStore


def _add_cohort_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--mode", choices=COMPARISON_MODES, default="best", help="Comparison cohort")
    parser.add_argument("--position", choices=POSITIONS, default=None, help="Position code for --mode position")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Roster performance benchmarks")
    parser.add_argument("--db", type=Path, default=None, help="SQLite database path (default: $ROSTERBENCH_DB_PATH)")
    sub = parser.add_subparsers(dest="command", required=True)

    imp = sub.add_parser("import-entries", help="Import performance entries from CSV")
    imp.add_argument("csv", type=Path, help="Path to entries CSV")
    imp.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for CSV columns (e.g., player_id=Athlete)",
    )
    imp.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    imp.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    imp.add_argument("--dry-run", action="store_true", help="Validate the file without storing entries")

    pos = sub.add_parser("import-positions", help="Import player positions from CSV")
    pos.add_argument("csv", type=Path, help="CSV with player_id and position columns")

    bench = sub.add_parser("benchmarks", help="Best value per metric for a cohort")
    _add_cohort_args(bench)

    compare = sub.add_parser("compare", help="Normalized 0-100 scores against a cohort best")
    compare.add_argument("player_id")
    _add_cohort_args(compare)

    hood = sub.add_parser("neighborhood", help="Percentile and next-best value per metric")
    hood.add_argument("player_id")
    hood.add_argument("--mode", choices=COMPARISON_MODES, default=None, help="Restrict ranking to a cohort")
    hood.add_argument("--position", choices=POSITIONS, default=None)

    avg = sub.add_parser("averages", help="Roster, position and unit averages")
    avg.add_argument("--position", choices=POSITIONS, default=None)
    avg.add_argument("--unit", choices=UNITS, default=None)

    dash = sub.add_parser("dashboard", help="Dashboard summary for a player")
    dash.add_argument("player_id")
    dash.add_argument("--as-of", type=date.fromisoformat, default=None, help="Reference date (YYYY-MM-DD)")

    return parser


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, default=str))


def _cohort(parser: argparse.ArgumentParser, mode: str | None, position: str | None) -> CohortSpec | None:
    if mode is None:
        return None
    try:
        return CohortSpec(mode=mode, position=position)
    except InvalidCohortError as exc:
        parser.error(str(exc))
    return None


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    store = EntryStore(args.db)

    if args.command == "import-entries":
        mapping = _parse_mapping(args.column)
        if args.load_profile:
            mapping = ColumnProfile.load(args.load_profile).entry_mapping | mapping
        entries, report = load_entries_csv(args.csv, mapping=mapping or None)
        if args.save_profile:
            ColumnProfile(mapping).save(args.save_profile)
            print(f"Saved mapping profile to {args.save_profile}")
        if not args.dry_run:
            store.add_entries(entries)
        print(f"Imported {report.imported_rows}/{report.total_rows} entries")
        if report.skipped_rows:
            preview = ", ".join(report.skipped_rows[:5])
            more = len(report.skipped_rows) - 5
            suffix = f", +{more} more" if more > 0 else ""
            print(f"Skipped rows: {preview}{suffix}")
        return

    if args.command == "import-positions":
        positions = load_positions_csv(args.csv)
        for record in positions:
            store.set_position(record.player_id, record.position)
        print(f"Assigned {len(positions)} positions")
        return

    entries = store.list_entries()
    positions = store.position_map()

    if args.command == "benchmarks":
        spec = _cohort(parser, args.mode, args.position)
        _print_json({"label": spec.label, "benchmarks": cohort_best_values(entries, spec, positions)})
    elif args.command == "compare":
        spec = _cohort(parser, args.mode, args.position)
        result = compare_player(entries, args.player_id, spec, positions)
        _print_json(
            {
                "player_id": result.player_id,
                "label": result.label,
                "benchmarks": result.benchmarks,
                "metrics": [asdict(metric) for metric in result.metrics],
            }
        )
    elif args.command == "neighborhood":
        spec = _cohort(parser, args.mode, args.position)
        results = player_neighborhood(entries, args.player_id, cohort=spec, positions=positions)
        _print_json([asdict(item) for item in results])
    elif args.command == "averages":
        _print_json(asdict(cohort_averages(entries, positions, position=args.position, unit=args.unit)))
    elif args.command == "dashboard":
        summary = dashboard_summary(
            entries,
            args.player_id,
            positions,
            as_of=args.as_of,
            settings=Settings.from_env(),
        )
        _print_json(asdict(summary))


if __name__ == "__main__":
    main()
