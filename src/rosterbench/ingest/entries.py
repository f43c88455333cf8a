"""Helpers to load performance entry CSVs and emit canonical records."""

from __future__ import annotations

import csv
import logging
import re
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from pydantic import BaseModel, ValidationError

from rosterbench.config.metrics import METRIC_TYPES
from rosterbench.config.positions import POSITIONS
from rosterbench.models import PerformanceEntry, PlayerPosition


logger = logging.getLogger(__name__)

DEFAULT_ENTRY_MAPPING = {
    "player_id": "player_id",
    "metric_type": "metric_type",
    "value": "value",
    "unit": "unit",
    "entry_date": "entry_date",
    "created_by": "created_by",
}

REQUIRED_ENTRY_FIELDS = ("player_id", "metric_type", "value", "entry_date")

# Names used by earlier versions of the test battery.
METRIC_ALIASES: dict[str, str] = {
    "broad_jump": "jump_gather",
    "shuffle_run": "shuttle_5_10_5",
    "3cone_drill": "3_cone_drill",
    "pushups": "pushups_1min",
}

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class EntryRow(BaseModel):
    raw_player_id: str
    raw_metric_type: str
    raw_value: str
    raw_unit: Optional[str] = None
    raw_entry_date: str
    raw_created_by: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "EntryRow":
        def extract(key: str, *, default: Optional[str] = None) -> Optional[str]:
            column = mapping.get(key)
            if column is None:
                return default
            value = row.get(column)
            if value is None:
                return default
            value = value.strip()
            return value or default

        return cls(
            raw_player_id=extract("player_id", default="") or "",
            raw_metric_type=extract("metric_type", default="") or "",
            raw_value=extract("value", default="") or "",
            raw_unit=extract("unit"),
            raw_entry_date=extract("entry_date", default="") or "",
            raw_created_by=extract("created_by"),
        )


@dataclass(frozen=True)
class ImportReport:
    total_rows: int
    imported_rows: int
    skipped_rows: List[str] = field(default_factory=list)


def _canonical_metric(raw_metric: str) -> str:
    token = raw_metric.strip().lower().replace(" ", "_").replace("-", "_")
    token = METRIC_ALIASES.get(token, token)
    if token not in METRIC_TYPES:
        raise ValueError(f"metric '{raw_metric}' is not a known metric")
    return token


def _parse_value(raw_value: str) -> float:
    text = raw_value.strip().replace(",", ".")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"value '{raw_value}' is not numeric") from None


def _parse_date(raw_date: str) -> date:
    text = raw_date.strip()
    if not _DATE_PATTERN.match(text):
        raise ValueError(f"entry_date '{raw_date}' is not YYYY-MM-DD")
    return date.fromisoformat(text)


def row_to_entry(row: EntryRow) -> PerformanceEntry:
    return PerformanceEntry(
        player_id=row.raw_player_id,
        metric_type=_canonical_metric(row.raw_metric_type),
        value=_parse_value(row.raw_value),
        unit=row.raw_unit,
        entry_date=_parse_date(row.raw_entry_date),
        created_by=row.raw_created_by,
    )


def _check_columns(fieldnames: Optional[List[str]], mapping: Mapping[str, str], required: Tuple[str, ...]) -> None:
    present = set(fieldnames or [])
    missing = [key for key in required if mapping.get(key) not in present]
    if missing:
        raise ValueError(f"CSV is missing required columns for: {', '.join(missing)}")


def load_entries_csv(
    path: Path,
    *,
    mapping: Mapping[str, str] | None = None,
) -> Tuple[List[PerformanceEntry], ImportReport]:
    """Read entries from ``path``; invalid rows are skipped and reported."""

    mapping = {**DEFAULT_ENTRY_MAPPING, **(mapping or {})}
    entries: List[PerformanceEntry] = []
    skipped: List[str] = []
    total = 0
    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        _check_columns(reader.fieldnames, mapping, REQUIRED_ENTRY_FIELDS)
        for line_no, raw in enumerate(reader, start=2):
            total += 1
            try:
                entries.append(row_to_entry(EntryRow.from_mapping(raw, mapping)))
            except (ValueError, ValidationError) as exc:
                reason = str(exc).splitlines()[0]
                logger.warning("Skipping row %s of %s: %s", line_no, path.name, reason)
                skipped.append(f"line {line_no}: {reason}")
    return entries, ImportReport(total_rows=total, imported_rows=len(entries), skipped_rows=skipped)


def load_positions_csv(path: Path) -> List[PlayerPosition]:
    positions: List[PlayerPosition] = []
    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        _check_columns(reader.fieldnames, {"player_id": "player_id", "position": "position"}, ("player_id", "position"))
        for line_no, raw in enumerate(reader, start=2):
            player_id = (raw.get("player_id") or "").strip()
            position = (raw.get("position") or "").strip()
            if position.lower() == "unassigned":
                position = "unassigned"
            else:
                position = position.upper()
            if not player_id or position not in POSITIONS:
                logger.warning("Skipping position row %s of %s: %r", line_no, path.name, raw)
                continue
            positions.append(PlayerPosition(player_id=player_id, position=position))
    return positions
