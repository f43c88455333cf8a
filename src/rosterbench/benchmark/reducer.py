"""Collapse raw attempts into one authoritative entry per key.

Two reducers live here and they answer different questions:

* :func:`best_daily_entries` keeps the best attempt per player, metric and
  day. Rankings and cohort bests are built on top of it.
* :func:`latest_entries` keeps a player's most recent result per metric,
  which is what "current standing" views compare.

Both are single-pass and pure. When two attempts tie on value, the one with
the earliest ``created_at`` wins; an attempt without a timestamp loses to one
that has it; anything still tied keeps whichever was seen first.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, Tuple

from rosterbench.models import PerformanceEntry

DailyKey = Tuple[str, str, date]
PlayerMetricKey = Tuple[str, str]


def _wins_tie(candidate: PerformanceEntry, incumbent: PerformanceEntry) -> bool:
    if candidate.created_at is None:
        return False
    if incumbent.created_at is None:
        return True
    return candidate.created_at < incumbent.created_at


def _beats(candidate: PerformanceEntry, incumbent: PerformanceEntry) -> bool:
    definition = candidate.definition
    if definition.is_better(candidate.value, incumbent.value):
        return True
    if candidate.value == incumbent.value:
        return _wins_tie(candidate, incumbent)
    return False


def best_daily_entries(entries: Iterable[PerformanceEntry]) -> Dict[DailyKey, PerformanceEntry]:
    """Return the winning attempt for every (player, metric, day)."""

    winners: Dict[DailyKey, PerformanceEntry] = {}
    for entry in entries:
        key = (entry.player_id, entry.metric_type, entry.entry_date)
        existing = winners.get(key)
        if existing is None or _beats(entry, existing):
            winners[key] = entry
    return winners


def latest_entries(entries: Iterable[PerformanceEntry]) -> Dict[PlayerMetricKey, PerformanceEntry]:
    """Return each player's most recent entry per metric.

    Same-day attempts are resolved with the best-daily comparator, so passing
    raw entries or already reduced best-daily entries gives the same result.
    """

    latest: Dict[PlayerMetricKey, PerformanceEntry] = {}
    for entry in entries:
        key = (entry.player_id, entry.metric_type)
        existing = latest.get(key)
        if existing is None or entry.entry_date > existing.entry_date:
            latest[key] = entry
        elif entry.entry_date == existing.entry_date and _beats(entry, existing):
            latest[key] = entry
    return latest


__all__ = [
    "DailyKey",
    "PlayerMetricKey",
    "best_daily_entries",
    "latest_entries",
]
