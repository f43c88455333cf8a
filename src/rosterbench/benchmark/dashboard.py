"""Team and player summary figures for the dashboard view."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Literal, Mapping, Optional

from rosterbench.config.metrics import get_metric, iter_metrics
from rosterbench.config.settings import Settings
from rosterbench.models import PerformanceEntry

MetricStatusKind = Literal["missing", "outdated", "current"]


@dataclass(frozen=True)
class MetricBest:
    metric_type: str
    value: float


@dataclass(frozen=True)
class MetricStatus:
    metric_type: str
    status: MetricStatusKind
    last_entry: Optional[date] = None
    best_value: Optional[float] = None


@dataclass(frozen=True)
class DashboardSummary:
    player_id: str
    as_of: date
    total_players: int
    team_recent_entries: int
    player_recent_entries: int
    team_best_all_time: List[MetricBest]
    team_best_recent: List[MetricBest]
    metric_statuses: List[MetricStatus]


def shift_months(day: date, months: int) -> date:
    """Move ``day`` back by ``months``, clamping to the end of shorter months."""

    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def team_bests(entries: Iterable[PerformanceEntry]) -> List[MetricBest]:
    """Best raw value per metric across every entry, in registry order."""

    best: dict[str, float] = {}
    for entry in entries:
        definition = get_metric(entry.metric_type)
        current = best.get(entry.metric_type)
        if current is None or definition.is_better(entry.value, current):
            best[entry.metric_type] = entry.value
    return [
        MetricBest(metric_type=definition.metric_type, value=best[definition.metric_type])
        for definition in iter_metrics()
        if definition.metric_type in best
    ]


def metric_statuses(
    player_entries: Iterable[PerformanceEntry],
    *,
    as_of: date,
    outdated_months: int,
) -> List[MetricStatus]:
    entries = list(player_entries)
    cutoff = shift_months(as_of, outdated_months)
    statuses: List[MetricStatus] = []
    for definition in iter_metrics():
        metric_entries = [entry for entry in entries if entry.metric_type == definition.metric_type]
        if not metric_entries:
            statuses.append(MetricStatus(metric_type=definition.metric_type, status="missing"))
            continue
        last_entry = max(entry.entry_date for entry in metric_entries)
        statuses.append(
            MetricStatus(
                metric_type=definition.metric_type,
                status="outdated" if last_entry < cutoff else "current",
                last_entry=last_entry,
                best_value=definition.best_of(entry.value for entry in metric_entries),
            )
        )
    return statuses


def dashboard_summary(
    entries: Iterable[PerformanceEntry],
    player_id: str,
    positions: Mapping[str, str] | None = None,
    *,
    as_of: date | None = None,
    settings: Settings | None = None,
) -> DashboardSummary:
    settings = settings or Settings()
    as_of = as_of or date.today()
    all_entries = list(entries)
    player_entries = [entry for entry in all_entries if entry.player_id == player_id]

    recent_cutoff = as_of - timedelta(days=settings.recent_days)
    trend_cutoff = shift_months(as_of, settings.trend_months)

    players = {entry.player_id for entry in all_entries}
    players.update(positions or {})

    return DashboardSummary(
        player_id=player_id,
        as_of=as_of,
        total_players=len(players),
        team_recent_entries=sum(1 for entry in all_entries if entry.entry_date >= recent_cutoff),
        player_recent_entries=sum(1 for entry in player_entries if entry.entry_date >= recent_cutoff),
        team_best_all_time=team_bests(all_entries),
        team_best_recent=team_bests(entry for entry in all_entries if entry.entry_date >= trend_cutoff),
        metric_statuses=metric_statuses(
            player_entries,
            as_of=as_of,
            outdated_months=settings.outdated_months,
        ),
    )


__all__ = [
    "DashboardSummary",
    "MetricBest",
    "MetricStatus",
    "dashboard_summary",
    "metric_statuses",
    "shift_months",
    "team_bests",
]
