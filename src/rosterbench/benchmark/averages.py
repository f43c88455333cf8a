"""Roster, position and unit averages over players' current results."""

from __future__ import annotations

from dataclasses import dataclass, field
from statistics import fmean
from typing import Callable, Iterable, List, Mapping, Optional

from rosterbench.benchmark.reducer import latest_entries
from rosterbench.config.metrics import iter_metrics
from rosterbench.config.positions import get_position_unit
from rosterbench.models import PerformanceEntry


@dataclass(frozen=True)
class MetricAverage:
    metric_type: str
    average_value: float
    unit: str
    players: int


@dataclass(frozen=True)
class CohortAverages:
    all: List[MetricAverage]
    position: List[MetricAverage] = field(default_factory=list)
    unit: List[MetricAverage] = field(default_factory=list)


def _averages(entries: List[PerformanceEntry]) -> List[MetricAverage]:
    results: List[MetricAverage] = []
    for definition in iter_metrics():
        metric_entries = [entry for entry in entries if entry.metric_type == definition.metric_type]
        if not metric_entries:
            continue
        results.append(
            MetricAverage(
                metric_type=definition.metric_type,
                average_value=fmean(entry.value for entry in metric_entries),
                unit=metric_entries[0].display_unit,
                players=len(metric_entries),
            )
        )
    return results


def _select(
    entries: List[PerformanceEntry],
    keep: Callable[[Optional[str]], bool],
    positions: Mapping[str, str],
) -> List[PerformanceEntry]:
    return [entry for entry in entries if keep(positions.get(entry.player_id))]


def cohort_averages(
    entries: Iterable[PerformanceEntry],
    positions: Mapping[str, str],
    *,
    position: Optional[str] = None,
    unit: Optional[str] = None,
) -> CohortAverages:
    """Average each metric over the latest entry per player."""

    current = list(latest_entries(entries).values())

    position_averages: List[MetricAverage] = []
    if position:
        position_averages = _averages(
            _select(current, lambda pos: pos == position, positions)
        )

    unit_averages: List[MetricAverage] = []
    if unit:
        unit_averages = _averages(
            _select(
                current,
                lambda pos: pos is not None and get_position_unit(pos) == unit,
                positions,
            )
        )

    return CohortAverages(all=_averages(current), position=position_averages, unit=unit_averages)


__all__ = ["CohortAverages", "MetricAverage", "cohort_averages"]
