"""Percentile and next-best ranking of a player among teammates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence

from rosterbench.benchmark.cohort import CohortSpec
from rosterbench.benchmark.reducer import best_daily_entries, latest_entries
from rosterbench.config.metrics import iter_metrics
from rosterbench.models import PerformanceEntry


@dataclass(frozen=True)
class MetricNeighborhood:
    metric_type: str
    metric_name: str
    unit: str
    current_value: Optional[float]
    percentile: Optional[int]
    next_best_value: Optional[float]
    is_leader: bool = False


def rank_percentile(value: float, values: Sequence[float], *, lower_is_better: bool) -> int:
    """Share of teammates strictly worse than ``value``.

    ``values`` holds one value per player with data, the ranked player
    included. Ties are neither better nor worse.
    """

    total = len(values)
    if total <= 1:
        return 100
    if lower_is_better:
        worse = sum(1 for other in values if other > value)
    else:
        worse = sum(1 for other in values if other < value)
    return int(math.floor(100 * worse / (total - 1) + 0.5))


def next_best_value(value: float, values: Iterable[float], *, lower_is_better: bool) -> Optional[float]:
    """Closest value strictly better than ``value``, or None for the leader."""

    if lower_is_better:
        better = [other for other in values if other < value]
        return max(better) if better else None
    better = [other for other in values if other > value]
    return min(better) if better else None


def player_neighborhood(
    entries: Iterable[PerformanceEntry],
    player_id: str,
    *,
    cohort: CohortSpec | None = None,
    positions: Mapping[str, str] | None = None,
) -> List[MetricNeighborhood]:
    """Rank ``player_id`` on every metric against teammates' current results.

    Returns an empty list when the player has never recorded anything. When a
    cohort is given, only its members (plus the player) are ranked.
    """

    positions = positions or {}
    current = list(latest_entries(best_daily_entries(entries).values()).values())
    if not any(entry.player_id == player_id for entry in current):
        return []

    if cohort is not None:
        current = [
            entry
            for entry in current
            if entry.player_id == player_id or cohort.includes(entry.player_id, positions)
        ]

    results: List[MetricNeighborhood] = []
    for definition in iter_metrics():
        metric_entries = [entry for entry in current if entry.metric_type == definition.metric_type]
        own = next((entry for entry in metric_entries if entry.player_id == player_id), None)
        if own is None:
            unit = metric_entries[0].display_unit if metric_entries else definition.unit
            results.append(
                MetricNeighborhood(
                    metric_type=definition.metric_type,
                    metric_name=definition.label,
                    unit=unit,
                    current_value=None,
                    percentile=None,
                    next_best_value=None,
                )
            )
            continue

        values = [entry.value for entry in metric_entries]
        lower = definition.lower_is_better
        nearest = next_best_value(own.value, values, lower_is_better=lower)
        results.append(
            MetricNeighborhood(
                metric_type=definition.metric_type,
                metric_name=definition.label,
                unit=own.display_unit,
                current_value=own.value,
                percentile=rank_percentile(own.value, values, lower_is_better=lower),
                next_best_value=nearest,
                is_leader=nearest is None,
            )
        )
    return results


__all__ = [
    "MetricNeighborhood",
    "next_best_value",
    "player_neighborhood",
    "rank_percentile",
]
