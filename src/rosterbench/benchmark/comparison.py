"""Radar-chart comparison of one player against a cohort's best."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from rosterbench.benchmark.cohort import CohortSpec, cohort_best_values
from rosterbench.benchmark.normalize import NormalizedMetric, normalize_metrics
from rosterbench.benchmark.reducer import best_daily_entries, latest_entries
from rosterbench.models import PerformanceEntry


@dataclass(frozen=True)
class PlayerComparison:
    player_id: str
    cohort: CohortSpec
    benchmarks: Dict[str, Optional[float]]
    metrics: List[NormalizedMetric]

    @property
    def label(self) -> str:
        return self.cohort.label


def current_values(entries: Iterable[PerformanceEntry], player_id: str) -> Dict[str, float]:
    """The player's latest best-daily value per metric."""

    own = (entry for entry in entries if entry.player_id == player_id)
    return {
        metric_type: entry.value
        for (_, metric_type), entry in latest_entries(best_daily_entries(own).values()).items()
    }


def compare_player(
    entries: Iterable[PerformanceEntry],
    player_id: str,
    cohort: CohortSpec,
    positions: Mapping[str, str] | None = None,
) -> PlayerComparison:
    all_entries = list(entries)
    benchmarks = cohort_best_values(all_entries, cohort, positions)
    metrics = normalize_metrics(current_values(all_entries, player_id), benchmarks)
    return PlayerComparison(
        player_id=player_id,
        cohort=cohort,
        benchmarks=benchmarks,
        metrics=metrics,
    )


__all__ = ["PlayerComparison", "compare_player", "current_values"]
