"""Ranking and normalization of roster performance results."""

from .averages import CohortAverages, MetricAverage, cohort_averages
from .cohort import (
    COMPARISON_MODES,
    CohortSpec,
    ComparisonMode,
    InvalidCohortError,
    cohort_best_values,
    cohort_members,
)
from .comparison import PlayerComparison, compare_player, current_values
from .dashboard import DashboardSummary, MetricBest, MetricStatus, dashboard_summary, shift_months
from .neighborhood import MetricNeighborhood, next_best_value, player_neighborhood, rank_percentile
from .normalize import NormalizedMetric, normalize_metrics, normalize_score
from .reducer import best_daily_entries, latest_entries

__all__ = [
    "COMPARISON_MODES",
    "CohortAverages",
    "CohortSpec",
    "ComparisonMode",
    "DashboardSummary",
    "InvalidCohortError",
    "MetricAverage",
    "MetricBest",
    "MetricNeighborhood",
    "MetricStatus",
    "NormalizedMetric",
    "PlayerComparison",
    "best_daily_entries",
    "compare_player",
    "current_values",
    "cohort_averages",
    "cohort_best_values",
    "cohort_members",
    "dashboard_summary",
    "latest_entries",
    "next_best_value",
    "normalize_metrics",
    "normalize_score",
    "player_neighborhood",
    "rank_percentile",
    "shift_months",
]
