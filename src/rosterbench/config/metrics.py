"""Metric definitions for the supported athletic tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Tuple

MetricType = Literal[
    "vertical_jump",
    "jump_gather",
    "30yd_dash",
    "3_cone_drill",
    "shuttle_5_10_5",
    "pushups_1min",
]

MetricFamily = Literal["timed", "distance", "repetition"]


@dataclass(frozen=True)
class MetricDefinition:
    metric_type: str
    label: str
    unit: str
    family: str

    @property
    def lower_is_better(self) -> bool:
        return self.family == "timed"

    def is_better(self, candidate: float, incumbent: float) -> bool:
        """True when ``candidate`` strictly beats ``incumbent`` for this metric."""

        if self.lower_is_better:
            return candidate < incumbent
        return candidate > incumbent

    def best_of(self, values: Iterable[float]) -> float:
        return min(values) if self.lower_is_better else max(values)


# Registry order is the display order used by every per-metric listing.
_METRICS: Dict[str, MetricDefinition] = {
    "vertical_jump": MetricDefinition("vertical_jump", "Vertical Jump", "cm", "distance"),
    "jump_gather": MetricDefinition("jump_gather", "Jump w. Gather Step", "cm", "distance"),
    "30yd_dash": MetricDefinition("30yd_dash", "30-Yard Dash", "s", "timed"),
    "3_cone_drill": MetricDefinition("3_cone_drill", "3-Cone Drill", "s", "timed"),
    "shuttle_5_10_5": MetricDefinition("shuttle_5_10_5", "5-10-5 Shuttle", "s", "timed"),
    "pushups_1min": MetricDefinition("pushups_1min", "Push-Ups (1 Min AMRAP)", "reps", "repetition"),
}

METRIC_TYPES: Tuple[str, ...] = tuple(_METRICS)


def iter_metrics() -> Iterable[MetricDefinition]:
    """Return an iterator of all metric definitions in display order."""

    return _METRICS.values()


def get_metric(metric_type: str) -> MetricDefinition:
    """Fetch a metric definition, raising KeyError if unknown."""

    key = metric_type.strip().lower()
    if key not in _METRICS:
        raise KeyError(f"No metric configured for metric_type={metric_type!r}")
    return _METRICS[key]
