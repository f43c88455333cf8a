"""Map raw metric values onto a shared 0-100 scale.

Seconds, centimeters and repetitions cannot share a radar chart, so each value
is scored against a reference best. The zero point of the scale depends on the
metric family:

* timed drills: 40% slower than the best scores 0
* distance drills: half the best distance scores 0
* repetition drills: a fifth of the best count scores 0

The floors are fixed tuning constants shared by every cohort.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from rosterbench.config.metrics import MetricDefinition, get_metric, iter_metrics

TIMED_FLOOR_MULTIPLIER = 1.4
DISTANCE_FLOOR_DIVISOR = 2.0
REPETITION_FLOOR_DIVISOR = 5.0

_FLOOR_DIVISORS: Dict[str, float] = {
    "distance": DISTANCE_FLOOR_DIVISOR,
    "repetition": REPETITION_FLOOR_DIVISOR,
}


@dataclass(frozen=True)
class NormalizedMetric:
    metric_type: str
    label: str
    unit: str
    score: int
    raw_value: float


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def floor_value(best: float, definition: MetricDefinition) -> float:
    """Raw value that maps to a score of 0 for a given best."""

    if definition.family == "timed":
        return best * TIMED_FLOOR_MULTIPLIER
    return best / _FLOOR_DIVISORS[definition.family]


def normalize_score(value: float, best: float, definition: MetricDefinition) -> int:
    """Score ``value`` against ``best`` on an integer 0-100 scale."""

    baseline = floor_value(best, definition)
    span = baseline - best if definition.lower_is_better else best - baseline
    if span == 0:
        return 100
    if definition.lower_is_better:
        fraction = (baseline - value) / span
    else:
        fraction = (value - baseline) / span
    return _round_half_up(_clamp01(fraction) * 100)


def normalize_metrics(
    player_values: Mapping[str, float],
    cohort_best: Mapping[str, Optional[float]],
) -> List[NormalizedMetric]:
    """Normalize every metric the player and the cohort both have data for.

    Metrics missing on either side are left out rather than scored as 0.
    """

    results: List[NormalizedMetric] = []
    for definition in iter_metrics():
        value = player_values.get(definition.metric_type)
        best = cohort_best.get(definition.metric_type)
        if value is None or best is None:
            continue
        results.append(
            NormalizedMetric(
                metric_type=definition.metric_type,
                label=definition.label,
                unit=definition.unit,
                score=normalize_score(value, best, definition),
                raw_value=value,
            )
        )
    return results


def normalize_value(metric_type: str, value: float, best: float) -> int:
    return normalize_score(value, best, get_metric(metric_type))


__all__ = [
    "DISTANCE_FLOOR_DIVISOR",
    "NormalizedMetric",
    "REPETITION_FLOOR_DIVISOR",
    "TIMED_FLOOR_MULTIPLIER",
    "floor_value",
    "normalize_metrics",
    "normalize_score",
    "normalize_value",
]
