"""Configuration helpers for metrics, positions and runtime settings."""

from .metrics import (
    METRIC_TYPES,
    MetricDefinition,
    MetricType,
    get_metric,
    iter_metrics,
)
from .positions import (
    POSITION_LABELS,
    POSITIONS,
    UNITS,
    Position,
    Unit,
    get_position_unit,
    positions_for_unit,
)
from .settings import Settings

__all__ = [
    "METRIC_TYPES",
    "MetricDefinition",
    "MetricType",
    "get_metric",
    "iter_metrics",
    "POSITION_LABELS",
    "POSITIONS",
    "UNITS",
    "Position",
    "Unit",
    "get_position_unit",
    "positions_for_unit",
    "Settings",
]
