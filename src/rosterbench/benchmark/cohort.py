"""Resolve comparison cohorts and their per-metric best values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Literal, Mapping, Optional

from rosterbench.benchmark.reducer import best_daily_entries, latest_entries
from rosterbench.config.metrics import iter_metrics
from rosterbench.config.positions import POSITIONS, get_position_unit
from rosterbench.models import PerformanceEntry

ComparisonMode = Literal["best", "position", "offense", "defense"]
COMPARISON_MODES = ("best", "position", "offense", "defense")


class InvalidCohortError(ValueError):
    """Raised when a comparison mode or its parameters are not usable."""


@dataclass(frozen=True)
class CohortSpec:
    """Which players form the reference group for a comparison."""

    mode: str = "best"
    position: Optional[str] = None

    def __post_init__(self) -> None:
        if self.mode not in COMPARISON_MODES:
            raise InvalidCohortError(
                f"Unknown comparison mode {self.mode!r}; expected one of {', '.join(COMPARISON_MODES)}"
            )
        if self.mode == "position":
            if not self.position:
                raise InvalidCohortError("position mode requires a position code")
            if self.position not in POSITIONS:
                raise InvalidCohortError(f"Unknown position {self.position!r}")
        elif self.position is not None:
            # only position mode carries a position
            object.__setattr__(self, "position", None)

    @property
    def label(self) -> str:
        if self.mode == "position":
            return f"Best {self.position}"
        if self.mode == "offense":
            return "Best Offense"
        if self.mode == "defense":
            return "Best Defense"
        return "Best Overall"

    def includes(self, player_id: str, positions: Mapping[str, str]) -> bool:
        if self.mode == "best":
            return True
        position = positions.get(player_id)
        if position is None:
            return False
        if self.mode == "position":
            return position == self.position
        return get_position_unit(position) == self.mode


def cohort_members(
    spec: CohortSpec,
    positions: Mapping[str, str],
) -> Optional[FrozenSet[str]]:
    """Return member player ids, or None when the cohort is the whole roster."""

    if spec.mode == "best":
        return None
    return frozenset(
        player_id for player_id in positions if spec.includes(player_id, positions)
    )


def cohort_best_values(
    entries: Iterable[PerformanceEntry],
    spec: CohortSpec,
    positions: Mapping[str, str] | None = None,
) -> Dict[str, Optional[float]]:
    """Best value per metric among cohort members' latest best-daily entries.

    Every registered metric appears in the result; ``None`` marks a metric no
    member has data for.
    """

    members = cohort_members(spec, positions or {})
    current = latest_entries(best_daily_entries(entries).values())

    collected: Dict[str, list[float]] = {}
    for (player_id, metric_type), entry in current.items():
        if members is not None and player_id not in members:
            continue
        collected.setdefault(metric_type, []).append(entry.value)

    result: Dict[str, Optional[float]] = {}
    for definition in iter_metrics():
        values = collected.get(definition.metric_type)
        result[definition.metric_type] = definition.best_of(values) if values else None
    return result


__all__ = [
    "COMPARISON_MODES",
    "ComparisonMode",
    "CohortSpec",
    "InvalidCohortError",
    "cohort_best_values",
    "cohort_members",
]
