from __future__ import annotations

from datetime import date
from typing import List, Literal

from pydantic import BaseModel, Field, model_validator

from rosterbench.config.positions import Position, Unit


class CohortRequest(BaseModel):
    mode: Literal["best", "position", "offense", "defense"] = "best"
    position: Position | None = None

    @model_validator(mode="after")
    def _position_required(self) -> "CohortRequest":
        if self.mode == "position" and self.position is None:
            raise ValueError("position is required when mode is 'position'")
        return self


class ComparisonRequest(CohortRequest):
    player_id: str = Field(..., min_length=1)


class NeighborhoodRequest(BaseModel):
    player_id: str = Field(..., min_length=1)
    mode: Literal["best", "position", "offense", "defense"] | None = None
    position: Position | None = None

    @model_validator(mode="after")
    def _position_required(self) -> "NeighborhoodRequest":
        if self.mode == "position" and self.position is None:
            raise ValueError("position is required when mode is 'position'")
        return self


class AveragesRequest(BaseModel):
    position: Position | None = None
    unit: Unit | None = None


class BenchmarkValue(BaseModel):
    metric_type: str
    label: str
    unit: str
    value: float | None


class BenchmarkResponse(BaseModel):
    mode: str
    position: str | None = None
    label: str
    benchmarks: List[BenchmarkValue]


class NormalizedMetricResponse(BaseModel):
    metric_type: str
    label: str
    unit: str
    score: int = Field(..., ge=0, le=100)
    raw_value: float


class ComparisonResponse(BaseModel):
    player_id: str
    mode: str
    position: str | None = None
    label: str
    benchmarks: List[BenchmarkValue]
    metrics: List[NormalizedMetricResponse]


class MetricNeighborhoodResponse(BaseModel):
    metric_type: str
    metric_name: str
    unit: str
    current_value: float | None
    percentile: int | None
    next_best_value: float | None
    is_leader: bool = False


class MetricAverageResponse(BaseModel):
    metric_type: str
    average_value: float
    unit: str
    players: int


class AveragesResponse(BaseModel):
    all: List[MetricAverageResponse]
    position: List[MetricAverageResponse] = Field(default_factory=list)
    unit: List[MetricAverageResponse] = Field(default_factory=list)


class MetricBestResponse(BaseModel):
    metric_type: str
    value: float


class MetricStatusResponse(BaseModel):
    metric_type: str
    status: Literal["missing", "outdated", "current"]
    last_entry: date | None = None
    best_value: float | None = None


class DashboardResponse(BaseModel):
    player_id: str
    as_of: date
    total_players: int
    team_recent_entries: int
    player_recent_entries: int
    team_best_all_time: List[MetricBestResponse]
    team_best_recent: List[MetricBestResponse]
    metric_statuses: List[MetricStatusResponse]
