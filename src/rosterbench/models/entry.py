"""Canonical performance records shared across ingest, storage and benchmarks."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from rosterbench.config.metrics import MetricDefinition, MetricType, get_metric
from rosterbench.config.positions import Position


class PerformanceEntry(BaseModel):
    """One recorded attempt of a test by a player."""

    entry_id: Optional[str] = None
    player_id: str = Field(..., min_length=1)
    metric_type: MetricType
    value: float = Field(..., gt=0.0, le=1000.0, allow_inf_nan=False)
    unit: Optional[str] = None
    entry_date: date
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("metric_type", mode="before")
    @classmethod
    def _normalize_metric_type(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # naive timestamps are stored and compared as UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def definition(self) -> MetricDefinition:
        return get_metric(self.metric_type)

    @property
    def display_unit(self) -> str:
        return self.unit or self.definition.unit


class PlayerPosition(BaseModel):
    player_id: str = Field(..., min_length=1)
    position: Position

    model_config = ConfigDict(frozen=True)
