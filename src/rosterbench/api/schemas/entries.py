from __future__ import annotations

from datetime import date, datetime
from typing import List

from pydantic import BaseModel, Field

from rosterbench.config.metrics import MetricType
from rosterbench.config.positions import Position


class EntryCreateRequest(BaseModel):
    player_id: str = Field(..., min_length=1)
    metric_type: MetricType
    value: float = Field(..., gt=0.0, le=1000.0, allow_inf_nan=False)
    unit: str | None = None
    entry_date: date
    created_by: str | None = None


class EntryResponse(BaseModel):
    entry_id: str
    player_id: str
    metric_type: str
    value: float
    unit: str
    entry_date: date
    created_by: str | None = None
    created_at: datetime | None = None


class ImportReportResponse(BaseModel):
    total_rows: int
    imported_rows: int
    skipped_rows: List[str] = Field(default_factory=list)


class PositionRequest(BaseModel):
    position: Position


class PositionResponse(BaseModel):
    player_id: str
    position: str
    unit: str | None = None


class MetricDefinitionResponse(BaseModel):
    metric_type: str
    label: str
    unit: str
    family: str
    lower_is_better: bool
