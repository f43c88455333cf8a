"""Pydantic models for API I/O."""

from .entries import (
    EntryCreateRequest,
    EntryResponse,
    ImportReportResponse,
    MetricDefinitionResponse,
    PositionRequest,
    PositionResponse,
)
from .benchmark import (
    AveragesRequest,
    AveragesResponse,
    BenchmarkResponse,
    BenchmarkValue,
    CohortRequest,
    ComparisonRequest,
    ComparisonResponse,
    DashboardResponse,
    MetricAverageResponse,
    MetricBestResponse,
    MetricNeighborhoodResponse,
    MetricStatusResponse,
    NeighborhoodRequest,
    NormalizedMetricResponse,
)

__all__ = [
    "EntryCreateRequest",
    "EntryResponse",
    "ImportReportResponse",
    "MetricDefinitionResponse",
    "PositionRequest",
    "PositionResponse",
    "AveragesRequest",
    "AveragesResponse",
    "BenchmarkResponse",
    "BenchmarkValue",
    "CohortRequest",
    "ComparisonRequest",
    "ComparisonResponse",
    "DashboardResponse",
    "MetricAverageResponse",
    "MetricBestResponse",
    "MetricNeighborhoodResponse",
    "MetricStatusResponse",
    "NeighborhoodRequest",
    "NormalizedMetricResponse",
]
