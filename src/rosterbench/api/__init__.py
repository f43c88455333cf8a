"""REST API for roster benchmarks."""

from __future__ import annotations

import json
import logging
import tempfile
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import List, Mapping

from fastapi import FastAPI, File, Form, HTTPException, Query, UploadFile

from rosterbench.api.schemas import (
    AveragesRequest,
    AveragesResponse,
    BenchmarkResponse,
    BenchmarkValue,
    CohortRequest,
    ComparisonRequest,
    ComparisonResponse,
    DashboardResponse,
    EntryCreateRequest,
    EntryResponse,
    ImportReportResponse,
    MetricDefinitionResponse,
    MetricNeighborhoodResponse,
    NeighborhoodRequest,
    NormalizedMetricResponse,
    PositionRequest,
    PositionResponse,
)
from rosterbench.benchmark import (
    CohortSpec,
    InvalidCohortError,
    cohort_averages,
    cohort_best_values,
    compare_player,
    dashboard_summary,
    player_neighborhood,
    shift_months,
)
from rosterbench.config import Settings, get_metric, get_position_unit, iter_metrics
from rosterbench.ingest import load_entries_csv
from rosterbench.models import PerformanceEntry
from rosterbench.persistence import EntryStore


logger = logging.getLogger("uvicorn.error")


def _entry_to_response(entry: PerformanceEntry) -> EntryResponse:
    return EntryResponse(
        entry_id=entry.entry_id or "",
        player_id=entry.player_id,
        metric_type=entry.metric_type,
        value=entry.value,
        unit=entry.display_unit,
        entry_date=entry.entry_date,
        created_by=entry.created_by,
        created_at=entry.created_at,
    )


def _benchmark_values(best: Mapping[str, float | None]) -> List[BenchmarkValue]:
    values: List[BenchmarkValue] = []
    for metric_type, value in best.items():
        definition = get_metric(metric_type)
        values.append(
            BenchmarkValue(
                metric_type=metric_type,
                label=definition.label,
                unit=definition.unit,
                value=value,
            )
        )
    return values


def _cohort_spec(mode: str | None, position: str | None) -> CohortSpec | None:
    if mode is None:
        return None
    try:
        return CohortSpec(mode=mode, position=position)
    except InvalidCohortError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _parse_mapping(mapping_str: str | None) -> dict[str, str]:
    if not mapping_str:
        return {}
    try:
        mapping = json.loads(mapping_str)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid mapping JSON: {exc}") from exc
    if not isinstance(mapping, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in mapping.items()
    ):
        raise HTTPException(status_code=400, detail="Mapping must be a JSON object of column names")
    return mapping


async def _write_temp(upload: UploadFile | None) -> Path | None:
    if upload is None:
        return None
    contents = await upload.read()
    if not contents:
        return None
    tmp = tempfile.NamedTemporaryFile(delete=False, suffix=".csv")
    try:
        tmp.write(contents)
        tmp.flush()
    finally:
        tmp.close()
    return Path(tmp.name)


def create_app(store: EntryStore | None = None, settings: Settings | None = None) -> FastAPI:
    app = FastAPI(title="rosterbench")
    store = store or EntryStore()
    settings = settings or Settings.from_env()
    app.state.entry_store = store
    app.state.settings = settings

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/metrics", response_model=list[MetricDefinitionResponse])
    async def metrics() -> list[MetricDefinitionResponse]:
        return [
            MetricDefinitionResponse(
                metric_type=definition.metric_type,
                label=definition.label,
                unit=definition.unit,
                family=definition.family,
                lower_is_better=definition.lower_is_better,
            )
            for definition in iter_metrics()
        ]

    @app.post("/entries", response_model=EntryResponse, status_code=201)
    async def create_entry(payload: EntryCreateRequest) -> EntryResponse:
        entry = store.add_entry(PerformanceEntry(**payload.model_dump()))
        return _entry_to_response(entry)

    @app.post("/entries/import", response_model=ImportReportResponse)
    async def import_entries(
        entries: UploadFile = File(...),
        entry_mapping: str | None = Form(None),
    ) -> ImportReportResponse:
        path = await _write_temp(entries)
        if path is None:
            raise HTTPException(status_code=400, detail="entries file is empty")
        try:
            parsed, report = load_entries_csv(path, mapping=_parse_mapping(entry_mapping) or None)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        finally:
            path.unlink(missing_ok=True)

        store.add_entries(parsed)
        logger.info(
            "Imported %s/%s entries from %s",
            report.imported_rows,
            report.total_rows,
            entries.filename,
        )
        return ImportReportResponse(**asdict(report))

    @app.get("/players/{player_id}/entries", response_model=list[EntryResponse])
    async def list_player_entries(
        player_id: str,
        metric_type: str | None = Query(None),
        since: date | None = Query(None),
        months: int | None = Query(None, ge=1),
        as_of: date | None = Query(None),
    ) -> list[EntryResponse]:
        if metric_type is not None:
            try:
                metric_type = get_metric(metric_type).metric_type
            except KeyError as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc
        if since is None and months is not None:
            since = shift_months(as_of or date.today(), months)
        return [
            _entry_to_response(entry)
            for entry in store.list_entries(player_id=player_id, metric_type=metric_type, since=since)
        ]

    @app.put("/players/{player_id}/position", response_model=PositionResponse)
    async def set_position(player_id: str, payload: PositionRequest) -> PositionResponse:
        record = store.set_position(player_id, payload.position)
        return PositionResponse(
            player_id=record.player_id,
            position=record.position,
            unit=get_position_unit(record.position),
        )

    @app.post("/benchmarks", response_model=BenchmarkResponse)
    async def benchmarks(payload: CohortRequest) -> BenchmarkResponse:
        spec = _cohort_spec(payload.mode, payload.position)
        best = cohort_best_values(store.list_entries(), spec, store.position_map())
        return BenchmarkResponse(
            mode=spec.mode,
            position=spec.position,
            label=spec.label,
            benchmarks=_benchmark_values(best),
        )

    @app.post("/comparison", response_model=ComparisonResponse)
    async def comparison(payload: ComparisonRequest) -> ComparisonResponse:
        spec = _cohort_spec(payload.mode, payload.position)
        result = compare_player(store.list_entries(), payload.player_id, spec, store.position_map())
        return ComparisonResponse(
            player_id=result.player_id,
            mode=spec.mode,
            position=spec.position,
            label=result.label,
            benchmarks=_benchmark_values(result.benchmarks),
            metrics=[NormalizedMetricResponse(**asdict(metric)) for metric in result.metrics],
        )

    @app.post("/neighborhood", response_model=list[MetricNeighborhoodResponse])
    async def neighborhood(payload: NeighborhoodRequest) -> list[MetricNeighborhoodResponse]:
        spec = _cohort_spec(payload.mode, payload.position)
        results = player_neighborhood(
            store.list_entries(),
            payload.player_id,
            cohort=spec,
            positions=store.position_map(),
        )
        return [MetricNeighborhoodResponse(**asdict(item)) for item in results]

    @app.post("/averages", response_model=AveragesResponse)
    async def averages(payload: AveragesRequest) -> AveragesResponse:
        result = cohort_averages(
            store.list_entries(),
            store.position_map(),
            position=payload.position,
            unit=payload.unit,
        )
        return AveragesResponse.model_validate(asdict(result))

    @app.get("/players/{player_id}/dashboard", response_model=DashboardResponse)
    async def dashboard(
        player_id: str,
        as_of: date | None = Query(None),
    ) -> DashboardResponse:
        summary = dashboard_summary(
            store.list_entries(),
            player_id,
            store.position_map(),
            as_of=as_of,
            settings=settings,
        )
        return DashboardResponse.model_validate(asdict(summary))

    return app


__all__ = ["create_app"]
