from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..domain.best_effort import estimate
from ..models.statistics import BestEffortResponse, WholeReport
from ..platform.wiring import (
    provide_report_store,
    provide_statistics_config,
    provide_statistics_orchestrator,
)
from ..statistics.application import (
    ActivityStoreError,
    ReportStoreError,
    ReportStorePort,
    StatisticsConfig,
    YearlyStatisticsOrchestrator,
)

logger = logging.getLogger(__name__)

router: APIRouter = APIRouter()


@router.post("/statistics/yearly", response_model=WholeReport)
async def rebuild_yearly_statistics(
    orchestrator: YearlyStatisticsOrchestrator = Depends(provide_statistics_orchestrator),
) -> WholeReport:
    """Recompute every year and replace the stored report."""
    try:
        return await orchestrator.run()
    except (ActivityStoreError, ReportStoreError) as exc:
        logger.exception("Yearly statistics run failed")
        raise HTTPException(status_code=503, detail={"error": str(exc)}) from exc


@router.get("/statistics/yearly", response_model=WholeReport)
async def get_yearly_statistics(
    reports: ReportStorePort = Depends(provide_report_store),
    config: StatisticsConfig = Depends(provide_statistics_config),
) -> WholeReport:
    """Return the last stored yearly statistics report."""
    try:
        report = await reports.fetch(config.report_key)
    except ReportStoreError as exc:
        logger.exception("Unable to read stored statistics")
        raise HTTPException(status_code=503, detail={"error": str(exc)}) from exc
    if report is None:
        raise HTTPException(status_code=404, detail={"error": "No statistics stored yet"})
    return report


@router.get("/statistics/best-effort/{activity_id}", response_model=BestEffortResponse)
async def get_activity_best_effort(
    activity_id: int,
    orchestrator: YearlyStatisticsOrchestrator = Depends(provide_statistics_orchestrator),
) -> BestEffortResponse:
    """Best twelve minute effort of a single activity."""
    try:
        best = await orchestrator.scan_activity(activity_id)
    except ActivityStoreError as exc:
        logger.exception("Unable to scan activity %s", activity_id)
        raise HTTPException(status_code=503, detail={"error": str(exc)}) from exc
    if best is None:
        raise HTTPException(status_code=404, detail={"error": "Telemetry not found"})
    return BestEffortResponse(best_effort=best, aerobic_estimate=estimate(best))
