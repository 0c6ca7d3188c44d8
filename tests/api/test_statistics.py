"""Statistics API integration tests."""

from __future__ import annotations

import httpx
import pytest

from src.settings import Settings
from src.statistics.application import ActivityStoreError
from tests.builders import make_activity, make_steady_series
from tests.fakes import ActivityStoreFake, ReportStoreFake, TelemetryStoreFake

pytestmark = pytest.mark.asyncio


@pytest.fixture
def headers(settings: Settings) -> dict[str, str]:
    return {"x-api-key": settings.api_key}


async def test_requires_api_key(client: httpx.AsyncClient) -> None:
    response = await client.get("/v2/statistics/yearly")

    assert response.status_code == 401
    assert response.json() == {"detail": {"error": "Unauthorized"}}


async def test_rebuild_stores_and_returns_report(
    client: httpx.AsyncClient,
    headers: dict[str, str],
    activity_store: ActivityStoreFake,
    telemetry_store: TelemetryStoreFake,
    report_store: ReportStoreFake,
) -> None:
    activity_store.with_activities([make_activity(101, "2022-04-01T07:00:00")])
    telemetry_store.with_series(make_steady_series(101, meters_per_sample=200))

    response = await client.post("/v2/statistics/yearly", headers=headers)

    assert response.status_code == 200
    years = response.json()["years"]
    assert [year["year"] for year in years] == [2021, 2022, 2023]
    assert years[1]["aerobic_estimate"]["source_activity_id"] == 101
    assert len(report_store.upserts) == 1


async def test_rebuild_reports_unavailable_store(
    client: httpx.AsyncClient,
    headers: dict[str, str],
    activity_store: ActivityStoreFake,
    report_store: ReportStoreFake,
) -> None:
    activity_store.failing_with(ActivityStoreError("database unavailable"))

    response = await client.post("/v2/statistics/yearly", headers=headers)

    assert response.status_code == 503
    report_store.assert_not_written()


async def test_get_returns_404_before_first_run(
    client: httpx.AsyncClient, headers: dict[str, str]
) -> None:
    response = await client.get("/v2/statistics/yearly", headers=headers)

    assert response.status_code == 404


async def test_get_returns_stored_report(
    client: httpx.AsyncClient, headers: dict[str, str]
) -> None:
    created = await client.post("/v2/statistics/yearly", headers=headers)

    response = await client.get("/v2/statistics/yearly", headers=headers)

    assert response.status_code == 200
    assert response.json() == created.json()


async def test_best_effort_for_single_activity(
    client: httpx.AsyncClient,
    headers: dict[str, str],
    telemetry_store: TelemetryStoreFake,
) -> None:
    telemetry_store.with_series(make_steady_series(55, meters_per_sample=200))

    response = await client.get("/v2/statistics/best-effort/55", headers=headers)

    assert response.status_code == 200
    payload = response.json()
    assert payload["best_effort"] == {"distance_meters": 2400.0, "activity_id": 55}
    assert payload["aerobic_estimate"]["value"] == pytest.approx(42.37, abs=0.01)


async def test_best_effort_without_telemetry_is_404(
    client: httpx.AsyncClient, headers: dict[str, str]
) -> None:
    response = await client.get("/v2/statistics/best-effort/55", headers=headers)

    assert response.status_code == 404
