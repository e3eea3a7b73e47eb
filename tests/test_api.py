"""API endpoint tests."""

import json
from collections.abc import AsyncIterator

import pytest
from litestar.status_codes import (
    HTTP_200_OK,
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from litestar.testing import AsyncTestClient
from sqlalchemy import select

from health_export_server import __version__
from health_export_server.app import create_app
from health_export_server.core.config import settings
from health_export_server.models import CommonMetricReading, WorkoutSession
from tests.fixtures import export_payloads as payloads
from tests.fixtures.db import count_rows


@pytest.fixture
async def client(async_engine) -> AsyncIterator[AsyncTestClient]:
    """Create test client bound to the in-memory database."""
    async with AsyncTestClient(app=create_app(engine=async_engine)) as client:
        yield client


async def test_health_check(client: AsyncTestClient) -> None:
    """Test health check endpoint."""
    response = await client.get("/health")

    assert response.status_code == HTTP_200_OK
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__


async def test_root_banner(client: AsyncTestClient) -> None:
    response = await client.get("/")

    assert response.status_code == HTTP_200_OK
    assert response.text == "Health Auto Export Server is running!"


async def test_ingest_export(client: AsyncTestClient, session_maker) -> None:
    """A valid export is stored and summarized."""
    document = payloads.export(
        metrics=[
            payloads.step_count((1200, "2024-01-01 08:00:00 +0000")),
            payloads.ecg(voltages=2),
            "not a metric",
        ],
        workouts=[payloads.outdoor_run()],
    )

    response = await client.post("/api/health", json=document, params={"userId": "alice"})

    assert response.status_code == HTTP_201_CREATED
    assert response.json() == {
        "status": "success",
        "metricsProcessed": 2,
        "workoutsProcessed": 1,
        "metricsDropped": 1,
    }
    async with session_maker() as session:
        reading = (await session.scalars(select(CommonMetricReading))).one()
        assert reading.user_id == "alice"
        assert await count_rows(session, WorkoutSession) == 1


async def test_ingest_user_from_header(client: AsyncTestClient, session_maker) -> None:
    document = payloads.export(workouts=[payloads.minimal_workout()])

    response = await client.post("/api/health", json=document, headers={"X-User-ID": "bob"})

    assert response.status_code == HTTP_201_CREATED
    async with session_maker() as session:
        workout = (await session.scalars(select(WorkoutSession))).one()
        assert workout.user_id == "bob"


async def test_ingest_default_user(client: AsyncTestClient, session_maker) -> None:
    document = payloads.export(workouts=[payloads.minimal_workout()])

    response = await client.post("/api/health", json=document)

    assert response.status_code == HTTP_201_CREATED
    async with session_maker() as session:
        workout = (await session.scalars(select(WorkoutSession))).one()
        assert workout.user_id == settings.default_user_id


async def test_ingest_empty_export(client: AsyncTestClient) -> None:
    response = await client.post("/api/health", json=payloads.export())

    assert response.status_code == HTTP_201_CREATED
    assert response.json()["metricsProcessed"] == 0
    assert response.json()["workoutsProcessed"] == 0


async def test_ingest_invalid_json(client: AsyncTestClient) -> None:
    response = await client.post(
        "/api/health",
        content=b"{definitely not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == HTTP_400_BAD_REQUEST
    data = response.json()
    assert data["status"] == "error"
    assert data["message"].startswith("Invalid health export document")


async def test_ingest_missing_data_block(client: AsyncTestClient) -> None:
    response = await client.post("/api/health", json={"metrics": []})

    assert response.status_code == HTTP_400_BAD_REQUEST


async def test_ingest_bad_timestamp(client: AsyncTestClient, session_maker) -> None:
    """A malformed timestamp fails the call but keeps rows written before it."""
    document = payloads.export(
        metrics=[
            payloads.step_count(
                (1, "2024-01-01 08:00:00 +0000"),
                (2, "Jan 1, 2024 at 9:00 AM"),
            )
        ]
    )

    response = await client.post("/api/health", json=document)

    assert response.status_code == HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["status"] == "error"
    async with session_maker() as session:
        assert await count_rows(session, CommonMetricReading) == 1


async def test_ingest_export_larger_than_framework_default(
    client: AsyncTestClient, session_maker
) -> None:
    """Exports past Litestar's stock 10 MB body limit are still ingested."""
    metric = payloads.step_count((1200, "2024-01-01 08:00:00 +0000"))
    metric["data"][0]["notes"] = "x" * 11_000_000
    body = json.dumps(payloads.export(metrics=[metric])).encode()
    assert len(body) > 10 * 1024 * 1024
    assert len(body) < settings.max_request_body_size

    response = await client.post(
        "/api/health",
        content=body,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == HTTP_201_CREATED
    assert response.json()["metricsProcessed"] == 1
    async with session_maker() as session:
        assert await count_rows(session, CommonMetricReading) == 1
