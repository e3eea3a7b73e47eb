#!/usr/bin/env python3
"""Smoke test for a running health-export-server.

Posts a small export and checks the liveness endpoints. Writes real rows
under USER_ID, so point it at a development database.

Usage:
    export BASE_URL="http://localhost:8080"
    export USER_ID="smoke-test"

    uv run python scripts/smoke_test.py
"""

import asyncio
import os
import sys

import httpx

BASE_URL = os.environ.get("BASE_URL", "http://localhost:8080")
USER_ID = os.environ.get("USER_ID", "smoke-test")

SAMPLE_EXPORT = {
    "data": {
        "metrics": [
            {
                "name": "step_count",
                "units": "count",
                "data": [{"qty": 512, "date": "2024-01-01 08:00:00 +0000"}],
            },
            {
                "name": "blood_pressure",
                "units": "mmHg",
                "data": [{"date": "2024-01-01 08:05:00 +0000", "systolic": 118, "diastolic": 76}],
            },
        ],
        "workouts": [
            {
                "name": "Outdoor Walk",
                "start": "2024-01-01 07:00:00 +0000",
                "end": "2024-01-01 07:30:00 +0000",
                "distance": {"qty": 2.4, "units": "km"},
            }
        ],
    }
}


async def check_liveness(client: httpx.AsyncClient) -> bool:
    """Both / and /health answer without touching the database."""
    r = await client.get(f"{BASE_URL}/")
    if r.status_code != 200:
        print(f"  FAIL: / returned {r.status_code}")
        return False

    r = await client.get(f"{BASE_URL}/health")
    if r.status_code != 200 or r.json().get("status") != "ok":
        print(f"  FAIL: /health returned {r.status_code} {r.text}")
        return False
    print(f"  OK: server v{r.json().get('version')} is up")
    return True


async def check_ingest(client: httpx.AsyncClient) -> bool:
    r = await client.post(f"{BASE_URL}/api/health", json=SAMPLE_EXPORT, params={"userId": USER_ID})
    if r.status_code != 201:
        print(f"  FAIL: ingest returned {r.status_code} {r.text}")
        return False

    body = r.json()
    if (body.get("metricsProcessed"), body.get("workoutsProcessed")) != (2, 1):
        print(f"  FAIL: unexpected counts {body}")
        return False
    print(f"  OK: {body}")
    return True


async def check_rejects_garbage(client: httpx.AsyncClient) -> bool:
    r = await client.post(
        f"{BASE_URL}/api/health",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    if r.status_code != 400:
        print(f"  FAIL: expected 400 for garbage body, got {r.status_code}")
        return False
    print("  OK: undecodable document rejected")
    return True


async def main() -> int:
    """Run all checks."""
    print(f"Health Export Server smoke test against {BASE_URL} as {USER_ID}")

    checks = [
        ("Liveness", check_liveness),
        ("Ingest", check_ingest),
        ("Decode error", check_rejects_garbage),
    ]

    failed = 0
    async with httpx.AsyncClient(timeout=10.0) as client:
        for name, check in checks:
            print(f"\n[{name}]")
            try:
                if not await check(client):
                    failed += 1
            except httpx.HTTPError as e:
                print(f"  ERROR: {e}")
                failed += 1

    print(f"\n{len(checks) - failed} passed, {failed} failed")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
