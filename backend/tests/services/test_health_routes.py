"""Health Routes — liveness always 200, readiness tracks counter storage."""

from weightrange.main import app
from weightrange.services.usage_counter import UsageCounter, get_usage_counter
from tests.services.flaky_store import FlakyStore


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_ready_with_readable_store(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"counter_store": "memory"}}


async def test_not_ready_with_unreadable_store(client):
    app.dependency_overrides[get_usage_counter] = lambda: UsageCounter(
        FlakyStore(fail_read=True),
    )
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "counter_store_unreadable"
