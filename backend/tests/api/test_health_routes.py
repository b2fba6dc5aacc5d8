"""Health & Root Routes — liveness payload and service banner."""

from datetime import datetime

from httpx import ASGITransport, AsyncClient

from roster.core.health import HealthReporter
from roster.main import create_app


async def test_health_returns_200_with_status(client):
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert isinstance(body["uptime"], (int, float))
    assert body["uptime"] >= 0
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


async def test_health_reports_injected_reporter_uptime(settings):
    ticks = iter([10.0, 25.0])
    reporter = HealthReporter(monotonic=lambda: next(ticks))
    app = create_app(settings=settings, health_reporter=reporter)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/health")
    assert res.json()["uptime"] == 15.0


async def test_health_does_not_touch_users(client, store):
    await client.get("/health")
    assert store.count() == 0


async def test_root_returns_service_banner(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json() == {
        "success": True, "message": "Roster API", "version": "1.0.0",
    }
