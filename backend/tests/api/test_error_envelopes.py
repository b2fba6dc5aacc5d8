"""Error Envelopes — faults, unknown routes and bad methods.

Invariants:
    - Store faults surface as 500 with the fault message in details
    - Framework 404/405 use the same failure envelope
    - Every JSON body carries a boolean success flag (health excepted)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from roster.infrastructure.user_store import InMemoryUserStore
from roster.main import create_app


class _ExplodingStore(InMemoryUserStore):
    def fetch_all(self):
        raise RuntimeError("store unavailable")

    def fetch_by_id(self, user_id):
        raise RuntimeError("store unavailable")

    def insert_if_email_absent(self, name, email):
        raise RuntimeError("store unavailable")


@pytest.fixture
async def broken_client(settings):
    app = create_app(settings=settings, store=_ExplodingStore())
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.mark.parametrize("method,path,body", [
    ("GET", "/api/users", None),
    ("GET", "/api/users/some-id", None),
    ("POST", "/api/users", {"name": "John", "email": "john@example.com"}),
])
async def test_store_fault_returns_500_envelope(broken_client, method, path, body):
    res = await broken_client.request(method, path, json=body)
    assert res.status_code == 500
    assert res.json() == {
        "success": False,
        "error": "Internal server error",
        "details": ["store unavailable"],
    }


async def test_validation_still_runs_before_store_fault(broken_client):
    res = await broken_client.post("/api/users", json={"name": "John"})
    assert res.status_code == 400


async def test_unknown_route_returns_404_envelope(client):
    res = await client.get("/api/nothing-here")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Not Found"}


async def test_unsupported_method_returns_405_envelope(client):
    res = await client.delete("/api/users")
    assert res.status_code == 405
    assert res.json()["success"] is False


@pytest.mark.parametrize("method,path,body", [
    ("GET", "/", None),
    ("GET", "/api/users", None),
    ("POST", "/api/users", {"name": "A", "email": "a@x.io"}),
    ("POST", "/api/users", {"name": "A", "email": "a@x.io"}),
    ("POST", "/api/users", {"name": ""}),
    ("GET", "/api/users/missing", None),
])
async def test_every_body_has_boolean_success(client, method, path, body):
    res = await client.request(method, path, json=body)
    assert isinstance(res.json()["success"], bool)
