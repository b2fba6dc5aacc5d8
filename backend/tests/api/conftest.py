"""API test fixtures — a freshly built app and HTTP client per test.

Invariants:
    - Every test gets its own store; no state leaks between tests
    - Requests go through the full ASGI stack (middleware, handlers, routing)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from roster.config import Settings
from roster.infrastructure.user_store import InMemoryUserStore
from roster.main import create_app


@pytest.fixture
def settings():
    return Settings(service_name="Roster API", service_version="1.0.0")


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
