"""API test fixtures — FastAPI test client bound to a fresh ChatRegistry.

Invariants:
    - Every test gets its own registry (get_registry dependency overridden)
    - Overrides cleared after each test

Design Decisions:
    - httpx ASGITransport: in-process, no socket; peer address reported as 127.0.0.1:123
"""

import pytest
from httpx import ASGITransport, AsyncClient

from chatroom.api.dependencies import get_registry
from chatroom.main import app


@pytest.fixture
async def client(registry):
    """FastAPI test client with registry dependency overridden."""
    app.dependency_overrides[get_registry] = lambda: registry

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
