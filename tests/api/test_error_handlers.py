"""Global error handlers — envelopes and structured log extras.

Invariants:
    - Unhandled exceptions become 500 INTERNAL_ERROR without internal details
    - Validation and catch-all handlers log error_code and path like the domain handler
"""

import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from chatroom.api.error_handlers import register_error_handlers


@pytest.fixture
async def failing_client():
    """Minimal app whose only route raises — isolates the catch-all handler."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internal detail")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unhandled_exception_returns_internal_error(failing_client):
    res = await failing_client.get("/boom")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["category"] == "internal"
    assert error["severity"] == "critical"
    assert "secret" not in res.text


async def test_unhandled_exception_logs_code_and_path(failing_client, caplog):
    with caplog.at_level(logging.ERROR, logger="chatroom.api.error_handlers"):
        await failing_client.get("/boom")
    record = next(
        r for r in caplog.records if r.name == "chatroom.api.error_handlers"
    )
    assert record.error_code == "INTERNAL_ERROR"
    assert record.path == "/boom"
    assert record.exc_info is not None


async def test_validation_error_envelope_and_log(client, caplog):
    with caplog.at_level(logging.WARNING, logger="chatroom.api.error_handlers"):
        res = await client.post("/api/v1/chat/participants", json={})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == "validation"
    assert error["details"][0]["field"] == "body.name"
    record = next(
        r for r in caplog.records if r.name == "chatroom.api.error_handlers"
    )
    assert record.error_code == "VALIDATION_ERROR"
    assert record.path == "/api/v1/chat/participants"
