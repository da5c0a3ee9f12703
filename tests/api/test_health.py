"""Health check — liveness plus registry sizes, without counting as a diagnostics read."""

from chatroom import __version__


async def test_health_reports_registry_sizes(client, registry):
    registry.register("alice", "a")
    registry.post_message("alice", "hi")
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy",
        "service": "chatroom-api",
        "version": __version__,
        "participants": 1,
        "messages": 1,
    }


async def test_health_does_not_bump_diagnostics_counter(client, registry):
    await client.get("/api/v1/health/")
    assert "Info counter: 0 " in registry.render_diagnostics()
