"""API Dependencies — process-wide ChatRegistry and request helpers.

Invariants:
    - Exactly one ChatRegistry per process (module-level instance)
    - Routes obtain it only via Depends(get_registry), so tests can override it

Design Decisions:
    - _registry as module-level object: deliberate exception to no-global-state rule
      (ADR: single-process uvicorn, no multi-worker, state lost on restart)
"""

from fastapi import Request

from chatroom.core.chat_registry import ChatRegistry

_registry = ChatRegistry()


def get_registry() -> ChatRegistry:
    return _registry


def peer_origin(request: Request) -> str:
    """Caller endpoint as `host:port`; 'unknown' when the transport hides it."""
    if request.client is None:
        return "unknown"
    return f"{request.client.host}:{request.client.port}"
