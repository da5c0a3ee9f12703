"""Health Check — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - Reports registry sizes without touching the diagnostics read counter

Design Decisions:
    - No readiness check: there is no external dependency to wait on
"""

from fastapi import APIRouter, Depends, status

from chatroom import __version__
from chatroom.api.dependencies import get_registry
from chatroom.core.chat_registry import ChatRegistry

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
def health_check(registry: ChatRegistry = Depends(get_registry)):
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "chatroom-api",
        "version": __version__,
        "participants": registry.participant_count,
        "messages": registry.message_count,
    }
