"""Chat Routes — JSON/text endpoints over the four ChatRegistry operations.

Invariants:
    - Request bodies validated by Pydantic before reaching the registry
    - origin is always taken from the transport peer, never from the body
    - Domain errors propagate to the global ChatroomError handler (400 envelope)
    - transcript and diagnostics always succeed and return text/html

Design Decisions:
    - Registry via Depends(get_registry): tests swap in a fresh registry per test
    - Logging happens here, after the registry call returns (core never logs)
    - Plain def handlers: FastAPI runs them in its threadpool, where registry calls
      contend on the ReadWriteLock instead of blocking the event loop
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse

from chatroom.api.dependencies import get_registry, peer_origin
from chatroom.core.chat_registry import ChatRegistry
from chatroom.schemas.chat import (
    MessageCreate, MessageResponse, ParticipantCreate, ParticipantResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/chat", tags=["chat"])


@router.post(
    "/participants", response_model=ParticipantResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_participant(
    body: ParticipantCreate,
    request: Request,
    registry: ChatRegistry = Depends(get_registry),
):
    """Register a display name for the calling peer."""
    origin = peer_origin(request)
    participant_id = registry.register(body.name, origin)
    logger.info(
        "Participant connected",
        extra={
            "participant_id": participant_id,
            "participant_name": body.name,
            "origin": origin,
        },
    )
    return ParticipantResponse(id=participant_id, name=body.name)


@router.post(
    "/messages", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def post_message(
    body: MessageCreate, registry: ChatRegistry = Depends(get_registry),
):
    """Append a message from a registered participant."""
    message = registry.post_message(body.name, body.body)
    logger.debug(
        "Message accepted", extra={"participant_name": message.author},
    )
    return MessageResponse(author=message.author, body=message.body)


@router.get("/transcript", response_class=HTMLResponse)
def get_transcript(registry: ChatRegistry = Depends(get_registry)):
    """Full message history in arrival order."""
    return HTMLResponse(registry.render_transcript())


@router.get("/diagnostics", response_class=HTMLResponse)
def get_diagnostics(registry: ChatRegistry = Depends(get_registry)):
    """Connected participants and counters. Each call bumps the read counter."""
    return HTMLResponse(registry.render_diagnostics())
