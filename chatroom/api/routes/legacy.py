"""Legacy Routes — path-style endpoints kept for clients of the first-generation server.

Invariants:
    - Same paths as the first-generation server: /connect/{user},
      /chat/send/{user}/{message}, /chat.html, /info.html
    - Accept GET and POST (first-generation routes matched any method)
    - Success bodies are the legacy plain-text acks ("ok" / "OK")
    - Failure bodies are plain text ("User already connected" / "User not connected"),
      with the error code in the X-Error-Code header
    - {user} goes through the same normalize_name rule as the JSON routes

Design Decisions:
    - Delegates to the same ChatRegistry as the JSON routes: one shared state
    - ChatroomError translated here, not by the global JSON handler: first-generation
      clients read the body as text
    - Plain def handlers: FastAPI runs them in its threadpool, so registry calls
      contend on the ReadWriteLock instead of blocking the event loop
"""

import logging

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from chatroom.api.dependencies import get_registry, peer_origin
from chatroom.core.chat_registry import ChatRegistry
from chatroom.core.errors import ChatroomError, NameValidationError
from chatroom.schemas.chat import normalize_name

logger = logging.getLogger(__name__)
router = APIRouter(tags=["legacy"])

_METHODS = ["GET", "POST"]


def _path_name(user: str) -> str:
    try:
        return normalize_name(user)
    except ValueError as e:
        raise NameValidationError(str(e)) from e


def _plain_error(exc: ChatroomError, request: Request) -> PlainTextResponse:
    logger.warning(
        f"ChatroomError: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "participant_name": exc.context.participant_name,
        },
    )
    return PlainTextResponse(
        exc.message, status_code=exc.http_status,
        headers={"X-Error-Code": exc.code},
    )


@router.api_route("/connect/{user}", methods=_METHODS, response_class=PlainTextResponse)
def connect_user(
    request: Request,
    user: str = Path(min_length=1, max_length=100),
    registry: ChatRegistry = Depends(get_registry),
):
    origin = peer_origin(request)
    try:
        name = _path_name(user)
        participant_id = registry.register(name, origin)
    except ChatroomError as exc:
        return _plain_error(exc, request)
    logger.info(
        "Participant connected",
        extra={
            "participant_id": participant_id,
            "participant_name": name,
            "origin": origin,
        },
    )
    return PlainTextResponse("ok")


@router.api_route(
    "/chat/send/{user}/{message}", methods=_METHODS,
    response_class=PlainTextResponse,
)
def send_message(
    request: Request,
    message: str,
    user: str = Path(min_length=1, max_length=100),
    registry: ChatRegistry = Depends(get_registry),
):
    try:
        accepted = registry.post_message(_path_name(user), message)
    except ChatroomError as exc:
        return _plain_error(exc, request)
    logger.debug("Message accepted", extra={"participant_name": accepted.author})
    return PlainTextResponse("OK")


@router.api_route("/chat.html", methods=_METHODS, response_class=HTMLResponse)
def chat_html(registry: ChatRegistry = Depends(get_registry)):
    return HTMLResponse(registry.render_transcript())


@router.api_route("/info.html", methods=_METHODS, response_class=HTMLResponse)
def info_html(registry: ChatRegistry = Depends(get_registry)):
    return HTMLResponse(registry.render_diagnostics())
