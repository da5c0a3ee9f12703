"""Error Handlers — global exception handlers for the chatroom JSON API.

Invariants:
    - ChatroomError → its own envelope and http_status
    - RequestValidationError → 400 VALIDATION_ERROR with field-level details
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details
    - Every handler logs error_code and path as structured extras

Design Decisions:
    - Three-layer handler: domain (ChatroomError), validation (Pydantic), catch-all (Exception)
    - Domain and validation errors logged at warning: expected caller mistakes, not defects
    - Legacy text routes translate their own errors (see routes/legacy.py)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from chatroom.core.errors import ChatroomError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_chatroom_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


def _register_chatroom_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ChatroomError)
    async def chatroom_error_handler(request: Request, exc: ChatroomError):
        logger.warning(
            f"ChatroomError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "participant_name": exc.context.participant_name,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        fields = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        logger.warning(
            f"Validation error on {request.url.path}: "
            f"{', '.join(f['field'] for f in fields)}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_envelope(
                "VALIDATION_ERROR", "Invalid request data",
                ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
                details=fields,
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.url.path}",
            exc_info=exc,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )
