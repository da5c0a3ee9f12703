"""Chatroom API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ChatroomError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured once on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Single uvicorn worker: ChatRegistry is process memory, workers would not share it
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chatroom import __version__
from chatroom.api.error_handlers import register_error_handlers
from chatroom.api.routes import chat, health, legacy
from chatroom.config import get_settings
from chatroom.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Chatroom API started")
    yield
    logger.info("Chatroom API shutting down")


app = FastAPI(title="Chatroom API", version=__version__, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(chat.router)
app.include_router(legacy.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point — serve the app on the configured address."""
    settings = get_settings()
    uvicorn.run(
        "chatroom.main:app", host=settings.host, port=settings.port, workers=1,
    )


if __name__ == "__main__":
    run()
