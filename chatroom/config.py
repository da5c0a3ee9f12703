"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting overridable via CHATROOM_* environment variables or .env
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Default bind address matches the legacy deployment (127.0.0.25:8080)
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="CHATROOM_", case_sensitive=False,
    )

    # Server
    host: str = "127.0.0.25"
    port: int = 8080

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
