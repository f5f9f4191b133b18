"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - PORT set to an empty string behaves as if unset (default 8080)
    - All timeouts are strictly positive seconds

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Read/write/idle timeouts are distinct values; idle maps to uvicorn keep-alive
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 8080


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Listener
    host: str = "0.0.0.0"
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)

    @field_validator("port", mode="before")
    @classmethod
    def default_empty_port(cls, v):
        """PORT="" keeps the default instead of failing int coercion."""
        if isinstance(v, str) and not v.strip():
            return DEFAULT_PORT
        return v

    # Timeouts (seconds)
    read_timeout: float = Field(15.0, gt=0)
    write_timeout: float = Field(15.0, gt=0)
    idle_timeout: float = Field(60.0, gt=0)
    shutdown_timeout: float = Field(30.0, gt=0)

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
