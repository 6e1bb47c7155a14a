"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every tunable comes from the environment or .env (case-insensitive)
    - get_settings() is cached (lru_cache) — single instance per process
    - Limits and capacities are positive; invalid values fail at startup

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults for everything: the server runs out of the box on the bundled dataset
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Rate limiting
    rate_limit_window_ms: int = Field(default=15 * 60 * 1000, gt=0)
    rate_limit_max_requests: int = Field(default=100, gt=0)
    rate_limit_sweep_interval_seconds: float = Field(default=60.0, gt=0)

    # Dispatch
    handler_timeout_seconds: float = Field(default=30.0, ge=0)  # 0 disables
    expose_error_context: bool = False

    # Analytics
    analytics_max_events: int = Field(default=10_000, gt=0)
    analytics_ring_capacity: int = Field(default=10, gt=0)

    # Dataset — bundled seed portfolio when unset
    portfolio_data_path: Path | None = None

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
