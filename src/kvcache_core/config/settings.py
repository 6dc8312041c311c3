"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kvcache_core.constants import (
    DEFAULT_HEALTH_CHECK_INTERVAL_SECONDS,
    DEFAULT_SOCKET_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_SOCKET_TIMEOUT_SECONDS,
)


class Settings(BaseSettings):
    """Central configuration for kv-cache-client."""

    model_config = SettingsConfigDict(env_prefix="KVC_", env_file=".env")

    # --- Redis ---
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (redis:// or rediss://)",
    )
    socket_timeout_seconds: float = Field(
        default=DEFAULT_SOCKET_TIMEOUT_SECONDS,
        description="Timeout for a single Redis command in seconds",
    )
    socket_connect_timeout_seconds: float = Field(
        default=DEFAULT_SOCKET_CONNECT_TIMEOUT_SECONDS,
        description="Timeout for establishing a Redis connection in seconds",
    )

    # --- Health check ---
    health_check_interval_seconds: float = Field(
        default=DEFAULT_HEALTH_CHECK_INTERVAL_SECONDS,
        description="Seconds between background pings; 0 disables the monitor",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for aggregation",
    )

    @model_validator(mode="after")
    def validate_timeouts(self) -> Settings:
        """Reject non-positive socket timeouts."""
        if self.socket_timeout_seconds <= 0 or self.socket_connect_timeout_seconds <= 0:
            msg = "socket timeouts must be positive"
            raise ValueError(msg)
        return self
