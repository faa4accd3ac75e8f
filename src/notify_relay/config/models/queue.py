"""Queue, status store and logging configuration models."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, field_validator

from .base import BaseConfig

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 5


class QueueConfig(BaseConfig):
    """Configuration for the job queue and its retry policy."""

    max_retries: int = Field(
        default=DEFAULT_MAX_RETRIES,
        ge=0,
        description="Extra handler attempts after the first failure",
    )
    retry_delay: float = Field(
        default=1.0,
        ge=0.0,
        le=300.0,
        description="Fixed delay between attempts in seconds",
    )
    concurrency: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Maximum number of handlers running at once",
    )

    @field_validator("max_retries", mode="before")
    @classmethod
    def fallback_max_retries(cls, v: object) -> int:
        """Fall back to the default for absent or invalid retry budgets."""
        if v is None:
            return DEFAULT_MAX_RETRIES
        if isinstance(v, bool):
            logger.warning("Invalid max_retries %r, using %d", v, DEFAULT_MAX_RETRIES)
            return DEFAULT_MAX_RETRIES
        if isinstance(v, str):
            try:
                v = int(v.strip())
            except ValueError:
                logger.warning("Invalid max_retries %r, using %d", v, DEFAULT_MAX_RETRIES)
                return DEFAULT_MAX_RETRIES
        if isinstance(v, float) and v.is_integer():
            v = int(v)
        if not isinstance(v, int) or v < 0:
            logger.warning("Invalid max_retries %r, using %d", v, DEFAULT_MAX_RETRIES)
            return DEFAULT_MAX_RETRIES
        return v


class StoreConfig(BaseConfig):
    """Configuration for status record persistence."""

    backend: Literal["memory", "redis"] = Field(
        default="memory",
        description="Status store backend",
    )
    namespace: str = Field(
        default="service",
        min_length=1,
        description="Key prefix for status records",
    )
    host: str = Field(
        default="localhost",
        description="Redis host",
    )
    port: int = Field(
        default=6379,
        ge=1,
        le=65535,
        description="Redis port",
    )
    db: int = Field(
        default=0,
        ge=0,
        description="Redis database index",
    )
    password: str | None = Field(
        default=None,
        description="Redis password",
    )
    expiration: int = Field(
        default=0,
        ge=0,
        description="Seconds before status records expire (0 keeps them forever)",
    )


class LoggingConfig(BaseConfig):
    """Configuration for logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v
