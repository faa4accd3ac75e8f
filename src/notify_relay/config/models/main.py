"""Main configuration model."""

from __future__ import annotations

from pydantic import Field

from .base import BaseConfig
from .handlers import HandlersConfig
from .queue import LoggingConfig, QueueConfig, StoreConfig


class RelayConfig(BaseConfig):
    """Complete application configuration."""

    queue: QueueConfig = Field(
        default_factory=QueueConfig,
        description="Job queue and retry configuration",
    )
    store: StoreConfig = Field(
        default_factory=StoreConfig,
        description="Status store configuration",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
    handlers: HandlersConfig = Field(
        default_factory=HandlersConfig,
        description="Built-in handler configuration",
    )
