"""Configuration models for notify-relay."""

from __future__ import annotations

from .base import BaseConfig
from .handlers import EmailConfig, HandlersConfig, SmsConfig, TelegramConfig
from .main import RelayConfig
from .queue import DEFAULT_MAX_RETRIES, LoggingConfig, QueueConfig, StoreConfig

__all__ = [
    "BaseConfig",
    "DEFAULT_MAX_RETRIES",
    "EmailConfig",
    "HandlersConfig",
    "LoggingConfig",
    "QueueConfig",
    "RelayConfig",
    "SmsConfig",
    "StoreConfig",
    "TelegramConfig",
]
