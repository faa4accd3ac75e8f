"""Configuration management for notify-relay."""

from __future__ import annotations

from .exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigMergeError,
    ConfigValidationError,
    EnvLoadError,
    suggest_config_fix,
)
from .loader import ConfigLoader, EnvLoader, YamlLoader, load_config
from .models import (
    HandlersConfig,
    LoggingConfig,
    QueueConfig,
    RelayConfig,
    StoreConfig,
)

__all__ = [
    # Exception classes
    "ConfigError",
    "ConfigLoadError",
    "ConfigMergeError",
    "ConfigValidationError",
    "EnvLoadError",
    "suggest_config_fix",
    # Loaders
    "ConfigLoader",
    "EnvLoader",
    "YamlLoader",
    "load_config",
    # Models
    "HandlersConfig",
    "LoggingConfig",
    "QueueConfig",
    "RelayConfig",
    "StoreConfig",
]
