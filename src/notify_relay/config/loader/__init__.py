"""Configuration loaders for YAML files and environment variables."""

from __future__ import annotations

from .config_loader import ConfigLoader, load_config
from .env_loader import EnvLoader
from .yaml_loader import YamlLoader

__all__ = [
    "ConfigLoader",
    "EnvLoader",
    "YamlLoader",
    "load_config",
]
