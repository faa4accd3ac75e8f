"""Configuration loader combining the YAML file and environment overrides."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from .env_loader import EnvLoader
from .yaml_loader import YamlLoader
from ..exceptions import ConfigValidationError
from ..manager.config_merger import ConfigMerger
from ..models.main import RelayConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILES = ("notify-relay.yaml", "notify-relay.yml", "config.yaml", "config.yml")


class ConfigLoader:
    """Loader for the complete relay configuration."""

    def __init__(self, env_loader: EnvLoader | None = None) -> None:
        """Initialize configuration loader.

        Args:
            env_loader: Environment loader, a default ``NOTIFY_RELAY_`` one if omitted
        """
        self.yaml_loader: YamlLoader = YamlLoader()
        self.env_loader: EnvLoader = env_loader or EnvLoader()
        self.merger: ConfigMerger = ConfigMerger()

    def load(self, path: Path | None = None) -> RelayConfig:
        """Load and validate configuration.

        Precedence, lowest first: model defaults, the YAML file, environment
        variables. When ``path`` is None the default file names are tried in
        the current directory; a missing default file is not an error.

        Args:
            path: Explicit configuration file

        Returns:
            Validated configuration

        Raises:
            ConfigLoadError: If an explicit file is missing or unreadable
            EnvLoadError: If an environment override is malformed
            ConfigValidationError: If the merged configuration is invalid
        """
        file_config: dict[str, object] = {}
        config_path = path if path is not None else self._discover()
        if config_path is not None:
            file_config = self.yaml_loader.load(config_path)
            logger.debug("Loaded configuration file %s", config_path)

        merged = self.merger.merge(file_config, self.env_loader.load())

        try:
            return RelayConfig.model_validate(merged)
        except ValidationError as e:
            raise ConfigValidationError("Configuration validation failed", pydantic_error=e) from e

    def _discover(self) -> Path | None:
        for name in DEFAULT_CONFIG_FILES:
            candidate = Path(name)
            if candidate.is_file():
                return candidate
        return None


def load_config(path: Path | None = None) -> RelayConfig:
    """Load the relay configuration with the default loaders."""
    return ConfigLoader().load(path)
