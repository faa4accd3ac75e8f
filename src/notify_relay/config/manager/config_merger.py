"""Configuration merging for combining file and environment sources."""

from __future__ import annotations

import copy
from typing import Any

from ..exceptions import ConfigMergeError

# Config systems need flexible types
ConfigDict = dict[str, Any]  # pyright: ignore[reportExplicitAny]


class ConfigMerger:
    """Deep-merge configuration dictionaries, later sources winning."""

    def merge(self, base: object, override: object) -> ConfigDict:
        """Merge two configuration dictionaries with override precedence.

        Args:
            base: Base configuration dictionary
            override: Override configuration dictionary (takes precedence)

        Returns:
            New merged dictionary; inputs are left untouched

        Raises:
            ConfigMergeError: If either source is not a dictionary
        """
        if not isinstance(base, dict):
            raise ConfigMergeError("Base configuration must be a dictionary")
        if not isinstance(override, dict):
            raise ConfigMergeError("Override configuration must be a dictionary")

        result: ConfigDict = copy.deepcopy(base)  # pyright: ignore[reportUnknownArgumentType]
        self._deep_merge(result, override)  # pyright: ignore[reportUnknownArgumentType]
        return result

    def _deep_merge(self, target: ConfigDict, source: ConfigDict) -> None:
        for key, value in source.items():  # pyright: ignore[reportAny]
            if isinstance(target.get(key), dict) and isinstance(value, dict):
                self._deep_merge(target[key], value)  # pyright: ignore[reportAny, reportUnknownArgumentType]
            else:
                target[key] = copy.deepcopy(value)  # pyright: ignore[reportAny]
