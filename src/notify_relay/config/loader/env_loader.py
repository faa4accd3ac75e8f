"""Environment variable configuration loader."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import cast

from ..exceptions import EnvLoadError


class EnvLoader:
    """Load nested configuration from prefixed environment variables.

    ``NOTIFY_RELAY_QUEUE__MAX_RETRIES=3`` becomes ``{"queue": {"max_retries": 3}}``:
    the prefix is stripped, ``__`` separates nesting levels and single
    underscores stay part of field names.
    """

    def __init__(
        self,
        prefix: str = "NOTIFY_RELAY_",
        separator: str = "__",
        convert_types: bool = True,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize EnvLoader.

        Args:
            prefix: Prefix for environment variables to load
            separator: Separator for nested field names
            convert_types: Whether to attempt automatic type conversion
            environ: Environment mapping, ``os.environ`` by default
        """
        self.prefix: str = prefix
        self.separator: str = separator
        self.convert_types: bool = convert_types
        self.environ: Mapping[str, str] = environ if environ is not None else os.environ

    def load(self) -> dict[str, object]:
        """Load configuration from environment variables.

        Returns:
            Nested dictionary of overrides

        Raises:
            EnvLoadError: If a JSON-looking value cannot be parsed
        """
        config: dict[str, object] = {}

        for env_var, raw_value in self.environ.items():
            if not env_var.startswith(self.prefix):
                continue

            config_key = env_var[len(self.prefix):]
            if not config_key:
                continue

            path = [part for part in config_key.lower().split(self.separator) if part]
            value: object = raw_value
            if self.convert_types:
                value = self._convert_value(raw_value, env_var)

            self._set_nested_value(config, path, value)

        return config

    def _convert_value(self, value: str, env_var: str) -> object:
        if not value:
            return value

        numeric_value = self._try_numeric_conversion(value)
        if numeric_value is not None:
            return numeric_value

        lower_value = value.lower()
        if lower_value in ("true", "yes", "on"):
            return True
        if lower_value in ("false", "no", "off"):
            return False
        if lower_value in ("null", "none"):
            return None

        if value.startswith(("[", "{")):
            try:
                return cast(object, json.loads(value))
            except json.JSONDecodeError as e:
                raise EnvLoadError(f"Failed to parse JSON for {env_var}: {e}", env_var) from e

        return value

    def _try_numeric_conversion(self, value: str) -> int | float | None:
        try:
            if "." not in value and "e" not in value.lower():
                return int(value)
            return float(value)
        except ValueError:
            return None

    def _set_nested_value(self, config: dict[str, object], path: list[str], value: object) -> None:
        current: dict[str, object] = config
        for key in path[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]  # pyright: ignore[reportAssignmentType]
        current[path[-1]] = value
