"""Error handling for the configuration system."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from notify_relay.core.exceptions import NotifyRelayError

logger = logging.getLogger(__name__)


class ConfigError(NotifyRelayError):
    """Base exception for all configuration-related errors."""


class ConfigLoadError(ConfigError):
    """Exception raised when a configuration file cannot be loaded."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny] # Flexible config error context
    ) -> None:
        """Initialize ConfigLoadError.

        Args:
            message: Error message
            file_path: Path to the configuration file that failed to load
            context: Additional context information
        """
        full_context = context or {}
        if file_path is not None:
            full_context["file_path"] = file_path

        super().__init__(message, full_context)
        self.file_path: str | None = file_path


class EnvLoadError(ConfigError):
    """Exception raised when environment variable loading fails."""

    def __init__(
        self,
        message: str,
        env_var: str | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny] # Flexible config error context
    ) -> None:
        """Initialize EnvLoadError.

        Args:
            message: Error message
            env_var: Environment variable name that caused the error
            context: Additional context information
        """
        full_context = context or {}
        if env_var is not None:
            full_context["env_var"] = env_var

        super().__init__(message, full_context)
        self.env_var: str | None = env_var


class ConfigMergeError(ConfigError):
    """Exception raised when configuration sources cannot be merged."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(
        self,
        message: str,
        pydantic_error: ValidationError | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny] # Flexible config error context
    ) -> None:
        """Initialize ConfigValidationError.

        Args:
            message: Error message
            pydantic_error: Original Pydantic ValidationError
            context: Additional context information
        """
        full_context = context or {}
        if pydantic_error is not None:
            full_context["validation_errors"] = self._format_validation_errors(pydantic_error)

        super().__init__(message, full_context)
        self.pydantic_error: ValidationError | None = pydantic_error

    def _format_validation_errors(self, error: ValidationError) -> list[dict[str, Any]]:  # pyright: ignore[reportExplicitAny] # Flexible error formatting
        return [
            {
                "field": ".".join(str(loc) for loc in err["loc"]),
                "message": err["msg"],
                "type": err["type"],
            }
            for err in error.errors()
        ]


def suggest_config_fix(error: ConfigError) -> str | None:
    """Suggest a fix for a configuration error.

    Args:
        error: Configuration error

    Returns:
        Suggested fix or None if no suggestion is available
    """
    if isinstance(error, ConfigLoadError):
        if error.file_path:
            return f"Check that the file exists and is valid YAML: {error.file_path}"
        return "Check that the configuration file exists and is valid YAML"

    if isinstance(error, EnvLoadError):
        if error.env_var:
            return f"Check the format and value of environment variable: {error.env_var}"
        return "Check the format and values of environment variables"

    if isinstance(error, ConfigValidationError) and error.pydantic_error:
        errors = error.pydantic_error.errors()
        if len(errors) == 1:
            field_path = ".".join(str(loc) for loc in errors[0]["loc"])
            return f"Fix validation error in field '{field_path}': {errors[0]['msg']}"
        return f"Fix {len(errors)} validation errors in the configuration"

    return None
