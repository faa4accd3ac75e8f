"""Utility helpers for notify-relay."""

from __future__ import annotations

from .logging import (
    CorrelationIDFilter,
    SecretRedactingFilter,
    configure_logging,
    correlation_id_context,
    get_correlation_id,
)
from .sanitization import REDACTED, is_sensitive_field, sanitize_url, sanitize_value

__all__ = [
    "CorrelationIDFilter",
    "REDACTED",
    "SecretRedactingFilter",
    "configure_logging",
    "correlation_id_context",
    "get_correlation_id",
    "is_sensitive_field",
    "sanitize_url",
    "sanitize_value",
]
