"""Secret sanitization utilities for logging and error messages.

Handler credentials (bot tokens, SMS API keys, SMTP passwords) must never
reach log output. These helpers redact them from strings, URLs and
structured data.

Examples:
    >>> sanitize_url("https://api.telegram.org/bot123:ABC/sendMessage")
    'https://api.telegram.org/bot<REDACTED>/sendMessage'

    >>> sanitize_value({"api_key": "secret", "to": "+35799999999"})
    {'api_key': '<REDACTED>', 'to': '+35799999999'}
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import TypeIs

REDACTED = "<REDACTED>"

# Telegram: https://api.telegram.org/bot<token>/method
_TELEGRAM_BOT_PATTERN = re.compile(
    r"(https?://api\.telegram\.org/bot)([^/?#\s]+)(/[^?#\s]*)?",
    re.IGNORECASE,
)

# Authorization header values: "Bearer <token>"
_BEARER_PATTERN = re.compile(r"(\bBearer\s+)([A-Za-z0-9._~+/=-]+)", re.IGNORECASE)

# Tokens in query parameters
_TOKEN_IN_QUERY = re.compile(
    r"([?&](?:token|api[-_]?key|auth|secret|password)=)([^&\s]+)",
    re.IGNORECASE,
)

_SENSITIVE_FIELD_PATTERNS = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in [
        r".*token.*",
        r".*api[-_]?key.*",
        r".*secret.*",
        r".*password.*",
        r".*pass$",
        r".*credential.*",
        r".*authorization.*",
    ]
]


def is_sensitive_field(field_name: str) -> bool:
    """Check if a field name indicates sensitive data.

    Examples:
        >>> is_sensitive_field("bot_token")
        True
        >>> is_sensitive_field("chat_id")
        False
    """
    return any(pattern.match(field_name) for pattern in _SENSITIVE_FIELD_PATTERNS)


def sanitize_url(text: str) -> str:
    """Redact tokens embedded in URLs or header-like text."""
    if not text:
        return text

    sanitized = _TELEGRAM_BOT_PATTERN.sub(lambda m: f"{m.group(1)}{REDACTED}{m.group(3) or ''}", text)
    sanitized = _BEARER_PATTERN.sub(rf"\1{REDACTED}", sanitized)
    return _TOKEN_IN_QUERY.sub(rf"\1{REDACTED}", sanitized)


def _is_primitive(value: object) -> TypeIs[str | int | float | bool | None]:
    return isinstance(value, (str, int, float, bool, type(None)))


def _is_sequence(value: object) -> TypeIs[Sequence[object]]:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def sanitize_value(value: object, *, field_name: str | None = None) -> object:
    """Recursively sanitize sensitive values from structured data.

    Values under sensitive field names are replaced outright; strings have
    embedded tokens redacted; mappings and sequences are walked. Any other
    object is converted to its string form and sanitized.

    Args:
        value: The value to sanitize
        field_name: Optional field name for context-aware sanitization

    Returns:
        Sanitized copy of ``value``
    """
    if field_name and is_sensitive_field(field_name):
        return REDACTED

    if _is_primitive(value):
        if type(value) is str:
            return sanitize_url(value)
        return value

    if isinstance(value, Mapping):
        return {
            key: sanitize_value(val, field_name=str(key))
            for key, val in value.items()  # pyright: ignore[reportUnknownVariableType]
        }

    if _is_sequence(value):
        items = [sanitize_value(item) for item in value]
        return tuple(items) if isinstance(value, tuple) else items

    return sanitize_url(str(value))


def sanitize_args(args: tuple[object, ...]) -> tuple[object, ...]:
    """Sanitize the args tuple of a log record."""
    return tuple(sanitize_value(arg) for arg in args)
