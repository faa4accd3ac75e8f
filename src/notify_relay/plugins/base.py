"""Payload helpers shared by the built-in handlers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from notify_relay.core.exceptions import InvalidPayloadError


def read_fields(
    service_name: str,
    payload: object,
    required: Mapping[str, tuple[str, ...]],
    optional: Mapping[str, tuple[str, ...]] | None = None,
) -> dict[str, object]:
    """Extract named fields from a request payload.

    Each field may be spelled several ways (``chatId`` or ``chat_id``); the
    first alias present wins.

    Args:
        service_name: Handler name, for error messages
        payload: Request payload, expected to be a mapping
        required: Field name -> accepted aliases; all must be present
        optional: Field name -> accepted aliases; absent ones are skipped

    Returns:
        Field name -> value

    Raises:
        InvalidPayloadError: If the payload is not a mapping or misses a
            required field
    """
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError(service_name, list(required))
    data = cast(Mapping[str, object], payload)

    fields: dict[str, object] = {}
    missing: list[str] = []
    for name, aliases in required.items():
        value = _first_present(data, aliases)
        if value is None:
            missing.append(name)
        else:
            fields[name] = value
    if missing:
        raise InvalidPayloadError(service_name, missing)

    for name, aliases in (optional or {}).items():
        value = _first_present(data, aliases)
        if value is not None:
            fields[name] = value
    return fields


def _first_present(data: Mapping[str, object], aliases: tuple[str, ...]) -> object | None:
    for alias in aliases:
        value = data.get(alias)
        if value is not None and value != "":
            return value
    return None
