"""Built-in notification handlers.

Each handler is an async callable taking the request payload, so any of
them can be registered under any service name.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .smtp import EmailSender
from .sms import SmsDeliveryError, SmsSender
from .telegram_bot import TelegramSender

if TYPE_CHECKING:
    from notify_relay.config.models.handlers import HandlersConfig
    from notify_relay.core.registry import ServiceRegistry

logger = logging.getLogger(__name__)

__all__ = [
    "EmailSender",
    "SmsDeliveryError",
    "SmsSender",
    "TelegramSender",
    "register_default_handlers",
]


def register_default_handlers(registry: ServiceRegistry, config: HandlersConfig) -> list[str]:
    """Register the email, SMS and Telegram handlers.

    In production only channels with credentials are registered, so jobs
    for an unconfigured channel fail fast as unknown services.

    Args:
        registry: Registry to populate
        config: Handler configuration

    Returns:
        Names of the registered services
    """
    candidates = {
        "email": (
            EmailSender(config.email, config.production),
            bool(config.email.user and config.email.password),
        ),
        "sms": (SmsSender(config.sms, config.production), bool(config.sms.api_key)),
        "telegram": (
            TelegramSender(config.telegram, config.production),
            bool(config.telegram.bot_token),
        ),
    }

    registered: list[str] = []
    for name, (handler, configured) in candidates.items():
        if config.production and not configured:
            logger.warning("Skipping %s handler: credentials not configured", name)
            continue
        registry.register(name, handler)
        registered.append(name)
    return registered
