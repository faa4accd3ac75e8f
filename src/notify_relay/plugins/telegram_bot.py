"""Telegram handler sending bot messages."""

from __future__ import annotations

import logging

from telegram import Bot

from notify_relay.config.models.handlers import TelegramConfig
from notify_relay.plugins.base import read_fields

logger = logging.getLogger(__name__)

SERVICE_NAME = "telegram"


class TelegramSender:
    """Send chat messages for ``telegram`` jobs.

    Payload fields: ``chatId`` (the bot learns it after the user's first
    interaction) and ``message``.
    """

    def __init__(self, config: TelegramConfig, production: bool = False) -> None:
        """Initialize the sender.

        Args:
            config: Bot settings
            production: Deliver for real; otherwise only log the message
        """
        self.config: TelegramConfig = config
        self.production: bool = production

    async def __call__(self, payload: object) -> dict[str, object]:
        fields = read_fields(
            SERVICE_NAME,
            payload,
            required={"chat_id": ("chatId", "chat_id"), "message": ("message", "text")},
        )
        chat_id = str(fields["chat_id"])
        text = str(fields["message"])

        if not self.production:
            logger.info("DEV LOG: Telegram alert to %s: %s", chat_id, text)
            return {"chat_id": chat_id, "sent": False}

        if not self.config.bot_token:
            raise ValueError("No Telegram bot token provided")

        async with Bot(token=self.config.bot_token) as bot:
            sent = await bot.send_message(
                chat_id=chat_id,
                text=text,
                read_timeout=self.config.timeout,
                write_timeout=self.config.timeout,
                connect_timeout=self.config.timeout,
            )

        logger.info("Telegram message sent to chat %s", chat_id)
        return {"chat_id": chat_id, "message_id": sent.message_id, "sent": True}
