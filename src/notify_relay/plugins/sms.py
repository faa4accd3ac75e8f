"""SMS handler posting to an HTTP SMS gateway."""

from __future__ import annotations

import logging
from typing import cast

import aiohttp

from notify_relay.config.models.handlers import SmsConfig
from notify_relay.core.exceptions import NotifyRelayError
from notify_relay.plugins.base import read_fields

logger = logging.getLogger(__name__)

SERVICE_NAME = "sms"


class SmsDeliveryError(NotifyRelayError):
    """Raised when the SMS gateway rejects a request."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"SMS gateway returned HTTP {status}: {body}", {"status": status})
        self.status: int = status


class SmsSender:
    """Send text messages for ``sms`` jobs.

    Payload fields: ``to``, ``message`` and optionally ``senderId``,
    ``bypassOptout`` and ``callbackUrl``.
    """

    def __init__(self, config: SmsConfig, production: bool = False) -> None:
        """Initialize the sender.

        Args:
            config: Gateway settings
            production: Deliver for real; otherwise only log the message
        """
        self.config: SmsConfig = config
        self.production: bool = production

    async def __call__(self, payload: object) -> dict[str, object]:
        fields = read_fields(
            SERVICE_NAME,
            payload,
            required={"to": ("to",), "message": ("message", "text")},
            optional={
                "sender_id": ("senderId", "sender_id"),
                "bypass_optout": ("bypassOptout", "bypass_optout"),
                "callback_url": ("callbackUrl", "callback_url"),
            },
        )

        if not self.production:
            log_message = f"DEV LOG: SMS to {fields['to']} - {fields['message']}"
            logger.info("%s", log_message)
            return {"message": log_message}

        body: dict[str, object] = {
            "message": fields["message"],
            "to": fields["to"],
            "sender_id": fields.get("sender_id", self.config.sender_id),
            "bypass_optout": fields.get("bypass_optout", True),
        }
        if "callback_url" in fields:
            body["callback_url"] = fields["callback_url"]

        return await self._post(body)

    async def _post(self, body: dict[str, object]) -> dict[str, object]:
        if not self.config.api_key:
            raise ValueError("No SMS API key provided")

        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        headers = {"Authorization": f"Bearer {self.config.api_key}"}
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(self.config.url, json=body, headers=headers) as response:
                if response.status >= 400:
                    raise SmsDeliveryError(response.status, await response.text())
                data = cast(dict[str, object], await response.json(content_type=None))

        logger.info("SMS sent to %s", body["to"])
        return data
