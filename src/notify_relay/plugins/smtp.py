"""Email handler delivering through SMTP with STARTTLS."""

from __future__ import annotations

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr, make_msgid

from notify_relay.config.models.handlers import EmailConfig
from notify_relay.plugins.base import read_fields

logger = logging.getLogger(__name__)

SERVICE_NAME = "email"


class EmailSender:
    """Send plain-text (and optional HTML) email for ``email`` jobs.

    Payload fields: ``to`` (comma-separated receivers), ``subject``,
    ``message`` and optionally ``html``.
    """

    def __init__(self, config: EmailConfig, production: bool = False) -> None:
        """Initialize the sender.

        Args:
            config: SMTP settings
            production: Deliver for real; otherwise only log the message
        """
        self.config: EmailConfig = config
        self.production: bool = production

    async def __call__(self, payload: object) -> dict[str, object]:
        fields = read_fields(
            SERVICE_NAME,
            payload,
            required={"to": ("to", "receiver")},
            optional={
                "subject": ("subject",),
                "message": ("message", "text"),
                "html": ("html",),
            },
        )
        message = self.build(
            to=str(fields["to"]),
            subject=str(fields.get("subject", "Subject")),
            text=str(fields.get("message", "No plain text version was sent")),
            html=str(fields["html"]) if "html" in fields else None,
        )

        if not self.production:
            logger.info("DEV LOG: email to %s - %s", message["To"], message["Subject"])
            return {"message_id": message["Message-ID"], "preview": fields.get("message")}

        await asyncio.to_thread(self._deliver, message)
        logger.info("Email sent to %s", message["To"])
        return {"message_id": message["Message-ID"]}

    def build(self, *, to: str, subject: str, text: str, html: str | None = None) -> EmailMessage:
        """Assemble the outgoing message."""
        message = EmailMessage()
        message["From"] = formataddr((self.config.sender_name, self.config.sender_address))
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(text)
        if html is not None:
            message.add_alternative(html, subtype="html")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        if not self.config.user or not self.config.password:
            raise ValueError("No email credentials provided")

        with smtplib.SMTP(self.config.host, self.config.port, timeout=self.config.timeout) as server:
            _ = server.starttls()
            _ = server.login(self.config.user, self.config.password)
            _ = server.send_message(message)
