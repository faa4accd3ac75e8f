"""Configuration models for the built-in notification handlers."""

from __future__ import annotations

import re

from pydantic import Field, field_validator

from .base import BaseConfig


class EmailConfig(BaseConfig):
    """SMTP settings for the email handler."""

    host: str = Field(
        default="smtp.gmail.com",
        description="SMTP server hostname",
    )
    port: int = Field(
        default=587,
        ge=1,
        le=65535,
        description="SMTP server port (STARTTLS)",
    )
    user: str | None = Field(
        default=None,
        description="SMTP username",
    )
    password: str | None = Field(
        default=None,
        description="SMTP password",
    )
    sender_name: str = Field(
        default="Notify Relay",
        description="Display name of the sender",
    )
    sender_address: str = Field(
        default="sender@address.com",
        description="Sender email address",
    )
    timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="SMTP timeout in seconds",
    )


class SmsConfig(BaseConfig):
    """HTTP API settings for the SMS handler."""

    api_key: str | None = Field(
        default=None,
        description="Bearer token for the SMS API",
    )
    url: str = Field(
        default="https://api.sms.to/sms/send",
        description="SMS send endpoint",
    )
    sender_id: str = Field(
        default="SMSto",
        min_length=1,
        description="Default sender id",
    )
    timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Request timeout in seconds",
    )


class TelegramConfig(BaseConfig):
    """Bot settings for the Telegram handler."""

    bot_token: str | None = Field(
        default=None,
        description="Telegram bot token",
    )
    timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Request timeout in seconds",
    )

    @field_validator("bot_token")
    @classmethod
    def validate_bot_token(cls, v: str | None) -> str | None:
        """Validate the ``<digits>:<secret>`` bot token shape."""
        if v is None:
            return v
        if not re.match(r"^\d+:[A-Za-z0-9_-]{20,}$", v):
            raise ValueError("Invalid Telegram bot token format")
        return v


class HandlersConfig(BaseConfig):
    """Configuration shared by the built-in handlers."""

    production: bool = Field(
        default=False,
        description="Contact real providers; otherwise handlers only log",
    )
    email: EmailConfig = Field(
        default_factory=EmailConfig,
        description="Email handler settings",
    )
    sms: SmsConfig = Field(
        default_factory=SmsConfig,
        description="SMS handler settings",
    )
    telegram: TelegramConfig = Field(
        default_factory=TelegramConfig,
        description="Telegram handler settings",
    )
