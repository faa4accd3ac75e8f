"""Application layer for notify-relay."""

from __future__ import annotations

from .cli import cli

__all__ = ["cli"]
