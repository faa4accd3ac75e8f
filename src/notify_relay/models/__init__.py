"""Persisted models for notify-relay."""

from __future__ import annotations

from .status import StatusRecord, now_millis

__all__ = ["StatusRecord", "now_millis"]
