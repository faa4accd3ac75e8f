"""Configuration merging."""

from __future__ import annotations

from .config_merger import ConfigMerger

__all__ = ["ConfigMerger"]
