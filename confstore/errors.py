"""Typed config store errors."""

from __future__ import annotations

from pathlib import Path


class ConfigStoreError(Exception):
    """Base type for config store failures."""


class ConfigParseError(ConfigStoreError, ValueError):
    """Raised when the persisted document is not a JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"invalid config document at {path}: {reason}")
        self.path = path
        self.reason = reason
