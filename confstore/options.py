"""Store options record."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Mapping

_CAMEL_CASE_ALIASES: dict[str, str] = {
    "globalConfigPath": "global_config_path",
    "configPath": "config_path",
    "clearInvalidConfig": "clear_invalid_config",
}


@dataclass(frozen=True)
class StoreOptions:
    """Controls where a store lives and how it treats a corrupted document."""

    global_config_path: bool = False
    config_path: str | os.PathLike[str] | None = None
    clear_invalid_config: bool = True

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "StoreOptions":
        known = {item.name for item in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _CAMEL_CASE_ALIASES.get(key, key)
            if name not in known:
                raise TypeError(f"unknown store option: {key!r}")
            values[name] = value
        return cls(**values)
