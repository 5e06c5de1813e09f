"""Dot-separated key access over nested dictionaries.

A dot always denotes nesting: ``"a.b"`` addresses ``data["a"]["b"]`` and
there is no way to address a literal ``"a.b"`` key.
"""

from __future__ import annotations

from typing import Any, MutableMapping

_MISSING = object()


def split_key(key: str) -> list[str]:
    return key.split(".")


def _walk(data: Any, segments: list[str]) -> Any:
    current = data
    for segment in segments:
        if not isinstance(current, dict) or segment not in current:
            return _MISSING
        current = current[segment]
    return current


def get_path(data: MutableMapping[str, Any], key: str, default: Any = None) -> Any:
    value = _walk(data, split_key(key))
    return default if value is _MISSING else value


def has_path(data: MutableMapping[str, Any], key: str) -> bool:
    return _walk(data, split_key(key)) is not _MISSING


def set_path(data: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Assign ``value`` at ``key``, creating intermediate dicts as needed.

    Intermediate values that are not dicts are replaced.
    """

    *parents, leaf = split_key(key)
    current = data
    for segment in parents:
        child = current.get(segment)
        if not isinstance(child, dict):
            child = {}
            current[segment] = child
        current = child
    current[leaf] = value


def delete_path(data: MutableMapping[str, Any], key: str) -> bool:
    """Remove the value at ``key``; return ``False`` if nothing was there."""

    *parents, leaf = split_key(key)
    container = _walk(data, parents)
    if not isinstance(container, dict) or leaf not in container:
        return False
    del container[leaf]
    return True
