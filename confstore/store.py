"""File-backed JSON config store with dot-path access."""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

from .dotpath import delete_path, get_path, has_path, set_path
from .errors import ConfigParseError
from .options import StoreOptions
from .paths import UserDirs, resolve_config_path


class _Unset:
    """Marker for a value that cannot be persisted."""

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Unset":
        return self

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()
_NO_VALUE = object()


def _prune_unset(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _prune_unset(item) for key, item in value.items() if item is not UNSET}
    if isinstance(value, (list, tuple)):
        return [None if item is UNSET else _prune_unset(item) for item in value]
    return value


class ConfigStore:
    """Per-namespace JSON document persisted under the platform config root.

    Every accessor re-reads the file, so edits made by other writers are
    observed immediately. Every mutation rewrites the whole document. There
    is no locking: concurrent writers race and the last write wins.
    """

    def __init__(
        self,
        namespace: str,
        defaults: Mapping[str, Any] | None = None,
        options: StoreOptions | Mapping[str, Any] | None = None,
        *,
        user_dirs: UserDirs | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if options is None:
            options = StoreOptions()
        elif not isinstance(options, StoreOptions):
            options = StoreOptions.from_mapping(options)
        self._namespace = namespace
        self._options = options
        self._defaults = _prune_unset(dict(defaults or {}))
        # Defaults fill in reads until this store writes a document, which then carries them.
        self._defaults_pending = bool(self._defaults)
        self._logger = logger or logging.getLogger(__name__)
        self._path = resolve_config_path(namespace, options, user_dirs=user_dirs)

    # ---------- Properties ----------

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def options(self) -> StoreOptions:
        return self._options

    @property
    def path(self) -> Path:
        return self._path

    @property
    def all(self) -> dict[str, Any]:
        """Persisted document, merged over the defaults until the first write."""
        document = self._read()
        if not self._defaults_pending:
            return document
        merged = copy.deepcopy(self._defaults)
        merged.update(document)
        return merged

    @all.setter
    def all(self, value: Mapping[str, Any]) -> None:
        if not isinstance(value, Mapping):
            raise TypeError(f"config document must be a mapping, got {type(value).__name__}")
        self._write(dict(value))

    @property
    def size(self) -> int:
        return len(self.all)

    # ---------- Public API ----------

    def get(self, key: str, default: Any = UNSET) -> Any:
        return get_path(self.all, key, default)

    def has(self, key: str) -> bool:
        return has_path(self.all, key)

    def set(self, key: str | Mapping[str, Any], value: Any = _NO_VALUE) -> None:
        """Store ``value`` at dot-path ``key``, or every item of a mapping."""
        if isinstance(key, Mapping):
            if value is not _NO_VALUE:
                raise TypeError("set() takes no value when given a mapping")
            items = list(key.items())
        elif isinstance(key, str):
            if value is _NO_VALUE:
                raise TypeError(f"set() missing value for key {key!r}")
            items = [(key, value)]
        else:
            raise TypeError(f"key must be a string or a mapping, got {type(key).__name__}")

        document = self.all
        for item_key, item_value in items:
            set_path(document, item_key, item_value)
        self._write(document)

    def delete(self, key: str) -> None:
        document = self.all
        if not delete_path(document, key):
            self._logger.debug("delete of missing key %s in %s", key, self._path)
        self._write(document)

    def clear(self) -> None:
        self._write({})

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __len__(self) -> int:
        return self.size

    # ---------- Internal helpers ----------

    def _read(self) -> dict[str, Any]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return {}
        try:
            payload = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            return self._recover(f"not UTF-8 text ({exc.reason} at byte {exc.start})", exc)
        if not payload.strip():
            return {}
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            return self._recover(f"{exc.msg} at line {exc.lineno} column {exc.colno}", exc)
        if not isinstance(data, dict):
            return self._recover(f"root is {type(data).__name__}, expected an object", None)
        return data

    def _recover(self, reason: str, cause: Exception | None) -> dict[str, Any]:
        if not self._options.clear_invalid_config:
            raise ConfigParseError(self._path, reason) from cause
        self._logger.warning("clearing invalid config %s: %s", self._path, reason)
        self._path.write_text("", encoding="utf-8")
        return {}

    def _write(self, document: dict[str, Any]) -> None:
        serialized = json.dumps(_prune_unset(document), ensure_ascii=False, indent=2)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        staging = self._path.with_name(f"{self._path.name}.tmp")
        try:
            staging.write_text(serialized + "\n", encoding="utf-8")
            os.replace(staging, self._path)
        except OSError:
            staging.unlink(missing_ok=True)
            raise
        self._defaults_pending = False
        self._logger.debug("wrote %d keys to %s", len(document), self._path)
