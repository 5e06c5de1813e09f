"""Platform-independent helpers for locating config documents."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from platformdirs import site_config_dir, user_config_dir

from .options import StoreOptions

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "confstore"
CONFIG_FILE_NAME = "config.json"

_ENV_CONFIG_DIR = "CONFSTORE_CONFIG_DIR"
_ENV_GLOBAL_CONFIG_DIR = "CONFSTORE_GLOBAL_CONFIG_DIR"


@dataclass(frozen=True)
class UserDirs:
    """Expose the per-user and system-wide config roots."""

    app_name: str = DEFAULT_APP_NAME
    config_dir_override: Path | None = None
    global_config_dir_override: Path | None = None
    env: Mapping[str, str] = field(default_factory=lambda: os.environ)

    def config_dir(self) -> Path:
        if self.config_dir_override:
            return Path(self.config_dir_override)
        if value := self.env.get(_ENV_CONFIG_DIR):
            return Path(value).expanduser()
        return Path(user_config_dir(self.app_name, appauthor=False))

    def global_config_dir(self) -> Path:
        if self.global_config_dir_override:
            return Path(self.global_config_dir_override)
        if value := self.env.get(_ENV_GLOBAL_CONFIG_DIR):
            return Path(value).expanduser()
        return Path(site_config_dir(self.app_name, appauthor=False))


def resolve_config_path(
    namespace: str,
    options: StoreOptions | None = None,
    *,
    user_dirs: UserDirs | None = None,
    cwd: Path | None = None,
) -> Path:
    """Return the absolute document path for ``namespace``.

    An explicit ``config_path`` replaces namespace-based resolution. Relative
    overrides are anchored at the global root when ``global_config_path`` is
    set and at ``cwd`` otherwise. Nothing is created or checked on disk.
    """

    options = options or StoreOptions()
    user_dirs = user_dirs or UserDirs()

    if options.config_path is not None:
        override = Path(options.config_path).expanduser()
        if override.is_absolute():
            resolved = override
        elif options.global_config_path:
            resolved = user_dirs.global_config_dir() / override
        else:
            resolved = (cwd or Path.cwd()) / override
    else:
        root = user_dirs.global_config_dir() if options.global_config_path else user_dirs.config_dir()
        resolved = root / namespace / CONFIG_FILE_NAME

    resolved = Path(os.path.abspath(resolved))
    logger.debug("resolved config path namespace=%s path=%s", namespace, resolved)
    return resolved
