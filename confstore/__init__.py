"""Per-namespace JSON config store with dot-path access."""

from .errors import ConfigParseError, ConfigStoreError
from .options import StoreOptions
from .paths import UserDirs, resolve_config_path
from .store import UNSET, ConfigStore

__all__ = [
    "ConfigStore",
    "ConfigStoreError",
    "ConfigParseError",
    "StoreOptions",
    "UNSET",
    "UserDirs",
    "resolve_config_path",
]
