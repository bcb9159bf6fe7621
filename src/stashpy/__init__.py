"""Debounced persistence of in-memory values to disk."""

from __future__ import annotations

from importlib import metadata

from stashpy.app import (
    DEFAULT_WRITE_DELAY,
    Stash,
    define_stash,
    get_default_store,
    shutdown,
    startup,
)
from stashpy.domain import (
    DebouncedStore,
    DeserializationError,
    PersistenceWriteError,
    Registry,
    StashAttributes,
    StashError,
    UnknownBindingError,
)

try:
    __version__ = metadata.version("stashpy")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "DEFAULT_WRITE_DELAY",
    "DebouncedStore",
    "DeserializationError",
    "PersistenceWriteError",
    "Registry",
    "Stash",
    "StashAttributes",
    "StashError",
    "UnknownBindingError",
    "__version__",
    "define_stash",
    "get_default_store",
    "shutdown",
    "startup",
]
