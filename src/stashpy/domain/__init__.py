"""Stash registry, debounced store and their errors."""

from __future__ import annotations

from .errors import (
    DeserializationError,
    PersistenceWriteError,
    StashError,
    UnknownBindingError,
)
from .model import PendingWrite, StashAttributes
from .registry import Registry
from .store import DebouncedStore, SaveStats

__all__ = [
    "DebouncedStore",
    "DeserializationError",
    "PendingWrite",
    "PersistenceWriteError",
    "Registry",
    "SaveStats",
    "StashAttributes",
    "StashError",
    "UnknownBindingError",
]
