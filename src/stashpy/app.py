"""Declarative stash bindings and the process-wide default store."""

from __future__ import annotations

import atexit
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from stashpy.adapters.scheduling import ThreadingIdleScheduler
from stashpy.config.storage import StorageConfig, get_storage_config
from stashpy.domain.naming import stash_filename
from stashpy.domain.registry import Registry
from stashpy.domain.store import DebouncedStore, read_stash_file

if TYPE_CHECKING:
    from pathlib import Path

    from stashpy.domain.ports.scheduling import IdleScheduler

DEFAULT_WRITE_DELAY: Final[float] = 5.0

log = getLogger(__name__)


@dataclass(slots=True)
class _DefaultStoreState:
    store: DebouncedStore | None = None


_STATE = _DefaultStoreState()


def startup(
    *,
    storage: StorageConfig | None = None,
    scheduler: IdleScheduler | None = None,
    force: bool = False,
) -> DebouncedStore:
    """Create the default store; pending writes are flushed at interpreter exit."""

    if _STATE.store is not None:
        if not force:
            return _STATE.store
        shutdown()

    storage_config = storage or get_storage_config()
    registry = Registry(storage_config.resolve_data_dir())
    store = DebouncedStore(registry, scheduler or ThreadingIdleScheduler())
    _STATE.store = store
    atexit.register(store.flush_all)
    log.debug("Default stash store rooted at %s", registry.base_dir)
    return store


def get_default_store() -> DebouncedStore:
    return _STATE.store or startup()


def shutdown(*, flush: bool = True) -> None:
    """Flush (or drop) pending writes and forget the default store."""

    store = _STATE.store
    if store is None:
        return
    if flush:
        store.flush_all()
    else:
        store.cancel_all()
    atexit.unregister(store.flush_all)
    _STATE.store = None


@dataclass(slots=True)
class Stash:
    """Handle to a declared binding; reads and writes go through its store."""

    name: str
    path: Path
    store: DebouncedStore

    @property
    def value(self) -> object:
        return self.store.get(self.name)

    @value.setter
    def value(self, value: object) -> None:
        self.store.set(self.name, value)

    def get(self) -> object:
        return self.store.get(self.name)

    def set(self, value: object, *, immediate: bool = False) -> object:
        return self.store.set(self.name, value, immediate=immediate)

    def save(self) -> object:
        return self.store.save(self.name)

    def load(self) -> object:
        return self.store.load(self.name)

    def reset(self, *, immediate: bool = False) -> object:
        return self.store.reset(self.name, immediate=immediate)

    def flush(self) -> bool:
        return self.store.flush(self.name)

    @property
    def pending(self) -> bool:
        return self.store.is_pending(self.name)


def define_stash(
    name: str,
    default: object = None,
    *,
    subdirectory: str | Path | None = None,
    filename: str | None = None,
    write_delay: float | None = DEFAULT_WRITE_DELAY,
    store: DebouncedStore | None = None,
    storage: StorageConfig | None = None,
) -> Stash:
    """Declare a persistent binding, resuming its on-disk value when present.

    The file lives at ``<data dir>/<subdirectory>/<filename>``; ``filename``
    defaults to the sanitised ``name`` with a ``.json`` suffix. The directory is
    created if needed. An existing file becomes the initial value, otherwise
    ``default`` is used; nothing is written until the value is next set. A
    corrupt file raises :class:`~stashpy.domain.errors.DeserializationError`
    before anything is registered.
    """

    target_store = store or get_default_store()
    storage_config = storage or StorageConfig(data_dir=target_store.registry.base_dir)
    path = storage_config.stash_path(filename or stash_filename(name), subdirectory)

    initial = read_stash_file(name, path, default)
    target_store.register(name, path, default, write_delay)
    target_store.seed(name, initial)
    log.debug("Declared stash %s at %s", name, path)
    return Stash(name=name, path=path, store=target_store)

