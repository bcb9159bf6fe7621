"""Debounced write-through store for stash bindings.

Values are held in memory and are authoritative. ``set`` updates memory
immediately and either saves synchronously or (re)arms a trailing-edge idle
timer for the binding; the timer saves whatever value is current when it
fires. Re-arming cancels the previous timer, so a burst of sets inside the
delay produces a single write.

Timers may fire on other threads. Store state is guarded by one lock and
file writes are serialised by another, taken in that order: write lock first.
A save snapshots the value together with the binding's pending token and only
retires that pending write if no newer set re-armed it meanwhile.
"""

from __future__ import annotations

import itertools
import json
import threading
from dataclasses import dataclass
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from stashpy.adapters import json_file
from stashpy.domain.errors import DeserializationError, PersistenceWriteError
from stashpy.domain.model import PendingWrite

if TYPE_CHECKING:
    from pathlib import Path

    from stashpy.domain.ports.scheduling import IdleScheduler
    from stashpy.domain.registry import Registry


log = getLogger(__name__)

_MISSING = object()


@dataclass(slots=True)
class SaveStats:
    """Counters describing the store's write activity."""

    saves: int = 0
    scheduled: int = 0
    coalesced: int = 0
    failures: int = 0


class DebouncedStore:
    def __init__(self, registry: Registry, scheduler: IdleScheduler) -> None:
        self.registry = registry
        self.scheduler = scheduler
        self.stats = SaveStats()
        self._values: dict[str, object] = {}
        self._pending: dict[str, PendingWrite] = {}
        self._tokens = itertools.count(1)
        self._lock = threading.RLock()
        self._write_lock = threading.Lock()

    def register(
        self,
        name: str,
        file: str | Path,
        default: object = None,
        write_delay: float | None = None,
    ) -> str:
        """Register ``name`` in the underlying registry; the current value is untouched."""

        return self.registry.register(name, file, default, write_delay)

    # -- value slot -----------------------------------------------------

    def get(self, name: str) -> object:
        """Return the in-memory value of ``name``.

        A registered binding that was never set reads as its default.
        """

        attributes = self.registry.attributes_of(name)
        with self._lock:
            value = self._values.get(name, _MISSING)
        return attributes.default if value is _MISSING else value

    def set(self, name: str, value: object, *, immediate: bool = False) -> object:
        """Store ``value`` in memory and persist it now or after the idle delay.

        Saving synchronously (``immediate`` or no configured delay) may raise
        :class:`PersistenceWriteError`; the in-memory value is kept either way
        and an already armed debounced write stays armed.
        """

        attributes = self.registry.attributes_of(name)
        delay = None if immediate else attributes.write_delay
        with self._lock:
            self._values[name] = value
            if delay is not None:
                self._arm(name, delay)
        if delay is None:
            self.save(name)
        return self.get(name)

    def seed(self, name: str, value: object) -> object:
        """Set the in-memory value without saving or scheduling a save."""

        self.registry.attributes_of(name)
        with self._lock:
            self._values[name] = value
        return value

    def reset(self, name: str, *, immediate: bool = False) -> object:
        """Restore the registered default; persisted like any other ``set``."""

        return self.set(name, self.registry.attributes_of(name).default, immediate=immediate)

    # -- file io --------------------------------------------------------

    def save(self, name: str) -> object:
        """Write the current value of ``name`` to its file, replacing the content.

        On success the pending write is retired unless a newer ``set`` re-armed
        it while the file was being written. On failure it is left armed.
        """

        path = self.registry.resolved_file(name)
        with self._write_lock:
            with self._lock:
                value = self.get(name)
                pending = self._pending.get(name)
            try:
                json_file.write_document(path, value)
            except (OSError, TypeError, ValueError, RecursionError) as exc:
                with self._lock:
                    self.stats.failures += 1
                raise PersistenceWriteError(name, path, str(exc)) from exc
            with self._lock:
                self.stats.saves += 1
                if pending is not None and self._pending.get(name) is pending:
                    self._cancel_pending(name)
        log.debug("Saved stash %s to %s", name, path)
        return value

    def load(self, name: str) -> object:
        """Replace the in-memory value of ``name`` with its file content.

        A missing or unreadable file loads the default. Loading waits for an
        in-flight write, cancels a pending one and never writes the file itself.
        """

        path = self.registry.resolved_file(name)
        with self._write_lock:
            value = self.read(name, path)
            with self._lock:
                self._cancel_pending(name)
                self._values[name] = value
        return value

    def read(self, name: str, path: Path | None = None) -> object:
        """Return the value stored on disk for ``name`` without touching memory."""

        attributes = self.registry.attributes_of(name)
        return read_stash_file(name, path or self.registry.resolved_file(name), attributes.default)

    # -- pending writes -------------------------------------------------

    def is_pending(self, name: str) -> bool:
        with self._lock:
            return name in self._pending

    def pending(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._pending)

    def flush(self, name: str) -> bool:
        """Save ``name`` now if a debounced write is pending for it.

        A failed flush raises and keeps the write pending for its timer.
        """

        if not self.is_pending(name):
            return False
        self.save(name)
        return True

    def flush_all(self) -> list[str]:
        """Flush every pending write, logging failures per binding."""

        flushed: list[str] = []
        for name in self.pending():
            try:
                if self.flush(name):
                    flushed.append(name)
            except PersistenceWriteError:
                log.exception("Failed to flush stash %s", name)
        return flushed

    def cancel_all(self) -> None:
        with self._lock:
            for name in list(self._pending):
                self._cancel_pending(name)

    def _arm(self, name: str, delay: float) -> None:
        if self._cancel_pending(name):
            self.stats.coalesced += 1
        token = next(self._tokens)
        handle = self.scheduler.call_later(delay, partial(self._fire, name, token))
        self._pending[name] = PendingWrite(name=name, token=token, delay=delay, handle=handle)
        self.stats.scheduled += 1
        log.debug("Scheduled save of stash %s in %ss", name, delay)

    def _fire(self, name: str, token: int) -> None:
        with self._lock:
            current = self._pending.get(name)
            if current is None or current.token != token:
                # superseded by a later set, load or save
                return
            del self._pending[name]
        try:
            self.save(name)
        except PersistenceWriteError:
            log.exception("Debounced save of stash %s failed", name)

    def _cancel_pending(self, name: str) -> bool:
        pending = self._pending.pop(name, None)
        if pending is None:
            return False
        pending.cancel()
        return True


def read_stash_file(name: str, path: Path, default: object) -> object:
    """Decode the first document at ``path``, falling back to ``default``.

    Only an absent or unreadable file yields ``default``; a file whose content
    is not a document raises :class:`DeserializationError`.
    """

    try:
        value = json_file.read_document(path)
    except FileNotFoundError:
        return default
    except OSError as exc:
        log.warning("Cannot read stash %s from %s, using default: %s", name, path, exc)
        return default
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DeserializationError(name, path, str(exc)) from exc
    log.info("Loaded stash %s from %s", name, path)
    return value
