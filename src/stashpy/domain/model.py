"""Stash binding metadata and pending write records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from stashpy.domain.ports.scheduling import ScheduledCall


@dataclass(frozen=True, slots=True)
class StashAttributes:
    """Out-of-band metadata of a binding; the current value lives in the store."""

    file: Path
    default: object
    write_delay: float | None = None

    @property
    def debounced(self) -> bool:
        return self.write_delay is not None


@dataclass(frozen=True, slots=True)
class PendingWrite:
    """A deferred save armed for one binding."""

    name: str
    token: int
    delay: float
    handle: ScheduledCall

    def cancel(self) -> None:
        self.handle.cancel()
