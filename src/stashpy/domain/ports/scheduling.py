"""Port for the idle-timer primitive used by debounced saves."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable


@runtime_checkable
class ScheduledCall(Protocol):
    """Handle of a callback scheduled by an :class:`IdleScheduler`."""

    def cancel(self) -> None: ...


@runtime_checkable
class IdleScheduler(Protocol):
    """Runs a callback once after ``delay`` seconds unless the handle is cancelled."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall: ...
