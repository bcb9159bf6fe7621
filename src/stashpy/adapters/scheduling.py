"""Idle scheduler adapters."""

from __future__ import annotations

import asyncio
import threading
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


log = getLogger(__name__)


class AsyncioIdleScheduler:
    """Schedules callbacks on an asyncio event loop via ``loop.call_later``.

    Without an explicit loop the running loop is looked up on every call, so
    the scheduler must then be used from within a coroutine or loop callback.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class ThreadingIdleScheduler:
    """Schedules callbacks on daemon ``threading.Timer`` threads.

    Each call starts one timer; cancelling it before it fires prevents the
    callback. Used by the process-wide default store where no event loop is
    guaranteed.
    """

    def __init__(self, *, thread_name: str = "stashpy-save") -> None:
        self._thread_name = thread_name

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.name = self._thread_name
        timer.daemon = True
        timer.start()
        log.debug("Started %s timer for %.3fs", self._thread_name, delay)
        return timer
