"""Adapters for stash file storage and scheduling."""

from __future__ import annotations

from .scheduling import AsyncioIdleScheduler, ThreadingIdleScheduler

__all__ = ["AsyncioIdleScheduler", "ThreadingIdleScheduler"]
