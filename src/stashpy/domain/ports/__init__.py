"""Domain port definitions for adapters."""

from __future__ import annotations

from .scheduling import IdleScheduler, ScheduledCall

__all__ = ["IdleScheduler", "ScheduledCall"]
