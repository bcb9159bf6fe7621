"""Errors raised by the stash registry and store."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class StashError(RuntimeError):
    """Base class for stash failures."""


class UnknownBindingError(StashError, KeyError):
    """Raised when an operation names a binding that was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown stash binding: {name!r}")
        self.name = name

    def __str__(self) -> str:
        """Plain message, not the quoted key ``KeyError`` shows."""

        return str(self.args[0])


class PersistenceWriteError(StashError):
    """Raised when a stash value cannot be written to its file.

    The in-memory value stays valid; the write may be retried.
    """

    def __init__(self, name: str, path: Path, reason: str) -> None:
        super().__init__(f"Failed to save stash {name!r} to {path}: {reason}")
        self.name = name
        self.path = path


class DeserializationError(StashError):
    """Raised when a stash file exists but does not start with a well-formed document."""

    def __init__(self, name: str, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load stash {name!r} from {path}: {reason}")
        self.name = name
        self.path = path
