"""Filesystem-safe file names for stash bindings."""

from __future__ import annotations

import re
from typing import Final

from stashpy.config.storage import STASH_FILE_SUFFIX

_UNSAFE_RUN: Final[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9._-]+")


def sanitize_name(name: str) -> str:
    """Collapse characters outside ``[A-Za-z0-9._-]`` into single dashes.

    >>> sanitize_name("ui/recent files")
    'ui-recent-files'
    """

    cleaned = _UNSAFE_RUN.sub("-", name).strip("-.")
    if not cleaned:
        raise ValueError(f"Stash name {name!r} has no filesystem-safe characters")
    return cleaned


def stash_filename(name: str, *, suffix: str = STASH_FILE_SUFFIX) -> str:
    return f"{sanitize_name(name)}{suffix}"
