"""Environment loaders for configuration."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigurationError


def load_environment(dotenv_path: str | Path | None = None, *, override: bool = False) -> bool:
    """Populate ``os.environ`` from a ``.env`` file, returning whether one was read."""

    return load_dotenv(dotenv_path=dotenv_path, override=override)


def optional_path_env(name: str) -> Path | None:
    """Return the environment variable ``name`` as a path, or ``None`` when unset.

    Blank values are rejected rather than silently treated as the current directory.
    """

    value = os.getenv(name)
    if value is None:
        return None
    if not value.strip():
        raise ConfigurationError(f"Configuration value {name} is blank")
    return Path(value.strip())
