"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_path_env

APP_DIR_NAME: Final[str] = "stashpy"
DATA_DIR_ENV_VAR: Final[str] = "STASHPY_DATA_DIR"
STASH_FILE_SUFFIX: Final[str] = ".json"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def stash_dir(self, subdirectory: str | Path | None = None, *, ensure: bool = True) -> Path:
        base = self.ensure_data_dir() if ensure else self.resolve_data_dir()
        if not subdirectory:
            return base
        directory = base / subdirectory
        if ensure:
            directory.mkdir(parents=True, exist_ok=True)
        return directory

    def stash_path(
        self,
        filename: str,
        subdirectory: str | Path | None = None,
        *,
        ensure: bool = True,
    ) -> Path:
        return self.stash_dir(subdirectory, ensure=ensure) / filename


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config() -> StorageConfig:
    env_dir = optional_path_env(DATA_DIR_ENV_VAR)
    data_dir = env_dir if env_dir is not None else _default_data_dir()
    return StorageConfig(data_dir=data_dir)
