"""Application configuration helpers."""

from __future__ import annotations

from .env import load_environment, optional_path_env
from .errors import ConfigurationError
from .storage import (
    APP_DIR_NAME,
    DATA_DIR_ENV_VAR,
    STASH_FILE_SUFFIX,
    StorageConfig,
    get_storage_config,
)

__all__ = [
    "APP_DIR_NAME",
    "DATA_DIR_ENV_VAR",
    "STASH_FILE_SUFFIX",
    "ConfigurationError",
    "StorageConfig",
    "get_storage_config",
    "load_environment",
    "optional_path_env",
]
