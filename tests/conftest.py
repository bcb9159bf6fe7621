from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING

import pytest

from stashpy import app
from stashpy.config.storage import DATA_DIR_ENV_VAR
from stashpy.domain.registry import Registry
from stashpy.domain.store import DebouncedStore
from tests.support.scheduling import ManualScheduler

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "stashes"
    directory.mkdir()
    monkeypatch.setenv(DATA_DIR_ENV_VAR, str(directory))
    return directory


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def registry(data_dir: Path) -> Registry:
    return Registry(data_dir)


@pytest.fixture
def store(registry: Registry, scheduler: ManualScheduler) -> DebouncedStore:
    return DebouncedStore(registry, scheduler)


@pytest.fixture(autouse=True)
def _reset_default_store() -> Iterator[None]:
    yield
    app.shutdown(flush=False)
