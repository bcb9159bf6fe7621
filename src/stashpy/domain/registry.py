"""Registry of stash bindings and their metadata."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from stashpy.domain.errors import UnknownBindingError
from stashpy.domain.model import StashAttributes

if TYPE_CHECKING:
    from collections.abc import Iterator


log = getLogger(__name__)


class Registry:
    """Side table mapping binding names to :class:`StashAttributes`.

    Relative files are resolved against ``base_dir`` at lookup time; bindings
    registered with an absolute path are unaffected by later base dir changes.
    """

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = base_dir
        self._bindings: dict[str, StashAttributes] = {}

    def register(
        self,
        name: str,
        file: str | Path,
        default: object = None,
        write_delay: float | None = None,
    ) -> str:
        if write_delay is not None and write_delay < 0:
            raise ValueError(f"write_delay must be non-negative, got {write_delay}")
        if name in self._bindings:
            log.debug("Re-registering stash %s", name)
        self._bindings[name] = StashAttributes(
            file=Path(file),
            default=default,
            write_delay=write_delay,
        )
        return name

    def attributes_of(self, name: str) -> StashAttributes:
        try:
            return self._bindings[name]
        except KeyError:
            raise UnknownBindingError(name) from None

    def resolved_file(self, name: str) -> Path:
        file = self.attributes_of(name).file
        if file.is_absolute():
            return file
        return self.base_dir / file

    def names(self) -> tuple[str, ...]:
        return tuple(self._bindings)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)
