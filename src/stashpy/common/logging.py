"""Logging setup for applications embedding stashpy."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from typing import TextIO

LOGGER_NAME: Final[str] = "stashpy"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT: Final[str] = "%H:%M:%S"


@dataclass(slots=True)
class _LoggingState:
    handler: logging.Handler | None = None


_STATE = _LoggingState()


def configure_logging(
    *,
    level: int = logging.INFO,
    stream: TextIO | None = None,
    force: bool = False,
) -> logging.Logger:
    """Attach one stream handler to the ``stashpy`` logger and set its level.

    The root logger is left alone. Repeated calls only adjust the level unless
    ``force`` is set, which swaps in a fresh handler writing to ``stream``.
    The library never calls this on import.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if _STATE.handler is not None and not force:
        return logger
    if _STATE.handler is not None:
        logger.removeHandler(_STATE.handler)
        _STATE.handler.close()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    _STATE.handler = handler
    return logger
