"""JSON file codec for stash values.

Each stash file holds one JSON document written by full replacement. Reading
decodes only the first document and ignores whatever follows it, so files with
trailing whitespace, comments or stale data still load.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Final, cast

ENCODING: Final[str] = "utf-8"

_DECODER: Final[json.JSONDecoder] = json.JSONDecoder()
_LEADING_WHITESPACE: Final[str] = " \t\n\r\ufeff"


def dumps(value: object) -> str:
    """Serialise ``value`` in full; raises ``TypeError``/``ValueError`` if impossible.

    Mapping keys must be strings; any other key raises ``TypeError`` instead of
    being coerced.
    """

    _check_keys(value)
    return json.dumps(value, ensure_ascii=False, indent=2, allow_nan=False) + "\n"


def _check_keys(value: object) -> None:
    stack: list[object] = [value]
    seen: set[int] = set()
    while stack:
        item = stack.pop()
        if not isinstance(item, (dict, list, tuple)) or id(item) in seen:
            continue
        seen.add(id(item))
        if isinstance(item, dict):
            for key, child in cast("dict[object, object]", item).items():
                if not isinstance(key, str):
                    raise TypeError(f"Mapping keys must be str, not {type(key).__name__}")
                stack.append(child)
        else:
            stack.extend(cast("list[object] | tuple[object, ...]", item))


def loads_first(text: str) -> object:
    """Decode the first JSON document in ``text``.

    Raises ``json.JSONDecodeError`` when the leading content is not a complete
    document, including empty input.
    """

    start = len(text) - len(text.lstrip(_LEADING_WHITESPACE))
    value, _end = _DECODER.raw_decode(text, start)
    return value


def write_document(path: Path, value: object) -> None:
    """Replace ``path`` with the serialised ``value``.

    The payload is written to a sibling temporary file and moved into place, so
    an interrupted write never leaves a truncated document behind. The parent
    directory is not created.
    """

    payload = dumps(value)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding=ENCODING) as handle:
            handle.write(payload)
        Path(tmp_name).replace(path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def read_document(path: Path) -> object:
    """Return the first document stored at ``path``.

    ``OSError`` propagates for missing or unreadable files; ``UnicodeDecodeError``
    and ``json.JSONDecodeError`` for content that is not a document.
    """

    raw = path.read_bytes()
    return loads_first(raw.decode(ENCODING))
