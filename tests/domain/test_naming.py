from __future__ import annotations

import pytest

from stashpy.domain.naming import sanitize_name, stash_filename


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("counter", "counter"),
        ("recent files", "recent-files"),
        ("ui/recent*files?", "ui-recent-files"),
        ("../../etc/passwd", "etc-passwd"),
        ("my.app_state-v2", "my.app_state-v2"),
        ("  padded  ", "padded"),
    ],
)
def test_sanitize_name(name: str, expected: str) -> None:
    assert sanitize_name(name) == expected


@pytest.mark.parametrize("name", ["", "///", "..", "✓✓"])
def test_sanitize_name_rejects_names_without_safe_characters(name: str) -> None:
    with pytest.raises(ValueError, match="filesystem-safe"):
        sanitize_name(name)


def test_stash_filename_appends_suffix() -> None:
    assert stash_filename("recent files") == "recent-files.json"
    assert stash_filename("notes", suffix=".stash") == "notes.stash"
