from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

# A realistic first line plus padding so the header window is always full
LOG_BODY = "2024.03.07 00:00:01 Foo\n2024.03.07 00:00:02 Log        -  Bar\n"

MakeLog = Callable[..., Path]


@pytest.fixture
def watched_dir(tmp_path: Path) -> Path:
    path = tmp_path.joinpath("VRChat", "VRChat")
    path.mkdir(parents=True)
    return path


@pytest.fixture
def collection_root(tmp_path: Path) -> Path:
    return tmp_path.joinpath("KOBA789", "VRCLogUnrotate", "Logs")


@pytest.fixture
def make_log(watched_dir: Path) -> MakeLog:
    """Create a file in the watched directory with the given text or bytes."""

    def _make_log(name: str, content: str | bytes = LOG_BODY) -> Path:
        path = watched_dir.joinpath(name)
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _make_log
