from __future__ import annotations

import os
from pathlib import Path

import pytest

from filesplit.config import get_settings


def pattern_bytes(size: int) -> bytes:
    """Bytes whose 1000-byte windows all differ from each other."""
    return bytes(i % 251 for i in range(size))


@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from an empty directory with default settings."""
    for key in list(os.environ):
        if key.startswith("FILESPLIT_"):
            monkeypatch.delenv(key)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    get_settings.cache_clear()
    yield workdir
    get_settings.cache_clear()


@pytest.fixture
def make_file(tmp_path: Path):
    def _make(name: str, size: int) -> Path:
        path = tmp_path / name
        path.write_bytes(pattern_bytes(size))
        return path

    return _make
