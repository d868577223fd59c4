from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_ini(tmp_path: Path) -> Callable[..., Path]:
    def _write(text: str, name: str = "config.ini", newline: str = "\n") -> Path:
        p = tmp_path / name
        p.write_bytes(text.replace("\n", newline).encode("utf-8"))
        return p

    return _write


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run with cwd and HOME inside tmp_path so no real config files are picked up."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path
