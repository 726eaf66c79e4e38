"""Shared pytest fixtures for xpkg tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture()
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes ``xpkg.yaml`` under ``tmp_path``."""

    def _write(content: str) -> Path:
        path = tmp_path / "xpkg.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
