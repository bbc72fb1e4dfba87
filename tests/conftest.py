from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Build a project tree from relative file paths and optional pubspec text."""

    def _make(files: list[str], pubspec: str | None = None) -> Path:
        for rel in files:
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"")
        if pubspec is not None:
            (tmp_path / "pubspec.yaml").write_text(pubspec, encoding="utf-8")
        return tmp_path

    return _make
