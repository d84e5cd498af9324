from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def stub_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "stubs"
    directory.mkdir()
    return directory


@pytest.fixture()
def write_stub(stub_dir: Path) -> Callable[[str, str], Path]:
    """Create ``<name>.stub`` inside :func:`stub_dir` with ``content``."""

    def _write(name: str, content: str) -> Path:
        path = stub_dir / f"{name}.stub"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
