from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest

from helpers import ECHO_VM, write_fixture, write_script


@pytest.fixture
def echo_vm(tmp_path: Path) -> Path:
    """Executable that copies its input file to stdout."""

    bindir = tmp_path / "bin"
    bindir.mkdir()
    return write_script(bindir / "vm", ECHO_VM)


@pytest.fixture
def fixture_dir(tmp_path: Path) -> Path:
    workdir = tmp_path / "tests"
    workdir.mkdir()
    return workdir


@pytest.fixture
def make_fixture(fixture_dir: Path) -> Callable[[str, bytes, Optional[bytes]], None]:
    def _make(name: str, data: bytes, expected: Optional[bytes]) -> None:
        write_fixture(fixture_dir, name, data, expected)

    return _make
