"""Shared test doubles and file helpers."""
from __future__ import annotations

import stat
import sys
import textwrap
from pathlib import Path
from typing import Dict, Optional, Sequence

from goldcheck.builders import Builder
from goldcheck.core.models import BuildResult
from goldcheck.executors import Execution, Executor

ECHO_VM = """
import sys

with open(sys.argv[1], "rb") as handle:
    sys.stdout.buffer.write(handle.read())
"""


def write_script(path: Path, body: str) -> Path:
    """Write an executable Python script that runs under the current interpreter."""

    path.write_text(f"#!{sys.executable}\n" + textwrap.dedent(body), encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def write_fixture(workdir: Path, name: str, data: bytes, expected: Optional[bytes]) -> None:
    (workdir / f"{name}.o").write_bytes(data)
    if expected is not None:
        (workdir / f"{name}.expected").write_bytes(expected)


class FakeBuilder(Builder):
    """Builder double recording how often each step ran."""

    def __init__(self, artifact: Optional[Path] = None, *, ok: bool = True, diagnostics: str = "") -> None:
        self.label = "fake"
        self._artifact = artifact or Path("/opt/fake/vm")
        self._ok = ok
        self._diagnostics = diagnostics
        self.calls: Dict[str, int] = {"build": 0, "diagnose": 0}

    def build(self) -> BuildResult:
        self.calls["build"] += 1
        if not self._ok:
            return BuildResult(ok=False, returncode=101, output="error[E0308]: mismatched types")
        return BuildResult(ok=True, artifact=self._artifact, returncode=0)

    def diagnose(self) -> str:
        self.calls["diagnose"] += 1
        return self._diagnostics


class MappingExecutor(Executor):
    """Executor double returning canned stdout keyed by fixture file name."""

    def __init__(
        self,
        outputs: Dict[str, bytes],
        *,
        returncodes: Optional[Dict[str, int]] = None,
        timeouts: Sequence[str] = (),
    ) -> None:
        self._outputs = outputs
        self._returncodes = returncodes or {}
        self._timeouts = set(timeouts)
        self.seen: list[str] = []

    def execute(self, artifact: Path, input_path: Path, *, timeout: Optional[float] = None) -> Execution:
        self.seen.append(input_path.name)
        if input_path.name in self._timeouts:
            return Execution(stdout=b"partial", returncode=None, timed_out=True)
        return Execution(
            stdout=self._outputs.get(input_path.name, b""),
            returncode=self._returncodes.get(input_path.name, 0),
        )
