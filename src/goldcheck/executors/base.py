"""Executor abstractions for running the artifact against one fixture."""
from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Execution:
    """Captured result of one run of the executable under test."""

    stdout: bytes
    returncode: Optional[int]
    timed_out: bool = False


class Executor:
    """Base interface for executors."""

    def execute(self, artifact: Path, input_path: Path, *, timeout: Optional[float] = None) -> Execution:
        raise NotImplementedError


class SubprocessExecutor(Executor):
    """Runs ``<artifact> <input> [args...]`` and captures standard output as bytes.

    Standard error is left attached to the console.
    """

    def __init__(
        self,
        *,
        args: Sequence[str] = (),
        env: Optional[Mapping[str, str]] = None,
        workdir: Optional[Path] = None,
    ) -> None:
        self.args = tuple(args)
        self.env: Dict[str, str] = dict(env or {})
        self.workdir = workdir

    def argv(self, artifact: Path, input_path: Path) -> list[str]:
        return [str(artifact), str(input_path), *self.args]

    def execute(self, artifact: Path, input_path: Path, *, timeout: Optional[float] = None) -> Execution:
        argv = self.argv(artifact, input_path)
        env = os.environ.copy()
        env.update(self.env)
        logger.debug("executing %s", " ".join(argv))
        try:
            proc = subprocess.run(
                argv,
                cwd=str(self.workdir) if self.workdir else None,
                env=env,
                stdout=subprocess.PIPE,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as exc:
            logger.debug("%s timed out after %ss", input_path, timeout)
            return Execution(stdout=exc.stdout or b"", returncode=None, timed_out=True)
        except OSError as exc:
            logger.debug("cannot execute %s: %s", artifact, exc)
            return Execution(stdout=b"", returncode=None)
        return Execution(stdout=proc.stdout or b"", returncode=proc.returncode)
