"""Builder that shells out to user-provided build commands."""
from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from goldcheck.core.errors import BuildError
from goldcheck.core.models import BuildResult

from .base import Builder, CommandSpec

logger = logging.getLogger(__name__)


class CommandBuilder(Builder):
    """Cleans, builds and, on demand, diagnoses via external commands.

    Success is decided by the build command's exit status alone; its output is
    captured but never inspected.
    """

    def __init__(
        self,
        *,
        command: CommandSpec,
        artifact: Path,
        clean: Sequence[CommandSpec] = (),
        diagnose: Optional[CommandSpec] = None,
        workdir: Path = Path("."),
        env: Optional[Mapping[str, str]] = None,
        label: str = "",
    ) -> None:
        self.command = command
        self.clean_commands = tuple(clean)
        self.diagnose_command = diagnose
        self.workdir = Path(workdir)
        self.env: Dict[str, str] = dict(env or {})
        self.label = label or self.workdir.resolve().name
        self._artifact = Path(artifact)

    def artifact(self) -> Path:
        if self._artifact.is_absolute():
            return self._artifact
        return (self.workdir / self._artifact).resolve()

    def build(self) -> BuildResult:
        for spec in self.clean_commands:
            proc = self._run(spec)
            if proc.returncode != 0:
                logger.debug("clean command '%s' exited %s, continuing", spec.display(), proc.returncode)
        proc = self._run(self.command)
        output = (proc.stdout or "") + (proc.stderr or "")
        if proc.returncode != 0:
            logger.debug("build command '%s' failed (code %s)", self.command.display(), proc.returncode)
            return BuildResult(ok=False, returncode=proc.returncode, output=output)
        return BuildResult(ok=True, artifact=self.artifact(), returncode=0, output=output)

    def diagnose(self) -> str:
        spec = self.diagnose_command or self.command
        proc = self._run(spec)
        return (proc.stdout or "") + (proc.stderr or "")

    def _run(self, spec: CommandSpec) -> subprocess.CompletedProcess:
        env = os.environ.copy()
        env.update(self.env)
        env.update(spec.env)
        logger.debug("running '%s' in %s", spec.display(), self.workdir)
        try:
            return subprocess.run(
                list(spec.argv),
                cwd=str(self.workdir),
                env=env,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            raise BuildError(f"Cannot run build command '{spec.display()}': {exc}") from exc


class CargoBuilder(CommandBuilder):
    """Release build of a cargo project; the artifact is ``target/release/<binary>``."""

    def __init__(
        self,
        *,
        binary: str = "vm",
        workdir: Path = Path(".."),
        env: Optional[Mapping[str, str]] = None,
        label: str = "",
        clean: Optional[Sequence[CommandSpec]] = None,
        diagnose: Optional[CommandSpec] = None,
        artifact: Optional[Path] = None,
    ) -> None:
        super().__init__(
            clean=(CommandSpec(argv=("cargo", "clean")),) if clean is None else clean,
            command=CommandSpec(argv=("cargo", "build", "--release")),
            diagnose=diagnose or CommandSpec(argv=("cargo", "check", "--release")),
            artifact=artifact or Path("target") / "release" / binary,
            workdir=workdir,
            env=env,
            label=label,
        )
