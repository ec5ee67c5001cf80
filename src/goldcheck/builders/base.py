"""Builder abstractions."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Sequence

from goldcheck.core.models import BuildResult


@dataclass(frozen=True)
class CommandSpec:
    argv: Sequence[str]
    env: Mapping[str, str] = field(default_factory=dict)

    def display(self) -> str:
        return " ".join(self.argv)


class Builder:
    """Base interface for the step that produces the executable under test."""

    label: str = ""

    def build(self) -> BuildResult:
        raise NotImplementedError

    def diagnose(self) -> str:
        """Rerun the build in a mode that surfaces human-readable errors."""

        return ""

    def artifact(self) -> Optional[Path]:
        return None
