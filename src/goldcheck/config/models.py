"""Data models for the harness configuration file."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Sequence

from goldcheck.builders import CommandSpec
from goldcheck.core.models import Suffixes


@dataclass(frozen=True)
class BuildConfig:
    workdir: Path
    label: str = ""
    preset: Optional[str] = "cargo"
    binary: str = "vm"
    clean: Optional[Sequence[CommandSpec]] = None
    command: Optional[CommandSpec] = None
    diagnose: Optional[CommandSpec] = None
    artifact: Optional[Path] = None
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RunConfig:
    args: Sequence[str] = field(default_factory=tuple)
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HarnessConfig:
    workdir: Path
    build: BuildConfig
    run: RunConfig = field(default_factory=RunConfig)
    suffixes: Suffixes = field(default_factory=Suffixes)
    timeout: Optional[float] = None
    jobs: int = 1
    source: Optional[Path] = None
