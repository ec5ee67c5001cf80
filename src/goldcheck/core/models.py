"""Core dataclasses shared across goldcheck subsystems."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, Tuple


DEFAULT_INPUT_SUFFIX = ".o"
DEFAULT_EXPECTED_SUFFIX = ".expected"
DEFAULT_ACTUAL_SUFFIX = ".student"

PASSED_MESSAGE = "passed"
MISMATCH_MESSAGE = "ERROR, outputs differ"
TIMEOUT_MESSAGE = "ERROR, timed out"


@dataclass(frozen=True)
class Suffixes:
    """File name suffixes tying a fixture to its golden and captured files."""

    input: str = DEFAULT_INPUT_SUFFIX
    expected: str = DEFAULT_EXPECTED_SUFFIX
    actual: str = DEFAULT_ACTUAL_SUFFIX


@dataclass(frozen=True)
class Fixture:
    """A named test case: one input file and its golden output."""

    name: str
    input_path: Path
    expected_path: Path
    actual_path: Path

    @classmethod
    def from_input(cls, input_path: Path, suffixes: Suffixes = Suffixes()) -> "Fixture":
        name = input_path.name[: -len(suffixes.input)] if suffixes.input else input_path.name
        parent = input_path.parent
        return cls(
            name=name,
            input_path=input_path,
            expected_path=parent / f"{name}{suffixes.expected}",
            actual_path=parent / f"{name}{suffixes.actual}",
        )


class RunStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class FixtureResult:
    """Outcome of running and comparing a single fixture."""

    fixture: Fixture
    status: RunStatus
    message: str
    returncode: Optional[int] = None
    duration_s: float = 0.0

    @property
    def passed(self) -> bool:
        return self.status is RunStatus.PASSED


@dataclass(frozen=True)
class BuildResult:
    """Outcome of the build step; ``artifact`` is only meaningful when ``ok``."""

    ok: bool
    artifact: Optional[Path] = None
    returncode: Optional[int] = None
    output: str = ""


class Verdict(str, Enum):
    ALL_PASSED = "all_passed"
    ANY_FAILED = "any_failed"
    BUILD_FAILED = "build_failed"

    @property
    def exit_code(self) -> int:
        return 0 if self is Verdict.ALL_PASSED else 1


@dataclass(frozen=True)
class HarnessReport:
    """Everything a full run produced, in fixture discovery order."""

    verdict: Verdict
    results: Sequence[FixtureResult] = field(default_factory=tuple)
    build: Optional[BuildResult] = None

    @property
    def exit_code(self) -> int:
        return self.verdict.exit_code

    def pairs(self) -> Tuple[Tuple[Fixture, FixtureResult], ...]:
        return tuple((result.fixture, result) for result in self.results)

    @classmethod
    def from_results(
        cls, results: Sequence[FixtureResult], build: Optional[BuildResult] = None
    ) -> "HarnessReport":
        failed = any(not result.passed for result in results)
        verdict = Verdict.ANY_FAILED if failed else Verdict.ALL_PASSED
        return cls(verdict=verdict, results=tuple(results), build=build)
