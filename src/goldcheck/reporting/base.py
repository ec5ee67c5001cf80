"""Reporter interface definitions."""
from __future__ import annotations

from typing import List, Sequence

from goldcheck.core.models import BuildResult, Fixture, FixtureResult, HarnessReport


class Reporter:
    """Interface for output renderers."""

    def on_start(self, label: str, fixtures: Sequence[Fixture]) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_build_failed(self, build: BuildResult, diagnostics: str) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_result(self, result: FixtureResult, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, report: HarnessReport) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager:
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def start(self, label: str, fixtures: Sequence[Fixture]) -> None:
        for reporter in self._reporters:
            reporter.on_start(label, fixtures)

    def build_failed(self, build: BuildResult, diagnostics: str) -> None:
        for reporter in self._reporters:
            reporter.on_build_failed(build, diagnostics)

    def handle_result(self, result: FixtureResult, index: int, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_result(result, index, total)

    def complete(self, report: HarnessReport) -> None:
        for reporter in self._reporters:
            reporter.on_complete(report)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
