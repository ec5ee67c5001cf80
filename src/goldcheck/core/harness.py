"""Build-run-compare loop over the fixtures of a working directory."""
from __future__ import annotations

import functools
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from goldcheck.builders import Builder
from goldcheck.executors import Executor
from goldcheck.reporting import ReportManager

from .comparator import compare_files
from .errors import BuildError
from .locator import discover_fixtures
from .models import (
    MISMATCH_MESSAGE,
    TIMEOUT_MESSAGE,
    BuildResult,
    Fixture,
    FixtureResult,
    HarnessReport,
    RunStatus,
    Suffixes,
    Verdict,
)

logger = logging.getLogger(__name__)


class Harness:
    """Builds the artifact once, then runs and checks every fixture.

    A failed build ends the run before any fixture executes. Fixture failures
    are isolated: each one is recorded and the next fixture still runs.
    """

    def __init__(
        self,
        builder: Builder,
        executor: Executor,
        *,
        reports: Optional[ReportManager] = None,
        suffixes: Suffixes = Suffixes(),
        timeout: Optional[float] = None,
        jobs: int = 1,
    ) -> None:
        if jobs < 1:
            raise ValueError("jobs must be at least 1")
        self._builder = builder
        self._executor = executor
        self._reports = reports or ReportManager([])
        self._suffixes = suffixes
        self._timeout = timeout
        self._jobs = jobs

    def run(self, workdir: Path) -> HarnessReport:
        fixtures = discover_fixtures(workdir, self._suffixes)
        return self.run_fixtures(fixtures)

    def run_fixtures(self, fixtures: Sequence[Fixture]) -> HarnessReport:
        self._reports.start(self._builder.label, fixtures)
        build = self._build()
        if not build.ok or build.artifact is None:
            diagnostics = self._diagnose()
            self._reports.build_failed(build, diagnostics)
            report = HarnessReport(verdict=Verdict.BUILD_FAILED, build=build)
            self._reports.complete(report)
            return report

        artifact = build.artifact
        total = len(fixtures)
        results: List[FixtureResult] = []
        for index, result in enumerate(self._execute_all(artifact, fixtures), start=1):
            results.append(result)
            self._reports.handle_result(result, index, total)
        report = HarnessReport.from_results(results, build)
        self._reports.complete(report)
        return report

    def _build(self) -> BuildResult:
        try:
            return self._builder.build()
        except BuildError as exc:
            logger.debug("build could not start: %s", exc)
            return BuildResult(ok=False, output=str(exc))

    def _diagnose(self) -> str:
        try:
            return self._builder.diagnose()
        except BuildError as exc:
            return str(exc)

    def _execute_all(self, artifact: Path, fixtures: Sequence[Fixture]) -> Iterable[FixtureResult]:
        execute = functools.partial(self.execute_fixture, artifact)
        if self._jobs == 1 or len(fixtures) < 2:
            return map(execute, fixtures)
        pool = ThreadPoolExecutor(max_workers=self._jobs)
        # map() yields in submission order regardless of completion order
        return _shutdown_after(pool, pool.map(execute, fixtures))

    def execute_fixture(self, artifact: Path, fixture: Fixture) -> FixtureResult:
        start = time.perf_counter()
        execution = self._executor.execute(artifact, fixture.input_path, timeout=self._timeout)
        try:
            fixture.actual_path.write_bytes(execution.stdout)
        except OSError as exc:
            logger.debug("cannot write %s: %s", fixture.actual_path, exc)
            return FixtureResult(
                fixture=fixture,
                status=RunStatus.FAILED,
                message=MISMATCH_MESSAGE,
                returncode=execution.returncode,
                duration_s=time.perf_counter() - start,
            )
        if execution.timed_out:
            return FixtureResult(
                fixture=fixture,
                status=RunStatus.TIMED_OUT,
                message=TIMEOUT_MESSAGE,
                duration_s=time.perf_counter() - start,
            )
        comparison = compare_files(fixture.actual_path, fixture.expected_path)
        if comparison.detail:
            logger.debug("%s: %s", fixture.name, comparison.detail)
        return FixtureResult(
            fixture=fixture,
            status=RunStatus.PASSED if comparison.passed else RunStatus.FAILED,
            message=comparison.message,
            returncode=execution.returncode,
            duration_s=time.perf_counter() - start,
        )


def _shutdown_after(pool: ThreadPoolExecutor, results: Iterable[FixtureResult]) -> Iterable[FixtureResult]:
    with pool:
        yield from results
