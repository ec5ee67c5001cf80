"""JSON reporter emitting structured run results."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
import time
from typing import Any, Dict, Optional, Sequence

import click
from jsonschema import validate

from goldcheck.core.errors import ReportError
from goldcheck.core.models import BuildResult, Fixture, FixtureResult, HarnessReport, RunStatus

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes results as JSON validated against the schema.

    Without a path the document goes to stdout.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self._path = pathlib.Path(path) if path else None
        self._label = ""
        self._diagnostics = ""
        self._records: list[Dict[str, Any]] = []
        self._start_time = 0.0

    def on_start(self, label: str, fixtures: Sequence[Fixture]) -> None:
        self._label = label
        self._diagnostics = ""
        self._records.clear()
        self._start_time = time.perf_counter()

    def on_build_failed(self, build: BuildResult, diagnostics: str) -> None:
        self._diagnostics = diagnostics

    def on_result(self, result: FixtureResult, index: int, total: int) -> None:
        self._records.append(_result_to_dict(result))

    def on_complete(self, report: HarnessReport) -> None:
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
            "verdict": report.verdict.value,
            "exit_code": report.exit_code,
            "build": self._build_to_dict(report.build),
            "summary": _build_summary(report, time.perf_counter() - self._start_time),
            "fixtures": self._records,
        }
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        text = json.dumps(payload, indent=2)
        if self._path is None:
            click.echo(text)
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ReportError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}", err=True)

    def _build_to_dict(self, build: Optional[BuildResult]) -> Dict[str, Any]:
        record: Dict[str, Any] = {"label": self._label, "ok": bool(build and build.ok)}
        if build is not None:
            record["returncode"] = build.returncode
            record["artifact"] = str(build.artifact) if build.artifact else None
        if self._diagnostics:
            record["diagnostics"] = self._diagnostics
        return record


def _build_summary(report: HarnessReport, duration: float) -> Dict[str, Any]:
    results = report.results
    return {
        "total": len(results),
        "passed": sum(1 for result in results if result.status is RunStatus.PASSED),
        "failed": sum(1 for result in results if result.status is RunStatus.FAILED),
        "timed_out": sum(1 for result in results if result.status is RunStatus.TIMED_OUT),
        "duration_s": duration,
    }


def _result_to_dict(result: FixtureResult) -> Dict[str, Any]:
    fixture = result.fixture
    return {
        "name": fixture.name,
        "status": result.status.value,
        "message": result.message,
        "returncode": result.returncode,
        "duration_ms": result.duration_s * 1000,
        "input": str(fixture.input_path),
        "expected": str(fixture.expected_path),
        "actual": str(fixture.actual_path),
    }
