from __future__ import annotations

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError, validate

from goldcheck.core import ReportError
from goldcheck.core.models import (
    BuildResult,
    Fixture,
    FixtureResult,
    HarnessReport,
    RunStatus,
    Verdict,
)
from goldcheck.reporting import JsonReporter, ReportManager, TerminalReporter, format_line
from goldcheck.reporting.schema import JSON_SCHEMA_V1


def _result(name: str, status: RunStatus, message: str) -> FixtureResult:
    fixture = Fixture.from_input(Path("/fixtures") / f"{name}.o")
    return FixtureResult(fixture=fixture, status=status, message=message, returncode=0, duration_s=0.004)


def test_format_line_layout() -> None:
    assert format_line("a", "passed") == "a              passed"
    assert format_line("b", "ERROR, outputs differ") == "b          ERROR, outputs differ"
    assert format_line("very_long_name", "passed") == "very_long_name     passed"


def test_terminal_reporter_color_toggle(capsys) -> None:
    result = _result("a", RunStatus.FAILED, "ERROR, outputs differ")
    TerminalReporter(use_color=False).on_result(result, 1, 1)
    assert "\x1b[" not in capsys.readouterr().out


def test_terminal_reporter_banner_after_diagnostics(capsys) -> None:
    reporter = TerminalReporter(use_color=False)
    reporter.on_start("PA2", ())
    reporter.on_build_failed(BuildResult(ok=False, returncode=101), "error: aborting due to 2 previous errors")
    reporter.on_complete(HarnessReport(verdict=Verdict.BUILD_FAILED))
    assert capsys.readouterr().out.splitlines() == [
        "Building PA2:",
        "error: aborting due to 2 previous errors",
        "FAILED TO BUILD!!! ABORTING!!!",
    ]


def test_json_reporter_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "reports" / "run.json"
    results = [
        _result("a", RunStatus.PASSED, "passed"),
        _result("b", RunStatus.FAILED, "ERROR, outputs differ"),
        _result("c", RunStatus.TIMED_OUT, "ERROR, timed out"),
    ]
    reporter = JsonReporter(str(output_path))
    manager = ReportManager([reporter])
    manager.start("PA2", [result.fixture for result in results])
    for index, result in enumerate(results, start=1):
        manager.handle_result(result, index, len(results))
    manager.complete(HarnessReport.from_results(results, BuildResult(ok=True, artifact=Path("/t/vm"), returncode=0)))

    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["verdict"] == "any_failed"
    assert payload["exit_code"] == 1
    assert payload["generated_at"].endswith("Z")
    assert payload["build"] == {"label": "PA2", "ok": True, "returncode": 0, "artifact": "/t/vm"}
    assert payload["summary"]["total"] == 3
    assert payload["summary"]["passed"] == 1
    assert payload["summary"]["failed"] == 1
    assert payload["summary"]["timed_out"] == 1
    assert [record["name"] for record in payload["fixtures"]] == ["a", "b", "c"]
    assert payload["fixtures"][1]["actual"].endswith("b.student")


def test_json_reporter_build_failure_to_stdout(capsys) -> None:
    reporter = JsonReporter()
    reporter.on_start("PA2", ())
    reporter.on_build_failed(BuildResult(ok=False, returncode=101), "error[E0308]")
    reporter.on_complete(HarnessReport(verdict=Verdict.BUILD_FAILED, build=BuildResult(ok=False, returncode=101)))
    payload = json.loads(capsys.readouterr().out)
    assert payload["verdict"] == "build_failed"
    assert payload["fixtures"] == []
    assert payload["build"]["diagnostics"] == "error[E0308]"


def test_schema_rejects_unknown_status() -> None:
    payload = {
        "schema_version": "1.0.0",
        "generated_at": "2026-01-01T00:00:00Z",
        "verdict": "all_passed",
        "exit_code": 0,
        "build": {"label": "", "ok": True},
        "summary": {"total": 1, "passed": 1, "failed": 0, "timed_out": 0, "duration_s": 0.1},
        "fixtures": [
            {
                "name": "a",
                "status": "flaky",
                "message": "passed",
                "duration_ms": 1.0,
                "input": "a.o",
                "expected": "a.expected",
                "actual": "a.student",
            }
        ],
    }
    with pytest.raises(ValidationError):
        validate(instance=payload, schema=JSON_SCHEMA_V1)


def test_json_reporter_unwritable_path_raises_report_error(tmp_path: Path) -> None:
    blocker = tmp_path / "reports"
    blocker.write_text("not a directory", encoding="utf-8")
    reporter = JsonReporter(str(blocker / "run.json"))
    reporter.on_start("PA2", ())
    with pytest.raises(ReportError, match="Failed to write JSON report"):
        reporter.on_complete(HarnessReport(verdict=Verdict.ALL_PASSED))
