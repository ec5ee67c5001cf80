"""Terminal reporter printing one fixed-width line per fixture."""
from __future__ import annotations

from typing import Sequence

import click
from colorama import Fore, Style, init as colorama_init

from goldcheck.core.models import BuildResult, Fixture, FixtureResult, HarnessReport, RunStatus

from .base import Reporter

BUILD_FAILED_BANNER = "FAILED TO BUILD!!! ABORTING!!!"

STATUS_COLORS = {
    RunStatus.PASSED: Fore.GREEN,
    RunStatus.FAILED: Fore.RED,
    RunStatus.TIMED_OUT: Fore.YELLOW,
}


def format_line(name: str, message: str) -> str:
    return f"{name:<10} {message:>10}"


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color
        if use_color:
            colorama_init()

    def on_start(self, label: str, fixtures: Sequence[Fixture]) -> None:
        click.echo(f"Building {label}:" if label else "Building:")

    def on_build_failed(self, build: BuildResult, diagnostics: str) -> None:
        if diagnostics:
            click.echo(diagnostics, nl=not diagnostics.endswith("\n"))
        click.echo(self._styled(BUILD_FAILED_BANNER, Fore.RED))

    def on_result(self, result: FixtureResult, index: int, total: int) -> None:
        line = format_line(result.fixture.name, result.message)
        click.echo(self._styled(line, STATUS_COLORS.get(result.status, "")))

    def on_complete(self, report: HarnessReport) -> None:
        pass

    def _styled(self, text: str, color: str) -> str:
        if not self._use_color or not color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"
