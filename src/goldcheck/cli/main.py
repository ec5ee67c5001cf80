"""CLI entry point for goldcheck."""
from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from goldcheck import __version__
from goldcheck.config import (
    HarnessConfig,
    create_builder,
    create_executor,
    default_config,
    find_config,
    load_config,
)
from goldcheck.core.errors import GoldcheckError
from goldcheck.core.harness import Harness
from goldcheck.reporting import JsonReporter, Reporter, ReportManager, TerminalReporter

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"goldcheck {__version__}")
    raise click.exceptions.Exit()


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--workdir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding the fixtures (defaults to the current directory).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file (defaults to goldcheck.yaml in the fixture directory).",
)
@click.option("--jobs", type=click.IntRange(min=1), help="Run fixtures on this many worker threads.")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    help="Per-fixture timeout in seconds.",
)
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path instead of stdout.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the goldcheck version and exit.",
)
def cli(
    workdir: Optional[Path],
    config_path: Optional[Path],
    jobs: Optional[int],
    timeout: Optional[float],
    report_format: str,
    report_path: Optional[str],
    no_color: bool,
    verbose: bool,
) -> None:
    """Build the executable, run it on every fixture and diff against golden files."""

    setup_logging(verbose)
    try:
        config = resolve_config(workdir, config_path, jobs=jobs, timeout=timeout)
        logger.debug("using config %s", config.source or "<defaults>")
        reporter: Reporter
        if report_format == "json":
            reporter = JsonReporter(report_path)
        else:
            reporter = TerminalReporter(use_color=not no_color)
        harness = Harness(
            create_builder(config.build),
            create_executor(config),
            reports=ReportManager([reporter]),
            suffixes=config.suffixes,
            timeout=config.timeout,
            jobs=config.jobs,
        )
        report = harness.run(config.workdir)
    except GoldcheckError as exc:
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(report.exit_code)


def resolve_config(
    workdir: Optional[Path],
    config_path: Optional[Path],
    *,
    jobs: Optional[int] = None,
    timeout: Optional[float] = None,
) -> HarnessConfig:
    """Combine the config file (explicit or discovered) with CLI overrides."""

    path = config_path or find_config(workdir or Path("."))
    config = load_config(path) if path else default_config(workdir or Path("."))
    overrides = {}
    if workdir is not None and path is not None:
        overrides["workdir"] = workdir.expanduser().resolve()
    if jobs is not None:
        overrides["jobs"] = jobs
    if timeout is not None:
        overrides["timeout"] = timeout
    return dataclasses.replace(config, **overrides) if overrides else config


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="goldcheck", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
