"""YAML loader and validation for the harness configuration file."""
from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from jsonschema import Draft7Validator

from goldcheck.builders import Builder, CargoBuilder, CommandBuilder, CommandSpec
from goldcheck.core.errors import ConfigError
from goldcheck.core.models import Suffixes
from goldcheck.executors import SubprocessExecutor

from .models import BuildConfig, HarnessConfig, RunConfig

DEFAULT_CONFIG_NAME = "goldcheck.yaml"
PRESETS = {"cargo"}


def default_config(workdir: str | Path = ".") -> HarnessConfig:
    """Cargo release build one directory above the fixtures, run as ``vm <fixture>``."""

    fixture_dir = Path(workdir).expanduser().resolve()
    return HarnessConfig(workdir=fixture_dir, build=BuildConfig(workdir=fixture_dir.parent))


def find_config(workdir: str | Path) -> Optional[Path]:
    candidate = Path(workdir) / DEFAULT_CONFIG_NAME
    return candidate if candidate.is_file() else None


def load_config(path: str | Path) -> HarnessConfig:
    """Load and validate a configuration file."""

    config_path = Path(path).expanduser().resolve()
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError("Config file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: [str(part) for part in e.path])
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ConfigError(f"Config schema validation failed: {messages}")
    base = config_path.parent
    workdir = _resolve_dir(raw.get("workdir"), base)
    suffixes = _parse_suffixes(raw.get("suffixes"))
    timeout = raw.get("timeout")
    return HarnessConfig(
        workdir=workdir,
        build=_parse_build(raw.get("build"), base, workdir),
        run=_parse_run(raw.get("run")),
        suffixes=suffixes,
        timeout=float(timeout) if timeout is not None else None,
        jobs=int(raw.get("jobs", 1)),
        source=config_path,
    )


def create_builder(config: BuildConfig) -> Builder:
    if config.command is not None:
        if config.artifact is None:
            raise ConfigError("build.artifact is required when build.command is set")
        return CommandBuilder(
            command=config.command,
            clean=config.clean or (),
            diagnose=config.diagnose,
            artifact=config.artifact,
            workdir=config.workdir,
            env=config.env,
            label=config.label,
        )
    if config.preset == "cargo":
        return CargoBuilder(
            binary=config.binary,
            workdir=config.workdir,
            env=config.env,
            label=config.label,
            clean=config.clean,
            diagnose=config.diagnose,
            artifact=config.artifact,
        )
    raise ConfigError(f"Unsupported build preset '{config.preset}'")


def create_executor(config: HarnessConfig) -> SubprocessExecutor:
    return SubprocessExecutor(args=config.run.args, env=config.run.env, workdir=config.workdir)


def _resolve_dir(raw: Any, base: Path) -> Path:
    if not raw:
        return base
    path = Path(str(raw)).expanduser()
    return (path if path.is_absolute() else base / path).resolve()


def _parse_suffixes(raw: Any) -> Suffixes:
    if not raw:
        return Suffixes()
    defaults = Suffixes()
    suffixes = Suffixes(
        input=str(raw.get("input", defaults.input)),
        expected=str(raw.get("expected", defaults.expected)),
        actual=str(raw.get("actual", defaults.actual)),
    )
    if len({suffixes.input, suffixes.expected, suffixes.actual}) != 3:
        raise ConfigError("suffixes.input, suffixes.expected and suffixes.actual must all differ")
    return suffixes


def _parse_build(raw: Any, base: Path, fixture_dir: Path) -> BuildConfig:
    if not raw:
        return BuildConfig(workdir=fixture_dir.parent)
    workdir = _resolve_dir(raw.get("workdir"), base) if "workdir" in raw else fixture_dir.parent
    command = _parse_single_command(raw["command"]) if raw.get("command") is not None else None
    diagnose = _parse_single_command(raw["diagnose"]) if raw.get("diagnose") is not None else None
    artifact = raw.get("artifact")
    return BuildConfig(
        workdir=workdir,
        label=str(raw.get("label", "")),
        preset=None if command is not None else str(raw.get("preset", "cargo")),
        binary=str(raw.get("binary", "vm")),
        clean=_parse_commands(raw["clean"]) if raw.get("clean") is not None else None,
        command=command,
        diagnose=diagnose,
        artifact=Path(str(artifact)) if artifact else None,
        env=_parse_env(raw.get("env")),
    )


def _parse_run(raw: Any) -> RunConfig:
    if not raw:
        return RunConfig()
    args = raw.get("args") or []
    if isinstance(args, str):
        args = shlex.split(args)
    return RunConfig(args=tuple(str(arg) for arg in args), env=_parse_env(raw.get("env")))


def _parse_env(raw: Any) -> Dict[str, str]:
    return {str(k): str(v) for k, v in (raw or {}).items()}


def _parse_single_command(raw: Any) -> CommandSpec:
    return CommandSpec(argv=_normalize_command(raw))


def _parse_commands(raw: Any) -> tuple[CommandSpec, ...]:
    if raw is None:
        return tuple()
    entries = raw if isinstance(raw, list) else [raw]
    return tuple(CommandSpec(argv=_normalize_command(entry)) for entry in entries)


def _normalize_command(raw: Any) -> tuple[str, ...]:
    if isinstance(raw, (str, Path)):
        argv = tuple(shlex.split(str(raw)))
    elif isinstance(raw, Mapping):
        executable = raw.get("binary") or raw.get("executable")
        if not executable:
            raise ConfigError("command mapping requires 'binary' or 'executable'")
        args = raw.get("args", [])
        if isinstance(args, (str, Path)):
            args_list = [str(args)]
        elif isinstance(args, list):
            args_list = [str(part) for part in args]
        else:
            raise ConfigError("command args must be list or string")
        argv = tuple([str(executable)] + args_list)
    elif isinstance(raw, (list, tuple)):
        argv = tuple(str(part) for part in raw)
    else:
        raise ConfigError("command must be string, list, or mapping")
    if not argv:
        raise ConfigError("command cannot be empty")
    return argv


_COMMAND = {"type": ["string", "array", "object"]}

CONFIG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "workdir": {"type": "string"},
        "suffixes": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "input": {"type": "string", "minLength": 1},
                "expected": {"type": "string", "minLength": 1},
                "actual": {"type": "string", "minLength": 1},
            },
        },
        "timeout": {"type": ["number", "null"], "exclusiveMinimum": 0},
        "jobs": {"type": "integer", "minimum": 1},
        "build": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "label": {"type": "string"},
                "workdir": {"type": "string"},
                "preset": {"type": "string", "enum": sorted(PRESETS)},
                "binary": {"type": "string", "minLength": 1},
                "clean": {"type": ["string", "array", "object", "null"]},
                "command": _COMMAND,
                "diagnose": _COMMAND,
                "artifact": {"type": "string"},
                "env": {"type": "object"},
            },
        },
        "run": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "args": {"type": ["string", "array"]},
                "env": {"type": "object"},
            },
        },
    },
}
_validator = Draft7Validator(CONFIG_SCHEMA)
