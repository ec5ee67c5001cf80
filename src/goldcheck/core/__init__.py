"""Core models and helpers exposed at the package level."""
from .comparator import ComparisonResult, compare_files, compare_outputs
from .errors import BuildError, ConfigError, FixtureDiscoveryError, GoldcheckError, ReportError
from .locator import discover_fixtures
from .models import (
    BuildResult,
    Fixture,
    FixtureResult,
    HarnessReport,
    RunStatus,
    Suffixes,
    Verdict,
)

__all__ = [
    "BuildError",
    "BuildResult",
    "ComparisonResult",
    "ConfigError",
    "Fixture",
    "FixtureDiscoveryError",
    "FixtureResult",
    "GoldcheckError",
    "HarnessReport",
    "ReportError",
    "RunStatus",
    "Suffixes",
    "Verdict",
    "compare_files",
    "compare_outputs",
    "discover_fixtures",
]
