"""Exception hierarchy for fatal harness errors."""
from __future__ import annotations


class GoldcheckError(Exception):
    """Base class for errors that abort a whole run."""


class FixtureDiscoveryError(GoldcheckError):
    """The fixture directory could not be listed."""


class ConfigError(GoldcheckError):
    """The configuration file is missing, malformed or fails validation."""


class BuildError(GoldcheckError):
    """A build command could not be started at all."""


class ReportError(GoldcheckError):
    """A report could not be written to its destination."""
