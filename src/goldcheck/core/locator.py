"""Fixture discovery in a working directory."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from .errors import FixtureDiscoveryError
from .models import Fixture, Suffixes

logger = logging.getLogger(__name__)


def discover_fixtures(workdir: Path, suffixes: Suffixes = Suffixes()) -> Tuple[Fixture, ...]:
    """Return the fixtures in ``workdir`` whose input file ends in ``suffixes.input``.

    The listing is not recursive and the result is sorted by fixture name so
    reports are stable between runs.
    """

    directory = Path(workdir)
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise FixtureDiscoveryError(f"Cannot list fixture directory {directory}: {exc}") from exc
    fixtures = [
        Fixture.from_input(entry, suffixes)
        for entry in entries
        if entry.name.endswith(suffixes.input) and entry.name != suffixes.input and entry.is_file()
    ]
    fixtures.sort(key=lambda fixture: fixture.name)
    logger.debug("Discovered %d fixture(s) in %s", len(fixtures), directory)
    return tuple(fixtures)
