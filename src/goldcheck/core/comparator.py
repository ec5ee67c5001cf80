"""Byte-exact comparison of captured output against golden files."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .models import MISMATCH_MESSAGE, PASSED_MESSAGE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing one captured output with its golden file."""

    passed: bool
    message: str
    detail: Optional[str] = None


def compare_outputs(actual: bytes, expected_path: Path) -> ComparisonResult:
    """Compare ``actual`` with the contents of ``expected_path``.

    Any byte difference fails, trailing newlines included. A golden file that
    is missing or unreadable fails closed.
    """

    try:
        expected = Path(expected_path).read_bytes()
    except OSError as exc:
        logger.debug("Golden file %s unreadable: %s", expected_path, exc)
        return ComparisonResult(passed=False, message=MISMATCH_MESSAGE, detail=str(exc))
    if actual == expected:
        return ComparisonResult(passed=True, message=PASSED_MESSAGE)
    return ComparisonResult(
        passed=False,
        message=MISMATCH_MESSAGE,
        detail=f"{len(actual)} byte(s) captured, {len(expected)} byte(s) expected",
    )


def compare_files(actual_path: Path, expected_path: Path) -> ComparisonResult:
    """File-to-file variant of :func:`compare_outputs`."""

    try:
        actual = Path(actual_path).read_bytes()
    except OSError as exc:
        return ComparisonResult(passed=False, message=MISMATCH_MESSAGE, detail=str(exc))
    return compare_outputs(actual, expected_path)
