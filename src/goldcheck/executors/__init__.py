"""Executor interface exports."""
from .base import Execution, Executor, SubprocessExecutor

__all__ = [
    "Execution",
    "Executor",
    "SubprocessExecutor",
]
