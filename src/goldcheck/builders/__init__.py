"""Builder exports."""
from .base import Builder, CommandSpec
from .command import CargoBuilder, CommandBuilder

__all__ = [
    "Builder",
    "CommandSpec",
    "CargoBuilder",
    "CommandBuilder",
]
