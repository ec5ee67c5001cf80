"""Configuration loading for the harness."""

from .loader import (
    DEFAULT_CONFIG_NAME,
    create_builder,
    create_executor,
    default_config,
    find_config,
    load_config,
)
from .models import BuildConfig, HarnessConfig, RunConfig

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "BuildConfig",
    "HarnessConfig",
    "RunConfig",
    "create_builder",
    "create_executor",
    "default_config",
    "find_config",
    "load_config",
]
