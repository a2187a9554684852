"""Configuration defaults, validation and loading for the analytics core."""

from .defaults import AnalyticsConfig, get_default_config
from .loader import ConfigLoader, build_config, resolve_config

__all__ = [
    "AnalyticsConfig",
    "ConfigLoader",
    "build_config",
    "get_default_config",
    "resolve_config",
]
