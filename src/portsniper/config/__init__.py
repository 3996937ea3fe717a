"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import (
    env_bool,
    env_float,
    env_seconds,
    env_str,
)
from .settings import PortSniperSettings, load_settings

__all__ = [
    "ConfigurationError",
    "PortSniperSettings",
    "env_bool",
    "env_float",
    "env_seconds",
    "env_str",
    "load_settings",
]
