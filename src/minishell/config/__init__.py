"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_str, reset_default_values
from .settings import ShellSettings, load_settings

__all__ = [
    "ConfigurationError",
    "ShellSettings",
    "env_bool",
    "env_int",
    "env_str",
    "load_settings",
    "reset_default_values",
]
