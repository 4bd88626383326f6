from __future__ import annotations

"""Shell settings assembled from the environment and CLI overrides."""


import logging
from dataclasses import dataclass, replace
from typing import Optional

from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_str

DEFAULT_PROMPT = "% "
DEFAULT_MAX_LINE = 100
DEFAULT_EXEC_FAILURE_STATUS = 127
DEFAULT_LOG_LEVEL = "WARNING"

_VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class ShellSettings:
    prompt: str = DEFAULT_PROMPT
    max_line: int = DEFAULT_MAX_LINE
    exec_failure_status: int = DEFAULT_EXEC_FAILURE_STATUS
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    log_append: bool = False

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(**overrides) -> ShellSettings:
    """Build settings from ``MINISHELL_*`` variables, then apply non-``None`` overrides.

    Raises:
        ConfigurationError: If any value is malformed or out of range.
    """
    settings = ShellSettings(
        prompt=env_str("MINISHELL_PROMPT", or_value=DEFAULT_PROMPT, strip=False, allow_blank=True),
        max_line=env_int("MINISHELL_MAX_LINE", or_value=DEFAULT_MAX_LINE),
        exec_failure_status=env_int("MINISHELL_EXEC_FAILURE_STATUS", or_value=DEFAULT_EXEC_FAILURE_STATUS),
        log_level=env_str("MINISHELL_LOG_LEVEL", or_value=DEFAULT_LOG_LEVEL),
        log_file=env_str("MINISHELL_LOG_FILE"),
        log_append=bool(env_bool("MINISHELL_LOG_APPEND", or_value=False)),
    )

    applied = {key: value for key, value in overrides.items() if value is not None}
    if applied:
        try:
            settings = replace(settings, **applied)
        except TypeError as exc:
            raise ConfigurationError(f"Unknown setting override: {sorted(applied)}") from exc

    return validate_settings(settings)


def validate_settings(settings: ShellSettings) -> ShellSettings:
    if settings.max_line < 1:
        raise ConfigurationError.invalid_value("max_line", settings.max_line, "Must be at least 1")
    if not 1 <= settings.exec_failure_status <= 255:
        raise ConfigurationError.invalid_value(
            "exec_failure_status", settings.exec_failure_status, "Must be a nonzero exit status between 1 and 255"
        )

    level = settings.log_level.upper()
    if level not in _VALID_LOG_LEVELS:
        raise ConfigurationError.invalid_format("log_level", settings.log_level, f"one of {', '.join(_VALID_LOG_LEVELS)}")
    if level != settings.log_level:
        settings = replace(settings, log_level=level)
    return settings


__all__ = [
    "DEFAULT_EXEC_FAILURE_STATUS",
    "DEFAULT_MAX_LINE",
    "DEFAULT_PROMPT",
    "ShellSettings",
    "load_settings",
    "validate_settings",
]
