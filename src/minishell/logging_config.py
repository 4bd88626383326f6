"""
Centralized logging configuration for the shell.

Console records go to stderr because stdout is shared with the programs the
shell launches. An optional log file receives the technical format; it is
truncated on each start unless appending is requested.
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Optional

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"

TECHNICAL_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TECHNICAL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # Best-effort cleanup operation
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_all_handlers(root_logger: logging.Logger) -> None:
    """Close existing root handlers and detach them."""
    _close_handlers(root_logger, "root")
    root_logger.handlers = []


def _build_console_handler(level: int) -> logging.Handler:
    if level <= logging.DEBUG:
        formatter = logging.Formatter(TECHNICAL_FORMAT, TECHNICAL_DATE_FORMAT)
    else:
        formatter = logging.Formatter("minishell: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    return console_handler


def _build_file_handler(log_file: str, level: int, append: bool) -> logging.Handler:
    log_path = Path(log_file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.WatchedFileHandler(log_path, mode="a" if append else "w")
    file_handler.setFormatter(logging.Formatter(TECHNICAL_FORMAT, TECHNICAL_DATE_FORMAT))
    file_handler.setLevel(min(level, logging.INFO))
    return file_handler


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None, *, append: bool = False) -> None:
    """Configure root logging for the shell.

    Raises:
        OSError: If the log file cannot be opened.
    """
    with _config_lock:
        root_logger = logging.getLogger()
        _reset_all_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(level))
        effective_level = level
        if log_file:
            file_handler = _build_file_handler(log_file, level, append)
            root_logger.addHandler(file_handler)
            effective_level = min(level, file_handler.level)

        root_logger.setLevel(effective_level)


__all__ = ["setup_logging"]
