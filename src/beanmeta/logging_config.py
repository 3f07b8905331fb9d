"""
Centralized logging configuration for processes embedding beanmeta.

This module provides a single setup_logging function that configures
the root logger with:
- Console output at a configurable level (BEANMETA_LOG_LEVEL)
- Optional file output to {log_dir}/{service_name}.log
- Fresh log file on each start unless BEANMETA_LOG_APPEND is set
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Optional

from beanmeta.config import ConfigurationError, env_bool, env_str

LOG_LEVEL_ENV = "BEANMETA_LOG_LEVEL"
LOG_APPEND_ENV = "BEANMETA_LOG_APPEND"

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"
_TECHNICAL_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[str]) -> int:
    raw = level if level is not None else env_str(LOG_LEVEL_ENV, or_value="INFO")
    resolved = logging.getLevelName(str(raw).upper())
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_value(LOG_LEVEL_ENV, raw, "Expected a standard logging level name")
    return resolved


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _build_console_handler(level: int) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    console_handler.setLevel(level)
    return console_handler


def _configure_file_handler(service_name: Optional[str], log_dir: Optional[Path]) -> Optional[logging.Handler]:
    if not service_name or log_dir is None:
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{service_name}.log"
    file_mode = "a" if env_bool(LOG_APPEND_ENV, or_value=False) else "w"

    handler_cls = getattr(logging.handlers, "WatchedFileHandler", logging.FileHandler)
    file_handler = handler_cls(log_path, mode=file_mode)
    file_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.DEBUG)
    return file_handler


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("redis").setLevel(logging.WARNING)
    logging.getLogger("redis.connection").setLevel(logging.WARNING)


def setup_logging(
    service_name: Optional[str] = None,
    *,
    log_dir: Optional[Path] = None,
    level: Optional[str] = None,
) -> None:
    """Configure root logging for the application.

    Existing root handlers are closed and replaced, so calling this twice
    leaves exactly one console handler (plus the file handler when
    ``service_name`` and ``log_dir`` are both given).
    """

    resolved_level = _resolve_level(level)

    with _config_lock:
        root_logger = logging.getLogger()
        _close_handlers(root_logger)
        root_logger.handlers = []

        root_logger.addHandler(_build_console_handler(resolved_level))

        file_handler = _configure_file_handler(service_name, log_dir)
        if file_handler:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(min(resolved_level, logging.DEBUG) if file_handler else resolved_level)
        _suppress_noisy_third_parties()


__all__ = ["setup_logging"]
