"""
Logging configuration for the portsniper command.

Status lines meant for the user are printed directly; logging carries the
diagnostic trail:
- Console output on stderr (WARNING, or DEBUG when verbose)
- Optional file output when a log file is configured
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

_TECHNICAL_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_all_handlers(root_logger: logging.Logger) -> None:
    _close_handlers(root_logger)
    root_logger.handlers = []


def _build_console_handler(verbose: bool) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return console_handler


def _configure_file_handler(log_file: Optional[str]) -> Optional[logging.Handler]:
    if not log_file:
        return None

    log_path = Path(log_file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler_cls = getattr(logging.handlers, "WatchedFileHandler", logging.FileHandler)
    file_handler = handler_cls(log_path, mode="a")
    file_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.INFO)
    return file_handler


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure the root logger for one portsniper run."""

    with _config_lock:
        root_logger = logging.getLogger()
        _reset_all_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(verbose))

        file_handler = _configure_file_handler(log_file)
        if file_handler:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
