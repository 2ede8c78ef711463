"""
Logging configuration for requests-curl.

This module sets up a hierarchical logging structure:
- requests_curl (parent logger, internal diagnostics of the library)
- requests_curl.curl (the default sink for rendered cURL commands)

The curl logger is initialized lazily on first access. When a log folder was
configured it writes to curl_YYYY-MM-DD_HH-MM-SS.log, when logging was never
initialized it writes to standard output, otherwise it propagates to the
console handler installed by init_logging().
"""

import logging
import os
import sys
import threading
from datetime import datetime

ROOT_LOGGER_NAME = "requests_curl"
CURL_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.curl"
LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] [%(threadName)s] [%(filename)s:%(lineno)d]:  %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level flags for logging initialization and lazy child logger setup
_setup_lock = threading.Lock()
_loggers_initialized = False
_child_loggers_setup = set()
_child_handlers = {}
_log_folder = None
_log_timestamp = None


def init_logging(debug: bool = False, log_folder: str | None = None) -> None:
    """Configure console logging and optional log files.

    Console logging is only configured on the first call. A log folder passed
    to a later call is still picked up when none was set before. Child loggers
    that were already handed out get their handlers re-attached, so a curl
    logger created before settings were loaded writes to the log folder too.

    Args:
        debug: If True, set logging level to DEBUG, otherwise INFO
        log_folder: Directory for the curl log file, or None for console only
    """
    global _loggers_initialized, _log_timestamp

    with _setup_lock:
        if _loggers_initialized:
            if log_folder and _log_folder is None:
                _set_log_folder(log_folder)
                _reconfigure_child_loggers()
            return

        level = logging.DEBUG if debug else logging.INFO

        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        if log_folder:
            _set_log_folder(log_folder)

        # Store it globally for lazy child logger initialization
        _log_timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

        logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)

        _loggers_initialized = True
        _reconfigure_child_loggers()

        if debug:
            logging.getLogger(ROOT_LOGGER_NAME).debug(
                "Logging initialized with timestamp: %s", _log_timestamp
            )


def _set_log_folder(log_folder: str) -> None:
    global _log_folder

    if not os.path.exists(log_folder):
        os.makedirs(log_folder)
    _log_folder = log_folder


def _reconfigure_child_loggers() -> None:
    # Caller holds _setup_lock
    for logger_name in _child_loggers_setup:
        _configure_child_logger(logger_name)


def _ensure_child_logger_initialized(logger_name: str) -> None:
    """Lazily attach a handler to a child logger on first access.

    Args:
        logger_name: Full logger name (e.g., 'requests_curl.curl')
    """
    # Quick check without lock for performance
    if logger_name in _child_loggers_setup:
        return

    with _setup_lock:
        # Double-check after acquiring lock
        if logger_name in _child_loggers_setup:
            return

        _configure_child_logger(logger_name)
        _child_loggers_setup.add(logger_name)


def _configure_child_logger(logger_name: str) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.INFO)

    previous = _child_handlers.pop(logger_name, None)
    if previous is not None:
        logger.removeHandler(previous)
        previous.close()

    if _log_folder is not None:
        base_name = logger_name.rsplit(".", 1)[-1]
        log_path = os.path.join(_log_folder, f"{base_name}_{_log_timestamp}.log")
        _add_handler(logger, logging.FileHandler(log_path))
        logger.propagate = True
    elif not _loggers_initialized:
        _add_handler(logger, logging.StreamHandler(sys.stdout))
        logger.propagate = False
    else:
        logger.propagate = True


def _add_handler(logger: logging.Logger, handler: logging.Handler) -> None:
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    _child_handlers[logger.name] = handler


def get_logger(name: str) -> logging.Logger:
    """Get an internal diagnostics logger below the library's parent logger.

    Args:
        name: Module name (e.g., __name__); prefixed with 'requests_curl.' when needed

    Returns:
        Logger instance without handlers of its own
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def get_default_curl_logger() -> logging.Logger:
    """Get the logger that receives rendered cURL commands by default.

    Returns:
        Logger instance 'requests_curl.curl'
    """
    _ensure_child_logger_initialized(CURL_LOGGER_NAME)
    return logging.getLogger(CURL_LOGGER_NAME)


def get_curl_logger(name: str) -> logging.Logger:
    """Get a named child of the cURL command logger.

    Args:
        name: Name suffix for the logger (e.g., 'billing' -> 'requests_curl.curl.billing')

    Returns:
        Logger instance that propagates to the cURL command logger
    """
    _ensure_child_logger_initialized(CURL_LOGGER_NAME)
    return logging.getLogger(f"{CURL_LOGGER_NAME}.{name}")
