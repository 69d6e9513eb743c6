"""Centralized logging setup for emojify.

All emojify loggers are children of the ``emojify`` package logger. That
logger alone carries a handler: a QueueHandler feeding one background
QueueListener, which owns the rotating file handler and the optional
console handler. Console output goes to stderr because stdout carries
the translated stream.

Environment:
    EMOJIFY_LOG_LEVEL          DEBUG, INFO (default), WARNING, ERROR
    EMOJIFY_CONSOLE_LOGS       "1"/"true"/"yes" enables stderr output
    EMOJIFY_FILE_LOGS          file output, on unless falsy
    EMOJIFY_LOG_DIR            default ~/.emojify/logs
    EMOJIFY_LOG_FILE           default emojify.log
    EMOJIFY_LOG_MAX_BYTES      default 1 MiB
    EMOJIFY_LOG_BACKUP_COUNT   default 3
"""

import atexit
import logging
import os
import sys
import threading
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import SimpleQueue

PACKAGE_LOGGER = "emojify"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOCK = threading.Lock()
_listener: QueueListener | None = None


def _is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


def _file_handler() -> logging.Handler | None:
    logs_dir = Path(os.environ.get("EMOJIFY_LOG_DIR") or Path.home() / ".emojify" / "logs")
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            logs_dir / os.environ.get("EMOJIFY_LOG_FILE", "emojify.log"),
            maxBytes=_env_int("EMOJIFY_LOG_MAX_BYTES", 1024 * 1024),
            backupCount=_env_int("EMOJIFY_LOG_BACKUP_COUNT", 3),
        )
    except OSError:
        # Unwritable log dir: run without file logs
        return None


def _build_handlers(include_console: bool, include_file: bool) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if include_file:
        handler = _file_handler()
        if handler is not None:
            handlers.append(handler)
    if include_console:
        handlers.append(logging.StreamHandler(sys.stderr))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def shutdown_logging() -> None:
    """Stop the background listener and detach the package handler."""
    global _listener
    with _LOCK:
        if _listener is not None:
            _listener.stop()
            _listener = None
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)


def _configure_package_logger(log_level: int, include_console: bool, include_file: bool) -> logging.Logger:
    global _listener
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    with _LOCK:
        if package_logger.handlers:
            return package_logger

        package_logger.setLevel(log_level)
        # Keep library records out of the host application's root handlers
        package_logger.propagate = False

        handlers = _build_handlers(include_console, include_file)
        if not handlers:
            package_logger.addHandler(logging.NullHandler())
            return package_logger

        queue: SimpleQueue = SimpleQueue()
        _listener = QueueListener(queue, *handlers)
        _listener.start()
        atexit.register(shutdown_logging)
        package_logger.addHandler(QueueHandler(queue))
        return package_logger


def setup_logging(
    module_name: str,
    log_level: str | None = None,
    include_console: bool | None = None,
    include_file: bool | None = None,
) -> logging.Logger:
    """Setup standardized logging and return the logger for a module.

    The first call configures the ``emojify`` package logger; later calls
    only look up child loggers. An explicit ``log_level`` is applied to the
    returned logger itself.

    Args:
        module_name: Name of the module (usually __name__)
        log_level: Logging level name. If None, uses EMOJIFY_LOG_LEVEL.
        include_console: Whether to log to stderr. If None, uses
            EMOJIFY_CONSOLE_LOGS.
        include_file: Whether to log to the rotating file. If None, uses
            EMOJIFY_FILE_LOGS.

    Returns:
        Configured logger instance

    """
    level_name = log_level or os.environ.get("EMOJIFY_LOG_LEVEL", "INFO")
    level = getattr(logging, level_name.upper(), logging.INFO)
    if include_console is None:
        include_console = _is_truthy(os.environ.get("EMOJIFY_CONSOLE_LOGS"))
    if include_file is None:
        include_file = _is_truthy(os.environ.get("EMOJIFY_FILE_LOGS", "1"))

    package_logger = _configure_package_logger(level, include_console, include_file)
    if module_name == PACKAGE_LOGGER:
        return package_logger

    logger = logging.getLogger(module_name)
    if log_level is not None:
        logger.setLevel(level)
    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger for a module with default emojify settings."""
    return setup_logging(module_name)


__all__ = ["setup_logging", "get_logger", "shutdown_logging"]
