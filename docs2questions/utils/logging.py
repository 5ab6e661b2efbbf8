"""Logging utilities for docs2questions.

This module provides centralized logging configuration so every stage of the
document-to-questions pipeline logs under the ``docs2questions`` namespace.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Iterable

ROOT_LOGGER_NAME = "docs2questions"

# Default format always includes filename and line number
LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
)

DEFAULT_LOG_FILE = "./logs/docs2questions.log"
DEFAULT_MAX_BYTES = 10485760  # 10MB
DEFAULT_BACKUP_COUNT = 5

# pdfminer logs every content stream operator at DEBUG
NOISY_LOGGERS = ["pdfminer", "pdfplumber", "PIL"]


def _as_level(level: int | str, fallback: int = logging.INFO) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    if isinstance(level, int):
        return level
    return fallback


def _as_int(value: Any, fallback: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def _install_handlers(
    level: int, file_handler: logging.Handler
) -> logging.Logger:
    """Reset the package logger and attach console and file handlers."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    return root_logger


def _rotating_handler_from_config(config: Any) -> logging.Handler:
    log_file_path = config.get("logging.file.path", DEFAULT_LOG_FILE)
    if not isinstance(log_file_path, (str, Path)):
        log_file_path = DEFAULT_LOG_FILE
    max_bytes = _as_int(
        config.get("logging.file.max_bytes", DEFAULT_MAX_BYTES), DEFAULT_MAX_BYTES
    )
    backup_count = _as_int(
        config.get("logging.file.backup_count", DEFAULT_BACKUP_COUNT),
        DEFAULT_BACKUP_COUNT,
    )

    log_path = Path(log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    return logging.handlers.RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count
    )


def _configure_third_party_from_config(config: Any) -> None:
    level = _as_level(config.get("logging.third_party.level", "WARNING"), logging.WARNING)
    loggers = config.get("logging.third_party.loggers", NOISY_LOGGERS)
    if not isinstance(loggers, (list, tuple)):
        loggers = NOISY_LOGGERS
    configure_third_party_loggers(level, loggers)


def setup_logging_from_config(config: Any = None) -> None:
    """Set up logging using the ``logging`` section of the configuration.

    Always logs to both console and a rotating file with line numbers included.

    Args:
        config: Config object. If None, loads from default config.

    Example:
        >>> from docs2questions.utils import get_config, setup_logging_from_config
        >>> setup_logging_from_config(get_config())
    """
    if config is None:
        from .config import get_config

        config = get_config()

    log_level = _as_level(config.get("logging.level", "INFO"))
    _install_handlers(log_level, _rotating_handler_from_config(config))
    _configure_third_party_from_config(config)


def setup_logging(
    level: int | str = logging.INFO,
    log_file: str | Path = DEFAULT_LOG_FILE,
) -> None:
    """Set up logging configuration for the package.

    Args:
        level: Logging level (e.g., logging.INFO, "DEBUG")
        log_file: File path to write logs to

    Example:
        >>> setup_logging(level="DEBUG", log_file="docs2questions.log")
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _install_handlers(_as_level(level), logging.FileHandler(log_path))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module.

    Args:
        name: Name of the logger (typically __name__)

    Returns:
        Logger nested under the package namespace

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Module initialized")
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_third_party_loggers(
    level: int = logging.WARNING, loggers: Iterable[str] | None = None
) -> None:
    """Quiet verbose third-party libraries.

    Args:
        level: Logging level for third-party loggers
        loggers: Logger names to adjust (defaults to the PDF stack)
    """
    for logger_name in loggers if loggers is not None else NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)


def setup_cli_logging(verbose: int = 0, config: Any = None) -> None:
    """Set up logging for CLI commands.

    The verbose flag controls the level (0=INFO, 1+=DEBUG); handler and
    third-party settings come from the configuration.

    Args:
        verbose: Verbosity level
        config: Config object. If None, loads from default config.
    """
    if config is None:
        from .config import get_config

        config = get_config()

    log_level = logging.DEBUG if _as_int(verbose, 0) > 0 else logging.INFO
    _install_handlers(log_level, _rotating_handler_from_config(config))
    _configure_third_party_from_config(config)
