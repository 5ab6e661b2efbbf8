"""Utility functions and helpers for docs2questions.

This module provides common utilities including:
- Configuration loading
- Logging configuration
- Stage timing
"""

from __future__ import annotations

from docs2questions.utils.config import (
    Config,
    get_config,
    load_config,
    resolve_config_path,
    set_config,
)
from docs2questions.utils.logging import (
    configure_third_party_loggers,
    get_logger,
    setup_cli_logging,
    setup_logging,
    setup_logging_from_config,
)
from docs2questions.utils.timer import format_time, timer

__all__ = [
    # Config
    "Config",
    "get_config",
    "load_config",
    "resolve_config_path",
    "set_config",
    # Logging
    "setup_logging",
    "setup_logging_from_config",
    "get_logger",
    "configure_third_party_loggers",
    "setup_cli_logging",
    # Timing
    "timer",
    "format_time",
]
