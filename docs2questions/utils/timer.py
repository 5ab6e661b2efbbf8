"""Timing utilities for pipeline stages."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Any, Generator

from .logging import get_logger

logger = get_logger(__name__)


@contextmanager
def timer(
    name: str = "operation", log_level: int = logging.INFO
) -> Generator[dict[str, Any], None, None]:
    """Context manager for timing code blocks.

    The elapsed time is logged even when the block raises or is cancelled.

    Args:
        name: Name of the operation being timed
        log_level: Logging level for the timing message

    Yields:
        Dict with timing information (``elapsed`` is filled in on exit)

    Example:
        >>> with timer("text extraction") as info:
        ...     text = extract_text(doc)
        >>> info["elapsed"]
    """
    timing_info: dict[str, Any] = {"name": name, "elapsed": 0.0}
    start_time = time.perf_counter()

    try:
        yield timing_info
    finally:
        elapsed = time.perf_counter() - start_time
        timing_info["elapsed"] = elapsed
        logger.log(log_level, f"{name} completed in {format_time(elapsed)}")


def format_time(seconds: float) -> str:
    """Format elapsed time in a human-readable format.

    Example:
        >>> format_time(0.123)
        '123.00ms'
        >>> format_time(65.5)
        '1m 5.50s'
    """
    if seconds < 0.001:
        return f"{seconds * 1_000_000:.2f}µs"
    elif seconds < 1:
        return f"{seconds * 1000:.2f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    return f"{minutes}m {secs:.2f}s"
