"""Observability for the guardian pipeline.

This module provides:
- Structured event logging
- Stage-level timing
"""

import time
from contextlib import contextmanager
from enum import StrEnum

from loguru import logger


class GuardianStage(StrEnum):
    """Guardian stages, in execution order."""

    TEMPLATE = "template"
    VOLUME = "volume"
    SUBSTITUTION = "substitution"


def log_event(
    event: str,
    **kwargs: str | int | float | bool | None,
) -> None:
    """Log a structured event.

    Standard events:
    - guardian_timing: A stage finished
    - guardian_applied: All stages finished

    Args:
        event: Event name
        **kwargs: Additional structured fields to include in the log
    """
    logger.info(event, **kwargs)


@contextmanager
def timing(metric_name: str):
    """Context manager for timing operations.

    Args:
        metric_name: Metric name (e.g., "guardian.stage.volume")

    Yields:
        None (context manager)
    """
    start_time = time.monotonic()
    try:
        yield
    finally:
        elapsed = time.monotonic() - start_time
        log_event(
            "guardian_timing",
            metric=metric_name,
            duration_seconds=elapsed,
        )
