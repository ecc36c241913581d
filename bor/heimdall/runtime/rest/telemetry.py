"""Structured logging for Heimdall requests.

This module provides telemetry hooks for the retry loop, emitting structured
logs so long outages stay visible without flooding the log.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_fetch_failed(*, path: str, attempt: int, error: BaseException) -> None:
    """Log a failed attempt.

    Args:
        path: Endpoint path
        attempt: One-based attempt number
        error: Error raised by the attempt
    """
    logger.warning(
        "an error while trying fetching from Heimdall",
        extra={
            "path": path,
            "attempt": attempt,
            "error_type": type(error).__name__,
            "error_message": str(error),
        },
    )


def log_retry_scheduled(*, path: str, attempt: int, retry_period: float) -> None:
    """Log that another attempt will follow after the retry period."""
    logger.info(
        f"Retrying again in {retry_period:g} seconds to fetch data from Heimdall",
        extra={"path": path, "attempt": attempt, "retry_period": retry_period},
    )


def log_fetch_aborted(*, path: str, attempt: int, reason: str) -> None:
    """Log that the retry loop stopped without a result.

    Args:
        path: Endpoint path
        attempt: Attempt counter when the loop stopped
        reason: "shutdown" or "cancelled"
    """
    logger.debug(
        "Shutdown detected, terminating request",
        extra={"path": path, "attempt": attempt, "reason": reason},
    )
