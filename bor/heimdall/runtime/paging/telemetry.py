"""Structured logging for pagination runs."""

from __future__ import annotations

import logging

from .definitions import EventCursor, PageResult

logger = logging.getLogger(__name__)


def log_page_completed(*, page_index: int, cursor: EventCursor, rows: int, limit: int) -> None:
    """Log completion of a single page.

    Args:
        page_index: Zero-based index of the page
        cursor: Cursor the page was fetched with
        rows: Number of records in the page
        limit: Page size requested
    """
    logger.debug(
        "page_completed",
        extra={
            "page_index": page_index,
            "from_id": cursor.from_id,
            "to": cursor.to,
            "rows": rows,
            "limit": limit,
        },
    )


def log_pagination_complete(*, result: PageResult, end_of_stream: str) -> None:
    """Log completion of a pagination run.

    Args:
        result: PageResult of the run
        end_of_stream: What ended the run ("no_content" or "short_page")
    """
    logger.info(
        "pagination_complete",
        extra={
            "pages_used": result.pages_used,
            "total_records": result.total_records,
            "end_of_stream": end_of_stream,
        },
    )


def log_page_error(*, page_index: int, cursor: EventCursor, error: BaseException) -> None:
    """Log a page failure that aborts the run."""
    logger.error(
        "page_error",
        extra={
            "page_index": page_index,
            "from_id": cursor.from_id,
            "to": cursor.to,
            "error_type": type(error).__name__,
            "error_message": str(error),
        },
    )
