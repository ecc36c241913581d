"""Page execution logic for cursor-paginated endpoints.

This module provides the PageExecutor class that walks a paged endpoint with
an advancing cursor and assembles one ordered result set.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from operator import attrgetter
from typing import Any

from bor.heimdall.config import STATE_FETCH_LIMIT

from .definitions import EventCursor, PageResult
from .telemetry import log_page_completed, log_page_error, log_pagination_complete


class PageExecutor:
    """Fetches consecutive pages until the stream ends.

    A page of None (204 or a null result) or a page shorter than ``limit``
    ends the stream. Records are sorted by identifier at the end because page
    contents are not guaranteed to be globally ordered.
    """

    def __init__(
        self,
        limit: int = STATE_FETCH_LIMIT,
        sort_key: Callable[[Any], Any] = attrgetter("id"),
    ) -> None:
        """Initialize page executor.

        Args:
            limit: Page size; also the step ``from_id`` advances by
            sort_key: Record identifier used for the final ordering
        """
        if limit <= 0:
            raise ValueError("limit must be positive")
        self._limit = limit
        self._sort_key = sort_key

    @property
    def limit(self) -> int:
        return self._limit

    async def execute(
        self,
        *,
        cursor: EventCursor,
        fetch_page: Callable[[EventCursor], Awaitable[list[Any] | None]],
    ) -> PageResult:
        """Fetch every page starting at ``cursor``.

        Args:
            cursor: Start position, advanced in place between pages
            fetch_page: Async function returning the records of one page, or
                None when there is no more data

        Returns:
            PageResult with all records sorted by identifier

        Raises:
            Any error raised by ``fetch_page``; records fetched so far are
            discarded
        """
        records: list[Any] = []
        pages_used = 0
        end_of_stream = "no_content"

        while True:
            try:
                page = await fetch_page(cursor)
            except Exception as e:
                log_page_error(page_index=pages_used, cursor=cursor, error=e)
                raise
            pages_used += 1

            if page is None:
                break

            log_page_completed(
                page_index=pages_used - 1, cursor=cursor, rows=len(page), limit=self._limit
            )
            records.extend(page)

            if len(page) < self._limit:
                end_of_stream = "short_page"
                break

            cursor.from_id += self._limit

        records.sort(key=self._sort_key)

        result = PageResult(data=records, pages_used=pages_used)
        log_pagination_complete(result=result, end_of_stream=end_of_stream)
        return result
