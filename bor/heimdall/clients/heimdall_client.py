"""Heimdall REST client.

This client is what a Bor node uses to poll Heimdall for checkpoints,
milestones, spans and state sync events.

Architecture:
    Each method builds its endpoint, runs fetch_with_retry() with the
    envelope class of that resource and unwraps ``result``. State sync events
    additionally go through PageExecutor. All methods share one HTTPClient
    and one ShutdownSignal.

Lifecycle:
    close() fires the shutdown signal once and closes the HTTP session. Every
    in-flight call then raises ShutdownDetectedError at its next retry wait,
    and every later call raises it immediately.
"""

from __future__ import annotations

import asyncio
import logging

from bor.heimdall.config import API_HEIMDALL_TIMEOUT, LOG_EACH, RETRY_CALL, STATE_FETCH_LIMIT
from bor.heimdall.core import BaseHeimdallClient, ShutdownSignal
from bor.heimdall.models import (
    Checkpoint,
    CheckpointCountResponse,
    CheckpointResponse,
    EventRecordWithTime,
    HeimdallSpan,
    Milestone,
    MilestoneCountResponse,
    MilestoneResponse,
    SpanResponse,
    StateSyncEventsResponse,
)
from bor.heimdall.runtime.paging import EventCursor, PageExecutor
from bor.heimdall.runtime.rest import (
    HeimdallEndpoint,
    HTTPClient,
    checkpoint_count_endpoint,
    checkpoint_endpoint,
    fetch_with_retry,
    milestone_count_endpoint,
    milestone_endpoint,
    span_endpoint,
    state_sync_endpoint,
)
from bor.heimdall.runtime.rest.fetcher import ResponseT

logger = logging.getLogger(__name__)


class HeimdallClient(BaseHeimdallClient):
    """Resilient Heimdall REST client.

    Example:
        async with HeimdallClient("http://localhost:1317") as client:
            checkpoint = await client.fetch_checkpoint(timeout=30)
    """

    def __init__(
        self,
        url: str,
        *,
        api_timeout: float = API_HEIMDALL_TIMEOUT,
        retry_period: float = RETRY_CALL,
        log_each: int = LOG_EACH,
    ) -> None:
        """Initialize Heimdall client.

        Args:
            url: Heimdall REST base address
            api_timeout: Per-attempt HTTP timeout in seconds
            retry_period: Seconds between attempts while Heimdall is failing
            log_each: Report every Nth failed attempt after the first
        """
        self.url = url
        self._http = HTTPClient(timeout=api_timeout)
        self._shutdown = ShutdownSignal()
        self._retry_period = retry_period
        self._log_each = log_each
        self._pager = PageExecutor(limit=STATE_FETCH_LIMIT)

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._shutdown.closed

    async def _fetch(
        self, endpoint: HeimdallEndpoint, response_type: type[ResponseT]
    ) -> ResponseT | None:
        return await fetch_with_retry(
            self._http,
            endpoint,
            response_type,
            self._shutdown,
            retry_period=self._retry_period,
            log_each=self._log_each,
        )

    async def state_sync_events(
        self, from_id: int, to: int, *, timeout: float | None = None
    ) -> list[EventRecordWithTime]:
        """Fetch all state sync events with id >= ``from_id`` recorded before ``to``.

        Args:
            from_id: First event record id
            to: Upper bound on record time (unix seconds)
            timeout: Optional deadline for the whole run, across all pages

        Returns:
            Event records sorted ascending by id
        """

        async def fetch_page(cursor: EventCursor) -> list[EventRecordWithTime] | None:
            endpoint = state_sync_endpoint(self.url, cursor.from_id, cursor.to, self._pager.limit)
            logger.info(
                "Fetching state sync events", extra={"query_params": endpoint.query_string}
            )
            response = await self._fetch(endpoint, StateSyncEventsResponse)
            if response is None:
                return None
            return response.result

        async with asyncio.timeout(timeout):
            result = await self._pager.execute(
                cursor=EventCursor(from_id=from_id, to=to), fetch_page=fetch_page
            )
        return result.data

    async def span(self, span_id: int, *, timeout: float | None = None) -> HeimdallSpan | None:
        """Fetch a validator span by id."""
        async with asyncio.timeout(timeout):
            response = await self._fetch(span_endpoint(self.url, span_id), SpanResponse)
        return response.result if response is not None else None

    async def fetch_checkpoint(self, *, timeout: float | None = None) -> Checkpoint | None:
        """Fetch the latest checkpoint from Heimdall."""
        async with asyncio.timeout(timeout):
            response = await self._fetch(checkpoint_endpoint(self.url), CheckpointResponse)
        return response.result if response is not None else None

    async def fetch_milestone(self, *, timeout: float | None = None) -> Milestone | None:
        """Fetch the latest milestone from Heimdall."""
        async with asyncio.timeout(timeout):
            response = await self._fetch(milestone_endpoint(self.url), MilestoneResponse)
        return response.result if response is not None else None

    async def fetch_checkpoint_count(self, *, timeout: float | None = None) -> int | None:
        """Fetch the checkpoint count from Heimdall."""
        async with asyncio.timeout(timeout):
            response = await self._fetch(
                checkpoint_count_endpoint(self.url), CheckpointCountResponse
            )
        return response.result.result if response is not None else None

    async def fetch_milestone_count(self, *, timeout: float | None = None) -> int | None:
        """Fetch the milestone count from Heimdall."""
        async with asyncio.timeout(timeout):
            response = await self._fetch(milestone_count_endpoint(self.url), MilestoneCountResponse)
        return response.result.result if response is not None else None

    async def close(self) -> None:
        """Stop all outstanding requests and release idle connections."""
        if self._shutdown.close():
            logger.debug("Heimdall client closed", extra={"url": self.url})
        await self._http.close()
