"""Base Heimdall client abstract class.

Architecture:
    This module defines the BaseHeimdallClient abstract base class that the
    surrounding node code depends on. It provides:
    - Abstract methods for every Heimdall resource the node polls
    - An abstract close() that aborts all outstanding polling
    - Async context manager support

Design Decisions:
    - Abstract base class: lets the node swap in a fake client in tests
    - Optional results: None means Heimdall answered 204 (nothing yet)
    - Keyword-only timeout: an optional deadline for the whole call, on top of
      whatever asyncio.timeout the caller already holds

See Also:
    - HeimdallClient: aiohttp-backed implementation
    - fetch_with_retry: retry loop shared by every method
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import Checkpoint, EventRecordWithTime, HeimdallSpan, Milestone


class BaseHeimdallClient(ABC):
    """Abstract base class for Heimdall clients.

    Note:
        Every method retries until it succeeds, the caller's deadline expires,
        the calling task is cancelled, or close() is called. Callers must hold
        at least one of those; otherwise a call against a dead Heimdall never
        returns.
    """

    @abstractmethod
    async def state_sync_events(
        self, from_id: int, to: int, *, timeout: float | None = None
    ) -> list[EventRecordWithTime]:
        """Fetch all state sync event records from ``from_id`` up to time ``to``."""
        ...

    @abstractmethod
    async def span(self, span_id: int, *, timeout: float | None = None) -> HeimdallSpan | None:
        """Fetch a validator span by id."""
        ...

    @abstractmethod
    async def fetch_checkpoint(self, *, timeout: float | None = None) -> Checkpoint | None:
        """Fetch the latest checkpoint."""
        ...

    @abstractmethod
    async def fetch_checkpoint_count(self, *, timeout: float | None = None) -> int | None:
        """Fetch the number of checkpoints."""
        ...

    @abstractmethod
    async def fetch_milestone(self, *, timeout: float | None = None) -> Milestone | None:
        """Fetch the latest milestone."""
        ...

    @abstractmethod
    async def fetch_milestone_count(self, *, timeout: float | None = None) -> int | None:
        """Fetch the number of milestones."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Abort outstanding requests and release transport resources."""
        ...

    async def __aenter__(self) -> BaseHeimdallClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
