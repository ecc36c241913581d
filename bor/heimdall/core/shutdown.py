"""One-shot broadcast shutdown signal.

Architecture:
    A client owns exactly one ShutdownSignal for its whole lifetime. Every
    outstanding retry loop waits on it together with its retry clock, so
    closing it wakes all of them at once without polling.

Design Decisions:
    - asyncio.Event: any number of tasks can wait on it concurrently
    - Idempotent close(): a second close is a no-op instead of a fault
    - Created without a running loop: safe to build in synchronous constructors
"""

from __future__ import annotations

import asyncio


class ShutdownSignal:
    """Process-wide, close-once broadcast signal."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def closed(self) -> bool:
        """Whether the signal has fired."""
        return self._event.is_set()

    def close(self) -> bool:
        """Fire the signal.

        Returns:
            True if this call closed the signal, False if it was already closed
        """
        if self._event.is_set():
            return False
        self._event.set()
        return True

    async def wait(self, timeout: float | None = None) -> bool:
        """Wait until the signal fires or ``timeout`` seconds elapse.

        Cancellation of the waiting task propagates unchanged.

        Args:
            timeout: Maximum seconds to wait (None waits forever)

        Returns:
            True if the signal fired, False if the timeout elapsed first
        """
        if self._event.is_set():
            return True
        try:
            async with asyncio.timeout(timeout):
                await self._event.wait()
        except TimeoutError:
            return False
        return True
