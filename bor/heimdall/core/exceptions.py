"""Custom exception hierarchy.

Caller deadlines and cancellation are not part of this hierarchy: they surface
as the builtin ``TimeoutError`` and ``asyncio.CancelledError`` untouched.
"""

from __future__ import annotations


class HeimdallError(Exception):
    """Base exception for all client errors."""

    pass


class ShutdownDetectedError(HeimdallError):
    """The client's shutdown signal fired while a request was outstanding."""

    def __init__(self, message: str = "shutdown detected") -> None:
        super().__init__(message)


class NoResponseError(HeimdallError):
    """Heimdall answered 200 without a body."""

    def __init__(self, message: str = "got an empty response") -> None:
        super().__init__(message)


class UnsuccessfulResponseError(HeimdallError):
    """Heimdall answered with a status other than 200 or 204."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(
            message or f"error while fetching data from Heimdall: response code {status_code}"
        )
        self.status_code = status_code


class DecodeError(HeimdallError):
    """Response body could not be decoded into the expected envelope."""

    pass
