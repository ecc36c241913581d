"""Single-shot and retrying fetches of Heimdall envelopes.

Architecture:
    fetch() performs exactly one GET and decodes the body into the envelope
    class given by the caller. fetch_with_retry() wraps it in a loop that only
    ends on success, on the caller's deadline or cancellation, or when the
    client's ShutdownSignal fires.

    Between attempts the calling task waits on the shutdown signal with the
    time left until the next retry tick as timeout. That single await races
    all three terminal conditions:
    - caller deadline/cancellation: interrupts the await (CancelledError)
    - shutdown: wakes the await (ShutdownDetectedError)
    - tick: the timeout elapses (next attempt)

Note:
    There is no retry cap. A call with neither a deadline nor a reachable
    close() retries for as long as Heimdall is down.
"""

from __future__ import annotations

import asyncio
from typing import TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from bor.heimdall.config import LOG_EACH, RETRY_CALL
from bor.heimdall.core.exceptions import (
    DecodeError,
    HeimdallError,
    NoResponseError,
    ShutdownDetectedError,
)
from bor.heimdall.core.shutdown import ShutdownSignal

from .endpoints import HeimdallEndpoint
from .http_client import HTTPClient
from .telemetry import log_fetch_aborted, log_fetch_failed, log_retry_scheduled

ResponseT = TypeVar("ResponseT", bound=BaseModel)

# Errors that end one attempt but not the call. asyncio.TimeoutError is the
# per-attempt transport timeout; the caller's own deadline arrives here as
# CancelledError and is never caught.
RETRYABLE_ERRORS = (HeimdallError, aiohttp.ClientError, asyncio.TimeoutError)


class RetryClock:
    """Periodic retry schedule with a fixed period.

    Ticks fall on a fixed grid starting when the clock is created. If an
    attempt overruns a tick, that tick fires as soon as the next wait starts
    and any further missed ticks are dropped.
    """

    def __init__(self, period: float) -> None:
        if period <= 0:
            raise ValueError("Retry period must be positive")
        self.period = period
        self._loop = asyncio.get_running_loop()
        self._next_tick = self._loop.time() + period

    async def tick(self, shutdown: ShutdownSignal) -> bool:
        """Wait for the next tick.

        Returns:
            True on a tick, False if ``shutdown`` fired first
        """
        delay = max(0.0, self._next_tick - self._loop.time())
        if await shutdown.wait(timeout=delay):
            return False

        fired_at = self._loop.time()
        self._next_tick += self.period
        while self._next_tick <= fired_at:
            self._next_tick += self.period
        return True


async def fetch(
    http: HTTPClient, endpoint: HeimdallEndpoint, response_type: type[ResponseT]
) -> ResponseT | None:
    """Fetch and decode one response.

    Args:
        http: Shared HTTP client
        endpoint: Request target
        response_type: Envelope class to decode into

    Returns:
        Decoded envelope, or None when Heimdall answered 204

    Raises:
        UnsuccessfulResponseError: Status other than 200/204
        NoResponseError: 200 with an empty body
        DecodeError: Body does not match ``response_type``
    """
    body = await http.get(endpoint.url)
    if body is None:
        return None
    if not body:
        raise NoResponseError()

    try:
        return response_type.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"invalid {response_type.__name__} from {endpoint.path}: {e}") from e


async def fetch_with_retry(
    http: HTTPClient,
    endpoint: HeimdallEndpoint,
    response_type: type[ResponseT],
    shutdown: ShutdownSignal,
    *,
    retry_period: float = RETRY_CALL,
    log_each: int = LOG_EACH,
) -> ResponseT | None:
    """Fetch a response, retrying every ``retry_period`` seconds until it succeeds.

    Args:
        http: Shared HTTP client
        endpoint: Request target
        response_type: Envelope class to decode into
        shutdown: Client shutdown signal
        retry_period: Seconds between attempts
        log_each: Report every Nth failed attempt after the first

    Returns:
        Decoded envelope, or None when Heimdall answered 204

    Raises:
        ShutdownDetectedError: ``shutdown`` fired before a successful attempt
        TimeoutError: The caller's deadline expired (raised by asyncio.timeout)
        asyncio.CancelledError: The calling task was cancelled
    """
    if shutdown.closed:
        raise ShutdownDetectedError()

    try:
        return await fetch(http, endpoint, response_type)
    except RETRYABLE_ERRORS as e:
        error = e

    attempt = 1
    log_fetch_failed(path=endpoint.path, attempt=attempt, error=error)

    clock = RetryClock(retry_period)

    while True:
        log_retry_scheduled(path=endpoint.path, attempt=attempt, retry_period=retry_period)

        attempt += 1

        try:
            ticked = await clock.tick(shutdown)
        except asyncio.CancelledError:
            log_fetch_aborted(path=endpoint.path, attempt=attempt, reason="cancelled")
            raise

        if not ticked:
            log_fetch_aborted(path=endpoint.path, attempt=attempt, reason="shutdown")
            raise ShutdownDetectedError()

        try:
            return await fetch(http, endpoint, response_type)
        except RETRYABLE_ERRORS as e:
            if attempt % log_each == 0:
                log_fetch_failed(path=endpoint.path, attempt=attempt, error=e)
