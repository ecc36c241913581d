"""Heimdall endpoint definitions.

Every builder returns a fresh, immutable HeimdallEndpoint. The endpoint path
replaces whatever path the base URL carries, so ``http://host/api`` and
``http://host`` resolve to the same request target.
"""

from __future__ import annotations

from dataclasses import dataclass

from yarl import URL

from bor.heimdall.config import (
    FETCH_CHECKPOINT_COUNT_PATH,
    FETCH_CHECKPOINT_PATH,
    FETCH_MILESTONE_COUNT_PATH,
    FETCH_MILESTONE_PATH,
    FETCH_SPAN_FORMAT,
    FETCH_STATE_SYNC_EVENTS_PATH,
    STATE_FETCH_LIMIT,
)


@dataclass(frozen=True)
class HeimdallEndpoint:
    """Fully determined request target.

    Attributes:
        base_url: Heimdall REST base address (scheme and authority are kept)
        path: Endpoint path, with or without the leading slash
        query: Ordered query parameters
    """

    base_url: str
    path: str
    query: tuple[tuple[str, str | int], ...] = ()

    def __post_init__(self) -> None:
        """Validate the base address."""
        base = URL(self.base_url)
        if not base.is_absolute() or base.scheme not in ("http", "https"):
            raise ValueError(f"Invalid Heimdall URL: {self.base_url!r}")

    @property
    def url(self) -> URL:
        """Request URL."""
        url = URL(self.base_url).with_path("/" + self.path.lstrip("/"))
        if self.query:
            return url.with_query(list(self.query))
        return url.with_query(None)

    @property
    def query_string(self) -> str:
        """Encoded query, for logging."""
        return self.url.query_string


def make_endpoint(
    base_url: str, path: str, query: tuple[tuple[str, str | int], ...] = ()
) -> HeimdallEndpoint:
    """Build and validate an endpoint.

    Raises:
        ValueError: If ``base_url`` is not an absolute http(s) URL
    """
    return HeimdallEndpoint(base_url=base_url, path=path, query=query)


def span_endpoint(base_url: str, span_id: int) -> HeimdallEndpoint:
    return make_endpoint(base_url, FETCH_SPAN_FORMAT.format(span_id=span_id))


def state_sync_endpoint(
    base_url: str, from_id: int, to: int, limit: int = STATE_FETCH_LIMIT
) -> HeimdallEndpoint:
    """Build the event-record list endpoint for one page.

    Args:
        base_url: Heimdall REST base address
        from_id: First event record id of the page
        to: Upper bound on record time (unix seconds)
        limit: Page size
    """
    query = (("from-id", from_id), ("to-time", to), ("limit", limit))
    return make_endpoint(base_url, FETCH_STATE_SYNC_EVENTS_PATH, query)


def checkpoint_endpoint(base_url: str) -> HeimdallEndpoint:
    return make_endpoint(base_url, FETCH_CHECKPOINT_PATH)


def checkpoint_count_endpoint(base_url: str) -> HeimdallEndpoint:
    return make_endpoint(base_url, FETCH_CHECKPOINT_COUNT_PATH)


def milestone_endpoint(base_url: str) -> HeimdallEndpoint:
    return make_endpoint(base_url, FETCH_MILESTONE_PATH)


def milestone_count_endpoint(base_url: str) -> HeimdallEndpoint:
    return make_endpoint(base_url, FETCH_MILESTONE_COUNT_PATH)
