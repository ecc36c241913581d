"""REST runtime abstractions."""

from .endpoints import (
    HeimdallEndpoint,
    checkpoint_count_endpoint,
    checkpoint_endpoint,
    make_endpoint,
    milestone_count_endpoint,
    milestone_endpoint,
    span_endpoint,
    state_sync_endpoint,
)
from .fetcher import RetryClock, fetch, fetch_with_retry
from .http_client import HTTPClient

__all__ = [
    "HTTPClient",
    "HeimdallEndpoint",
    "RetryClock",
    "fetch",
    "fetch_with_retry",
    "make_endpoint",
    "span_endpoint",
    "state_sync_endpoint",
    "checkpoint_endpoint",
    "checkpoint_count_endpoint",
    "milestone_endpoint",
    "milestone_count_endpoint",
]
