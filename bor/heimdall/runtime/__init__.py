"""Runtime components: REST fetching and pagination."""

from .paging import EventCursor, PageExecutor, PageResult
from .rest import HTTPClient, HeimdallEndpoint, RetryClock, fetch, fetch_with_retry

__all__ = [
    "HTTPClient",
    "HeimdallEndpoint",
    "RetryClock",
    "fetch",
    "fetch_with_retry",
    "EventCursor",
    "PageExecutor",
    "PageResult",
]
