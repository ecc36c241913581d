"""Bor Heimdall - resilient asyncio client for the Heimdall REST API."""

from .clients import HeimdallClient
from .core import (
    BaseHeimdallClient,
    DecodeError,
    HeimdallError,
    NoResponseError,
    ShutdownDetectedError,
    ShutdownSignal,
    UnsuccessfulResponseError,
)
from .models import (
    Checkpoint,
    Count,
    EventRecordWithTime,
    HeimdallResponse,
    HeimdallSpan,
    Milestone,
    Validator,
    ValidatorSet,
)
from .runtime import EventCursor, PageExecutor, fetch, fetch_with_retry

__version__ = "0.1.0"

__all__ = [
    # Client
    "HeimdallClient",
    "BaseHeimdallClient",
    "ShutdownSignal",
    # Runtime
    "fetch",
    "fetch_with_retry",
    "EventCursor",
    "PageExecutor",
    # Models
    "HeimdallResponse",
    "Checkpoint",
    "Count",
    "Milestone",
    "HeimdallSpan",
    "Validator",
    "ValidatorSet",
    "EventRecordWithTime",
    # Exceptions
    "HeimdallError",
    "ShutdownDetectedError",
    "NoResponseError",
    "UnsuccessfulResponseError",
    "DecodeError",
]
