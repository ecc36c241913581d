"""Core components."""

from .base import BaseHeimdallClient
from .exceptions import (
    DecodeError,
    HeimdallError,
    NoResponseError,
    ShutdownDetectedError,
    UnsuccessfulResponseError,
)
from .shutdown import ShutdownSignal

__all__ = [
    "BaseHeimdallClient",
    "ShutdownSignal",
    "HeimdallError",
    "ShutdownDetectedError",
    "NoResponseError",
    "UnsuccessfulResponseError",
    "DecodeError",
]
