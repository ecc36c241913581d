"""Heimdall client implementations."""

from .heimdall_client import HeimdallClient

__all__ = ["HeimdallClient"]
