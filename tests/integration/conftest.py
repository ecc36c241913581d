"""Shared fixtures for integration tests."""

import os

import pytest

from bor.heimdall.config import DEFAULT_HEIMDALL_URL


@pytest.fixture
def heimdall_url() -> str:
    """Heimdall REST address, HEIMDALL_URL or the local default."""
    return os.environ.get("HEIMDALL_URL", DEFAULT_HEIMDALL_URL)
