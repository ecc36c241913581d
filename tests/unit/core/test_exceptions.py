"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

import asyncio

from bor.heimdall.core import (
    DecodeError,
    HeimdallError,
    NoResponseError,
    ShutdownDetectedError,
    UnsuccessfulResponseError,
)


def test_unsuccessful_response_error_with_status_code():
    """Test UnsuccessfulResponseError carries the status code in attribute and message."""
    error = UnsuccessfulResponseError(500)
    assert error.status_code == 500
    assert str(error) == "error while fetching data from Heimdall: response code 500"
    assert isinstance(error, HeimdallError)


def test_unsuccessful_response_error_custom_message():
    """Test UnsuccessfulResponseError keeps an explicit message."""
    error = UnsuccessfulResponseError(404, "span not found")
    assert str(error) == "span not found"
    assert error.status_code == 404


def test_shutdown_detected_error_default_message():
    """Test ShutdownDetectedError has a stable sentinel message."""
    assert str(ShutdownDetectedError()) == "shutdown detected"
    assert isinstance(ShutdownDetectedError(), HeimdallError)


def test_no_response_and_decode_errors_are_heimdall_errors():
    """Test remaining attempt failures share the base class."""
    assert isinstance(NoResponseError(), HeimdallError)
    assert isinstance(DecodeError("bad body"), HeimdallError)


def test_context_errors_are_not_heimdall_errors():
    """Caller deadline and cancellation stay outside the hierarchy."""
    assert not issubclass(TimeoutError, HeimdallError)
    assert not issubclass(asyncio.CancelledError, HeimdallError)
