"""Unit tests for Heimdall endpoint builders."""

from __future__ import annotations

import dataclasses

import pytest

from bor.heimdall.runtime.rest import (
    HeimdallEndpoint,
    checkpoint_count_endpoint,
    checkpoint_endpoint,
    make_endpoint,
    milestone_count_endpoint,
    milestone_endpoint,
    span_endpoint,
    state_sync_endpoint,
)


def test_span_url():
    endpoint = span_endpoint("http://bor0", 1)
    assert str(endpoint.url) == "http://bor0/bor/span/1"


def test_state_sync_url():
    """Test query parameters keep their order."""
    endpoint = state_sync_endpoint("http://bor0", 10, 100)
    assert str(endpoint.url) == "http://bor0/clerk/event-record/list?from-id=10&to-time=100&limit=50"
    assert endpoint.query_string == "from-id=10&to-time=100&limit=50"


def test_state_sync_url_custom_limit():
    endpoint = state_sync_endpoint("http://bor0", 0, 5, limit=10)
    assert endpoint.url.query["limit"] == "10"


@pytest.mark.parametrize(
    ("builder", "expected"),
    [
        (checkpoint_endpoint, "http://bor0/checkpoints/latest"),
        (checkpoint_count_endpoint, "http://bor0/checkpoints/count"),
        (milestone_endpoint, "http://bor0/milestone"),
        (milestone_count_endpoint, "http://bor0/milestone/count"),
    ],
)
def test_fixed_path_urls(builder, expected):
    assert str(builder("http://bor0").url) == expected


def test_base_path_and_query_are_replaced():
    """Test the endpoint path replaces the base URL's path and query."""
    endpoint = checkpoint_endpoint("https://heimdall.example.com/api?x=1")
    assert str(endpoint.url) == "https://heimdall.example.com/checkpoints/latest"


def test_port_is_kept():
    endpoint = milestone_endpoint("http://localhost:1317")
    assert str(endpoint.url) == "http://localhost:1317/milestone"


@pytest.mark.parametrize("base_url", ["bor0", "", "ftp://bor0", "/checkpoints"])
def test_invalid_base_url_rejected(base_url):
    with pytest.raises(ValueError, match="Invalid Heimdall URL"):
        make_endpoint(base_url, "/milestone")


def test_endpoint_is_immutable():
    endpoint = span_endpoint("http://bor0", 1)
    assert isinstance(endpoint, HeimdallEndpoint)
    with pytest.raises(dataclasses.FrozenInstanceError):
        endpoint.path = "/other"
