"""Unit tests for Heimdall data models."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from bor.heimdall.models import (
    Checkpoint,
    CheckpointCountResponse,
    CheckpointResponse,
    EventRecordWithTime,
    HeimdallSpan,
    MilestoneResponse,
    SpanResponse,
    StateSyncEventsResponse,
    Validator,
)

ZERO_ADDRESS = "0x" + "0" * 40
ZERO_HASH = "0x" + "0" * 64


def checkpoint_payload(**overrides) -> dict:
    payload = {
        "proposer": ZERO_ADDRESS,
        "start_block": 0,
        "end_block": 512,
        "root_hash": ZERO_HASH,
        "bor_chain_id": "15001",
        "timestamp": 0,
    }
    payload.update(overrides)
    return payload


def validator_payload(validator_id: int) -> dict:
    return {
        "ID": validator_id,
        "signer": "0x" + f"{validator_id:040x}",
        "power": 100 * validator_id,
        "accum": -5,
        "jailed": False,
    }


class TestCheckpoint:
    """Test Checkpoint decoding and validation."""

    def test_decode_envelope(self):
        """Test decoding a checkpoint envelope from JSON."""
        body = json.dumps({"height": "0", "result": checkpoint_payload()})
        response = CheckpointResponse.model_validate_json(body)

        assert response.height == "0"
        assert isinstance(response.result, Checkpoint)
        assert response.result.end_block == 512
        assert response.result.bor_chain_id == "15001"

    def test_decode_does_not_judge_values(self):
        """Test odd but well-typed payloads decode instead of failing every retry."""
        payload = checkpoint_payload(start_block=100, end_block=50, proposer="not-an-address")
        del payload["bor_chain_id"]
        body = json.dumps({"height": "0", "result": payload})

        checkpoint = CheckpointResponse.model_validate_json(body).result

        assert checkpoint.end_block == 50
        assert checkpoint.proposer == "not-an-address"
        assert checkpoint.bor_chain_id == ""

    def test_wrong_json_type_rejected(self):
        """Test a field of the wrong JSON type still fails to decode."""
        body = json.dumps({"height": "0", "result": checkpoint_payload(start_block="tip")})
        with pytest.raises(ValidationError):
            CheckpointResponse.model_validate_json(body)

    def test_frozen(self):
        """Test checkpoints are immutable."""
        checkpoint = Checkpoint(**checkpoint_payload())
        with pytest.raises(ValidationError):
            checkpoint.end_block = 1024

    def test_missing_result_rejected(self):
        """Test an envelope without result does not decode."""
        with pytest.raises(ValidationError):
            CheckpointResponse.model_validate_json('{"height": "0"}')


class TestCount:
    def test_decode_count(self):
        """Test count envelopes nest the count under result.result."""
        response = CheckpointCountResponse.model_validate_json(
            '{"height": "10", "result": {"result": 42}}'
        )
        assert response.result.result == 42


class TestMilestone:
    def test_decode_milestone(self):
        """Test decoding a milestone and its derived block count."""
        body = json.dumps(
            {
                "height": "7",
                "result": {
                    "proposer": ZERO_ADDRESS,
                    "start_block": 1000,
                    "end_block": 1015,
                    "hash": "0x" + "ab" * 32,
                    "bor_chain_id": "137",
                    "milestone_id": "abc - 0x1",
                    "timestamp": 1700000000,
                },
            }
        )
        milestone = MilestoneResponse.model_validate_json(body).result

        assert milestone.block_count == 16
        assert milestone.milestone_id == "abc - 0x1"


class TestSpan:
    """Test span decoding with Heimdall JSON keys."""

    def test_decode_span(self):
        """Test aliases map Heimdall keys onto field names."""
        body = json.dumps(
            {
                "height": "1",
                "result": {
                    "span_id": 3,
                    "start_block": 256,
                    "end_block": 6655,
                    "validator_set": {
                        "validators": [validator_payload(1), validator_payload(2)],
                        "proposer": validator_payload(1),
                    },
                    "selected_producers": [validator_payload(2)],
                    "bor_chain_id": "15001",
                },
            }
        )
        span = SpanResponse.model_validate_json(body).result

        assert isinstance(span, HeimdallSpan)
        assert span.id == 3
        assert span.chain_id == "15001"
        assert span.validator_set.total_voting_power == 300
        assert span.validator_set.proposer.id == 1
        assert span.selected_producers[0].voting_power == 200
        assert span.selected_producers[0].proposer_priority == -5

    def test_populate_by_name(self):
        """Test models can be built with Python field names."""
        validator = Validator(id=1, signer=ZERO_ADDRESS, voting_power=10)
        assert validator.proposer_priority == 0

    def test_missing_chain_id_defaults(self):
        span = HeimdallSpan.model_validate({"span_id": 1, "start_block": 0, "end_block": 255})
        assert span.chain_id == ""
        assert span.selected_producers == []


class TestEventRecord:
    """Test state sync event records."""

    def test_decode_event_records(self):
        """Test decoding a page of records with record times."""
        body = json.dumps(
            {
                "height": "0",
                "result": [
                    {
                        "id": 1,
                        "contract": ZERO_ADDRESS,
                        "data": "0xdeadbeef",
                        "tx_hash": ZERO_HASH,
                        "log_index": 2,
                        "bor_chain_id": "15001",
                        "record_time": "2024-01-01T00:00:00Z",
                    }
                ],
            }
        )
        records = StateSyncEventsResponse.model_validate_json(body).result

        assert len(records) == 1
        assert isinstance(records[0], EventRecordWithTime)
        assert records[0].record_time == datetime(2024, 1, 1, tzinfo=UTC)
        assert records[0].chain_id == "15001"

    def test_null_result(self):
        """Test a null result decodes to None (end of stream)."""
        response = StateSyncEventsResponse.model_validate_json('{"height": "0", "result": null}')
        assert response.result is None

    def test_missing_result(self):
        """Test an event page without a result key decodes like a null result."""
        response = StateSyncEventsResponse.model_validate_json('{"height": "0"}')
        assert response.result is None
