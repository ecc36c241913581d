"""Data models for Heimdall resources.

Architecture:
    This module exports all Pydantic v2 data models used throughout the client.
    All models are immutable (frozen=True) so decoded responses can be shared
    between tasks without copying.

Design Decisions:
    - Pydantic v2: JSON decoding and validation in one step
    - Generic envelope: one HeimdallResponse[T] for every endpoint
    - Aliases: Python field names, Heimdall JSON keys on the wire

Model Categories:
    - Envelope: HeimdallResponse
    - Consensus: Checkpoint, Milestone, Count
    - Validators: Validator, ValidatorSet, HeimdallSpan
    - State sync: EventRecordWithTime
"""

from .checkpoint import Checkpoint, CheckpointCountResponse, CheckpointResponse, Count
from .envelope import HeimdallResponse
from .event_record import EventRecordWithTime, StateSyncEventsResponse
from .milestone import Milestone, MilestoneCountResponse, MilestoneResponse
from .span import HeimdallSpan, SpanResponse, Validator, ValidatorSet

__all__ = [
    "HeimdallResponse",
    "Checkpoint",
    "CheckpointResponse",
    "CheckpointCountResponse",
    "Count",
    "Milestone",
    "MilestoneResponse",
    "MilestoneCountResponse",
    "Validator",
    "ValidatorSet",
    "HeimdallSpan",
    "SpanResponse",
    "EventRecordWithTime",
    "StateSyncEventsResponse",
]
