"""State sync event record data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .envelope import HeimdallResponse


class EventRecordWithTime(BaseModel):
    """State sync event bridged from the root chain, with its record time."""

    id: int = 0
    contract: str = ""
    data: str = ""
    tx_hash: str = ""
    log_index: int = 0
    chain_id: str = Field("", alias="bor_chain_id")
    record_time: datetime

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class StateSyncEventsResponse(HeimdallResponse[list[EventRecordWithTime] | None]):
    """Page of event records; a null or missing result ends the stream, like a 204."""

    result: list[EventRecordWithTime] | None = None
