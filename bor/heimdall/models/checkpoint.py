"""Checkpoint data models."""

from pydantic import BaseModel, ConfigDict

from .envelope import HeimdallResponse


class Checkpoint(BaseModel):
    """Checkpoint of a Bor block range submitted to the root chain.

    Only JSON types are checked; missing fields take zero values.
    """

    proposer: str = ""
    start_block: int = 0
    end_block: int = 0
    root_hash: str = ""
    bor_chain_id: str = ""
    timestamp: int = 0

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class Count(BaseModel):
    """Count payload (``{"result": n}``) shared by checkpoints and milestones."""

    result: int = 0

    model_config = ConfigDict(frozen=True)


CheckpointResponse = HeimdallResponse[Checkpoint]
CheckpointCountResponse = HeimdallResponse[Count]
