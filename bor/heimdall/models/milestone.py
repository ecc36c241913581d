"""Milestone data models."""

from pydantic import BaseModel, ConfigDict

from .checkpoint import Count
from .envelope import HeimdallResponse


class Milestone(BaseModel):
    """Finalized Bor block range voted on by Heimdall validators."""

    proposer: str = ""
    start_block: int = 0
    end_block: int = 0
    hash: str = ""
    bor_chain_id: str = ""
    milestone_id: str = ""
    timestamp: int = 0

    @property
    def block_count(self) -> int:
        """Number of blocks covered by the milestone."""
        return self.end_block - self.start_block + 1

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


MilestoneResponse = HeimdallResponse[Milestone]
MilestoneCountResponse = HeimdallResponse[Count]
