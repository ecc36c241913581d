"""Validator span data models."""

from pydantic import BaseModel, ConfigDict, Field

from .envelope import HeimdallResponse


class Validator(BaseModel):
    """Validator entry as serialized by Heimdall."""

    id: int = Field(0, alias="ID")
    signer: str = ""
    voting_power: int = Field(0, alias="power")
    proposer_priority: int = Field(0, alias="accum")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ValidatorSet(BaseModel):
    """Validator set with its current proposer."""

    validators: list[Validator] = Field(default_factory=list)
    proposer: Validator | None = None

    @property
    def total_voting_power(self) -> int:
        """Sum of voting power across the set."""
        return sum(v.voting_power for v in self.validators)

    model_config = ConfigDict(frozen=True)


class HeimdallSpan(BaseModel):
    """Range of Bor blocks produced by a fixed set of block producers."""

    id: int = Field(0, alias="span_id")
    start_block: int = 0
    end_block: int = 0
    validator_set: ValidatorSet = Field(default_factory=ValidatorSet)
    selected_producers: list[Validator] = Field(default_factory=list)
    chain_id: str = Field("", alias="bor_chain_id")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


SpanResponse = HeimdallResponse[HeimdallSpan]
