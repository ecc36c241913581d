"""Generic Heimdall response envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

ResultT = TypeVar("ResultT")


class HeimdallResponse(BaseModel, Generic[ResultT]):
    """``{"height": ..., "result": ...}`` wrapper returned by every endpoint."""

    height: str
    result: ResultT

    model_config = ConfigDict(frozen=True)
