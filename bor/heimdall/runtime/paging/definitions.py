"""Pagination cursor and result structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class EventCursor:
    """Position in the event-record stream.

    The page executor advances ``from_id`` between pages; nothing else
    mutates a cursor.

    Attributes:
        from_id: Id of the first record of the next page
        to: Upper bound on record time (unix seconds), fixed for the whole run
    """

    from_id: int
    to: int

    def __post_init__(self) -> None:
        if self.from_id < 0:
            raise ValueError("from_id must be >= 0")


@dataclass(frozen=True)
class PageResult:
    """Result of a pagination run.

    Attributes:
        data: All records, sorted ascending by identifier
        pages_used: Number of page requests issued
    """

    data: list[Any] = field(default_factory=list)
    pages_used: int = 0

    @property
    def total_records(self) -> int:
        return len(self.data)
