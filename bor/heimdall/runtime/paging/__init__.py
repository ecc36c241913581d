"""Cursor pagination layer.

Architecture:
    - definitions.py: Cursor and result structures (EventCursor, PageResult)
    - executors.py: Page walking and ordering (PageExecutor)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import EventCursor, PageResult
from .executors import PageExecutor

__all__ = [
    "EventCursor",
    "PageExecutor",
    "PageResult",
]
