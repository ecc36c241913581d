"""Shared Heimdall client constants.

This module centralizes endpoint paths, page sizes and timing defaults used by
the REST runtime and the client facade so they stay small and focused.
"""

from __future__ import annotations

# Local Heimdall REST server, as started by a default heimdalld install
DEFAULT_HEIMDALL_URL = "http://localhost:1317"

# Timing (seconds)
API_HEIMDALL_TIMEOUT = 5.0  # per-attempt HTTP timeout
RETRY_CALL = 5.0  # fixed period between attempts, no backoff

# Failed attempts after the first are only reported every LOG_EACH attempts
LOG_EACH = 5

# State sync pagination
STATE_FETCH_LIMIT = 50

# REST paths
FETCH_CHECKPOINT_PATH = "/checkpoints/latest"
FETCH_CHECKPOINT_COUNT_PATH = "/checkpoints/count"

FETCH_MILESTONE_PATH = "/milestone"
FETCH_MILESTONE_COUNT_PATH = "/milestone/count"

FETCH_SPAN_FORMAT = "bor/span/{span_id}"

FETCH_STATE_SYNC_EVENTS_PATH = "clerk/event-record/list"
