"""HTTP client helper."""

from __future__ import annotations

from typing import Optional

import aiohttp
from yarl import URL

from bor.heimdall.config import API_HEIMDALL_TIMEOUT
from bor.heimdall.core.exceptions import UnsuccessfulResponseError


class HTTPClient:
    """Async HTTP client wrapper.

    The session is shared by every request of one Heimdall client and is only
    read from per call; its total timeout bounds each attempt.
    """

    def __init__(self, timeout: float = API_HEIMDALL_TIMEOUT) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(self, url: URL | str) -> bytes | None:
        """GET request.

        Returns:
            Raw body for 200, None for 204 (no content)

        Raises:
            UnsuccessfulResponseError: For any other status code
        """
        async with self.session.get(url) as response:
            if response.status not in (200, 204):
                raise UnsuccessfulResponseError(response.status)
            if response.status == 204:
                return None
            return await response.read()

    async def close(self) -> None:
        """Close session, releasing idle connections."""
        if self._session and not self._session.closed:
            await self._session.close()
