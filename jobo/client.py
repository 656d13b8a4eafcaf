"""
Top-level Jobo API client.
"""

from __future__ import annotations

from typing import Optional

import aiohttp

from jobo.clients import AutoApplyClient, FeedClient, LocationsClient, SearchClient
from jobo.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_S,
    DEFAULT_USER_AGENT,
    JoboSettings,
    get_settings,
)
from jobo.transport import HttpTransport


class JoboClient:
    """
    Client for the Jobo Enterprise API.

    Feature areas are exposed as sub-clients:
    - feed: bulk job feed with cursor pagination
    - search: full-text job search with page pagination
    - locations: geocoding
    - auto_apply: automated application form filling

    Use as an async context manager, or call close() when done. The
    underlying aiohttp session is closed only if this client created it.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Args:
            api_key: Jobo API key; required unless ``session`` is given
            base_url: API base URL
            timeout_s: Timeout for each HTTP request, in seconds
            user_agent: User-Agent header value
            session: Existing aiohttp session to borrow instead of creating one
        """
        self.transport = HttpTransport(
            api_key=api_key,
            base_url=base_url,
            timeout_s=timeout_s,
            user_agent=user_agent,
            session=session,
        )
        self.feed = FeedClient(self.transport)
        self.search = SearchClient(self.transport)
        self.locations = LocationsClient(self.transport)
        self.auto_apply = AutoApplyClient(self.transport)

    @classmethod
    def from_settings(cls, settings: JoboSettings) -> "JoboClient":
        """Create a client from a settings object."""
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            timeout_s=settings.timeout_s,
            user_agent=settings.user_agent,
        )

    @classmethod
    def from_env(cls) -> "JoboClient":
        """Create a client from JOBO_* environment variables."""
        return cls.from_settings(get_settings())

    @property
    def owns_session(self) -> bool:
        return self.transport.owns_session

    async def __aenter__(self) -> "JoboClient":
        await self.transport.start()
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def close(self) -> None:
        await self.transport.close()
