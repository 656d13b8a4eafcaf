"""
HTTP transport for the Jobo API.

Wraps an aiohttp session configured with the base URL, the fixed
headers (API key, user agent, accept) and a per-request timeout.
One attempt per request: no retries, no caching. Connection errors and
timeouts surface as aiohttp.ClientError / asyncio.TimeoutError.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import aiohttp

from jobo.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


@dataclass
class TransportResponse:
    """Status, headers and body of one HTTP exchange."""
    method: str
    url: str
    status: int = 0
    headers: Mapping[str, str] = field(default_factory=dict)
    text: str = ""
    elapsed_ms: float = 0

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HttpTransport:
    """
    Async HTTP transport bound to one Jobo deployment.

    When no session is supplied the transport creates its own on first
    use and closes it in close(). A supplied session is borrowed: the
    caller configures it and is responsible for closing it.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        if session is None and not (api_key or "").strip():
            raise ValueError("api_key is required")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.user_agent = user_agent
        self.owns_session = session is None
        self._session: Optional[aiohttp.ClientSession] = session

    @property
    def headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }
        if self.api_key:
            headers["X-Api-Key"] = self.api_key
        return headers

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    async def __aenter__(self) -> "HttpTransport":
        await self.start()
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def start(self) -> None:
        """Initialize the HTTP session if this transport owns it."""
        if not self.owns_session:
            return
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers=self.headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout_s),
            )

    async def close(self) -> None:
        """Close the HTTP session, but only if this transport created it."""
        if not self.owns_session:
            return
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """
        Send one request and read the whole response body.

        Args:
            method: HTTP method
            path: Path relative to the base URL, e.g. "/api/jobs"
            json: JSON-ready body, if any
            params: Query-string pairs, if any

        Returns:
            TransportResponse for any status code; callers classify failures
        """
        if self._session is None:
            await self.start()

        url = f"{self.base_url}{path}"
        # Borrowed sessions keep their own headers unless a key was given
        headers = self.headers if (not self.owns_session and self.api_key) else None
        start_time = time.time()

        async with self._session.request(
            method,
            url,
            json=json,
            params=params,
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=self.timeout_s),
        ) as resp:
            text = await resp.text(errors="replace")
            result = TransportResponse(
                method=method,
                url=str(resp.url),
                status=resp.status,
                headers=dict(resp.headers),
                text=text,
                elapsed_ms=(time.time() - start_time) * 1000,
            )

        logger.debug("%s %s -> %d (%.0fms)", method, path, result.status, result.elapsed_ms)
        return result
