"""
Jobs feed endpoints.

POST /api/feed/jobs          - bulk job feed, cursor-paginated
GET  /api/feed/jobs/expired  - IDs of jobs expired since a timestamp
"""

from __future__ import annotations

from datetime import datetime
from typing import AsyncIterator, Optional
from uuid import UUID

from jobo.clients.base import EndpointClient
from jobo.codec import query_from_model
from jobo.models import (
    ExpiredJobIdsRequest,
    ExpiredJobIdsResponse,
    Job,
    JobFeedRequest,
    JobFeedResponse,
)
from jobo.pagination import iter_cursor


class FeedClient(EndpointClient):
    """Client for the bulk jobs feed."""

    async def get_jobs(self, request: JobFeedRequest) -> JobFeedResponse:
        """Fetch a single batch of jobs from the feed."""
        return await self._post(JobFeedResponse, "/api/feed/jobs", request)

    def iter_jobs(self, request: Optional[JobFeedRequest] = None) -> AsyncIterator[Job]:
        """
        Iterate every job in the feed, following cursors until the server
        reports no more data.

        The iteration always starts from the beginning of the feed; any
        cursor already set on ``request`` is ignored.
        """
        return iter_cursor(self.get_jobs, request or JobFeedRequest())

    async def get_expired_job_ids(
        self,
        expired_since: datetime,
        cursor: Optional[str] = None,
        batch_size: int = 1000,
    ) -> ExpiredJobIdsResponse:
        """
        Fetch a single batch of expired job IDs.

        Args:
            expired_since: UTC timestamp, at most 7 days in the past
            cursor: Cursor from a previous response
            batch_size: IDs per batch (1-10000)
        """
        request = ExpiredJobIdsRequest(
            expired_since=expired_since,
            cursor=cursor,
            batch_size=batch_size,
        )
        return await self._fetch_expired(request)

    def iter_expired_job_ids(
        self,
        expired_since: datetime,
        batch_size: int = 1000,
    ) -> AsyncIterator[UUID]:
        """Iterate every job ID expired since ``expired_since``."""
        request = ExpiredJobIdsRequest(expired_since=expired_since, batch_size=batch_size)
        return iter_cursor(self._fetch_expired, request)

    async def _fetch_expired(self, request: ExpiredJobIdsRequest) -> ExpiredJobIdsResponse:
        return await self._get(
            ExpiredJobIdsResponse,
            "/api/feed/jobs/expired",
            params=query_from_model(request),
        )
