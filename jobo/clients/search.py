"""
Job search endpoints.

GET  /api/jobs         - simple query-string search
POST /api/jobs/search  - advanced body-based search
"""

from __future__ import annotations

from datetime import datetime
from typing import AsyncIterator, Optional

from jobo.clients.base import EndpointClient
from jobo.codec import build_query
from jobo.models import Job, JobSearchRequest, JobSearchResponse
from jobo.pagination import iter_pages


class SearchClient(EndpointClient):
    """Client for full-text job search."""

    async def search(
        self,
        q: Optional[str] = None,
        location: Optional[str] = None,
        sources: Optional[str] = None,
        remote: Optional[bool] = None,
        posted_after: Optional[datetime] = None,
        page: int = 1,
        page_size: int = 25,
    ) -> JobSearchResponse:
        """
        Search jobs using simple query parameters.

        Args:
            q: Free-text query
            location: Location text
            sources: Comma-separated source names
            remote: Restrict to remote (True) or non-remote (False) jobs
            posted_after: Only jobs posted after this UTC timestamp
            page: 1-based page number
            page_size: Results per page
        """
        params = build_query({
            "q": q,
            "location": location,
            "sources": sources,
            "remote": remote,
            "posted_after": posted_after,
            "page": page,
            "page_size": page_size,
        })
        return await self._get(JobSearchResponse, "/api/jobs", params=params)

    async def search_advanced(self, request: JobSearchRequest) -> JobSearchResponse:
        """Search jobs using the body-based endpoint."""
        return await self._post(JobSearchResponse, "/api/jobs/search", request)

    def iter_jobs(self, request: Optional[JobSearchRequest] = None) -> AsyncIterator[Job]:
        """
        Iterate every result of an advanced search, page by page.

        Starts at page 1 regardless of ``request.page`` and stops once the
        fetched page reaches ``total_pages``.
        """
        return iter_pages(self.search_advanced, request or JobSearchRequest())
