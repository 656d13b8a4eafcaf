"""
Geocoding endpoint: GET /api/locations/geocode
"""

from __future__ import annotations

from jobo.clients.base import EndpointClient
from jobo.codec import build_query
from jobo.models import GeocodeResult


class LocationsClient(EndpointClient):
    """Client for location resolution."""

    async def geocode(self, location: str) -> GeocodeResult:
        """Geocode a location string such as "San Francisco, CA"."""
        return await self._get(
            GeocodeResult,
            "/api/locations/geocode",
            params=build_query({"location": location}),
        )
