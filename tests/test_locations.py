"""Geocoding endpoint tests."""

import pytest

from jobo import GeocodeMethod
from jobo.errors import ErrorKind, JoboError

GEOCODE = "/api/locations/geocode"


async def test_geocode(fake_api, client):
    fake_api.respond("GET", GEOCODE, {
        "input": "San Francisco, CA",
        "succeeded": True,
        "method": "geocoder",
        "locations": [{
            "display_name": "San Francisco, California, United States",
            "city": "San Francisco",
            "region": "California",
            "country": "United States",
            "country_code": "US",
            "latitude": 37.7749,
            "longitude": -122.4194,
        }],
    })

    result = await client.locations.geocode("San Francisco, CA")

    assert fake_api.requests[0].query == {"location": "San Francisco, CA"}
    assert result.succeeded
    assert result.method is GeocodeMethod.GEOCODER
    location = result.locations[0]
    assert location.country_code == "US"
    assert location.latitude == pytest.approx(37.7749)


async def test_geocode_unresolved(fake_api, client):
    fake_api.respond("GET", GEOCODE, {
        "input": "invalidlocationxyz123",
        "succeeded": False,
        "error": "No match",
    })

    result = await client.locations.geocode("invalidlocationxyz123")

    assert not result.succeeded
    assert result.locations == []
    assert result.error == "No match"


async def test_geocode_validation_error(fake_api, client):
    fake_api.respond("GET", GEOCODE, {"detail": "location is required"}, status=400)

    with pytest.raises(JoboError) as exc_info:
        await client.locations.geocode("")

    assert exc_info.value.kind == ErrorKind.VALIDATION
