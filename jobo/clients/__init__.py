"""
Endpoint clients for the Jobo API.

Each client covers one feature area and shares the transport owned by
JoboClient.
"""

from jobo.clients.base import EndpointClient
from jobo.clients.feed import FeedClient
from jobo.clients.search import SearchClient
from jobo.clients.locations import LocationsClient
from jobo.clients.auto_apply import AutoApplyClient

__all__ = [
    "EndpointClient",
    "FeedClient",
    "SearchClient",
    "LocationsClient",
    "AutoApplyClient",
]
