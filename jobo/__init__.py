"""
Jobo: typed async client for the Jobo Enterprise job-listings API.

Covers the bulk jobs feed, job search, geocoding and auto-apply, with
lazy pagination helpers and a typed error taxonomy.
"""

__version__ = "2.0.0"

from jobo.client import JoboClient
from jobo.config import JoboSettings, get_settings
from jobo.errors import ApiError, ErrorKind, JoboError
from jobo.models import (
    FieldAnswer,
    FieldAnswerFile,
    GeocodeMethod,
    GeocodeResult,
    Job,
    JobFeedRequest,
    JobSearchRequest,
    LocationFilter,
)

__all__ = [
    "JoboClient",
    "JoboSettings",
    "get_settings",
    "ApiError",
    "ErrorKind",
    "JoboError",
    "FieldAnswer",
    "FieldAnswerFile",
    "GeocodeMethod",
    "GeocodeResult",
    "Job",
    "JobFeedRequest",
    "JobSearchRequest",
    "LocationFilter",
]
