"""
Wire models for the Jobo API.

Provides:
- Job and its nested company/location/compensation shapes
- Feed, search, geocoding and auto-apply request/response models
- GeocodeMethod enum for structured classification

All models use snake_case wire names. Fields whose Python name differs
from the wire name carry an alias.
"""

from __future__ import annotations

import base64
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ----------------------------- Utilities -----------------------------

def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


class JoboModel(BaseModel):
    """Base for every wire model."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ----------------------------- Enums -----------------------------

class GeocodeMethod(str, Enum):
    """How the server resolved a location string."""
    CACHE = "cache"
    PATTERN_PARSE = "pattern_parse"
    GEOCODER = "geocoder"
    LLM = "llm"
    REMOTE_KEYWORD = "remote_keyword"
    UNKNOWN = "unknown"


# ----------------------------- Job -----------------------------

class JobCompany(JoboModel):
    id: Optional[UUID] = None
    name: str = ""


class JobLocation(JoboModel):
    location: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class JobCompensation(JoboModel):
    min: Optional[float] = None
    max: Optional[float] = None
    currency: Optional[str] = None
    period: Optional[str] = None
    raw_text: Optional[str] = None
    is_estimated: bool = False


class Job(JoboModel):
    """A job listing returned by the feed and search endpoints."""

    id: Optional[UUID] = None
    title: str = ""
    company: JobCompany = Field(default_factory=JobCompany)
    description: str = ""
    listing_url: str = ""
    apply_url: str = ""
    locations: List[JobLocation] = []
    compensation: Optional[JobCompensation] = None
    employment_type: Optional[str] = None
    workplace_type: Optional[str] = None
    experience_level: Optional[str] = None
    source: str = ""
    source_id: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    date_posted: Optional[datetime] = None
    valid_through: Optional[datetime] = None
    is_remote: bool = False


# ----------------------------- Feed -----------------------------

class LocationFilter(JoboModel):
    """Structured location filter for the feed endpoint."""

    country: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None


class JobFeedRequest(JoboModel):
    """Body of POST /api/feed/jobs."""

    locations: Optional[List[LocationFilter]] = None
    sources: Optional[List[str]] = None
    is_remote: Optional[bool] = None
    posted_after: Optional[datetime] = None
    cursor: Optional[str] = None
    batch_size: int = 1000

    @field_validator("posted_after")
    @classmethod
    def _posted_after_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class JobFeedResponse(JoboModel):
    jobs: List[Job] = []
    next_cursor: Optional[str] = None
    has_more: bool = False

    @property
    def items(self) -> List[Job]:
        return self.jobs


class ExpiredJobIdsRequest(JoboModel):
    """Query of GET /api/feed/jobs/expired."""

    expired_since: datetime
    cursor: Optional[str] = None
    batch_size: int = 1000

    @field_validator("expired_since")
    @classmethod
    def _expired_since_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class ExpiredJobIdsResponse(JoboModel):
    job_ids: List[UUID] = []
    next_cursor: Optional[str] = None
    has_more: bool = False

    @property
    def items(self) -> List[UUID]:
        return self.job_ids


# ----------------------------- Search -----------------------------

class JobSearchRequest(JoboModel):
    """Body of POST /api/jobs/search."""

    queries: Optional[List[str]] = None
    locations: Optional[List[str]] = None
    sources: Optional[List[str]] = None
    is_remote: Optional[bool] = None
    posted_after: Optional[datetime] = None
    page: int = 1
    page_size: int = 25

    @field_validator("posted_after")
    @classmethod
    def _posted_after_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class JobSearchResponse(JoboModel):
    jobs: List[Job] = []
    total_items: int = Field(0, alias="total")
    page: int = 1
    page_size: int = 25
    total_pages: int = 0

    @property
    def items(self) -> List[Job]:
        return self.jobs


# ----------------------------- Geocoding -----------------------------

class GeocodedLocation(JoboModel):
    display_name: str = ""
    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None  # ISO 3166-1 alpha-2
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class GeocodeResult(JoboModel):
    """Response of GET /api/locations/geocode."""

    input: str = ""
    succeeded: bool = False
    locations: List[GeocodedLocation] = []
    method: Optional[GeocodeMethod] = None
    error: Optional[str] = None

    @field_validator("method", mode="before")
    @classmethod
    def _known_method(cls, v: object) -> object:
        if isinstance(v, str) and v not in GeocodeMethod._value2member_map_:
            return GeocodeMethod.UNKNOWN
        return v


# ----------------------------- Auto apply -----------------------------

class FieldAnswerFile(JoboModel):
    file_name: str = ""
    content_type: str = ""
    data: str = ""  # base64

    @classmethod
    def from_bytes(cls, file_name: str, content_type: str, content: bytes) -> "FieldAnswerFile":
        """Build a file answer from raw bytes."""
        return cls(
            file_name=file_name,
            content_type=content_type,
            data=base64.b64encode(content).decode("ascii"),
        )


class FieldAnswer(JoboModel):
    field_id: str = ""
    value: Optional[str] = None
    values: Optional[List[str]] = None
    files: Optional[List[FieldAnswerFile]] = None


class StartAutoApplySessionRequest(JoboModel):
    apply_url: str = ""


class SetAutoApplyAnswersRequest(JoboModel):
    session_id: UUID
    answers: List[FieldAnswer] = []


class FieldOption(JoboModel):
    value: str = ""
    label: Optional[str] = None


class FieldValidations(JoboModel):
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None


class FormFieldInfo(JoboModel):
    """A form field discovered on the apply page."""

    id: str = ""
    type: str = ""
    label: Optional[str] = None
    required: bool = False
    placeholder: Optional[str] = None
    options: Optional[List[FieldOption]] = None
    validations: Optional[FieldValidations] = None


class FieldValidationError(JoboModel):
    field_id: str = ""
    message: str = ""


class AutoApplySessionResponse(JoboModel):
    """State of an auto-apply session after start or set-answers."""

    session_id: Optional[UUID] = None
    provider_id: str = ""
    provider_display_name: str = ""
    success: bool = False
    status: str = ""
    error: Optional[str] = None
    current_url: Optional[str] = None
    is_terminal: bool = False
    validation_errors: List[FieldValidationError] = []
    fields: List[FormFieldInfo] = []
