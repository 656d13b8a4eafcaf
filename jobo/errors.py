"""
Error taxonomy for the Jobo API.

Every non-2xx response is turned into exactly one ApiError value and
raised to the caller wrapped in a JoboError. Nothing here retries:
callers decide what to do with a rate limit or a server failure.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Classification of a failed API call."""
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    SERVER = "server"
    GENERIC = "generic"

    @classmethod
    def from_status(cls, status: int) -> "ErrorKind":
        """Map a non-2xx HTTP status onto an error kind."""
        if status == 401:
            return cls.AUTHENTICATION
        if status == 429:
            return cls.RATE_LIMIT
        if status == 400:
            return cls.VALIDATION
        if status >= 500:
            return cls.SERVER
        return cls.GENERIC


@dataclass(frozen=True)
class ApiError:
    """A classified API failure."""
    kind: ErrorKind
    status_code: int
    detail: Optional[str] = None
    response_body: Optional[str] = None
    retry_after_seconds: Optional[int] = None  # RATE_LIMIT only

    @property
    def message(self) -> str:
        if self.detail:
            return f"HTTP {self.status_code}: {self.detail}"
        return f"HTTP {self.status_code}"


class JoboError(Exception):
    """
    Raised for any non-2xx response from the Jobo API.

    Branch on ``err.kind`` to decide between retrying, refreshing the
    API key, or giving up.
    """

    def __init__(self, error: ApiError):
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def status_code(self) -> int:
        return self.error.status_code

    @property
    def detail(self) -> Optional[str]:
        return self.error.detail

    @property
    def response_body(self) -> Optional[str]:
        return self.error.response_body

    @property
    def retry_after_seconds(self) -> Optional[int]:
        return self.error.retry_after_seconds

    def __repr__(self) -> str:
        return f"JoboError(kind={self.kind.value!r}, status_code={self.status_code})"


def is_success(status: int) -> bool:
    return 200 <= status < 300


def extract_detail(body: str) -> Optional[str]:
    """
    Pull a human-readable detail out of an error body.

    Reads the ``detail`` field of a JSON object. When the body is not a
    JSON object at all, or ``detail`` is not a string, the whole raw body
    is returned instead. That means HTML error pages end up in the
    message; callers relying on short messages should truncate.
    """
    if not body:
        return None
    try:
        data: Any = json.loads(body)
    except ValueError:
        return body
    if not isinstance(data, dict):
        return body
    value = data.get("detail")
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return body


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup that works for plain dicts too."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, val in headers.items():
        if key.lower() == lowered:
            return val
    return None


def parse_retry_after(headers: Mapping[str, str]) -> Optional[int]:
    """Parse Retry-After as whole seconds; HTTP-date values are ignored."""
    raw = _header(headers, "Retry-After")
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def classify_response(
    status: int,
    headers: Mapping[str, str],
    body: str,
) -> Optional[ApiError]:
    """
    Classify an HTTP response.

    Args:
        status: HTTP status code
        headers: Response headers
        body: Raw response body text

    Returns:
        None for 2xx responses, otherwise the ApiError describing the failure
    """
    if is_success(status):
        return None

    kind = ErrorKind.from_status(status)
    retry_after = parse_retry_after(headers) if kind == ErrorKind.RATE_LIMIT else None

    return ApiError(
        kind=kind,
        status_code=status,
        detail=extract_detail(body),
        response_body=body or None,
        retry_after_seconds=retry_after,
    )


def raise_for_response(status: int, headers: Mapping[str, str], body: str) -> None:
    """Raise JoboError for a non-2xx response; no-op on success."""
    error = classify_response(status, headers, body)
    if error is None:
        return
    logger.info("Jobo API call failed (%s): %s", error.kind.value, error.message)
    raise JoboError(error)
