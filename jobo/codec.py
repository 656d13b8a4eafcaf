"""
JSON body and query-string codec.

Request models are dumped with their snake_case wire names and without
unset optional fields. Response bodies are validated into models; an
empty body decodes to the model's defaults rather than failing.
"""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel

from jobo.models import as_utc

M = TypeVar("M", bound=BaseModel)


def format_datetime(dt: datetime) -> str:
    """ISO-8601 in UTC with a Z suffix."""
    return as_utc(dt).isoformat().replace("+00:00", "Z")


def encode_body(model: BaseModel) -> Dict[str, Any]:
    """Dump a request model to a JSON-ready dict."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def decode_body(model_cls: Type[M], text: str) -> M:
    """
    Validate a response body into ``model_cls``.

    A blank body or a JSON ``null`` yields ``model_cls()``. Malformed JSON
    and shape mismatches raise (ValueError / pydantic.ValidationError).
    """
    if not text or not text.strip():
        return model_cls()
    data = json.loads(text)
    if data is None:
        return model_cls()
    return model_cls.model_validate(data)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def build_query(params: Mapping[str, Any]) -> Dict[str, str]:
    """Turn keyword params into query-string pairs, dropping empty ones."""
    query: Dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, str) and not value:
            continue
        query[key] = _query_value(value)
    return query


def query_from_model(model: BaseModel) -> Dict[str, str]:
    """Query-string pairs for a request model sent as GET parameters."""
    return build_query(model.model_dump(by_alias=True, exclude_none=True))
