"""
Base class for Jobo endpoint clients.
"""

from __future__ import annotations

from typing import Mapping, Optional, Type, TypeVar, TYPE_CHECKING

from pydantic import BaseModel

from jobo.codec import decode_body, encode_body
from jobo.errors import raise_for_response

if TYPE_CHECKING:
    from jobo.transport import HttpTransport, TransportResponse

M = TypeVar("M", bound=BaseModel)


class EndpointClient:
    """
    Shared request plumbing for the feed, search, locations and
    auto-apply clients.

    Each call is one request: encode the body, send it, raise JoboError
    on a non-2xx status, decode the body into the response model.
    """

    def __init__(self, transport: "HttpTransport"):
        self.transport = transport

    async def _checked(
        self,
        method: str,
        path: str,
        *,
        body: Optional[BaseModel] = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> "TransportResponse":
        resp = await self.transport.request(
            method,
            path,
            json=encode_body(body) if body is not None else None,
            params=params,
        )
        raise_for_response(resp.status, resp.headers, resp.text)
        return resp

    async def _get(
        self,
        model_cls: Type[M],
        path: str,
        params: Optional[Mapping[str, str]] = None,
    ) -> M:
        resp = await self._checked("GET", path, params=params)
        return decode_body(model_cls, resp.text)

    async def _post(self, model_cls: Type[M], path: str, body: BaseModel) -> M:
        resp = await self._checked("POST", path, body=body)
        return decode_body(model_cls, resp.text)

    async def _delete(self, path: str) -> bool:
        """DELETE returning True on 2xx and False on 404."""
        resp = await self.transport.request("DELETE", path)
        if resp.ok:
            return True
        if resp.status == 404:
            return False
        raise_for_response(resp.status, resp.headers, resp.text)
        return False
