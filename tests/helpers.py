"""Fake Jobo server and payload builders shared by the tests."""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from aiohttp import web

API_KEY = "test-api-key"


@dataclass
class RecordedRequest:
    method: str
    path: str
    query: Dict[str, str]
    headers: Any
    body: Any = None


@dataclass
class ScriptedResponse:
    status: int = 200
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    delay_s: float = 0


class FakeJobo:
    """
    In-process stand-in for the Jobo API.

    Responses are queued per (method, path) and served in order; the last
    one is repeated once the queue runs dry. Every request is recorded.
    """

    def __init__(self):
        self.requests: List[RecordedRequest] = []
        self._routes: Dict[Tuple[str, str], List[ScriptedResponse]] = {}
        self.app = web.Application()
        self.app.router.add_route("*", "/{tail:.*}", self._handle)
        self.base_url = ""

    def respond(
        self,
        method: str,
        path: str,
        body: Any = None,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
        delay_s: float = 0,
    ) -> None:
        self._routes.setdefault((method, path), []).append(
            ScriptedResponse(status=status, body=body, headers=headers or {}, delay_s=delay_s)
        )

    def calls(self, method: str, path: str) -> List[RecordedRequest]:
        return [r for r in self.requests if r.method == method and r.path == path]

    async def _handle(self, request: web.Request) -> web.Response:
        text = await request.text()
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.path,
                query=dict(request.query),
                headers=request.headers.copy(),
                body=json.loads(text) if text else None,
            )
        )

        queue = self._routes.get((request.method, request.path))
        if not queue:
            return web.json_response({"detail": "Not Found"}, status=404)
        scripted = queue.pop(0) if len(queue) > 1 else queue[0]

        if scripted.delay_s:
            await asyncio.sleep(scripted.delay_s)
        if scripted.body is None:
            return web.Response(status=scripted.status, headers=scripted.headers)
        if isinstance(scripted.body, str):
            return web.Response(
                status=scripted.status,
                text=scripted.body,
                headers=scripted.headers,
                content_type="text/html",
            )
        return web.json_response(scripted.body, status=scripted.status, headers=scripted.headers)


def make_job(n: int, **overrides: Any) -> Dict[str, Any]:
    """A job payload as the API returns it."""
    job = {
        "id": f"00000000-0000-0000-0000-{n:012d}",
        "title": f"Engineer {n}",
        "company": {"id": "11111111-1111-1111-1111-111111111111", "name": "Acme"},
        "description": "Build things",
        "listing_url": f"https://jobs.example.com/{n}",
        "apply_url": f"https://jobs.example.com/{n}/apply",
        "locations": [{"city": "Berlin", "country": "Germany"}],
        "source": "greenhouse",
        "source_id": str(n),
        "created_at": "2026-10-01T12:00:00Z",
        "updated_at": "2026-10-02T12:00:00Z",
        "is_remote": False,
    }
    job.update(overrides)
    return job
