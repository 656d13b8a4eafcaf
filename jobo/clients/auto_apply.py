"""
Auto-apply endpoints.

POST   /api/auto-apply/start          - open a session for an apply URL
POST   /api/auto-apply/set-answers    - fill form fields
DELETE /api/auto-apply/sessions/{id}  - end a session
"""

from __future__ import annotations

from typing import List, Union
from uuid import UUID

from jobo.clients.base import EndpointClient
from jobo.models import (
    AutoApplySessionResponse,
    FieldAnswer,
    SetAutoApplyAnswersRequest,
    StartAutoApplySessionRequest,
)


class AutoApplyClient(EndpointClient):
    """Client for automated application form filling."""

    async def start_session(self, apply_url: str) -> AutoApplySessionResponse:
        """Start a session for the apply URL of a job listing."""
        request = StartAutoApplySessionRequest(apply_url=apply_url)
        return await self._post(AutoApplySessionResponse, "/api/auto-apply/start", request)

    async def set_answers(
        self,
        session_id: Union[UUID, str],
        answers: List[FieldAnswer],
    ) -> AutoApplySessionResponse:
        """Submit answers for the form fields of an active session."""
        request = SetAutoApplyAnswersRequest(session_id=session_id, answers=answers)
        return await self._post(AutoApplySessionResponse, "/api/auto-apply/set-answers", request)

    async def end_session(self, session_id: Union[UUID, str]) -> bool:
        """
        End a session.

        Returns:
            True if the session was ended, False if it did not exist
        """
        return await self._delete(f"/api/auto-apply/sessions/{UUID(str(session_id))}")
