"""List user sessions query."""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ...core.entities import RefreshToken
from ...core.protocols import SessionStore


@dataclass(frozen=True)
class SessionSummary:
    """Summary information for one active session."""

    token: str
    device_info: Optional[str]
    created_at: datetime
    last_used_at: datetime

    @classmethod
    def from_session(cls, session: RefreshToken) -> 'SessionSummary':
        return cls(
            token=session.token,
            device_info=session.device_info,
            created_at=session.created_at,
            last_used_at=session.last_used_at,
        )


class ListUserSessions:
    """Query for the active sessions of an account, most recently used first."""

    def __init__(self, session_store: SessionStore):
        self._session_store = session_store

    async def execute(self, user_id: int) -> List[SessionSummary]:
        sessions = await self._session_store.find_by_user_id(user_id)
        sessions.sort(key=lambda s: s.last_used_at, reverse=True)
        return [SessionSummary.from_session(s) for s in sessions]
