"""Check session active query."""

from ...core.protocols import SessionStore


class CheckSessionActive:
    """Query whether a refresh token still has a live session."""

    def __init__(self, session_store: SessionStore):
        self._session_store = session_store

    async def execute(self, token: str) -> bool:
        if not token:
            return False
        return await self._session_store.exists_by_token(token)
