"""Memory session store for local development and tests."""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Set

from ...core.entities import RefreshToken, DEFAULT_TTL_SECONDS
from ...core.exceptions import DuplicateTokenError, NotFoundError
from ...core.value_objects import ExpiryPolicy
from ...utils.datetime import Clock, utc_now

logger = logging.getLogger(__name__)


class MemorySessionStore:
    """Memory-based session store following maximum separation principle.

    Handles ONLY in-process storage of refresh-token sessions, with the same
    time-to-live semantics as the Redis store. Expiry is evaluated lazily
    against the injected clock, so tests can move time forward.
    """

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        expiry_policy: ExpiryPolicy = ExpiryPolicy.SLIDING,
        clock: Clock = utc_now,
    ):
        if ttl_seconds <= 0:
            raise ValueError("TTL must be a positive number of seconds")
        self.ttl_seconds = ttl_seconds
        self.expiry_policy = expiry_policy
        self._clock = clock

        # token -> session
        self._sessions: Dict[str, RefreshToken] = {}
        # token -> expiry instant
        self._expires_at: Dict[str, datetime] = {}

        # Indexes for efficient lookups
        self._user_tokens: Dict[int, Set[str]] = {}
        self._username_tokens: Dict[str, Set[str]] = {}

    def _evict(self, token: str) -> None:
        session = self._sessions.pop(token, None)
        self._expires_at.pop(token, None)
        if session is None:
            return
        for index, key in ((self._user_tokens, session.user_id), (self._username_tokens, session.username)):
            members = index.get(key)
            if members is not None:
                members.discard(token)
                if not members:
                    del index[key]

    def _live(self, token: str) -> Optional[RefreshToken]:
        session = self._sessions.get(token)
        if session is None:
            return None
        if self._clock() >= self._expires_at[token]:
            self._evict(token)
            logger.debug(f"Expired refresh token {session.mask_for_logging()}")
            return None
        return session

    def _collect(self, tokens: Optional[Set[str]]) -> List[RefreshToken]:
        sessions = []
        for token in list(tokens or ()):
            session = self._live(token)
            if session is not None:
                sessions.append(session)
        return sessions

    async def create(
        self,
        token: str,
        user_id: int,
        username: str,
        device_info: Optional[str] = None,
    ) -> RefreshToken:
        if self._live(token) is not None:
            raise DuplicateTokenError(token)

        session = RefreshToken.issue(
            token, user_id, username, device_info, now=self._clock(), ttl=self.ttl_seconds
        )
        self._sessions[token] = session
        self._expires_at[token] = session.expires_at(self.expiry_policy)
        self._user_tokens.setdefault(user_id, set()).add(token)
        self._username_tokens.setdefault(username, set()).add(token)
        return session

    async def find_by_token(self, token: str) -> Optional[RefreshToken]:
        return self._live(token)

    async def find_by_user_id(self, user_id: int) -> List[RefreshToken]:
        return self._collect(self._user_tokens.get(user_id))

    async def find_by_username(self, username: str) -> List[RefreshToken]:
        return self._collect(self._username_tokens.get(username))

    async def exists_by_token(self, token: str) -> bool:
        return self._live(token) is not None

    async def touch(self, token: str) -> RefreshToken:
        session = self._live(token)
        if session is None:
            raise NotFoundError(token=token)

        updated = session.touched(self._clock())
        self._sessions[token] = updated
        if self.expiry_policy.resets_on_touch:
            self._expires_at[token] = updated.expires_at(self.expiry_policy)
        return updated

    async def delete_by_token(self, token: str) -> None:
        self._evict(token)

    async def consume(self, token: str) -> Optional[RefreshToken]:
        session = self._live(token)
        if session is not None:
            self._evict(token)
        return session

    async def delete_by_user_id(self, user_id: int) -> int:
        sessions = self._collect(self._user_tokens.get(user_id))
        for session in sessions:
            self._evict(session.token)
        logger.info(f"Revoked {len(sessions)} refresh tokens for user ID: {user_id}")
        return len(sessions)

    async def delete_by_username(self, username: str) -> int:
        sessions = self._collect(self._username_tokens.get(username))
        for session in sessions:
            self._evict(session.token)
        logger.info(f"Revoked {len(sessions)} refresh tokens for username: {username}")
        return len(sessions)

    async def ping(self) -> bool:
        return True
