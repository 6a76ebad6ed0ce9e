"""Redis session store for refresh tokens."""

import json
import logging
from typing import Any, Iterable, List, Optional

from redis.exceptions import RedisError

from ...core.entities import RefreshToken, DEFAULT_TTL_SECONDS
from ...core.exceptions import (
    DuplicateTokenError,
    NotFoundError,
    PartialDeletionError,
    StorageUnavailableError,
    mask_token,
)
from ...core.value_objects import ExpiryPolicy
from ...utils.datetime import Clock, utc_now

logger = logging.getLogger(__name__)


def _as_str(value: Any) -> str:
    return value.decode() if isinstance(value, bytes) else value


class RedisSessionStore:
    """Redis session store following maximum separation principle.

    Handles ONLY Redis storage of refresh-token sessions.
    Does not handle token generation, user lookup or HTTP concerns.

    Layout:
        <prefix>:<token>              JSON record, expires with the session
        <prefix>:user_id:<user_id>    set of tokens of an account
        <prefix>:username:<username>  set of tokens of a username

    Index sets outlive members that expire on their own; such stale members are
    pruned whenever a lookup comes across them. Unreadable records are deleted
    the same way, so every lookup agrees on what is live.
    """

    def __init__(
        self,
        redis_client,
        key_prefix: str = "refresh_tokens",
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        expiry_policy: ExpiryPolicy = ExpiryPolicy.SLIDING,
        clock: Clock = utc_now,
    ):
        """Initialize Redis session store.

        Args:
            redis_client: ``redis.asyncio.Redis`` instance
            key_prefix: Prefix for every key written by the store
            ttl_seconds: Time to live of new sessions
            expiry_policy: Whether ``touch`` re-arms the time to live
            clock: Source of the current time
        """
        if redis_client is None:
            raise ValueError("Redis client is required")
        if ttl_seconds <= 0:
            raise ValueError("TTL must be a positive number of seconds")
        self.redis = redis_client
        self.key_prefix = key_prefix
        self.ttl_seconds = ttl_seconds
        self.expiry_policy = expiry_policy
        self._clock = clock

    def _make_token_key(self, token: str) -> str:
        return f"{self.key_prefix}:{token}"

    def _make_user_id_key(self, user_id: int) -> str:
        return f"{self.key_prefix}:user_id:{user_id}"

    def _make_username_key(self, username: str) -> str:
        return f"{self.key_prefix}:username:{username}"

    def _serialize(self, session: RefreshToken) -> str:
        return json.dumps(session.to_record())

    def _deserialize(self, raw: Any) -> Optional[RefreshToken]:
        """Decode a stored record; unreadable records are logged and yield None."""
        try:
            return RefreshToken.from_record(json.loads(_as_str(raw)))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Skipping unreadable refresh token record: {e}")
            return None

    async def create(
        self,
        token: str,
        user_id: int,
        username: str,
        device_info: Optional[str] = None,
    ) -> RefreshToken:
        """Store a new session.

        The record is written with ``NX`` so an existing token is never
        overwritten; index sets are then updated in one transaction.

        Raises:
            DuplicateTokenError: If the token already exists
            StorageUnavailableError: If Redis fails
        """
        session = RefreshToken.issue(
            token, user_id, username, device_info, now=self._clock(), ttl=self.ttl_seconds
        )
        token_key = self._make_token_key(token)

        try:
            created = await self.redis.set(token_key, self._serialize(session), ex=session.ttl, nx=True)
        except RedisError as e:
            logger.error(f"Failed to store refresh token {session.mask_for_logging()}: {e}")
            raise StorageUnavailableError("create", reason=str(e)) from e

        if not created:
            raise DuplicateTokenError(token)

        try:
            pipe = self.redis.pipeline(transaction=True)
            for index_key in (self._make_user_id_key(user_id), self._make_username_key(username)):
                pipe.sadd(index_key, token)
                # The newest write always has the longest remaining lifetime.
                pipe.expire(index_key, session.ttl)
            await pipe.execute()
        except RedisError as e:
            logger.error(f"Failed to index refresh token {session.mask_for_logging()}: {e}")
            await self._discard_unindexed(token_key, session)
            raise StorageUnavailableError("create", reason=str(e)) from e

        logger.debug(f"Stored refresh token {session.mask_for_logging()} for user {user_id} with TTL {session.ttl}")
        return session

    async def _discard_unindexed(self, token_key: str, session: RefreshToken) -> None:
        """Remove a record whose index entries could not be written."""
        try:
            await self.redis.delete(token_key)
        except RedisError as e:
            # Record outlives the failure; its own TTL still removes it.
            logger.error(f"Failed to roll back unindexed refresh token {session.mask_for_logging()}: {e}")

    async def find_by_token(self, token: str) -> Optional[RefreshToken]:
        """Return the live session for ``token`` or None.

        An unreadable record is deleted, so it is absent from every lookup.
        """
        token_key = self._make_token_key(token)
        try:
            raw = await self.redis.get(token_key)
            if raw is None:
                return None

            session = self._deserialize(raw)
            if session is None:
                await self.redis.delete(token_key)
            return session
        except RedisError as e:
            logger.error(f"Failed to read refresh token: {e}")
            raise StorageUnavailableError("find_by_token", reason=str(e)) from e

    async def _find_by_index(self, index_key: str, operation: str) -> List[RefreshToken]:
        """Resolve every member of an index set, pruning members that expired."""
        try:
            members = [_as_str(m) for m in await self.redis.smembers(index_key)]
            if not members:
                return []

            raw_records = await self.redis.mget([self._make_token_key(t) for t in members])

            sessions = []
            stale = []
            unreadable = []
            for token, raw in zip(members, raw_records):
                session = self._deserialize(raw) if raw is not None else None
                if session is None:
                    stale.append(token)
                    if raw is not None:
                        unreadable.append(self._make_token_key(token))
                else:
                    sessions.append(session)

            if unreadable:
                await self.redis.delete(*unreadable)
            if stale:
                await self.redis.srem(index_key, *stale)
                logger.debug(f"Pruned {len(stale)} expired or unreadable entries from {index_key}")

            return sessions

        except RedisError as e:
            logger.error(f"Failed to read session index {index_key}: {e}")
            raise StorageUnavailableError(operation, reason=str(e)) from e

    async def find_by_user_id(self, user_id: int) -> List[RefreshToken]:
        """Return all live sessions of an account."""
        return await self._find_by_index(self._make_user_id_key(user_id), "find_by_user_id")

    async def find_by_username(self, username: str) -> List[RefreshToken]:
        """Return all live sessions for a username."""
        return await self._find_by_index(self._make_username_key(username), "find_by_username")

    async def exists_by_token(self, token: str) -> bool:
        """Check whether ``token`` has a live, readable session."""
        return await self.find_by_token(token) is not None

    async def touch(self, token: str) -> RefreshToken:
        """Mark the session as used now.

        Under the sliding policy the record and both index sets get their full
        time to live back; under the absolute policy the record keeps its
        remaining time (``KEEPTTL``). ``XX`` guarantees an expired record is
        not resurrected.

        Raises:
            NotFoundError: If the token is absent or expired
            StorageUnavailableError: If Redis fails
        """
        session = await self.find_by_token(token)
        if session is None:
            raise NotFoundError(token=token)

        updated = session.touched(self._clock())
        token_key = self._make_token_key(token)

        try:
            if self.expiry_policy.resets_on_touch:
                pipe = self.redis.pipeline(transaction=True)
                pipe.set(token_key, self._serialize(updated), ex=updated.ttl, xx=True)
                pipe.expire(self._make_user_id_key(updated.user_id), updated.ttl)
                pipe.expire(self._make_username_key(updated.username), updated.ttl)
                written = (await pipe.execute())[0]
            else:
                written = await self.redis.set(token_key, self._serialize(updated), xx=True, keepttl=True)
        except RedisError as e:
            logger.error(f"Failed to touch refresh token {session.mask_for_logging()}: {e}")
            raise StorageUnavailableError("touch", reason=str(e)) from e

        if not written:
            raise NotFoundError(token=token)

        logger.debug(f"Touched refresh token {updated.mask_for_logging()}")
        return updated

    async def delete_by_token(self, token: str) -> None:
        """Remove one session and its index entries; no-op if absent.

        The record key is deleted even when its content cannot be decoded.
        """
        session = await self.find_by_token(token)

        try:
            pipe = self.redis.pipeline(transaction=True)
            pipe.delete(self._make_token_key(token))
            if session is not None:
                pipe.srem(self._make_user_id_key(session.user_id), token)
                pipe.srem(self._make_username_key(session.username), token)
            await pipe.execute()
        except RedisError as e:
            logger.error(f"Failed to delete refresh token {mask_token(token)}: {e}")
            raise StorageUnavailableError("delete_by_token", reason=str(e)) from e

        logger.debug(f"Deleted refresh token {mask_token(token)}")

    async def consume(self, token: str) -> Optional[RefreshToken]:
        """Atomically remove the session and return it.

        ``GETDEL`` hands a record to exactly one caller, so concurrent
        consumers of the same token get None after the first.
        """
        try:
            raw = await self.redis.getdel(self._make_token_key(token))
            if raw is None:
                return None

            session = self._deserialize(raw)
            if session is None:
                return None

            pipe = self.redis.pipeline(transaction=True)
            pipe.srem(self._make_user_id_key(session.user_id), token)
            pipe.srem(self._make_username_key(session.username), token)
            await pipe.execute()
        except RedisError as e:
            logger.error(f"Failed to consume refresh token {mask_token(token)}: {e}")
            raise StorageUnavailableError("consume", reason=str(e)) from e

        logger.debug(f"Consumed refresh token {session.mask_for_logging()}")
        return session

    async def _delete_sessions(self, sessions: Iterable[RefreshToken], operation: str) -> int:
        """Delete each session independently and report partial failure.

        Record deletes go through a non-transactional pipeline, so each one
        succeeds or fails on its own and per-command errors are collected
        instead of raised. Index entries are removed only for records that
        were actually deleted, keeping survivors reachable for a retry.
        """
        sessions = list(sessions)
        if not sessions:
            return 0

        try:
            pipe = self.redis.pipeline(transaction=False)
            for session in sessions:
                pipe.delete(self._make_token_key(session.token))
            results = await pipe.execute(raise_on_error=False)

            deleted = [s for s, r in zip(sessions, results) if not isinstance(r, Exception)]
            failed = [s.token for s, r in zip(sessions, results) if isinstance(r, Exception)]

            if deleted:
                pipe = self.redis.pipeline(transaction=True)
                for session in deleted:
                    pipe.srem(self._make_user_id_key(session.user_id), session.token)
                    pipe.srem(self._make_username_key(session.username), session.token)
                await pipe.execute()
        except RedisError as e:
            logger.error(f"Bulk delete {operation} failed: {e}")
            raise StorageUnavailableError(operation, reason=str(e)) from e

        if failed:
            logger.error(f"Bulk delete {operation} incomplete: {len(deleted)} removed, {len(failed)} failed")
            if not deleted:
                raise StorageUnavailableError(operation, reason="every record delete failed")
            raise PartialDeletionError(operation, [s.token for s in deleted], failed)

        return len(deleted)

    async def delete_by_user_id(self, user_id: int) -> int:
        """Remove every session of an account (logout from all devices)."""
        sessions = await self.find_by_user_id(user_id)
        count = await self._delete_sessions(sessions, "delete_by_user_id")
        logger.info(f"Revoked {count} refresh tokens for user ID: {user_id}")
        return count

    async def delete_by_username(self, username: str) -> int:
        """Remove every session for a username."""
        sessions = await self.find_by_username(username)
        count = await self._delete_sessions(sessions, "delete_by_username")
        logger.info(f"Revoked {count} refresh tokens for username: {username}")
        return count

    async def ping(self) -> bool:
        """Check Redis reachability."""
        try:
            return bool(await self.redis.ping())
        except RedisError as e:
            logger.error(f"Redis ping failed: {e}")
            raise StorageUnavailableError("ping", reason=str(e)) from e
