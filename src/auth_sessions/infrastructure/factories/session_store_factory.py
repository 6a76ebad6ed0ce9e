"""Session store factory and startup routine."""

import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from ...config.settings import SessionSettings, get_settings
from ...core.exceptions import StorageUnavailableError
from ...utils.datetime import Clock, utc_now
from ..repositories import MemorySessionStore, RedisSessionStore

logger = logging.getLogger(__name__)


class SessionStoreFactory:
    """Session store factory following maximum separation principle.

    Handles ONLY store instantiation from settings. Stores receive their
    backend client through the constructor; nothing is resolved globally.
    """

    def __init__(self, settings: Optional[SessionSettings] = None):
        self.settings = settings or get_settings()

    def create_redis_client(self) -> Redis:
        """Create an asyncio Redis client from settings."""
        password = self.settings.redis_password.get_secret_value() if self.settings.redis_password else None
        return Redis.from_url(
            str(self.settings.redis_url),
            password=password,
            socket_timeout=self.settings.redis_socket_timeout,
            socket_connect_timeout=self.settings.redis_socket_timeout,
            decode_responses=self.settings.redis_decode_responses,
        )

    def create_redis_store(self, redis_client=None, clock: Clock = utc_now) -> RedisSessionStore:
        """Create a Redis session store, building the client when none is given."""
        client = redis_client if redis_client is not None else self.create_redis_client()
        store = RedisSessionStore(
            client,
            key_prefix=self.settings.session_key_prefix,
            ttl_seconds=self.settings.refresh_token_ttl_seconds,
            expiry_policy=self.settings.session_expiry_policy,
            clock=clock,
        )
        logger.debug(
            f"Created Redis session store with prefix {store.key_prefix} "
            f"and {store.expiry_policy.value} expiry"
        )
        return store

    def create_memory_store(self, clock: Clock = utc_now) -> MemorySessionStore:
        """Create an in-process session store with the configured TTL semantics."""
        return MemorySessionStore(
            ttl_seconds=self.settings.refresh_token_ttl_seconds,
            expiry_policy=self.settings.session_expiry_policy,
            clock=clock,
        )


async def initialize_session_store(
    settings: Optional[SessionSettings] = None,
    redis_client=None,
) -> RedisSessionStore:
    """Build the Redis session store and verify the backend once.

    Call once at startup, before serving traffic.

    Raises:
        StorageUnavailableError: If Redis cannot be reached
    """
    store = SessionStoreFactory(settings).create_redis_store(redis_client)
    try:
        await store.ping()
    except StorageUnavailableError:
        await store.redis.aclose()
        raise
    logger.info(f"Session store ready (prefix={store.key_prefix}, ttl={store.ttl_seconds}s)")
    return store


async def shutdown_session_store(store: RedisSessionStore) -> None:
    """Close the Redis client owned by ``store``."""
    try:
        await store.redis.aclose()
    except RedisError as e:
        logger.warning(f"Error while closing Redis client: {e}")
        raise StorageUnavailableError("shutdown", reason=str(e)) from e
