"""
Tests for the Redis session store.

Covers the key layout, index maintenance and the mapping of Redis failures
onto the session error taxonomy, using FakeRedis from tests.fakes.
"""

import json

import pytest

from auth_sessions.core.entities import DEFAULT_TTL_SECONDS
from auth_sessions.core.exceptions import PartialDeletionError, StorageUnavailableError
from auth_sessions.core.value_objects import ExpiryPolicy
from auth_sessions.infrastructure.repositories import RedisSessionStore


class TestKeyLayout:
    """What ends up in Redis."""

    @pytest.mark.asyncio
    async def test_record_is_camel_case_json(self, redis_store, fake_redis):
        await redis_store.create("tok1", 42, "alice", "chrome")

        record = json.loads(await fake_redis.get("refresh_tokens:tok1"))

        assert record == {
            "token": "tok1",
            "userId": 42,
            "username": "alice",
            "deviceInfo": "chrome",
            "createdAt": "2024-01-15T10:30:00+00:00",
            "lastUsedAt": "2024-01-15T10:30:00+00:00",
            "ttl": DEFAULT_TTL_SECONDS,
        }

    @pytest.mark.asyncio
    async def test_record_and_indexes_carry_ttl(self, redis_store, fake_redis):
        await redis_store.create("tok1", 42, "alice", None)

        assert await fake_redis.ttl("refresh_tokens:tok1") == DEFAULT_TTL_SECONDS
        assert await fake_redis.smembers("refresh_tokens:user_id:42") == {"tok1"}
        assert await fake_redis.smembers("refresh_tokens:username:alice") == {"tok1"}
        assert await fake_redis.ttl("refresh_tokens:user_id:42") == DEFAULT_TTL_SECONDS

    @pytest.mark.asyncio
    async def test_custom_prefix_and_ttl(self, fake_redis, clock):
        store = RedisSessionStore(fake_redis, key_prefix="rt", ttl_seconds=60, clock=clock)

        session = await store.create("tok1", 42, "alice", None)

        assert session.ttl == 60
        assert await fake_redis.ttl("rt:tok1") == 60
        assert await fake_redis.smembers("rt:user_id:42") == {"tok1"}

    @pytest.mark.asyncio
    async def test_delete_by_token_cleans_indexes(self, redis_store, fake_redis):
        await redis_store.create("tok1", 42, "alice", None)

        await redis_store.delete_by_token("tok1")

        assert await fake_redis.exists("refresh_tokens:tok1") == 0
        assert await fake_redis.smembers("refresh_tokens:user_id:42") == set()
        assert await fake_redis.smembers("refresh_tokens:username:alice") == set()

    @pytest.mark.asyncio
    async def test_bulk_delete_drops_index(self, redis_store, fake_redis):
        await redis_store.create("tok1", 42, "alice", None)
        await redis_store.create("tok2", 42, "alice", None)

        await redis_store.delete_by_user_id(42)

        assert await fake_redis.exists("refresh_tokens:user_id:42") == 0
        assert await fake_redis.exists("refresh_tokens:username:alice") == 0

    @pytest.mark.asyncio
    async def test_absolute_touch_keeps_remaining_ttl(self, fake_redis, clock):
        store = RedisSessionStore(fake_redis, expiry_policy=ExpiryPolicy.ABSOLUTE, clock=clock)
        await store.create("tok1", 42, "alice", None)
        clock.advance(seconds=100)

        await store.touch("tok1")

        assert await fake_redis.ttl("refresh_tokens:tok1") == DEFAULT_TTL_SECONDS - 100

    @pytest.mark.asyncio
    async def test_sliding_touch_rearms_ttl(self, redis_store, fake_redis, clock):
        await redis_store.create("tok1", 42, "alice", None)
        clock.advance(seconds=100)

        await redis_store.touch("tok1")

        assert await fake_redis.ttl("refresh_tokens:tok1") == DEFAULT_TTL_SECONDS
        assert await fake_redis.ttl("refresh_tokens:username:alice") == DEFAULT_TTL_SECONDS


class TestIndexMaintenance:
    """Lazy pruning and tolerance of odd data."""

    @pytest.mark.asyncio
    async def test_stale_members_pruned_on_lookup(self, redis_store, fake_redis):
        await redis_store.create("tok1", 42, "alice", None)
        await redis_store.create("tok2", 42, "alice", None)
        # Record vanishes on its own while the index keeps the member.
        fake_redis._data.pop("refresh_tokens:tok1")

        sessions = await redis_store.find_by_user_id(42)

        assert [s.token for s in sessions] == ["tok2"]
        assert await fake_redis.smembers("refresh_tokens:user_id:42") == {"tok2"}

    @pytest.mark.asyncio
    async def test_corrupt_record_is_absent_from_every_lookup(self, redis_store, fake_redis):
        await redis_store.create("tok1", 42, "alice", None)
        await fake_redis.set("refresh_tokens:tok1", "not json")

        found = await redis_store.find_by_token("tok1")

        assert found is None
        assert await redis_store.exists_by_token("tok1") is (found is not None)
        assert await fake_redis.exists("refresh_tokens:tok1") == 0

    @pytest.mark.asyncio
    async def test_corrupt_record_removed_by_index_lookup(self, redis_store, fake_redis):
        await redis_store.create("tok1", 42, "alice", None)
        await redis_store.create("tok2", 42, "alice", None)
        await fake_redis.set("refresh_tokens:tok1", "not json")

        sessions = await redis_store.find_by_user_id(42)

        assert [s.token for s in sessions] == ["tok2"]
        assert await fake_redis.exists("refresh_tokens:tok1") == 0
        assert await redis_store.exists_by_token("tok1") is False
        assert await redis_store.delete_by_user_id(42) == 1
        assert await fake_redis.exists("refresh_tokens:tok2") == 0

    @pytest.mark.asyncio
    async def test_delete_by_token_removes_corrupt_record(self, redis_store, fake_redis):
        await redis_store.create("tok1", 42, "alice", None)
        await fake_redis.set("refresh_tokens:tok1", "{\"token\": \"tok1\"}")

        await redis_store.delete_by_token("tok1")

        assert await fake_redis.exists("refresh_tokens:tok1") == 0
        assert await redis_store.find_by_user_id(42) == []

    @pytest.mark.asyncio
    async def test_bytes_responses_are_decoded(self, redis_store, fake_redis):
        await redis_store.create("tok1", 42, "alice", None)
        raw = fake_redis._data["refresh_tokens:tok1"]
        fake_redis._data["refresh_tokens:tok1"] = raw.encode()
        fake_redis._data["refresh_tokens:user_id:42"] = {b"tok1"}

        sessions = await redis_store.find_by_user_id(42)

        assert [s.token for s in sessions] == ["tok1"]


class TestFailures:
    """Redis errors become StorageUnavailableError."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("command,call", [
        ("get", lambda s: s.find_by_token("tok1")),
        ("get", lambda s: s.exists_by_token("tok1")),
        ("getdel", lambda s: s.consume("tok1")),
        ("smembers", lambda s: s.find_by_user_id(42)),
        ("smembers", lambda s: s.find_by_username("alice")),
        ("set", lambda s: s.create("tok2", 42, "alice", None)),
        ("execute", lambda s: s.touch("tok1")),
        ("execute", lambda s: s.delete_by_token("tok1")),
        ("execute", lambda s: s.delete_by_user_id(42)),
        ("ping", lambda s: s.ping()),
    ])
    async def test_backend_error_is_wrapped(self, redis_store, fake_redis, command, call):
        await redis_store.create("tok1", 42, "alice", None)
        fake_redis.fail_commands.add(command)

        with pytest.raises(StorageUnavailableError) as exc_info:
            await call(redis_store)

        assert exc_info.value.error_code == "STORAGE_UNAVAILABLE"
        assert exc_info.value.__cause__ is not None

    @pytest.mark.asyncio
    async def test_failed_index_write_rolls_back_record(self, redis_store, fake_redis):
        fake_redis.fail_commands.add("execute")

        with pytest.raises(StorageUnavailableError):
            await redis_store.create("tok1", 42, "alice", None)

        fake_redis.fail_commands.clear()
        assert await redis_store.exists_by_token("tok1") is False
        assert await fake_redis.exists("refresh_tokens:tok1") == 0
        # Token is free again for a retry with full indexing.
        await redis_store.create("tok1", 42, "alice", None)
        assert [s.token for s in await redis_store.find_by_user_id(42)] == ["tok1"]
        assert await redis_store.delete_by_user_id(42) == 1

    @pytest.mark.asyncio
    async def test_partial_bulk_delete_reports_both_sides(self, redis_store, fake_redis):
        await redis_store.create("token-alpha-0001", 42, "alice", None)
        await redis_store.create("token-bravo-0002", 42, "alice", None)
        fake_redis.fail_keys.add("refresh_tokens:token-alpha-0001")

        with pytest.raises(PartialDeletionError) as exc_info:
            await redis_store.delete_by_user_id(42)

        error = exc_info.value
        assert error.deleted == ["token-bravo-0002"]
        assert error.failed == ["token-alpha-0001"]
        assert error.operation == "delete_by_user_id"
        assert error.details["failed"] == ["token-...0001"]
        assert await redis_store.exists_by_token("token-alpha-0001") is True
        assert await redis_store.exists_by_token("token-bravo-0002") is False
        # Survivor stays reachable so the bulk delete can be retried.
        assert [s.token for s in await redis_store.find_by_user_id(42)] == ["token-alpha-0001"]

    @pytest.mark.asyncio
    async def test_total_bulk_delete_failure(self, redis_store, fake_redis):
        await redis_store.create("tok1", 42, "alice", None)
        fake_redis.fail_keys.add("refresh_tokens:tok1")

        with pytest.raises(StorageUnavailableError) as exc_info:
            await redis_store.delete_by_username("alice")

        assert not isinstance(exc_info.value, PartialDeletionError)
        assert await redis_store.exists_by_token("tok1") is True


class TestConstruction:
    """Constructor validation and health."""

    def test_requires_client(self):
        with pytest.raises(ValueError, match="Redis client is required"):
            RedisSessionStore(None)

    def test_rejects_non_positive_ttl(self, fake_redis):
        with pytest.raises(ValueError):
            RedisSessionStore(fake_redis, ttl_seconds=0)

    @pytest.mark.asyncio
    async def test_ping(self, redis_store):
        assert await redis_store.ping() is True
