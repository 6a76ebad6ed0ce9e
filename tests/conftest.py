"""Pytest configuration and fixtures for auth-sessions tests."""

import pytest

from auth_sessions.core.entities import UserIdentity
from auth_sessions.core.value_objects import ExpiryPolicy
from auth_sessions.infrastructure.repositories import MemorySessionStore, RedisSessionStore

from .fakes import FakeClock, FakeIdentityProvider, FakeRedis, build_store


@pytest.fixture
def clock():
    """Frozen clock that tests advance explicitly."""
    return FakeClock()


@pytest.fixture
def fake_redis(clock):
    """In-memory Redis client sharing the test clock."""
    return FakeRedis(clock)


@pytest.fixture
def redis_store(fake_redis, clock):
    """Redis session store over the fake client, sliding expiry."""
    return RedisSessionStore(fake_redis, clock=clock)


@pytest.fixture
def memory_store(clock):
    """Memory session store, sliding expiry."""
    return MemorySessionStore(clock=clock)


@pytest.fixture(params=["memory", "redis"])
def store(request, clock):
    """Each store implementation, sliding expiry."""
    return build_store(request.param, clock, ExpiryPolicy.SLIDING)


@pytest.fixture
def identity_provider():
    """Identity provider knowing alice (active) and mallory (disabled)."""
    provider = FakeIdentityProvider()
    provider.add_user(UserIdentity(42, "alice", "alice@example.com", {"USER"}), "secret")
    provider.add_user(UserIdentity(13, "mallory", is_active=False), "secret")
    return provider
