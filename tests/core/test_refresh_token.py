"""Tests for the RefreshToken entity."""

from datetime import datetime, timedelta, timezone

import pytest

from auth_sessions.core.entities import DEFAULT_TTL_SECONDS, RefreshToken
from auth_sessions.core.value_objects import ExpiryPolicy

NOW = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


class TestRefreshTokenCreation:
    """Construction and validation."""

    def test_issue_sets_both_timestamps(self):
        session = RefreshToken.issue("tok1", 42, "alice", "chrome", now=NOW)

        assert session.created_at == NOW
        assert session.last_used_at == NOW
        assert session.ttl == DEFAULT_TTL_SECONDS

    def test_last_used_defaults_to_created(self):
        session = RefreshToken(token="tok1", user_id=42, username="alice", created_at=NOW)

        assert session.last_used_at == NOW

    def test_naive_datetimes_become_utc(self):
        session = RefreshToken(token="tok1", user_id=42, username="alice", created_at=datetime(2024, 1, 15))

        assert session.created_at.tzinfo is not None
        assert session.created_at == datetime(2024, 1, 15, tzinfo=timezone.utc)

    @pytest.mark.parametrize("kwargs", [
        {"token": ""},
        {"username": ""},
        {"ttl": 0},
        {"last_used_at": NOW - timedelta(seconds=1)},
    ])
    def test_invalid_values_rejected(self, kwargs):
        values = {"token": "tok1", "user_id": 42, "username": "alice", "created_at": NOW}
        values.update(kwargs)

        with pytest.raises(ValueError):
            RefreshToken(**values)

    def test_is_immutable(self):
        session = RefreshToken.issue("tok1", 42, "alice", now=NOW)

        with pytest.raises(AttributeError):
            session.user_id = 7


class TestRefreshTokenBehaviour:
    """Touching, expiry and persistence layout."""

    def test_touched_only_moves_last_used(self):
        session = RefreshToken.issue("tok1", 42, "alice", now=NOW)

        touched = session.touched(NOW + timedelta(hours=1))

        assert touched.last_used_at == NOW + timedelta(hours=1)
        assert touched.created_at == session.created_at
        assert touched.token == session.token
        assert session.last_used_at == NOW

    def test_touched_never_precedes_creation(self):
        session = RefreshToken.issue("tok1", 42, "alice", now=NOW)

        assert session.touched(NOW - timedelta(minutes=5)).last_used_at == NOW

    def test_expires_at_per_policy(self):
        session = RefreshToken.issue("tok1", 42, "alice", now=NOW, ttl=60).touched(NOW + timedelta(seconds=30))

        assert session.expires_at(ExpiryPolicy.SLIDING) == NOW + timedelta(seconds=90)
        assert session.expires_at(ExpiryPolicy.ABSOLUTE) == NOW + timedelta(seconds=60)

    def test_record_round_trip(self):
        session = RefreshToken.issue("tok1", 42, "alice", None, now=NOW)

        record = session.to_record()

        assert record["userId"] == 42
        assert record["deviceInfo"] is None
        assert RefreshToken.from_record(record) == session

    def test_from_record_accepts_zulu_timestamps(self):
        session = RefreshToken.from_record({
            "token": "tok1",
            "userId": "42",
            "username": "alice",
            "createdAt": "2024-01-15T10:30:00Z",
            "lastUsedAt": "2024-01-15T11:00:00Z",
        })

        assert session.user_id == 42
        assert session.created_at == NOW
        assert session.ttl == DEFAULT_TTL_SECONDS
        assert session.device_info is None

    def test_repr_masks_token(self):
        session = RefreshToken.issue("abcdefghijklmnopqrstuvwxyz", 42, "alice", now=NOW)

        assert "abcdefghijklmnop" not in repr(session)
        assert "abcdef...wxyz" in repr(session)
