"""Refresh token session entity."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from ...utils.datetime import parse_iso, to_utc, utc_now
from ..exceptions.base import mask_token
from ..value_objects import ExpiryPolicy

DEFAULT_TTL_SECONDS = 604800  # 7 days


@dataclass(frozen=True)
class RefreshToken:
    """One refresh-token session, i.e. one logged-in device of a user.

    Only ``last_used_at`` changes after creation; use :meth:`touched` to get the
    updated copy.
    """

    token: str
    user_id: int
    username: str
    device_info: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    last_used_at: Optional[datetime] = None
    ttl: int = DEFAULT_TTL_SECONDS

    def __post_init__(self) -> None:
        if not self.token:
            raise ValueError("Refresh token cannot be empty")
        if not self.username:
            raise ValueError("Username cannot be empty")
        if self.ttl <= 0:
            raise ValueError("TTL must be a positive number of seconds")

        object.__setattr__(self, 'created_at', to_utc(self.created_at))
        if self.last_used_at is None:
            object.__setattr__(self, 'last_used_at', self.created_at)
        else:
            object.__setattr__(self, 'last_used_at', to_utc(self.last_used_at))

        if self.last_used_at < self.created_at:
            raise ValueError("last_used_at cannot precede created_at")

    @classmethod
    def issue(
        cls,
        token: str,
        user_id: int,
        username: str,
        device_info: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
        ttl: int = DEFAULT_TTL_SECONDS,
    ) -> 'RefreshToken':
        """Build a new session with ``created_at == last_used_at == now``."""
        now = now or utc_now()
        return cls(
            token=token,
            user_id=user_id,
            username=username,
            device_info=device_info,
            created_at=now,
            last_used_at=now,
            ttl=ttl,
        )

    def touched(self, now: datetime) -> 'RefreshToken':
        """Return a copy marked as used at ``now``, never earlier than creation."""
        return replace(self, last_used_at=max(to_utc(now), self.created_at))

    def expires_at(self, policy: ExpiryPolicy = ExpiryPolicy.SLIDING) -> datetime:
        """When the backend will purge this record under ``policy``."""
        anchor = self.last_used_at if policy.resets_on_touch else self.created_at
        return anchor + timedelta(seconds=self.ttl)

    def to_record(self) -> Dict[str, Any]:
        """Persisted layout of the record."""
        return {
            "token": self.token,
            "userId": self.user_id,
            "username": self.username,
            "deviceInfo": self.device_info,
            "createdAt": self.created_at.isoformat(),
            "lastUsedAt": self.last_used_at.isoformat(),
            "ttl": self.ttl,
        }

    @classmethod
    def from_record(cls, data: Dict[str, Any]) -> 'RefreshToken':
        """Rebuild an entity from its persisted layout."""
        return cls(
            token=data["token"],
            user_id=int(data["userId"]),
            username=data["username"],
            device_info=data.get("deviceInfo"),
            created_at=parse_iso(data["createdAt"]),
            last_used_at=parse_iso(data["lastUsedAt"]),
            ttl=int(data.get("ttl", DEFAULT_TTL_SECONDS)),
        )

    def mask_for_logging(self) -> str:
        return mask_token(self.token)

    def __repr__(self) -> str:
        return (
            f"RefreshToken(token='{self.mask_for_logging()}', user_id={self.user_id}, "
            f"username='{self.username}', device_info={self.device_info!r}, "
            f"created_at={self.created_at.isoformat()}, last_used_at={self.last_used_at.isoformat()}, "
            f"ttl={self.ttl})"
        )
