"""User identity as reported by the identity provider."""

from dataclasses import dataclass, field
from typing import Optional, Set


@dataclass(frozen=True)
class UserIdentity:
    """Account fields needed to populate an auth response."""

    user_id: int
    username: str
    email: Optional[str] = None
    roles: Set[str] = field(default_factory=set)
    is_active: bool = True
