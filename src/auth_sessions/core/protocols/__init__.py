"""Contracts for external collaborators."""

from .session_store import SessionStore
from .identity_provider import IdentityProvider

__all__ = ["SessionStore", "IdentityProvider"]
