"""Immutable session value objects."""

from .expiry_policy import ExpiryPolicy

__all__ = ["ExpiryPolicy"]
