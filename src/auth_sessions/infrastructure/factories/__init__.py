"""Factories and lifecycle routines."""

from .session_store_factory import SessionStoreFactory, initialize_session_store, shutdown_session_store

__all__ = ["SessionStoreFactory", "initialize_session_store", "shutdown_session_store"]
