"""Session queries.

Read operations, each query handles exactly one session read operation.
"""

from .list_user_sessions import ListUserSessions, SessionSummary
from .check_session_active import CheckSessionActive

__all__ = ["ListUserSessions", "SessionSummary", "CheckSessionActive"]
