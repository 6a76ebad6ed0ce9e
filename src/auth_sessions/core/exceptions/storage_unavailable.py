"""Backend failure exceptions."""

from typing import List, Optional, Sequence

from .base import SessionStoreError, mask_token


class StorageUnavailableError(SessionStoreError):
    """Raised when the key-value backend is unreachable or returns an error.

    The underlying backend error is chained as ``__cause__``; no retry is attempted.
    """

    def __init__(
        self,
        operation: str,
        message: str = "Session storage unavailable",
        *,
        reason: Optional[str] = None,
    ):
        details = {"operation": operation}
        if reason:
            details["reason"] = reason
        super().__init__(message, error_code="STORAGE_UNAVAILABLE", details=details)
        self.operation = operation


class PartialDeletionError(StorageUnavailableError):
    """Raised when a bulk delete was applied to some records but not all."""

    def __init__(self, operation: str, deleted: Sequence[str], failed: Sequence[str]):
        super().__init__(
            operation,
            f"Bulk delete incomplete: {len(deleted)} removed, {len(failed)} failed",
        )
        self.error_code = "PARTIAL_DELETION"
        self.deleted: List[str] = list(deleted)
        self.failed: List[str] = list(failed)
        self.details.update({
            "deleted": [mask_token(t) for t in self.deleted],
            "failed": [mask_token(t) for t in self.failed],
        })
