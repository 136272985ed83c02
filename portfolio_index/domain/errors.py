"""Errors raised during a synchronization run."""

from typing import Optional


class SyncError(Exception):
    """Base class for failures that abort a run."""
    pass


class AuthError(SyncError):
    """Raised when no GitHub token is configured."""
    pass


class TransportError(SyncError):
    """Raised when the search API cannot be reached or answers with a non-2xx status."""

    def __init__(self, status_code: Optional[int], body: str):
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = f"GitHub request error: {body}"
        else:
            message = f"GitHub API Error {status_code}: {body}"
        super().__init__(message)
