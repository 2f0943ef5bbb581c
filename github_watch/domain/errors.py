from __future__ import annotations

from typing import Optional

INVALID_URL_MESSAGE = (
    "Invalid GitHub URL. Expected format: "
    "https://github.com/owner/repo/blob/branch/path/to/file"
)


class GitHubWatchError(Exception):
    """Base class for every error the CLI reports as `Error: <message>`."""


class InvalidReferenceError(GitHubWatchError, ValueError):
    """URL does not point at a file view (`.../blob/<ref>/<path>`)."""

    def __init__(self, message: str = INVALID_URL_MESSAGE):
        super().__init__(message)


class FetchError(GitHubWatchError):
    """A metadata request against the GitHub API failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class WatchCancelledError(GitHubWatchError):
    """Watch session was stopped through its cancellation token."""
