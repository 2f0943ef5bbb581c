"""Domain objects describing a watched file and its content fingerprint."""

from .errors import (
    GitHubWatchError,
    InvalidReferenceError,
    FetchError,
    WatchCancelledError,
)
from .value_objects import Fingerprint, normalize_fingerprint
from .models import FileReference, WatchSession
from .contracts import Credentials, FingerprintFetcher

__all__ = [
    "GitHubWatchError",
    "InvalidReferenceError",
    "FetchError",
    "WatchCancelledError",
    "Fingerprint",
    "normalize_fingerprint",
    "FileReference",
    "WatchSession",
    "Credentials",
    "FingerprintFetcher",
]
