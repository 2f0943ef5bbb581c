from __future__ import annotations

from typing import NewType

from .errors import FetchError

Fingerprint = NewType("Fingerprint", str)

WEAK_VALIDATOR_PREFIX = "W/"


def normalize_fingerprint(raw: str) -> Fingerprint:
    """Strip the weak-validator marker so weak and strong ETags compare equal.

    `W/"abc123"` -> `"abc123"`, `"abc123"` stays as is.
    """
    value = (raw or "").strip()
    if value.startswith(WEAK_VALIDATOR_PREFIX):
        value = value[len(WEAK_VALIDATOR_PREFIX):]
    if not value:
        raise FetchError(f"Empty ETag header value: {raw!r}")
    return Fingerprint(value)
