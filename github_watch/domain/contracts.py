"""
Контракты доменного слоя.

Protocol'ы для компонентов, от которых зависит наблюдатель.
"""

from __future__ import annotations
from typing import Optional, Protocol, runtime_checkable

from .models import FileReference
from .value_objects import Fingerprint


# Токен доступа к GitHub API (None — анонимные запросы)
Credentials = Optional[str]


@runtime_checkable
class FingerprintFetcher(Protocol):
    """Протокол получения отпечатка (ETag) файла."""

    async def fetch(
        self,
        target: FileReference,
        credentials: Credentials = None
    ) -> Fingerprint:
        """Вернуть нормализованный ETag файла на указанной ревизии."""
        ...


__all__ = [
    "Credentials",
    "FingerprintFetcher",
]
