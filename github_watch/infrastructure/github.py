"""
GitHub fetcher: получение ETag файла через GitHub REST API.

Делает HEAD /repos/{owner}/{repo}/contents/{path}?ref={ref} — тело ответа
не нужно, только заголовок ETag.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

import httpx

from github_watch.domain import (
    Credentials,
    FetchError,
    FileReference,
    Fingerprint,
    normalize_fingerprint,
)
from github_watch.logging_config import get_logger
from github_watch.settings import Settings

logger = get_logger("github_watch.github")

GITHUB_API_VERSION = "2022-11-28"


def create_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    """Создаёт HTTP клиент для GitHub API по настройкам (transport — для тестов)."""
    return httpx.AsyncClient(
        transport=transport,
        base_url=settings.GITHUB_API_URL,
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
        headers={"User-Agent": settings.USER_AGENT},
        follow_redirects=True,  # 301 для переименованных репозиториев
    )


def contents_path(target: FileReference) -> str:
    """Путь ресурса contents для файла (без base URL)."""
    return "/repos/{owner}/{repo}/contents/{path}".format(
        owner=quote(target.owner, safe=""),
        repo=quote(target.repository, safe=""),
        path=quote(target.path, safe="/"),
    )


class GitHubFingerprintFetcher:
    """Получение ETag файла через HEAD запрос к GitHub API."""

    def __init__(self, client: httpx.AsyncClient):
        """
        Args:
            client: HTTP клиент с base_url GitHub API (см. create_client)
        """
        self.client = client

    async def fetch(
        self,
        target: FileReference,
        credentials: Credentials = None
    ) -> Fingerprint:
        """
        Возвращает нормализованный ETag файла на ревизии target.revision.

        Raises:
            FetchError: сетевая ошибка, не-2xx ответ или нет ETag
        """
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if credentials:
            headers["Authorization"] = f"Bearer {credentials}"

        url = contents_path(target)
        try:
            response = await self.client.head(
                url,
                params={"ref": target.revision},
                headers=headers,
            )
        except httpx.HTTPError as e:
            raise FetchError(f"Request to GitHub API failed: {e}") from e

        if not response.is_success:
            raise FetchError(
                f"GitHub API responded {response.status_code} "
                f"{response.reason_phrase} for {response.request.url}",
                status_code=response.status_code,
            )

        etag = response.headers.get("etag")
        if etag is None:
            raise FetchError(
                f"GitHub API response has no ETag header for {response.request.url}",
                status_code=response.status_code,
            )

        fingerprint = normalize_fingerprint(etag)
        logger.debug(f"ETag {target.display()} | raw={etag} | normalized={fingerprint}")
        return fingerprint
