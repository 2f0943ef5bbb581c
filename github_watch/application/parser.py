"""
Разбор URL просмотра файла на GitHub.

    https://github.com/<owner>/<repo>/blob/<ref>/<path/to/file>
"""

import re

from github_watch.domain import FileReference, InvalidReferenceError

DEFAULT_HOST = "github.com"


def _build_pattern(host: str) -> "re.Pattern[str]":
    return re.compile(
        re.escape(host) + r"/([^/]+)/([^/]+)/blob/([^/]+)/(.+)"
    )


def parse_file_url(url: str, host: str = DEFAULT_HOST) -> FileReference:
    """
    Извлекает owner, repository, revision и path из URL файла.

    Args:
        url: URL вида https://github.com/owner/repo/blob/branch/path/to/file
        host: Домен хостинга, на который якорится разбор

    Returns:
        FileReference: path — всё, что идёт после сегмента ревизии

    Raises:
        InvalidReferenceError: URL не указывает на файл
    """
    match = _build_pattern(host).search(url or "")
    if match is None:
        raise InvalidReferenceError()

    owner, repository, revision, path = match.groups()
    return FileReference(
        owner=owner,
        repository=repository,
        revision=revision,
        path=path,
    )
