"""
Pytest fixtures для github_watch
"""
import logging
from typing import Callable, Iterable, List, Union

import httpx
import pytest

from github_watch.domain import FileReference, Fingerprint

ENV_VARS = (
    "GITHUB_TOKEN",
    "GITHUB_API_URL",
    "GITHUB_HOST",
    "USER_AGENT",
    "POLL_INTERVAL_SECONDS",
    "REQUEST_TIMEOUT_SECONDS",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "ENVIRONMENT",
)


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Настройка логирования для тестов - показываем только ошибки"""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(logging.ERROR)
    handler.setFormatter(logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s - %(message)s'))
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.ERROR)

    yield


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Изолирует тесты от ENV и .env разработчика"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def target() -> FileReference:
    return FileReference(
        owner="acme",
        repository="widgets",
        revision="main",
        path="src/file.txt",
    )


class FakeFetcher:
    """Фейковый FingerprintFetcher: отдаёт значения (или исключения) по очереди"""

    def __init__(self, results: Iterable[Union[str, BaseException]]):
        self.results = list(results)
        self.calls: List[tuple] = []

    async def fetch(self, target, credentials=None) -> Fingerprint:
        self.calls.append((target, credentials))
        # Последнее значение повторяется бесконечно
        index = min(len(self.calls), len(self.results)) - 1
        result = self.results[index]
        if isinstance(result, BaseException):
            raise result
        return Fingerprint(result)


@pytest.fixture
def fake_fetcher() -> Callable[..., FakeFetcher]:
    return FakeFetcher


@pytest.fixture
def mock_client() -> Callable[..., httpx.AsyncClient]:
    """Фабрика httpx.AsyncClient поверх MockTransport"""

    def factory(
        handler: Callable[[httpx.Request], httpx.Response],
        base_url: str = "https://api.github.com"
    ) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=base_url, transport=httpx.MockTransport(handler))

    return factory
