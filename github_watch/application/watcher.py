"""
Наблюдатель за изменением файла.

Опрашивает FingerprintFetcher с фиксированным интервалом и завершается,
как только ETag отличается от базового. Ошибка любого запроса фатальна
для сессии — повторов нет.
"""

from __future__ import annotations

from typing import Optional

from github_watch.domain import (
    Credentials,
    FileReference,
    Fingerprint,
    FingerprintFetcher,
    WatchSession,
)
from github_watch.logging_config import get_logger
from .scheduling import CancellationToken, RepeatingTask

logger = get_logger("github_watch.watcher")

DEFAULT_POLL_INTERVAL = 1.0  # секунды


class ChangeWatcher:
    """Ждёт, пока отпечаток файла не станет отличаться от базового."""

    def __init__(
        self,
        fetcher: FingerprintFetcher,
        poll_interval: float = DEFAULT_POLL_INTERVAL
    ):
        """
        Args:
            fetcher: Источник ETag (обычно GitHubFingerprintFetcher)
            poll_interval: Пауза между запросами в секундах
        """
        if poll_interval <= 0:
            raise ValueError("poll_interval must be > 0")
        self.fetcher = fetcher
        self.poll_interval = poll_interval
        self.last_session: Optional[WatchSession] = None
        self._task: Optional[RepeatingTask[Fingerprint]] = None

    async def watch(
        self,
        target: FileReference,
        baseline: Fingerprint,
        credentials: Credentials = None,
        token: Optional[CancellationToken] = None
    ) -> Fingerprint:
        """
        Опрашивает файл, пока его ETag не изменится.

        Args:
            target: Наблюдаемый файл
            baseline: ETag, с которым сравниваются новые значения
            credentials: Токен GitHub, передаётся в каждый запрос
            token: Внешний сигнал отмены (например, для таймаута)

        Returns:
            Fingerprint: первый ETag, отличный от baseline

        Raises:
            FetchError: запрос завершился ошибкой (та же ошибка, без обёртки)
            WatchCancelledError: сессия отменена через token или cancel()
        """
        session = WatchSession(
            target=target,
            baseline=baseline,
            poll_interval=self.poll_interval,
        )
        self.last_session = session

        async def poll() -> Optional[Fingerprint]:
            session.attempts += 1
            try:
                current = await self.fetcher.fetch(target, credentials)
            except Exception as e:
                logger.debug(f"Poll #{session.attempts} failed for {target.display()}: {e}")
                raise

            if current != session.baseline:
                return current

            logger.debug(f"#{session.attempts} unchanged: {current}")
            return None

        task: RepeatingTask[Fingerprint] = RepeatingTask(poll, self.poll_interval)
        self._task = task
        logger.info(
            f"👀 Watching {target.display()} | baseline={baseline} "
            f"| interval={self.poll_interval}s"
        )

        task.start()
        if token is not None:
            token.register(task.cancel)
        try:
            changed = await task.wait()
        finally:
            self._task = None

        logger.info(f"✅ Change detected after {session.attempts} poll(s): {changed}")
        return changed

    def cancel(self) -> None:
        """Останавливает текущую сессию наблюдения, если она есть."""
        if self._task is not None:
            self._task.cancel()
