"""Use-cases: разбор URL и ожидание изменения отпечатка файла."""

from .parser import parse_file_url
from .scheduling import CancellationToken, RepeatingTask
from .watcher import ChangeWatcher, DEFAULT_POLL_INTERVAL

__all__ = [
    "parse_file_url",
    "CancellationToken",
    "RepeatingTask",
    "ChangeWatcher",
    "DEFAULT_POLL_INTERVAL",
]
