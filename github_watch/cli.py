"""
CLI: ждёт изменения файла на GitHub и завершается.

    await-github-file-change https://github.com/owner/repo/blob/main/path/to/file

Коды выхода: 0 — файл изменился, 1 — ошибка, 130 — прервано (Ctrl-C).
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from github_watch.application import CancellationToken, ChangeWatcher, parse_file_url
from github_watch.domain import GitHubWatchError, WatchCancelledError
from github_watch.infrastructure import GitHubFingerprintFetcher, create_client
from github_watch.logging_config import get_logger, setup_logging
from github_watch.settings import Settings, get_settings

logger = get_logger("github_watch.cli")

PROG = "await-github-file-change"
EXAMPLE_URL = "https://github.com/gr2m/sandbox/blob/main/test-file"


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Wait until a file in a GitHub repository changes, then exit.",
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="GitHub file URL, e.g. https://github.com/owner/repo/blob/branch/path/to/file",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=settings.POLL_INTERVAL_SECONDS,
        help=f"Polling interval in seconds (default: {settings.POLL_INTERVAL_SECONDS}).",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        default=None,
        help="Give up after this many seconds (default: wait forever).",
    )
    return parser


def print_usage_error() -> None:
    print("Error: GitHub URL is required", file=sys.stderr)
    print(f"Usage: {PROG} <github-url>", file=sys.stderr)
    print(f"Example: {PROG} {EXAMPLE_URL}", file=sys.stderr)


async def await_file_change(
    url: str,
    settings: Settings,
    interval: float,
    timeout: Optional[float] = None
) -> int:
    """Разбор URL, базовый ETag, ожидание изменения. Ошибки пробрасываются."""
    target = parse_file_url(url, host=settings.GITHUB_HOST)
    credentials = settings.GITHUB_TOKEN

    async with create_client(settings) as client:
        fetcher = GitHubFingerprintFetcher(client)
        watcher = ChangeWatcher(fetcher, poll_interval=interval)

        print(f"Monitoring {target.display()} for changes...")

        initial = await fetcher.fetch(target, credentials)
        print(f"Initial etag: {initial}")
        logger.info(f"Baseline etag for {target.display()}: {initial}")

        token = CancellationToken()
        if timeout is not None:
            asyncio.get_running_loop().call_later(timeout, token.cancel)

        try:
            changed = await watcher.watch(target, initial, credentials, token=token)
        except WatchCancelledError:
            if timeout is not None and token.cancelled:
                raise WatchCancelledError(
                    f"Timed out after {timeout:g} seconds waiting for a change"
                ) from None
            raise

        print(f"File changed! New etag: {changed}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(
        level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
        environment=settings.ENVIRONMENT,
    )

    args = build_parser(settings).parse_args(argv)
    if not args.url:
        print_usage_error()
        return 1
    if args.interval <= 0:
        print("Error: --interval must be greater than 0", file=sys.stderr)
        return 1
    if args.timeout is not None and args.timeout <= 0:
        print("Error: --timeout must be greater than 0", file=sys.stderr)
        return 1

    try:
        return asyncio.run(
            await_file_change(args.url, settings, args.interval, args.timeout)
        )
    except GitHubWatchError as e:
        logger.debug(f"Watch failed: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        # Прервано пользователем
        return 130


def run() -> None:
    sys.exit(main())
