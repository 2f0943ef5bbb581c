"""
Настройка логирования для github_watch.

Логи пишутся в stderr: stdout занят строками прогресса CLI.
"""
import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


def setup_logging(
    level: str = "WARNING",
    log_format: Optional[str] = None,
    environment: str = "development"
) -> None:
    """Настраивает корневой logger."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(getattr(logging, level.upper()))

    if environment == "production":
        # JSON формат для production
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            timestamp=True
        )
    else:
        formatter = logging.Formatter(
            log_format or DEFAULT_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Тишина для шумных библиотек
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Получить logger."""
    return logging.getLogger(name)
