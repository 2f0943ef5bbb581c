"""
Настройки github_watch.

Значения читаются из переменных окружения (и .env, если он есть).
Все настройки имеют значения по умолчанию — утилита работает без .env.
"""
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_watch import __version__


class Settings(BaseSettings):
    """Настройки утилиты — только чтение ENV."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # === CREDENTIALS ===
    GITHUB_TOKEN: Optional[str] = None  # Без токена — анонимный лимит запросов

    # === GITHUB ===
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_HOST: str = "github.com"  # Домен в URL просмотра файла
    USER_AGENT: str = f"github-file-watch/{__version__}"

    # === POLLING ===
    POLL_INTERVAL_SECONDS: float = Field(default=1.0, gt=0)
    REQUEST_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    # === LOGGING ===
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"
    ENVIRONMENT: str = "development"  # production -> JSON логи

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Уровень логирования без учёта регистра: debug -> DEBUG"""
        if isinstance(value, str):
            return value.strip().upper()
        return value


def get_settings() -> Settings:
    """Получить настройки из ENV."""
    return Settings()
