"""
Настройки клиента iiko Cloud API.
Использует pydantic-settings для валидации и загрузки настроек из окружения и .env файла.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CREDENTIALS_FILE = ".failovermenu"


class Settings(BaseSettings):
    """Настройки клиента (учетные данные хранятся отдельно, см. credentials.py)."""

    model_config = SettingsConfigDict(
        env_prefix="FAILOVER_MENU_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    credentials_path: Path = Field(
        default_factory=lambda: Path.home() / DEFAULT_CREDENTIALS_FILE,
        description="Путь к файлу с учетными данными (key=value)",
    )

    # Настройки запросов
    request_timeout: int = Field(
        default=30, description="Общий таймаут HTTP запросов в секундах", ge=1, le=300
    )

    max_retries: int = Field(
        default=3,
        description="Максимальное количество повторов при 429/5xx",
        ge=0,
        le=10,
    )

    auth_timeout: int | None = Field(
        default=None,
        description="Значение заголовка Timeout для запроса токена (секунды)",
        ge=1,
    )

    log_level: str = Field(default="INFO", description="Уровень логирования")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Нормализация уровня логирования."""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return v


# Глобальный экземпляр настроек (singleton)
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Получить экземпляр настроек (singleton pattern).

    Returns:
        Settings: Экземпляр настроек приложения
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Сбросить кэшированные настройки (для тестирования)."""
    global _settings
    _settings = None
