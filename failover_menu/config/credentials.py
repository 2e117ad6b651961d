"""
Загрузка учетных данных iiko Cloud API из файла ~/.failovermenu.

Формат файла - строки вида key=value:

    endpoint=https://api-ru.iiko.services
    login=my-login
    key=0123456789abcdef
    email=owner@example.com
    expiration=2026-12-31
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)

RECOGNIZED_KEYS = ("endpoint", "login", "key", "email", "expiration")


class Credentials(BaseModel):
    """Учетные данные клиента. Неизменяемы после загрузки."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = ""
    login: str = ""
    key: str = ""
    email: str = ""
    expiration: str = ""

    @field_validator("endpoint")
    @classmethod
    def normalize_endpoint(cls, v: str) -> str:
        """Убрать завершающий слэш из базового URL."""
        return v.rstrip("/")

    def __repr__(self) -> str:
        # key не выводим в логи
        return (
            f"Credentials(endpoint={self.endpoint!r}, login={self.login!r}, "
            f"email={self.email!r}, expiration={self.expiration!r})"
        )


def parse_credentials(text: str) -> Credentials:
    """
    Разобрать содержимое файла учетных данных.

    Пустые строки и строки, начинающиеся с '#', пропускаются.
    Неизвестные ключи игнорируются. Значение может содержать '=',
    разбиение выполняется по первому символу.

    Args:
        text: Содержимое файла

    Returns:
        Credentials: Загруженные учетные данные

    Raises:
        ConfigError: Строка без '=' или пустой ключ
    """
    values: dict[str, str] = {}

    for lineno, raw_line in enumerate(text.splitlines(), 1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ConfigError(f"Некорректная строка {lineno}: {raw_line!r}")

        if key in RECOGNIZED_KEYS:
            values[key] = value.strip()
        else:
            logger.debug(f"Пропускаю неизвестный ключ: {key}")

    return Credentials(**values)


def load_credentials(path: Path | str | None = None) -> Credentials:
    """
    Загрузить учетные данные из файла.

    Args:
        path: Путь к файлу. Если None, берется из настроек (по умолчанию ~/.failovermenu)

    Returns:
        Credentials: Загруженные учетные данные

    Raises:
        ConfigError: Файл не найден, не читается или содержит ошибки
    """
    if path is None:
        from .settings import get_settings

        path = get_settings().credentials_path

    path = Path(path).expanduser()
    logger.debug(f"Загрузка учетных данных из {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Не удалось прочитать файл учетных данных {path}: {e}") from e

    try:
        credentials = parse_credentials(text)
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}") from e

    logger.info(f"Учетные данные загружены: {credentials.endpoint or '<endpoint не задан>'}")
    return credentials
