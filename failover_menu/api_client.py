"""
Авторизованный клиент iiko Cloud API.
"""

import logging
from pathlib import Path
from typing import Any

import requests

from .auth import AuthManager, build_url
from .client import HTTPClient
from .client.responses import ModelT, parse_error, parse_json
from .config import Credentials, Settings, get_settings, load_credentials
from .exceptions import ApiError, RetryableAuthError

logger = logging.getLogger(__name__)


class OpenApiClient:
    """
    Клиент iiko Cloud API с автоматическим получением токена.

    Перед каждым запросом проверяет наличие токена и при необходимости
    авторизуется. При ответе 401 сбрасывает токен и бросает
    RetryableAuthError: повторная отправка запроса авторизуется заново.
    Сам клиент запросы не повторяет.

    Пример использования:
        >>> from failover_menu import OpenApiClient
        >>> from failover_menu.organizations import OrganizationsResponse
        >>>
        >>> with OpenApiClient.from_file() as client:
        ...     response = client.get("api/1/organizations", OrganizationsResponse)
    """

    def __init__(self, credentials: Credentials, settings: Settings | None = None):
        """
        Инициализация клиента.

        Args:
            credentials: Учетные данные
            settings: Экземпляр настроек. Если None, будет создан автоматически.
        """
        self.settings = settings or get_settings()
        self.credentials = credentials
        self.http_client = HTTPClient(self.settings)
        self.auth = AuthManager(credentials, self.http_client)

        logger.debug(f"Клиент создан для {credentials.endpoint}")

    @classmethod
    def from_file(cls, path: Path | str | None = None, settings: Settings | None = None) -> "OpenApiClient":
        """Создать клиент с учетными данными из файла (по умолчанию ~/.failovermenu)."""
        settings = settings or get_settings()
        credentials = load_credentials(path or settings.credentials_path)
        return cls(credentials, settings)

    @property
    def is_authenticated(self) -> bool:
        """True если токен получен и еще не сброшен."""
        return self.auth.is_authenticated

    @property
    def token(self) -> str | None:
        """Текущий токен или None."""
        return self.auth.token

    def authenticate(self, timeout: int | None = None) -> None:
        """
        Получить новый токен.

        Args:
            timeout: Значение заголовка Timeout в секундах

        Raises:
            AuthenticationError: Сервер отказал в выдаче токена
            TransportError: Сетевая ошибка
        """
        self.auth.authenticate(timeout)

    def ensure_authenticated(self) -> None:
        """
        Авторизоваться, если токена еще нет.

        Проверка и авторизация не атомарны: два потока могут одновременно
        увидеть пустой кэш и оба получить токен. Это допустимо, в кэше
        остается токен последнего записавшего.
        """
        if not self.auth.is_authenticated:
            logger.debug("Токен отсутствует, требуется авторизация")
            self.authenticate(None)

    def get(self, endpoint: str, model: type[ModelT] | None = None) -> Any:
        """
        Выполнить GET запрос.

        Args:
            endpoint: Путь относительно базового URL (например, "api/1/organizations")
            model: Модель ответа. Если None, возвращается сырой JSON

        Returns:
            Экземпляр model или декодированный JSON
        """
        logger.debug(f"GET {endpoint}")
        self.ensure_authenticated()

        response = self.http_client.get(
            build_url(self.credentials.endpoint, endpoint),
            headers=self.auth.auth_headers(),
        )
        return self._handle_response(response, model)

    def post(self, endpoint: str, body: Any = None, model: type[ModelT] | None = None) -> Any:
        """
        Выполнить POST запрос с JSON телом.

        Args:
            endpoint: Путь относительно базового URL
            body: Тело запроса (dict или модель pydantic)
            model: Модель ответа. Если None, возвращается сырой JSON

        Returns:
            Экземпляр model или декодированный JSON
        """
        logger.debug(f"POST {endpoint}")
        self.ensure_authenticated()

        if hasattr(body, "model_dump"):
            body = body.model_dump(by_alias=True, exclude_none=True)

        response = self.http_client.post(
            build_url(self.credentials.endpoint, endpoint),
            json=body,
            headers=self.auth.auth_headers(),
        )
        return self._handle_response(response, model)

    def _handle_response(self, response: requests.Response, model: type[ModelT] | None) -> Any:
        if response.status_code == 200:
            return parse_json(response, model)

        if response.status_code == 401:
            self.auth.invalidate()
            raise RetryableAuthError()

        error = parse_error(response)
        raise ApiError(response.status_code, error.error_description, error.error_code)

    def close(self) -> None:
        """Закрыть все соединения."""
        self.http_client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        auth_status = "authenticated" if self.is_authenticated else "not authenticated"
        return f"<OpenApiClient({self.credentials.endpoint}, {auth_status})>"
