"""
Модуль управления авторизацией в iiko Cloud API.
"""

import logging

from ..client import HTTPClient
from ..client.responses import AccessTokenRequest, AccessTokenResponse, parse_error, parse_json
from ..config import Credentials
from ..exceptions import AuthenticationError
from .token_cache import SessionTokenCache

logger = logging.getLogger(__name__)

ACCESS_TOKEN_ENDPOINT = "api/1/access_token"


def build_url(endpoint: str, path: str) -> str:
    """Склеить базовый URL и путь ровно одним слэшем."""
    return f"{endpoint.rstrip('/')}/{path.lstrip('/')}"


class AuthManager:
    """
    Менеджер авторизации для iiko Cloud API.

    Особенности:
    - Токен получается по apiLogin и хранится только в памяти
    - Токен общий для всех потоков, использующих клиент
    - Токен сбрасывается при ответе 401 (см. invalidate)
    """

    def __init__(self, credentials: Credentials, http_client: HTTPClient):
        """
        Инициализация менеджера авторизации.

        Args:
            credentials: Учетные данные
            http_client: HTTP клиент для выполнения запросов
        """
        self.credentials = credentials
        self.http_client = http_client
        self.cache = SessionTokenCache()

    @property
    def token(self) -> str | None:
        """Текущий токен или None."""
        return self.cache.get()

    @property
    def is_authenticated(self) -> bool:
        """True если токен получен и еще не сброшен."""
        return not self.cache.is_empty()

    def authenticate(self, timeout: int | None = None) -> None:
        """
        Получить новый токен и сохранить его в кэш.

        Args:
            timeout: Значение заголовка Timeout (секунды) для этого запроса

        Raises:
            AuthenticationError: Сервер вернул статус, отличный от 200
            TransportError: Сетевая ошибка
            DeserializationError: В ответе 200 нет токена
        """
        logger.info("Выполняю авторизацию в iiko Cloud API...")

        headers = {"Content-Type": "application/json"}
        if timeout is not None:
            headers["Timeout"] = str(timeout)

        payload = AccessTokenRequest(api_login=self.credentials.login)
        response = self.http_client.post(
            build_url(self.credentials.endpoint, ACCESS_TOKEN_ENDPOINT),
            json=payload.model_dump(by_alias=True),
            headers=headers,
            log_body=False,
        )

        if response.status_code != 200:
            error = parse_error(response)
            logger.error(f"Ошибка авторизации: {response.status_code} {error.error_description}")
            raise AuthenticationError(
                response.status_code, error.error_description, error.error_code
            )

        token_response = parse_json(response, AccessTokenResponse)
        self.cache.set(token_response.token)

        logger.info("✓ Авторизация успешна")
        logger.debug(f"Токен: {token_response.token[:20]}...")

    def auth_headers(self) -> dict[str, str]:
        """
        Заголовки для запроса к API.

        Returns:
            dict: Content-Type и, если токен есть, Authorization: Bearer
        """
        headers = {"Content-Type": "application/json"}
        token = self.cache.get()
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def invalidate(self) -> None:
        """Сбросить токен (после ответа 401)."""
        logger.info("Токен отклонен сервером, сбрасываю")
        self.cache.clear()
