"""
Базовый HTTP клиент для работы с iiko Cloud API.
"""

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import Settings
from ..exceptions import TransportError

logger = logging.getLogger(__name__)


class HTTPClient:
    """
    Транспортный слой поверх requests.Session.

    Особенности:
    - Автоматические повторные попытки при 429 и 5xx
    - Общий таймаут для всех запросов
    - Логирование всех запросов
    - Статус ответа не проверяется: это делает вызывающий код
    """

    def __init__(self, settings: Settings):
        """
        Инициализация HTTP клиента.

        Args:
            settings: Экземпляр настроек приложения
        """
        self.settings = settings
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """
        Создать сессию с настройками повторных попыток.

        Returns:
            requests.Session: Настроенная сессия
        """
        session = requests.Session()

        retry_strategy = Retry(
            total=self.settings.max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD", "GET", "OPTIONS", "POST"],
            raise_on_status=False,
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def request(
        self,
        method: str,
        url: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
        log_body: bool = True,
        **kwargs
    ) -> requests.Response:
        """
        Выполнить HTTP запрос.

        Args:
            method: HTTP метод (GET, POST)
            url: URL для запроса
            json: Тело запроса, сериализуется в JSON
            headers: Заголовки запроса
            log_body: Логировать тело ответа (False для ответов с секретами)
            **kwargs: Дополнительные параметры для requests

        Returns:
            requests.Response: Ответ от сервера (с любым статусом)

        Raises:
            TransportError: Ошибка соединения, таймаут или исчерпаны повторы
        """
        if "timeout" not in kwargs:
            kwargs["timeout"] = self.settings.request_timeout

        logger.info(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json,
                headers=headers or {},
                **kwargs
            )
        except requests.RequestException as e:
            logger.error(f"Ошибка запроса {method} {url}: {e}")
            raise TransportError(f"Failed to send {method} request to {url}") from e

        logger.info(f"Response: {response.status_code}")
        if log_body:
            logger.debug(f"Response body: {response.text[:200]}...")

        return response

    def get(self, url: str, **kwargs) -> requests.Response:
        """Выполнить GET запрос."""
        return self.request("GET", url, **kwargs)

    def post(self, url: str, json: Any = None, **kwargs) -> requests.Response:
        """Выполнить POST запрос с JSON телом."""
        return self.request("POST", url, json=json, **kwargs)

    def close(self) -> None:
        """Закрыть сессию."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
