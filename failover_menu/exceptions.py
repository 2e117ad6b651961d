"""
Иерархия исключений клиента iiko Cloud API.

    FailoverMenuError
    +-- ConfigError            файл учетных данных отсутствует или поврежден
    +-- TransportError         сетевая ошибка (соединение, таймаут, исчерпаны повторы)
    +-- DeserializationError   тело ответа не соответствует ожидаемой схеме
    +-- AuthenticationError    не-200 ответ при получении токена
    +-- RetryableAuthError     401 на обычном запросе, токен уже сброшен
    +-- ApiError               любой другой не-200 ответ
"""


class FailoverMenuError(Exception):
    """Базовое исключение библиотеки."""


class ConfigError(FailoverMenuError):
    """Ошибка загрузки учетных данных."""


class TransportError(FailoverMenuError):
    """Сетевая ошибка. Исходное исключение requests доступно через __cause__."""


class DeserializationError(FailoverMenuError):
    """Тело ответа не удалось разобрать."""


class _StatusError(FailoverMenuError):
    def __init__(
        self,
        status_code: int,
        description: str,
        error_code: str | None = None,
        prefix: str = "Request failed",
    ):
        self.status_code = status_code
        self.description = description
        self.error_code = error_code
        message = f"{prefix} with status {status_code}: {description}"
        if error_code:
            message += f" ({error_code})"
        super().__init__(message)


class AuthenticationError(_StatusError):
    """Сервер отказал в выдаче токена."""

    def __init__(self, status_code: int, description: str, error_code: str | None = None):
        super().__init__(status_code, description, error_code, prefix="Authentication failed")


class ApiError(_StatusError):
    """Запрос завершился ошибкой, отличной от 401."""


class RetryableAuthError(FailoverMenuError):
    """
    Сервер вернул 401.

    Кэшированный токен к этому моменту уже сброшен, поэтому повторная
    отправка запроса выполнит авторизацию заново.
    """

    def __init__(self, message: str = "Authentication failed, please retry the request"):
        self.status_code = 401
        super().__init__(message)
