"""
Разбор ответов iiko Cloud API.
"""

import logging
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import DeserializationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiModel(BaseModel):
    """Базовая модель ответа: camelCase алиасы, лишние поля игнорируются."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class AccessTokenRequest(ApiModel):
    api_login: str = Field(alias="apiLogin")


class AccessTokenResponse(ApiModel):
    token: str
    correlation_id: str | None = Field(default=None, alias="correlationId")


class ErrorResponse(ApiModel):
    error_description: str = Field(alias="errorDescription")
    error_code: str | None = Field(default=None, alias="errorCode")


def parse_json(response: requests.Response, model: type[ModelT] | None = None) -> Any:
    """
    Разобрать тело ответа.

    Args:
        response: Ответ от сервера
        model: Модель pydantic для валидации. Если None, возвращается сырой JSON

    Returns:
        Экземпляр model или декодированный JSON

    Raises:
        DeserializationError: Тело не JSON или не соответствует модели
    """
    try:
        data = response.json()
    except ValueError as e:
        raise DeserializationError("Failed to deserialize response body: not JSON") from e

    if model is None:
        return data

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DeserializationError(
            f"Failed to deserialize response body as {model.__name__}"
        ) from e


def parse_error(response: requests.Response) -> ErrorResponse:
    """
    Разобрать тело ответа с ошибкой {errorDescription, errorCode?}.

    Если тело не соответствует формату, описанием ошибки становится
    текст ответа или reason-фраза статуса.
    """
    try:
        return parse_json(response, ErrorResponse)
    except DeserializationError:
        description = response.text.strip()[:200] or response.reason or "Unknown error"
        logger.warning(f"Нестандартное тело ошибки, статус {response.status_code}")
        return ErrorResponse(errorDescription=description)
