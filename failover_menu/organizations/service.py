"""
Получение списка организаций iiko Cloud API.
"""

import logging

from ..api_client import OpenApiClient
from ..exceptions import RetryableAuthError
from .models import Organization, OrganizationsRequest, OrganizationsResponse

logger = logging.getLogger(__name__)

ORGANIZATIONS_ENDPOINT = "api/1/organizations"


def fetch_organizations(
    client: OpenApiClient,
    request: OrganizationsRequest | None = None,
    retry_on_auth: bool = True,
) -> OrganizationsResponse:
    """
    Получить список организаций.

    Без request выполняется GET, с request - POST с фильтрами.
    При ответе 401 клиент уже сбросил токен, поэтому запрос
    отправляется повторно один раз (с новой авторизацией).

    Args:
        client: Авторизованный клиент
        request: Фильтры запроса
        retry_on_auth: Повторить запрос один раз после 401

    Returns:
        OrganizationsResponse: Организации в порядке, полученном от API

    Raises:
        FailoverMenuError: Любая ошибка клиента, включая повторный 401
    """
    logger.info("Получение списка организаций")

    def send() -> OrganizationsResponse:
        if request is None:
            return client.get(ORGANIZATIONS_ENDPOINT, OrganizationsResponse)
        return client.post(ORGANIZATIONS_ENDPOINT, request, OrganizationsResponse)

    try:
        response = send()
    except RetryableAuthError:
        if not retry_on_auth:
            raise
        logger.info("Повторяю запрос организаций после 401")
        response = send()

    logger.info(f"Получено организаций: {len(response.organizations)}")
    return response


def get_main_organization(response: OrganizationsResponse) -> Organization | None:
    """Первая организация в порядке ответа API или None, если список пуст."""
    if not response.organizations:
        return None
    return response.organizations[0]
