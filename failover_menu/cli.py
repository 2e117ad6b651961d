"""
Консольный запуск: загрузить учетные данные, получить организации и вывести главную.
"""

import logging

from .api_client import OpenApiClient
from .config import Settings, get_settings
from .exceptions import ConfigError, FailoverMenuError
from .organizations import (
    OrganizationsResponse,
    fetch_organizations,
    get_main_organization,
    print_error_chain,
    print_organization,
    print_organizations_response,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run(settings: Settings) -> int:
    """
    Основной сценарий.

    Ошибка получения организаций не прерывает работу: цепочка ошибок
    выводится в stderr, дальше используется пустой список.

    Returns:
        int: Код выхода (0 - успех, 1 - нет учетных данных)
    """
    try:
        print("Initializing API client...")
        client = OpenApiClient.from_file(settings=settings)
    except ConfigError as e:
        print_error_chain(e, "Failed to load credentials:")
        return 1

    with client:
        print("Fetching organizations...")
        try:
            if settings.auth_timeout is not None:
                client.authenticate(settings.auth_timeout)
            response = fetch_organizations(client)
        except FailoverMenuError as e:
            print_error_chain(e, "Error fetching organizations:")
            response = OrganizationsResponse(organizations=[])

        print_organizations_response(response)

        print("\nMain organization:")
        print_organization(get_main_organization(response))

    logger.debug("Завершено")
    return 0


def main() -> int:
    settings = get_settings()
    configure_logging(settings)
    logger.debug("Запуск")
    return run(settings)
