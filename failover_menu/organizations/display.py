"""
Вывод организаций в консоль.
"""

import sys
from typing import TextIO

from .models import Organization, OrganizationsResponse

SEPARATOR = "=" * 51


def format_organization(org: Organization) -> str:
    lines = [
        f"  Name: {org.name}",
        f"  ID: {org.id}",
        f"  Type: {org.response_type}",
    ]
    if org.country:
        lines.append(f"  Country: {org.country}")
    if org.restaurant_address:
        lines.append(f"  Address: {org.restaurant_address}")
    return "\n".join(lines)


def print_organization(org: Organization | None, file: TextIO | None = None) -> None:
    """Вывести одну организацию (или сообщение, что ее нет)."""
    out = file or sys.stdout
    if org is None:
        print("No organization found.", file=out)
        return
    print(format_organization(org), file=out)


def print_organizations_response(response: OrganizationsResponse, file: TextIO | None = None) -> None:
    """
    Вывести все организации в порядке ответа API.

    Каждая организация выводится отдельным пронумерованным блоком.
    """
    out = file or sys.stdout
    organizations = response.organizations

    print(f"\nSuccessfully retrieved {len(organizations)} organizations:", file=out)
    if not organizations:
        print("No organizations found.", file=out)
        return

    for index, org in enumerate(organizations, 1):
        print(f"\nOrganization {index}:", file=out)
        print(format_organization(org), file=out)
        print(f"\n{SEPARATOR}", file=out)


def print_error_chain(error: BaseException, title: str, file: TextIO | None = None) -> None:
    """Вывести ошибку и всю цепочку причин (__cause__ / __context__)."""
    out = file or sys.stderr
    print(title, file=out)
    print(f"  {error}", file=out)

    cause = error.__cause__ or error.__context__
    while cause is not None:
        print(f"  Caused by: {cause}", file=out)
        cause = cause.__cause__ or cause.__context__
