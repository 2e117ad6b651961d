from .display import (
    format_organization,
    print_error_chain,
    print_organization,
    print_organizations_response,
)
from .models import Organization, OrganizationsRequest, OrganizationsResponse
from .service import ORGANIZATIONS_ENDPOINT, fetch_organizations, get_main_organization

__all__ = [
    "ORGANIZATIONS_ENDPOINT",
    "Organization",
    "OrganizationsRequest",
    "OrganizationsResponse",
    "fetch_organizations",
    "format_organization",
    "get_main_organization",
    "print_error_chain",
    "print_organization",
    "print_organizations_response",
]
