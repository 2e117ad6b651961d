from pydantic import Field

from ..client.responses import ApiModel


class Organization(ApiModel):
    """Организация из ответа api/1/organizations."""

    response_type: str = Field(alias="responseType")
    id: str
    name: str
    country: str | None = None
    restaurant_address: str | None = Field(default=None, alias="restaurantAddress")
    use_uae_addressing_system: bool | None = Field(default=None, alias="useUaeAddressingSystem")


class OrganizationsResponse(ApiModel):
    organizations: list[Organization]
    correlation_id: str | None = Field(default=None, alias="correlationId")


class OrganizationsRequest(ApiModel):
    """Тело POST-запроса списка организаций."""

    organization_ids: list[str] | None = Field(default=None, alias="organizationIds")
    return_additional_info: bool | None = Field(default=None, alias="returnAdditionalInfo")
    include_disabled: bool | None = Field(default=None, alias="includeDisabled")
