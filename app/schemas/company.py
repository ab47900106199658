"""
app/schemas/company.py

Request/response schemas for the company endpoints. Wire names are camelCase.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompanyRequest(BaseModel):
    """
    Body accepted by POST and PUT /v1/companies.
    """

    model_config = ConfigDict(populate_by_name=True)

    client_name: str = Field(..., alias="companyName", min_length=1, max_length=200)
    client_type: str = Field(..., alias="companyType", min_length=1, max_length=50)
    search_help: str = Field(..., alias="searchHelp", min_length=1, max_length=255)
    client_phone: str | None = Field(default=None, alias="companyPhone", max_length=40)
    industry: str | None = Field(default=None, max_length=100)
    company_size: str | None = Field(default=None, alias="companySize", max_length=20)
    producer: str | None = Field(default=None, max_length=100)
    is_active: bool = Field(default=True, alias="isActive")

    custom1: str | None = Field(default=None, max_length=255)
    custom2: str | None = Field(default=None, max_length=255)
    custom3: str | None = Field(default=None, max_length=255)
    custom4: str | None = Field(default=None, max_length=255)
    custom5: str | None = Field(default=None, max_length=255)
    custom6: str | None = Field(default=None, max_length=255)
    custom7: str | None = Field(default=None, max_length=255)
    custom8: str | None = Field(default=None, max_length=255)
    custom9: str | None = Field(default=None, max_length=255)
    custom10: str | None = Field(default=None, max_length=255)


class CompanyResponse(CompanyRequest):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    client_id: int = Field(..., alias="companyId")
    broker_id: int | None = Field(default=None, alias="brokerId")


COMPANY_FIELD_MAP: dict[str, str] = {
    (field_info.alias or name): name for name, field_info in CompanyResponse.model_fields.items()
}
