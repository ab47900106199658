"""
app/schemas/user.py

Request/response schemas for the user endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", min_length=1, max_length=100)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=100)
    user_name: str = Field(..., alias="userName", min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str | None = Field(default=None, max_length=40)
    client_id: int | None = Field(default=None, alias="companyId", ge=1)
    is_active: bool = Field(default=True, alias="isActive")


class UserResponse(UserRequest):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    user_id: int = Field(..., alias="userId")
    broker_id: int | None = Field(default=None, alias="brokerId")


USER_FIELD_MAP: dict[str, str] = {
    (field_info.alias or name): name for name, field_info in UserResponse.model_fields.items()
}
