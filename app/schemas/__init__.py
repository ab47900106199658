"""
app/schemas package marker.
"""

from app.schemas.company import COMPANY_FIELD_MAP, CompanyRequest, CompanyResponse
from app.schemas.user import USER_FIELD_MAP, UserRequest, UserResponse

__all__ = [
    "COMPANY_FIELD_MAP",
    "CompanyRequest",
    "CompanyResponse",
    "USER_FIELD_MAP",
    "UserRequest",
    "UserResponse",
]
