"""
app/services package marker.
"""

from app.services.company_import_service import CompanyImportService, get_company_import_service
from app.services.company_service import CompanyService, get_company_service
from app.services.entity_service import EntityConflictError
from app.services.user_service import UserService, get_user_service

__all__ = [
    "CompanyImportService",
    "CompanyService",
    "EntityConflictError",
    "UserService",
    "get_company_import_service",
    "get_company_service",
    "get_user_service",
]
