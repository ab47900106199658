"""
app/services/company_service.py

Company CRUD service.
"""

from __future__ import annotations

from functools import lru_cache

from app.config import get_api_settings
from app.schemas.company import COMPANY_FIELD_MAP
from app.services.entity_service import EntityService
from db.models.company import Company
from db.repositories.entity_repository import CompanyRepository

DEFAULT_SORT_BY_COMPANY_NAME = "+companyName"


class CompanyService(EntityService[Company]):
    repository_class = CompanyRepository
    field_map = COMPANY_FIELD_MAP
    search_attributes = ("client_name", "client_type", "search_help", "industry", "producer")
    default_sort = DEFAULT_SORT_BY_COMPANY_NAME


@lru_cache(maxsize=1)
def get_company_service() -> CompanyService:
    return CompanyService(settings=get_api_settings())
