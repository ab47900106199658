"""
app/services/user_service.py

User CRUD service. Users are stamped with the broker id of the request
on create and update.
"""

from __future__ import annotations

from functools import lru_cache

from app.config import get_api_settings
from app.schemas.user import USER_FIELD_MAP
from app.services.entity_service import EntityService
from db.models.user import User
from db.repositories.entity_repository import UserRepository

DEFAULT_SORT_BY_USER_NAME = "+userName"


class UserService(EntityService[User]):
    repository_class = UserRepository
    field_map = USER_FIELD_MAP
    search_attributes = ("first_name", "last_name", "user_name", "email")
    default_sort = DEFAULT_SORT_BY_USER_NAME


@lru_cache(maxsize=1)
def get_user_service() -> UserService:
    return UserService(settings=get_api_settings())
