"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.company import Company
from db.models.custom_field import CustomField, CustomFieldType
from db.models.location import Location
from db.models.user import User

__all__ = [
    "Company",
    "CustomField",
    "CustomFieldType",
    "Location",
    "User",
]
