"""
Repository layer exports.
"""

from db.repositories.entity_repository import CompanyRepository, EntityRepository, UserRepository
from db.repositories.errors import (
    CustomFieldReadError,
    EntityNotFoundError,
    RecordPersistenceError,
    RepositoryError,
)
from db.repositories.file_data_repository import FileDataRepository

__all__ = [
    "CompanyRepository",
    "CustomFieldReadError",
    "EntityNotFoundError",
    "EntityRepository",
    "FileDataRepository",
    "RecordPersistenceError",
    "RepositoryError",
    "UserRepository",
]
