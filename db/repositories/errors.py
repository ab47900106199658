"""
Repository-layer exceptions.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base exception for repository failures."""


class EntityNotFoundError(RepositoryError):
    """Raised when a referenced row does not exist."""

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(f"No {entity} found with {key}")
        self.entity = entity
        self.key = key


class RecordPersistenceError(RepositoryError):
    """Raised when one imported company/location pair cannot be written."""


class CustomFieldReadError(RepositoryError):
    """Raised when custom field definitions cannot be read."""

    def __init__(self, broker_id: int, message: str) -> None:
        super().__init__(message)
        self.broker_id = broker_id
