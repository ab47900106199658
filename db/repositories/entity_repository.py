"""
db/repositories/entity_repository.py

Generic CRUD repository shared by the company and user endpoints.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from db.base import Base
from db.models.company import Company
from db.models.user import User
from db.repositories.errors import EntityNotFoundError

ModelT = TypeVar("ModelT", bound=Base)


class EntityRepository(Generic[ModelT]):
    """
    Lookup and write helpers for one mapped model. Writes are flushed, not
    committed; the calling service owns the transaction.
    """

    model: type[ModelT]
    entity_name: str
    id_field: str

    def __init__(self, session: Session) -> None:
        self._session = session

    def query(self) -> Select[tuple[ModelT]]:
        return select(self.model)

    def find_all(self, stmt: Select[tuple[ModelT]], *, offset: int, limit: int) -> list[ModelT]:
        stmt = stmt.offset(offset).limit(limit)
        return list(self._session.execute(stmt).scalars().all())

    def get(self, entity_id: int) -> ModelT | None:
        return self._session.get(self.model, entity_id)

    def get_or_raise(self, entity_id: int) -> ModelT:
        entity = self.get(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, f"{self.id_field}={entity_id}")
        return entity

    def add(self, values: Mapping[str, Any]) -> ModelT:
        entity = self.model(**values)
        self._session.add(entity)
        self._session.flush()
        return entity

    def update(self, entity_id: int, values: Mapping[str, Any]) -> ModelT:
        entity = self.get_or_raise(entity_id)
        for attribute, value in values.items():
            setattr(entity, attribute, value)
        self._session.flush()
        return entity

    def delete(self, entity_id: int) -> int:
        entity = self.get_or_raise(entity_id)
        self._session.delete(entity)
        self._session.flush()
        return entity_id


class CompanyRepository(EntityRepository[Company]):
    model = Company
    entity_name = "company"
    id_field = "companyId"


class UserRepository(EntityRepository[User]):
    model = User
    entity_name = "user"
    id_field = "userId"
