"""
app/services/entity_service.py

Shared list/get/add/update/delete behaviour for the company and user APIs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import APISettings
from app.services.query_utils import (
    apply_filters,
    apply_search,
    apply_sort,
    parse_sort,
    resolve_page,
)
from db.base import Base
from db.repositories.entity_repository import EntityRepository

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class EntityConflictError(ValueError):
    """
    Raised when a write violates a uniqueness or reference constraint.
    """


class EntityService(Generic[ModelT]):
    """
    Subclasses supply the repository class, the wire-name -> attribute map,
    the searchable attributes and the default sort.
    """

    repository_class: ClassVar[type[EntityRepository]]
    field_map: ClassVar[Mapping[str, str]]
    search_attributes: ClassVar[tuple[str, ...]]
    default_sort: ClassVar[str]

    def __init__(self, *, settings: APISettings) -> None:
        self._settings = settings

    def list(
        self,
        db: Session,
        *,
        offset: int | None = None,
        limit: int | None = None,
        sort: str | None = None,
        search_spec: str | None = None,
        request_params: Mapping[str, str] | None = None,
    ) -> list[ModelT]:
        """
        Filter, search, sort and paginate entities.

        Raises InvalidQueryError for an unknown sort field or bad filter value.
        """

        params = dict(request_params or {})
        if logger.isEnabledFor(logging.DEBUG):
            for name, value in params.items():
                logger.debug("List %s parameter %s=%r", self.repository_class.entity_name, name, value)

        repository = self.repository_class(db)
        model = repository.model
        page = resolve_page(
            offset,
            limit,
            default_limit=self._settings.default_limit,
            max_limit=self._settings.max_limit,
        )
        sort_spec = parse_sort(sort, self.field_map, self.default_sort)

        stmt = repository.query()
        stmt = apply_filters(stmt, model, self.field_map, params)
        stmt = apply_search(stmt, model, self.search_attributes, search_spec)
        stmt = apply_sort(stmt, model, sort_spec)
        return repository.find_all(stmt, offset=page.offset, limit=page.limit)

    def get(self, db: Session, entity_id: int) -> ModelT:
        return self.repository_class(db).get_or_raise(entity_id)

    def add(self, db: Session, values: Mapping[str, Any], *, broker_id: int) -> ModelT:
        repository = self.repository_class(db)
        payload = {**values, "broker_id": broker_id}
        try:
            entity = repository.add(payload)
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise EntityConflictError(self._conflict_message(exc)) from exc
        db.refresh(entity)
        return entity

    def update(
        self,
        db: Session,
        entity_id: int,
        values: Mapping[str, Any],
        *,
        broker_id: int | None = None,
    ) -> ModelT:
        repository = self.repository_class(db)
        payload = dict(values)
        if broker_id is not None:
            payload["broker_id"] = broker_id
        try:
            entity = repository.update(entity_id, payload)
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise EntityConflictError(self._conflict_message(exc)) from exc
        db.refresh(entity)
        return entity

    def delete(self, db: Session, entity_id: int) -> int:
        deleted = self.repository_class(db).delete(entity_id)
        db.commit()
        return deleted

    def _conflict_message(self, exc: IntegrityError) -> str:
        return f"The {self.repository_class.entity_name} conflicts with an existing record: {exc.orig}"
