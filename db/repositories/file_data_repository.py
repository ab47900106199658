"""
db/repositories/file_data_repository.py

Write path for bulk-imported company rows and lookup of broker custom fields.

Rows are written with Core INSERT statements rather than ORM instances to
keep per-row overhead low. Each company/location pair is committed on its
own so one failing row never rolls back rows written before it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import Table, insert, select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session

from db.models.company import Company
from db.models.custom_field import CustomField, CustomFieldType
from db.models.location import Location
from db.repositories.errors import CustomFieldReadError, RecordPersistenceError


class FileDataRepository:
    """
    Persistence collaborator for the company CSV import.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def save_company_record(
        self,
        company_columns: Sequence[str],
        company_values: Sequence[Any],
        location_columns: Sequence[str],
        location_values: Sequence[Any],
        *,
        broker_id: int | None = None,
    ) -> int:
        """
        Insert one company row and its location row as a single unit.

        Returns the generated company id. Raises RecordPersistenceError when
        either insert fails; the partial write is rolled back.
        """

        company_row = _build_row(Company.__table__, company_columns, company_values)
        location_row = _build_row(Location.__table__, location_columns, location_values)
        if broker_id is not None:
            company_row.setdefault("broker_id", broker_id)

        try:
            result = self._session.execute(insert(Company.__table__).values(company_row))
            client_id = result.inserted_primary_key[0]
            location_row["client_id"] = client_id
            self._session.execute(insert(Location.__table__).values(location_row))
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise RecordPersistenceError(_describe(exc)) from exc

        return int(client_id)

    def lookup_custom_fields(
        self,
        broker_id: int,
        *,
        field_type: str = CustomFieldType.COMPANY,
    ) -> dict[str, str]:
        """
        Return display label -> field column for one broker, in definition order.
        """

        stmt = (
            select(CustomField.display_label, CustomField.field_column)
            .where(CustomField.broker_id == broker_id)
            .where(CustomField.field_type == field_type)
            .order_by(CustomField.id)
        )
        try:
            rows = self._session.execute(stmt).all()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise CustomFieldReadError(
                broker_id,
                f"Unable to read custom fields for broker {broker_id}: {_describe(exc)}",
            ) from exc

        return {label: str(column) for label, column in rows}


def _build_row(table: Table, columns: Sequence[str], values: Sequence[Any]) -> dict[str, Any]:
    if len(columns) != len(values):
        raise RecordPersistenceError(
            f"Expected {len(columns)} values for {table.name}, got {len(values)}"
        )

    unknown = [column for column in columns if column not in table.c]
    if unknown:
        raise RecordPersistenceError(
            f"Unknown column(s) for {table.name}: {', '.join(unknown)}"
        )

    return dict(zip(columns, values))


def _describe(exc: SQLAlchemyError) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)
