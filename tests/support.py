"""
Shared builders for the test modules.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from app.domain.company_import import UploadedFile
from db.base import Base
from db.repositories.errors import CustomFieldReadError, RecordPersistenceError

COMPANY_HEADER = "companyName,companyType,searchHelp,locationName"


def make_engine() -> Engine:
    """
    In-memory SQLite database with every table created and foreign keys enforced.
    """

    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    return engine


def csv_upload(*lines: str, filename: str = "companies.csv") -> UploadedFile:
    return UploadedFile(filename=filename, content=("\n".join(lines) + "\n").encode("utf-8"))


class FakeImportRepository:
    """
    In-memory stand-in for FileDataRepository.

    Rows whose first company value is listed in `reject` fail to persist.
    """

    def __init__(
        self,
        *,
        custom_fields: Mapping[str, str] | None = None,
        reject: Sequence[str] = (),
        lookup_error: str | None = None,
    ) -> None:
        self.custom_fields = dict(custom_fields or {})
        self.reject = set(reject)
        self.lookup_error = lookup_error
        self.lookups: list[int] = []
        self.saved: list[dict[str, Any]] = []

    def lookup_custom_fields(self, broker_id: int) -> dict[str, str]:
        self.lookups.append(broker_id)
        if self.lookup_error is not None:
            raise CustomFieldReadError(broker_id, self.lookup_error)
        return dict(self.custom_fields)

    def save_company_record(
        self,
        company_columns: Sequence[str],
        company_values: Sequence[Any],
        location_columns: Sequence[str],
        location_values: Sequence[Any],
        *,
        broker_id: int | None = None,
    ) -> int:
        if company_values and company_values[0] in self.reject:
            raise RecordPersistenceError(f"duplicate company name '{company_values[0]}'")
        self.saved.append(
            {
                "company": dict(zip(company_columns, company_values)),
                "location": dict(zip(location_columns, location_values)),
                "broker_id": broker_id,
            }
        )
        return len(self.saved)
