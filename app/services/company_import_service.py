"""
app/services/company_import_service.py

Service layer for the bulk company CSV import.

Flow for one upload:

    1. FileValidator.validate()           : extension, size, headers, record count
    2. ColumnMapper.build_column_mapping(): static + broker custom columns
    3. parse_record() per line            : blank / incomplete / parsed
    4. save_company_record() per line     : company + location as one unit

Steps 1 and 2 and unexpected parser failures abort the whole import with a
CompanyImportError. Blank lines, incomplete lines and rows the database
rejects are recorded in the ImportResult and the loop moves on; rows already
written stay written.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any, Protocol

from sqlalchemy.orm import Session

from app.config import CompanyImportSettings, get_company_import_settings
from app.domain.company_import import (
    OUTCOME_NOT_ADDED,
    OUTCOME_SKIPPED,
    FatalRecord,
    FileReadError,
    ImportResult,
    SkippedRecord,
    UploadedFile,
)
from app.mappers.column_mapper import ColumnMapper
from app.mappers.custom_field_cache import CustomFieldCache
from app.mappers.record_parser import build_header_index, parse_record
from app.validators.file_validator import FileValidator
from db.repositories.file_data_repository import FileDataRepository

logger = logging.getLogger(__name__)


class ImportRepository(Protocol):
    """
    Storage collaborator: custom field lookup plus the per-row write.
    """

    def lookup_custom_fields(self, broker_id: int) -> Mapping[str, str]:
        ...

    def save_company_record(
        self,
        company_columns: Sequence[str],
        company_values: Sequence[Any],
        location_columns: Sequence[str],
        location_values: Sequence[Any],
        *,
        broker_id: int | None = None,
    ) -> int:
        ...


class CompanyImportService:
    """
    Validates an uploaded company file and imports it row by row.
    """

    def __init__(
        self,
        *,
        settings: CompanyImportSettings,
        validator: FileValidator | None = None,
        custom_field_cache: CustomFieldCache | None = None,
    ) -> None:
        self._settings = settings
        self._validator = validator or FileValidator.from_settings(settings)
        self._custom_field_cache = custom_field_cache

    @property
    def result_file_name(self) -> str:
        return self._settings.result_file_name

    def bulk_upload(
        self,
        *,
        upload: UploadedFile,
        broker_id: int,
        db: Session,
    ) -> ImportResult:
        """
        Validate and import one uploaded file for `broker_id`.

        Raises CompanyImportError subclasses for batch-level failures.
        """

        return self.import_file(upload, broker_id=broker_id, repository=FileDataRepository(db))

    def import_file(
        self,
        upload: UploadedFile,
        *,
        broker_id: int,
        repository: ImportRepository,
    ) -> ImportResult:
        read_started = time.perf_counter()
        validated = self._validator.validate(upload)
        read_seconds = time.perf_counter() - read_started

        save_started = time.perf_counter()
        result = self.execute(
            validated.header_tokens,
            validated.records,
            broker_id=broker_id,
            repository=repository,
        )
        save_seconds = time.perf_counter() - save_started

        logger.info(
            "Company import finished file=%r broker_id=%s total=%d succeeded=%d failed=%d "
            "read_seconds=%.3f save_seconds=%.3f",
            validated.filename,
            broker_id,
            result.total_records,
            result.success_count,
            result.failed_count,
            read_seconds,
            save_seconds,
        )
        return result

    def execute(
        self,
        headers: Sequence[str],
        record_lines: Sequence[str],
        *,
        broker_id: int,
        repository: ImportRepository,
    ) -> ImportResult:
        """
        Import every line in order; exactly one outcome per line.
        """

        mapper = ColumnMapper(
            settings=self._settings,
            source=repository,
            cache=self._custom_field_cache,
        )
        column_mapping = mapper.build_column_mapping(broker_id)
        header_index = build_header_index(headers)
        company_columns = column_mapping.company_columns
        location_columns = column_mapping.location_columns

        result = ImportResult(total_records=len(record_lines))

        for record_index, raw_line in enumerate(record_lines, start=1):
            record = raw_line.strip()
            outcome = parse_record(raw_line, header_index, column_mapping)

            if isinstance(outcome, FatalRecord):
                logger.error(
                    "Company import aborted at record=%d broker_id=%s: %s",
                    record_index,
                    broker_id,
                    outcome.message,
                )
                raise FileReadError(outcome.message)

            if isinstance(outcome, SkippedRecord):
                self._record_failure(result, record_index, record, outcome.reason, OUTCOME_SKIPPED)
                continue

            try:
                repository.save_company_record(
                    company_columns,
                    outcome.company_values,
                    location_columns,
                    outcome.location_values,
                    broker_id=broker_id,
                )
            except Exception as exc:  # noqa: BLE001
                self._record_failure(result, record_index, record, str(exc), OUTCOME_NOT_ADDED)
                continue

            result.record_success()

        return result

    def _record_failure(
        self,
        result: ImportResult,
        record_index: int,
        record: str,
        reason: str,
        outcome: str,
    ) -> None:
        logger.warning(
            "Company import record=%d %s: %s",
            record_index,
            outcome.lower(),
            reason,
        )
        result.record_failure(record_index, record, reason, outcome)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_company_import_service() -> CompanyImportService:
    """
    Build and cache the import service with env-driven settings.
    """

    settings = get_company_import_settings()
    cache = None
    if settings.custom_field_cache_ttl_seconds > 0:
        cache = CustomFieldCache(ttl_seconds=settings.custom_field_cache_ttl_seconds)
    return CompanyImportService(settings=settings, custom_field_cache=cache)
