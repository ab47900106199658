"""
app/domain/company_import.py

Domain models and errors used by the company CSV import flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence, Union

BLANK_RECORD = "Blank Record"
INCOMPLETE_RECORD = "Not All Fields available in record"

OUTCOME_SKIPPED = "Skipped"
OUTCOME_NOT_ADDED = "Record could not be added"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UploadedFile:
    """
    Raw upload as received from the request.
    """

    filename: str | None
    content: bytes


@dataclass(frozen=True)
class ValidatedFile:
    """
    Decoded file lines (header first) and the split header tokens.
    """

    filename: str
    lines: list[str]
    header_tokens: list[str]

    @property
    def records(self) -> list[str]:
        return self.lines[1:]


@dataclass(frozen=True)
class ColumnMapping:
    """
    Canonical column -> expected CSV header, per target table.
    """

    company: dict[str, str]
    location: dict[str, str]

    @property
    def company_columns(self) -> list[str]:
        return list(self.company)

    @property
    def location_columns(self) -> list[str]:
        return list(self.location)


# ---------------------------------------------------------------------------
# Per-record outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParsedRecord:
    """
    Values for one line, aligned with ColumnMapping column order.
    """

    company_values: list[str]
    location_values: list[str]


@dataclass(frozen=True)
class SkippedRecord:
    reason: str


@dataclass(frozen=True)
class FatalRecord:
    """
    Unexpected failure while reading a line; aborts the whole import.
    """

    message: str


RecordOutcome = Union[ParsedRecord, SkippedRecord, FatalRecord]


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FailureRecord:
    """
    One line that was not imported.
    """

    index: int
    record: str
    reason: str
    outcome: str


@dataclass
class ImportResult:
    """
    Running totals for one import call. Mutated only by the import executor.
    """

    total_records: int = 0
    success_count: int = 0
    failed_count: int = 0
    failed_records: list[FailureRecord] = field(default_factory=list)

    def record_success(self) -> None:
        self.success_count += 1

    def record_failure(self, index: int, record: str, reason: str, outcome: str) -> None:
        self.failed_count += 1
        self.failed_records.append(
            FailureRecord(index=index, record=record, reason=reason, outcome=outcome)
        )


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class CompanyImportError(ValueError):
    """
    Base class for failures that abort an import before any report exists.
    """

    error_code = "FILE_IMPORT_ERROR"
    status_code = 400

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        return {
            "errorCode": self.error_code,
            "message": self.message,
            "context": self.context,
        }


class InvalidFileExtensionError(CompanyImportError):
    error_code = "INVALID_FILE_EXTENSION"

    def __init__(self, filename: str | None, allowed_extensions: Sequence[str]) -> None:
        allowed = ", ".join(allowed_extensions)
        super().__init__(
            f"File '{filename or ''}' has an invalid extension. Allowed extensions: {allowed}.",
            filename=filename,
            allowed_extensions=list(allowed_extensions),
        )


class NoRecordsFoundError(CompanyImportError):
    error_code = "NO_RECORDS_FOUND_FOR_IMPORT"

    def __init__(self, filename: str | None) -> None:
        super().__init__(f"No records found to import in file '{filename or ''}'.", filename=filename)


class FileReadError(CompanyImportError):
    error_code = "FILE_READ_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(f"Unable to read import file: {message}")


class MissingRequiredHeadersError(CompanyImportError):
    error_code = "MISSING_REQUIRED_HEADERS"

    def __init__(
        self,
        filename: str,
        missing_headers: Sequence[str],
        required_headers: Sequence[str],
    ) -> None:
        super().__init__(
            f"File '{filename}' is missing required headers: {','.join(missing_headers)}. "
            f"Required headers: {','.join(required_headers)}.",
            filename=filename,
            missing_headers=list(missing_headers),
            required_headers=list(required_headers),
        )
        self.missing_headers = list(missing_headers)


class MaxRecordExceededError(CompanyImportError):
    error_code = "MAX_RECORD_EXCEEDED"

    def __init__(self, maximum: int) -> None:
        super().__init__(
            f"File exceeds the maximum of {maximum} records allowed per import.",
            maximum=maximum,
        )


class DuplicateHeadersError(CompanyImportError):
    error_code = "DUPLICATE_HEADERS"

    def __init__(self, filename: str, duplicates: Sequence[str]) -> None:
        super().__init__(
            f"File '{filename}' repeats headers: {','.join(duplicates)}.",
            filename=filename,
            duplicate_headers=list(duplicates),
        )


class CustomFieldLookupError(CompanyImportError):
    error_code = "CUSTOM_FIELD_LOOKUP_FAILED"
    status_code = 503

    def __init__(self, broker_id: int, message: str) -> None:
        super().__init__(message, broker_id=broker_id)
