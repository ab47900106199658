"""
app/validators/file_validator.py

Structural validation of an uploaded company import file.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from app.config import CompanyImportSettings
from app.domain.company_import import (
    DuplicateHeadersError,
    FileReadError,
    InvalidFileExtensionError,
    MaxRecordExceededError,
    MissingRequiredHeadersError,
    NoRecordsFoundError,
    UploadedFile,
    ValidatedFile,
)
from app.mappers.record_parser import split_fields

FILE_ENCODING = "utf-8-sig"


def has_valid_extension(filename: str | None, valid_extensions: Sequence[str]) -> bool:
    """
    Compare the text after the last dot with the allowed extensions, case-sensitively.
    """

    if not filename or "." not in filename:
        return False
    return filename.rsplit(".", 1)[1] in valid_extensions


def get_missing_headers(headers: Sequence[str], required_headers: Sequence[str]) -> list[str]:
    present = set(headers)
    return [header for header in required_headers if header not in present]


def split_lines(text: str) -> list[str]:
    """
    Split on \\n, \\r\\n or \\r only; a trailing line break does not add a line.
    """

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    if not normalized:
        return []
    lines = normalized.split("\n")
    if normalized.endswith("\n"):
        lines.pop()
    return lines


class FileValidator:
    """
    Runs every file-level check; the first violation aborts the import.
    """

    def __init__(
        self,
        *,
        required_headers: Sequence[str],
        max_records: int,
        valid_extensions: Sequence[str],
    ) -> None:
        self._required_headers = tuple(required_headers)
        self._max_records = max_records
        self._valid_extensions = tuple(valid_extensions)

    @classmethod
    def from_settings(cls, settings: CompanyImportSettings) -> "FileValidator":
        return cls(
            required_headers=settings.required_headers,
            max_records=settings.max_records,
            valid_extensions=settings.valid_extensions,
        )

    def validate(self, upload: UploadedFile) -> ValidatedFile:
        filename = upload.filename
        if not has_valid_extension(filename, self._valid_extensions):
            raise InvalidFileExtensionError(filename, self._valid_extensions)

        if not upload.content:
            raise NoRecordsFoundError(filename)

        try:
            lines = split_lines(upload.content.decode(FILE_ENCODING))
        except UnicodeDecodeError as exc:
            raise FileReadError(str(exc)) from exc

        if not lines:
            raise NoRecordsFoundError(filename)

        header_tokens = split_fields(lines[0])
        missing = get_missing_headers(header_tokens, self._required_headers)
        if missing:
            raise MissingRequiredHeadersError(filename, missing, self._required_headers)

        record_count = len(lines) - 1
        if record_count == 0:
            raise NoRecordsFoundError(filename)
        if record_count > self._max_records:
            raise MaxRecordExceededError(self._max_records)

        named_headers = Counter(token for token in header_tokens if token)
        duplicates = [header for header, count in named_headers.items() if count > 1]
        if duplicates:
            raise DuplicateHeadersError(filename, duplicates)

        return ValidatedFile(filename=filename, lines=lines, header_tokens=header_tokens)
