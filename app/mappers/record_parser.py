"""
app/mappers/record_parser.py

Splits one CSV line and resolves its values against the column mapping.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from app.domain.company_import import (
    BLANK_RECORD,
    INCOMPLETE_RECORD,
    ColumnMapping,
    FatalRecord,
    ParsedRecord,
    RecordOutcome,
    SkippedRecord,
)

DELIMITER = ","


class _FieldUnavailable(LookupError):
    """A mapped header is absent from the file or past the end of the line."""


def split_fields(line: str) -> list[str]:
    """
    Split on every comma, then drop trailing empty tokens; `",,,"` gives `[]`.
    """

    values = line.split(DELIMITER)
    while values and values[-1] == "":
        values.pop()
    return values


def build_header_index(header_tokens: Sequence[str]) -> dict[str, int]:
    return {header: position for position, header in enumerate(header_tokens)}


def parse_record(
    raw_line: str,
    header_index: Mapping[str, int],
    column_mapping: ColumnMapping,
) -> RecordOutcome:
    """
    Classify one line as parsed, skipped (blank / incomplete) or fatal.

    Values stay raw strings; lines are split with split_fields, no quoting.
    """

    record = raw_line.strip()
    if not record:
        return SkippedRecord(BLANK_RECORD)

    try:
        values = split_fields(record)
        company_values = _resolve_values(column_mapping.company, values, header_index)
        location_values = _resolve_values(column_mapping.location, values, header_index)
    except _FieldUnavailable:
        return SkippedRecord(INCOMPLETE_RECORD)
    except Exception as exc:  # noqa: BLE001
        return FatalRecord(str(exc) or exc.__class__.__name__)

    return ParsedRecord(company_values=company_values, location_values=location_values)


def _resolve_values(
    columns: Mapping[str, str],
    values: Sequence[str],
    header_index: Mapping[str, int],
) -> list[str]:
    resolved: list[str] = []
    for header in columns.values():
        position = header_index.get(header)
        if position is None or position >= len(values):
            raise _FieldUnavailable(header)
        resolved.append(values[position])
    return resolved
