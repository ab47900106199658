"""
app/services/import_report.py

Serializes an ImportResult into the CSV file returned to the uploader.

Layout
------
    Total Records,<n>
    Successful Records,<n>
    Failed Records,<n>
    <blank line>
    Record Number,Record,Failure Cause,Info
    <one row per failed line, in file order>

Successful lines are never written, so the failure rows can be corrected
and re-submitted on their own.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass

from app.domain.company_import import ImportResult

REPORT_MEDIA_TYPE = "text/csv"
FAILURE_HEADER = ("Record Number", "Record", "Failure Cause", "Info")


@dataclass(frozen=True)
class ImportReport:
    content: bytes
    filename: str
    media_type: str = REPORT_MEDIA_TYPE

    @property
    def content_disposition(self) -> str:
        return f"attachment;filename={self.filename}"


def build_report(result: ImportResult) -> bytes:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\r\n")

    writer.writerow(("Total Records", result.total_records))
    writer.writerow(("Successful Records", result.success_count))
    writer.writerow(("Failed Records", result.failed_count))
    writer.writerow(())
    writer.writerow(FAILURE_HEADER)
    for failure in result.failed_records:
        writer.writerow((failure.index, failure.record, failure.reason, failure.outcome))

    return buf.getvalue().encode("utf-8")


def create_report(result: ImportResult, *, filename: str) -> ImportReport:
    return ImportReport(content=build_report(result), filename=filename)
