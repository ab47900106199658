from __future__ import annotations

import csv
import io
import unittest

from app.domain.company_import import (
    BLANK_RECORD,
    INCOMPLETE_RECORD,
    OUTCOME_NOT_ADDED,
    OUTCOME_SKIPPED,
    ImportResult,
)
from app.services.import_report import build_report, create_report


def _rows(content: bytes) -> list[list[str]]:
    return list(csv.reader(io.StringIO(content.decode("utf-8"))))


class TestImportReport(unittest.TestCase):
    def setUp(self) -> None:
        self.result = ImportResult(total_records=4)
        self.result.record_success()
        self.result.record_failure(2, "", BLANK_RECORD, OUTCOME_SKIPPED)
        self.result.record_failure(3, "Acme,LLC", INCOMPLETE_RECORD, OUTCOME_SKIPPED)
        self.result.record_failure(4, "Dup,LLC,Help,HQ", "duplicate key", OUTCOME_NOT_ADDED)

    def test_summary_precedes_failure_rows(self) -> None:
        rows = _rows(build_report(self.result))

        self.assertEqual(rows[0], ["Total Records", "4"])
        self.assertEqual(rows[1], ["Successful Records", "1"])
        self.assertEqual(rows[2], ["Failed Records", "3"])
        self.assertEqual(rows[3], [])
        self.assertEqual(rows[4], ["Record Number", "Record", "Failure Cause", "Info"])

    def test_one_row_per_failure_in_order(self) -> None:
        rows = _rows(build_report(self.result))[5:]

        self.assertEqual(
            rows,
            [
                ["2", "", BLANK_RECORD, OUTCOME_SKIPPED],
                ["3", "Acme,LLC", INCOMPLETE_RECORD, OUTCOME_SKIPPED],
                ["4", "Dup,LLC,Help,HQ", "duplicate key", OUTCOME_NOT_ADDED],
            ],
        )

    def test_original_line_is_quoted_so_it_survives_as_one_cell(self) -> None:
        text = build_report(self.result).decode("utf-8")

        self.assertIn('3,"Acme,LLC",Not All Fields available in record,Skipped\r\n', text)

    def test_report_without_failures_has_only_summary(self) -> None:
        result = ImportResult(total_records=2)
        result.record_success()
        result.record_success()

        rows = _rows(build_report(result))

        self.assertEqual(len(rows), 5)
        self.assertEqual(rows[2], ["Failed Records", "0"])

    def test_attachment_metadata(self) -> None:
        report = create_report(self.result, filename="companiesImportResult.csv")

        self.assertEqual(report.media_type, "text/csv")
        self.assertEqual(report.content_disposition, "attachment;filename=companiesImportResult.csv")
        self.assertEqual(report.content, build_report(self.result))


if __name__ == "__main__":
    unittest.main()
