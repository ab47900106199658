from __future__ import annotations

import unittest

from app.schemas.company import COMPANY_FIELD_MAP
from app.services.query_utils import InvalidQueryError, Page, SortSpec, parse_sort, resolve_page


class TestResolvePage(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(resolve_page(None, None, default_limit=50, max_limit=1000), Page(0, 50))

    def test_limit_is_clamped(self) -> None:
        self.assertEqual(resolve_page(10, 5000, default_limit=50, max_limit=1000), Page(10, 1000))
        self.assertEqual(resolve_page(0, 0, default_limit=50, max_limit=1000), Page(0, 1))

    def test_negative_offset_becomes_zero(self) -> None:
        self.assertEqual(resolve_page(-3, 5, default_limit=50, max_limit=1000).offset, 0)


class TestParseSort(unittest.TestCase):
    def test_prefixes(self) -> None:
        self.assertEqual(parse_sort("-companyName", COMPANY_FIELD_MAP, "+companyName"), SortSpec("client_name", True))
        self.assertEqual(parse_sort("+companyType", COMPANY_FIELD_MAP, "+companyName"), SortSpec("client_type", False))
        self.assertEqual(parse_sort("industry", COMPANY_FIELD_MAP, "+companyName"), SortSpec("industry", False))

    def test_url_decoded_plus_is_ascending(self) -> None:
        self.assertEqual(parse_sort(" companyId", COMPANY_FIELD_MAP, "+companyName"), SortSpec("client_id", False))

    def test_default_when_absent(self) -> None:
        self.assertEqual(parse_sort(None, COMPANY_FIELD_MAP, "+companyName"), SortSpec("client_name", False))
        self.assertEqual(parse_sort("", COMPANY_FIELD_MAP, "-companyName"), SortSpec("client_name", True))

    def test_unknown_field(self) -> None:
        with self.assertRaises(InvalidQueryError) as ctx:
            parse_sort("-revenue", COMPANY_FIELD_MAP, "+companyName")

        self.assertIn("revenue", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
