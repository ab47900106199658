from __future__ import annotations

import unittest

from app.config import DEFAULT_COMPANY_COLUMNS, CompanyImportSettings
from app.domain.company_import import CustomFieldLookupError
from app.mappers.column_mapper import ColumnMapper
from app.mappers.custom_field_cache import CustomFieldCache
from db.repositories.errors import RepositoryError
from support import FakeImportRepository


class _BrokenSource:
    def lookup_custom_fields(self, broker_id: int) -> dict[str, str]:
        raise RepositoryError("connection pool exhausted")


class TestColumnMapper(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = CompanyImportSettings()

    def test_static_mapping_without_custom_fields(self) -> None:
        mapper = ColumnMapper(settings=self.settings, source=FakeImportRepository())

        mapping = mapper.build_column_mapping(187624)

        self.assertEqual(
            mapping.company,
            {
                "client_name": "companyName",
                "client_type": "companyType",
                "search_help": "searchHelp",
            },
        )
        self.assertEqual(mapping.location, {"name": "locationName"})

    def test_custom_fields_appended_after_static_columns(self) -> None:
        source = FakeImportRepository(custom_fields={"Region": "1", "Tier": "4"})
        mapper = ColumnMapper(settings=self.settings, source=source)

        mapping = mapper.build_column_mapping(42)

        self.assertEqual(
            mapping.company_columns,
            ["client_name", "client_type", "search_help", "custom1", "custom4"],
        )
        self.assertEqual(mapping.company["custom1"], "Region")
        self.assertEqual(mapping.company["custom4"], "Tier")
        self.assertEqual(mapping.location_columns, ["name"])

    def test_lookup_uses_requested_broker(self) -> None:
        source = FakeImportRepository()
        mapper = ColumnMapper(settings=self.settings, source=source)

        mapper.build_column_mapping(42)
        mapper.build_column_mapping(7)

        self.assertEqual(source.lookups, [42, 7])

    def test_static_column_wins_over_custom_column(self) -> None:
        settings = CompanyImportSettings(
            company_columns=DEFAULT_COMPANY_COLUMNS + (("custom1", "Legacy Code"),),
        )
        source = FakeImportRepository(custom_fields={"Region": "1"})
        mapper = ColumnMapper(settings=settings, source=source)

        mapping = mapper.build_column_mapping(42)

        self.assertEqual(mapping.company["custom1"], "Legacy Code")
        self.assertNotIn("Region", mapping.company.values())

    def test_lookup_failure_aborts_mapping(self) -> None:
        source = FakeImportRepository(lookup_error="connection refused")
        mapper = ColumnMapper(settings=self.settings, source=source)

        with self.assertRaises(CustomFieldLookupError) as ctx:
            mapper.build_column_mapping(42)

        self.assertEqual(ctx.exception.status_code, 503)
        self.assertEqual(ctx.exception.context["broker_id"], 42)
        self.assertIn("connection refused", ctx.exception.message)

    def test_any_repository_failure_aborts_mapping(self) -> None:
        mapper = ColumnMapper(settings=self.settings, source=_BrokenSource())

        with self.assertRaises(CustomFieldLookupError) as ctx:
            mapper.build_column_mapping(42)

        self.assertEqual(ctx.exception.status_code, 503)
        self.assertIn("pool exhausted", ctx.exception.message)

    def test_cached_loader_failure_aborts_mapping(self) -> None:
        mapper = ColumnMapper(
            settings=self.settings,
            source=_BrokenSource(),
            cache=CustomFieldCache(ttl_seconds=300),
        )

        with self.assertRaises(CustomFieldLookupError):
            mapper.build_column_mapping(42)

    def test_cached_lookup_queries_source_once(self) -> None:
        source = FakeImportRepository(custom_fields={"Region": "1"})
        cache = CustomFieldCache(ttl_seconds=300)
        mapper = ColumnMapper(settings=self.settings, source=source, cache=cache)

        first = mapper.build_column_mapping(42)
        second = mapper.build_column_mapping(42)

        self.assertEqual(first, second)
        self.assertEqual(source.lookups, [42])


if __name__ == "__main__":
    unittest.main()
