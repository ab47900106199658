from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from app.config import get_api_settings, get_company_import_settings
from db.config import normalize_postgres_url, resolve_database_url


class TestCompanyImportSettings(unittest.TestCase):
    def setUp(self) -> None:
        get_company_import_settings.cache_clear()
        get_api_settings.cache_clear()

    def tearDown(self) -> None:
        get_company_import_settings.cache_clear()
        get_api_settings.cache_clear()

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=False):
            for name in (
                "COMPANY_IMPORT_REQUIRED_HEADERS",
                "COMPANY_IMPORT_MAX_RECORDS",
                "COMPANY_IMPORT_VALID_EXTENSIONS",
                "COMPANY_IMPORT_RESULT_FILE_NAME",
                "CUSTOM_FIELD_CACHE_TTL_SECONDS",
            ):
                os.environ.pop(name, None)
            settings = get_company_import_settings()

        self.assertEqual(
            settings.required_headers,
            ("companyName", "companyType", "searchHelp", "locationName"),
        )
        self.assertEqual(settings.max_records, 3500)
        self.assertEqual(settings.valid_extensions, ("csv",))
        self.assertEqual(settings.result_file_name, "companiesImportResult.csv")
        self.assertEqual(settings.custom_field_cache_ttl_seconds, 0.0)

    def test_environment_overrides(self) -> None:
        env = {
            "COMPANY_IMPORT_REQUIRED_HEADERS": "companyName, searchHelp,,",
            "COMPANY_IMPORT_MAX_RECORDS": "10",
            "COMPANY_IMPORT_VALID_EXTENSIONS": "csv,txt",
            "CUSTOM_FIELD_CACHE_TTL_SECONDS": "30",
        }
        with patch.dict(os.environ, env):
            settings = get_company_import_settings()

        self.assertEqual(settings.required_headers, ("companyName", "searchHelp"))
        self.assertEqual(settings.max_records, 10)
        self.assertEqual(settings.valid_extensions, ("csv", "txt"))
        self.assertEqual(settings.custom_field_cache_ttl_seconds, 30.0)

    def test_unparsable_numbers_fall_back(self) -> None:
        with patch.dict(os.environ, {"COMPANY_IMPORT_MAX_RECORDS": "lots", "API_MAX_LIMIT": "1"}):
            self.assertEqual(get_company_import_settings().max_records, 3500)
            api = get_api_settings()

        self.assertEqual(api.max_limit, api.default_limit)


class TestDatabaseUrl(unittest.TestCase):
    def test_normalizes_postgres_scheme(self) -> None:
        self.assertEqual(
            normalize_postgres_url("postgres://u:p@db:5432/app"),
            "postgresql+psycopg://u:p@db:5432/app",
        )
        self.assertEqual(normalize_postgres_url("sqlite:///app.db"), "sqlite:///app.db")

    def test_resolution_priority(self) -> None:
        env = {
            "ENVIRONMENT": "production",
            "CLOUD_DATABASE_URL": "postgresql://cloud/app",
            "LOCAL_DATABASE_URL": "postgresql://local/app",
        }
        with patch.dict(os.environ, env, clear=True):
            self.assertEqual(resolve_database_url(), "postgresql+psycopg://cloud/app")
            os.environ["DATABASE_URL"] = "sqlite:///explicit.db"
            self.assertEqual(resolve_database_url(), "sqlite:///explicit.db")
            del os.environ["DATABASE_URL"]
            os.environ["ENVIRONMENT"] = "local"
            self.assertEqual(resolve_database_url(), "postgresql+psycopg://local/app")

    def test_missing_url_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(RuntimeError):
                resolve_database_url()


if __name__ == "__main__":
    unittest.main()
