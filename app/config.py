"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

from db.config import load_env_files

DEFAULT_REQUIRED_HEADERS: tuple[str, ...] = (
    "companyName",
    "companyType",
    "searchHelp",
    "locationName",
)

# Canonical company/location column -> expected CSV header.
DEFAULT_COMPANY_COLUMNS: tuple[tuple[str, str], ...] = (
    ("client_name", "companyName"),
    ("client_type", "companyType"),
    ("search_help", "searchHelp"),
)

DEFAULT_LOCATION_COLUMNS: tuple[tuple[str, str], ...] = (
    ("name", "locationName"),
)


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """
    Read a comma separated list; blank items are dropped.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    items = tuple(item.strip() for item in raw_value.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class CompanyImportSettings:
    """
    Constraints and column layout for the company CSV import.
    """

    required_headers: tuple[str, ...] = DEFAULT_REQUIRED_HEADERS
    max_records: int = 3500
    valid_extensions: tuple[str, ...] = ("csv",)
    result_file_name: str = "companiesImportResult.csv"
    custom_field_cache_ttl_seconds: float = 0.0
    company_columns: tuple[tuple[str, str], ...] = field(default=DEFAULT_COMPANY_COLUMNS)
    location_columns: tuple[tuple[str, str], ...] = field(default=DEFAULT_LOCATION_COLUMNS)


@dataclass(frozen=True)
class APISettings:
    """
    Request-level defaults for the REST endpoints.
    """

    default_broker_id: int = 187624
    default_limit: int = 50
    max_limit: int = 1000


@lru_cache(maxsize=1)
def get_company_import_settings() -> CompanyImportSettings:
    """
    Return cached company import settings from environment variables.
    """

    return CompanyImportSettings(
        required_headers=_get_list_env("COMPANY_IMPORT_REQUIRED_HEADERS", DEFAULT_REQUIRED_HEADERS),
        max_records=max(1, _get_int_env("COMPANY_IMPORT_MAX_RECORDS", 3500)),
        valid_extensions=_get_list_env("COMPANY_IMPORT_VALID_EXTENSIONS", ("csv",)),
        result_file_name=_get_str_env("COMPANY_IMPORT_RESULT_FILE_NAME", "companiesImportResult.csv"),
        custom_field_cache_ttl_seconds=max(0.0, _get_float_env("CUSTOM_FIELD_CACHE_TTL_SECONDS", 0.0)),
    )


@lru_cache(maxsize=1)
def get_api_settings() -> APISettings:
    """
    Return cached API settings from environment variables.
    """

    default_limit = max(1, _get_int_env("API_DEFAULT_LIMIT", 50))
    return APISettings(
        default_broker_id=_get_int_env("DEFAULT_BROKER_ID", 187624),
        default_limit=default_limit,
        max_limit=max(default_limit, _get_int_env("API_MAX_LIMIT", 1000)),
    )
