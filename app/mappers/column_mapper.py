"""
app/mappers/column_mapper.py

Builds the canonical column -> CSV header mapping for the company import,
merging the static company/location layout with the broker's custom fields.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from app.config import CompanyImportSettings
from app.domain.company_import import ColumnMapping, CustomFieldLookupError
from app.mappers.custom_field_cache import CustomFieldCache
from db.repositories.errors import RepositoryError

logger = logging.getLogger(__name__)

CUSTOM_COLUMN_PREFIX = "custom"


class CustomFieldSource(Protocol):
    def lookup_custom_fields(self, broker_id: int) -> Mapping[str, str]:
        """Return display label -> field id for one broker; raises RepositoryError when unreadable."""
        ...


class ColumnMapper:
    """
    Resolves the column mapping once per import call.
    """

    def __init__(
        self,
        *,
        settings: CompanyImportSettings,
        source: CustomFieldSource,
        cache: CustomFieldCache | None = None,
    ) -> None:
        self._company_columns = dict(settings.company_columns)
        self._location_columns = dict(settings.location_columns)
        self._source = source
        self._cache = cache

    def build_column_mapping(self, broker_id: int) -> ColumnMapping:
        """
        Static columns first, then custom<fieldId> columns for `broker_id`.

        A custom column never replaces a static one with the same name.
        Raises CustomFieldLookupError when the lookup source fails.
        """

        company = dict(self._company_columns)
        for column, header in self.custom_columns(broker_id).items():
            if column in company:
                logger.warning(
                    "Custom field column %s (header %r) collides with a static column; skipped",
                    column,
                    header,
                )
                continue
            company[column] = header

        return ColumnMapping(company=company, location=dict(self._location_columns))

    def custom_columns(self, broker_id: int) -> dict[str, str]:
        try:
            if self._cache is not None:
                fields = self._cache.get_or_load(broker_id, self._source.lookup_custom_fields)
            else:
                fields = dict(self._source.lookup_custom_fields(broker_id))
        except RepositoryError as exc:
            raise CustomFieldLookupError(broker_id, str(exc)) from exc

        columns = {
            f"{CUSTOM_COLUMN_PREFIX}{field_id}": display_label
            for display_label, field_id in fields.items()
        }
        logger.debug("Resolved %d custom field column(s) for broker_id=%s", len(columns), broker_id)
        return columns
