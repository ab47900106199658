"""
app/domain package marker.
"""

from app.domain.company_import import (
    ColumnMapping,
    CompanyImportError,
    FailureRecord,
    ImportResult,
    UploadedFile,
)

__all__ = [
    "ColumnMapping",
    "CompanyImportError",
    "FailureRecord",
    "ImportResult",
    "UploadedFile",
]
