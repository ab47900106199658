"""
app/mappers package marker.
"""

from app.mappers.column_mapper import ColumnMapper
from app.mappers.custom_field_cache import CustomFieldCache
from app.mappers.record_parser import build_header_index, parse_record

__all__ = [
    "ColumnMapper",
    "CustomFieldCache",
    "build_header_index",
    "parse_record",
]
