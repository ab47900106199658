"""
app/services/query_utils.py

Pagination, sorting, field filtering and free-text search for list endpoints.

Sort syntax: ``+field`` ascending, ``-field`` descending, bare ``field``
ascending. Field names are the camelCase names used on the wire; each
entity supplies its own wire-name -> model-attribute map.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Select, func, or_

RESERVED_PARAMS = frozenset({"offset", "limit", "sort", "searchSpec"})
_TRUE_VALUES = {"1", "true", "yes", "on"}


class InvalidQueryError(ValueError):
    """
    Raised when a list request names an unknown sort field or an unparsable filter.
    """


@dataclass(frozen=True)
class Page:
    offset: int
    limit: int


@dataclass(frozen=True)
class SortSpec:
    attribute: str
    descending: bool = False


def resolve_page(
    offset: int | None,
    limit: int | None,
    *,
    default_limit: int,
    max_limit: int,
) -> Page:
    resolved_offset = max(0, offset or 0)
    resolved_limit = default_limit if limit is None else limit
    return Page(offset=resolved_offset, limit=max(1, min(resolved_limit, max_limit)))


def parse_sort(sort: str | None, field_map: Mapping[str, str], default: str) -> SortSpec:
    # A literal '+' arrives URL-decoded as a space.
    raw = (sort or "").strip() or default
    descending = raw.startswith("-")
    name = raw.lstrip("+-").strip()

    attribute = field_map.get(name)
    if attribute is None:
        raise InvalidQueryError(
            f"Invalid sort field '{name}'. Allowed fields: {', '.join(sorted(field_map))}."
        )
    return SortSpec(attribute=attribute, descending=descending)


def apply_sort(stmt: Select, model: type, spec: SortSpec) -> Select:
    column = getattr(model, spec.attribute)
    return stmt.order_by(column.desc() if spec.descending else column.asc())


def apply_filters(
    stmt: Select,
    model: type,
    field_map: Mapping[str, str],
    params: Mapping[str, str],
) -> Select:
    """
    Add an equality filter for every request parameter that names a known field.

    Unknown and reserved parameters are ignored.
    """

    for name, raw_value in params.items():
        if name in RESERVED_PARAMS:
            continue
        attribute = field_map.get(name)
        if attribute is None:
            continue
        column = getattr(model, attribute)
        stmt = stmt.where(column == _coerce(name, column, raw_value))
    return stmt


def apply_search(
    stmt: Select,
    model: type,
    attributes: Iterable[str],
    search_spec: str | None,
) -> Select:
    """
    Case-insensitive substring match across the given string columns.
    """

    if not search_spec or not search_spec.strip():
        return stmt
    pattern = f"%{search_spec.strip().lower()}%"
    clauses = [func.lower(getattr(model, attribute)).like(pattern) for attribute in attributes]
    return stmt.where(or_(*clauses))


def _coerce(name: str, column: Any, raw_value: str) -> Any:
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return raw_value

    if python_type is bool:
        return raw_value.strip().lower() in _TRUE_VALUES
    if python_type is int:
        try:
            return int(raw_value)
        except ValueError as exc:
            raise InvalidQueryError(f"Filter '{name}' expects an integer, got {raw_value!r}.") from exc
    return raw_value
