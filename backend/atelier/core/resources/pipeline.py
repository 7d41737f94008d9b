"""Composable query stages shared by every resource.

A listing is built as a single ``Select``: owner filter, projection, optional
relation join, optional search, then the pagination wrapper that returns the
page and the total count in one round trip.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from sqlalchemy import ColumnElement, Select, String, cast, false, func, or_, select, true
from sqlalchemy.orm import aliased

from .descriptor import ID_FIELD, RelationSpec


NESTED_SEPARATOR = "__"
POSITION = "_position"
TOTAL = "_total"


def escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_search(term: str | None, columns: Sequence[ColumnElement[Any]]) -> ColumnElement[bool] | None:
    """OR together a case-insensitive substring match of ``term`` on each column.

    Returns None for an empty term so callers can skip the filter entirely.
    Non-string columns are compared through their string form.
    """
    if not term:
        return None
    if not columns:
        return false()
    pattern = f"%{escape_like(term)}%"
    return or_(*(cast(column, String).ilike(pattern, escape="\\") for column in columns))


def join_relation(
    stmt: Select, local_column: ColumnElement[Any], relation: RelationSpec
) -> tuple[Select, dict[str, ColumnElement[Any]]]:
    """Left-join the related model and project its fields as ``alias__field``.

    The join matches on the target's primary key, so each parent row keeps
    exactly one row whether or not the reference resolves.
    """
    target = aliased(relation.target, name=relation.alias)
    stmt = stmt.outerjoin(target, local_column == target.id)
    columns = {spec.name: getattr(target, spec.attr) for spec in relation.fields}
    stmt = stmt.add_columns(
        *(column.label(f"{relation.alias}{NESTED_SEPARATOR}{name}") for name, column in columns.items())
    )
    return stmt, columns


def paginate(stmt: Select, order_by: Iterable[ColumnElement[Any]], skip: int, limit: int) -> Select:
    """Wrap a filtered projection so one query yields the page and the total.

    The total row is outer-joined to the page, so an out-of-range page still
    returns a single row carrying the count with NULL record columns.
    """
    matched = stmt.add_columns(func.row_number().over(order_by=list(order_by)).label(POSITION)).subquery("matched")
    total = select(func.count().label(TOTAL)).select_from(matched).subquery("total")
    page = (
        select(matched)
        .order_by(matched.c[POSITION])
        .offset(skip)
        .limit(limit)
        .subquery("page")
    )
    return (
        select(total.c[TOTAL], *page.c)
        .select_from(total.outerjoin(page, true()))
        .order_by(page.c[POSITION])
    )


def nest_record(row: Mapping[str, Any]) -> dict[str, Any]:
    """Fold ``alias__field`` keys into ``{alias: {field: ...}}``.

    An embedded object whose id is NULL (unresolved reference) becomes None.
    """
    record: dict[str, Any] = {}
    nested: dict[str, dict[str, Any]] = {}
    for key, value in row.items():
        if key in (POSITION, TOTAL):
            continue
        alias, sep, name = key.partition(NESTED_SEPARATOR)
        if sep:
            nested.setdefault(alias, {})[name] = value
        else:
            record[key] = value
    for alias, values in nested.items():
        record[alias] = values if values.get(ID_FIELD) is not None else None
    return record


def read_page(rows: Sequence[Any]) -> tuple[list[dict[str, Any]], int]:
    if not rows:
        return [], 0
    total = rows[0]._mapping[TOTAL] or 0
    records = [nest_record(row._mapping) for row in rows if row._mapping[POSITION] is not None]
    return records, int(total)
