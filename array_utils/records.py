"""Table-style operations on a container of records (rows).

A record is a mapping (or sequence) of fields, like a database row. These
functions index, group, aggregate and sort whole records.
"""
from __future__ import annotations

import logging
import numbers
import warnings
from enum import Enum
from typing import Any, Dict, List, Tuple

from .errors import ArrayStructureError, SortSpecError
from .values import (
    MISSING,
    as_keys,
    get_item,
    is_container,
    iter_items,
    iter_values,
    rebuild,
    require_container,
    unique as dedupe,
)

logger = logging.getLogger(__name__)


class SortOrder(Enum):
    ASC = 'asc'
    DESC = 'desc'


def sort_key(value: Any) -> Tuple[int, Any]:
    """Total ordering over mixed key types.

    ``None`` sorts first, then numbers, then strings, then anything else by
    its ``repr``.
    """
    if value is None:
        return (0, 0)
    if isinstance(value, numbers.Real):
        return (1, value)
    if isinstance(value, str):
        return (2, value)
    return (3, repr(value))


def _sorted_by_key(mapping: Dict[Any, Any]) -> Dict[Any, Any]:
    return {k: mapping[k] for k in sorted(mapping, key=sort_key)}


def _field_key(func_name: str, record: Any, field: Any) -> Any:
    value = get_item(record, field)
    try:
        hash(value)
    except TypeError:
        raise ArrayStructureError(func_name, f"field {field!r}", value, expected="hashable") from None
    return value


def index_by(records: Any, key: Any, sort_by_key: bool = True) -> Any:
    """Re-key ``records`` by each record's value at ``key``.

    Records sharing a value overwrite earlier ones; a record without the
    field is indexed under ``None``.
    """
    if key is None:
        return records
    require_container(records, 'index_by', 'records')
    indexed: Dict[Any, Any] = {}
    for record in iter_values(records):
        require_container(record, 'index_by', 'each record')
        index = _field_key('index_by', record, key)
        if index in indexed:
            logger.debug("index_by: %r=%r overwrites an earlier record", key, index)
        indexed[index] = record
    return _sorted_by_key(indexed) if sort_by_key else indexed


def group_by(records: Any, key: Any, sort_by_key: bool = True) -> Dict[Any, Dict[Any, Any]]:
    """Bucket ``records`` by their value at ``key``.

    Each bucket maps the records' original keys (or positions) to the records.
    """
    require_container(records, 'group_by', 'records')
    groups: Dict[Any, Dict[Any, Any]] = {}
    for record_key, record in iter_items(records):
        require_container(record, 'group_by', 'each record')
        groups.setdefault(_field_key('group_by', record, key), {})[record_key] = record
    return _sorted_by_key(groups) if sort_by_key else groups


def aggregate(
    records: Any,
    group_key: Any,
    aggregate_columns: Any,
    sort_by_key: bool = True,
) -> Any:
    """Similar to PostgreSQL's ``array_agg()`` over ``GROUP BY group_key``.

    Like index_by(), one row per distinct ``group_key`` value survives with
    the last record's values, except that the columns named in
    ``aggregate_columns`` collect every record's value into a list.

    >>> rows = [{'id': 1, 'tag': 'a'}, {'id': 1, 'tag': 'b'}, {'id': 2, 'tag': 'c'}]
    >>> aggregate(rows, 'id', 'tag')
    {1: {'id': 1, 'tag': ['a', 'b']}, 2: {'id': 2, 'tag': ['c']}}
    """
    agg_columns = as_keys(aggregate_columns)
    if group_key is None or not agg_columns or not records:
        return records

    aggregated: Dict[Any, Dict[Any, Any]] = {}
    for group_value, group in group_by(records, group_key, sort_by_key).items():
        row: Dict[Any, Any] = {}
        for record in group.values():
            for column, value in iter_items(record):
                if column in agg_columns:
                    row.setdefault(column, []).append(value)
                else:
                    row[column] = value
        aggregated[group_value] = row
    return aggregated


def _parse_order_spec(spec: Tuple[Any, ...]) -> List[Tuple[Any, SortOrder]]:
    parsed: List[List[Any]] = []
    explicit = False
    for item in spec:
        if isinstance(item, SortOrder):
            if not parsed or explicit:
                raise SortSpecError(f"sort direction {item} must follow a column")
            parsed[-1][1] = item
            explicit = True
        else:
            parsed.append([item, SortOrder.ASC])
            explicit = False
    return [(column, order) for column, order in parsed]


def order_by(records: Any, *spec: Any) -> Any:
    """Database-style multi-column sort.

    ``spec`` lists columns, each optionally followed by a SortOrder:

    >>> data = [{'volume': 67, 'edition': 2}, {'volume': 86, 'edition': 1},
    ...         {'volume': 85, 'edition': 6}, {'volume': 86, 'edition': 6}]
    >>> [r['edition'] for r in order_by(data, 'volume', SortOrder.DESC, 'edition')]
    [1, 6, 6, 2]

    The sort is stable. A mapping of records keeps its keys.
    """
    require_container(records, 'order_by', 'records')
    items = list(iter_items(records))

    for column, order in reversed(_parse_order_spec(spec)):
        missing = sum(1 for _, record in items if get_item(record, column, MISSING) is MISSING)
        if missing:
            warnings.warn(
                f"order_by(): {missing} record(s) have no {column!r} column; sorting them as None",
                UserWarning,
            )
        items.sort(
            key=lambda kv, col=column: sort_key(get_item(kv[1], col)),
            reverse=order is SortOrder.DESC,
        )
    return rebuild(records, items)


def sort_by_column(records: Any, column: Any, order: SortOrder = SortOrder.ASC) -> Any:
    """Sort records by a single column."""
    return order_by(records, column, order)


def multiarray_keys(tree: Any, unique: bool = False) -> List[Any]:
    """Every key at every depth of ``tree``, depth-first."""
    keys: List[Any] = []
    for key, value in iter_items(tree):
        keys.append(key)
        if is_container(value):
            keys.extend(multiarray_keys(value))
    return dedupe(keys) if unique else keys


def multiarray_values(tree: Any, key: Any, unique: bool = False) -> List[Any]:
    """Every non-``None`` value stored under ``key`` at any depth of ``tree``.

    Like a recursive column pluck; a node's own value comes before its
    children's.
    """
    values: List[Any] = []
    own = get_item(tree, key)
    if own is not None:
        values.append(own)
    for child in iter_values(tree):
        if is_container(child):
            values.extend(multiarray_values(child, key))
    return dedupe(values) if unique else values
