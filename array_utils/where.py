"""SQL ``WHERE``-style filtering of a container of records.

Every filter takes ``records`` (rows) and ``params``, a mapping of
``field -> expected``. The result is a dict of the kept records under their
original keys, or positions when ``records`` is a list, in order. A record
lacking a field never matches on it (where_or() excepted, see below).
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from .errors import ArrayStructureError
from .flattening import flatten
from .values import (
    MISSING,
    Kind,
    get_item,
    has_key,
    iter_items,
    keep_entries,
    kind_of,
    require_container,
    to_array,
)

logger = logging.getLogger(__name__)

RecordTest = Callable[[Any, Mapping[Any, Any]], bool]


def _select(func_name: str, records: Any, params: Any, test: RecordTest, keep: bool) -> Any:
    require_container(records, func_name, 'records')
    if kind_of(params) is not Kind.MAPPING:
        raise ArrayStructureError(func_name, 'params', params, expected='a mapping')

    kept = []
    total = 0
    for key, record in iter_items(records):
        require_container(record, func_name, 'each record')
        total += 1
        if test(record, params) == keep:
            kept.append((key, record))
    logger.debug("%s kept %d of %d record(s)", func_name, len(kept), total)
    return keep_entries(kept)


def _values(value: Any) -> list:
    value = to_array(value)
    return list(value.values()) if kind_of(value) is Kind.MAPPING else list(value)


def _intersects(a: Any, b: Any) -> bool:
    haystack = _values(b)
    return any(v in haystack for v in _values(a))


def contains(record: Any, params: Mapping[Any, Any]) -> bool:
    """True if every ``params`` field exists in ``record`` with an equal value."""
    for field, expected in params.items():
        value = get_item(record, field, MISSING)
        if value is MISSING or value != expected:
            return False
    return True


def contains_intersect(record: Any, params: Mapping[Any, Any]) -> bool:
    """True if, for every field, the record's values share one with the expected values."""
    for field, expected in params.items():
        value = get_item(record, field, MISSING)
        if value is MISSING or not _intersects(expected, value):
            return False
    return True


def contains_subset(record: Any, params: Mapping[Any, Any]) -> bool:
    """True if, for every field, all expected values appear among the record's values."""
    for field, expected in params.items():
        value = get_item(record, field, MISSING)
        if value is MISSING:
            return False
        haystack = _values(value)
        if not all(v in haystack for v in _values(expected)):
            return False
    return True


def _any_or(record: Any, params: Mapping[Any, Any]) -> bool:
    # A field that merely exists counts as a hit, whatever its value.
    return any(
        has_key(record, field) or get_item(record, field) != expected
        for field, expected in params.items()
    )


def _boolean_equals(record: Any, params: Mapping[Any, Any]) -> bool:
    for field, expected in params.items():
        value = get_item(record, field, MISSING)
        if value is MISSING or bool(value) != bool(expected):
            return False
    return True


def _is_in(record: Any, field: Any, expected: Any) -> bool:
    value = get_item(record, field, MISSING)
    return value is not MISSING and value in flatten(expected)


def _all_in(record: Any, params: Mapping[Any, Any]) -> bool:
    return all(_is_in(record, field, expected) for field, expected in params.items())


def _any_in(record: Any, params: Mapping[Any, Any]) -> bool:
    return any(_is_in(record, field, expected) for field, expected in params.items())


def _any_intersect(record: Any, params: Mapping[Any, Any]) -> bool:
    for field, expected in params.items():
        value = get_item(record, field, MISSING)
        if value is not MISSING and _intersects(value, expected):
            return True
    return False


def where(records: Any, params: Mapping[Any, Any]) -> Any:
    """Records whose fields equal all of ``params``, like ``SELECT ... WHERE a = x AND b = y``."""
    return _select('where', records, params, contains, keep=True)


def where_not(records: Any, params: Mapping[Any, Any]) -> Any:
    """Records with at least one field that does not match; the complement of where()."""
    return _select('where_not', records, params, contains, keep=False)


def where_or(records: Any, params: Mapping[Any, Any]) -> Any:
    """Records matching at least one of ``params``, like ``WHERE ... OR ...``.

    A record matches a field when it has that field at all, or when its
    value (``None`` if absent) differs from the expected one. This keeps the
    long-standing behaviour callers rely on; use where_in_or() for a plain
    equality OR.
    """
    return _select('where_or', records, params, _any_or, keep=True)


def where_not_all(records: Any, params: Mapping[Any, Any]) -> Any:
    """The complement of where_or()."""
    return _select('where_not_all', records, params, _any_or, keep=False)


def where_boolean_equals(records: Any, params: Mapping[Any, Any]) -> Any:
    """Records whose fields have the same truthiness as all of ``params``."""
    return _select('where_boolean_equals', records, params, _boolean_equals, keep=True)


def where_boolean_not_equals(records: Any, params: Mapping[Any, Any]) -> Any:
    return _select('where_boolean_not_equals', records, params, _boolean_equals, keep=False)


def where_in(records: Any, params: Mapping[Any, Any]) -> Any:
    """Records whose every field is IN its expected values.

    An expected value may be a scalar or a (nested) container of candidates,
    like ``WHERE a IN (...) AND b IN (...)``.
    """
    return _select('where_in', records, params, _all_in, keep=True)


def where_not_in(records: Any, params: Mapping[Any, Any]) -> Any:
    return _select('where_not_in', records, params, _all_in, keep=False)


def where_in_or(records: Any, params: Mapping[Any, Any]) -> Any:
    """Records with at least one field IN its expected values, like ``WHERE a IN (...) OR b IN (...)``."""
    return _select('where_in_or', records, params, _any_in, keep=True)


def where_not_in_all(records: Any, params: Mapping[Any, Any]) -> Any:
    """Records with no field IN its expected values."""
    return _select('where_not_in_all', records, params, _any_in, keep=False)


def where_intersect(records: Any, params: Mapping[Any, Any]) -> Any:
    """Records where, for every field, the record's values and the expected
    values have at least one element in common. Either side may be a scalar.
    """
    return _select('where_intersect', records, params, contains_intersect, keep=True)


def where_intersect_partial(records: Any, params: Mapping[Any, Any]) -> Any:
    """Like where_intersect() but one intersecting field is enough."""
    return _select('where_intersect_partial', records, params, _any_intersect, keep=True)
