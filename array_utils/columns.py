"""Key-based selection on containers and on the records within them."""
from __future__ import annotations

import logging
import re
from typing import Any, List

from .flattening import flatten
from .values import (
    Kind,
    as_keys,
    get_item,
    is_container,
    iter_items,
    keep_entries,
    kind_of,
    rebuild,
)

logger = logging.getLogger(__name__)


def _key_set(container: Any, keys: Any) -> List[Any]:
    normalized: List[Any] = []
    positional = kind_of(container) is Kind.SEQUENCE
    for key in as_keys(keys):
        # Positions may be given as digit strings.
        if positional and isinstance(key, str) and key.isascii() and key.isdigit():
            key = int(key)
        normalized.append(key)
    return normalized


def _contains_key(key_set: List[Any], key: Any) -> bool:
    return any(key == k and isinstance(key, bool) == isinstance(k, bool) for k in key_set)


def subset(container: Any, *keys: Any) -> Any:
    """Keep only the entries whose key is in ``keys``.

    Kept entries stay under their original keys, or positions for a
    sequence, in order. A non-container is returned unaltered.
    """
    if not is_container(container):
        return container
    key_set = _key_set(container, keys)
    return keep_entries((k, v) for k, v in iter_items(container) if _contains_key(key_set, k))


def unset(container: Any, *keys: Any) -> Any:
    """Drop the entries whose key is in ``keys``; the inverse of subset()."""
    if not is_container(container):
        return container
    key_set = _key_set(container, keys)
    return keep_entries((k, v) for k, v in iter_items(container) if not _contains_key(key_set, k))


def unset_matching(container: Any, *patterns: Any) -> Any:
    """Drop the entries whose key matches any of the regular expressions.

    Each pattern must match the whole key (``^`` and ``$`` are implied).
    """
    if not is_container(container):
        return container
    compiled = [re.compile(p) for p in as_keys(patterns)]
    logger.debug("unset_matching with %d pattern(s)", len(compiled))
    return keep_entries(
        (k, v) for k, v in iter_items(container) if not any(rx.fullmatch(str(k)) for rx in compiled)
    )


def keys_value_not(container: Any, *search_values: Any) -> List[Any]:
    """Keys of the entries whose value is not one of ``search_values``."""
    excluded = flatten(*search_values)
    return [k for k, v in iter_items(container) if v not in excluded]


def subsubset(records: Any, *keys: Any) -> Any:
    """Apply subset() to every record, keeping the outer structure."""
    if not is_container(records):
        return records
    return rebuild(records, ((k, subset(rec, *keys)) for k, rec in iter_items(records)))


def columns(records: Any, *keys: Any) -> Any:
    """Like picking several columns out of a table: subset() on every row."""
    return subsubset(records, *keys)


def delete_columns(records: Any, *keys: Any) -> Any:
    """Remove the named columns from every record."""
    if not is_container(records):
        return records
    return rebuild(records, ((k, unset(rec, *keys)) for k, rec in iter_items(records)))


def subsubset_collapse(records: Any, key: Any) -> Any:
    """Replace every record by its value at ``key``, or ``{}`` when absent."""
    if not is_container(records):
        return records
    return rebuild(records, ((k, get_item(rec, key, {})) for k, rec in iter_items(records)))


def _change_key_case(value: Any, convert) -> Any:
    kind = kind_of(value)
    if kind is Kind.SEQUENCE:
        return [_change_key_case(v, convert) for v in value]
    if kind is Kind.SCALAR:
        return value
    changed = {}
    for key, item in value.items():
        new_key = convert(key) if isinstance(key, str) else key
        changed[new_key] = _change_key_case(item, convert)
    return changed


def lower_keys(value: Any) -> Any:
    """Lower-case every string key, to the full depth of ``value``.

    Keys that collide after conversion keep the later entry's value.
    """
    return _change_key_case(value, str.lower)


def upper_keys(value: Any) -> Any:
    """Upper-case every string key, to the full depth of ``value``."""
    return _change_key_case(value, str.upper)
