"""Shape inspection and one-level restructuring."""
from __future__ import annotations

from typing import Any, Dict, List

from .values import (
    Kind,
    is_container,
    iter_items,
    iter_values,
    kind_of,
    require_container,
)


def dimension_count(value: Any) -> int:
    """Depth of the chain of first elements starting at ``value``.

    An empty container counts as depth 1, a scalar as 0.
    """
    depth = 0
    while is_container(value):
        depth += 1
        value = next(iter_values(value), None)
    return depth


def is_multidimensional(container: Any) -> bool:
    """True if any direct value is itself a container, even an empty one."""
    require_container(container, 'is_multidimensional')
    return any(is_container(v) for v in iter_values(container))


def is_assoc(container: Any) -> bool:
    """True unless ``container`` is empty or keyed exactly ``0..n-1``."""
    kind = require_container(container, 'is_assoc')
    if kind is Kind.SEQUENCE or not container:
        return False
    return list(container.keys()) != list(range(len(container)))


def collapse(container: Any) -> Dict[Any, Any]:
    """Move the entries of sub-containers up one level, keeping their keys.

    Sub-entries overwrite top-level entries with the same key; a top-level
    scalar entry never overwrites a key that is already present.
    """
    collapsed: Dict[Any, Any] = {}
    for key, value in iter_items(container):
        if is_container(value):
            for sub_key, sub_value in iter_items(value):
                collapsed[sub_key] = sub_value
        elif key not in collapsed:
            collapsed[key] = value
    return collapsed


def collapse_concat(container: Any) -> List[Any]:
    """Like collapse() but appends values positionally, so nothing is overwritten."""
    collapsed: List[Any] = []
    for value in iter_values(container):
        if is_container(value):
            collapsed.extend(iter_values(value))
        else:
            collapsed.append(value)
    return collapsed


def concat(*containers: Any) -> List[Any]:
    """Concatenate the values of every argument into one list (keys are lost)."""
    out: List[Any] = []
    for container in containers:
        if is_container(container):
            out.extend(iter_values(container))
        else:
            out.append(container)
    return out


def first(value: Any) -> Any:
    """First element of a container (``None`` if empty); scalars pass through."""
    if kind_of(value) is Kind.SCALAR:
        return value
    return next(iter_values(value), None)


def last(value: Any) -> Any:
    """Last element of a container (``None`` if empty); scalars pass through."""
    kind = kind_of(value)
    if kind is Kind.SCALAR:
        return value
    if not value:
        return None
    if kind is Kind.SEQUENCE:
        return value[-1]
    return value[list(value.keys())[-1]]


def last_key(container: Any) -> Any:
    kind = require_container(container, 'last_key')
    if not container:
        return None
    if kind is Kind.SEQUENCE:
        return len(container) - 1
    return list(container.keys())[-1]
