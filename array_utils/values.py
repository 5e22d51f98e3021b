"""Variant tagging and container primitives shared by every module.

Values are one of three kinds:

- SCALAR: anything that is not a container (``None`` and strings included)
- SEQUENCE: ``list`` or ``tuple``; keys are the 0-based positions
- MAPPING: any ``collections.abc.Mapping``

Functions elsewhere dispatch on ``kind_of()`` rather than testing types
themselves.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import ArrayStructureError

MISSING = object()
_DIGITS = re.compile(r'[0-9]+')


class Kind(Enum):
    SCALAR = 'scalar'
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'


def kind_of(value: Any) -> Kind:
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, (list, tuple)):
        return Kind.SEQUENCE
    return Kind.SCALAR


def is_container(value: Any) -> bool:
    return kind_of(value) is not Kind.SCALAR


def require_container(value: Any, func_name: str, what: str = 'argument') -> Kind:
    """Return the kind of ``value``, raising if it is a scalar."""
    kind = kind_of(value)
    if kind is Kind.SCALAR:
        raise ArrayStructureError(func_name, what, value)
    return kind


def iter_items(container: Any) -> Iterator[Tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs; positions stand in for sequence keys."""
    kind = kind_of(container)
    if kind is Kind.MAPPING:
        return iter(container.items())
    if kind is Kind.SEQUENCE:
        return iter(enumerate(container))
    return iter(())


def iter_values(container: Any) -> Iterator[Any]:
    kind = kind_of(container)
    if kind is Kind.MAPPING:
        return iter(container.values())
    if kind is Kind.SEQUENCE:
        return iter(container)
    return iter(())


def as_position(key: Any, size: int) -> Optional[int]:
    """The sequence position ``key`` names, or ``None`` if it names none below ``size``."""
    # bool is an int subclass but never a position
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        pos = key
    elif isinstance(key, str) and _DIGITS.fullmatch(key):
        pos = int(key)
    else:
        return None
    return pos if 0 <= pos < size else None


def get_item(container: Any, key: Any, default: Any = None) -> Any:
    """Single-level lookup that never raises."""
    kind = kind_of(container)
    if kind is Kind.MAPPING:
        try:
            return container[key] if key in container else default
        except TypeError:
            # unhashable key
            return default
    if kind is Kind.SEQUENCE:
        pos = as_position(key, len(container))
        return default if pos is None else container[pos]
    return default


def has_key(container: Any, key: Any) -> bool:
    return get_item(container, key, MISSING) is not MISSING


def keep_entries(pairs: Iterable[Tuple[Any, Any]]) -> Dict[Any, Any]:
    """Collect the kept ``(key, value)`` pairs of a filter.

    Keys are carried over as they are, so entries kept from a sequence stay
    under their original positions (``{1: 'y', 2: 'z'}``).
    """
    out: Dict[Any, Any] = {}
    for key, value in pairs:
        out[key] = value
    return out


def rebuild(like: Any, pairs: Iterable[Tuple[Any, Any]]) -> Any:
    """Build a result of the same kind as ``like`` from ``(key, value)`` pairs.

    Meant for element-wise maps that keep every entry: a sequence gives a
    list of the values in order, anything else a dict.
    """
    if kind_of(like) is Kind.SEQUENCE:
        return [value for _, value in pairs]
    return keep_entries(pairs)


def flat_leaves(value: Any) -> Iterator[Any]:
    """Depth-first leaves of ``value``; a scalar is its own single leaf."""
    if is_container(value):
        for item in iter_values(value):
            yield from flat_leaves(item)
    else:
        yield value


def as_keys(keys: Any) -> List[Any]:
    """Normalize a one-or-many keys argument into a flat list.

    Accepts a single key, a (nested) sequence of keys, or the tuple collected
    from ``*keys``. ``None`` at the top level means no keys.
    """
    if keys is None:
        return []
    return list(flat_leaves(keys))


def is_empty(value: Any) -> bool:
    """``None``, ``''``, empty containers, ``0``, ``0.0`` and ``False``."""
    if is_container(value):
        return len(value) == 0
    return not value


def unique(values: Iterable[Any]) -> List[Any]:
    """Drop repeats by equality, keeping first occurrences in order."""
    out: List[Any] = []
    for value in values:
        if value not in out:
            out.append(value)
    return out


def to_array(value: Any) -> Any:
    """Containers pass through; a scalar is wrapped in a one-element list."""
    return value if is_container(value) else [value]


def to_text(value: Any) -> str:
    return '' if value is None else str(value)
