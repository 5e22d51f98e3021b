from __future__ import annotations

from typing import Any, Dict, List

from .values import flat_leaves, is_empty, iter_items, keep_entries, to_array


def flatten(*values: Any) -> List[Any]:
    """Flatten any number of (nested) values into one list of leaves.

    Keys are dropped but traversal order is kept. A ``None`` argument
    contributes nothing; a scalar argument contributes itself.
    """
    flat: List[Any] = []
    for value in values:
        if value is None:
            continue
        flat.extend(flat_leaves(value))
    return flat


def remove_nulls(container: Any) -> Dict[Any, Any]:
    """Drop ``None`` entries; the rest keep their keys or positions."""
    return keep_entries((k, v) for k, v in iter_items(container) if v is not None)


def _is_blank(value: Any, include_whitespace: bool) -> bool:
    if value is None or value == '':
        return True
    return include_whitespace and isinstance(value, str) and value.isspace()


def remove_blanks(value: Any, include_whitespace: bool = False) -> Dict[Any, Any]:
    """Drop ``None`` and ``''`` entries, keeping ``0`` and ``False``.

    A scalar is wrapped in a list first. With ``include_whitespace``,
    whitespace-only strings are dropped too.
    """
    return keep_entries(
        (k, v) for k, v in iter_items(to_array(value)) if not _is_blank(v, include_whitespace)
    )


def remove_empty(value: Any) -> Dict[Any, Any]:
    """Drop every empty entry (``None``, ``''``, ``0``, ``False``, empty containers)."""
    return keep_entries((k, v) for k, v in iter_items(to_array(value)) if not is_empty(v))
