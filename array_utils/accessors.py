from __future__ import annotations

from typing import Any

from .paths import split_path
from .values import (
    MISSING,
    Kind,
    as_keys,
    as_position,
    get_item,
    is_container,
    is_empty,
    iter_values,
    kind_of,
)


def _walk(root: Any, keys: Any, nonempty: bool) -> Any:
    node = root
    for key in as_keys(keys):
        node = get_item(node, key, MISSING)
        if node is MISSING:
            return MISSING
    if nonempty and is_empty(node):
        return MISSING
    return node


def element(container: Any, key: Any, default: Any = None) -> Any:
    """One-level lookup: ``container[key]`` if the key exists, else ``default``.

    A key holding ``None`` still counts as present.
    """
    return get_item(container, key, default)


def get_value(root: Any, keys: Any, default: Any = None) -> Any:
    """Look up a nested value by key path, or ``default`` if any step is missing.

    ``keys`` is a single key or a sequence of keys:

    >>> data = {'a': ['A', {'B': ['X', 'Y']}], 'b': 'BB'}
    >>> get_value(data, ['a', 1, 'B', '1'])
    'Y'
    >>> get_value(data, ['a', 'gg'], 'ZZZ')
    'ZZZ'
    """
    value = _walk(root, keys, nonempty=False)
    return default if value is MISSING else value


def get_value_nonempty(root: Any, keys: Any, default: Any = None) -> Any:
    """Same as get_value() but an empty leaf also resolves to ``default``."""
    value = _walk(root, keys, nonempty=True)
    return default if value is MISSING else value


def get_path(root: Any, path: str, default: Any = None, sep: str = '.') -> Any:
    """get_value() with the key path given as a dot-path string."""
    return get_value(root, split_path(path, sep), default)


def has_value(value: Any, key: Any = None) -> bool:
    """Avoids ``x is not None and x`` style checks on possibly nested data.

    With ``key``, true if ``value`` has that key and it holds a non-empty
    value. Without one, a container is true if any direct element is
    non-empty and a scalar is true if it is non-empty itself.
    """
    if key is not None:
        return not is_empty(get_item(value, key, None))
    if is_container(value):
        return any(not is_empty(v) for v in iter_values(value))
    return not is_empty(value)


def set_value(root: Any, keys: Any, value: Any) -> Any:
    """Return a copy of ``root`` with ``value`` stored at the key path.

    A list position may be given as an int or a digit string, as for
    get_value(); one past the end appends. Missing or scalar intermediates
    become dicts. Only the containers along the path are copied; ``root``
    itself is left untouched.
    """
    path = as_keys(keys)
    if not path:
        return value
    head, rest = path[0], path[1:]
    kind = kind_of(root)
    child = get_item(root, head, None) if rest else None
    new_child = set_value(child, rest, value) if rest else value

    if kind is Kind.SEQUENCE:
        updated = list(root)
        # One past the end appends.
        pos = as_position(head, len(updated) + 1)
        if pos == len(updated):
            updated.append(new_child)
            return updated
        if pos is not None:
            updated[pos] = new_child
            return updated
        updated = dict(enumerate(updated))
    elif kind is Kind.MAPPING:
        updated = dict(root)
    else:
        updated = {}
    updated[head] = new_child
    return updated
