"""Joining (nested) values into strings."""
from __future__ import annotations

from typing import Any, List

from .flattening import flatten
from .values import is_container, iter_items, to_text

DEFAULT_DELIMITER = ', '
DEFAULT_LAST_DELIMITER = ' and '


def flatten_to_string(delimiter: str, *values: Any) -> str:
    """Like ``delimiter.join()`` but accepts scalars and nested containers."""
    return delimiter.join(to_text(v) for v in flatten(*values))


def join_as_list(
    values: Any,
    delimiter: str = DEFAULT_DELIMITER,
    last_delimiter: str = DEFAULT_LAST_DELIMITER,
) -> str:
    """Join values as an English list.

    >>> join_as_list(['horse', 'dog', 'cat', 'mouse'])
    'horse, dog, cat and mouse'
    >>> join_as_list(['horse', 'dog', 'cat'], '; ', '; & ')
    'horse; dog; & cat'
    """
    parts = [to_text(v) for v in flatten(values)]
    if not parts:
        return ''
    if len(parts) == 1:
        return parts[0]
    return delimiter.join(parts[:-1]) + last_delimiter + parts[-1]


def join_neatly(delimiter: str, *parts: Any) -> str:
    """Join parts with ``delimiter`` without doubling it up, e.g. for paths.

    Delimiter characters are trimmed where parts meet: the first part keeps
    its start and the last part keeps its end, so ``'/a/'`` and ``'/b/'`` join
    to ``'/a/b/'``. Blank parts are dropped. With an empty delimiter nothing
    is trimmed, so ``join_neatly('', 'a ', ' b')`` is ``'a  b'``.
    """
    texts = [to_text(p) for p in flatten(*parts)]
    if not delimiter:
        return ''.join(texts)

    trimmed: List[str] = []
    last_index = len(texts) - 1
    for i, text in enumerate(texts):
        if i == 0:
            text = text.rstrip(delimiter)
        elif i == last_index:
            text = text.lstrip(delimiter)
        else:
            text = text.strip(delimiter)
        if text != '':
            trimmed.append(text)
    return delimiter.join(trimmed)


def explode_tree(tree: Any, delimiter: str = '', parent: str = '') -> List[str]:
    """Turn a tree of path segments into one joined path per leaf.

    Container branches contribute their key as a segment, leaf values end a
    path, and ``None`` leaves are skipped (handy for conditional entries)::

        explode_tree({'assets': {'css': ['a.css', None, 'b.css']}}, '/')
        # ['assets/css/a.css', 'assets/css/b.css']
    """
    paths: List[str] = []
    for key, branch in iter_items(tree):
        if is_container(branch):
            branch_parent = join_neatly(delimiter, parent, key) if parent else to_text(key)
            paths.extend(explode_tree(branch, delimiter, branch_parent))
        elif branch is not None:
            paths.append(join_neatly(delimiter, parent, branch))
    return paths


def q_marks(values: Any, pre: str = '', post: str = '') -> str:
    """One ``?`` placeholder per value, e.g. for ``IN (...)`` parameter lists.

    ``q_marks(['a', 'b'], 'LOWER(', ')')`` gives ``'LOWER(?), LOWER(?)'``.
    """
    return ', '.join(f"{pre}?{post}" for _ in flatten(values))
