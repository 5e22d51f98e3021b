"""Dot-path strings for nested lookups, e.g. ``'users.0.name'``."""
from __future__ import annotations

from typing import Any, List

ESCAPE = '\\'


def escape_segment(segment: Any, sep: str = '.') -> str:
    """Escape one key so it survives split_path() as a single segment."""
    return str(segment).replace(ESCAPE, ESCAPE * 2).replace(sep, ESCAPE + sep)


def split_path(path: Any, sep: str = '.') -> List[str]:
    """Split a key path on unescaped ``sep``.

    A backslash escapes the next character, so ``'models.gpt-3\\.5'`` is
    ``['models', 'gpt-3.5']``. A trailing lone backslash is kept literally.
    Empty segments are dropped.
    """
    if path is None:
        return []
    text = path if isinstance(path, str) else str(path)

    segments: List[str] = []
    current: List[str] = []
    chars = iter(text)
    for ch in chars:
        if ch == ESCAPE:
            current.append(next(chars, ESCAPE))
        elif ch == sep:
            segments.append(''.join(current))
            current = []
        else:
            current.append(ch)
    segments.append(''.join(current))
    return [s for s in segments if s]
