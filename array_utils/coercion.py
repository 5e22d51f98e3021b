from __future__ import annotations

import numbers
import re
from decimal import Decimal
from typing import Any

from .flattening import flatten
from .values import Kind, is_container, iter_items, keep_entries, kind_of, rebuild, to_array

# Compared case-insensitively.
FALSE_STRINGS = frozenset({'false', 'f', 'n', 'no'})

_ASCII_DIGITS = re.compile(r'[0-9]+')


def to_boolean(value: Any) -> bool:
    """Interpret a loosely-typed flag, e.g. from a form field or config row.

    - containers are true when non-empty
    - numbers are true only when ``>= 1`` (so ``0.5`` and negatives are false)
    - ``'false'``, ``'f'``, ``'n'`` and ``'no'`` (any case) are false
    - everything else is true, including ``None``, ``''`` and ``'0'``
    """
    if is_container(value):
        return len(value) > 0
    if isinstance(value, (numbers.Real, Decimal)):
        return value >= 1
    if isinstance(value, str):
        return value.lower() not in FALSE_STRINGS
    return True


def to_booleans(value: Any) -> Any:
    """to_boolean() on each direct element of a container, or on a scalar."""
    if kind_of(value) is Kind.SCALAR:
        return to_boolean(value)
    return rebuild(value, ((k, to_boolean(v)) for k, v in iter_items(value)))


def _is_digits(value: Any) -> bool:
    return bool(_ASCII_DIGITS.fullmatch(str(value)))


def is_int_vals(value: Any) -> bool:
    """True if ``value``, or every element of it, reads as a non-negative integer."""
    return all(_is_digits(v) for _, v in iter_items(to_array(value)))


def all_int_vals(container: Any, recursive: bool = False) -> bool:
    """is_int_vals() for containers only; ``recursive`` checks nested leaves too."""
    if not is_container(container):
        return False
    return is_int_vals(flatten(container) if recursive else container)


def all_digit_strings(container: Any, recursive: bool = False) -> bool:
    """Stricter all_int_vals(): every value must be a string of ASCII digits.

    Actual ints do not count, so ``['1', 2]`` is false.
    """
    if not is_container(container):
        return False
    values = flatten(container) if recursive else [v for _, v in iter_items(container)]
    return all(isinstance(v, str) and _is_digits(v) for v in values)


def int_vals(value: Any) -> Any:
    """Only the elements that read as non-negative integers, under their original keys."""
    return keep_entries((k, v) for k, v in iter_items(to_array(value)) if _is_digits(v))
