"""Exception types raised for programmer errors.

Missing keys and paths never raise; they resolve to defaults. These are only
raised when a call is structurally impossible.
"""
from __future__ import annotations

from typing import Any


class ArrayUtilsError(Exception):
    """Base class for array_utils errors."""


class ArrayStructureError(ArrayUtilsError, TypeError):
    """A value has the wrong structure for the call.

    Usually a non-container where a container is required, or an unhashable
    field value that would become a key.
    """

    def __init__(self, func_name: str, what: str, value: Any, expected: str = "a mapping or sequence"):
        self.func_name = func_name
        self.what = what
        self.value = value
        super().__init__(
            f"{func_name}() expects {what} to be {expected}, "
            f"got {type(value).__name__}"
        )


class SortSpecError(ArrayUtilsError, ValueError):
    """An order_by() column/direction spec is malformed."""
