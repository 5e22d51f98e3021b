"""Helpers for nested dicts and lists.

Pure functions, none of which mutate their arguments, that:
- flatten and inspect nested structures
- look up nested values with defaults
- select, drop and re-case keys and columns
- index, group, aggregate and sort records
- filter records with SQL-like ``where`` clauses
- coerce loosely-typed flags and join values into text
"""
from __future__ import annotations

from .accessors import element, get_path, get_value, get_value_nonempty, has_value, set_value
from .coercion import (
    FALSE_STRINGS,
    all_digit_strings,
    all_int_vals,
    int_vals,
    is_int_vals,
    to_boolean,
    to_booleans,
)
from .columns import (
    columns,
    delete_columns,
    keys_value_not,
    lower_keys,
    subset,
    subsubset,
    subsubset_collapse,
    unset,
    unset_matching,
    upper_keys,
)
from .errors import ArrayStructureError, ArrayUtilsError, SortSpecError
from .flattening import flatten, remove_blanks, remove_empty, remove_nulls
from .paths import escape_segment, split_path
from .records import (
    SortOrder,
    aggregate,
    group_by,
    index_by,
    multiarray_keys,
    multiarray_values,
    order_by,
    sort_by_column,
)
from .shape import (
    collapse,
    collapse_concat,
    concat,
    dimension_count,
    first,
    is_assoc,
    is_multidimensional,
    last,
    last_key,
)
from .text import explode_tree, flatten_to_string, join_as_list, join_neatly, q_marks
from .values import Kind, as_keys, is_container, is_empty, kind_of, to_array
from .where import (
    contains,
    contains_intersect,
    contains_subset,
    where,
    where_boolean_equals,
    where_boolean_not_equals,
    where_in,
    where_in_or,
    where_intersect,
    where_intersect_partial,
    where_not,
    where_not_all,
    where_not_in,
    where_not_in_all,
    where_or,
)

__version__ = "0.1.0"
__all__ = [
    # Values
    "Kind",
    "kind_of",
    "is_container",
    "is_empty",
    "as_keys",
    "to_array",
    # Errors
    "ArrayUtilsError",
    "ArrayStructureError",
    "SortSpecError",
    # Shape
    "dimension_count",
    "is_multidimensional",
    "is_assoc",
    "collapse",
    "collapse_concat",
    "concat",
    "first",
    "last",
    "last_key",
    # Flattening
    "flatten",
    "remove_nulls",
    "remove_blanks",
    "remove_empty",
    # Access
    "element",
    "get_value",
    "get_value_nonempty",
    "get_path",
    "set_value",
    "has_value",
    "split_path",
    "escape_segment",
    # Columns
    "subset",
    "unset",
    "unset_matching",
    "columns",
    "delete_columns",
    "subsubset",
    "subsubset_collapse",
    "keys_value_not",
    "lower_keys",
    "upper_keys",
    # Records
    "SortOrder",
    "index_by",
    "group_by",
    "aggregate",
    "order_by",
    "sort_by_column",
    "multiarray_keys",
    "multiarray_values",
    # Where
    "contains",
    "contains_intersect",
    "contains_subset",
    "where",
    "where_not",
    "where_or",
    "where_not_all",
    "where_boolean_equals",
    "where_boolean_not_equals",
    "where_in",
    "where_not_in",
    "where_in_or",
    "where_not_in_all",
    "where_intersect",
    "where_intersect_partial",
    # Coercion
    "FALSE_STRINGS",
    "to_boolean",
    "to_booleans",
    "is_int_vals",
    "all_int_vals",
    "all_digit_strings",
    "int_vals",
    # Text
    "flatten_to_string",
    "join_as_list",
    "join_neatly",
    "explode_tree",
    "q_marks",
]
