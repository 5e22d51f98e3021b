"""
Tests for flatten() and the flatten-based cleaners.
"""

import pytest

from array_utils.flattening import flatten, remove_blanks, remove_empty, remove_nulls


class TestFlatten:
    """Test depth-first leaf collection."""

    def test_nested(self):
        assert flatten([1, [2, [3, [4]]], 5]) == [1, 2, 3, 4, 5]

    def test_mapping_values(self):
        assert flatten({'a': 1, 'b': {'c': 2, 'd': [3]}}) == [1, 2, 3]

    def test_variadic(self):
        assert flatten('a', ['b', 'c'], {'x': 'd'}) == ['a', 'b', 'c', 'd']

    def test_none_argument_contributes_nothing(self):
        assert flatten(None) == []
        assert flatten('a', None, 'b') == ['a', 'b']

    def test_nested_none_is_a_leaf(self):
        assert flatten([1, None, [None]]) == [1, None, None]

    def test_scalar(self):
        assert flatten('abc') == ['abc']

    def test_empty_containers_vanish(self):
        assert flatten([[], {}, [[]]]) == []

    @pytest.mark.parametrize("value", [
        [1, [2, [3]]],
        {'a': [1, {'b': 2}], 'c': None},
        'scalar',
        [None, [None]],
    ])
    def test_idempotent(self, value):
        once = flatten(value)
        assert flatten(once) == once


class TestRemovers:

    def test_remove_nulls_mapping(self):
        assert remove_nulls({'a': None, 'b': 0, 'c': ''}) == {'b': 0, 'c': ''}

    def test_remove_nulls_sequence_keeps_positions(self):
        assert remove_nulls([None, 1, None, 2]) == {1: 1, 3: 2}

    def test_remove_blanks_keeps_zero_and_false(self):
        assert remove_blanks(['', None, 0, False, '0', ' ']) == {2: 0, 3: False, 4: '0', 5: ' '}

    def test_remove_blanks_whitespace(self):
        assert remove_blanks({'a': ' ', 'b': 'x'}, include_whitespace=True) == {'b': 'x'}

    def test_remove_blanks_scalar(self):
        assert remove_blanks('x') == {0: 'x'}
        assert remove_blanks('') == {}

    def test_remove_empty(self):
        assert remove_empty({'a': 0, 'b': [], 'c': 'x', 'd': None}) == {'c': 'x'}

    def test_remove_empty_scalars(self):
        assert remove_empty(None) == {}
        assert remove_empty('x') == {0: 'x'}
