"""
Tests for joining values into text and exploding path trees.
"""

import pytest

from array_utils.text import explode_tree, flatten_to_string, join_as_list, join_neatly, q_marks


class TestJoinAsList:
    """Test English-style list joining."""

    def test_empty(self):
        assert join_as_list([]) == ''

    def test_single(self):
        assert join_as_list(['a']) == 'a'

    def test_two(self):
        assert join_as_list(['a', 'b']) == 'a and b'

    def test_three(self):
        assert join_as_list(['a', 'b', 'c']) == 'a, b and c'

    def test_custom_delimiters(self):
        assert join_as_list(['horse', 'dog', 'cat', 'mouse'], '; ', '; & ') == 'horse; dog; cat; & mouse'

    def test_nested_and_scalar(self):
        assert join_as_list(['a', ['b', 1]]) == 'a, b and 1'
        assert join_as_list('solo') == 'solo'


class TestJoinNeatly:
    """Test delimiter-aware joining."""

    def test_simple(self):
        assert join_neatly('/', 'a', 'b', 'c') == 'a/b/c'

    def test_outer_delimiters_kept(self):
        assert join_neatly('/', '/a/', '/b/') == '/a/b/'

    def test_interior_trimmed(self):
        assert join_neatly('/', 'a/', '//b//', '/c') == 'a/b/c'

    def test_blanks_dropped(self):
        assert join_neatly('/', 'a', '', None, '/', 'b') == 'a/b'

    def test_single_part_loses_trailing_only(self):
        assert join_neatly('/', '/a/') == '/a'

    def test_nested_parts(self):
        assert join_neatly('/', ['a', ['b']], 'c') == 'a/b/c'

    def test_non_string_parts(self):
        assert join_neatly('-', 2024, '01') == '2024-01'

    def test_empty_delimiter_trims_nothing(self):
        assert join_neatly('', 'a ', ' b') == 'a  b'
        assert join_neatly('', ' a ', '', None, ' c ') == ' a  c '

    def test_nothing(self):
        assert join_neatly('/') == ''


class TestExplodeTree:
    """Test flattening a tree of segments into paths."""

    def test_css_tree(self):
        tree = {
            'assets': {
                'admin': {
                    '/pages/css': ['css.css'],
                    'layout/css': ['layout.css', 'themes/default.css'],
                },
                'global': {
                    'plugins': ['font-awesome.css', None, 'select2.css'],
                },
            },
        }
        assert explode_tree(tree, '/') == [
            'assets/admin/pages/css/css.css',
            'assets/admin/layout/css/layout.css',
            'assets/admin/layout/css/themes/default.css',
            'assets/global/plugins/font-awesome.css',
            'assets/global/plugins/select2.css',
        ]

    def test_parent_prefix(self):
        assert explode_tree({'css': ['a.css']}, '/', 'http://host/') == ['http://host/css/a.css']

    def test_leaf_keys_ignored(self):
        assert explode_tree({'dir': {'ignored': 'file.txt'}}, '/') == ['dir/file.txt']

    def test_top_level_leaf(self):
        assert explode_tree(['a.txt', None], '/') == ['a.txt']

    def test_empty(self):
        assert explode_tree({}, '/') == []

    def test_default_delimiter_keeps_spaces(self):
        assert explode_tree({'My Docs ': ['a b.txt']}) == ['My Docs a b.txt']


class TestFlattenToString:

    def test_nested(self):
        assert flatten_to_string(',', ['a', ['b']], 'c') == 'a,b,c'

    def test_none_leaf(self):
        assert flatten_to_string('|', [1, None, 2]) == '1||2'


class TestQMarks:

    @pytest.mark.parametrize("values,expected", [
        ([], ''),
        (['x'], '?'),
        (['x', ['y', 'z']], '?, ?, ?'),
    ])
    def test_counts(self, values, expected):
        assert q_marks(values) == expected

    def test_wrapped(self):
        assert q_marks(['a', 'b'], 'LOWER(', ')') == 'LOWER(?), LOWER(?)'
