"""
Tests for the package surface.
"""

import array_utils


class TestExports:

    def test_all_names_resolve(self):
        for name in array_utils.__all__:
            assert hasattr(array_utils, name), name

    def test_top_level_usage(self):
        rows = [{'id': 2, 'tag': 'x'}, {'id': 1, 'tag': 'y'}]
        indexed = array_utils.index_by(array_utils.where_in(rows, {'tag': ['x', 'y']}), 'id')
        assert list(indexed) == [1, 2]
        assert array_utils.join_as_list(array_utils.multiarray_values(indexed, 'tag')) == 'y and x'
