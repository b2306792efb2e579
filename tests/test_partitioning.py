"""
Tests for row partitioning: key identity and ordering guarantees.
"""

from tablekde._partitioning import group_key, iter_partitions, partition_rows


ROWS = [
    {'g': 'b', 'h': 1, 'v': 10},
    {'g': 'a', 'h': 1, 'v': 20},
    {'g': 'b', 'h': 2, 'v': 30},
    {'g': 'b', 'h': 1, 'v': 40},
    {'g': 'a', 'h': 1, 'v': 50},
]


class TestPartitionRows:
    def test_no_group_by_single_group(self):
        groups = partition_rows(ROWS, [])
        assert list(groups) == [()]
        assert groups[()] == ROWS

    def test_no_group_by_empty_rows(self):
        assert partition_rows([], []) == {(): []}

    def test_group_by_empty_rows(self):
        assert partition_rows([], ['g']) == {}

    def test_first_seen_order(self):
        groups = partition_rows(ROWS, ['g'])
        assert list(groups) == [('b',), ('a',)]

    def test_row_order_within_group(self):
        groups = partition_rows(ROWS, ['g'])
        assert [r['v'] for r in groups[('b',)]] == [10, 30, 40]
        assert [r['v'] for r in groups[('a',)]] == [20, 50]

    def test_compound_key(self):
        groups = partition_rows(ROWS, ['g', 'h'])
        assert list(groups) == [('b', 1), ('a', 1), ('b', 2)]
        assert [r['v'] for r in groups[('b', 1)]] == [10, 40]

    def test_key_order_follows_group_by(self):
        groups = partition_rows(ROWS, ['h', 'g'])
        assert list(groups)[0] == (1, 'b')

    def test_structural_equality(self):
        """1 and 1.0 compare equal, so they share a group; '1' does not."""
        rows = [{'g': 1}, {'g': 1.0}, {'g': '1'}]
        groups = partition_rows(rows, ['g'])
        assert len(groups) == 2
        assert len(groups[(1,)]) == 2

    def test_missing_group_field_is_none(self):
        rows = [{'v': 1}, {'g': None, 'v': 2}]
        groups = partition_rows(rows, ['g'])
        assert list(groups) == [(None,)]
        assert len(groups[(None,)]) == 2

    def test_iter_partitions(self):
        groups = partition_rows(ROWS, ['g'])
        keys = [key for key, _ in iter_partitions(groups)]
        assert keys == [('b',), ('a',)]


def test_group_key():
    assert group_key({'a': 1, 'b': 'x'}, ['b', 'a']) == ('x', 1)
    assert group_key({'a': 1}, []) == ()
