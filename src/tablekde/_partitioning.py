"""
Row partitioning for grouped density estimation.

Groups are keyed by the tuple of ``group_by`` values of each row.  Group order
is first-seen order over the input rows; row order inside a group is input
order.  Both orders carry through to the transform output.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Sequence, Tuple


def group_key(row, group_by: Sequence[str]) -> tuple:
    """Grouping key of one row; missing fields contribute ``None``."""
    return tuple(row.get(f) for f in group_by)


def partition_rows(rows, group_by: Sequence[str]) -> Dict[tuple, List[dict]]:
    """
    Split rows into ordered groups.

    Parameters
    ----------
    rows : iterable of mapping
    group_by : sequence of str
        Empty means one group, keyed ``()``, holding every row.  That group
        exists even when ``rows`` is empty.

    Returns
    -------
    groups : dict[tuple, list[dict]]
        Insertion-ordered by first occurrence of each key.
    """
    if not group_by:
        return {(): list(rows)}

    groups: Dict[tuple, List[dict]] = {}
    for row in rows:
        groups.setdefault(group_key(row, group_by), []).append(row)
    return groups


def iter_partitions(groups: Dict[tuple, List[dict]]) -> Iterator[Tuple[tuple, List[dict]]]:
    """Yield ``(key, rows)`` for each group, in group order."""
    for key, members in groups.items():
        yield key, members
