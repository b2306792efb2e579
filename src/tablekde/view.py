"""
In-memory table view.

``TableView`` is the minimal tabular container the transforms read from and
write back into: an ordered list of row dicts with column extraction and
numeric range queries.  Any object exposing the same three members
(``rows``, ``getColumn``, ``range``) can be passed to a transform instead.
"""

from __future__ import annotations

from typing import Any, List, Tuple

import numpy as np

from ._preprocessing import finite_values


class TableView:
    """
    Ordered rows with column access.

    Parameters
    ----------
    rows : iterable of mapping, optional
        Each row is copied into a plain ``dict``.
    """

    def __init__(self, rows=()):
        self.rows = [dict(r) for r in rows]

    @classmethod
    def from_records(cls, records) -> 'TableView':
        return cls(records)

    @classmethod
    def from_frame(cls, frame) -> 'TableView':
        """Build a view from a DataFrame-like object with ``to_dict('records')``."""
        return cls(frame.to_dict('records'))

    def __len__(self):
        return len(self.rows)

    def __repr__(self):
        return f"{type(self).__name__}(n_rows={len(self.rows)})"

    def get_column(self, field: str) -> List[Any]:
        """Values of ``field`` in row order; rows without it contribute ``None``."""
        return [row.get(field) for row in self.rows]

    getColumn = get_column

    def range(self, field: str) -> Tuple[float, float]:
        """
        ``(min, max)`` over the finite numeric values of ``field``.

        Returns ``(nan, nan)`` when the column holds no finite number.
        """
        x = finite_values(self.get_column(field))
        if x.size == 0:
            return np.nan, np.nan
        return float(x.min()), float(x.max())

    def transform(self, type: str, options=None, **kwargs) -> 'TableView':
        """
        Apply a registered transform by name, in place.

        Examples
        --------
        >>> view.transform('kde', fields=['v'], groupBy=['g'])
        """
        from .registry import get_transform

        get_transform(type)(self, options, **kwargs)
        return self
