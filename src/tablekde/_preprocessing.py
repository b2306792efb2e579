"""
Value coercion for table columns.

Rows hold arbitrary scalars (numbers, numeric strings, ``None``, labels).
Density estimation only sees finite floats; everything else is treated as a
missing value and dropped.  All functions are pure.
"""

from __future__ import annotations

import numbers

import numpy as np


def _to_float(value) -> float:
    if isinstance(value, bool) or value is None:
        return np.nan
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return np.nan
    return np.nan


def to_numeric(values) -> np.ndarray:
    """
    Coerce a column to a float64 array, mapping non-numeric entries to NaN.

    Parameters
    ----------
    values : iterable of scalars

    Returns
    -------
    arr : ndarray of float64, same length as ``values``
    """
    return np.fromiter((_to_float(v) for v in values), dtype=np.float64)


def finite_values(values) -> np.ndarray:
    """Return the finite numeric entries of a column, in input order."""
    arr = to_numeric(values)
    return arr[np.isfinite(arr)]
