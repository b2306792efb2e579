"""
Bandwidth selection for 1-D kernel density estimation.

Built-in rules
--------------
nrd        : normal reference distribution (default):
             ``1.06 * min(sd, IQR / 1.34) * n^(-1/5)``.  Robust to heavy
             tails through the IQR term.
silverman  : Silverman's rule of thumb: ``(4 sd^5 / (3 n))^(1/5)``.
scott      : Scott's rule as used by ``scipy.stats.gaussian_kde``:
             ``sd * n^(-1/5)`` with the ``ddof=1`` standard deviation.

Resolution is lenient: anything that does not resolve to a finite positive
number falls back to ``nrd`` instead of failing the transform.
"""

from __future__ import annotations

import numbers
from typing import Callable, Union

import numpy as np
from scipy.stats import iqr

from ._preprocessing import finite_values


def _positive_spread(x: np.ndarray, s: float) -> float:
    # Normal-reference guard for degenerate spreads: sd, then |x[0]|, then 1.
    if s > 0:
        return s
    sd = float(np.std(x)) if len(x) else 0.0
    if sd > 0:
        return sd
    if len(x) and x[0] != 0:
        return abs(float(x[0]))
    return 1.0


def nrd(column) -> float:
    """Normal reference distribution rule; always returns a positive number."""
    x = finite_values(column)
    n = len(x)
    if n == 0:
        return 1.0
    sd = float(np.std(x))
    spread = min(sd, float(iqr(x)) / 1.34)
    return 1.06 * _positive_spread(x, spread) * n ** -0.2


def silverman(column) -> float:
    x = finite_values(column)
    n = len(x)
    if n == 0:
        return np.nan
    sd = float(np.std(x))
    return (4.0 * sd ** 5 / (3.0 * n)) ** 0.2


def scott(column) -> float:
    x = finite_values(column)
    n = len(x)
    if n < 2:
        return np.nan
    return float(np.std(x, ddof=1)) * n ** -0.2


# ---------------------------------------------------------------------------
# Registry and lookup
# ---------------------------------------------------------------------------

BUILTIN_BANDWIDTHS: dict = {
    'nrd': nrd,
    'silverman': silverman,
    'scott': scott,
}

BANDWIDTH_METHODS = tuple(BUILTIN_BANDWIDTHS)

DEFAULT_BANDWIDTH = 'nrd'


def _is_positive(value) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and np.isfinite(value)
        and value > 0
    )


def select_bandwidth(column, bandwidth: Union[str, Callable, float, None]) -> float:
    """
    Resolve the smoothing bandwidth for one column.

    Parameters
    ----------
    column : sequence of scalars
        Column values; non-numeric entries are ignored by the built-in rules.
    bandwidth : str, callable, or float
        A rule name from ``BUILTIN_BANDWIDTHS``, a callable
        ``column -> float``, or a fixed positive number.

    Returns
    -------
    h : float
        A finite positive bandwidth.  Unknown names, non-positive numbers,
        other types, and rules that produce a non-positive or non-finite
        value all resolve to ``nrd(column)``.
    """
    if isinstance(bandwidth, str) and bandwidth in BUILTIN_BANDWIDTHS:
        h = BUILTIN_BANDWIDTHS[bandwidth](column)
    elif callable(bandwidth):
        h = bandwidth(column)
    else:
        h = bandwidth

    if _is_positive(h):
        return float(h)
    return BUILTIN_BANDWIDTHS[DEFAULT_BANDWIDTH](column)
