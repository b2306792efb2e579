"""
Sampling-domain resolution.

When no explicit extent is configured, every field shares one domain: the
global minimum and maximum over all configured fields.
"""

from __future__ import annotations

import warnings
from typing import Sequence, Tuple

import numpy as np

from ._warnings import KDEExtentWarning, external_stacklevel


def resolve_extent(view, fields: Sequence[str], extent=()) -> Tuple[float, float]:
    """
    Return the ``(min, max)`` domain over which densities are sampled.

    Parameters
    ----------
    view : TableView-like
        Must expose ``range(field) -> (min, max)``.
    fields : sequence of str
    extent : sequence of 2 float, optional
        Used verbatim when non-empty.

    Returns
    -------
    (lo, hi) : tuple of float
        ``(nan, nan)`` when no field holds a finite value.
    """
    if len(extent):
        lo, hi = float(extent[0]), float(extent[1])
        if lo > hi:
            warnings.warn(
                f"extent [{lo}, {hi}] is reversed; no domain points will be sampled.",
                KDEExtentWarning,
                stacklevel=external_stacklevel(),
            )
        return lo, hi

    bounds = np.array([view.range(f) for f in fields], dtype=np.float64).ravel()
    bounds = bounds[np.isfinite(bounds)]
    if bounds.size == 0:
        return np.nan, np.nan
    return float(bounds.min()), float(bounds.max())
