"""
1-D kernel density estimation on a sampled domain.

The estimate at ``x`` from samples ``s_1..s_n`` with kernel ``K`` and
bandwidth ``h`` is::

    f(x) = (1 / n) * sum_i K((x - s_i) / h) / h

``kernel_density`` builds ``f`` as a vectorised callable;
``estimate_density`` evaluates it over a domain produced by
``sample_domain`` and drops points below the density threshold.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple

import numpy as np

from ._preprocessing import finite_values

# Relative slack on the last domain point so that float drift in
# (hi - lo) / step does not drop ``hi`` itself.
_STEP_RTOL = 1e-9


@dataclass
class DensityCurve:
    """
    Sampled density of one field within one group.

    Attributes
    ----------
    domain : ndarray of float
        Strictly increasing domain points that passed the threshold.
    density : ndarray of float
        Density at each domain point, same length as ``domain``.
    """

    domain: np.ndarray
    density: np.ndarray

    def __len__(self):
        return len(self.domain)

    def to_lists(self) -> Tuple[List[float], List[float]]:
        return self.domain.tolist(), self.density.tolist()


def sample_domain(extent, step: float) -> np.ndarray:
    """
    Evenly spaced domain points ``lo, lo + step, ...`` up to ``hi`` inclusive.

    Parameters
    ----------
    extent : (lo, hi)
    step : float
        Positive stride.

    Returns
    -------
    points : ndarray of float
        First point is ``lo`` and the last is ``<= hi``.  A single point when
        ``lo == hi``; empty when the extent is reversed or not finite.
    """
    lo, hi = float(extent[0]), float(extent[1])
    if not (np.isfinite(lo) and np.isfinite(hi)) or lo > hi:
        return np.empty(0)
    if lo == hi:
        return np.array([lo])
    if not step > 0:
        raise ValueError(f"step must be positive, got {step!r}")

    n_steps = int(np.floor((hi - lo) / step * (1.0 + _STEP_RTOL)))
    points = lo + step * np.arange(n_steps + 1)
    # the tolerance may put the last point a hair above hi
    return np.minimum(points, hi)


def kernel_density(
    samples,
    kernel: Callable,
    bandwidth: float,
    chunk_size: int = 1024,
) -> Callable[[np.ndarray], np.ndarray]:
    """
    Build the density function of ``samples``.

    Parameters
    ----------
    samples : sequence of scalars
        Non-finite and non-numeric entries are ignored.
    kernel : callable
        Vectorised shape function ``u -> weight``.
    bandwidth : float
        Positive smoothing width.
    chunk_size : int, default 1024
        Evaluation points per block; bounds peak memory at
        ``chunk_size * n_samples`` floats.

    Returns
    -------
    density : callable
        Maps an array (or scalar) of points to densities of the same shape.
        With no usable samples the density is zero everywhere.
    """
    s = finite_values(samples)
    h = float(bandwidth)
    n = len(s)

    def density(x):
        x = np.asarray(x, dtype=np.float64)
        flat = x.ravel()
        out = np.zeros(flat.shape, dtype=np.float64)
        if n == 0:
            return out.reshape(x.shape)
        for start in range(0, len(flat), chunk_size):
            end = min(start + chunk_size, len(flat))
            u = (flat[start:end, None] - s[None, :]) / h
            out[start:end] = np.asarray(kernel(u), dtype=np.float64).sum(axis=1)
        out /= n * h
        return out.reshape(x.shape)

    return density


def estimate_density(
    values,
    domain: np.ndarray,
    kernel: Callable,
    bandwidth: float,
    min_size: float,
) -> DensityCurve:
    """
    Density of ``values`` over ``domain``, keeping points with density >= ``min_size``.

    Filtered points are removed, not zeroed, so the curve may be shorter than
    ``domain``.  With no usable values the curve is empty whatever the
    threshold.
    """
    domain = np.asarray(domain, dtype=np.float64)
    s = finite_values(values)
    if s.size == 0:
        return DensityCurve(np.empty(0), np.empty(0))
    sizes = kernel_density(s, kernel, bandwidth)(domain)
    keep = sizes >= min_size
    return DensityCurve(domain[keep], sizes[keep])
