"""
Kernel shape functions for 1-D density estimation
=================================================

A kernel is a vectorised shape function ``K(u) -> weight`` evaluated on
bandwidth-scaled distances ``u = (x - s) / h``.  Every built-in kernel is
symmetric and integrates to 1.

Built-in kernels
----------------
uniform      : ``1/2`` on ``|u| <= 1``.
triangular   : ``1 - |u|`` on ``|u| <= 1``.
epanechnikov : ``(3/4)(1 - u²)`` on ``|u| <= 1``.
quartic      : ``(15/16)(1 - u²)²`` on ``|u| <= 1`` (biweight).
triweight    : ``(35/32)(1 - u²)³`` on ``|u| <= 1``.
tricube      : ``(70/81)(1 - |u|³)³`` on ``|u| <= 1``.
gaussian     : standard normal density, unbounded support (default).
cosine       : ``(π/4) cos(πu/2)`` on ``|u| <= 1``.

Custom kernels
--------------
Any callable taking an ndarray of scaled distances and returning an ndarray of
weights of the same shape can be passed as ``method=``::

    def biweight(u):
        return np.where(np.abs(u) <= 1, 15 / 16 * (1 - u ** 2) ** 2, 0.0)

    kde(view, fields=['v'], method=biweight)
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional, Union

import numpy as np

from ._exceptions import ConfigError

_INV_SQRT_2PI = 1.0 / np.sqrt(2.0 * np.pi)


def _support(u: np.ndarray) -> np.ndarray:
    return np.abs(u) <= 1.0


def uniform(u):
    u = np.asarray(u, dtype=float)
    return np.where(_support(u), 0.5, 0.0)


def triangular(u):
    u = np.asarray(u, dtype=float)
    return np.where(_support(u), 1.0 - np.abs(u), 0.0)


def epanechnikov(u):
    """Epanechnikov kernel ``(3/4)(1 - u²)``; optimal in the MISE sense."""
    u = np.asarray(u, dtype=float)
    return np.where(_support(u), 0.75 * (1.0 - u * u), 0.0)


def quartic(u):
    u = np.asarray(u, dtype=float)
    return np.where(_support(u), 15.0 / 16.0 * (1.0 - u * u) ** 2, 0.0)


def triweight(u):
    u = np.asarray(u, dtype=float)
    return np.where(_support(u), 35.0 / 32.0 * (1.0 - u * u) ** 3, 0.0)


def tricube(u):
    u = np.asarray(u, dtype=float)
    return np.where(_support(u), 70.0 / 81.0 * (1.0 - np.abs(u) ** 3) ** 3, 0.0)


def gaussian(u):
    """Standard normal density; the only built-in kernel with unbounded support."""
    u = np.asarray(u, dtype=float)
    return _INV_SQRT_2PI * np.exp(-0.5 * u * u)


def cosine(u):
    u = np.asarray(u, dtype=float)
    return np.where(_support(u), np.pi / 4.0 * np.cos(np.pi / 2.0 * u), 0.0)


# ---------------------------------------------------------------------------
# Registry and lookup
# ---------------------------------------------------------------------------

BUILTIN_KERNELS: dict = {
    'uniform': uniform,
    'triangular': triangular,
    'epanechnikov': epanechnikov,
    'quartic': quartic,
    'triweight': triweight,
    'tricube': tricube,
    'gaussian': gaussian,
    'cosine': cosine,
}

KERNEL_METHODS = tuple(BUILTIN_KERNELS)


class Kernel(NamedTuple):
    """
    A resolved kernel.

    ``name`` is the registry name for built-in kernels and ``None`` for a
    caller-supplied callable.
    """

    name: Optional[str]
    fn: Callable

    def __call__(self, u):
        return self.fn(u)


def get_kernel(name: str) -> Callable:
    """
    Return a built-in kernel shape function by name.

    Raises
    ------
    ConfigError
        If ``name`` is not a recognised kernel.
    """
    if name not in BUILTIN_KERNELS:
        raise ConfigError(
            f"invalid method: {name!r}. Must be one of {', '.join(KERNEL_METHODS)}"
        )
    return BUILTIN_KERNELS[name]


def resolve_kernel(method: Union[str, Callable, Kernel]) -> Kernel:
    """Resolve a kernel name or callable to a ``Kernel``."""
    if isinstance(method, Kernel):
        return method
    if isinstance(method, str):
        return Kernel(method, get_kernel(method))
    if not callable(method):
        raise ConfigError(
            f"invalid method: kernel method must be a name or a callable, "
            f"got {type(method).__name__}"
        )
    return Kernel(None, method)
