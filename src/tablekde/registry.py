"""
Named transform registry.

Hosts select transforms by name string.  The KDE transform is registered
under a canonical long name and two short aliases, all bound to the same
callable::

    from tablekde import get_transform

    get_transform('kde')(view, fields=['v'])

Host code can add its own transforms with ``register_transform``; a transform
is any callable ``(view, options=None, **kwargs) -> None``.
"""

from __future__ import annotations

from typing import Callable

from .transform import kernel_density_estimation

BUILTIN_TRANSFORMS: dict = {
    'kernel-density-estimation': kernel_density_estimation,
    'kde': kernel_density_estimation,
    'KDE': kernel_density_estimation,
}


def register_transform(name: str, transform: Callable) -> None:
    """Register ``transform`` under ``name``, replacing any previous entry."""
    if not callable(transform):
        raise TypeError(f"transform {name!r} must be callable")
    BUILTIN_TRANSFORMS[name] = transform


def get_transform(name: str) -> Callable:
    """
    Return a registered transform by name.

    Raises
    ------
    ValueError
        If ``name`` is not registered.
    """
    if name not in BUILTIN_TRANSFORMS:
        raise ValueError(
            f"Unknown transform: {name!r}. "
            f"Available: {sorted(BUILTIN_TRANSFORMS)}"
        )
    return BUILTIN_TRANSFORMS[name]
