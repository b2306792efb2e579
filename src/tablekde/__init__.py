"""
tablekde: kernel density estimation for tabular views
======================================================

Per-group, per-field 1-D density curves reshaped into plot-ready rows for
ridge, violin and density charts.

Primary API
-----------
    from tablekde import TableView, kde

    view = TableView(rows)
    kde(view, fields=['height', 'weight'], groupBy=['species'], step=0.5)
    view.rows   # one row per (species, field): {'species', 'key', 'y', 'size'}

    view.transform('kde', fields=['height'])     # by registered name
    out = estimate(rows, {'fields': ['height']}) # rows in, rows out

Kernels and bandwidths
----------------------
``method`` selects a kernel from ``KERNEL_METHODS`` (default ``'gaussian'``)
or takes a shape function ``u -> weight``.  ``bandwidth`` selects a rule from
``BANDWIDTH_METHODS`` (default ``'nrd'``), a callable ``column -> float``,
or a fixed positive number.
"""

from ._exceptions import ConfigError
from ._warnings import KDEWarning, KDEExtentWarning
from ._params import KDEParams, resolve_params
from .kernels import BUILTIN_KERNELS, KERNEL_METHODS, Kernel, get_kernel
from .bandwidth import BUILTIN_BANDWIDTHS, BANDWIDTH_METHODS, select_bandwidth
from .density import DensityCurve, kernel_density, estimate_density, sample_domain
from .transform import kernel_density_estimation, kde, estimate
from .registry import BUILTIN_TRANSFORMS, get_transform, register_transform
from .view import TableView

__version__ = '0.1.0'

__all__ = [
    # Transform
    'kernel_density_estimation',
    'kde',
    'estimate',
    'TableView',
    # Options
    'KDEParams',
    'resolve_params',
    # Errors and warnings
    'ConfigError',
    'KDEWarning',
    'KDEExtentWarning',
    # Kernels
    'BUILTIN_KERNELS',
    'KERNEL_METHODS',
    'Kernel',
    'get_kernel',
    # Bandwidths
    'BUILTIN_BANDWIDTHS',
    'BANDWIDTH_METHODS',
    'select_bandwidth',
    # Density
    'DensityCurve',
    'kernel_density',
    'estimate_density',
    'sample_domain',
    # Registry
    'BUILTIN_TRANSFORMS',
    'get_transform',
    'register_transform',
]
