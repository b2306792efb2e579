"""
Option container for the KDE transform.

``KDEParams`` holds the fully resolved configuration of one transform call.
It serves two purposes:

1. Validation: constructing a ``KDEParams`` raises ``ConfigError`` for any
   invalid option, before any data is touched::

       params = KDEParams(fields=['v'], step=0.5)

2. Reusable option sets, with per-call overrides::

       params = resolve_params({'fields': ['v'], 'groupBy': ['g']})
       kde(view, params, bandwidth=0.25)

Options may be given with the host's camelCase names (``minSize``,
``groupBy``, ``as``) or with the Python attribute names (``min_size``,
``group_by``, ``as_``).
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields as dataclass_fields, replace
from typing import Callable, Optional, Tuple, Union

import numpy as np

from ._exceptions import ConfigError
from .kernels import Kernel, resolve_kernel

_OPTION_ALIASES = {
    'as': 'as_',
    'minSize': 'min_size',
    'groupBy': 'group_by',
    'nJobs': 'n_jobs',
}

# Keys a host may pass along with the options that carry no configuration.
_IGNORED_OPTIONS = frozenset({'type'})


def _as_name_tuple(value, option: str) -> Tuple[str, ...]:
    if isinstance(value, np.ndarray):
        value = value.tolist()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigError(
            f"invalid {option}: must be a sequence of field names, got {value!r}"
        )
    return tuple(value)


@dataclass
class KDEParams:
    """
    Parameters for the KDE transform.

    Parameters
    ----------
    fields : sequence of str
        Fields to estimate a density for.  Required, at least one.
    as_ : sequence of 3 str, default ('key', 'y', 'size')
        Output field names: originating field name, sampled domain values,
        density values.
    extent : sequence of 2 float, default ()
        Sampling domain ``[min, max]``.  Empty means the union range of all
        ``fields`` in the data.
    method : str or callable, default 'gaussian'
        Kernel name from ``tablekde.kernels.BUILTIN_KERNELS`` or a kernel
        shape function ``u -> weight``.
    bandwidth : str, callable, or float, default 'nrd'
        Bandwidth rule name, callable ``column -> float``, or a fixed positive
        number.  Invalid values fall back to ``'nrd'`` at transform time.
    min_size : float, default 0.01
        Sampled points with density below this threshold are dropped.
    step : float, default 0
        Sampling stride over the domain.  ``0`` uses the resolved bandwidth.
    group_by : sequence of str, default ()
        Fields defining group identity.
    n_jobs : int, default 1
        Worker threads for the per group × field estimates.  ``-1`` uses all
        cores.
    """

    fields: Tuple[str, ...] = None
    as_: Tuple[str, ...] = ('key', 'y', 'size')
    extent: Tuple[float, ...] = ()
    method: Union[str, Callable] = 'gaussian'
    bandwidth: Union[str, Callable, float] = 'nrd'
    min_size: float = 0.01
    step: float = 0
    group_by: Tuple[str, ...] = ()
    n_jobs: int = 1
    kernel: Optional[Kernel] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.fields is None:
            raise ConfigError('invalid fields: must be an array of at least 1 strings!')
        self.fields = _as_name_tuple(self.fields, 'fields')
        if len(self.fields) < 1:
            raise ConfigError('invalid fields: must be an array of at least 1 strings!')

        self.as_ = _as_name_tuple(self.as_, 'as')
        if len(self.as_) != 3:
            raise ConfigError('invalid as: must be an array of 3 strings!')

        self.group_by = _as_name_tuple(self.group_by, 'groupBy')

        self.extent = _as_extent(self.extent)

        if not _is_finite(self.min_size) or self.min_size < 0:
            raise ConfigError(
                f"invalid minSize: must be a finite number >= 0, got {self.min_size!r}"
            )
        if self.step is None:
            self.step = 0
        if not _is_finite(self.step) or self.step < 0:
            raise ConfigError(
                f"invalid step: must be a finite number >= 0, got {self.step!r}"
            )
        if (
            not isinstance(self.n_jobs, numbers.Integral)
            or isinstance(self.n_jobs, bool)
            or self.n_jobs == 0
        ):
            raise ConfigError(
                f"invalid n_jobs: must be a non-zero integer, got {self.n_jobs!r}"
            )

        self.kernel = resolve_kernel(self.method)


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_finite(value) -> bool:
    return _is_number(value) and bool(np.isfinite(value))


def _as_extent(value) -> Tuple[float, ...]:
    if value is None:
        return ()
    if isinstance(value, np.ndarray):
        value = value.tolist()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigError(f"invalid extent: must be [min, max], got {value!r}")
    if len(value) == 0:
        return ()
    if len(value) != 2 or not all(_is_finite(v) for v in value):
        raise ConfigError(f"invalid extent: must be [min, max], got {value!r}")
    return (float(value[0]), float(value[1]))


_PARAM_NAMES = frozenset(f.name for f in dataclass_fields(KDEParams) if f.init)


def _normalise_options(options: Mapping) -> dict:
    out = {}
    for key, value in options.items():
        if key in _IGNORED_OPTIONS:
            continue
        name = _OPTION_ALIASES.get(key, key)
        if name == 'field':
            # single-field shorthand
            name = 'fields'
            value = [value] if isinstance(value, str) else value
        if name not in _PARAM_NAMES:
            raise ConfigError(f"unknown option: {key!r}")
        out[name] = value
    return out


def resolve_params(
    options: Union[Mapping, KDEParams, None] = None,
    **kwargs,
) -> KDEParams:
    """
    Merge caller options over the defaults and validate them.

    Parameters
    ----------
    options : mapping, KDEParams, or None
        Base options.  Keys may use host (camelCase) or Python names.
    **kwargs
        Per-call overrides, applied on top of ``options``.

    Returns
    -------
    params : KDEParams
        Resolved configuration with ``params.kernel`` set.

    Raises
    ------
    ConfigError
        On missing or empty ``fields``, ``as`` not of length 3, an unknown
        kernel name or non-callable ``method``, a negative or non-finite
        ``minSize`` or ``step``, a zero or non-integer ``n_jobs``, a
        malformed or non-finite ``extent``, or an unknown option key.
    """
    overrides = _normalise_options(kwargs)
    if isinstance(options, KDEParams):
        return replace(options, **overrides) if overrides else options
    if options is None:
        options = {}
    elif not isinstance(options, Mapping):
        raise ConfigError(
            f"options must be a mapping or KDEParams, got {type(options).__name__}"
        )
    merged = {**_normalise_options(options), **overrides}
    return KDEParams(**merged)
