"""
The kernel density estimation transform.

Turns a table of records into one row per (group, field) holding a sampled
density curve::

    from tablekde import TableView, kde

    view = TableView([{'g': 'a', 'v': 1.0}, {'g': 'a', 'v': 2.5}, ...])
    kde(view, fields=['v'], groupBy=['g'], step=0.1)
    view.rows
    # [{'g': 'a', 'key': 'v', 'y': [...], 'size': [...]}, ...]

Pipeline
--------
1. Resolve and validate options (``ConfigError`` before any data is read).
2. Resolve the sampling extent, shared by every field.
3. Select the bandwidth from the first field's column.
4. Sample the domain with ``step`` (or the bandwidth when ``step`` is 0).
5. Partition rows by ``groupBy``; estimate every group × field curve.
6. Assemble output rows in group-then-field order and replace ``view.rows``.
"""

from __future__ import annotations

from typing import List, Mapping, Union

from ._params import KDEParams, resolve_params
from ._partitioning import iter_partitions, partition_rows
from .bandwidth import select_bandwidth
from .density import DensityCurve, estimate_density, sample_domain
from .extent import resolve_extent

# Below this many group × field tasks the joblib dispatch costs more than it saves.
_MIN_PAR = 6


def _estimate_curves(tasks, domain, params: KDEParams, bandwidth: float) -> List[DensityCurve]:
    args = [
        (values, domain, params.kernel, bandwidth, params.min_size)
        for values in tasks
    ]
    if params.n_jobs == 1 or len(args) < _MIN_PAR:
        return [estimate_density(*a) for a in args]

    from joblib import Parallel, delayed
    # prefer='threads': the numpy kernel evaluation releases the GIL.
    return Parallel(n_jobs=params.n_jobs, prefer='threads')(
        delayed(estimate_density)(*a) for a in args
    )


def _assemble_rows(view, params: KDEParams) -> List[dict]:
    fields = params.fields
    group_by = params.group_by
    key_as, y_as, size_as = params.as_

    extent = resolve_extent(view, fields, params.extent)
    bandwidth = select_bandwidth(view.getColumn(fields[0]), params.bandwidth)
    domain = sample_domain(extent, params.step or bandwidth)

    heads = []
    tasks = []
    for _, members in iter_partitions(partition_rows(view.rows, group_by)):
        first = members[0] if members else {}
        for field in fields:
            heads.append(({f: first.get(f) for f in group_by}, field))
            tasks.append([row.get(field) for row in members])

    curves = _estimate_curves(tasks, domain, params, bandwidth)

    result = []
    for (row, field), curve in zip(heads, curves):
        y, size = curve.to_lists()
        row[key_as] = field
        row[y_as] = y
        row[size_as] = size
        result.append(row)
    return result


def kernel_density_estimation(
    view,
    options: Union[Mapping, KDEParams, None] = None,
    **kwargs,
) -> None:
    """
    Replace ``view.rows`` with per-group, per-field density curves.

    Parameters
    ----------
    view : TableView-like
        Must expose ``rows`` (readable and assignable), ``getColumn(field)``
        and ``range(field)``.
    options : mapping or KDEParams, optional
        See ``KDEParams``.  Host option names (``minSize``, ``groupBy``,
        ``as``) are accepted.
    **kwargs
        Option overrides.

    Raises
    ------
    ConfigError
        On invalid options.  The view is left untouched.

    Notes
    -----
    Each output row holds the group's ``groupBy`` values plus ``as[0]`` (the
    field name), ``as[1]`` (domain points) and ``as[2]`` (densities, all
    ``>= minSize``).  The extent is shared by all fields and the bandwidth is
    computed from ``fields[0]`` only, then reused for every field.
    """
    params = resolve_params(options, **kwargs)
    view.rows = _assemble_rows(view, params)


kde = kernel_density_estimation


def estimate(
    rows,
    options: Union[Mapping, KDEParams, None] = None,
    **kwargs,
) -> List[dict]:
    """
    Run the transform on a plain sequence of rows and return the output rows.

    The input rows are not modified.
    """
    from .view import TableView

    params = resolve_params(options, **kwargs)
    return _assemble_rows(TableView(rows), params)

