"""
tablekde warning class hierarchy.

All tablekde-specific warnings inherit from ``KDEWarning`` so callers can
suppress the entire family with a single filter::

    import warnings
    from tablekde import KDEWarning
    warnings.filterwarnings('ignore', category=KDEWarning)

Individual sub-classes can also be targeted::

    from tablekde import KDEExtentWarning
    warnings.filterwarnings('ignore', category=KDEExtentWarning)
"""

import sys


class KDEWarning(UserWarning):
    """Base class for all tablekde warnings."""


class KDEExtentWarning(KDEWarning):
    """
    Warning emitted when an explicit extent is reversed (``min > max``).
    The sampling domain is empty, so every output row has empty ``y`` and
    ``size`` sequences.
    """


def _is_internal(module: str) -> bool:
    return module == 'tablekde' or module.startswith('tablekde.')


def external_stacklevel() -> int:
    """
    ``stacklevel`` that points a warning at the first caller outside tablekde.

    Call it from the function that issues the warning; the count starts at
    that function's frame.
    """
    frame = sys._getframe(1)
    level = 1
    while frame is not None and _is_internal(frame.f_globals.get('__name__', '')):
        frame = frame.f_back
        level += 1
    return level
