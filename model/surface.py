# model/surface.py

"""Current drawing target for plot routines.

Plot routines take no arguments. While one runs, the figure it should draw
into sits on top of a stack kept here; routines reach it through
``current_axes()`` or ``current_surface()``.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from matplotlib.axes import Axes
from matplotlib.figure import Figure

_SURFACE_STACK: List[Figure] = []


def current_surface(required: bool = True) -> Optional[Figure]:
    """
    Return the active drawing surface.

    Parameters
    ----------
    required : bool
        Raise when no surface is active (default). When False, return None.

    Raises
    ------
    RuntimeError
        If `required` and no plot routine is running.
    """
    if not _SURFACE_STACK:
        if required:
            raise RuntimeError(
                "No active drawing surface. current_surface() is only "
                "available while a plot routine runs."
            )
        return None
    return _SURFACE_STACK[-1]


def current_axes() -> Axes:
    """Axes of the active surface, created on first use."""
    return current_surface().gca()


def _pop(figure: Figure) -> None:
    if _SURFACE_STACK and _SURFACE_STACK[-1] is figure:
        _SURFACE_STACK.pop()
        return
    for i in range(len(_SURFACE_STACK) - 1, -1, -1):
        if _SURFACE_STACK[i] is figure:
            del _SURFACE_STACK[i]
            break


@contextmanager
def use_surface(figure: Figure) -> Iterator[Figure]:
    """Make `figure` the current drawing surface inside the block."""
    _SURFACE_STACK.append(figure)
    try:
        yield figure
    finally:
        _pop(figure)
