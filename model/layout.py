# model/layout.py

from typing import List, NamedTuple, Tuple

Rect = Tuple[int, int, int, int]   # x, y, width, height (top-left origin)

# plot list on the left, surface fills the rest
LIST_X, LIST_TOP, LIST_WIDTH, LIST_MARGIN = 10, 35, 150, 45
SURFACE_X, SURFACE_TOP, SURFACE_RIGHT, SURFACE_MARGIN = 210, 60, 240, 110
BUTTON_X, BUTTON_TOP, BUTTON_WIDTH, BUTTON_HEIGHT, ROW_HEIGHT = 10, 20, 120, 20, 30


class TabLayout(NamedTuple):
    plot_list: Rect
    surface: Rect
    buttons: List[Rect]


def _span(size: int) -> int:
    return max(int(size), 1)


def plot_list_rect(width: int, height: int) -> Rect:
    """
    Button list region: fixed left margin and width, spans the window height.
    `width` is unused; it keeps the signature shared with surface_rect.
    """
    return (LIST_X, LIST_TOP, LIST_WIDTH, _span(height - LIST_MARGIN))


def surface_rect(width: int, height: int) -> Rect:
    """Drawing surface region: the space right of the plot list."""
    return (SURFACE_X, SURFACE_TOP,
            _span(width - SURFACE_RIGHT), _span(height - SURFACE_MARGIN))


def button_rect(index: int) -> Rect:
    """Position of the `index`-th plot button inside its list."""
    if index < 0:
        raise ValueError(f"button index must be >= 0, got {index}")
    return (BUTTON_X, BUTTON_TOP + ROW_HEIGHT * index, BUTTON_WIDTH, BUTTON_HEIGHT)


def tab_layout(width: int, height: int, n_buttons: int) -> TabLayout:
    """
    Geometry of one tab for a window of `width` x `height` pixels.

    Parameters
    ----------
    width, height : int
        Current window size in pixels.
    n_buttons : int
        Number of plot buttons in the tab.

    Returns
    -------
    TabLayout
        Rectangles for the plot list, the drawing surface and each button,
        buttons stacked in insertion order.
    """
    return TabLayout(
        plot_list=plot_list_rect(width, height),
        surface=surface_rect(width, height),
        buttons=[button_rect(i) for i in range(n_buttons)],
    )
