# model/plots.py

import inspect
import logging
from typing import Callable, Iterator, List, Optional, Protocol

from matplotlib.figure import Figure

from model.surface import use_surface
from utils.errors import InvalidArgumentError

log = logging.getLogger(__name__)

DEFAULT_LABEL = "plot"


class PlotRoutine(Protocol):
    """A plotting procedure: no arguments, draws into current_axes()."""

    def __call__(self) -> None: ...


def validate_routine(routine) -> PlotRoutine:
    """
    Check that `routine` can be called with no arguments.

    Raises
    ------
    InvalidArgumentError
        If it is not callable or requires positional/keyword arguments.
    """
    if not callable(routine):
        raise InvalidArgumentError(
            f"plot routine must be callable, got {type(routine).__name__}"
        )
    try:
        sig = inspect.signature(routine)
    except (TypeError, ValueError):
        # some builtins and C callables carry no signature
        return routine
    try:
        sig.bind()
    except TypeError:
        raise InvalidArgumentError(
            f"plot routine {getattr(routine, '__name__', routine)!r} must take "
            f"no arguments, signature is {sig}"
        )
    return routine


def validate_label(label) -> str:
    if not isinstance(label, str):
        raise InvalidArgumentError(f"plot label must be a string, got {type(label).__name__}")
    return label


class PlotButton:
    """A selectable entry bound to one plot routine."""

    def __init__(self, label: str, routine: PlotRoutine):
        self.label = label
        self.routine = routine
        self.selected = False
        self.failed = False   # last draw raised

    def __repr__(self):
        state = ", selected" if self.selected else ""
        return f"PlotButton({self.label!r}{state})"


class PlotButtonList:
    """
    Ordered plot buttons of one tab with single selection.

    Selecting a button clears `surface`, makes it the current drawing
    surface and runs the button's routine. Listeners registered with
    `on_drawn` are called afterwards with the button, also when the
    routine raised.
    """

    def __init__(self, surface: Figure):
        self.surface = surface
        self._buttons: List[PlotButton] = []
        self._listeners: List[Callable[[PlotButton], None]] = []

    def __len__(self):
        return len(self._buttons)

    def __iter__(self) -> Iterator[PlotButton]:
        return iter(list(self._buttons))

    def __getitem__(self, index) -> PlotButton:
        return self._buttons[index]

    def __contains__(self, button) -> bool:
        return any(b is button for b in self._buttons)

    def index(self, button: PlotButton) -> int:
        for i, b in enumerate(self._buttons):
            if b is button:
                return i
        raise InvalidArgumentError(f"{button!r} does not belong to this plot list")

    @property
    def labels(self) -> List[str]:
        return [b.label for b in self._buttons]

    @property
    def selected(self) -> Optional[PlotButton]:
        for b in self._buttons:
            if b.selected:
                return b
        return None

    def on_drawn(self, callback: Callable[[PlotButton], None]) -> None:
        self._listeners.append(callback)

    def add(self, routine: PlotRoutine, label: str = DEFAULT_LABEL) -> PlotButton:
        """Append a new, unselected button. The routine is validated first."""
        validate_routine(routine)
        validate_label(label)
        button = PlotButton(label, routine)
        self._buttons.append(button)
        return button

    def select(self, button: PlotButton) -> None:
        """Make `button` the only selected one and draw its plot."""
        self.index(button)
        for b in self._buttons:
            b.selected = b is button
        self._draw(button)

    def _draw(self, button: PlotButton) -> None:
        routine = button.routine
        if not callable(routine):
            log.warning("Skipping %r: bound routine is not callable", button)
            return

        self.surface.clear()
        button.failed = True
        try:
            with use_surface(self.surface):
                routine()
            button.failed = False
            log.debug("Drew %r", button)
        finally:
            # views sync even when the routine raised
            for callback in list(self._listeners):
                callback(button)
