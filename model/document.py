# model/document.py

import itertools
import logging
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Union

from model.plots import DEFAULT_LABEL, PlotButton, PlotRoutine, validate_label, validate_routine
from model.tabs import SUMMARY_TITLE, Tab, TabRegistry
from utils.errors import InvalidArgumentError

log = logging.getLogger(__name__)

EVENTS = ("tab_added", "plot_added")

_figure_numbers = itertools.count(1)


class PlotDocument:
    """
    Tabs and plot buttons of one tabbed figure, independent of any toolkit.

    Listeners
    ---------
    tab_added(tab, index)
        After a tab is inserted at `index` of the registry.
    plot_added(tab, button)
        After a button is appended, before it is selected.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self.number = next(_figure_numbers)
        self.tabs = TabRegistry()
        self._listeners: Dict[str, List[Callable]] = defaultdict(list)

    def listen(self, event: str, callback: Callable) -> None:
        if event not in EVENTS:
            raise InvalidArgumentError(f"unknown event {event!r}, expected one of {EVENTS}")
        self._listeners[event].append(callback)

    def _emit(self, event: str, *args) -> None:
        for callback in list(self._listeners[event]):
            callback(*args)

    # ——— tabs ————————————————————————————————————————————————————————
    def add_tab(self, title: Optional[str] = None) -> Tab:
        """Append a tab; the default title is 'dataset N'."""
        if title is None:
            title = f"dataset {len(self.tabs) + 1}"
        tab = Tab(title)
        index = self.tabs.append(tab)
        log.debug("Added tab %r at %d", title, index)
        self._emit("tab_added", tab, index)
        return tab

    def add_summary(self) -> Tab:
        """
        Insert the 'Summary' tab in front of all others.

        Only one summary tab exists; later calls return it unchanged.
        """
        existing = self.tabs.summary
        if existing is not None:
            return existing
        tab = Tab(SUMMARY_TITLE, is_summary=True)
        self.tabs.insert_front(tab)
        log.debug("Added summary tab")
        self._emit("tab_added", tab, 0)
        return tab

    def add_table(self, *args, **kwargs):
        raise NotImplementedError("tables are not supported yet")

    # ——— plots ———————————————————————————————————————————————————————
    def _resolve_tab(self, tab: Union[Tab, str]) -> Tab:
        if isinstance(tab, Tab):
            if tab not in self.tabs:
                raise InvalidArgumentError(f"{tab!r} does not belong to this figure")
            return tab
        if isinstance(tab, str):
            found = self.tabs.find(tab)
            return found if found is not None else self.add_tab(tab)
        raise InvalidArgumentError(
            f"tab must be a Tab or a title string, got {type(tab).__name__}"
        )

    def add_plot(self, tab: Union[Tab, str], routine: PlotRoutine,
                 label: str = DEFAULT_LABEL) -> PlotButton:
        """
        Add a plot button to `tab` and select it.

        Parameters
        ----------
        tab : Tab or str
            Target tab, or its title. An unknown title creates the tab.
        routine : callable
            Zero-argument plotting routine, run whenever the button is
            selected. It draws with model.surface.current_axes().
        label : str
            Button text.

        Returns
        -------
        PlotButton
            The new button, already selected.
        """
        validate_routine(routine)
        validate_label(label)
        target = self._resolve_tab(tab)

        button = target.plots.add(routine, label)
        log.debug("Added plot %r to tab %r", label, target.title)
        self._emit("plot_added", target, button)
        target.plots.select(button)
        return button

    def title_for_export(self) -> str:
        return self.name if self.name else f"Figure {self.number} Data"
