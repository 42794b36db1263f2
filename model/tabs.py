# model/tabs.py

from typing import Iterator, List, Optional

from matplotlib.figure import Figure

from model.plots import PlotButtonList
from utils.errors import InvalidArgumentError

SUMMARY_TITLE = "Summary"


class Tab:
    """A titled group of plot buttons sharing one drawing surface."""

    def __init__(self, title: str, is_summary: bool = False):
        if not isinstance(title, str):
            raise InvalidArgumentError(f"tab title must be a string, got {type(title).__name__}")
        self.title = title
        self.is_summary = is_summary
        self.surface = Figure(facecolor="white")
        self.plots = PlotButtonList(self.surface)

    def __repr__(self):
        return f"Tab({self.title!r}, plots={len(self.plots)})"


class TabRegistry:
    """Ordered tabs; a summary tab is always kept at index 0."""

    def __init__(self):
        self._tabs: List[Tab] = []

    def __len__(self):
        return len(self._tabs)

    def __iter__(self) -> Iterator[Tab]:
        return iter(list(self._tabs))

    def __getitem__(self, index) -> Tab:
        return self._tabs[index]

    def __contains__(self, tab) -> bool:
        return any(t is tab for t in self._tabs)

    @property
    def titles(self) -> List[str]:
        return [t.title for t in self._tabs]

    def index(self, tab: Tab) -> int:
        for i, t in enumerate(self._tabs):
            if t is tab:
                return i
        raise InvalidArgumentError(f"{tab!r} is not registered")

    def append(self, tab: Tab) -> int:
        self._tabs.append(tab)
        return len(self._tabs) - 1

    def insert_front(self, tab: Tab) -> int:
        self._tabs.insert(0, tab)
        return 0

    def find(self, title: str) -> Optional[Tab]:
        for t in self._tabs:
            if t.title == title:
                return t
        return None

    @property
    def summary(self) -> Optional[Tab]:
        if self._tabs and self._tabs[0].is_summary:
            return self._tabs[0]
        return None

    @property
    def export_start(self) -> int:
        """Index of the first tab to export: the summary tab is skipped."""
        return 1 if self.summary is not None else 0
