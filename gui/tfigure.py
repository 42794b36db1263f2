# gui/tfigure.py

import logging
import tkinter as tk
from tkinter import ttk, filedialog
from typing import Dict, Optional, Tuple, Union

from export.slides import export_presentation, require_pptx
from gui.frames.tab import TabView
from model.document import PlotDocument
from model.layout import tab_layout
from model.plots import DEFAULT_LABEL, PlotButton, PlotRoutine
from model.tabs import Tab
from utils.config import Settings, load_settings
import gui.handlers as handlers

log = logging.getLogger(__name__)


class TFigure:
    """
    A window holding tabbed groups of plots.

    Each tab lists its plots as buttons on the left; selecting one runs its
    plotting routine on the tab's drawing surface.

    Example
    -------
    >>> tfig = TFigure()
    >>> tfig.add_plot("Sensors", lambda: current_axes().plot([1, 2, 3]), "Temp")
    """

    def __init__(self, title_tab1: Optional[str] = None, *, name: str = "",
                 settings: Optional[Settings] = None, master=None):
        self.settings = settings or load_settings()
        self.document = PlotDocument(name)
        self.views: Dict[Tab, TabView] = {}

        # Window starts hidden until the first tab and the menu exist
        self.window = tk.Toplevel(master) if master is not None else tk.Tk()
        self.window.withdraw()
        self.window.title(name or f"Figure {self.document.number}")
        self.window.geometry(f"{self.settings.width}x{self.settings.height}")

        self.notebook = ttk.Notebook(self.window)
        self.notebook.pack(fill="both", expand=True)

        self.document.listen("tab_added",  self._on_tab_added)
        self.document.listen("plot_added", self._on_plot_added)
        self.add_tab(title_tab1)

        self.menu = tk.Menu(self.window)
        tfig_menu = tk.Menu(self.menu, tearoff=0)
        tfig_menu.add_command(label="Export PPT", command=lambda: handlers.export_ppt(self))
        self.menu.add_cascade(label="Tfigure", menu=tfig_menu)
        self.window.config(menu=self.menu)

        self.window.bind("<Configure>", self._on_configure)
        self.window.deiconify()
        log.debug("Created %s", self.window.title())

    # ——— properties ——————————————————————————————————————————————————
    @property
    def tabs(self):
        return self.document.tabs

    @property
    def name(self) -> str:
        return self.document.name

    @property
    def figure_size(self) -> Tuple[int, int]:
        """Current (width, height) of the window in pixels."""
        self.window.update_idletasks()
        width, height = self.window.winfo_width(), self.window.winfo_height()
        if width <= 1 or height <= 1:
            # not mapped yet
            return self.settings.width, self.settings.height
        return width, height

    # ——— tabs and plots ——————————————————————————————————————————————
    def add_tab(self, title: Optional[str] = None) -> Tab:
        return self.document.add_tab(title)

    def add_summary(self) -> Tab:
        return self.document.add_summary()

    def add_plot(self, tab: Union[Tab, str], routine: PlotRoutine,
                 label: str = DEFAULT_LABEL) -> PlotButton:
        return self.document.add_plot(tab, routine, label)

    def add_table(self, *args, **kwargs):
        return self.document.add_table(*args, **kwargs)

    def _on_tab_added(self, tab: Tab, index: int):
        view = TabView(self.notebook, tab)
        if index >= len(self.notebook.tabs()):
            self.notebook.add(view, text=tab.title)
        else:
            self.notebook.insert(index, view, text=tab.title)
        self.views[tab] = view
        view.apply_layout(tab_layout(*self.figure_size, len(tab.plots)))

    def _on_plot_added(self, tab: Tab, button: PlotButton):
        self.views[tab].add_button(button)

    # ——— resize ——————————————————————————————————————————————————————
    def _on_configure(self, event):
        # <Configure> also reaches the root binding from every child widget
        if event.widget is self.window:
            self.resize()

    def resize(self):
        """Re-place the plot list, surface and buttons of every tab."""
        width, height = self.figure_size
        for tab in self.document.tabs:
            self.views[tab].apply_layout(tab_layout(width, height, len(tab.plots)))

    # ——— export ——————————————————————————————————————————————————————
    def save_ppt(self, file_name=None, *, title: Optional[str] = None, author: str = "",
                 subject: str = "", comments: str = ""):
        """
        Save every plot to a PowerPoint presentation.

        Without `file_name` the user is asked for one; cancelling returns
        None and writes nothing.
        """
        require_pptx()
        if not file_name:
            file_name = filedialog.asksaveasfilename(
                parent=self.window,
                title="Export PPTX: select a file name",
                defaultextension=".pptx",
                filetypes=[("PowerPoint", "*.pptx")],
                initialdir=str(self.settings.export_dir),
            )
            if not file_name:
                log.info("Export cancelled")
                return None

        return export_presentation(
            self.document, file_name, self.figure_size,
            title=title, author=author, subject=subject, comments=comments,
            dpi=self.settings.dpi,
        )

    # ——— window ——————————————————————————————————————————————————————
    def mainloop(self):
        self.window.mainloop()

    def close(self):
        self.window.destroy()
