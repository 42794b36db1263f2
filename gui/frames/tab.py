# gui/frames/tab.py

import tkinter as tk
from tkinter import ttk
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from model.layout import TabLayout, button_rect
from model.plots import PlotButton
from model.tabs import Tab
import gui.handlers as handlers


def _place(widget, rect):
    x, y, w, h = rect
    widget.place(x=x, y=y, width=w, height=h)


class TabView(ttk.Frame):
    """Plot list on the left, the tab's matplotlib surface on the right."""

    def __init__(self, master, tab: Tab):
        super().__init__(master)
        self.tab = tab

        # Radiobuttons sharing one variable: one selected at a time
        self.choice = tk.IntVar(value=-1)
        self.plot_list = ttk.LabelFrame(self, text="Plots")
        self.buttons = []

        self.canvas = FigureCanvasTkAgg(tab.surface, master=self)

        for button in tab.plots:
            self.add_button(button)
        tab.plots.on_drawn(self._on_drawn)

    def add_button(self, button: PlotButton) -> ttk.Radiobutton:
        index = len(self.buttons)
        widget = ttk.Radiobutton(
            self.plot_list,
            text=button.label,
            value=index,
            variable=self.choice,
            style="Toolbutton",
            command=lambda b=button: handlers.select_plot(self, b),
        )
        _place(widget, button_rect(index))
        self.buttons.append(widget)
        return widget

    def apply_layout(self, layout: TabLayout):
        _place(self.plot_list, layout.plot_list)
        _place(self.canvas.get_tk_widget(), layout.surface)
        for widget, rect in zip(self.buttons, layout.buttons):
            _place(widget, rect)

    def _on_drawn(self, button: PlotButton):
        self.choice.set(self.tab.plots.index(button))
        self.canvas.draw_idle()
