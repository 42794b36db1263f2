# gui/handlers.py

import logging
from tkinter import messagebox

from utils.errors import MissingDependencyError

log = logging.getLogger(__name__)


# ——— Plot buttons ———————————————————————————————————————————————————
def select_plot(view, button):
    """
    Button click in a tab's plot list.
    Clicking the already-selected button does not redraw, unless its
    last draw failed.
    """
    if button.selected and not button.failed:
        return
    try:
        view.tab.plots.select(button)
    except Exception as e:
        log.exception("Plot %r in tab %r failed", button.label, view.tab.title)
        messagebox.showerror("Plot Error", f"{button.label}: {e}", parent=view)


# ——— Menu: Export PPT ———————————————————————————————————————————————
def export_ppt(app):
    """
    'Tfigure > Export PPT'. Prompts for a file, then exports every plot.
    """
    try:
        path = app.save_ppt()
    except MissingDependencyError as e:
        log.error("Export unavailable: %s", e)
        messagebox.showerror("Export PPT", str(e), parent=app.window)
        return None
    except Exception as e:
        log.exception("Export failed")
        messagebox.showerror("Export Error", str(e), parent=app.window)
        return None

    if path is not None:
        messagebox.showinfo("Export PPT", f"Saved {path}", parent=app.window)
    return path
