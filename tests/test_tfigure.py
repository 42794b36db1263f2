import sys

import pytest

try:
    import tkinter as tk
except ImportError:
    tk = None

from model.surface import current_axes
from utils.config import Settings
from utils.errors import MissingDependencyError


@pytest.fixture
def tfig(tmp_path):
    if tk is None:
        pytest.skip("tkinter not available")
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()

    from gui.tfigure import TFigure

    fig = TFigure(master=root, settings=Settings(width=640, height=480, export_dir=tmp_path))
    yield fig
    root.destroy()


def line():
    current_axes().plot([0, 1], [0, 1])


def test_starts_with_one_tab(tfig):
    assert tfig.tabs.titles == ["dataset 1"]
    assert len(tfig.notebook.tabs()) == 1
    assert tfig.window.title() == f"Figure {tfig.document.number}"


def test_initial_tab_title(tfig):
    from gui.tfigure import TFigure

    other = TFigure("Trig", name="named", master=tfig.window)
    assert other.tabs.titles == ["Trig"]
    assert other.window.title() == "named"


def test_add_plot_creates_selected_button(tfig, rec):
    tfig.add_tab("Sensors")
    f = rec.make("temp")
    button = tfig.add_plot("Sensors", f, "Temp")
    tab = tfig.tabs.find("Sensors")
    view = tfig.views[tab]
    assert [w.cget("text") for w in view.buttons] == ["Temp"]
    assert view.choice.get() == 0
    assert button.selected
    assert rec.calls == ["temp"]


def test_clicking_a_button_selects_it_once(tfig, rec):
    tab = tfig.tabs[0]
    a = tfig.add_plot(tab, rec.make("a"), "a")
    tfig.add_plot(tab, rec.make("b"), "b")
    view = tfig.views[tab]

    view.buttons[0].invoke()
    assert tab.plots.selected is a
    assert view.choice.get() == 0
    # already selected: no redraw
    view.buttons[0].invoke()
    assert rec.calls == ["a", "b", "a"]


def test_auto_created_tab_gets_a_view(tfig):
    tfig.add_plot("NewTab", line)
    assert tfig.tabs.titles == ["dataset 1", "NewTab"]
    assert len(tfig.notebook.tabs()) == 2


def test_summary_tab_first_in_notebook(tfig):
    tfig.add_tab()
    summary = tfig.add_summary()
    assert tfig.tabs.titles == ["Summary", "dataset 1", "dataset 2"]
    assert tfig.notebook.tabs()[0] == str(tfig.views[summary])


def test_resize_is_idempotent(tfig):
    tab = tfig.tabs[0]
    tfig.add_plot(tab, line, "one")
    tfig.add_plot(tab, line, "two")
    view = tfig.views[tab]

    def geometry():
        widgets = [view.plot_list, view.canvas.get_tk_widget()] + view.buttons
        return [w.place_info() for w in widgets]

    tfig.resize()
    first = geometry()
    tfig.resize()
    assert geometry() == first
    assert first[3]["y"] == "50"


def test_save_ppt_to_file(tfig, tmp_path):
    pptx = pytest.importorskip("pptx")
    tfig.add_plot(tfig.tabs[0], line, "line")
    out = tfig.save_ppt(tmp_path / "out.pptx", author="Ada")
    prs = pptx.Presentation(str(out))
    assert len(prs.slides) == 3
    assert prs.core_properties.author == "Ada"


def test_save_ppt_prompt_cancelled(tfig, monkeypatch):
    pytest.importorskip("pptx")
    import gui.tfigure

    asked = {}

    def fake_dialog(**kwargs):
        asked.update(kwargs)
        return ""

    monkeypatch.setattr(gui.tfigure.filedialog, "asksaveasfilename", fake_dialog)
    assert tfig.save_ppt() is None
    assert asked["initialdir"] == str(tfig.settings.export_dir)


def test_menu_export_reports_missing_pptx(tfig, monkeypatch):
    import gui.handlers as handlers

    errors = []
    monkeypatch.setitem(sys.modules, "pptx", None)
    monkeypatch.setattr(handlers.messagebox, "showerror",
                        lambda title, msg, **kw: errors.append((title, msg)))
    assert handlers.export_ppt(tfig) is None
    assert errors and "python-pptx" in errors[0][1]

    with pytest.raises(MissingDependencyError):
        tfig.save_ppt("x.pptx")


def test_failed_click_reports_syncs_and_retries(tfig, monkeypatch, rec):
    import gui.handlers as handlers

    errors = []
    monkeypatch.setattr(handlers.messagebox, "showerror",
                        lambda title, msg, **kw: errors.append((title, msg)))
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("no data yet")
        line()

    tab = tfig.tabs[0]
    tfig.add_plot(tab, rec.make("a"), "a")
    b = tab.plots.add(flaky, "b")
    tfig.views[tab].add_button(b)
    view = tfig.views[tab]

    view.buttons[1].invoke()
    assert errors and "no data yet" in errors[0][1]
    assert tab.plots.selected is b
    assert view.choice.get() == tab.plots.index(tab.plots.selected)

    view.buttons[1].invoke()
    assert len(attempts) == 2
    assert not b.failed
    assert len(errors) == 1
