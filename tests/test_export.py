import sys

import pytest

from export.slides import export_presentation, fit_inside, render_png
from model.document import PlotDocument
from model.surface import current_axes
from utils.errors import InvalidArgumentError, MissingDependencyError


def line():
    current_axes().plot([0, 1, 2], [2, 0, 1])


def bars():
    current_axes().bar([1, 2, 3], [3, 1, 2])


def _texts(slide):
    return [s.text_frame.text for s in slide.shapes if s.has_text_frame]


def _pictures(slide):
    return [s for s in slide.shapes if s.shape_type == 13]  # MSO_SHAPE_TYPE.PICTURE


def test_fit_inside_keeps_aspect_and_centers():
    assert fit_inside(200, 100, 1000, 1000) == (0, 250, 1000, 500)
    assert fit_inside(100, 200, 1000, 1000) == (250, 0, 500, 1000)
    with pytest.raises(ValueError):
        fit_inside(0, 10, 100, 100)


def test_render_png_size(doc):
    button = doc.add_plot(doc.tabs[0], line, "line")
    png, w, h = render_png(button, (400, 300), dpi=100)
    assert png[:8] == b"\x89PNG\r\n\x1a\n"
    assert (w, h) == (400, 300)


def test_export_deck_structure(tmp_path):
    pptx = pytest.importorskip("pptx")

    d = PlotDocument("Lab results")
    d.add_tab("Sensors")
    d.add_plot("Sensors", line, "Temp")
    d.add_plot("Sensors", bars, "Humidity")
    d.add_plot("Motors", line, "Speed")
    d.add_summary()
    d.add_plot(d.tabs.summary, bars, "Overview")

    out = export_presentation(d, tmp_path / "deck.pptx", (640, 480),
                              author="Ada", subject="tests", comments="none")
    assert out.exists()

    prs = pptx.Presentation(str(out))
    slides = list(prs.slides)
    # title, Sensors, 2 plots, Motors, 1 plot; summary skipped
    assert len(slides) == 6
    assert _texts(slides[0]) == ["Lab results"]
    assert _texts(slides[1]) == ["Sensors"]
    assert len(_pictures(slides[2])) == 1
    assert len(_pictures(slides[3])) == 1
    assert _texts(slides[4]) == ["Motors"]
    assert len(_pictures(slides[5])) == 1

    props = prs.core_properties
    assert props.title == "Lab results"
    assert props.author == "Ada"
    assert props.subject == "tests"
    assert props.comments == "none"


def test_export_without_summary_starts_at_first_tab(tmp_path):
    pptx = pytest.importorskip("pptx")
    d = PlotDocument()
    d.add_tab()
    d.add_plot(d.tabs[0], line)
    out = export_presentation(d, tmp_path / "d.pptx", (320, 240))
    slides = list(pptx.Presentation(str(out)).slides)
    assert len(slides) == 3
    assert _texts(slides[0]) == [f"Figure {d.number} Data"]
    assert _texts(slides[1]) == ["dataset 1"]


def test_export_reruns_routines(tmp_path, rec):
    pytest.importorskip("pptx")
    d = PlotDocument()
    d.add_plot("a", rec.make("a1"))
    d.add_plot("a", rec.make("a2"))
    export_presentation(d, tmp_path / "x.pptx", (200, 200))
    assert rec.calls == ["a1", "a2", "a1", "a2"]


def test_explicit_title(tmp_path):
    pptx = pytest.importorskip("pptx")
    d = PlotDocument("ignored")
    out = export_presentation(d, tmp_path / "t.pptx", (200, 200), title="Quarterly")
    slides = list(pptx.Presentation(str(out)).slides)
    assert len(slides) == 1
    assert _texts(slides[0]) == ["Quarterly"]


def test_failing_routine_aborts_without_file(tmp_path):
    pytest.importorskip("pptx")
    d = PlotDocument()
    flaky = {"fail": False}

    def routine():
        if flaky["fail"]:
            raise RuntimeError("render failed")

    d.add_plot("a", routine)
    flaky["fail"] = True
    target = tmp_path / "broken.pptx"
    with pytest.raises(RuntimeError, match="render failed"):
        export_presentation(d, target, (200, 200))
    assert not target.exists()


def test_missing_pptx_raises_before_rendering(tmp_path, monkeypatch, rec):
    d = PlotDocument()
    d.add_plot("a", rec.make("a"))
    monkeypatch.setitem(sys.modules, "pptx", None)
    target = tmp_path / "never.pptx"
    with pytest.raises(MissingDependencyError, match="python-pptx") as info:
        export_presentation(d, target, (200, 200))
    assert info.value.distribution == "python-pptx"
    assert rec.calls == ["a"]
    assert not target.exists()


def test_file_name_required():
    pytest.importorskip("pptx")
    with pytest.raises(InvalidArgumentError):
        export_presentation(PlotDocument(), "", (200, 200))
    with pytest.raises(InvalidArgumentError):
        export_presentation(PlotDocument(), "x.pptx", (0, 200))
