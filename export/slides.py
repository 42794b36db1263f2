# export/slides.py

"""Export every plot of a tabbed figure to a PowerPoint deck."""

import io
import logging
from pathlib import Path
from typing import Optional, Tuple

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from model.document import PlotDocument
from model.plots import PlotButton
from model.surface import use_surface
from utils.config import Settings
from utils.errors import InvalidArgumentError, MissingDependencyError

log = logging.getLogger(__name__)

# 16:9, 13.333 x 7.5 in
SLIDE_WIDTH_EMU  = 12192000
SLIDE_HEIGHT_EMU = 6858000
HEADING_PT = 48
BLANK_LAYOUT = 6


def require_pptx():
    """Import python-pptx or raise MissingDependencyError."""
    try:
        import pptx
    except ImportError as exc:
        raise MissingDependencyError("python-pptx", "export slides") from exc
    return pptx


def fit_inside(img_w: int, img_h: int, box_w: int, box_h: int) -> Tuple[int, int, int, int]:
    """
    Largest (left, top, width, height) with the image's aspect ratio that
    fits centered in a box_w x box_h box.
    """
    if img_w <= 0 or img_h <= 0:
        raise ValueError(f"image size must be positive, got {img_w}x{img_h}")
    scale = min(box_w / img_w, box_h / img_h)
    width, height = int(img_w * scale), int(img_h * scale)
    return (box_w - width) // 2, (box_h - height) // 2, width, height


def render_png(button: PlotButton, size: Tuple[int, int], dpi: int) -> Tuple[bytes, int, int]:
    """
    Run the button's routine on a fresh offscreen figure and return the
    PNG bytes with their pixel size. The figure is released afterwards.
    """
    width, height = size
    fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi, facecolor="white")
    canvas = FigureCanvasAgg(fig)
    try:
        with use_surface(fig):
            button.routine()
        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=dpi, facecolor="white")
        px_w, px_h = canvas.get_width_height()
        return buf.getvalue(), px_w, px_h
    finally:
        fig.clear()


def _add_heading_slide(prs, text: str):
    from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
    from pptx.util import Pt

    slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT])
    box = slide.shapes.add_textbox(0, 0, prs.slide_width, prs.slide_height)
    frame = box.text_frame
    frame.word_wrap = True
    frame.vertical_anchor = MSO_ANCHOR.MIDDLE
    para = frame.paragraphs[0]
    para.alignment = PP_ALIGN.CENTER
    run = para.add_run()
    run.text = text
    run.font.size = Pt(HEADING_PT)
    return slide


def _add_picture_slide(prs, png: bytes, px_w: int, px_h: int):
    slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT])
    left, top, width, height = fit_inside(px_w, px_h, prs.slide_width, prs.slide_height)
    slide.shapes.add_picture(io.BytesIO(png), left, top, width=width, height=height)
    return slide


def export_presentation(
    document: PlotDocument,
    file_name,
    size: Optional[Tuple[int, int]] = None,
    *,
    title: Optional[str] = None,
    author: str = "",
    subject: str = "",
    comments: str = "",
    dpi: Optional[int] = None,
) -> Path:
    """
    Write all plots of `document` to a .pptx file.

    Slides: a title slide, then for each tab (the summary tab excluded) a
    section slide with the tab title followed by one picture slide per plot
    button, in list order.

    Parameters
    ----------
    document : PlotDocument
        Tabs to export.
    file_name : str or Path
        Destination file.
    size : (int, int), optional
        Offscreen figure size in pixels, normally the window size.
    title, author, subject, comments : str
        Deck metadata. `title` defaults to the window name, or
        'Figure N Data'.
    dpi : int, optional
        Rendering resolution.

    Returns
    -------
    Path
        The file written.

    Raises
    ------
    MissingDependencyError
        If python-pptx is not installed. Nothing is rendered or written.
    InvalidArgumentError
        If `file_name` is empty or `size` is not positive.
    """
    pptx = require_pptx()

    if not file_name or not str(file_name).strip():
        raise InvalidArgumentError("file_name is required to export slides")
    defaults = Settings()
    size = size or (defaults.width, defaults.height)
    dpi = dpi or defaults.dpi
    if len(size) != 2 or min(size) <= 0:
        raise InvalidArgumentError(f"size must be two positive pixel counts, got {size!r}")

    path = Path(file_name).expanduser()
    deck_title = title if title else document.title_for_export()
    log.info("Exporting %r to %s", deck_title, path)

    # 1) new deck with metadata
    prs = pptx.Presentation()
    prs.slide_width  = SLIDE_WIDTH_EMU
    prs.slide_height = SLIDE_HEIGHT_EMU
    props = prs.core_properties
    props.title    = deck_title
    props.author   = author
    props.subject  = subject
    props.comments = comments

    # 2) title slide
    _add_heading_slide(prs, deck_title)

    # 3) one section per tab, one picture per plot
    n_pictures = 0
    for tab in document.tabs[document.tabs.export_start:]:
        _add_heading_slide(prs, tab.title)
        for button in tab.plots:
            png, px_w, px_h = render_png(button, size, dpi)
            _add_picture_slide(prs, png, px_w, px_h)
            n_pictures += 1

    # 4) persist
    prs.save(str(path))
    log.info("Wrote %d plot slides to %s", n_pictures, path)
    return path
