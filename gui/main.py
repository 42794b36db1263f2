# gui/main.py

import argparse
import logging

import numpy as np

from model.surface import current_axes
from utils.config import load_settings
from utils.logging_config import setup_logging

log = logging.getLogger(__name__)


# ——— Example plots ——————————————————————————————————————————————————
def plot_sine():
    x = np.linspace(0, 2 * np.pi, 200)
    ax = current_axes()
    ax.plot(x, np.sin(x), linewidth=1)
    ax.set_title("Sine")
    ax.set_xlabel("x")
    ax.set_ylabel("sin(x)")


def plot_cosine():
    x = np.linspace(0, 2 * np.pi, 200)
    ax = current_axes()
    ax.plot(x, np.cos(x), linewidth=1, color="tab:orange")
    ax.set_title("Cosine")
    ax.set_xlabel("x")
    ax.set_ylabel("cos(x)")


def plot_scatter():
    rng = np.random.default_rng(0)
    x = rng.normal(size=300)
    y = 0.5 * x + rng.normal(scale=0.5, size=300)
    ax = current_axes()
    ax.scatter(x, y, s=12, edgecolors="k", linewidths=0.3)
    ax.set_title("Noisy linear relation")


def plot_histogram():
    rng = np.random.default_rng(1)
    ax = current_axes()
    ax.hist(rng.normal(size=2000), bins=40)
    ax.set_title("Normal samples")


def build_example(fig):
    """
    Fill `fig` (a TFigure or a PlotDocument) with the example tabs:
    two datasets and a summary tab in front.
    """
    trig = fig.tabs[0]
    fig.add_plot(trig, plot_sine,   "Sine")
    fig.add_plot(trig, plot_cosine, "Cosine")

    # unknown title: the tab is created on the fly
    fig.add_plot("Random", plot_scatter,   "Scatter")
    fig.add_plot("Random", plot_histogram, "Histogram")

    fig.add_summary()
    return fig


def main(argv=None):
    parser = argparse.ArgumentParser(description="tfigure example")
    parser.add_argument("--export", metavar="FILE",
                        help="write the example deck to FILE without opening a window")
    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(settings.log_level)

    if args.export:
        from export.slides import export_presentation
        from model.document import PlotDocument

        doc = PlotDocument("tfigure example")
        doc.add_tab("Trig")
        build_example(doc)
        return export_presentation(doc, args.export, (settings.width, settings.height),
                                   dpi=settings.dpi)

    from gui.tfigure import TFigure

    app = TFigure("Trig", name="tfigure example", settings=settings)
    build_example(app)
    app.mainloop()


if __name__ == "__main__":
    main()
