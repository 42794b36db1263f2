import matplotlib

matplotlib.use("Agg")

import pytest

from model.document import PlotDocument


class Recorder:
    """Builds plot routines that record their name when called."""

    def __init__(self):
        self.calls = []

    def make(self, name):
        def routine():
            self.calls.append(name)
        return routine


@pytest.fixture
def doc():
    d = PlotDocument()
    d.add_tab()
    return d


@pytest.fixture
def rec():
    return Recorder()
