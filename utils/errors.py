# utils/errors.py


class TFigureError(Exception):
    """Base class for every error raised by tfigure."""


class InvalidArgumentError(TFigureError, ValueError):
    """A tab selector, title, label, routine or setting failed validation."""


class MissingDependencyError(TFigureError, ImportError):
    """
    An optional capability is not installed.

    Parameters
    ----------
    distribution : str
        Name of the package on the index, e.g. 'python-pptx'.
    purpose : str
        What the package is needed for.
    """

    def __init__(self, distribution: str, purpose: str = ""):
        self.distribution = distribution
        msg = f"{distribution} must be installed"
        if purpose:
            msg += f" to {purpose}"
        msg += f" (pip install {distribution})"
        super().__init__(msg)
