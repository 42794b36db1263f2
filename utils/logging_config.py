# utils/logging_config.py

"""Console logging for the example launcher."""

import logging
import sys

FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level="INFO") -> logging.Logger:
    """
    Route all records at `level` and above to stderr.

    Calling it again replaces the handler instead of adding a second one.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)

    # matplotlib is chatty at DEBUG (font manager)
    logging.getLogger("matplotlib").setLevel(max(level, logging.WARNING))
    return root
