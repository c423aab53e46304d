import logging
import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import esb_fireplace without installing
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

PT2_RETURN = "2"


class CountingSolver:
    """Solver double that records every call it receives."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = []

    def __call__(self, input_data, args):
        self.calls.append((input_data, list(args)))
        return self.fn(input_data, args)


@pytest.fixture
def solve_pt1():
    """Joins the args, or falls back to the trimmed input."""
    return CountingSolver(lambda data, args: " ".join(args) if args else data.strip())


@pytest.fixture
def solve_pt2():
    """Always answers PT2_RETURN."""
    return CountingSolver(lambda data, args: PT2_RETURN)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ESB_FIREPLACE_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("ESB_FIREPLACE_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo configure_logging() so caplog sees esb_fireplace records again."""
    yield
    logger = logging.getLogger("esb_fireplace")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
