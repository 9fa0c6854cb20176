"""Pytest configuration for repository-relative imports."""

import logging
import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_values(tmp_path):
    def _write(name, values):
        path = tmp_path / name
        path.write_text("".join(f"{v}\n" for v in values))
        return str(path)

    return _write
