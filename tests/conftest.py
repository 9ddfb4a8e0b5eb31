"""Shared pytest fixtures.

The geometry core is plain Python + numpy and needs nothing here. Widget tests
use a real offscreen ``QApplication``; they are skipped when PySide6 or
pyqtgraph cannot be loaded on the test machine.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def person_columns():
    """Small person table with distinct, non-degenerate columns."""
    return {
        "height": [160, 170, 180],
        "weight": [60, 70, 80],
        "age": [20, 30, 40],
    }


@pytest.fixture
def car_columns():
    """Car table in the column order horsepower, weight, age."""
    return {
        "horsepower": [90, 150, 300, 120],
        "weight": [900, 1500, 2000, 1100],
        "age": [3, 10, 1, 7],
    }


@pytest.fixture(scope="session")
def qapp():
    """Session-wide offscreen QApplication."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    pytest.importorskip("pyqtgraph")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app
