"""Feature selection, custom labels, colormap and curved lines.

Only three of the car columns get an axis. Lines are colored by ``age``, which
has no axis of its own, so the colorbar appears automatically. A control panel
next to the plot changes the options live.
"""

import sys
from dataclasses import dataclass

import numpy as np
from PySide6 import QtWidgets
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QSplitter, QWidget

from parallelplotqt import (
    Dataset,
    ParallelPlotControlWidget,
    ParallelPlotOptions,
    ParallelPlotWidget,
)


@dataclass
class Car:
    horsepower: int
    weight: int
    age: int
    consumption: float


def create_cars(n=60):
    """Create random cars; Dataset turns the records into columns."""
    rng = np.random.default_rng(10)
    cars = []
    for _ in range(n):
        hp = int(rng.integers(60, 300))
        weight = int(rng.integers(900, 2000))
        cars.append(
            Car(
                horsepower=hp,
                weight=weight,
                age=int(rng.integers(0, 25)),
                consumption=round(3.0 + hp / 40 + weight / 800 + rng.normal(0, 0.5), 1),
            )
        )
    return cars


class SelectionExample(QMainWindow):
    """Plot plus option controls."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Parallel Plot: Selection and Colors")
        self.resize(1200, 650)

        data = Dataset.from_records(create_cars())
        options = ParallelPlotOptions(
            title="Cars",
            feature_selection=["horsepower", "weight", "consumption"],
            feature_labels=["Horsepower", "Weight (kg)", "l/100km"],
            color_feature="age",
            colormap="plasma",
            curve=True,
        )

        widget = QWidget()
        self.setCentralWidget(widget)
        layout = QHBoxLayout(widget)
        splitter = QSplitter(Qt.Horizontal)

        self.plot = ParallelPlotWidget(data, options)
        self.controls = ParallelPlotControlWidget()
        self.controls.set_available_features(data.names)
        self.controls.set_options(options)
        self.controls.optionsChanged.connect(self._on_options_changed)

        splitter.addWidget(self.plot)
        splitter.addWidget(self.controls)
        splitter.setStretchFactor(0, 4)
        splitter.setStretchFactor(1, 1)
        layout.addWidget(splitter)

    def _on_options_changed(self, changes):
        try:
            self.plot.set_options(**changes)
        except ValueError as e:
            # the previous plot stays on screen
            self.statusBar().showMessage(str(e), 5000)


def main():
    """Run the selection example."""
    app = QtWidgets.QApplication(sys.argv)
    window = SelectionExample()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
