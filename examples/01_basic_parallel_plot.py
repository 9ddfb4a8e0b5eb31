"""Basic example: a parallel coordinates plot of a small person table.

Every row becomes one line across the height, weight, age and income axes.
Lines are colored by the last column (income) with the default colormap.
"""

import sys

import numpy as np
from PySide6 import QtWidgets

from parallelplotqt import ParallelPlotOptions, ParallelPlotWidget


def create_person_data(n=40):
    """Create a random person table as a mapping of columns."""
    rng = np.random.default_rng(10)
    height = rng.integers(150, 190, n)
    return {
        "height": height.tolist(),
        "weight": (height * 0.45 + rng.normal(0, 6, n)).round(1).tolist(),
        "age": rng.integers(18, 70, n).tolist(),
        "income": rng.normal(45_000, 12_000, n).round(-2).tolist(),
    }


def main():
    """Run the basic example."""
    app = QtWidgets.QApplication(sys.argv)

    plot = ParallelPlotWidget(
        create_person_data(),
        ParallelPlotOptions(title="People"),
    )
    plot.setWindowTitle("Parallel Plot: Basic")
    plot.resize(900, 600)
    plot.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
