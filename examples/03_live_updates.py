"""Live updates: the plot redraws whenever its data changes.

A QTimer appends a new random sample every 500 ms and keeps the newest 30
rows. Each ``set_data`` call rebuilds the whole scene; the ``rendered`` signal
reports how many rows were drawn.
"""

import sys

import numpy as np
from PySide6 import QtCore, QtWidgets

from parallelplotqt import ParallelPlotOptions, ParallelPlotWidget

MAX_ROWS = 30


class LiveFeed(QtCore.QObject):
    """Produces a growing table of sensor readings."""

    def __init__(self, plot, parent=None):
        super().__init__(parent)
        self._plot = plot
        self._rng = np.random.default_rng(3)
        self._rows = []
        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self._tick)

    def start(self, interval_ms=500):
        for _ in range(5):
            self._rows.append(self._sample())
        self._plot.set_data(self._rows)
        self._timer.start(interval_ms)

    def _sample(self):
        temperature = float(self._rng.normal(21.0, 2.0))
        return {
            "temperature": round(temperature, 2),
            "humidity": round(float(self._rng.uniform(30, 70)), 1),
            "pressure": round(float(self._rng.normal(1013, 5)), 1),
            "power": round(temperature * 12 + float(self._rng.normal(0, 10)), 1),
        }

    def _tick(self):
        self._rows.append(self._sample())
        self._rows = self._rows[-MAX_ROWS:]
        self._plot.set_data(self._rows)


def main():
    """Run the live update example."""
    app = QtWidgets.QApplication(sys.argv)

    plot = ParallelPlotWidget(
        options=ParallelPlotOptions(title="Sensors", curve=True, colormap="inferno"),
    )
    plot.resize(900, 600)
    plot.rendered.connect(
        lambda geometry: plot.setWindowTitle(
            f"Parallel Plot: Live Updates ({len(geometry.polylines)} rows)"
        )
    )
    plot.show()

    feed = LiveFeed(plot)
    feed.start()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
