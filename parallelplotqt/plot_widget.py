"""Parallel coordinates plotting widget built on PyQtGraph.

Every data row is drawn as a polyline crossing one vertical axis per displayed
feature, colored through a colormap by a chosen color feature. Geometry comes
from ``parallelplotqt.pipeline.build_plot``; this module only draws it.

Key features:
  - Straight or cosine-curved lines between axes
  - Feature selection, custom axis labels and optional normalization
  - Colorbar shown automatically when the color feature has no axis
  - Live updates: changing data or options rebuilds the whole scene
  - Fail-fast updates: invalid input raises before the scene is touched

Typical usage:

    plot = ParallelPlotWidget()
    plot.set_data({"height": heights, "weight": weights, "age": ages})

    # Options can be changed at any time, the plot redraws itself
    plot.set_options(curve=True, color_feature="weight")

    # Or driven from a control panel
    controls = ParallelPlotControlWidget()
    controls.set_available_features(plot.data.names)
    controls.optionsChanged.connect(lambda changes: plot.set_options(**changes))

Google-style docstrings + PEP8.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFormLayout,
    QGroupBox,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from .colors import get_colormap, map_colors
from .data import Dataset
from .pipeline import build_plot
from .plot_models import (
    DEFAULT_CANVAS,
    AxisSpec,
    LegendMode,
    ParallelPlotGeometry,
    ParallelPlotOptions,
)

logger = logging.getLogger(__name__)

_UNSET = object()

AXIS_COLOR = "k"
TICK_LENGTH = 6.0  # scene units
TITLE_GAP = 8.0  # scene units between axis top and its label


class ParallelPlotWidget(QWidget):
    """Parallel coordinates plot with live data and option updates.

    Attributes:
        rendered: Signal emitted after each completed render with the
            ``ParallelPlotGeometry`` that was drawn.
        cleared: Signal emitted after ``clear_plot``.
    """

    rendered = Signal(object)
    cleared = Signal()

    def __init__(
        self,
        data: Any = None,
        options: Optional[ParallelPlotOptions] = None,
        parent: Optional[QWidget] = None,
        *,
        canvas: Tuple[float, float] = DEFAULT_CANVAS,
        line_width: float = 1.0,
    ) -> None:
        """Initialize the plot widget.

        Args:
            data: Initial data, see ``Dataset.coerce`` for accepted shapes.
            options: Initial plot options.
            parent: Parent widget.
            canvas: Size of the scene the plot is laid out in. The view is
                fixed to this rectangle and stretched to the widget size.
            line_width: Pen width of the data lines, in pixels.
        """
        super().__init__(parent)

        self._data: Any = None
        self._dataset: Optional[Dataset] = None
        self._options = options if options is not None else ParallelPlotOptions()
        self._geometry: Optional[ParallelPlotGeometry] = None
        self._canvas = (float(canvas[0]), float(canvas[1]))
        self._line_width = float(line_width)

        # Render serialization: updates arriving mid-render wait for it to finish
        self._rendering = False
        self._pending: Optional[Tuple[Any, ParallelPlotOptions]] = None

        # Scene items
        self._line_items: List[pg.PlotCurveItem] = []
        self._axis_items: List[pg.GraphicsObject] = []
        self._colorbar: Optional[pg.ColorBarItem] = None

        self._build_ui()

        if data is not None:
            self.set_data(data)

    def _build_ui(self) -> None:
        """Build the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.graphics = pg.GraphicsLayoutWidget()
        self.graphics.setBackground("w")
        layout.addWidget(self.graphics)

        self.plot_item = self.graphics.addPlot(row=0, col=0)
        self.plot_item.hideAxis("left")
        self.plot_item.hideAxis("bottom")
        self.plot_item.hideButtons()
        self.plot_item.setMenuEnabled(False)
        self.plot_item.setMouseEnabled(x=False, y=False)
        self._apply_view_range()

    def _apply_view_range(self) -> None:
        width, height = self._canvas
        self.plot_item.setXRange(0.0, width, padding=0)
        self.plot_item.setYRange(0.0, height, padding=0)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def data(self) -> Optional[Dataset]:
        """Currently plotted data as a ``Dataset`` (None before the first plot)."""
        return self._dataset

    @property
    def options(self) -> ParallelPlotOptions:
        return self._options

    @property
    def geometry(self) -> Optional[ParallelPlotGeometry]:
        """Geometry of the last completed render."""
        return self._geometry

    @property
    def canvas(self) -> Tuple[float, float]:
        return self._canvas

    @property
    def line_items(self) -> Tuple[pg.PlotCurveItem, ...]:
        return tuple(self._line_items)

    @property
    def colorbar(self) -> Optional[pg.ColorBarItem]:
        return self._colorbar

    def set_data(self, data: Any) -> None:
        """Plot new data with the current options.

        If a slot connected to ``rendered`` requests another update, that
        update runs before this call returns, and its errors are raised here.

        Raises:
            NullInputError: If ``data`` is None. Use ``clear_plot`` to empty
                the plot.
            ParallelPlotError: If the data is invalid for the current options.
                The previous plot is kept.
        """
        self._update(data=data)

    def set_options(
        self, options: Optional[ParallelPlotOptions] = None, **changes: Any
    ) -> None:
        """Replace the options, or change some of them, and redraw.

        Args:
            options: Complete new options. Defaults to the current ones.
            **changes: Individual options to change, e.g. ``curve=True``.

        Updates queued from a ``rendered`` slot run before this call returns,
        so their errors surface here as well.

        Raises:
            TypeError: If a change names an unknown option.
            ValueError: If the colormap is unknown, even before data is set.
            ParallelPlotError: If the options do not fit the current data.
        """
        new_options = options if options is not None else self._options
        if changes:
            new_options = new_options.with_changes(**changes)
        self._update(options=new_options)

    def redraw(self) -> None:
        """Rebuild the scene from the current data and options."""
        self._update()

    def clear_plot(self) -> None:
        """Remove everything from the plot and forget the data."""
        self._clear_scene()
        self._data = None
        self._dataset = None
        self._geometry = None
        self._pending = None
        self.cleared.emit()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _update(self, data: Any = _UNSET, options: Optional[ParallelPlotOptions] = None) -> None:
        if options is None:
            options = self._options

        if self._rendering:
            # Complete-then-redraw: only the latest request is kept
            logger.debug("Render in progress, queuing redraw")
            self._pending = (data, options)
            return

        if data is _UNSET:
            if self._data is None:
                # nothing to draw yet, but bad options still fail here
                get_colormap(options.colormap)
                self._options = options
                return
            data = self._data

        # Everything that can fail runs before the scene is cleared
        geometry = build_plot(data, options, self._canvas)
        cmap = get_colormap(geometry.config.colormap)

        self._data = data
        self._dataset = Dataset.coerce(data)
        self._options = options
        self._render(geometry, cmap)

        if self._pending is not None:
            data, options = self._pending
            self._pending = None
            self._update(data=data, options=options)

    def _render(self, geometry: ParallelPlotGeometry, cmap: pg.ColorMap) -> None:
        """Clear the scene and draw ``geometry``."""
        self._rendering = True
        try:
            self._clear_scene()
            config = geometry.config
            logger.debug(
                "Rendering %d rows over %d axes (%s lines)",
                len(geometry.polylines),
                config.feature_count,
                config.line_mode.value,
            )

            self.plot_item.setTitle(config.title or None)
            self._draw_lines(geometry, cmap)
            for axis in geometry.axes:
                self._draw_axis(axis)
            if config.show_legend:
                self._draw_colorbar(geometry, cmap)
            self._apply_view_range()

            self._geometry = geometry
            self.rendered.emit(geometry)
        finally:
            self._rendering = False

    def _clear_scene(self) -> None:
        self.plot_item.clear()
        self._line_items = []
        self._axis_items = []
        if self._colorbar is not None:
            self.graphics.removeItem(self._colorbar)
            self._colorbar = None

    def _draw_lines(self, geometry: ParallelPlotGeometry, cmap: pg.ColorMap) -> None:
        color_range = geometry.color_range
        colors = map_colors(cmap, geometry.color_values, color_range.min, color_range.max)
        for line, color in zip(geometry.polylines, colors):
            item = pg.PlotCurveItem(
                x=line.xs,
                y=line.ys,
                pen=pg.mkPen(color=color, width=self._line_width),
                antialias=True,
            )
            self.plot_item.addItem(item)
            self._line_items.append(item)

    def _draw_axis(self, axis: AxisSpec) -> None:
        """Spine, ticks, tick labels and title of one axis."""
        pen = pg.mkPen(color=AXIS_COLOR, width=1.5)
        spine = pg.PlotCurveItem(x=[axis.x, axis.x], y=[axis.bottom, axis.top], pen=pen)
        self.plot_item.addItem(spine)
        self._axis_items.append(spine)

        if axis.ticks:
            tick_y = np.repeat([y for y, _ in axis.ticks], 2)
            tick_x = np.tile([axis.x - TICK_LENGTH, axis.x], len(axis.ticks))
            ticks = pg.PlotCurveItem(x=tick_x, y=tick_y, pen=pen, connect="pairs")
            self.plot_item.addItem(ticks)
            self._axis_items.append(ticks)

        for y, text in axis.ticks:
            label = pg.TextItem(text, color=AXIS_COLOR, anchor=(1.0, 0.5))
            label.setPos(axis.x - TICK_LENGTH * 1.5, y)
            self.plot_item.addItem(label)
            self._axis_items.append(label)

        title = pg.TextItem(axis.label, color=AXIS_COLOR, anchor=(0.5, 1.0))
        title.setPos(axis.x, axis.top + TITLE_GAP)
        self.plot_item.addItem(title)
        self._axis_items.append(title)

    def _draw_colorbar(self, geometry: ParallelPlotGeometry, cmap: pg.ColorMap) -> None:
        color_range = geometry.color_range
        low, high = color_range.min, color_range.max
        if color_range.is_degenerate:
            low, high = low - 0.5, high + 0.5
        self._colorbar = pg.ColorBarItem(
            values=(low, high),
            colorMap=cmap,
            label=color_range.name,
            interactive=False,
        )
        self.graphics.addItem(self._colorbar, row=0, col=1)


class ParallelPlotControlWidget(QWidget):
    """Control panel for the options of a ``ParallelPlotWidget``.

    Emits only the options the user changed, so the panel can be wired
    straight to ``ParallelPlotWidget.set_options``.
    """

    optionsChanged = Signal(dict)

    _LEGEND_CHOICES = (
        ("Auto", LegendMode.AUTO),
        ("Show", LegendMode.SHOW),
        ("Hide", LegendMode.HIDE),
    )
    _COLORMAPS = ("viridis", "plasma", "inferno", "magma", "cividis", "turbo")

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        """Initialize the control widget.

        Args:
            parent: Parent widget
        """
        super().__init__(parent)
        self._updating = False
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the user interface."""
        layout = QVBoxLayout(self)

        group = QGroupBox("Parallel Plot")
        form = QFormLayout(group)

        self.title_edit = QLineEdit()
        self.title_edit.editingFinished.connect(
            lambda: self._emit({"title": self.title_edit.text()})
        )
        form.addRow("Title:", self.title_edit)

        self.color_combo = QComboBox()
        self.color_combo.currentIndexChanged.connect(self._on_color_feature)
        form.addRow("Color by:", self.color_combo)

        self.colormap_combo = QComboBox()
        self.colormap_combo.addItems(list(self._COLORMAPS))
        self.colormap_combo.currentTextChanged.connect(
            lambda name: self._emit({"colormap": name})
        )
        form.addRow("Colormap:", self.colormap_combo)

        self.legend_combo = QComboBox()
        for text, _mode in self._LEGEND_CHOICES:
            self.legend_combo.addItem(text)
        self.legend_combo.currentIndexChanged.connect(
            lambda i: self._emit({"show_color_legend": self._LEGEND_CHOICES[i][1]})
        )
        form.addRow("Color legend:", self.legend_combo)

        self.curve_check = QCheckBox("Curved lines")
        self.curve_check.toggled.connect(lambda on: self._emit({"curve": on}))
        form.addRow("", self.curve_check)

        self.normalize_check = QCheckBox("Normalize axes")
        self.normalize_check.toggled.connect(lambda on: self._emit({"normalize": on}))
        form.addRow("", self.normalize_check)

        layout.addWidget(group)
        layout.addStretch()

    def set_available_features(self, features: Sequence[str]) -> None:
        """Fill the color feature choices; the first entry means the default."""
        self._updating = True
        try:
            self.color_combo.clear()
            self.color_combo.addItem("(last displayed)", None)
            for name in features:
                self.color_combo.addItem(str(name), str(name))
        finally:
            self._updating = False

    def set_options(self, options: ParallelPlotOptions) -> None:
        """Show ``options`` in the controls without emitting changes."""
        self._updating = True
        try:
            self.title_edit.setText(options.title)
            index = self.color_combo.findData(options.color_feature)
            self.color_combo.setCurrentIndex(max(index, 0))
            if isinstance(options.colormap, str):
                self.colormap_combo.setCurrentText(options.colormap)
            modes = [mode for _text, mode in self._LEGEND_CHOICES]
            self.legend_combo.setCurrentIndex(modes.index(options.show_color_legend))
            self.curve_check.setChecked(bool(options.curve))
            self.normalize_check.setChecked(bool(options.normalize))
        finally:
            self._updating = False

    def _on_color_feature(self, index: int) -> None:
        if index < 0:
            return
        self._emit({"color_feature": self.color_combo.itemData(index)})

    def _emit(self, changes: Dict[str, Any]) -> None:
        if not self._updating:
            self.optionsChanged.emit(changes)
