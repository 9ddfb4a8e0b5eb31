"""Data models for the parallel coordinates plot.

Provides frozen dataclasses for plot options, the resolved per-render
configuration and the geometry handed to the renderer. None of these depend on
Qt, so the geometry core can be used and tested without a display.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np

DEFAULT_COLORMAP = "viridis"
DEFAULT_CURVE_STEPS = 30  # subdivisions between two neighbouring axes
DEFAULT_CANVAS: Tuple[float, float] = (800.0, 600.0)
PLOT_FILL = 0.8  # share of the canvas covered by the axes
PLOT_MARGIN = 0.1  # share of the smaller canvas side used as offset


class LegendMode(enum.Enum):
    """Whether the color legend is shown.

    ``AUTO`` shows the legend only when the color feature has no axis of its own.
    """

    AUTO = "auto"
    SHOW = "show"
    HIDE = "hide"

    @classmethod
    def coerce(cls, value: Union["LegendMode", bool, None]) -> "LegendMode":
        """Map ``None``/``True``/``False`` to ``AUTO``/``SHOW``/``HIDE``."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.AUTO
        if isinstance(value, (bool, np.bool_)):
            return cls.SHOW if value else cls.HIDE
        raise TypeError(f"show_color_legend must be a bool or None, got {value!r}")


class LineMode(enum.Enum):
    """How a row is turned into a polyline."""

    STRAIGHT = "straight"  # one point per axis
    CURVED = "curved"  # cosine-eased segments between axes

    @classmethod
    def from_curve(cls, curve: bool) -> "LineMode":
        return cls.CURVED if curve else cls.STRAIGHT


class Point(NamedTuple):
    """A point in plot space."""

    x: float
    y: float


@dataclass(frozen=True)
class FeatureRange:
    """A displayed feature and the value range of its axis."""

    name: str
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def is_degenerate(self) -> bool:
        return self.max == self.min

    def fraction(self, value: float) -> float:
        """Linear position of ``value`` between min (0.0) and max (1.0).

        A degenerate range has no extent, so every value sits at 0.5.
        """
        if self.is_degenerate:
            return 0.5
        return (float(value) - self.min) / self.span


@dataclass(frozen=True)
class PlotBounds:
    """Area covered by the axes, in canvas coordinates.

    Axes start at ``offset`` on both dimensions and extend ``width`` to the right
    and ``height`` upwards.
    """

    width: float
    height: float
    offset: float

    @classmethod
    def from_canvas(
        cls,
        width: float,
        height: float,
        fill: float = PLOT_FILL,
        margin: float = PLOT_MARGIN,
    ) -> "PlotBounds":
        """Derive plot bounds from the available canvas size.

        Args:
            width: Canvas width.
            height: Canvas height.
            fill: Share of each canvas dimension covered by the axes.
            margin: Offset as a share of the smaller canvas dimension.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got ({width}, {height})")
        return cls(
            width=float(width) * fill,
            height=float(height) * fill,
            offset=min(float(width), float(height)) * margin,
        )


@dataclass(frozen=True)
class Polyline:
    """One data row as a sequence of points, tagged with its color value."""

    row: int
    points: Tuple[Point, ...]
    color_value: float

    def __len__(self) -> int:
        return len(self.points)

    @property
    def xs(self) -> np.ndarray:
        return np.fromiter((p.x for p in self.points), dtype=float, count=len(self.points))

    @property
    def ys(self) -> np.ndarray:
        return np.fromiter((p.y for p in self.points), dtype=float, count=len(self.points))


@dataclass(frozen=True)
class AxisSpec:
    """Everything the renderer needs to draw one vertical axis."""

    label: str
    range: FeatureRange
    x: float
    bottom: float
    top: float
    ticks: Tuple[Tuple[float, str], ...]  # (y position, label)


def _as_names(value: Optional[Sequence[Any]]) -> Optional[Tuple[Any, ...]]:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class ParallelPlotOptions:
    """User-facing options of a parallel plot.

    Attributes:
        title: Title shown above the plot.
        colormap: pyqtgraph colormap name or ``pyqtgraph.ColorMap``.
        color_feature: Column that drives line color. Defaults to the last
            selected feature, or the last column when nothing is selected.
        feature_labels: One axis label per displayed feature.
        feature_selection: Columns to display, in display order. ``None``
            shows every column.
        curve: Draw cosine-eased curves between axes instead of straight lines.
        show_color_legend: ``True``/``False`` to force the colorbar on or off;
            ``None`` shows it only when the color feature is not displayed.
        normalize: Rescale every column to [0, 1] before plotting.
        curve_steps: Subdivisions between two axes in curve mode.
    """

    title: str = ""
    colormap: Any = DEFAULT_COLORMAP
    color_feature: Optional[str] = None
    feature_labels: Optional[Tuple[str, ...]] = None
    feature_selection: Optional[Tuple[str, ...]] = None
    curve: bool = False
    show_color_legend: Union[LegendMode, bool, None] = LegendMode.AUTO
    normalize: bool = False
    curve_steps: int = DEFAULT_CURVE_STEPS

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "feature_labels", _as_names(self.feature_labels))
        object.__setattr__(self, "feature_selection", _as_names(self.feature_selection))
        object.__setattr__(
            self, "show_color_legend", LegendMode.coerce(self.show_color_legend)
        )
        if int(self.curve_steps) < 1:
            raise ValueError(f"curve_steps must be >= 1, got {self.curve_steps}")

    def with_changes(self, **changes: Any) -> "ParallelPlotOptions":
        """Return a copy with the given options replaced.

        Raises:
            TypeError: If an option name is not recognized.
        """
        return replace(self, **changes)


@dataclass(frozen=True)
class PlotConfig:
    """Options resolved against a dataset, fixed for one render pass."""

    features: Tuple[str, ...]
    labels: Tuple[str, ...]
    color_feature: str
    line_mode: LineMode
    show_legend: bool
    normalize: bool = False
    title: str = ""
    colormap: Any = DEFAULT_COLORMAP
    curve_steps: int = DEFAULT_CURVE_STEPS

    @property
    def feature_count(self) -> int:
        return len(self.features)


@dataclass(frozen=True)
class ParallelPlotGeometry:
    """Renderer input produced by one run of the plotting pipeline."""

    config: PlotConfig
    ranges: Tuple[FeatureRange, ...]
    color_range: FeatureRange
    bounds: PlotBounds
    canvas: Tuple[float, float]
    axes: Tuple[AxisSpec, ...]
    polylines: Tuple[Polyline, ...]

    @property
    def color_values(self) -> np.ndarray:
        return np.array([line.color_value for line in self.polylines], dtype=float)
