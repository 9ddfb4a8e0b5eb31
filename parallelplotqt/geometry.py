"""Plot-space geometry for the parallel coordinates plot.

Maps raw values onto evenly spaced vertical axes and builds one polyline per
data row, either straight (one point per axis) or curved (a cosine ease
between every pair of neighbouring axes). Nothing here depends on Qt.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import islice
from typing import Callable, Iterator, List, Sequence, Tuple

import numpy as np

from .data import Dataset
from .plot_models import (
    DEFAULT_CURVE_STEPS,
    AxisSpec,
    FeatureRange,
    LineMode,
    PlotBounds,
    Point,
    Polyline,
)

DEFAULT_TICK_COUNT = 5


def feature_ranges(dataset: Dataset, names: Sequence[str]) -> Tuple[FeatureRange, ...]:
    """Min/max of every named column."""
    ranges = []
    for name in names:
        values = dataset.column(name)
        ranges.append(FeatureRange(name, float(values.min()), float(values.max())))
    return tuple(ranges)


def axis_x(feature_index: int, n_features: int, bounds: PlotBounds) -> float:
    """Horizontal position of an axis; a single axis sits in the middle."""
    if n_features == 1:
        return bounds.offset + bounds.width / 2
    return bounds.offset + feature_index / (n_features - 1) * bounds.width


def map_point(
    feature_index: int,
    raw_value: float,
    feature_range: FeatureRange,
    bounds: PlotBounds,
    n_features: int,
) -> Point:
    """Plot-space position of one value on its axis."""
    return Point(
        axis_x(feature_index, n_features, bounds),
        bounds.offset + feature_range.fraction(raw_value) * bounds.height,
    )


def ease(x: float, x0: float, x1: float, y0: float, y1: float) -> float:
    """Cosine ease-in/ease-out between (x0, y0) and (x1, y1), evaluated at x."""
    if x1 == x0:
        return y0
    t = (x - x0) / (x1 - x0) * math.pi
    s = 0.5 - 0.5 * math.cos(t)
    return y0 + s * (y1 - y0)


@dataclass(frozen=True)
class CurveSegment:
    """Eased points between two neighbouring axes, ends included.

    Iterating yields ``steps + 1`` points lazily; the segment can be iterated
    any number of times.
    """

    x0: float
    x1: float
    y0: float
    y1: float
    steps: int = DEFAULT_CURVE_STEPS

    def __len__(self) -> int:
        return self.steps + 1

    def __iter__(self) -> Iterator[Point]:
        dx = self.x1 - self.x0
        for k in range(self.steps):
            x = self.x0 + dx * k / self.steps
            yield Point(x, ease(x, self.x0, self.x1, self.y0, self.y1))
        yield Point(self.x1, self.y1)


def interpolate_segment(
    x0: float, x1: float, y0: float, y1: float, steps: int = DEFAULT_CURVE_STEPS
) -> CurveSegment:
    """Curve between two mapped points, sampled at ``steps`` subdivisions."""
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")
    return CurveSegment(float(x0), float(x1), float(y0), float(y1), int(steps))


def _straight_row(anchors: Sequence[Point], steps: int) -> Tuple[Point, ...]:
    return tuple(anchors)


def _curved_row(anchors: Sequence[Point], steps: int) -> Tuple[Point, ...]:
    points: List[Point] = list(anchors[:1])
    for a, b in zip(anchors, anchors[1:]):
        # segments share their joint point, which is already in ``points``
        points.extend(islice(interpolate_segment(a.x, b.x, a.y, b.y, steps), 1, None))
    return tuple(points)


_ROW_BUILDERS: dict = {
    LineMode.STRAIGHT: _straight_row,
    LineMode.CURVED: _curved_row,
}


def build_polylines(
    dataset: Dataset,
    ranges: Sequence[FeatureRange],
    color_values: Sequence[float],
    bounds: PlotBounds,
    line_mode: LineMode = LineMode.STRAIGHT,
    steps: int = DEFAULT_CURVE_STEPS,
) -> Tuple[Polyline, ...]:
    """One polyline per row, crossing the axes in the order of ``ranges``.

    Args:
        dataset: Holds at least the columns named by ``ranges``.
        ranges: Displayed features and their axis ranges, left to right.
        color_values: One color scalar per row.
        bounds: Plot area.
        line_mode: Straight lines or cosine-eased curves.
        steps: Subdivisions per segment in curve mode.
    """
    build_row: Callable[[Sequence[Point], int], Tuple[Point, ...]] = _ROW_BUILDERS[line_mode]
    n_features = len(ranges)
    columns = [dataset.column(r.name) for r in ranges]
    color_values = np.asarray(color_values, dtype=float)
    if len(color_values) != dataset.n_rows:
        raise ValueError(
            f"Expected {dataset.n_rows} color values, got {len(color_values)}"
        )

    lines = []
    for row in range(dataset.n_rows):
        anchors = [
            map_point(j, columns[j][row], ranges[j], bounds, n_features)
            for j in range(n_features)
        ]
        lines.append(Polyline(row, build_row(anchors, steps), float(color_values[row])))
    return tuple(lines)


def _format_tick(value: float) -> str:
    return f"{value:.4g}"


def axis_ticks(
    feature_range: FeatureRange, count: int = DEFAULT_TICK_COUNT
) -> Tuple[Tuple[float, str], ...]:
    """Evenly spaced ticks as (fraction along the axis, label) pairs."""
    if feature_range.is_degenerate or count < 2:
        return ((0.5, _format_tick(feature_range.min)),)
    fractions = np.linspace(0.0, 1.0, count)
    return tuple(
        (float(f), _format_tick(feature_range.min + f * feature_range.span))
        for f in fractions
    )


def build_axes(
    ranges: Sequence[FeatureRange],
    labels: Sequence[str],
    bounds: PlotBounds,
    tick_count: int = DEFAULT_TICK_COUNT,
) -> Tuple[AxisSpec, ...]:
    """Position, extent and ticks of every displayed axis."""
    n_features = len(ranges)
    bottom = bounds.offset
    top = bounds.offset + bounds.height
    return tuple(
        AxisSpec(
            label=label,
            range=r,
            x=axis_x(i, n_features, bounds),
            bottom=bottom,
            top=top,
            ticks=tuple(
                (bottom + frac * bounds.height, text)
                for frac, text in axis_ticks(r, tick_count)
            ),
        )
        for i, (r, label) in enumerate(zip(ranges, labels))
    )
