"""Turn a dataset and plot options into renderer-ready geometry.

Runs validation, feature selection, optional normalization, point mapping and
optional curve interpolation in one pass. Every input error is raised here,
before the renderer touches its scene.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from .data import Dataset, normalize, validate
from .features import build_config
from .geometry import build_axes, build_polylines, feature_ranges
from .plot_models import (
    DEFAULT_CANVAS,
    FeatureRange,
    ParallelPlotGeometry,
    ParallelPlotOptions,
    PlotBounds,
)


def build_plot(
    data: Any,
    options: Optional[ParallelPlotOptions] = None,
    canvas: Tuple[float, float] = DEFAULT_CANVAS,
) -> ParallelPlotGeometry:
    """Build the full plot geometry for ``data``.

    Args:
        data: Dataset, mapping of columns, DataFrame-like object or records.
        options: Plot options; defaults to ``ParallelPlotOptions()``.
        canvas: (width, height) of the drawing area in scene units.

    Returns:
        The resolved config, per-axis ranges and layout, and one polyline
        per row.
    """
    if options is None:
        options = ParallelPlotOptions()

    validate(data)
    dataset = Dataset.coerce(data)
    config = build_config(dataset, options)

    # the color feature may be hidden, keep it alongside the displayed columns
    needed = list(config.features)
    if config.color_feature not in needed:
        needed.append(config.color_feature)
    dataset = dataset.select(needed)
    if config.normalize:
        dataset = normalize(dataset)

    ranges = feature_ranges(dataset, config.features)
    color_values = dataset.column(config.color_feature)
    color_range = FeatureRange(
        config.color_feature, float(color_values.min()), float(color_values.max())
    )

    bounds = PlotBounds.from_canvas(*canvas)
    polylines = build_polylines(
        dataset,
        ranges,
        color_values,
        bounds,
        config.line_mode,
        config.curve_steps,
    )

    return ParallelPlotGeometry(
        config=config,
        ranges=ranges,
        color_range=color_range,
        bounds=bounds,
        canvas=(float(canvas[0]), float(canvas[1])),
        axes=build_axes(ranges, config.labels, bounds),
        polylines=polylines,
    )
