from .errors import (
    ParallelPlotError,
    NullInputError,
    RaggedColumnsError,
    InsufficientColumnsError,
    InsufficientRowsError,
    MissingValuesError,
    NonNumericValueError,
    UnknownFeatureError,
    LabelCountMismatchError,
    DegenerateRangeError,
)
from .plot_models import (
    ParallelPlotOptions,
    PlotConfig,
    PlotBounds,
    FeatureRange,
    Point,
    Polyline,
    AxisSpec,
    ParallelPlotGeometry,
    LegendMode,
    LineMode,
)
from .data import Dataset, validate, normalize
from .features import resolve_features, resolve_labels, show_color_legend, build_config
from .geometry import (
    axis_x,
    map_point,
    ease,
    interpolate_segment,
    build_polylines,
    feature_ranges,
)
from .pipeline import build_plot

__all__ = [
    # Errors
    "ParallelPlotError",
    "NullInputError",
    "RaggedColumnsError",
    "InsufficientColumnsError",
    "InsufficientRowsError",
    "MissingValuesError",
    "NonNumericValueError",
    "UnknownFeatureError",
    "LabelCountMismatchError",
    "DegenerateRangeError",
    # Models
    "ParallelPlotOptions",
    "PlotConfig",
    "PlotBounds",
    "FeatureRange",
    "Point",
    "Polyline",
    "AxisSpec",
    "ParallelPlotGeometry",
    "LegendMode",
    "LineMode",
    # Geometry core
    "Dataset",
    "validate",
    "normalize",
    "resolve_features",
    "resolve_labels",
    "show_color_legend",
    "build_config",
    "axis_x",
    "map_point",
    "ease",
    "interpolate_segment",
    "build_polylines",
    "feature_ranges",
    "build_plot",
    # Qt widgets (imported lazily, they need PySide6 and pyqtgraph)
    "ParallelPlotWidget",
    "ParallelPlotControlWidget",
]


def __getattr__(name):
    if name in ("ParallelPlotWidget", "ParallelPlotControlWidget"):
        from . import plot_widget

        return getattr(plot_widget, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
