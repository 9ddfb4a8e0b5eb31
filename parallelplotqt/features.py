"""Resolve which features are displayed, which one drives color, and labels."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from .data import Dataset
from .errors import LabelCountMismatchError, UnknownFeatureError
from .plot_models import LegendMode, LineMode, ParallelPlotOptions, PlotConfig


def resolve_features(
    data: Any,
    feature_selection: Optional[Sequence[str]] = None,
    color_feature: Optional[str] = None,
) -> Tuple[Tuple[str, ...], str]:
    """Pick the displayed features and the color feature.

    Args:
        data: Dataset (or anything ``Dataset.coerce`` accepts).
        feature_selection: Columns to display, in display order. ``None``
            displays every column in dataset order.
        color_feature: Column that drives line color. It does not have to be
            displayed. Defaults to the last displayed feature.

    Returns:
        Tuple of (displayed feature names, color feature name).

    Raises:
        UnknownFeatureError: A selected or color feature is not a column.
        ValueError: The selection names a feature twice.
    """
    dataset = Dataset.coerce(data)
    names = dataset.names

    if feature_selection is not None:
        if isinstance(feature_selection, str):
            feature_selection = [feature_selection]
        displayed = tuple(feature_selection)
        for name in displayed:
            if name not in names:
                raise UnknownFeatureError(name, names)
        if len(set(displayed)) != len(displayed):
            raise ValueError(f"feature_selection contains duplicates: {list(displayed)}")
        if not displayed:
            raise ValueError("feature_selection must name at least one feature")
    else:
        displayed = names

    if color_feature is not None:
        if color_feature not in names:
            raise UnknownFeatureError(color_feature, names)
        color_col = color_feature
    else:
        color_col = displayed[-1]

    return displayed, color_col


def show_color_legend(
    mode: Any, color_feature: str, displayed: Sequence[str]
) -> bool:
    """Whether the colorbar is drawn.

    An explicit ``True``/``False`` wins. Otherwise the legend is shown exactly
    when the color feature has no axis, since the colors would be unreadable.
    """
    mode = LegendMode.coerce(mode)
    if mode is LegendMode.SHOW:
        return True
    if mode is LegendMode.HIDE:
        return False
    return color_feature not in displayed


def resolve_labels(
    displayed: Sequence[str], feature_labels: Optional[Sequence[Any]] = None
) -> Tuple[str, ...]:
    """Axis labels: the feature names, or one user label per axis.

    Raises:
        LabelCountMismatchError: If the label count differs from the axis count.
    """
    if feature_labels is None:
        return tuple(displayed)
    if isinstance(feature_labels, str):
        feature_labels = [feature_labels]
    labels = tuple(str(label) for label in feature_labels)
    if len(labels) != len(displayed):
        raise LabelCountMismatchError(len(displayed), len(labels))
    return labels


def build_config(data: Any, options: Optional[ParallelPlotOptions] = None) -> PlotConfig:
    """Resolve ``options`` against the columns of ``data``."""
    if options is None:
        options = ParallelPlotOptions()
    displayed, color_col = resolve_features(
        data, options.feature_selection, options.color_feature
    )
    return PlotConfig(
        features=displayed,
        labels=resolve_labels(displayed, options.feature_labels),
        color_feature=color_col,
        line_mode=LineMode.from_curve(bool(options.curve)),
        show_legend=show_color_legend(options.show_color_legend, color_col, displayed),
        normalize=bool(options.normalize),
        title=options.title,
        colormap=options.colormap,
        curve_steps=int(options.curve_steps),
    )
