"""Colormap lookup and value-to-color mapping for plot lines."""

from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np
import pyqtgraph as pg
from PySide6.QtGui import QColor

from .plot_models import DEFAULT_COLORMAP


def get_colormap(colormap: Any = DEFAULT_COLORMAP) -> pg.ColorMap:
    """Return a pyqtgraph ``ColorMap`` for a name or an existing map.

    Raises:
        ValueError: If the name is not a known colormap.
    """
    if isinstance(colormap, pg.ColorMap):
        return colormap
    if not isinstance(colormap, str) or not colormap:
        raise ValueError(f"colormap must be a name or pyqtgraph.ColorMap, got {colormap!r}")
    try:
        cmap = pg.colormap.get(colormap)
    except (FileNotFoundError, KeyError, ValueError) as e:
        raise ValueError(f"Unknown colormap: {colormap!r}") from e
    if cmap is None:
        raise ValueError(f"Unknown colormap: {colormap!r}")
    return cmap


def value_fractions(values: Sequence[float], vmin: float, vmax: float) -> np.ndarray:
    """Position of each value within [vmin, vmax], clipped to [0, 1]; NaN maps to 0.

    When ``vmin == vmax`` every value maps to the middle of the colormap.
    """
    values = np.asarray(values, dtype=float)
    if vmax == vmin:
        return np.full(len(values), 0.5)
    span = float(vmax) - float(vmin)
    fractions = np.clip((values - float(vmin)) / span, 0.0, 1.0)
    return np.where(np.isnan(fractions), 0.0, fractions)


def map_colors(
    cmap: pg.ColorMap, values: Sequence[float], vmin: float, vmax: float
) -> List[QColor]:
    """One ``QColor`` per value."""
    fractions = value_fractions(values, vmin, vmax)
    if len(fractions) == 0:
        return []
    return list(cmap.map(fractions, mode=pg.ColorMap.QCOLOR))
