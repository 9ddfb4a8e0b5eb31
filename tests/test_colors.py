"""Tests for colormap lookup and value-to-color mapping."""

import numpy as np
import pytest

pg = pytest.importorskip("pyqtgraph")
colors = pytest.importorskip("parallelplotqt.colors")


class TestGetColormap:
    """Tests for get_colormap()."""

    def test_by_name(self):
        assert isinstance(colors.get_colormap("viridis"), pg.ColorMap)

    def test_passthrough(self):
        cmap = pg.ColorMap([0.0, 1.0], [(0, 0, 0), (255, 255, 255)])
        assert colors.get_colormap(cmap) is cmap

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            colors.get_colormap("definitely-not-a-colormap")

    def test_bad_type(self):
        with pytest.raises(ValueError):
            colors.get_colormap(42)


class TestValueFractions:
    """Tests for value_fractions()."""

    def test_linear(self):
        np.testing.assert_allclose(
            colors.value_fractions([20, 30, 40], 20, 40), [0.0, 0.5, 1.0]
        )

    def test_clamped(self):
        np.testing.assert_allclose(colors.value_fractions([-5, 15], 0, 10), [0.0, 1.0])

    def test_nan_maps_to_low_end(self):
        np.testing.assert_allclose(
            colors.value_fractions([np.nan, 5.0], 0, 10), [0.0, 0.5]
        )

    def test_infinity_clipped(self):
        np.testing.assert_allclose(
            colors.value_fractions([-np.inf, np.inf], 0, 10), [0.0, 1.0]
        )

    def test_degenerate(self):
        np.testing.assert_allclose(colors.value_fractions([3, 3], 3, 3), [0.5, 0.5])


class TestMapColors:
    """Tests for map_colors()."""

    def test_one_color_per_value(self, qapp):
        cmap = pg.ColorMap([0.0, 1.0], [(0, 0, 0), (255, 255, 255)])
        result = colors.map_colors(cmap, [0, 5, 10], 0, 10)
        assert len(result) == 3
        assert result[0].name() == "#000000"
        assert result[-1].name() == "#ffffff"

    def test_empty(self, qapp):
        assert colors.map_colors(colors.get_colormap(), [], 0, 1) == []
