# -*- coding: utf-8 -*-
"""
Hillshade Tests - Unit tests for LightSource, Hillshade, and hillshade().

Tests output geometry, small grids, missing neighborhoods, light
direction, stencils, cell size scaling, and grayscale/RGB rendering.

Dependencies
------------
pytest
scipy

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

import logging

import numpy as np
import pytest

from ascviz.exceptions import ValidationError
from ascviz.IO.models import ElevationGrid
from ascviz.image_processing.color import to_rgb
from ascviz.image_processing.hillshade import (
    DEFAULT_LIGHT,
    Hillshade,
    LightSource,
    hillshade,
)

SIN45 = np.sin(np.radians(45.0))


def _grid(values, cell_size=1.0):
    values = np.asarray(values, dtype=np.float64)
    rows, cols = values.shape
    return ElevationGrid(
        n_cols=cols, n_rows=rows, cell_size=cell_size,
        nodata_value=-9999.0, values=np.nan_to_num(values, nan=-9999.0),
    )


def _east_ramp(rows=5, cols=5, slope=1.0):
    """Elevation rising eastwards: the surface faces west."""
    return np.tile(np.arange(cols, dtype=np.float64) * slope, (rows, 1))


def _south_ramp(rows=5, cols=5, slope=1.0):
    """Elevation rising southwards (with row index): faces north."""
    return np.tile(
        (np.arange(rows, dtype=np.float64) * slope)[:, np.newaxis], (1, cols)
    )


# ---------------------------------------------------------------------------
# Light source
# ---------------------------------------------------------------------------

class TestLightSource:
    """Test light direction validation and vectors."""

    def test_default(self):
        assert DEFAULT_LIGHT.azimuth == 315.0
        assert DEFAULT_LIGHT.altitude == 45.0
        assert LightSource() == DEFAULT_LIGHT

    def test_vector_is_unit(self):
        v = LightSource(azimuth=123.0, altitude=17.0).vector
        assert np.linalg.norm(v) == pytest.approx(1.0)

    def test_vector_east_horizon(self):
        np.testing.assert_allclose(
            LightSource(azimuth=90.0, altitude=0.0).vector, [1.0, 0.0, 0.0],
            atol=1e-12,
        )

    def test_vector_zenith(self):
        np.testing.assert_allclose(
            LightSource(azimuth=0.0, altitude=90.0).vector, [0.0, 0.0, 1.0],
            atol=1e-12,
        )

    def test_azimuth_out_of_range(self):
        with pytest.raises(ValidationError, match="azimuth"):
            LightSource(azimuth=361.0)

    def test_altitude_out_of_range(self):
        with pytest.raises(ValidationError, match="altitude"):
            LightSource(altitude=-1.0)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_LIGHT.azimuth = 0.0


# ---------------------------------------------------------------------------
# Illumination geometry
# ---------------------------------------------------------------------------

class TestHillshadeGeometry:
    """Test output shapes and small-grid handling."""

    def test_interior_shape(self):
        illum = Hillshade().apply(np.zeros((6, 9)))
        assert illum.shape == (4, 7)
        assert illum.dtype == np.float64

    def test_three_by_three(self):
        assert Hillshade().apply(np.zeros((3, 3))).shape == (1, 1)

    @pytest.mark.parametrize('shape', [(1, 1), (2, 5), (5, 2), (2, 2)])
    def test_small_grid_is_empty(self, shape, caplog):
        with caplog.at_level(logging.WARNING,
                             logger='ascviz.image_processing.hillshade'):
            illum = Hillshade().apply(np.zeros(shape))
        assert illum.size == 0
        assert illum.shape == (max(shape[0] - 2, 0), max(shape[1] - 2, 0))
        assert "too small" in caplog.text

    def test_non_2d_raises(self):
        with pytest.raises(ValidationError, match="2D"):
            Hillshade().apply(np.zeros(9))

    def test_bad_cell_size_raises(self):
        with pytest.raises(ValidationError, match="cell_size"):
            Hillshade().apply(np.zeros((3, 3)), cell_size=0.0)


class TestHillshadeIllumination:
    """Test illumination values against known surfaces."""

    def test_flat_surface_is_sin_altitude(self):
        illum = Hillshade(altitude=30.0).apply(np.full((5, 5), 100.0))
        np.testing.assert_allclose(illum, 0.5)

    def test_flat_surface_default_light(self):
        np.testing.assert_allclose(Hillshade().apply(np.zeros((4, 4))), SIN45)

    def test_west_facing_lit_from_west(self):
        dem = _east_ramp()
        west = Hillshade(azimuth=270.0).apply(dem)
        east = Hillshade(azimuth=90.0).apply(dem)
        np.testing.assert_allclose(west, 1.0)
        np.testing.assert_allclose(east, 0.0, atol=1e-12)

    def test_north_facing_lit_from_north(self):
        dem = _south_ramp()
        north = Hillshade(azimuth=0.0).apply(dem)
        south = Hillshade(azimuth=180.0).apply(dem)
        np.testing.assert_allclose(north, 1.0)
        np.testing.assert_allclose(south, 0.0, atol=1e-12)

    def test_faces_away_clip_to_zero(self):
        illum = Hillshade(azimuth=90.0, altitude=10.0).apply(
            _east_ramp(slope=5.0)
        )
        assert (illum == 0.0).all()

    def test_range(self):
        rng = np.random.default_rng(3)
        illum = Hillshade().apply(rng.normal(0.0, 5.0, (30, 30)))
        assert illum.min() >= 0.0
        assert illum.max() <= 1.0

    def test_cell_size_scales_gradient(self):
        coarse = Hillshade().apply(_east_ramp(slope=10.0), cell_size=10.0)
        unit = Hillshade().apply(_east_ramp(slope=1.0))
        np.testing.assert_allclose(coarse, unit)

    def test_z_factor(self):
        exaggerated = Hillshade(z_factor=10.0).apply(_east_ramp(slope=1.0))
        steep = Hillshade().apply(_east_ramp(slope=10.0))
        np.testing.assert_allclose(exaggerated, steep)

    def test_z_factor_zero_flattens(self):
        illum = Hillshade(z_factor=0.0).apply(_east_ramp(slope=3.0))
        np.testing.assert_allclose(illum, SIN45)

    def test_stencils_agree_on_plane(self):
        dem = _east_ramp(slope=2.0) + _south_ramp(slope=0.5)
        np.testing.assert_allclose(
            Hillshade(stencil='horn').apply(dem),
            Hillshade(stencil='central').apply(dem),
        )

    def test_runtime_override(self):
        dem = _east_ramp()
        np.testing.assert_allclose(
            Hillshade().apply(dem, azimuth=270.0),
            Hillshade(azimuth=270.0).apply(dem),
        )

    def test_deterministic(self):
        rng = np.random.default_rng(11)
        dem = rng.random((12, 12))
        np.testing.assert_array_equal(
            Hillshade().apply(dem), Hillshade().apply(dem)
        )

    def test_progress_callback(self):
        seen = []
        Hillshade().apply(np.zeros((4, 4)), progress_callback=seen.append)
        assert seen[-1] == 1.0


class TestHillshadeMissing:
    """Test missing-neighborhood handling."""

    def _dem_with_center_hole(self):
        dem = _east_ramp(rows=7, cols=7)
        dem[3, 3] = np.nan
        return dem

    def test_horn_marks_full_neighborhood(self):
        illum = Hillshade(stencil='horn').apply(self._dem_with_center_hole())
        expected = np.zeros((5, 5), dtype=bool)
        expected[1:4, 1:4] = True
        np.testing.assert_array_equal(np.isnan(illum), expected)

    def test_central_marks_edge_neighbors_only(self):
        illum = Hillshade(stencil='central').apply(
            self._dem_with_center_hole()
        )
        expected = np.zeros((5, 5), dtype=bool)
        expected[2, 1:4] = True
        expected[1:4, 2] = True
        np.testing.assert_array_equal(np.isnan(illum), expected)

    def test_missing_does_not_leak(self):
        illum = Hillshade().apply(self._dem_with_center_hole())
        valid = illum[~np.isnan(illum)]
        np.testing.assert_allclose(valid, Hillshade().apply(
            _east_ramp(rows=7, cols=7))[~np.isnan(illum)])

    def test_missing_border_cell(self):
        dem = np.zeros((4, 4))
        dem[0, 0] = np.nan
        illum = Hillshade().apply(dem)
        assert np.isnan(illum[0, 0])
        assert np.isfinite(illum[1, 1])

    def test_all_missing(self):
        illum = Hillshade().apply(np.full((4, 4), np.nan))
        assert np.isnan(illum).all()


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------

class TestHillshadeParams:
    """Test tunable parameter validation."""

    def test_defaults(self):
        shader = Hillshade()
        assert shader.light == DEFAULT_LIGHT
        assert shader.z_factor == 1.0
        assert shader.stencil == 'horn'

    def test_from_light(self):
        shader = Hillshade.from_light(LightSource(90.0, 20.0), z_factor=2.0)
        assert shader.azimuth == 90.0
        assert shader.altitude == 20.0
        assert shader.z_factor == 2.0

    def test_azimuth_out_of_range(self):
        with pytest.raises(ValidationError):
            Hillshade(azimuth=400.0)

    def test_unknown_stencil(self):
        with pytest.raises(ValidationError, match="stencil"):
            Hillshade(stencil='sobel5')

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            Hillshade(azimuth='north')

    def test_negative_z_factor(self):
        with pytest.raises(ValidationError):
            Hillshade(z_factor=-1.0)

    def test_nan_z_factor(self):
        with pytest.raises(ValidationError, match="not finite"):
            Hillshade(z_factor=float('nan'))

    def test_repr(self):
        assert 'azimuth=315.0' in repr(Hillshade())


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

class TestHillshadeShade:
    """Test grayscale and RGB hillshade rendering."""

    def test_shapes_and_dtypes(self):
        gray, rgb = Hillshade().shade(_grid(np.zeros((6, 8))))
        assert gray.shape == (4, 6)
        assert rgb.shape == (4, 6, 3)
        assert gray.dtype == np.uint8
        assert rgb.dtype == np.uint8

    def test_flat_grid(self):
        gray, rgb = Hillshade().shade(_grid(np.full((3, 3), 12.0)))
        assert gray[0, 0] == round(SIN45 * 255)
        expected = np.rint(np.array(to_rgb(0.5)) * SIN45).astype(np.uint8)
        np.testing.assert_array_equal(rgb[0, 0], expected)

    def test_rgb_is_color_times_illumination(self):
        dem = _east_ramp(rows=3, cols=3)
        gray, rgb = Hillshade(azimuth=270.0).shade(_grid(dem))
        assert gray[0, 0] == 255
        np.testing.assert_array_equal(rgb[0, 0], to_rgb(0.5))

    def test_missing_cells(self):
        dem = np.zeros((5, 5))
        dem[2, 2] = np.nan
        gray, rgb = Hillshade().shade(_grid(dem))
        assert (gray == 0).all()
        assert (rgb == 0).all()

    def test_custom_missing_color(self):
        dem = np.zeros((3, 3))
        dem[1, 1] = np.nan
        _, rgb = Hillshade().shade(_grid(dem), missing_color=(9, 9, 9))
        np.testing.assert_array_equal(rgb[0, 0], [9, 9, 9])

    def test_small_grid(self):
        gray, rgb = Hillshade().shade(_grid(np.zeros((2, 2))))
        assert gray.shape == (0, 0)
        assert rgb.shape == (0, 0, 3)

    def test_uses_grid_cell_size(self):
        gray, _ = Hillshade(azimuth=270.0).shade(
            _grid(_east_ramp(slope=30.0), cell_size=30.0)
        )
        assert (gray == 255).all()

    def test_hillshade_function(self):
        grid = _grid(np.random.default_rng(5).random((6, 6)) * 100.0)
        light = LightSource(azimuth=200.0, altitude=35.0)
        gray, rgb = hillshade(grid, light=light, gradient='terrain')
        exp_gray, exp_rgb = Hillshade.from_light(light).shade(
            grid, gradient='terrain'
        )
        np.testing.assert_array_equal(gray, exp_gray)
        np.testing.assert_array_equal(rgb, exp_rgb)

    def test_light_direction_changes_output(self):
        grid = _grid(_east_ramp())
        west, _ = hillshade(grid, light=LightSource(270.0, 45.0))
        east, _ = hillshade(grid, light=LightSource(90.0, 45.0))
        assert (west > east).all()
