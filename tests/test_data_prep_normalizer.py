# -*- coding: utf-8 -*-
"""
Normalizer Tests - Unit tests for missing-aware elevation normalization.

Tests minmax and percentile scaling, constant fields, NaN propagation,
fit/transform reuse, and the ``normalize`` shorthand.

Author
------
Steven Siebert

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

from ascviz.data_prep import Normalizer, normalize
from ascviz.exceptions import ValidationError


# ---------------------------------------------------------------------------
# Constructor validation
# ---------------------------------------------------------------------------

class TestNormalizerInit:
    """Test constructor validation and defaults."""

    def test_default_method_is_minmax(self):
        assert Normalizer().method == 'minmax'

    def test_default_midpoint(self):
        assert Normalizer().midpoint == 0.5

    def test_invalid_method_raises(self):
        with pytest.raises(ValidationError, match="method must be one of"):
            Normalizer(method='zscore')

    def test_percentile_low_out_of_range_raises(self):
        with pytest.raises(ValueError, match="percentile_low"):
            Normalizer(percentile_low=-1.0)

    def test_percentile_high_out_of_range_raises(self):
        with pytest.raises(ValueError, match="percentile_high"):
            Normalizer(percentile_high=101.0)

    def test_percentile_low_ge_high_raises(self):
        with pytest.raises(ValueError, match="must be less than"):
            Normalizer(percentile_low=50.0, percentile_high=50.0)

    def test_midpoint_out_of_range_raises(self):
        with pytest.raises(ValidationError, match="midpoint"):
            Normalizer(midpoint=1.5)

    def test_not_fitted_initially(self):
        norm = Normalizer()
        assert norm.is_fitted is False
        assert norm.bounds == (None, None)


# ---------------------------------------------------------------------------
# MinMax normalization
# ---------------------------------------------------------------------------

class TestNormalizerMinMax:
    """Test minmax normalization: values scaled to [0, 1]."""

    def test_known_values(self):
        result = Normalizer().normalize(
            np.array([0.0, 25.0, 50.0, 75.0, 100.0])
        )
        np.testing.assert_allclose(result, [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_negative_elevations(self):
        result = Normalizer().normalize(np.array([-100.0, 0.0, 100.0]))
        np.testing.assert_allclose(result, [0.0, 0.5, 1.0])

    def test_shape_preserved(self):
        data = np.arange(12.0).reshape(3, 4)
        result = Normalizer().normalize(data)
        assert result.shape == (3, 4)
        assert result.dtype == np.float64

    def test_integer_input(self):
        result = Normalizer().normalize(np.array([0, 5, 10]))
        np.testing.assert_allclose(result, [0.0, 0.5, 1.0])

    def test_list_input(self):
        np.testing.assert_allclose(
            Normalizer().normalize([2.0, 4.0]), [0.0, 1.0]
        )

    def test_non_numeric_raises(self):
        with pytest.raises(ValidationError, match="numeric"):
            Normalizer().normalize(np.array(['a', 'b']))

    def test_range_wider_than_float64(self):
        with np.errstate(over='raise', invalid='raise'):
            result = normalize(np.array([-1e308, 1e308, 0.0]))
        np.testing.assert_allclose(result, [0.0, 1.0, 0.5])

    def test_fitted_huge_range_clips(self):
        norm = Normalizer().fit(np.array([-1.5e308, 1.5e308]))
        result = norm.transform(np.array([-1.7e308, 0.0, 1.7e308]))
        np.testing.assert_allclose(result, [0.0, 0.5, 1.0])


# ---------------------------------------------------------------------------
# Missing values and degenerate fields
# ---------------------------------------------------------------------------

class TestNormalizerMissing:
    """Test NaN propagation and degenerate inputs."""

    def test_missing_stays_missing(self):
        result = Normalizer().normalize(np.array([10.0, np.nan, 30.0]))
        assert np.isnan(result[1])
        np.testing.assert_allclose(result[[0, 2]], [0.0, 1.0])

    def test_missing_excluded_from_range(self):
        result = Normalizer().normalize(np.array([np.nan, 1.0, 2.0, 3.0]))
        assert not np.isnan(result[1:]).any()
        np.testing.assert_allclose(result[1:], [0.0, 0.5, 1.0])

    def test_all_missing(self):
        result = Normalizer().normalize(np.full((2, 2), np.nan))
        assert np.isnan(result).all()

    def test_constant_field_gives_midpoint(self, caplog):
        with caplog.at_level(logging.WARNING,
                             logger='ascviz.data_prep.normalizer'):
            result = Normalizer().normalize(np.array([5.0, 5.0, 5.0]))
        np.testing.assert_array_equal(result, [0.5, 0.5, 0.5])
        assert "Constant field" in caplog.text

    def test_constant_field_custom_midpoint(self):
        result = Normalizer(midpoint=0.0).normalize(np.array([7.0, 7.0]))
        np.testing.assert_array_equal(result, [0.0, 0.0])

    def test_constant_with_missing(self):
        result = Normalizer().normalize(np.array([3.0, np.nan, 3.0]))
        assert result[0] == 0.5
        assert np.isnan(result[1])
        assert result[2] == 0.5

    def test_single_cell(self):
        np.testing.assert_array_equal(
            Normalizer().normalize(np.array([[42.0]])), [[0.5]]
        )

    def test_output_in_unit_interval(self):
        rng = np.random.default_rng(7)
        data = rng.normal(500.0, 200.0, size=(20, 20))
        data[rng.random((20, 20)) < 0.1] = np.nan
        result = Normalizer().normalize(data)
        valid = result[~np.isnan(data)]
        assert valid.min() >= 0.0
        assert valid.max() <= 1.0
        np.testing.assert_array_equal(np.isnan(result), np.isnan(data))


# ---------------------------------------------------------------------------
# Percentile normalization
# ---------------------------------------------------------------------------

class TestNormalizerPercentile:
    """Test percentile clipping before scaling."""

    def test_clips_tails(self):
        data = np.arange(101.0)
        norm = Normalizer(method='percentile', percentile_low=10.0,
                          percentile_high=90.0)
        result = norm.normalize(data)
        assert result[0] == 0.0
        assert result[10] == pytest.approx(0.0)
        assert result[50] == pytest.approx(0.5)
        assert result[90] == pytest.approx(1.0)
        assert result[100] == 1.0

    def test_spike_does_not_flatten(self):
        data = np.concatenate([np.linspace(0.0, 10.0, 99), [1e6]])
        minmax = Normalizer().normalize(data)
        pct = Normalizer(method='percentile').normalize(data)
        assert np.ptp(pct[:99]) > np.ptp(minmax[:99])

    def test_missing_ignored(self):
        data = np.array([np.nan, 0.0, 50.0, 100.0])
        result = Normalizer(method='percentile', percentile_low=0.0,
                            percentile_high=100.0).normalize(data)
        assert np.isnan(result[0])
        np.testing.assert_allclose(result[1:], [0.0, 0.5, 1.0])


# ---------------------------------------------------------------------------
# fit / transform
# ---------------------------------------------------------------------------

class TestNormalizerFitTransform:
    """Test reusing fitted bounds on other data."""

    def test_transform_before_fit_raises(self):
        with pytest.raises(RuntimeError, match="not been fitted"):
            Normalizer().transform(np.array([1.0]))

    def test_fit_returns_self(self):
        norm = Normalizer()
        assert norm.fit(np.array([0.0, 10.0])) is norm
        assert norm.is_fitted
        assert norm.bounds == (0.0, 10.0)

    def test_transform_uses_fitted_bounds(self):
        norm = Normalizer().fit(np.array([0.0, 10.0]))
        result = norm.transform(np.array([5.0, 20.0, -5.0, np.nan]))
        np.testing.assert_allclose(result[:3], [0.5, 1.0, 0.0])
        assert np.isnan(result[3])

    def test_fit_all_missing(self):
        norm = Normalizer().fit(np.array([np.nan, np.nan]))
        assert norm.bounds == (None, None)
        assert np.isnan(norm.transform(np.array([1.0]))).all()

    def test_fit_transform_matches_normalize(self):
        data = np.array([3.0, 1.0, np.nan, 2.0])
        np.testing.assert_array_equal(
            Normalizer().fit_transform(data), Normalizer().normalize(data)
        )


class TestNormalizeFunction:
    """Test the module-level shorthand."""

    def test_matches_normalizer(self):
        data = np.array([[1.0, 2.0], [np.nan, 4.0]])
        np.testing.assert_array_equal(
            normalize(data), Normalizer().normalize(data)
        )

    def test_identical_values(self):
        result = normalize([5.0, 5.0, 5.0])
        assert len(set(result.tolist())) == 1

    def test_midpoint(self):
        np.testing.assert_array_equal(normalize([1.0, 1.0], midpoint=0.25),
                                      [0.25, 0.25])
