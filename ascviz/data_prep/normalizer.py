# -*- coding: utf-8 -*-
"""
Normalizer - Missing-data aware elevation normalization to [0, 1].

Rescales elevation values to the unit interval for display. NaN is the
missing-value marker: it is excluded from the statistics and passed
through to the output unchanged, so the color mapping stage decides how
missing cells are drawn. A constant field maps every valid cell to a
fixed midpoint instead of dividing by zero.

Supports min-max scaling and percentile clipping, with fit/transform
semantics so several grids can share one set of statistics. All
operations are vectorized with numpy and work on arrays of any shape.

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

# Standard library
import logging
from typing import Optional, Tuple

# Third-party
import numpy as np

# ascviz internal
from ascviz.exceptions import ValidationError

logger = logging.getLogger(__name__)

_VALID_METHODS = ('minmax', 'percentile')


class Normalizer:
    """Elevation normalization to [0, 1] with missing-value handling.

    Supports two methods:

    - ``'minmax'``: scale valid values by their min and max.
    - ``'percentile'``: clip valid values to a percentile range, then
      scale to [0, 1]. Useful for grids with a few extreme spikes.

    For every method:

    - NaN inputs stay NaN in the output.
    - If every input is NaN, the output is all NaN.
    - If the valid range is below ``epsilon`` (constant field), every
      valid input maps to ``midpoint``.
    - Outputs are clipped to [0, 1].

    Use ``normalize()`` for one-shot normalization, or ``fit()`` /
    ``transform()`` to reuse statistics from one grid on another.

    Parameters
    ----------
    method : str
        ``'minmax'`` or ``'percentile'``. Default ``'minmax'``.
    percentile_low : float
        Lower percentile for ``'percentile'``. Default ``2.0``.
    percentile_high : float
        Upper percentile for ``'percentile'``. Default ``98.0``.
    midpoint : float
        Output value for every valid cell of a constant field.
        Default ``0.5``.
    epsilon : float
        Ranges smaller than this are treated as constant. Default
        ``1e-10``.

    Raises
    ------
    ValidationError
        If method is unknown, percentile bounds are invalid, or
        midpoint lies outside [0, 1].

    Examples
    --------
    >>> import numpy as np
    >>> from ascviz.data_prep import Normalizer
    >>> norm = Normalizer()
    >>> norm.normalize(np.array([10.0, np.nan, 30.0]))
    array([0. , nan, 1. ])
    >>> norm.normalize(np.array([5.0, 5.0, 5.0]))
    array([0.5, 0.5, 0.5])
    """

    def __init__(
        self,
        method: str = 'minmax',
        percentile_low: float = 2.0,
        percentile_high: float = 98.0,
        midpoint: float = 0.5,
        epsilon: float = 1e-10,
    ) -> None:
        if method not in _VALID_METHODS:
            raise ValidationError(
                f"method must be one of {_VALID_METHODS}, got '{method}'"
            )
        for name, pct in (('percentile_low', percentile_low),
                          ('percentile_high', percentile_high)):
            if not 0.0 <= pct <= 100.0:
                raise ValidationError(f"{name} must be in [0, 100], got {pct}")
        if percentile_low >= percentile_high:
            raise ValidationError(
                f"percentile_low ({percentile_low}) must be less than "
                f"percentile_high ({percentile_high})"
            )
        if not 0.0 <= midpoint <= 1.0:
            raise ValidationError(f"midpoint must be in [0, 1], got {midpoint}")

        self._method = method
        self._percentiles = (percentile_low, percentile_high)
        self._midpoint = midpoint
        self._epsilon = epsilon

        # (None, None) until fit(), and after fitting all-missing data
        self._low: Optional[float] = None
        self._high: Optional[float] = None
        self._is_fitted = False

    @property
    def method(self) -> str:
        """The normalization method."""
        return self._method

    @property
    def midpoint(self) -> float:
        """Output value used for constant fields."""
        return self._midpoint

    @property
    def is_fitted(self) -> bool:
        """Whether ``fit()`` has been called."""
        return self._is_fitted

    @property
    def bounds(self) -> Tuple[Optional[float], Optional[float]]:
        """Fitted ``(low, high)`` bounds.

        Returns
        -------
        Tuple[Optional[float], Optional[float]]
            ``(None, None)`` before fitting or when the fitted data had
            no valid values.
        """
        return self._low, self._high

    def normalize(self, data: np.ndarray) -> np.ndarray:
        """Normalize values using statistics computed from the input.

        Stateless: statistics are computed from ``data`` and applied
        immediately, nothing is stored.

        Parameters
        ----------
        data : array_like
            Elevation values of any shape. NaN marks missing values.

        Returns
        -------
        np.ndarray
            float64 array with the same shape, values in [0, 1] or NaN.

        Raises
        ------
        ValidationError
            If data is not numeric.
        """
        arr = self._as_float(data)
        low, high = self._compute_bounds(arr)
        return self._scale(arr, low, high)

    def fit(self, data: np.ndarray) -> 'Normalizer':
        """Compute normalization bounds from data without transforming.

        Parameters
        ----------
        data : array_like
            Elevation values of any shape. NaN marks missing values.

        Returns
        -------
        Normalizer
            Self, for method chaining.
        """
        arr = self._as_float(data)
        self._low, self._high = self._compute_bounds(arr)
        self._is_fitted = True
        return self

    def transform(self, data: np.ndarray) -> np.ndarray:
        """Apply previously fitted bounds.

        Values outside the fitted range clip to 0 or 1.

        Parameters
        ----------
        data : array_like
            Elevation values of any shape.

        Returns
        -------
        np.ndarray
            float64 array with the same shape, values in [0, 1] or NaN.

        Raises
        ------
        RuntimeError
            If ``fit()`` was not called first.
        """
        if not self._is_fitted:
            raise RuntimeError(
                "Normalizer has not been fitted. Call fit() first."
            )
        arr = self._as_float(data)
        return self._scale(arr, self._low, self._high)

    def fit_transform(self, data: np.ndarray) -> np.ndarray:
        """Convenience: ``fit(data)`` followed by ``transform(data)``."""
        self.fit(data)
        return self.transform(data)

    def _compute_bounds(
        self, arr: np.ndarray
    ) -> Tuple[Optional[float], Optional[float]]:
        valid = arr[~np.isnan(arr)]
        if valid.size == 0:
            logger.debug("No valid values to normalize")
            return None, None
        if self._method == 'percentile':
            low, high = np.percentile(valid, self._percentiles)
            return float(low), float(high)
        return float(valid.min()), float(valid.max())

    def _scale(
        self,
        arr: np.ndarray,
        low: Optional[float],
        high: Optional[float],
    ) -> np.ndarray:
        missing = np.isnan(arr)
        if low is None:
            return np.full_like(arr, np.nan)

        drange = high - low
        if drange < self._epsilon:
            logger.warning("Constant field at %g; using midpoint %g",
                           low, self._midpoint)
            result = np.full_like(arr, self._midpoint)
        else:
            if not np.isfinite(drange):
                # halve first so the span fits in float64
                arr, low, high = arr / 2.0, low / 2.0, high / 2.0
                drange = high - low
            result = np.clip((arr - low) / drange, 0.0, 1.0)
        result[missing] = np.nan
        return result

    @staticmethod
    def _as_float(data) -> np.ndarray:
        arr = np.asarray(data)
        if not (np.issubdtype(arr.dtype, np.floating)
                or np.issubdtype(arr.dtype, np.integer)):
            raise ValidationError(
                f"data must be numeric, got dtype {arr.dtype}"
            )
        return arr.astype(np.float64)

    def __repr__(self) -> str:
        low, high = self._percentiles
        return (f"Normalizer('{self._method}', percentiles=({low}, {high}), "
                f"midpoint={self._midpoint})")


def normalize(values, midpoint: float = 0.5) -> np.ndarray:
    """Min-max normalize *values* to [0, 1], keeping NaN as missing.

    Shorthand for ``Normalizer(midpoint=midpoint).normalize(values)``.

    Parameters
    ----------
    values : array_like
        Elevation values; NaN marks missing cells.
    midpoint : float
        Output for every valid cell of a constant field. Default 0.5.

    Returns
    -------
    np.ndarray
        float64 array, same shape, values in [0, 1] or NaN.
    """
    return Normalizer(midpoint=midpoint).normalize(values)
