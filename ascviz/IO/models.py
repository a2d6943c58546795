# -*- coding: utf-8 -*-
"""
IO Models - Typed header and elevation grid containers for ASC rasters.

``AscHeader`` holds the six scalar header fields of an ESRI ASCII grid.
``ElevationGrid`` is the immutable parsed raster handed to every
downstream stage: dimensions, cell size, nodata sentinel, and a
read-only ``(n_rows, n_cols)`` float64 array in which every nodata
sample has been replaced by NaN, the missing-value marker.

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

# Standard library
import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# ascviz internal
from ascviz.exceptions import ValidationError

_REGISTRATIONS = ('corner', 'center')


@dataclass(frozen=True)
class AscHeader:
    """Scalar header fields of an ESRI ASCII grid.

    Parameters
    ----------
    ncols : int
        Number of columns.
    nrows : int
        Number of rows.
    xllcorner : float
        X of the lower-left reference point.
    yllcorner : float
        Y of the lower-left reference point.
    cellsize : float
        Cell spacing in map units.
    nodata_value : float
        Raw sentinel denoting "no measurement".
    registration : str
        ``'corner'`` when the file used ``xllcorner``/``yllcorner``,
        ``'center'`` when it used ``xllcenter``/``yllcenter``.
    """

    ncols: int
    nrows: int
    xllcorner: float
    yllcorner: float
    cellsize: float
    nodata_value: float
    registration: str = 'corner'

    @property
    def sample_count(self) -> int:
        """Number of samples the header declares."""
        return self.ncols * self.nrows

    def to_dict(self) -> Dict[str, Any]:
        """Header fields as a plain dictionary."""
        return dataclasses.asdict(self)


@dataclass(frozen=True, eq=False)
class ElevationGrid:
    """Immutable elevation raster with NaN as the missing-value marker.

    Any sample equal to ``nodata_value`` is replaced with NaN when the
    grid is built, so downstream code never compares against the
    sentinel. The stored array is a private read-only copy.

    Parameters
    ----------
    n_cols : int
        Number of columns (raster width).
    n_rows : int
        Number of rows (raster height).
    cell_size : float
        Cell spacing in map units.
    nodata_value : float
        Raw nodata sentinel from the header.
    values : np.ndarray
        Elevations, shape ``(n_rows, n_cols)`` or flat of length
        ``n_rows * n_cols`` in row-major order, top row first.
    xllcorner, yllcorner : float
        Lower-left reference point. Default ``0.0``.
    registration : str
        ``'corner'`` or ``'center'``. Default ``'corner'``.

    Raises
    ------
    ValidationError
        If dimensions are not positive, ``cell_size`` is not positive,
        or ``values`` does not hold ``n_rows * n_cols`` samples.
    """

    n_cols: int
    n_rows: int
    cell_size: float
    nodata_value: float
    values: np.ndarray
    xllcorner: float = 0.0
    yllcorner: float = 0.0
    registration: str = 'corner'

    def __post_init__(self) -> None:
        if self.n_cols < 1 or self.n_rows < 1:
            raise ValidationError(
                f"Grid dimensions must be positive, got "
                f"{self.n_cols}x{self.n_rows}"
            )
        if not self.cell_size > 0:
            raise ValidationError(
                f"cell_size must be positive, got {self.cell_size}"
            )
        if self.registration not in _REGISTRATIONS:
            raise ValidationError(
                f"registration must be one of {_REGISTRATIONS}, "
                f"got {self.registration!r}"
            )

        values = np.array(self.values, dtype=np.float64)
        if values.size != self.n_cols * self.n_rows:
            raise ValidationError(
                f"Expected {self.n_cols * self.n_rows} values for a "
                f"{self.n_cols}x{self.n_rows} grid, got {values.size}"
            )
        values = values.reshape(self.n_rows, self.n_cols)
        values[values == self.nodata_value] = np.nan
        values.setflags(write=False)
        object.__setattr__(self, 'values', values)

    @classmethod
    def from_header(cls, header: AscHeader, values: np.ndarray) -> 'ElevationGrid':
        """Build a grid from a parsed header and its raw samples."""
        return cls(
            n_cols=header.ncols,
            n_rows=header.nrows,
            cell_size=header.cellsize,
            nodata_value=header.nodata_value,
            values=values,
            xllcorner=header.xllcorner,
            yllcorner=header.yllcorner,
            registration=header.registration,
        )

    @property
    def shape(self) -> Tuple[int, int]:
        """``(n_rows, n_cols)``."""
        return self.n_rows, self.n_cols

    @property
    def missing_mask(self) -> np.ndarray:
        """Boolean ``(n_rows, n_cols)`` array, True where data is missing."""
        return np.isnan(self.values)

    @property
    def valid_count(self) -> int:
        """Number of cells holding a measurement."""
        return int(self.values.size - np.count_nonzero(self.missing_mask))

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Outer extent ``(min_x, min_y, max_x, max_y)`` in map units."""
        x0, y0 = self.xllcorner, self.yllcorner
        if self.registration == 'center':
            x0 -= self.cell_size / 2.0
            y0 -= self.cell_size / 2.0
        return (
            x0,
            y0,
            x0 + self.n_cols * self.cell_size,
            y0 + self.n_rows * self.cell_size,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Grid metadata (without the samples) as a plain dictionary."""
        return {
            'ncols': self.n_cols,
            'nrows': self.n_rows,
            'cellsize': self.cell_size,
            'nodata_value': self.nodata_value,
            'xllcorner': self.xllcorner,
            'yllcorner': self.yllcorner,
            'registration': self.registration,
            'bounds': list(self.bounds),
            'valid_count': self.valid_count,
        }
