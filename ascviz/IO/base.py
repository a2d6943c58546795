# -*- coding: utf-8 -*-
"""
IO Base Classes - Contracts for elevation readers and image writers.

``ImageReader`` loads one elevation raster file into an
``ElevationGrid``; every array accessor (shape, chips, geolocation) is
derived from that grid, so a format only has to implement loading.
``ImageWriter`` takes a rendered 8-bit image and encodes it to one file.

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
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

# Third-party
import numpy as np

# ascviz internal
from ascviz.exceptions import ValidationError
from ascviz.IO.models import ElevationGrid


class _Closing:
    """``with`` support: leaving the block calls ``close()``."""

    def close(self) -> None:
        """Release resources. Nothing to release by default."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class ImageReader(_Closing, ABC):
    """
    Base class for elevation raster readers.

    The file is loaded once, at construction, by ``_load()``.

    Attributes
    ----------
    filepath : Path
        Raster file being read.
    metadata : Dict[str, Any]
        Header and grid summary, filled in by ``_load()``.

    Raises
    ------
    FileNotFoundError
        If *filepath* is not an existing file.
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        self.filepath = Path(filepath)
        if not self.filepath.is_file():
            raise FileNotFoundError(f"File not found: {self.filepath}")
        self.metadata: Dict[str, Any] = {}
        self._load()

    @abstractmethod
    def _load(self) -> None:
        """Parse ``self.filepath`` and populate ``self.metadata``."""

    @abstractmethod
    def read_grid(self) -> ElevationGrid:
        """The parsed elevation grid."""

    def get_shape(self) -> Tuple[int, int]:
        """``(rows, cols)`` of the raster."""
        return self.read_grid().shape

    def get_dtype(self) -> np.dtype:
        return self.read_grid().values.dtype

    def read_chip(
        self,
        row_start: int,
        row_end: int,
        col_start: int,
        col_end: int,
    ) -> np.ndarray:
        """Copy of the elevations in ``[row_start:row_end, col_start:col_end]``.

        Missing cells are NaN.

        Raises
        ------
        ValueError
            If the window is empty or extends past the grid.
        """
        rows, cols = self.get_shape()
        if not (0 <= row_start < row_end <= rows
                and 0 <= col_start < col_end <= cols):
            raise ValueError(
                f"Chip [{row_start}:{row_end}, {col_start}:{col_end}] "
                f"out of bounds for shape {(rows, cols)}"
            )
        return self.read_grid().values[row_start:row_end,
                                       col_start:col_end].copy()

    def read_full(self) -> np.ndarray:
        """Writable copy of every elevation."""
        return self.read_grid().values.copy()

    def get_geolocation(self) -> Dict[str, Any]:
        """Map placement: outer bounds, cell size, and reference point."""
        grid = self.read_grid()
        return {
            'bounds': grid.bounds,
            'cellsize': grid.cell_size,
            'xllcorner': grid.xllcorner,
            'yllcorner': grid.yllcorner,
            'registration': grid.registration,
        }


class ImageWriter(_Closing, ABC):
    """
    Base class for rendered image writers.

    Attributes
    ----------
    filepath : Path
        Destination file.
    metadata : Dict[str, Any]
        Extra information a format may store next to the pixels.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.filepath = Path(filepath)
        self.metadata = dict(metadata) if metadata else {}

    @abstractmethod
    def write(self, data: np.ndarray) -> None:
        """Encode *data* to ``self.filepath``.

        Parameters
        ----------
        data : np.ndarray
            ``(rows, cols)`` grayscale or ``(rows, cols, 3)`` RGB image.
        """

    @staticmethod
    def _check_image(data: np.ndarray) -> None:
        """Reject arrays that are not a non-empty grayscale or RGB image.

        Raises
        ------
        ValueError
            If the shape is neither ``(rows, cols)`` nor
            ``(rows, cols, 3)``.
        ValidationError
            If the image has no pixels.
        """
        if not (data.ndim == 2 or (data.ndim == 3 and data.shape[2] == 3)):
            raise ValueError(
                f"Expected 2D grayscale (rows, cols) or 3D RGB "
                f"(rows, cols, 3), got shape {data.shape}"
            )
        if data.shape[0] == 0 or data.shape[1] == 0:
            raise ValidationError(
                f"Cannot write an empty image of shape {data.shape}"
            )
