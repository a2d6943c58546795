# -*- coding: utf-8 -*-
"""
Hillshade - Simulated illumination of an elevation surface.

For every interior cell (one with a full 3x3 neighborhood) the surface
gradient is estimated with a finite-difference stencil, turned into a
unit surface normal, and dotted with a unit light vector. The result is
the illumination in [0, 1]; faces turned away from the light clip to 0.

Border cells are not shaded: the output of an ``(rows, cols)`` grid is
``(rows - 2, cols - 2)``, and grids with fewer than three rows or
columns give an empty result.

Stencils
--------
``'horn'`` (default)
    Horn's 3x3 Sobel-weighted differences, divided by ``8 * cell_size``.
    Reads all nine cells.
``'central'``
    Plain central differences, divided by ``2 * cell_size``. Reads the
    center and its four edge neighbors.

A cell whose stencil reads a missing (NaN) value is itself missing in
the output; NaN never enters the shading arithmetic.

Geometry
--------
Columns grow eastwards and rows grow southwards. With ``p = dz/dx_east``
and ``q = dz/dy_north`` the surface normal is ``(-p, -q, 1)``. The light
vector for azimuth ``A`` (clockwise from north) and altitude ``h`` is
``(sin A cos h, cos A cos h, sin h)``.

Dependencies
------------
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

# Standard library
import logging
from dataclasses import dataclass
from typing import Annotated, Any, Sequence, Tuple, TYPE_CHECKING

# Third-party
import numpy as np
from scipy.ndimage import correlate, maximum_filter

# ascviz internal
from ascviz.data_prep.normalizer import normalize
from ascviz.exceptions import ValidationError
from ascviz.image_processing.base import ImageTransform
from ascviz.image_processing.color import (
    DEFAULT_GRADIENT,
    MISSING_RGB,
    GradientLike,
    _validate_color,
    to_grayscale,
    to_rgb,
)
from ascviz.image_processing.params import Desc, Options, Range
from ascviz.image_processing.versioning import processor_version, processor_tags
from ascviz.vocabulary import ImageModality, ProcessorCategory

if TYPE_CHECKING:
    from ascviz.IO.models import ElevationGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LightSource:
    """Direction of the light illuminating the surface.

    Parameters
    ----------
    azimuth : float
        Compass direction the light comes from, degrees clockwise from
        north, in [0, 360]. 315 is northwest.
    altitude : float
        Angle of the light above the horizon, degrees in [0, 90].

    Raises
    ------
    ValidationError
        If either angle is out of range.
    """

    azimuth: float = 315.0
    altitude: float = 45.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.azimuth <= 360.0:
            raise ValidationError(
                f"azimuth must be in [0, 360], got {self.azimuth}"
            )
        if not 0.0 <= self.altitude <= 90.0:
            raise ValidationError(
                f"altitude must be in [0, 90], got {self.altitude}"
            )

    @property
    def vector(self) -> np.ndarray:
        """Unit light vector ``(east, north, up)``."""
        az = np.radians(self.azimuth)
        alt = np.radians(self.altitude)
        return np.array([
            np.sin(az) * np.cos(alt),
            np.cos(az) * np.cos(alt),
            np.sin(alt),
        ])


#: Northwest light at 45 degrees, the conventional cartographic default.
DEFAULT_LIGHT = LightSource(azimuth=315.0, altitude=45.0)

# (x kernel, row kernel, divisor, footprint); applied with correlate()
_STENCILS = {
    'horn': (
        np.array([[-1.0, 0.0, 1.0],
                  [-2.0, 0.0, 2.0],
                  [-1.0, 0.0, 1.0]]),
        np.array([[-1.0, -2.0, -1.0],
                  [0.0, 0.0, 0.0],
                  [1.0, 2.0, 1.0]]),
        8.0,
        np.ones((3, 3), dtype=bool),
    ),
    'central': (
        np.array([[0.0, 0.0, 0.0],
                  [-1.0, 0.0, 1.0],
                  [0.0, 0.0, 0.0]]),
        np.array([[0.0, -1.0, 0.0],
                  [0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0]]),
        2.0,
        np.array([[False, True, False],
                  [True, True, True],
                  [False, True, False]]),
    ),
}


@processor_version('1.0.0')
@processor_tags(modalities=[ImageModality.DEM, ImageModality.DSM],
                category=ProcessorCategory.TERRAIN)
class Hillshade(ImageTransform):
    """Illumination of the interior cells of an elevation raster.

    ``apply()`` returns the illumination field in [0, 1] (NaN where
    missing); ``shade()`` renders an ``ElevationGrid`` to grayscale and
    RGB hillshade images.

    Parameters
    ----------
    azimuth : float
        Light azimuth, degrees clockwise from north. Default ``315.0``.
    altitude : float
        Light altitude above the horizon, degrees. Default ``45.0``.
    z_factor : float
        Vertical exaggeration applied to elevations. Default ``1.0``.
    stencil : str
        ``'horn'`` or ``'central'``. Default ``'horn'``.

    Examples
    --------
    >>> from ascviz.image_processing.hillshade import Hillshade
    >>> illum = Hillshade(azimuth=270.0).apply(dem, cell_size=30.0)
    >>> gray, rgb = Hillshade().shade(grid)
    """

    azimuth: Annotated[float, Range(min=0.0, max=360.0),
                       Desc('Light azimuth (degrees from north)')] = 315.0
    altitude: Annotated[float, Range(min=0.0, max=90.0),
                        Desc('Light altitude (degrees)')] = 45.0
    z_factor: Annotated[float, Range(min=0.0),
                        Desc('Vertical exaggeration')] = 1.0
    stencil: Annotated[str, Options('horn', 'central'),
                       Desc('Finite-difference stencil')] = 'horn'

    def __init__(
        self,
        azimuth: float = DEFAULT_LIGHT.azimuth,
        altitude: float = DEFAULT_LIGHT.altitude,
        z_factor: float = 1.0,
        stencil: str = 'horn',
    ) -> None:
        self.azimuth = azimuth
        self.altitude = altitude
        self.z_factor = z_factor
        self.stencil = stencil
        self._validate_params()

    @classmethod
    def from_light(cls, light: LightSource, **kwargs: Any) -> 'Hillshade':
        """Build a hillshade lit by *light*; other params via *kwargs*."""
        return cls(azimuth=light.azimuth, altitude=light.altitude, **kwargs)

    @property
    def light(self) -> LightSource:
        """The configured light direction."""
        return LightSource(self.azimuth, self.altitude)

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Compute the illumination of the interior cells.

        Parameters
        ----------
        source : np.ndarray
            2D elevation array ``(rows, cols)``; NaN marks missing.
        cell_size : float, optional
            Horizontal spacing of the cells, in elevation units.
            Default ``1.0``.
        **kwargs
            Per-call overrides of the tunable parameters.

        Returns
        -------
        np.ndarray
            float64 array ``(rows - 2, cols - 2)`` (zero-sized for grids
            smaller than 3x3), values in [0, 1] or NaN where the stencil
            touched a missing cell.

        Raises
        ------
        ValidationError
            If *source* is not 2D or *cell_size* is not positive.
        """
        params = self._resolve_params(kwargs)
        cell_size = kwargs.get('cell_size', 1.0)
        if source.ndim != 2:
            raise ValidationError(
                f"Expected 2D elevation array, got shape {source.shape}"
            )
        if not cell_size > 0:
            raise ValidationError(
                f"cell_size must be positive, got {cell_size}"
            )

        rows, cols = source.shape
        out_shape = (max(rows - 2, 0), max(cols - 2, 0))
        if rows < 3 or cols < 3:
            logger.warning(
                "Grid %dx%d is too small to shade; hillshade is empty",
                rows, cols,
            )
            return np.empty(out_shape, dtype=np.float64)

        kx, ky, divisor, footprint = _STENCILS[params['stencil']]
        elev = source.astype(np.float64)
        missing = np.isnan(elev)
        z = np.where(missing, 0.0, elev) * params['z_factor']

        inner = (slice(1, -1), slice(1, -1))
        spacing = divisor * cell_size
        dzdx = correlate(z, kx, mode='nearest')[inner] / spacing
        dzdrow = correlate(z, ky, mode='nearest')[inner] / spacing
        self._report_progress(kwargs, 0.5)

        # north gradient is the negated row gradient
        le, ln, lu = self.light_vector(params)
        illum = (-dzdx * le + dzdrow * ln + lu) / np.sqrt(
            dzdx * dzdx + dzdrow * dzdrow + 1.0
        )
        illum = np.clip(illum, 0.0, 1.0)

        touched = maximum_filter(
            missing.astype(np.uint8), footprint=footprint,
            mode='constant', cval=0,
        )[inner].astype(bool)
        illum[touched] = np.nan
        logger.debug("Hillshade %dx%d: %d missing cells",
                     out_shape[0], out_shape[1], int(touched.sum()))
        self._report_progress(kwargs, 1.0)
        return illum

    @staticmethod
    def light_vector(params: dict) -> np.ndarray:
        """Unit light vector for resolved *params*."""
        return LightSource(params['azimuth'], params['altitude']).vector

    def shade(
        self,
        grid: 'ElevationGrid',
        gradient: GradientLike = DEFAULT_GRADIENT,
        missing_color: Sequence[int] = MISSING_RGB,
        **kwargs: Any,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Render grayscale and RGB hillshade images of *grid*.

        Grayscale is the illumination scaled to [0, 255]. RGB is the
        elevation color of each cell (elevation normalized over the
        whole grid, mapped through *gradient*) multiplied by the
        illumination. Missing cells are 0 in grayscale and
        *missing_color* in RGB.

        Parameters
        ----------
        grid : ElevationGrid
            Parsed elevation grid; its ``cell_size`` scales gradients.
        gradient : str or matplotlib.colors.Colormap
            Base color gradient. Default ``'turbo'``.
        missing_color : Sequence[int]
            RGB for missing cells. Default ``MISSING_RGB``.
        **kwargs
            Per-call overrides of the tunable parameters.

        Returns
        -------
        Tuple[np.ndarray, np.ndarray]
            ``(gray, rgb)`` uint8 arrays of shape ``(rows - 2, cols - 2)``
            and ``(rows - 2, cols - 2, 3)``.
        """
        missing_color = _validate_color(missing_color)
        illum = self.apply(grid.values, cell_size=grid.cell_size, **kwargs)
        if illum.size == 0:
            return (
                np.zeros(illum.shape, dtype=np.uint8),
                np.zeros(illum.shape + (3,), dtype=np.uint8),
            )

        gray = to_grayscale(illum)

        missing = np.isnan(illum)
        base = to_rgb(normalize(grid.values)[1:-1, 1:-1], gradient=gradient)
        lit = np.where(missing, 0.0, illum)[..., np.newaxis]
        rgb = np.rint(base * lit).astype(np.uint8)
        rgb[missing] = missing_color
        return gray, rgb


def hillshade(
    grid: 'ElevationGrid',
    light: LightSource = DEFAULT_LIGHT,
    gradient: GradientLike = DEFAULT_GRADIENT,
    z_factor: float = 1.0,
    stencil: str = 'horn',
) -> Tuple[np.ndarray, np.ndarray]:
    """Grayscale and RGB hillshade of *grid* lit by *light*.

    Shorthand for ``Hillshade.from_light(light, ...).shade(grid, gradient)``.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        ``(gray, rgb)`` uint8 arrays covering the interior cells.
    """
    shader = Hillshade.from_light(light, z_factor=z_factor, stencil=stencil)
    return shader.shade(grid, gradient=gradient)
