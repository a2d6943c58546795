# -*- coding: utf-8 -*-
"""
Rendering - Assemble the four display products of an elevation grid.

Runs the elevation grid through normalization, color mapping, and
hillshade, and wraps each result in a ``PixelBuffer``: a row-major
uint8 image with explicit width and height.

Products
--------
- elevation grayscale, ``n_cols x n_rows``
- elevation RGB, ``n_cols x n_rows``
- hillshade grayscale, ``(n_cols - 2) x (n_rows - 2)``
- hillshade RGB, ``(n_cols - 2) x (n_rows - 2)``

Hillshade buffers of grids smaller than 3x3 have zero width or height.

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
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

# Third-party
import numpy as np

# ascviz internal
from ascviz.exceptions import ValidationError
from ascviz.IO.asc import parse_asc
from ascviz.IO.models import ElevationGrid
from ascviz.image_processing.color import (
    DEFAULT_GRADIENT,
    ColorGradient,
    ToGrayscale,
)
from ascviz.image_processing.hillshade import (
    DEFAULT_LIGHT,
    Hillshade,
    LightSource,
)
from ascviz.image_processing.intensity import ElevationStretch
from ascviz.image_processing.pipeline import Pipeline
from ascviz.vocabulary import OutputProduct

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Row-major 8-bit image.

    Parameters
    ----------
    data : np.ndarray
        uint8 array ``(height, width)`` for grayscale or
        ``(height, width, 3)`` for RGB. Row 0 is the top row.

    Raises
    ------
    ValidationError
        If *data* is not uint8 grayscale or RGB.
    """

    data: np.ndarray

    def __post_init__(self) -> None:
        if self.data.dtype != np.uint8:
            raise ValidationError(
                f"PixelBuffer data must be uint8, got {self.data.dtype}"
            )
        if not (self.data.ndim == 2
                or (self.data.ndim == 3 and self.data.shape[2] == 3)):
            raise ValidationError(
                f"PixelBuffer data must be (height, width) or "
                f"(height, width, 3), got shape {self.data.shape}"
            )

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def channels(self) -> int:
        """1 for grayscale, 3 for RGB."""
        return 1 if self.data.ndim == 2 else 3

    @property
    def mode(self) -> str:
        """Pillow-style mode string: ``'L'`` or ``'RGB'``."""
        return 'L' if self.channels == 1 else 'RGB'

    @property
    def is_empty(self) -> bool:
        """True when the buffer holds no pixels."""
        return self.data.size == 0

    def tobytes(self) -> bytes:
        """Pixels as bytes, row-major, top row first, channels interleaved."""
        return np.ascontiguousarray(self.data).tobytes()


@dataclass(frozen=True)
class RenderedProducts:
    """The four rendered products of one elevation grid."""

    elevation_gray: PixelBuffer
    elevation_rgb: PixelBuffer
    hillshade_gray: PixelBuffer
    hillshade_rgb: PixelBuffer

    def __getitem__(self, product: OutputProduct) -> PixelBuffer:
        return getattr(self, product.name.lower())

    def items(self) -> Iterator[Tuple[OutputProduct, PixelBuffer]]:
        """Yield ``(product, buffer)`` pairs in ``OutputProduct`` order."""
        for product in OutputProduct:
            yield product, self[product]


def render(
    grid: ElevationGrid,
    light: LightSource = DEFAULT_LIGHT,
    gradient: str = DEFAULT_GRADIENT,
    z_factor: float = 1.0,
    stencil: str = 'horn',
) -> RenderedProducts:
    """Render the elevation and hillshade products of *grid*.

    Parameters
    ----------
    grid : ElevationGrid
        Parsed elevation grid.
    light : LightSource
        Hillshade light direction. Default ``DEFAULT_LIGHT``.
    gradient : str
        Matplotlib colormap name for RGB products. Default ``'turbo'``.
    z_factor : float
        Hillshade vertical exaggeration. Default ``1.0``.
    stencil : str
        Hillshade stencil, ``'horn'`` or ``'central'``.

    Returns
    -------
    RenderedProducts

    Examples
    --------
    >>> from ascviz import read_asc, render
    >>> products = render(read_asc('dem.asc'), gradient='terrain')
    >>> products.hillshade_gray.width
    998
    """
    stretch = ElevationStretch()
    gray = Pipeline([stretch, ToGrayscale()]).apply(grid.values)
    rgb = Pipeline([stretch, ColorGradient(cmap=gradient)]).apply(grid.values)

    shader = Hillshade.from_light(light, z_factor=z_factor, stencil=stencil)
    shade_gray, shade_rgb = shader.shade(grid, gradient=gradient)
    logger.debug("Rendered %dx%d grid; hillshade %dx%d",
                 grid.n_cols, grid.n_rows,
                 shade_gray.shape[1], shade_gray.shape[0])

    return RenderedProducts(
        elevation_gray=PixelBuffer(gray),
        elevation_rgb=PixelBuffer(rgb),
        hillshade_gray=PixelBuffer(shade_gray),
        hillshade_rgb=PixelBuffer(shade_rgb),
    )


def render_text(raw_text: Union[str, bytes], **kwargs) -> RenderedProducts:
    """Parse ASC text and render it; *kwargs* go to :func:`render`.

    Raises
    ------
    ParseError
        If the text is not a valid ASC raster. Nothing is rendered.
    """
    return render(parse_asc(raw_text), **kwargs)
