# -*- coding: utf-8 -*-
"""
Color Mapping - Normalized values to grayscale intensities and RGB colors.

Maps normalized elevation (or illumination) values in [0, 1] to display
bytes:

- ``to_grayscale``: ``round(t * 255)``; missing (NaN) renders as 0,
  the darkest shade.
- ``to_rgb``: ``t`` through a continuous color gradient (a matplotlib
  colormap, ``turbo`` by default); missing renders as ``MISSING_RGB``.

Inputs outside [0, 1] are clipped, so both functions are total and
never emit NaN or out-of-range bytes. ``ToGrayscale`` and
``ColorGradient`` wrap them as ``ImageTransform`` steps.

Dependencies
------------
matplotlib

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
from typing import Annotated, Any, Sequence, Tuple, Union

# Third-party
import numpy as np
import matplotlib
from matplotlib.colors import Colormap

# ascviz internal
from ascviz.exceptions import ProcessorError, ValidationError
from ascviz.image_processing.base import ImageTransform
from ascviz.image_processing.params import Desc
from ascviz.image_processing.versioning import processor_version, processor_tags
from ascviz.vocabulary import ProcessorCategory


#: Default elevation palette.
DEFAULT_GRADIENT = 'turbo'

#: Intensity drawn for missing cells.
MISSING_GRAY = 0

#: Color drawn for missing cells. ``turbo`` never reaches pure black.
MISSING_RGB: Tuple[int, int, int] = (0, 0, 0)

GradientLike = Union[str, Colormap]


def get_gradient(gradient: GradientLike = DEFAULT_GRADIENT) -> Colormap:
    """Resolve a gradient name or colormap to a matplotlib ``Colormap``.

    Parameters
    ----------
    gradient : str or matplotlib.colors.Colormap
        Registered colormap name (e.g. ``'turbo'``, ``'terrain'``,
        ``'viridis'``) or a ``Colormap`` instance, returned unchanged.

    Returns
    -------
    matplotlib.colors.Colormap

    Raises
    ------
    ValidationError
        If *gradient* is not a registered colormap name.
    """
    if isinstance(gradient, Colormap):
        return gradient
    try:
        return matplotlib.colormaps[gradient]
    except KeyError:
        raise ValidationError(
            f"Unknown color gradient {gradient!r}"
        ) from None


def _validate_color(color: Sequence[int]) -> Tuple[int, int, int]:
    if len(color) != 3 or not all(
        isinstance(c, (int, np.integer)) and 0 <= c <= 255 for c in color
    ):
        raise ValidationError(
            f"missing_color must be three integers in [0, 255], got {color!r}"
        )
    return tuple(int(c) for c in color)


def to_grayscale(normalized):
    """Map normalized values to 8-bit intensities.

    Parameters
    ----------
    normalized : float or array_like
        Values in [0, 1]; NaN marks missing.

    Returns
    -------
    int or np.ndarray
        ``int`` for scalar input, otherwise a uint8 array of the same
        shape. Missing maps to ``MISSING_GRAY``.

    Examples
    --------
    >>> to_grayscale(1.0)
    255
    >>> to_grayscale(float('nan'))
    0
    """
    arr = np.asarray(normalized, dtype=np.float64)
    missing = np.isnan(arr)
    t = np.clip(np.where(missing, 0.0, arr), 0.0, 1.0)
    out = np.where(missing, MISSING_GRAY, np.rint(t * 255.0)).astype(np.uint8)
    if out.ndim == 0:
        return int(out)
    return out


def to_rgb(
    normalized,
    gradient: GradientLike = DEFAULT_GRADIENT,
    missing_color: Sequence[int] = MISSING_RGB,
):
    """Map normalized values to RGB colors through a gradient.

    Parameters
    ----------
    normalized : float or array_like
        Values in [0, 1]; NaN marks missing.
    gradient : str or matplotlib.colors.Colormap
        Color gradient. Default ``'turbo'``.
    missing_color : Sequence[int]
        RGB drawn for missing values. Default ``MISSING_RGB``.

    Returns
    -------
    tuple or np.ndarray
        ``(r, g, b)`` ints for scalar input, otherwise a uint8 array of
        shape ``normalized.shape + (3,)``.

    Raises
    ------
    ValidationError
        If the gradient name or missing color is invalid.
    ProcessorError
        If the gradient does not return RGB(A) colors.
    """
    cmap = get_gradient(gradient)
    missing_color = _validate_color(missing_color)

    arr = np.asarray(normalized, dtype=np.float64)
    missing = np.isnan(arr)
    t = np.clip(np.where(missing, 0.0, arr), 0.0, 1.0)

    colors = np.asarray(cmap(t, bytes=True))
    if colors.shape[:-1] != arr.shape or colors.shape[-1] not in (3, 4):
        raise ProcessorError(
            f"Gradient {cmap.name!r} returned colors of shape "
            f"{colors.shape} for input of shape {arr.shape}"
        )
    rgb = colors[..., :3].astype(np.uint8)
    rgb[missing] = missing_color
    if arr.ndim == 0:
        return tuple(int(c) for c in rgb)
    return rgb


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.COLOR)
class ToGrayscale(ImageTransform):
    """Map a normalized field to a uint8 grayscale image.

    Examples
    --------
    >>> gray = ToGrayscale().apply(normalized)   # (rows, cols) uint8
    """

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the grayscale mapping.

        Parameters
        ----------
        source : np.ndarray
            Normalized values in [0, 1]; NaN marks missing.

        Returns
        -------
        np.ndarray
            uint8 array, same shape as *source*.
        """
        return to_grayscale(np.atleast_1d(source)).reshape(np.shape(source))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.COLOR)
class ColorGradient(ImageTransform):
    """Map a normalized field to a uint8 RGB image through a colormap.

    Parameters
    ----------
    cmap : str
        Registered matplotlib colormap name. Default ``'turbo'``.
    missing_color : Sequence[int]
        RGB drawn for missing cells. Default ``MISSING_RGB``.

    Raises
    ------
    ValidationError
        If *cmap* is not a registered colormap.

    Examples
    --------
    >>> rgb = ColorGradient(cmap='terrain').apply(normalized)
    """

    cmap: Annotated[str, Desc('Matplotlib colormap name')] = DEFAULT_GRADIENT

    def __init__(
        self,
        cmap: str = DEFAULT_GRADIENT,
        missing_color: Sequence[int] = MISSING_RGB,
    ) -> None:
        self.cmap = cmap
        self._validate_params()
        get_gradient(cmap)
        self.missing_color = _validate_color(missing_color)

    @property
    def gradient(self) -> Colormap:
        """The resolved matplotlib colormap."""
        return get_gradient(self.cmap)

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the color gradient.

        Parameters
        ----------
        source : np.ndarray
            Normalized values in [0, 1]; NaN marks missing.

        Returns
        -------
        np.ndarray
            uint8 array, shape ``source.shape + (3,)``.
        """
        params = self._resolve_params(kwargs)
        return to_rgb(
            np.atleast_1d(source),
            gradient=params['cmap'],
            missing_color=self.missing_color,
        ).reshape(np.shape(source) + (3,))
