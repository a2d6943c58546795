# -*- coding: utf-8 -*-
"""
Intensity Transforms - Elevation stretch to the [0, 1] display range.

Provides ``ElevationStretch``, the ``ImageTransform`` face of
:class:`ascviz.data_prep.Normalizer`, so normalization can be chained
with color mapping in a :class:`~ascviz.image_processing.Pipeline`.

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
"""

# Standard library
from typing import Annotated, Any

# Third-party
import numpy as np

# ascviz internal
from ascviz.data_prep.normalizer import Normalizer
from ascviz.image_processing.base import ImageTransform
from ascviz.image_processing.params import Desc, Options, Range
from ascviz.image_processing.versioning import processor_version, processor_tags
from ascviz.vocabulary import ImageModality, ProcessorCategory


@processor_version('1.0.0')
@processor_tags(modalities=[ImageModality.DEM, ImageModality.DSM],
                category=ProcessorCategory.ENHANCE)
class ElevationStretch(ImageTransform):
    """Stretch elevation values to [0, 1], keeping NaN as missing.

    Parameters
    ----------
    method : str
        ``'minmax'`` or ``'percentile'``. Default ``'minmax'``.
    plow : float
        Lower percentile for ``'percentile'``. Default ``2.0``.
    phigh : float
        Upper percentile for ``'percentile'``. Default ``98.0``.
    midpoint : float
        Output for every valid cell of a constant field. Default ``0.5``.

    Examples
    --------
    >>> from ascviz.image_processing.intensity import ElevationStretch
    >>> field = ElevationStretch().apply(grid.values)
    >>> clipped = ElevationStretch(method='percentile', plow=1.0).apply(dem)
    """

    method: Annotated[str, Options('minmax', 'percentile'),
                      Desc('Normalization method')] = 'minmax'
    plow: Annotated[float, Range(min=0.0, max=100.0),
                    Desc('Lower percentile')] = 2.0
    phigh: Annotated[float, Range(min=0.0, max=100.0),
                     Desc('Upper percentile')] = 98.0
    midpoint: Annotated[float, Range(min=0.0, max=1.0),
                        Desc('Value for constant fields')] = 0.5

    def __init__(
        self,
        method: str = 'minmax',
        plow: float = 2.0,
        phigh: float = 98.0,
        midpoint: float = 0.5,
    ) -> None:
        self.method = method
        self.plow = plow
        self.phigh = phigh
        self.midpoint = midpoint
        self._validate_params()

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the stretch.

        Parameters
        ----------
        source : np.ndarray
            Elevation array of any shape; NaN marks missing cells.

        Returns
        -------
        np.ndarray
            float64 array, same shape, values in [0, 1] or NaN.
        """
        params = self._resolve_params(kwargs)
        norm = Normalizer(
            method=params['method'],
            percentile_low=params['plow'],
            percentile_high=params['phigh'],
            midpoint=params['midpoint'],
        )
        return norm.normalize(source)
