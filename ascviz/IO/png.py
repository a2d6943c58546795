# -*- coding: utf-8 -*-
"""
PNG Writer - Encode rendered grayscale and RGB images with Pillow.

``(rows, cols)`` uint8 arrays become 8-bit ``'L'`` PNGs and
``(rows, cols, 3)`` arrays become ``'RGB'`` PNGs; Pillow infers the mode
from the array. Float arrays are stretched to 0-255 with a warning,
NaN becoming 0.

Dependencies
------------
Pillow

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
import warnings

# Third-party
import numpy as np
from PIL import Image

# ascviz internal
from ascviz.data_prep.normalizer import normalize
from ascviz.IO.base import ImageWriter

logger = logging.getLogger(__name__)


def _float_to_uint8(data: np.ndarray) -> np.ndarray:
    """Min-max stretch to [0, 255]; NaN and constant images become 0."""
    t = np.nan_to_num(normalize(data, midpoint=0.0), nan=0.0)
    return np.rint(t * 255.0).astype(np.uint8)


class PngWriter(ImageWriter):
    """Write a rendered image to a PNG file.

    ``metadata`` is not embedded in the PNG.

    Examples
    --------
    >>> from ascviz.IO.png import PngWriter
    >>> with PngWriter('hillshade.png') as writer:
    ...     writer.write(products.hillshade_gray.data)
    """

    def write(self, data: np.ndarray) -> None:
        """Encode *data* as PNG.

        Parameters
        ----------
        data : np.ndarray
            ``(rows, cols)`` or ``(rows, cols, 3)``; uint8, or float
            (stretched to 0-255 with a ``UserWarning``). Other integer
            types are clipped to 0-255.

        Raises
        ------
        ValueError
            If the array is not a grayscale or RGB image.
        ValidationError
            If the image has no pixels.
        """
        self._check_image(data)

        if np.issubdtype(data.dtype, np.floating):
            warnings.warn(
                f"Float array (dtype={data.dtype}) auto-normalized to "
                f"uint8 [0, 255] for PNG output.",
                UserWarning,
                stacklevel=2,
            )
            data = _float_to_uint8(data)
        elif data.dtype != np.uint8:
            data = np.clip(data, 0, 255).astype(np.uint8)

        Image.fromarray(np.ascontiguousarray(data)).save(str(self.filepath))
        logger.debug("Wrote %s PNG %s", 'RGB' if data.ndim == 3 else 'L',
                     self.filepath)
