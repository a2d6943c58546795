# -*- coding: utf-8 -*-
"""
NumPy Writer - Write arrays to NumPy .npy format with a JSON sidecar.

Writes a single array to a ``.npy`` file and a ``<name>.npy.json``
sidecar holding the array shape, dtype, and any metadata passed to the
writer (for rendered products, the source grid header).

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
import json
from typing import Any, Dict

# Third-party
import numpy as np

# ascviz internal
from ascviz.IO.base import ImageWriter


class NumpyWriter(ImageWriter):
    """Write an array to ``.npy`` plus a JSON metadata sidecar.

    Parameters
    ----------
    filepath : str or Path
        Output file path (``.npy``).
    metadata : Dict[str, Any], optional
        Extra keys for the sidecar. ``'shape'`` and ``'dtype'`` are
        filled in automatically.

    Examples
    --------
    >>> from ascviz.IO.numpy_io import NumpyWriter
    >>> with NumpyWriter('hillshade.npy', metadata=grid.to_dict()) as w:
    ...     w.write(gray)
    """

    def write(self, data: np.ndarray) -> None:
        """Write a rendered image to a .npy file and its sidecar.

        Parameters
        ----------
        data : np.ndarray
            ``(rows, cols)`` grayscale or ``(rows, cols, 3)`` RGB image.

        Raises
        ------
        ValueError
            If the array is not a grayscale or RGB image.
        ValidationError
            If the image has no pixels.
        """
        self._check_image(data)
        np.save(str(self.filepath), data)
        self._write_sidecar(data)

    def _write_sidecar(self, data: np.ndarray) -> None:
        sidecar: Dict[str, Any] = dict(self.metadata)
        sidecar['shape'] = list(data.shape)
        sidecar['dtype'] = str(data.dtype)

        sidecar_path = self.filepath.with_suffix(
            self.filepath.suffix + '.json'
        )
        with open(sidecar_path, 'w') as f:
            json.dump(sidecar, f, indent=2, default=str)
