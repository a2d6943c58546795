# -*- coding: utf-8 -*-
"""
IO Module - Reading ASC elevation rasters and writing rendered images.

The ASC reader turns ESRI ASCII grid text into an ``ElevationGrid``.
Writers encode rendered uint8 images to PNG (Pillow) or to NumPy
``.npy`` files with a JSON sidecar. ``get_writer`` and ``write`` select
a writer by format name or file extension.

Dependencies
------------
Pillow

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
import importlib
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional, Union

# Third-party
import numpy as np

# Base classes and models
from ascviz.IO.base import ImageReader, ImageWriter
from ascviz.IO.models import AscHeader, ElevationGrid

# Readers
from ascviz.IO.asc import AscReader, parse_asc, parse_header, read_asc


class _WriterEntry(NamedTuple):
    module: str
    cls: str
    extension: str


_WRITERS: Dict[str, _WriterEntry] = {
    'png': _WriterEntry('ascviz.IO.png', 'PngWriter', '.png'),
    'numpy': _WriterEntry('ascviz.IO.numpy_io', 'NumpyWriter', '.npy'),
}

#: File extension written for each format.
FORMAT_EXTENSIONS: Dict[str, str] = {
    name: entry.extension for name, entry in _WRITERS.items()
}


def _format_for(path: Path) -> str:
    suffix = path.suffix.lower()
    for name, entry in _WRITERS.items():
        if entry.extension == suffix:
            return name
    raise ValueError(
        f"No writer for extension '{suffix}' (known: "
        f"{sorted(FORMAT_EXTENSIONS.values())}); pass format= explicitly."
    )


def get_writer(
    format: str,
    filepath: Union[str, Path],
    metadata: Optional[Dict[str, Any]] = None,
) -> ImageWriter:
    """Build the writer registered under *format*.

    The writer module is imported on demand, so Pillow is only loaded
    when PNG output is requested.

    Parameters
    ----------
    format : str
        ``'png'`` or ``'numpy'``, any case.
    filepath : str or Path
        Destination file.
    metadata : Dict[str, Any], optional
        Forwarded to the writer.

    Returns
    -------
    ImageWriter

    Raises
    ------
    ValueError
        For an unregistered format.
    """
    entry = _WRITERS.get(format.lower())
    if entry is None:
        raise ValueError(
            f"Unknown writer format: {format!r} "
            f"(choose from {sorted(_WRITERS)})"
        )
    writer_cls = getattr(importlib.import_module(entry.module), entry.cls)
    return writer_cls(filepath, metadata=metadata)


def write(
    data: np.ndarray,
    path: Union[str, Path],
    metadata: Optional[Dict[str, Any]] = None,
    format: Optional[str] = None,
) -> None:
    """Write *data* to *path*, picking the format from the extension
    unless *format* is given.

    Raises
    ------
    ValueError
        If no format is given and the extension is unknown.

    Examples
    --------
    >>> from ascviz.IO import write
    >>> write(products.hillshade_gray.data, 'hillshade.png')
    """
    path = Path(path)
    with get_writer(format or _format_for(path), path,
                    metadata=metadata) as writer:
        writer.write(data)


__all__ = [
    'ImageReader',
    'ImageWriter',
    'AscHeader',
    'ElevationGrid',
    'AscReader',
    'parse_asc',
    'parse_header',
    'read_asc',
    'get_writer',
    'write',
    'FORMAT_EXTENSIONS',
]
