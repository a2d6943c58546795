# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the ascviz package.

Single source of truth for controlled vocabularies: processor categories
used for tagging, the four rendered output products, and the supported
output file formats.

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

from enum import Enum


class ImageModality(Enum):
    """Raster modalities a processor is designed for."""

    DEM = "DEM"
    DSM = "DSM"


class ProcessorCategory(Enum):
    """Processing categories for processor tagging."""

    ENHANCE = "enhance"
    COLOR = "color"
    TERRAIN = "terrain"


class OutputProduct(Enum):
    """The rendered products produced for every elevation grid.

    Values double as the file-name stem used by the command-line tool.
    """

    ELEVATION_GRAY = "output"
    ELEVATION_RGB = "output_rgb"
    HILLSHADE_GRAY = "hillshade_gray"
    HILLSHADE_RGB = "hillshade_rgb"


class OutputFormat(Enum):
    """Supported output file formats for ``ascviz.IO.get_writer``."""

    PNG = "png"
    NUMPY = "numpy"
