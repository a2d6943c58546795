# -*- coding: utf-8 -*-
"""
ascviz - Quick-look rendering of ASC elevation rasters.

Parses ESRI ASCII grid rasters and renders them as grayscale and
color-gradient elevation maps and as grayscale and color hillshades,
without a full GIS stack.

Dependencies
------------
numpy
scipy
matplotlib
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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from ascviz.exceptions import (
    AscvizError,
    ValidationError,
    ProcessorError,
    ParseError,
    InvalidEncodingError,
    InvalidHeaderError,
    TruncatedDataError,
    InvalidSampleError,
)
from ascviz.vocabulary import (
    ImageModality,
    ProcessorCategory,
    OutputProduct,
    OutputFormat,
)
from ascviz.IO import ElevationGrid, AscReader, parse_asc, read_asc
from ascviz.data_prep import Normalizer, normalize
from ascviz.image_processing import (
    DEFAULT_LIGHT,
    LightSource,
    hillshade,
    to_grayscale,
    to_rgb,
)
from ascviz.rendering import PixelBuffer, RenderedProducts, render, render_text

__all__ = [
    'AscvizError',
    'ValidationError',
    'ProcessorError',
    'ParseError',
    'InvalidEncodingError',
    'InvalidHeaderError',
    'TruncatedDataError',
    'InvalidSampleError',
    'ImageModality',
    'ProcessorCategory',
    'OutputProduct',
    'OutputFormat',
    'ElevationGrid',
    'AscReader',
    'parse_asc',
    'read_asc',
    'Normalizer',
    'normalize',
    'DEFAULT_LIGHT',
    'LightSource',
    'hillshade',
    'to_grayscale',
    'to_rgb',
    'PixelBuffer',
    'RenderedProducts',
    'render',
    'render_text',
]
