# -*- coding: utf-8 -*-
"""
Image Processing Module - Stretch, color mapping, and hillshade transforms.

Provides the raster transforms that turn an elevation grid into display
images. All processors inherit from ``ImageProcessor`` which provides
version checking and tunable parameter validation.

Sub-modules
-----------
intensity.py
    ``ElevationStretch`` -- missing-aware normalization to [0, 1].
color.py
    ``to_grayscale``, ``to_rgb``, ``ToGrayscale``, ``ColorGradient``.
hillshade.py
    ``Hillshade``, ``LightSource``, ``DEFAULT_LIGHT``, ``hillshade``.
pipeline.py
    Sequential composition of ``ImageTransform`` steps.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
params.py
    ``Range``, ``Options``, ``Desc`` constraint markers for tunable
    parameters via ``Annotated`` type hints.

Usage
-----
    >>> from ascviz.image_processing import (
    ...     ElevationStretch, Hillshade, Pipeline, ToGrayscale,
    ... )
    >>> gray = Pipeline([ElevationStretch(), ToGrayscale()]).apply(dem)
    >>> illum = Hillshade(azimuth=270.0, altitude=30.0).apply(dem)

Dependencies
------------
scipy
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

from ascviz.image_processing.base import ImageProcessor, ImageTransform
from ascviz.image_processing.intensity import ElevationStretch
from ascviz.image_processing.color import (
    DEFAULT_GRADIENT,
    MISSING_GRAY,
    MISSING_RGB,
    ColorGradient,
    ToGrayscale,
    get_gradient,
    to_grayscale,
    to_rgb,
)
from ascviz.image_processing.hillshade import (
    DEFAULT_LIGHT,
    Hillshade,
    LightSource,
    hillshade,
)
from ascviz.image_processing.pipeline import Pipeline
from ascviz.image_processing.versioning import (
    ProcessorTags,
    processor_tags,
    processor_version,
)
from ascviz.image_processing.params import Range, Options, Desc, ParamSpec

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'ElevationStretch',
    'DEFAULT_GRADIENT',
    'MISSING_GRAY',
    'MISSING_RGB',
    'ColorGradient',
    'ToGrayscale',
    'get_gradient',
    'to_grayscale',
    'to_rgb',
    'DEFAULT_LIGHT',
    'Hillshade',
    'LightSource',
    'hillshade',
    'Pipeline',
    'processor_version',
    'processor_tags',
    'ProcessorTags',
    'Range',
    'Options',
    'Desc',
    'ParamSpec',
]
