# -*- coding: utf-8 -*-
"""
Data Preparation Module - Elevation normalization.

Provides missing-data aware normalization of elevation values to the
[0, 1] display range.

Key Classes
-----------
- Normalizer: min-max / percentile normalization with fit/transform

Usage
-----
    >>> from ascviz.data_prep import Normalizer, normalize
    >>> field = normalize(grid.values)
    >>> shared = Normalizer().fit(reference_grid.values)
    >>> field = shared.transform(other_grid.values)

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

from ascviz.data_prep.normalizer import Normalizer, normalize

__all__ = [
    'Normalizer',
    'normalize',
]
