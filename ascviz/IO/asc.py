# -*- coding: utf-8 -*-
"""
ASC Reader - Parse ESRI ASCII grid rasters into elevation grids.

An ASC raster is plain text: a header of ``key value`` pairs followed by
``ncols * nrows`` whitespace-separated elevation samples in row-major
order, top row first::

    ncols         5
    nrows         5
    xllcorner     0
    yllcorner     0
    cellsize      1
    nodata_value  -9999
    1 2 3 4 5
    ...

Header keys are case-insensitive and may come in any order, one per
line or several on a line. ``xllcenter`` / ``yllcenter`` are accepted
in place of the corner keys. All six fields are required.

``parse_asc`` works on text already in memory; ``AscReader`` loads a
file and exposes it through the ``ImageReader`` interface.

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
import logging
import math
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

# Third-party
import numpy as np

# ascviz internal
from ascviz.exceptions import (
    InvalidEncodingError,
    InvalidHeaderError,
    InvalidSampleError,
    TruncatedDataError,
)
from ascviz.IO.base import ImageReader
from ascviz.IO.models import AscHeader, ElevationGrid

logger = logging.getLogger(__name__)

REQUIRED_KEYS = (
    'ncols', 'nrows', 'xllcorner', 'yllcorner', 'cellsize', 'nodata_value',
)
_ALIASES = {'xllcenter': 'xllcorner', 'yllcenter': 'yllcorner'}
_HEADER_KEYS = frozenset(REQUIRED_KEYS) | frozenset(_ALIASES)
_INT_KEYS = ('ncols', 'nrows')


def _header_value(key: str, token: str) -> Union[int, float]:
    """Convert one header value token, raising ``InvalidHeaderError``."""
    if key in _INT_KEYS:
        try:
            value = int(token)
        except ValueError:
            raise InvalidHeaderError(
                key, f"{token!r} is not an integer"
            ) from None
        if value < 1:
            raise InvalidHeaderError(key, f"must be positive, got {value}")
        return value

    try:
        value = float(token)
    except ValueError:
        raise InvalidHeaderError(key, f"{token!r} is not a number") from None
    if not math.isfinite(value):
        raise InvalidHeaderError(key, f"{token!r} is not finite")
    if key == 'cellsize' and value <= 0:
        raise InvalidHeaderError(key, f"must be positive, got {value}")
    return value


def parse_header(tokens: Sequence[str]) -> Tuple[AscHeader, int]:
    """Parse the leading header pairs of a tokenized ASC raster.

    Parameters
    ----------
    tokens : Sequence[str]
        Whitespace-separated tokens of the whole file.

    Returns
    -------
    Tuple[AscHeader, int]
        The header and the index of the first sample token.

    Raises
    ------
    InvalidHeaderError
        If a field is missing, repeated, lacks a value, or does not
        parse as the right kind of number.
    """
    fields: Dict[str, Union[int, float]] = {}
    registration: Dict[str, str] = {}

    pos = 0
    while pos < len(tokens) and tokens[pos].lower() in _HEADER_KEYS:
        raw_key = tokens[pos].lower()
        key = _ALIASES.get(raw_key, raw_key)
        if key in fields:
            raise InvalidHeaderError(key, "given more than once")
        if pos + 1 >= len(tokens):
            raise InvalidHeaderError(key, "missing value")
        fields[key] = _header_value(key, tokens[pos + 1])
        if key in ('xllcorner', 'yllcorner'):
            registration[key] = 'center' if raw_key in _ALIASES else 'corner'
        pos += 2

    for key in REQUIRED_KEYS:
        if key not in fields:
            raise InvalidHeaderError(key, "missing")
    if registration['xllcorner'] != registration['yllcorner']:
        raise InvalidHeaderError(
            'yllcorner', "mixes corner and center registration"
        )

    header = AscHeader(
        ncols=fields['ncols'],
        nrows=fields['nrows'],
        xllcorner=fields['xllcorner'],
        yllcorner=fields['yllcorner'],
        cellsize=fields['cellsize'],
        nodata_value=fields['nodata_value'],
        registration=registration['xllcorner'],
    )
    return header, pos


def _parse_samples(tokens: List[str], ncols: int) -> np.ndarray:
    """Convert sample tokens to float64, raising ``InvalidSampleError``."""
    try:
        values = np.array(tokens, dtype=np.float64)
    except ValueError:
        for position, token in enumerate(tokens):
            try:
                float(token)
            except ValueError:
                raise InvalidSampleError(position, token, ncols) from None
        raise

    bad = np.flatnonzero(~np.isfinite(values))
    if bad.size:
        position = int(bad[0])
        raise InvalidSampleError(position, tokens[position], ncols)
    return values


def parse_asc(
    raw_text: Union[str, bytes],
    encoding: str = 'utf-8',
) -> ElevationGrid:
    """Parse ASC raster text into an ``ElevationGrid``.

    Samples equal to the header's ``nodata_value`` become NaN. Tokens
    past the declared ``ncols * nrows`` samples are ignored with a
    warning.

    Parameters
    ----------
    raw_text : str or bytes
        Full raster content.
    encoding : str
        Codec for bytes input. Default UTF-8.

    Returns
    -------
    ElevationGrid

    Raises
    ------
    InvalidEncodingError
        If bytes input cannot be decoded.
    InvalidHeaderError
        If a header field is missing or malformed.
    InvalidSampleError
        If a sample token is not a finite number.
    TruncatedDataError
        If fewer samples are present than the header declares.

    Examples
    --------
    >>> from ascviz.IO.asc import parse_asc
    >>> grid = parse_asc(open('dem.asc').read())
    >>> grid.shape
    (1000, 1000)
    """
    if isinstance(raw_text, bytes):
        try:
            raw_text = raw_text.decode(encoding)
        except UnicodeDecodeError as exc:
            raise InvalidEncodingError(exc.start, encoding) from exc

    tokens = raw_text.split()
    header, start = parse_header(tokens)
    logger.debug("ASC header: %dx%d, cellsize %g, nodata %g",
                 header.ncols, header.nrows, header.cellsize,
                 header.nodata_value)

    expected = header.sample_count
    samples = tokens[start:start + expected]
    values = _parse_samples(samples, header.ncols)
    if len(samples) < expected:
        raise TruncatedDataError(expected, len(samples))

    extra = len(tokens) - start - expected
    if extra > 0:
        logger.warning("Ignoring %d tokens after the last of %d samples",
                       extra, expected)

    grid = ElevationGrid.from_header(header, values)
    logger.debug("Parsed %d samples, %d missing",
                 expected, expected - grid.valid_count)
    return grid


class AscReader(ImageReader):
    """Read an ESRI ASCII grid (``.asc``) file.

    The whole file is parsed on open; the parsed ``ElevationGrid`` is
    available through ``read_grid()`` and the array interface through
    ``read_full()`` / ``read_chip()``.

    Parameters
    ----------
    filepath : str or Path
        Path to the ``.asc`` file.
    encoding : str
        Text encoding. Default ``'utf-8'``.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ParseError
        If the content is not a valid ASC raster.

    Examples
    --------
    >>> from ascviz.IO import AscReader
    >>> with AscReader('dem.asc') as reader:
    ...     grid = reader.read_grid()
    ...     top_left = reader.read_chip(0, 64, 0, 64)
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        encoding: str = 'utf-8',
    ) -> None:
        self._encoding = encoding
        self._grid: Optional[ElevationGrid] = None
        super().__init__(filepath)

    def _load(self) -> None:
        logger.debug("Reading %s", self.filepath)
        self._grid = parse_asc(self.filepath.read_bytes(),
                               encoding=self._encoding)
        self.metadata = self._grid.to_dict()

    def read_grid(self) -> ElevationGrid:
        """Return the parsed elevation grid."""
        return self._grid


def read_asc(filepath: Union[str, Path]) -> ElevationGrid:
    """Read and parse an ``.asc`` file into an ``ElevationGrid``."""
    with AscReader(filepath) as reader:
        return reader.read_grid()
