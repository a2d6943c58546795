# -*- coding: utf-8 -*-
"""
ascviz Exception Hierarchy - Domain-specific exceptions for ascviz operations.

Lets callers catch ascviz errors distinctly from Python built-in
exceptions. Every ascviz exception subclasses both ``AscvizError`` and
the closest built-in exception, so ``except ValueError`` keeps working.

Parse failures (``ParseError`` and its subclasses) carry the offending
header field or sample position so the caller can report exactly what
was wrong with the input raster.

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
from typing import Optional


class AscvizError(Exception):
    """Base exception for all ascviz errors."""


class ValidationError(AscvizError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for shape mismatches, out-of-range parameters, unknown
    method or palette names, and other input validation failures.
    """


class ProcessorError(AscvizError, RuntimeError):
    """Algorithm failure during ``apply()``.

    Raised when a processor hits a non-recoverable error that is not
    an input validation issue (e.g. a gradient returning colors of the
    wrong shape).
    """


class ParseError(AscvizError, ValueError):
    """ASC raster text could not be parsed into an elevation grid."""


class InvalidHeaderError(ParseError):
    """A required header field is missing, duplicated, or non-numeric.

    Parameters
    ----------
    field : str
        Name of the offending header field (lower case).
    reason : str
        Human-readable description of the problem.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid header field '{field}': {reason}")


class TruncatedDataError(ParseError):
    """Fewer elevation samples than ``ncols * nrows`` declares.

    Parameters
    ----------
    expected : int
        Number of samples declared by the header.
    found : int
        Number of sample tokens actually present.
    """

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Truncated data: expected {expected} samples, found {found}"
        )


class InvalidSampleError(ParseError):
    """A sample token is not a finite number.

    Parameters
    ----------
    position : int
        Zero-based flat (row-major) index of the sample.
    token : str
        The raw token text.
    ncols : int, optional
        Grid width, used to report the row and column.
    """

    def __init__(
        self,
        position: int,
        token: str,
        ncols: Optional[int] = None,
    ) -> None:
        self.position = position
        self.token = token
        if ncols:
            self.row, self.col = divmod(position, ncols)
            where = f"sample {position} (row {self.row}, col {self.col})"
        else:
            self.row = self.col = None
            where = f"sample {position}"
        super().__init__(f"Invalid {where}: {token!r} is not a number")


class InvalidEncodingError(ParseError):
    """Raster bytes are not valid text in the expected encoding.

    Parameters
    ----------
    position : int
        Byte offset of the first undecodable byte.
    encoding : str
        Encoding that was attempted.
    """

    def __init__(self, position: int, encoding: str) -> None:
        self.position = position
        self.encoding = encoding
        super().__init__(
            f"Invalid {encoding} text: undecodable byte at offset {position}"
        )
