# -*- coding: utf-8 -*-
"""
Processor Versioning - Version stamps and capability tags for processors.

``@processor_version`` records which revision of an algorithm produced a
result, so rendered products can be traced back to it.
``@processor_tags`` attaches a ``ProcessorTags`` record saying which
raster modalities a processor suits and what kind of step it is.

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
import functools
import importlib.metadata
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple, Type, TypeVar

# ascviz internal
from ascviz.vocabulary import ImageModality, ProcessorCategory

T = TypeVar('T')


@functools.lru_cache(maxsize=None)
def _package_version() -> str:
    try:
        return importlib.metadata.version('ascviz')
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def processor_version(version: Optional[str] = None):
    """Stamp ``__processor_version__`` on a processor class.

    Parameters
    ----------
    version : str, optional
        Version of the algorithm, e.g. ``'1.0.0'``. When omitted the
        installed ``ascviz`` version is used (``'unknown'`` if the
        package is not installed).

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class Slope(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source
    >>> Slope.__processor_version__
    '1.0.0'
    """
    def stamp(cls: Type[T]) -> Type[T]:
        cls.__processor_version__ = version or _package_version()
        return cls
    return stamp


@dataclass(frozen=True)
class ProcessorTags:
    """Capability record stored as ``__processor_tags__``."""

    modalities: Tuple[ImageModality, ...] = ()
    category: Optional[ProcessorCategory] = None
    description: Optional[str] = None


def _require(values: Iterable, enum: Type[Enum], label: str) -> None:
    for value in values:
        if not isinstance(value, enum):
            raise TypeError(
                f"{label} must be {enum.__name__} members, got {value!r}"
            )


def processor_tags(
    modalities: Optional[Sequence[ImageModality]] = None,
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
):
    """Attach a ``ProcessorTags`` record to a processor class.

    Raises
    ------
    TypeError
        If a modality is not an ``ImageModality`` or the category is not
        a ``ProcessorCategory``. Raised when the decorator is built.
    """
    _require(modalities or (), ImageModality, 'modalities')
    if category is not None:
        _require((category,), ProcessorCategory, 'category')
    tags = ProcessorTags(tuple(modalities or ()), category, description)

    def attach(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = tags
        return cls
    return attach
