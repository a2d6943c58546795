# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Common ground for raster processors.

``ImageProcessor`` gives every processor two things: a one-time warning
when a concrete class carries no ``@processor_version`` stamp, and
checked tunable parameters declared with ``typing.Annotated`` (see
:mod:`ascviz.image_processing.params`). ``ImageTransform`` adds the
``apply(source, **kwargs)`` contract used by stretches, color maps,
hillshade, and pipelines.

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
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# ascviz internal
from ascviz.image_processing.params import ParamSpec, collect_param_specs

logger = logging.getLogger(__name__)

_checked_versions: set = set()


class ImageProcessor(ABC):
    """
    Base class for all raster processors.

    Subclasses declare tunable parameters as ``Annotated`` class fields,
    assign them in ``__init__``, and call ``_validate_params()``. At
    ``apply()`` time ``_resolve_params(kwargs)`` returns the values to
    use, with any per-call overrides from *kwargs* checked the same way.
    """

    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        cls._check_version()
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    @classmethod
    def _check_version(cls) -> None:
        """Warn, once per class, when no processor version is declared."""
        if cls in _checked_versions:
            return
        _checked_versions.add(cls)
        if (getattr(cls, '__processor_version__', None)
                or getattr(cls, '__abstractmethods__', None)):
            return
        warnings.warn(
            f"{cls.__qualname__} does not declare a processor version. "
            f"Use @processor_version('x.y.z') to declare one.",
            UserWarning,
            stacklevel=3,
        )

    @property
    def params(self) -> Dict[str, Any]:
        """Current value of every declared parameter."""
        return {s.name: getattr(self, s.name) for s in self.__param_specs__}

    def _validate_params(self) -> None:
        """Check the instance's parameter values; call at the end of __init__.

        Raises
        ------
        TypeError, ValidationError
            As ``ParamSpec.validate``.
        """
        for spec in self.__param_specs__:
            spec.validate(getattr(self, spec.name))

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Parameter values for one call.

        Keys of *kwargs* that name a declared parameter override the
        instance value and are validated; other keys (``cell_size``,
        ``progress_callback``) are left alone.

        Raises
        ------
        TypeError, ValidationError
            If an override is invalid.
        """
        resolved = self.params
        for spec in self.__param_specs__:
            if spec.name in kwargs:
                spec.validate(kwargs[spec.name])
                resolved[spec.name] = kwargs[spec.name]
        return resolved

    def _report_progress(self, kwargs: Dict[str, Any], fraction: float) -> None:
        callback = kwargs.get('progress_callback')
        if callback is not None:
            callback(float(fraction))

    def __repr__(self) -> str:
        args = ', '.join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{type(self).__name__}({args})"


class ImageTransform(ImageProcessor):
    """Processor mapping one raster array to another."""

    @abstractmethod
    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """
        Transform *source*.

        Parameters
        ----------
        source : np.ndarray
            Input raster.
        **kwargs
            Per-call parameter overrides and options.

        Returns
        -------
        np.ndarray
        """
