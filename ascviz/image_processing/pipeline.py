# -*- coding: utf-8 -*-
"""
Pipeline - Run raster transforms one after another.

Each step receives the previous step's output. The elevation products
are built as two-step pipelines, a stretch followed by a color mapping.

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
import logging
from typing import Any, Callable, List, Optional, Sequence

# Third-party
import numpy as np

# ascviz internal
from ascviz.image_processing.base import ImageTransform

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


def _scaled(callback: ProgressCallback, start: float, span: float
            ) -> ProgressCallback:
    """Map a step's [0, 1] progress onto ``[start, start + span]``."""
    return lambda fraction: callback(start + fraction * span)


class Pipeline(ImageTransform):
    """Ordered chain of ``ImageTransform`` steps.

    Parameters
    ----------
    steps : Sequence[ImageTransform]
        At least one transform.

    Raises
    ------
    ValueError
        If *steps* is empty.
    TypeError
        If a step is not an ``ImageTransform``.

    Examples
    --------
    >>> from ascviz.image_processing import (
    ...     ElevationStretch, Pipeline, ToGrayscale,
    ... )
    >>> gray = Pipeline([ElevationStretch(), ToGrayscale()]).apply(dem)
    """

    __processor_version__ = '1.0.0'

    def __init__(self, steps: Sequence[ImageTransform]) -> None:
        if not steps:
            raise ValueError("Pipeline requires at least one transform")
        bad = [i for i, s in enumerate(steps)
               if not isinstance(s, ImageTransform)]
        if bad:
            raise TypeError(
                f"Step {bad[0]} is not an ImageTransform: "
                f"{type(steps[bad[0]]).__name__}"
            )
        self._steps = tuple(steps)

    @property
    def steps(self) -> List[ImageTransform]:
        """The steps, in order (a new list)."""
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        names = ', '.join(type(s).__name__ for s in self._steps)
        return f"Pipeline([{names}])"

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Feed *source* through every step.

        ``kwargs`` reach every step. A ``progress_callback`` is shared
        out so that step ``i`` of ``n`` reports within ``[i/n, (i+1)/n]``.
        """
        callback: Optional[ProgressCallback] = kwargs.pop(
            'progress_callback', None
        )
        span = 1.0 / len(self._steps)

        result = source
        for i, step in enumerate(self._steps):
            logger.debug("Pipeline step %d/%d: %s",
                         i + 1, len(self._steps), type(step).__name__)
            if callback is not None:
                kwargs['progress_callback'] = _scaled(callback, i * span, span)
            result = step.apply(result, **kwargs)
            if callback is not None:
                callback((i + 1) * span)
        return result
