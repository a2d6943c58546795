# -*- coding: utf-8 -*-
"""
Processor Parameters - Constraint markers read from typing.Annotated hints.

A processor states its knobs in the class body. The first ``Annotated``
argument is the accepted type, the class attribute is the default, and
the markers constrain the value::

    class Hillshade(ImageTransform):
        azimuth: Annotated[float, Range(min=0.0, max=360.0),
                           Desc('Light azimuth in degrees')] = 315.0
        stencil: Annotated[str, Options('horn', 'central')] = 'horn'

``collect_param_specs`` turns those hints into ``ParamSpec`` records,
which ``ImageProcessor`` uses to check constructor values and per-call
overrides alike.

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
import inspect
import math
from dataclasses import dataclass
from typing import (
    Annotated, Any, List, Optional, Tuple, Union, get_origin, get_type_hints,
)

# ascviz internal
from ascviz.exceptions import ValidationError

Number = Union[int, float]


class ParamMeta:
    """Marks an ``Annotated`` argument as parameter metadata."""


@dataclass(frozen=True)
class Range(ParamMeta):
    """Closed interval ``[min, max]``; either end may be left open (None)."""

    min: Optional[Number] = None
    max: Optional[Number] = None


class Options(ParamMeta):
    """The value must be one of *choices*."""

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return 'Options(' + ', '.join(map(repr, self.choices)) + ')'


@dataclass(frozen=True)
class Desc(ParamMeta):
    """One-line help text for a parameter."""

    text: str


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class ParamSpec:
    """Everything known about one declared parameter.

    Attributes
    ----------
    name : str
        Attribute and keyword name.
    param_type : type
        Accepted type. ``float`` parameters also take ``int``; numeric
        parameters never take ``bool``.
    default : Any
        Class-level default.
    description : str
        Text from ``Desc``, or empty.
    min_value, max_value : int, float, or None
        Ends of the ``Range``, when one was declared.
    choices : tuple or None
        Values from ``Options``, when declared.
    """

    name: str
    param_type: type
    default: Any
    description: str = ''
    min_value: Optional[Number] = None
    max_value: Optional[Number] = None
    choices: Optional[Tuple] = None

    def validate(self, value: Any) -> None:
        """Check *value* for this parameter.

        Raises
        ------
        TypeError
            Wrong type.
        ValidationError
            Outside the range or not one of the choices.
        """
        self._check_type(value)
        self._check_constraints(value)

    def _check_type(self, value: Any) -> None:
        if self.param_type is float:
            accepted = _is_number(value)
        elif self.param_type is int:
            accepted = _is_number(value) and isinstance(value, int)
        else:
            accepted = isinstance(value, self.param_type)
        if not accepted:
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )

    def _check_constraints(self, value: Any) -> None:
        problem = None
        bounded = self.min_value is not None or self.max_value is not None
        if bounded and not math.isfinite(value):
            problem = "is not finite"
        elif self.min_value is not None and value < self.min_value:
            problem = f"is below minimum {self.min_value!r}"
        elif self.max_value is not None and value > self.max_value:
            problem = f"is above maximum {self.max_value!r}"
        elif self.choices is not None and value not in self.choices:
            problem = f"is not in allowed choices {self.choices!r}"
        if problem:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} {problem}"
            )


def _declared_order(cls: type) -> List[str]:
    """Annotated names, base classes first, each name once."""
    seen: List[str] = []
    for klass in reversed(cls.__mro__):
        seen.extend(
            n for n in inspect.get_annotations(klass) if n not in seen
        )
    return seen


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Build a ``ParamSpec`` for every marker-annotated field of *cls*.

    Plain annotations, and ``Annotated`` hints without a ``ParamMeta``
    marker, are not parameters.

    Raises
    ------
    TypeError
        If one field carries both ``Range`` and ``Options``.
    """
    hints = get_type_hints(cls, include_extras=True)
    specs = []
    for name in _declared_order(cls):
        hint = hints.get(name)
        if hint is None or get_origin(hint) is not Annotated:
            continue
        markers = {type(m): m for m in hint.__metadata__
                   if isinstance(m, ParamMeta)}
        if not markers:
            continue
        rng = markers.get(Range)
        opts = markers.get(Options)
        if rng is not None and opts is not None:
            raise TypeError(
                f"{cls.__qualname__}.{name}: Range and Options are "
                f"mutually exclusive"
            )
        desc = markers.get(Desc)
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__origin__,
            default=getattr(cls, name, None),
            description=desc.text if desc is not None else '',
            min_value=rng.min if rng is not None else None,
            max_value=rng.max if rng is not None else None,
            choices=opts.choices if opts is not None else None,
        ))
    return tuple(specs)
