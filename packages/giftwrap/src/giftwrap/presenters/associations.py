# giftwrap/presenters/associations.py
"""Single-vs-sequence shaping of association values.

A wrapped object's association accessor may state the shape of its result
explicitly by returning :class:`Single` or :class:`Many`. Anything else is
classified by :func:`classify_association`: strings, bytes, mappings, ``None``
and non-iterables are single values, every other iterable is a sequence.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Single:
    value: Any


@dataclass(frozen=True, slots=True)
class Many:
    values: tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))


AssociationValue = Union[Single, Many]

_SCALAR_ITERABLES = (str, bytes, bytearray, memoryview, Mapping)


def classify_association(value: Any) -> AssociationValue:
    if isinstance(value, (Single, Many)):
        return value
    if value is None or isinstance(value, _SCALAR_ITERABLES):
        return Single(value)
    if isinstance(value, Iterable):
        return Many(tuple(value))
    return Single(value)


__all__ = ["AssociationValue", "Many", "Single", "classify_association"]
