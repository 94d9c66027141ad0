# giftwrap/presenters/serializers.py
"""
JSON serialization capability for presenters.

``PresenterMeta`` mixes :class:`JSONSerializerMixin` into every presenter class
defined while ``GiftWrapConfig.use_serializers`` is enabled. The mixin builds on
``Presenter.attributes()``:

- ``serializable_hash(only=, exclude=, methods=, include=)`` filters the
  declared attributes, adds extra members and nests wrapped associations;
- ``as_json()`` converts that mapping to JSON-compatible python values;
- ``to_json()`` encodes it to a JSON string.

Encoding goes through ``pydantic_core`` so datetimes, decimals, UUIDs and
pydantic models on the wrapped objects serialize without a custom encoder.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from asgiref.sync import sync_to_async
from pydantic_core import to_json, to_jsonable_python

from .declarations import flatten_names

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _as_names(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return flatten_names(value)


def _normalize_include(include: Any) -> dict[str, dict[str, Any]]:
    if include is None:
        return {}
    if isinstance(include, Mapping):
        return {str(name): dict(opts or {}) for name, opts in include.items()}
    return {name: {} for name in _as_names(include)}


def _nested_hash(presenter: Any, options: Mapping[str, Any]) -> Any:
    serialize = getattr(presenter, "serializable_hash", None)
    if callable(serialize):
        return serialize(**options)
    return presenter.attributes()


def _fallback(value: Any) -> Any:
    """Encode presenters met inside attribute values."""
    if callable(getattr(value, "serializable_hash", None)):
        return value.serializable_hash()
    if callable(getattr(value, "attributes", None)) and hasattr(type(value), "declarations"):
        return value.attributes()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JSONSerializerMixin:
    """Serialization methods added to presenter classes.

    Class attributes:
        json_root: key used by ``as_json(root=True)``; defaults to the snake-cased
            class name without a ``Presenter`` suffix.
        include_root_in_json: default for ``as_json(root=...)``.
    """

    json_root: str | None = None
    include_root_in_json: bool = False

    @classmethod
    def json_root_name(cls) -> str:
        if cls.json_root:
            return cls.json_root
        name = cls.__name__
        if name.endswith("Presenter") and name != "Presenter":
            name = name[: -len("Presenter")]
        return _CAMEL_BOUNDARY.sub("_", name).lower()

    def serializable_hash(
        self,
        *,
        only: Any = None,
        exclude: Any = None,
        methods: Any = None,
        include: Any = None,
    ) -> dict[str, Any]:
        names = list(self.attribute_names())
        if only is not None:
            wanted = set(_as_names(only))
            names = [n for n in names if n in wanted]
        elif exclude is not None:
            unwanted = set(_as_names(exclude))
            names = [n for n in names if n not in unwanted]

        result = {name: self._read_member(name) for name in names}
        for name in _as_names(methods):
            result[name] = self._read_member(name)

        for name, options in _normalize_include(include).items():
            value = getattr(self, name)
            if value is None:
                result[name] = None
            elif isinstance(value, list):
                result[name] = [_nested_hash(item, options) for item in value]
            else:
                result[name] = _nested_hash(value, options)
        return result

    def as_json(self, *, root: bool | str | None = None, **options: Any) -> Any:
        data = to_jsonable_python(self.serializable_hash(**options), fallback=_fallback)
        if root is None:
            root = self.include_root_in_json
        if root:
            key = root if isinstance(root, str) else self.json_root_name()
            return {key: data}
        return data

    def to_json(self, **options: Any) -> str:
        return to_json(self.as_json(**options)).decode()

    async def aas_json(self, **options: Any) -> Any:
        """Async wrapper around ``as_json`` (accessors may hit a sync-only ORM)."""
        return await sync_to_async(self.as_json)(**options)


__all__ = ["JSONSerializerMixin"]
