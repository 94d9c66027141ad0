# giftwrap_django/columns.py
"""Column introspection for model descriptors."""

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from giftwrap.exceptions import ColumnIntrospectionError

logger = logging.getLogger(__name__)

EXCEPT_KEYS = ("except", "exclude")


def column_names(model: Any) -> list[str]:
    """
    Return the ordered column names of ``model``.

    Django models yield the ``attname`` of each concrete field (``author_id``
    for a foreign key ``author``), in definition order. Any other descriptor
    must expose ``columns``: an iterable (or a callable returning one) of
    names or of objects with a ``name``.

    :raises ColumnIntrospectionError: If ``model`` exposes neither.
    """
    meta = getattr(model, "_meta", None)
    if meta is not None and hasattr(meta, "concrete_fields"):
        return [field.attname for field in meta.concrete_fields]

    columns = getattr(model, "columns", None)
    if columns is None:
        raise ColumnIntrospectionError(f"{model!r} exposes no columns to introspect")
    if callable(columns):
        columns = columns()
    return [col if isinstance(col, str) else str(col.name) for col in columns]


def _as_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def partition_columns(columns: Sequence[str], attribute_options: Mapping[str, Any]) -> tuple[list[str], list[str]]:
    """
    Split ``columns`` into ``(as_attributes, not_attributes)``.

    ``{"only": names}`` keeps the listed columns as attributes;
    ``{"except": names}`` (or ``"exclude"``) keeps all others. A mapping with
    neither key makes every column an attribute. Column order is preserved.
    """
    if "only" in attribute_options:
        accepted = set(_as_list(attribute_options["only"]))
        return [c for c in columns if c in accepted], [c for c in columns if c not in accepted]

    for key in EXCEPT_KEYS:
        if key in attribute_options:
            rejected = set(_as_list(attribute_options[key]))
            return [c for c in columns if c not in rejected], [c for c in columns if c in rejected]

    logger.debug("Column filter %r has neither 'only' nor 'except'; all columns are attributes", attribute_options)
    return list(columns), []


__all__ = ["column_names", "partition_columns"]
