"""Layered settings read once to build a ``GiftWrapConfig``.

Lookup order, first hit wins:

1. values written on the ``Settings`` object (env flags, explicit updates),
2. the layers passed to the constructor (e.g. Django's ``settings.GIFTWRAP``),
3. :data:`giftwrap.conf.defaults.DEFAULTS`.
"""

import importlib
import os
from collections import ChainMap
from typing import Any, Mapping

from .defaults import DEFAULTS

ENVVAR_CONFIG_MODULE = "GIFTWRAP_CONFIG_MODULE"
ENVVAR_USE_SERIALIZERS = "GIFTWRAP_USE_SERIALIZERS"

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})


class Settings(ChainMap):
    """ChainMap of setting layers over the defaults; writes land in the top layer."""

    def __init__(self, *layers: Mapping[str, Any]) -> None:
        super().__init__({}, *[dict(layer) for layer in layers], dict(DEFAULTS))

    def update_from_mapping(self, mapping: Mapping[str, Any], *, namespace: str | None = None) -> None:
        self.update(_filter_by_namespace(mapping, namespace))

    def update_from_object(self, obj: str, *, namespace: str | None = "GIFTWRAP") -> None:
        """Import module ``obj`` and read its ``GIFTWRAP_*`` constants."""
        self.update_from_mapping(vars(importlib.import_module(obj)), namespace=namespace)

    def update_from_envvar(self, envvar: str = ENVVAR_CONFIG_MODULE, *, namespace: str | None = "GIFTWRAP") -> None:
        if module_path := os.environ.get(envvar):
            self.update_from_object(module_path, namespace=namespace)

    def update_from_env_flags(self) -> None:
        raw = os.environ.get(ENVVAR_USE_SERIALIZERS)
        if raw is not None:
            self["USE_SERIALIZERS"] = coerce_bool(raw)

    def as_dict(self) -> dict[str, Any]:
        return {key: self[key] for key in self}


def coerce_bool(value: Any, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _filter_by_namespace(mapping: Mapping[str, Any], namespace: str | None) -> dict[str, Any]:
    """Keep uppercase keys; with a namespace keep ``<NS>_KEY`` entries, renamed to ``KEY``."""
    if namespace is None:
        return {key: value for key, value in mapping.items() if key.isupper()}
    prefix = f"{namespace}_"
    return {key.removeprefix(prefix): value for key, value in mapping.items() if key.startswith(prefix)}
