"""Process-wide configuration state.

The default :class:`~giftwrap.conf.GiftWrapConfig` is built lazily on first
access from the layered settings (defaults, ``GIFTWRAP_CONFIG_MODULE`` and
``GIFTWRAP_USE_SERIALIZERS``). :func:`configure` replaces it; it is meant to be
called once at startup, before presenter classes are defined.
:func:`override_config` scopes a configuration to a block using a
``ContextVar`` and wins over the process-wide value while active.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Generator

from .conf import GiftWrapConfig, Settings

logger = logging.getLogger(__name__)

_override_config: ContextVar[GiftWrapConfig | None] = ContextVar("giftwrap_override_config", default=None)
_default_config: GiftWrapConfig | None = None


def _build_default_config() -> GiftWrapConfig:
    settings = Settings()
    settings.update_from_envvar()
    settings.update_from_env_flags()
    return GiftWrapConfig.from_settings(settings)


def _merge(base: GiftWrapConfig, changes: dict[str, Any]) -> GiftWrapConfig:
    if not changes:
        return base
    return GiftWrapConfig.model_validate({**base.model_dump(), **changes})


def get_config() -> GiftWrapConfig:
    """Return the active configuration, building the default one if needed."""
    override = _override_config.get()
    if override is not None:
        return override

    global _default_config
    if _default_config is None:
        _default_config = _build_default_config()
    return _default_config


def configure(config: GiftWrapConfig | None = None, **changes: Any) -> GiftWrapConfig:
    """Replace the process-wide configuration.

    Usage:
        giftwrap.configure(use_serializers=False)
        giftwrap.configure(GiftWrapConfig(use_serializers=False))
    """
    global _default_config
    new_config = _merge(config or get_config(), changes)
    _default_config = new_config
    logger.info("giftwrap configured: %s", new_config.model_dump())
    return new_config


@contextmanager
def override_config(config: GiftWrapConfig | None = None, **changes: Any) -> Generator[GiftWrapConfig, None, None]:
    """Temporarily activate a configuration for the current context."""
    active = _merge(config or get_config(), changes)
    token = _override_config.set(active)
    try:
        yield active
    finally:
        _override_config.reset(token)


def reset_config() -> None:
    """Forget the process-wide configuration; the next access rebuilds it."""
    global _default_config
    _default_config = None


__all__ = ["configure", "get_config", "override_config", "reset_config"]
