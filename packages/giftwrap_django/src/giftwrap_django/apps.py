# giftwrap_django/apps.py


"""
giftwrap_django.apps
====================

Django integration for giftwrap.

Responsibilities
----------------
- Read ``settings.GIFTWRAP`` into the process-wide ``GiftWrapConfig`` when the
  app registry is ready, before project presenters are imported by views.

Settings
--------
    GIFTWRAP = {
        "USE_SERIALIZERS": True,   # mix JSONSerializerMixin into presenters
    }

The ``GIFTWRAP_USE_SERIALIZERS`` environment variable wins over the setting.
"""

import logging
from collections.abc import Mapping

from django.apps import AppConfig
from django.conf import settings as dj_settings
from django.core.exceptions import ImproperlyConfigured

from giftwrap import GiftWrapConfig, configure
from giftwrap.conf import Settings

logger = logging.getLogger(__name__)


def configure_from_django_settings() -> GiftWrapConfig | None:
    """Apply ``settings.GIFTWRAP``; returns the new config, or None when unset."""
    raw = getattr(dj_settings, "GIFTWRAP", None)
    if raw is None:
        logger.debug("settings.GIFTWRAP not set; keeping giftwrap defaults")
        return None
    if not isinstance(raw, Mapping):
        raise ImproperlyConfigured(f"settings.GIFTWRAP must be a dict, got: {type(raw)}")

    layered = Settings(raw)
    layered.update_from_env_flags()
    return configure(GiftWrapConfig.from_settings(layered))


class GiftWrapDjangoConfig(AppConfig):
    """Django AppConfig for giftwrap."""

    name = "giftwrap_django"
    verbose_name = "giftwrap"

    def ready(self) -> None:
        configure_from_django_settings()
