"""Shared pytest configuration for giftwrap_django tests."""

import django
from django.conf import settings


def pytest_configure():
    """Configure Django settings before test modules (and their models) are imported."""
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=[
                "django.contrib.contenttypes",
                "giftwrap_django",
                "giftwrap_testapp",
            ],
            DATABASES={
                "default": {
                    "ENGINE": "django.db.backends.sqlite3",
                    "NAME": ":memory:",
                }
            },
            SECRET_KEY="test-secret-key",
            USE_TZ=True,
            DEFAULT_AUTO_FIELD="django.db.models.AutoField",
        )
        django.setup()
