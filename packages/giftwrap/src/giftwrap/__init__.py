"""
giftwrap: presenters for ORM models.

A presenter wraps one domain object and exposes only what it declares:

- delegated ("unwrapped") members of the wrapped object,
- attributes, collected by ``Presenter.attributes()`` for serialization,
- associations of the wrapped object, wrapped in their own presenters.

This core package is framework-agnostic. Django model support (column
introspection, settings integration) lives in ``giftwrap_django``.

Import Guidelines:
------------------
- Define presenters with ``giftwrap.Presenter`` and the class-body helpers
  ``unwrapped``, ``attribute``, ``wrapped_association`` and ``wrapped_reference``.
- Build presenters from data with ``giftwrap.builder.build_presenter``.
- Configure once at startup with ``giftwrap.configure(...)``.
- Use ``giftwrap.exceptions`` for error handling.
"""

from importlib.metadata import PackageNotFoundError, version

from ._state import configure, get_config, override_config
from .conf import GiftWrapConfig
from .presenters import (
    JSONSerializerMixin,
    Many,
    MemberKind,
    Presenter,
    Single,
    attribute,
    unwrapped,
    wrapped_association,
    wrapped_reference,
)

try:
    __version__ = version("giftwrap")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "GiftWrapConfig",
    "JSONSerializerMixin",
    "Many",
    "MemberKind",
    "Presenter",
    "Single",
    "attribute",
    "configure",
    "get_config",
    "override_config",
    "unwrapped",
    "wrapped_association",
    "wrapped_reference",
]
