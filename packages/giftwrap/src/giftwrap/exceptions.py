# giftwrap/exceptions.py
"""Exception hierarchy for giftwrap.

Every error raised by the library derives from :class:`GiftWrapError`. Most
also derive from the builtin that callers would naturally catch for the same
failure (``AttributeError`` for member lookups, ``TypeError`` for bad inputs),
so ``hasattr()`` and plain ``except AttributeError`` keep working.
"""

__all__ = [
    "GiftWrapError",
    "DeclarationError",
    "PresenterError",
    "WrappedObjectError",
    "MissingAttributeError",
    "UnregisteredAssociationError",
    "ColumnIntrospectionError",
    "RegistryError",
    "RegistryLookupError",
    "RegistryFrozenError",
]


class GiftWrapError(Exception):
    """Base for all giftwrap exceptions."""


# ----------------------------------------------------------------------------
# Declaration errors
# ----------------------------------------------------------------------------
class DeclarationError(GiftWrapError, ValueError):
    """Raised when a presenter declaration is malformed (bad or reserved name)."""


# ----------------------------------------------------------------------------
# Presenter (runtime) errors
# ----------------------------------------------------------------------------
class PresenterError(GiftWrapError): ...


class WrappedObjectError(PresenterError, TypeError):
    """Raised when a presenter is constructed around ``None``."""


class MissingAttributeError(PresenterError, AttributeError):
    """Raised when a registered attribute has no implementation on the presenter."""

    def __init__(self, presenter: str, name: str) -> None:
        super().__init__(f"{presenter} declares attribute {name!r} but does not implement it")
        self.presenter = presenter
        self.name = name


class UnregisteredAssociationError(PresenterError, AttributeError):
    """Raised when no presenter class is known for an association name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No association registered as '{name}'.")
        self.name = name


class ColumnIntrospectionError(GiftWrapError, TypeError):
    """Raised when a model descriptor does not expose any column information."""


# ----------------------------------------------------------------------------
# Registry errors
# ----------------------------------------------------------------------------
class RegistryError(GiftWrapError): ...


class RegistryLookupError(RegistryError, LookupError): ...


class RegistryFrozenError(RuntimeError, RegistryError): ...
