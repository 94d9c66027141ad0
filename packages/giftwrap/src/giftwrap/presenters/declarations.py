# giftwrap/presenters/declarations.py
"""
giftwrap.presenters.declarations
================================

Per-class declaration registry and the class-body declaration helpers.

Each presenter class owns one :class:`Declarations` instance holding:

- ``attribute_names``: names collected by ``Presenter.attributes()``, in
  declaration order;
- ``delegated_names``: names forwarded to the wrapped object;
- ``associations``: exposed association name -> :class:`WrappedAssociation`;
- ``members``: dispatch table, name -> :class:`MemberKind`.

Class-body helpers
------------------
    class MapPresenter(Presenter):
        type = unwrapped()
        units = unwrapped(attribute=True)
        legend = wrapped_association(LegendPresenter)
        _map = wrapped_reference()

        @attribute
        def is_metric(self):
            return self.units in ("m", "km")

The helpers only mark members; ``PresenterMeta`` reads the class namespace in
definition order and records them, so ``attributes()`` keys follow the order
in which they were written.
"""

from __future__ import annotations

import keyword
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable

from ..exceptions import DeclarationError

ATTRIBUTE_MARKER = "__giftwrap_attribute__"


class MemberKind(str, Enum):
    DELEGATE = "delegate"
    LOCAL_ATTRIBUTE = "local_attribute"
    WRAPPED_ASSOCIATION = "wrapped_association"


class Unwrapped:
    """Descriptor forwarding reads to the same-named member of the wrapped object.

    Methods come back bound to the wrapped object, so calls forward with
    identical arguments; data attributes are read through.
    """

    def __init__(self, *, attribute: bool = False) -> None:
        self.attribute = attribute
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return getattr(instance._wrapped_object, self.name)

    def __repr__(self) -> str:
        return f"<Unwrapped {self.name!r} attribute={self.attribute}>"


class WrappedAssociation:
    """Descriptor exposing an association of the wrapped object, wrapped in presenters.

    ``presenter`` is the class default: a presenter class, a string resolved
    through the presenter registry, or ``None`` when every instance must supply
    its own through ``associations={...}``.
    """

    def __init__(self, presenter: Any = None, *, source: str | None = None, **options: Any) -> None:
        self.presenter = presenter
        self.source = source
        self.options = options
        self.name: str | None = None
        self.module: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.source = self.source or name
        self.module = owner.__module__

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._wrap_association(self)

    def __repr__(self) -> str:
        return f"<WrappedAssociation {self.name!r} source={self.source!r} presenter={self.presenter!r}>"


class WrappedReference:
    """Descriptor returning the wrapped object itself under a private name."""

    def __init__(self) -> None:
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._wrapped_object


# ---------------------------------------------------------------------------
# class-body helpers
# ---------------------------------------------------------------------------

def unwrapped(*, attribute: bool = False) -> Unwrapped:
    return Unwrapped(attribute=attribute)


def wrapped_association(presenter: Any = None, *, source: str | None = None, **options: Any) -> WrappedAssociation:
    return WrappedAssociation(presenter, source=source, **options)


def wrapped_reference() -> WrappedReference:
    return WrappedReference()


def attribute(member: Callable[..., Any] | property) -> Any:
    """Mark a method or property defined on the presenter as an attribute."""
    target = getattr(member, "fget", None) or getattr(member, "func", None) or member
    setattr(target, ATTRIBUTE_MARKER, True)
    return member


def is_marked_attribute(member: Any) -> bool:
    target = getattr(member, "fget", None) or getattr(member, "func", None) or member
    return bool(getattr(target, ATTRIBUTE_MARKER, False))


# ---------------------------------------------------------------------------
# registry
# ---------------------------------------------------------------------------

def flatten_names(names: Iterable[Any]) -> list[str]:
    """Flatten nested lists/tuples/sets of names into a list of strings."""
    flat: list[str] = []
    for name in names:
        if isinstance(name, (list, tuple, set, frozenset)):
            flat.extend(flatten_names(name))
        else:
            flat.append(str(name))
    return flat


def validate_name(name: str, *, reserved: Iterable[str] = ()) -> str:
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise DeclarationError(f"{name!r} is not a valid member name")
    if name.startswith("__"):
        raise DeclarationError(f"{name!r}: dunder and name-mangled members cannot be declared")
    if name in reserved:
        raise DeclarationError(f"{name!r} would shadow the presenter API")
    return name


@dataclass
class Declarations:
    attribute_names: dict[str, None] = field(default_factory=dict)
    delegated_names: dict[str, None] = field(default_factory=dict)
    associations: dict[str, WrappedAssociation] = field(default_factory=dict)
    members: dict[str, MemberKind] = field(default_factory=dict)

    def merge(self, other: "Declarations") -> None:
        self.attribute_names.update(other.attribute_names)
        self.delegated_names.update(other.delegated_names)
        self.associations.update(other.associations)
        self.members.update(other.members)

    def add_attribute(self, name: str) -> None:
        self.attribute_names[name] = None
        self.members.setdefault(name, MemberKind.LOCAL_ATTRIBUTE)

    def add_delegate(self, name: str, *, attribute: bool = False) -> None:
        self.delegated_names[name] = None
        self.associations.pop(name, None)
        self.members[name] = MemberKind.DELEGATE
        if attribute:
            self.attribute_names[name] = None

    def add_association(self, descriptor: WrappedAssociation) -> None:
        self.delegated_names.pop(descriptor.name, None)
        self.associations[descriptor.name] = descriptor
        self.members[descriptor.name] = MemberKind.WRAPPED_ASSOCIATION

    @property
    def association_defaults(self) -> dict[str, Any]:
        return {name: d.presenter for name, d in self.associations.items()}

    def kind_of(self, name: str) -> MemberKind | None:
        return self.members.get(name)


__all__ = [
    "Declarations",
    "MemberKind",
    "Unwrapped",
    "WrappedAssociation",
    "WrappedReference",
    "attribute",
    "flatten_names",
    "is_marked_attribute",
    "unwrapped",
    "validate_name",
    "wrapped_association",
    "wrapped_reference",
]
