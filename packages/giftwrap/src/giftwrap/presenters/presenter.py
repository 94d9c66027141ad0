# giftwrap/presenters/presenter.py
"""
giftwrap.presenters.presenter
=============================

``Presenter`` wraps exactly one domain object and exposes only what its class
declares: delegated members, attributes, and wrapped associations.

Class definition
----------------
``PresenterMeta`` runs once per presenter class:

1. Resolves the effective ``GiftWrapConfig`` (class keyword ``config=`` or the
   active configuration) and mixes in ``JSONSerializerMixin`` when
   ``use_serializers`` is enabled.
2. Records the declarations found in the class body, in definition order.
3. Registers the class in the presenter registry so string references to it
   resolve.

A library base class passes ``abstract=True`` (``class ModelPresenter(Presenter,
abstract=True)``): its declarations are recorded, but it is not registered and
gets no serializer mixin, so each concrete subclass follows the configuration
active when it is defined.

Declarations can also be added after the class statement with the
classmethods ``attribute``, ``unwrap_for``, ``wrap_association`` and
``wrapped_as``; declarations are expected to be complete before the first
instance is built.

Associations
------------
An association accessor resolves its presenter class per instance (override
from ``associations={...}`` first, then the class default), reads the source
member on the wrapped object, wraps a single value or each element of a
sequence, and memoizes the result on the instance. A ``None`` association is
returned as ``None``.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Mapping

from asgiref.sync import sync_to_async

from .._state import get_config
from ..conf import GiftWrapConfig
from ..exceptions import MissingAttributeError, UnregisteredAssociationError, WrappedObjectError
from ..registry import presenter_path, presenters
from ..tracing import service_span_sync
from .associations import AssociationValue, Many, classify_association
from .declarations import (
    Declarations,
    MemberKind,
    Unwrapped,
    WrappedAssociation,
    WrappedReference,
    flatten_names,
    is_marked_attribute,
    validate_name,
)
from .serializers import JSONSerializerMixin

logger = logging.getLogger(__name__)

_DECLARATIONS_ATTR = "_giftwrap_declarations"


class PresenterMeta(type):
    """Metaclass building presenter classes (see module docstring)."""

    def __new__(mcs, name, bases, namespace, config: GiftWrapConfig | None = None, abstract: bool = False, **kwargs):
        is_root = not any(isinstance(base, PresenterMeta) for base in bases)
        effective = None
        # Abstract bases get neither the serializer mixin nor a registry entry.
        if not (is_root or abstract):
            effective = config or get_config()
            if effective.use_serializers and not any(issubclass(b, JSONSerializerMixin) for b in bases):
                bases = (*bases, JSONSerializerMixin)

        cls = super().__new__(mcs, name, bases, namespace, **kwargs)
        cls.giftwrap_config = effective
        if is_root:
            return cls

        fqcn = presenter_path(cls)
        with service_span_sync(
            "giftwrap.presenter.define",
            attributes={
                "giftwrap.class": fqcn,
                "giftwrap.abstract": abstract,
                "giftwrap.serializable": issubclass(cls, JSONSerializerMixin),
            },
        ):
            cls.contribute_declarations(namespace)
            if not abstract:
                presenters.register(cls, replace=True)
            logger.debug(
                "[PRESENTER] ✅ defined `%s` (attributes=%s)",
                fqcn,
                ",".join(cls.declarations().attribute_names),
            )
        return cls

    def __init__(cls, name, bases, namespace, config: GiftWrapConfig | None = None, abstract: bool = False, **kwargs):
        super().__init__(name, bases, namespace, **kwargs)


class Presenter(metaclass=PresenterMeta):
    """Base class for presenters.

    :param wrapped_object: The object to present; must not be ``None``.
    :param associations: Per-instance mapping of association name to presenter
        class (or registered name), overriding class defaults name by name.
    :param options: Extra constructor options, kept on ``self._options``.
    """

    giftwrap_config: GiftWrapConfig | None = None

    def __init__(
        self,
        wrapped_object: Any,
        *,
        associations: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> None:
        if wrapped_object is None:
            raise WrappedObjectError(f"{type(self).__name__} cannot wrap None")
        self._wrapped_object = wrapped_object
        self._association_presenters: dict[str, Any] = dict(associations or {})
        self._association_cache: dict[str, Any] = {}
        self._options = options

    def __repr__(self) -> str:
        return f"<{type(self).__name__} wrapping {self._wrapped_object!r}>"

    # ------------------------------------------------------------------
    # declarations
    # ------------------------------------------------------------------
    @classmethod
    def declarations(cls) -> Declarations:
        """Return this class's declaration registry, creating it from the bases on first use."""
        found = cls.__dict__.get(_DECLARATIONS_ATTR)
        if found is None:
            found = Declarations()
            for base in reversed(cls.__mro__[1:]):
                if isinstance(base, PresenterMeta):
                    found.merge(base.declarations())
            setattr(cls, _DECLARATIONS_ATTR, found)
        return found

    @classmethod
    def attribute_names(cls) -> tuple[str, ...]:
        return tuple(cls.declarations().attribute_names)

    @classmethod
    def member_kind(cls, name: str) -> MemberKind | None:
        return cls.declarations().kind_of(name)

    @classmethod
    def contribute_declarations(cls, namespace: Mapping[str, Any]) -> None:
        """Record the declarations written in a class body, in definition order."""
        declarations = cls.declarations()
        for name, value in namespace.items():
            if isinstance(value, Unwrapped):
                cls._check_member_name(name)
                declarations.add_delegate(name, attribute=value.attribute)
            elif isinstance(value, WrappedAssociation):
                cls._check_member_name(name)
                declarations.add_association(value)
            elif isinstance(value, WrappedReference):
                cls._check_member_name(name)
            elif is_marked_attribute(value):
                declarations.add_attribute(cls._check_member_name(name))

    @classmethod
    def _reserved_member_names(cls) -> frozenset[str]:
        """Names a declaration may not take: the presenter and serializer API."""
        return _reserved_names()

    @classmethod
    def _check_member_name(cls, name: str) -> str:
        return validate_name(name, reserved=cls._reserved_member_names())

    @classmethod
    def _install(cls, name: str, descriptor: Any) -> None:
        setattr(cls, name, descriptor)
        descriptor.__set_name__(cls, name)

    @classmethod
    def attribute(cls, *names: Any) -> None:
        """Declare members implemented on the presenter as attributes."""
        declarations = cls.declarations()
        for name in flatten_names(names):
            declarations.add_attribute(cls._check_member_name(name))

    @classmethod
    def unwrap_for(cls, *names: Any, attribute: bool = False) -> None:
        """Delegate ``names`` to the wrapped object; optionally declare them as attributes."""
        declarations = cls.declarations()
        for name in flatten_names(names):
            cls._check_member_name(name)
            cls._install(name, Unwrapped(attribute=attribute))
            declarations.add_delegate(name, attribute=attribute)

    @classmethod
    def wrap_association(
        cls,
        association: str,
        *,
        with_: Any = None,
        as_: str | None = None,
        **options: Any,
    ) -> None:
        """Expose ``association`` of the wrapped object as ``as_``, wrapped in ``with_``.

        ``options`` are passed to the presenter constructor for every wrapped value.
        """
        exposed = cls._check_member_name(as_ or association)
        descriptor = WrappedAssociation(with_, source=association, **options)
        cls._install(exposed, descriptor)
        cls.declarations().add_association(descriptor)

    @classmethod
    def wrapped_as(cls, reference: str) -> str:
        """Expose the wrapped object under a private name (``"map"`` -> ``self._map``)."""
        name = reference if reference.startswith("_") else f"_{reference}"
        cls._check_member_name(name)
        cls._install(name, WrappedReference())
        return name

    @classmethod
    def classify_association(cls, value: Any) -> AssociationValue:
        """Decide whether an association value is one object or a sequence."""
        return classify_association(value)

    # ------------------------------------------------------------------
    # attributes
    # ------------------------------------------------------------------
    def _read_member(self, name: str) -> Any:
        if name not in self.__dict__ and not hasattr(type(self), name):
            raise MissingAttributeError(type(self).__name__, name)
        value = getattr(self, name)
        if inspect.ismethod(value):
            value = value()
        return value

    def attributes(self) -> dict[str, Any]:
        """Return ``{name: value}`` for every declared attribute, in declaration order."""
        return {name: self._read_member(name) for name in type(self).declarations().attribute_names}

    async def aattributes(self) -> dict[str, Any]:
        return await sync_to_async(self.attributes)()

    # ------------------------------------------------------------------
    # associations
    # ------------------------------------------------------------------
    def association_presenter(self, name: str) -> type:
        """Resolve the presenter class for association ``name`` on this instance."""
        override = self._association_presenters.get(name)
        if override is not None:
            return presenters.resolve(override, module=type(self).__module__)

        descriptor = type(self).declarations().associations.get(name)
        if descriptor is None or descriptor.presenter is None:
            raise UnregisteredAssociationError(name)
        return presenters.resolve(descriptor.presenter, module=descriptor.module)

    def _wrap_association(self, descriptor: WrappedAssociation) -> Any:
        name = descriptor.name
        if name in self._association_cache:
            return self._association_cache[name]

        presenter_class = self.association_presenter(name)
        raw = getattr(self._wrapped_object, descriptor.source)
        if inspect.ismethod(raw):
            raw = raw()

        shaped = self.classify_association(raw)
        if isinstance(shaped, Many):
            result: Any = [presenter_class(item, **descriptor.options) for item in shaped.values]
        elif shaped.value is None:
            result = None
        else:
            result = presenter_class(shaped.value, **descriptor.options)

        self._association_cache[name] = result
        return result


_INSTANCE_STATE = ("_wrapped_object", "_association_presenters", "_association_cache", "_options")


def _reserved_names() -> frozenset[str]:
    names = {n for n in dir(Presenter) if not n.startswith("__")}
    names.update(_INSTANCE_STATE)
    names.update(n for n in dir(JSONSerializerMixin) if not n.startswith("__"))
    return frozenset(names)


__all__ = ["Presenter", "PresenterMeta"]
