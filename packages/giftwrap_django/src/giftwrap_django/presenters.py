# giftwrap_django/presenters.py
"""
Presenter base class for Django models.

    class UserPresenter(ModelPresenter):
        model = User
        column_attributes = {"except": ["encrypted_password"]}

        posts = wrapped_association(PostPresenter)

or, equivalently, after the class statement:

    UserPresenter.unwrap_columns_for(User, attribute={"except": ["encrypted_password"]})

``column_attributes`` (the ``attribute`` argument) accepts:

- ``True``: every column is an attribute (default);
- ``False``: every column is delegated, none is an attribute;
- ``{"only": [...]}`` / ``{"except": [...]}``: only the listed / all but the
  listed columns are attributes; the rest are still delegated.
"""

import logging
from collections.abc import Mapping
from typing import Any

from django.db.models.manager import BaseManager

from giftwrap import Many, MemberKind, Presenter
from giftwrap.presenters.associations import AssociationValue
from giftwrap.tracing import service_span_sync

from .columns import column_names, partition_columns

logger = logging.getLogger(__name__)

# Class-body settings read by ModelPresenter, not user members; a column with
# one of these names is still delegated.
CLASS_BODY_HOOKS = frozenset({"model", "column_attributes"})


class ModelPresenter(Presenter, abstract=True):
    model: Any = None
    column_attributes: Any = True

    @classmethod
    def _reserved_member_names(cls) -> frozenset[str]:
        return super()._reserved_member_names() | {"unwrap_columns_for"}

    @classmethod
    def contribute_declarations(cls, namespace: Mapping[str, Any]) -> None:
        model = namespace.get("model")
        if model is not None:
            cls.unwrap_columns_for(model, attribute=namespace.get("column_attributes", cls.column_attributes))
            # Members written in the class body win over generated column delegates.
            declarations = cls.declarations()
            for name in column_names(model):
                if name in namespace and name not in CLASS_BODY_HOOKS:
                    setattr(cls, name, namespace[name])
                    declarations.delegated_names.pop(name, None)
                    if name in declarations.attribute_names:
                        declarations.members[name] = MemberKind.LOCAL_ATTRIBUTE
                    else:
                        declarations.members.pop(name, None)
        super().contribute_declarations(namespace)

    @classmethod
    def unwrap_columns_for(cls, model: Any, attribute: Any = True) -> None:
        """Delegate every column of ``model``; see the module docstring for ``attribute``."""
        columns = column_names(model)
        with service_span_sync(
            "giftwrap.columns.unwrap",
            attributes={
                "giftwrap.class": cls.__qualname__,
                "giftwrap.model": getattr(model, "__name__", repr(model)),
                "giftwrap.columns": columns,
            },
        ):
            if attribute is True or attribute is False:
                cls.unwrap_for(*columns, attribute=attribute)
            elif isinstance(attribute, Mapping):
                as_attributes, not_attributes = partition_columns(columns, attribute)
                cls.unwrap_for(*as_attributes, attribute=True)
                cls.unwrap_for(*not_attributes, attribute=False)
                logger.debug(
                    "%s: column attributes=%s delegates only=%s",
                    cls.__qualname__, as_attributes, not_attributes,
                )
            else:
                cls.unwrap_for(*columns, attribute=bool(attribute))

    @classmethod
    def classify_association(cls, value: Any) -> AssociationValue:
        # Related managers are not iterable themselves.
        if isinstance(value, BaseManager):
            return Many(tuple(value.all()))
        return super().classify_association(value)


__all__ = ["ModelPresenter"]
