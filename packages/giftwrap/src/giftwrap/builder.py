# giftwrap/builder.py
"""
Build presenter classes from data instead of a class statement.

    spec = PresenterSpec(
        delegates=["type"],
        attribute_delegates=["units"],
        associations=[AssociationSpec(name="legend", presenter=LegendPresenter)],
    )
    MapPresenter = build_presenter("MapPresenter", spec)

Locally computed attributes are supplied through ``namespace`` (functions are
bound like methods written in a class body) and listed in ``spec.attributes``.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .conf import GiftWrapConfig
from .presenters import Presenter
from .presenters.declarations import unwrapped, wrapped_association


class AssociationSpec(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    # Presenter class, registered name, or None (must be supplied per instance).
    presenter: Any = None
    source: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)


class PresenterSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    delegates: list[str] = Field(default_factory=list)
    attribute_delegates: list[str] = Field(default_factory=list)
    attributes: list[str] = Field(default_factory=list)
    associations: list[AssociationSpec] = Field(default_factory=list)
    wrapped_as: str | None = None


def build_presenter(
    name: str,
    spec: PresenterSpec,
    *,
    base: type[Presenter] = Presenter,
    config: GiftWrapConfig | None = None,
    module: str | None = None,
    namespace: Mapping[str, Callable[..., Any] | Any] | None = None,
) -> type[Presenter]:
    """Create a presenter class named ``name`` from ``spec``."""
    body: dict[str, Any] = {
        "__module__": module or base.__module__,
        "__qualname__": name,
    }
    body.update(namespace or {})
    for delegate in spec.delegates:
        body[delegate] = unwrapped()
    for delegate in spec.attribute_delegates:
        body[delegate] = unwrapped(attribute=True)
    for assoc in spec.associations:
        body[assoc.name] = wrapped_association(assoc.presenter, source=assoc.source, **assoc.options)

    metaclass = type(base)
    cls = metaclass(name, (base,), body, config=config)
    if spec.attributes:
        cls.attribute(*spec.attributes)
    if spec.wrapped_as:
        cls.wrapped_as(spec.wrapped_as)
    return cls


__all__ = ["AssociationSpec", "PresenterSpec", "build_presenter"]
