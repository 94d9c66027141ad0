"""Registry of presenter classes, used to resolve lazy string references.

Association declarations may name their presenter class by string so that two
presenters can refer to each other regardless of definition order:

    class MapPresenter(Presenter):
        legend = wrapped_association("LegendPresenter")

A bare name is looked up next to the declaring presenter's module first, then
by unique class name across everything registered. Dotted names are looked up
as-is (``"app.presenters.LegendPresenter"``).
"""

from __future__ import annotations

from typing import Any

from ..exceptions import RegistryLookupError
from .base import BaseRegistry


def presenter_path(value: Any) -> str:
    """Coerce a class (or an already dotted string) to its registry key."""
    if isinstance(value, str):
        return value
    return f"{value.__module__}.{value.__qualname__}"


class PresenterRegistry(BaseRegistry[str, Any]):
    def __init__(self) -> None:
        super().__init__(coerce_key=presenter_path)

    def resolve(self, reference: Any, *, module: str | None = None) -> type:
        """Return the presenter class for a class or string ``reference``."""
        if isinstance(reference, type):
            return reference
        if not isinstance(reference, str):
            raise TypeError(f"Presenter reference must be a class or str, got {type(reference).__name__}")

        found = self.try_get(reference)
        if found is not None:
            return found

        if module and "." not in reference:
            found = self.try_get(f"{module}.{reference}")
            if found is not None:
                return found

        candidates = self.filter(lambda cls: cls.__name__ == reference)
        if len(candidates) == 1:
            return candidates[0]
        if len(candidates) > 1:
            raise RegistryLookupError(
                f"Presenter reference {reference!r} is ambiguous: "
                + ", ".join(presenter_path(c) for c in candidates)
            )
        raise RegistryLookupError(f"No presenter registered as {reference!r}")


presenters = PresenterRegistry()
