# giftwrap/registry/base.py


import logging
from threading import RLock
from typing import Any, Callable, Generic, TypeVar

from ..exceptions import RegistryFrozenError, RegistryLookupError

logger = logging.getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T")


class BaseRegistry(Generic[K, T]):
    """Thread-safe registry keyed by K storing classes of T."""

    def __init__(self, *, coerce_key: Callable[[Any], K]) -> None:
        self._coerce = coerce_key
        self._lock = RLock()
        self._store: dict[K, type[T]] = {}
        self._frozen = False

    # --- registration ---

    def register(self, cls: type[T], *, replace: bool = False) -> None:
        """
        Register a class under its coerced key.

        Re-registering the same class is a no-op. A *different* class under an
        existing key replaces the old one only when ``replace`` is true (class
        re-definition, e.g. on module reload); otherwise it is ignored and
        logged.

        :raises RegistryFrozenError: If the registry has been frozen.
        """
        key = self._coerce(cls)
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            existing = self._store.get(key)
            if existing is cls:
                return
            if existing is not None and not replace:
                logger.warning("Registry key %s already taken by %r; ignoring %r", key, existing, cls)
                return
            if existing is not None:
                logger.debug("Replacing %r registered as %s", existing, key)
            self._store[key] = cls

    # --- retrieval ---

    def get(self, key: Any) -> type[T]:
        """
        Retrieve the class registered under ``key``.

        :raises RegistryLookupError: If nothing is registered under the key.
        """
        k = self._coerce(key)
        with self._lock:
            try:
                return self._store[k]
            except KeyError as err:
                raise RegistryLookupError(f"Nothing registered as {key!r}") from err

    def try_get(self, key: Any) -> type[T] | None:
        """Like :meth:`get` but returns ``None`` when the key is unknown."""
        try:
            return self.get(key)
        except RegistryLookupError:
            return None

    # --- enumeration ---

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    def all(self) -> tuple[type[T], ...]:
        with self._lock:
            return tuple(self._store.values())

    def keys(self) -> tuple[K, ...]:
        with self._lock:
            return tuple(self._store.keys())

    def filter(self, pred: Callable[[type[T]], bool]) -> tuple[type[T], ...]:
        """Return all registered classes matching predicate ``pred``."""
        with self._lock:
            return tuple(c for c in self._store.values() if pred(c))

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return self._coerce(key) in self._store

    # --- mutation / control ---

    def unregister(self, key: Any) -> None:
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            self._store.pop(self._coerce(key), None)

    def clear(self) -> None:
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            self._store.clear()

    def freeze(self) -> None:
        """Mark the registry as frozen (no further mutations)."""
        with self._lock:
            self._frozen = True
