"""
Registry of documented backends.

Backends register a factory under their name, optionally flagged as
deprecated. The registry creates each backend once and hands the same
instance to every caller, so capability answers stay consistent across
the Markdown page and the support tables.

Example
-------
>>> registry = BackendRegistry()
>>> @registry.register("agg")
... class AggBackend(BaseBackend):
...     ...
>>> backend = registry.select("agg")
"""

from __future__ import annotations

from typing import Callable, Iterator, TypeVar

from plotdocs.backends.base_backend import BaseBackend

BackendFactory = Callable[[], BaseBackend]
F = TypeVar("F", bound=BackendFactory)


class UnknownBackendError(KeyError):
    """
    Raised when a backend name has not been registered.

    Subclasses KeyError so lookups behave like a mapping miss.
    """
    pass


class BackendRegistry:
    """Name-to-factory mapping for backends, with lazy cached instances."""

    def __init__(self) -> None:
        self._factories: dict[str, BackendFactory] = {}
        self._deprecated_names: set[str] = set()
        self._instances: dict[str, BaseBackend] = {}

    def register(self, name: str, deprecated: bool = False) -> Callable[[F], F]:
        """
        Decorator registering a backend class or zero-argument factory.

        Raises
        ------
        ValueError
            If the name is already registered.
        """
        def decorator(factory: F) -> F:
            self.add(name, factory, deprecated=deprecated)
            return factory
        return decorator

    def add(self, name: str, factory: BackendFactory, deprecated: bool = False) -> None:
        """Register `factory` under `name` without the decorator syntax."""
        if name in self._factories:
            raise ValueError(f"Backend '{name}' is already registered.")
        self._factories[name] = factory
        if deprecated:
            self._deprecated_names.add(name)

    def create(self, name: str) -> BaseBackend:
        """Return the backend registered under `name`, creating it on first use."""
        if name not in self._factories:
            available = ", ".join(sorted(self._factories))
            raise UnknownBackendError(
                f"Unknown backend '{name}'. Available: {available or 'none'}."
            )
        if name not in self._instances:
            backend = self._factories[name]()
            if name in self._deprecated_names:
                backend.deprecated = True
            self._instances[name] = backend
        return self._instances[name]

    def select(self, name: str) -> BaseBackend:
        """Create the named backend and make it the active one."""
        backend = self.create(name)
        backend.activate()
        return backend

    def is_deprecated(self, name: str) -> bool:
        return name in self._deprecated_names

    def names(self, include_deprecated: bool = False) -> list[str]:
        """Sorted names of the registered backends."""
        return sorted(
            name
            for name in self._factories
            if include_deprecated or name not in self._deprecated_names
        )

    def backends(self, include_deprecated: bool = False) -> list[BaseBackend]:
        """Backend instances in name order."""
        return [self.create(name) for name in self.names(include_deprecated)]

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self.names(include_deprecated=True))

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"<BackendRegistry backends={self.names(include_deprecated=True)}>"


# Backends shipped with PlotDocs register themselves here on import
backend_registry = BackendRegistry()
