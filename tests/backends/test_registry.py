"""
Unit tests for BackendRegistry.
"""

import pytest

from plotdocs.backends.matplotlib_backend import MatplotlibBackend
from plotdocs.backends.registry import BackendRegistry, UnknownBackendError, backend_registry


class TestRegistration:

    def test_decorator_registers_class(self, fake_backend_class) -> None:
        registry = BackendRegistry()

        @registry.register("decorated")
        class DecoratedBackend(fake_backend_class):
            pass

        assert "decorated" in registry
        assert isinstance(registry.create("decorated"), DecoratedBackend)

    def test_duplicate_name_raises(self, fake_backend_class) -> None:
        registry = BackendRegistry()
        registry.add("fake", fake_backend_class)

        with pytest.raises(ValueError, match="already registered"):
            registry.add("fake", fake_backend_class)

    def test_unknown_name_raises_keyerror(self) -> None:
        registry = BackendRegistry()

        with pytest.raises(KeyError):
            registry.create("missing")
        with pytest.raises(UnknownBackendError, match="missing"):
            registry.create("missing")

    def test_len_counts_deprecated(self, fake_backend_class) -> None:
        registry = BackendRegistry()
        registry.add("a", fake_backend_class)
        registry.add("b", fake_backend_class, deprecated=True)
        assert len(registry) == 2


class TestLookup:

    def test_create_caches_instance(self, fake_backend_class) -> None:
        registry = BackendRegistry()
        registry.add("fake", fake_backend_class)
        assert registry.create("fake") is registry.create("fake")

    def test_select_activates(self, fake_backend_class) -> None:
        registry = BackendRegistry()
        registry.add("fake", fake_backend_class)

        backend = registry.select("fake")

        assert backend.activation_count == 1

    def test_names_sorted_without_deprecated(self, fake_backend_class) -> None:
        registry = BackendRegistry()
        registry.add("zeta", fake_backend_class)
        registry.add("alpha", fake_backend_class)
        registry.add("old", fake_backend_class, deprecated=True)

        assert registry.names() == ["alpha", "zeta"]
        assert registry.names(include_deprecated=True) == ["alpha", "old", "zeta"]
        assert list(registry) == ["alpha", "old", "zeta"]

    def test_deprecated_flag_applied_to_instance(self, fake_backend_class) -> None:
        registry = BackendRegistry()
        registry.add("old", fake_backend_class, deprecated=True)

        assert registry.is_deprecated("old")
        assert registry.create("old").deprecated is True


class TestSharedRegistry:

    def test_matplotlib_registered(self) -> None:
        assert "matplotlib" in backend_registry
        assert isinstance(backend_registry.create("matplotlib"), MatplotlibBackend)
