"""
Pytest fixtures for the PlotDocs test suite.

These fixtures provide an in-memory backend and small catalogs so most
tests never touch matplotlib's rendering machinery.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Mapping

import numpy as np
import pytest

from plotdocs.backends.base_backend import BaseBackend, CaptureError
from plotdocs.config import DocsConfig
from plotdocs.core.example_spec import ExampleSpec, MediaKind


class FakeAnimation:
    """Stand-in animation handle understood by FakeBackend."""

    def __init__(self, frame_count: int = 3) -> None:
        self.frame_count = frame_count


class FakeBackend(BaseBackend):
    """
    Backend with fixed capability sets that writes placeholder images.

    `recorded` is exposed to examples as ``record`` so tests can observe
    what the example code computed.
    """

    def __init__(
        self,
        name: str = "fake",
        attributes: Iterable[str] = ("color", "label"),
        series_types: Iterable[str] = ("line", "scatter"),
        styles: Iterable[str] = ("solid", "dash"),
        markers: Iterable[str] = ("circle",),
        scales: Iterable[str] = ("linear",),
        recipes: Mapping[str, tuple[str, ...]] | None = None,
        deprecated: bool = False,
    ) -> None:
        self._name = name
        self._attributes = frozenset(attributes)
        self._series_types = frozenset(series_types)
        self._styles = frozenset(styles)
        self._markers = frozenset(markers)
        self._scales = frozenset(scales)
        self._recipes = dict(recipes or {})
        self.deprecated = deprecated
        self.activation_count = 0
        self.release_count = 0
        self.saved_paths: list[Path] = []
        self.recorded: list[Any] = []

    @property
    def name(self) -> str:
        return self._name

    def activate(self) -> None:
        self.activation_count += 1

    def release_example_state(self) -> None:
        self.release_count += 1

    def example_namespace(self) -> dict[str, Any]:
        namespace = super().example_namespace()
        namespace.update({"np": np, "record": self.recorded, "FakeAnimation": FakeAnimation})
        return namespace

    def save_figure(self, destination: Path, dpi: int) -> None:
        destination.write_bytes(b"PNG placeholder")
        self.saved_paths.append(destination)

    def save_animation(self, animation: Any, destination: Path, fps: int) -> None:
        if not isinstance(animation, FakeAnimation):
            raise CaptureError(f"Cannot encode {type(animation).__name__}")
        destination.write_bytes(b"GIF placeholder")
        self.saved_paths.append(destination)

    def supported_attributes(self) -> frozenset[str]:
        return self._attributes

    def supported_series_types(self) -> frozenset[str]:
        return self._series_types

    def supported_styles(self) -> frozenset[str]:
        return self._styles

    def supported_markers(self) -> frozenset[str]:
        return self._markers

    def supported_scales(self) -> frozenset[str]:
        return self._scales

    def series_recipes(self) -> Mapping[str, tuple[str, ...]]:
        return self._recipes


@pytest.fixture
def fake_backend_class() -> type[FakeBackend]:
    """The FakeBackend class, for tests that need several instances."""
    return FakeBackend


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2024-01-02 03:04:05."""
    return lambda: datetime(2024, 1, 2, 3, 4, 5)


@pytest.fixture
def docs_config(tmp_path: Path, fixed_clock) -> DocsConfig:
    """DocsConfig writing under a temporary directory."""
    return DocsConfig(docs_dir=tmp_path / "docs", clock=fixed_clock)


@pytest.fixture
def working_example() -> ExampleSpec:
    return ExampleSpec.from_source(
        "Random walk",
        "Cumulative sum of random steps.",
        "steps = np.random.randn(10)\nrecord.append(float(steps.cumsum()[-1]))\n",
    )


@pytest.fixture
def failing_example() -> ExampleSpec:
    return ExampleSpec.from_source(
        "Broken",
        "Raises while executing.",
        "value = 1\nraise ValueError('example exploded')\n",
    )


@pytest.fixture
def animated_example() -> ExampleSpec:
    return ExampleSpec.from_source(
        "Moving",
        "An animated example.",
        "anim = FakeAnimation(frame_count=5)\n",
        media_kind=MediaKind.ANIMATED,
    )
