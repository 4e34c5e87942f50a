"""
Abstract base class for documented plotting backends.

Each backend wraps one rendering engine of the graphics library and
answers the capability questions the documentation needs: which
attributes, series types, styles, markers and scales it supports, and
how to capture the figure an example just produced.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, Mapping


class CaptureError(RuntimeError):
    """
    Raised when a backend cannot capture what an example produced.

    Examples: an animated example that left a plain list in the
    animation variable, or a static example that drew no figure.
    """
    pass


class SupportLevel(str, Enum):
    """How a backend supports one capability value."""

    NATIVE = "native"
    RECIPE = "recipe"
    UNSUPPORTED = "unsupported"

    @property
    def display_text(self) -> str:
        """Cell text used in the HTML support tables."""
        return "" if self is SupportLevel.UNSUPPORTED else self.value


class BaseBackend(ABC):
    """
    Abstract base class for plotting backends.

    Subclasses must implement:
    - `name`: identifies the backend in file names and table columns
    - `activate()`: selects the backend and disables interactive display
    - `save_figure()` / `save_animation()`: capture primitives
    - the five `supported_*()` capability queries

    Series types get a third support state: a type the backend does not
    draw itself is still available as a *recipe* when every type it is
    built from resolves, directly or through other recipes, to a native
    type. Subclasses describe recipes through `series_recipes()`.
    """

    # Deprecated backends are left out of the support tables
    deprecated: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the short name of the backend.

        Used for Markdown and image file names and as a table column.
        """
        ...

    @property
    def initialization_source(self) -> str:
        """Code shown in the 'Initialize' section of the backend's page."""
        return f"# backend: {self.name}"

    @abstractmethod
    def activate(self) -> None:
        """Make this backend current and switch off interactive display."""
        ...

    def example_namespace(self) -> dict[str, Any]:
        """
        Globals every example of this backend executes in.

        A fresh dictionary is returned on each call so examples do not
        share variables.
        """
        return {"__name__": "__plotdocs_example__"}

    def release_example_state(self) -> None:
        """
        Drop whatever an example left open, whether it succeeded or not.

        Called after every example; the default has nothing to release.
        """
        return None

    @abstractmethod
    def save_figure(self, destination: Path, dpi: int) -> None:
        """Rasterize the current figure to `destination`."""
        ...

    @abstractmethod
    def save_animation(self, animation: Any, destination: Path, fps: int) -> None:
        """
        Encode an animation handle to `destination` at `fps` frames per second.

        Raises
        ------
        CaptureError
            If `animation` is not something this backend can encode.
        """
        ...

    @abstractmethod
    def supported_attributes(self) -> frozenset[str]:
        ...

    @abstractmethod
    def supported_series_types(self) -> frozenset[str]:
        ...

    @abstractmethod
    def supported_styles(self) -> frozenset[str]:
        ...

    @abstractmethod
    def supported_markers(self) -> frozenset[str]:
        ...

    @abstractmethod
    def supported_scales(self) -> frozenset[str]:
        ...

    def series_recipes(self) -> Mapping[str, tuple[str, ...]]:
        """
        Series types this backend emulates, mapped to the types they use.

        The default backend has no recipes.
        """
        return {}

    def series_type_support(self, series_type: str) -> SupportLevel:
        """
        Classify one series type as native, recipe or unsupported.

        Recipes with a missing ingredient, or recipes that end up depending
        on themselves, are unsupported.
        """
        if series_type in self.supported_series_types():
            return SupportLevel.NATIVE
        if self._recipe_resolves(series_type, frozenset()):
            return SupportLevel.RECIPE
        return SupportLevel.UNSUPPORTED

    def _recipe_resolves(self, series_type: str, types_being_resolved: frozenset[str]) -> bool:
        ingredients = self.series_recipes().get(series_type)
        if not ingredients or series_type in types_being_resolved:
            return False

        native_types = self.supported_series_types()
        nested_visit = types_being_resolved | {series_type}
        return all(
            ingredient in native_types
            or self._recipe_resolves(ingredient, nested_visit)
            for ingredient in ingredients
        )

    def __repr__(self) -> str:
        """Readable representation for debugging and log inspection."""
        deprecated_flag = " deprecated" if self.deprecated else ""
        return f"<{self.__class__.__name__} (backend={self.name}){deprecated_flag}>"
