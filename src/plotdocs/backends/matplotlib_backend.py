"""
Concrete backend documenting matplotlib.

Every capability answer is read from matplotlib itself, so the generated
tables follow the installed version: line styles, markers and scales come
from matplotlib's own registries, series types from the plotting methods
available on ``Axes``, and arguments from the ``Line2D`` setters.
"""

from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path
from typing import Any, Mapping

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib import lines as mlines
from matplotlib import markers as mmarkers
from matplotlib import scale as mscale
from matplotlib.animation import PillowWriter
from matplotlib.artist import ArtistInspector
from matplotlib.axes import Axes

from plotdocs.backends.base_backend import BaseBackend, CaptureError
from plotdocs.backends.registry import backend_registry
from plotdocs.utils.type_guards import is_matplotlib_animation

logger = logging.getLogger(__name__)


# Plotting methods documented as series types, filtered by what the
# installed Axes actually provides
CANDIDATE_SERIES_TYPES = (
    "bar",
    "barh",
    "boxplot",
    "contour",
    "contourf",
    "errorbar",
    "eventplot",
    "fill",
    "fill_between",
    "hexbin",
    "hist",
    "hist2d",
    "imshow",
    "pcolormesh",
    "pie",
    "plot",
    "quiver",
    "scatter",
    "stackplot",
    "stairs",
    "stem",
    "step",
    "streamplot",
    "violinplot",
)

# Series types drawn by composing native ones
SERIES_RECIPES: dict[str, tuple[str, ...]] = {
    "area": ("fill_between",),
    "density": ("hist", "plot"),
    "heatmap": ("imshow",),
    "sticks": ("stem",),
    "shape": ("fill",),
}


def _non_blank_strings(values: Any) -> frozenset[str]:
    """Keep string entries with visible content; integer marker codes are dropped."""
    return frozenset(
        value for value in values if isinstance(value, str) and value.strip()
    )


class MatplotlibBackend(BaseBackend):
    """
    Backend wrapping matplotlib's pyplot state machine.

    Examples draw through ``plt``; the backend rasterizes whatever figure
    is current once they finish, then closes it so the next example starts
    from a clean slate.

    Example
    -------
    >>> backend = MatplotlibBackend()
    >>> backend.activate()
    >>> backend.supported_scales()
    frozenset({'linear', 'log', ...})
    """

    def __init__(self, backend_name: str = "matplotlib", renderer: str = "Agg") -> None:
        """
        Parameters
        ----------
        backend_name : str, default="matplotlib"
            Name used in file names and table columns.
        renderer : str, default="Agg"
            matplotlib rendering backend to switch to on activation.
            Must be non-interactive for documentation builds.
        """
        self._backend_name = backend_name
        self._renderer = renderer

    @property
    def name(self) -> str:
        return self._backend_name

    @property
    def initialization_source(self) -> str:
        return (
            "import matplotlib\n"
            f'matplotlib.use("{self._renderer}")\n'
            "import matplotlib.pyplot as plt"
        )

    def activate(self) -> None:
        plt.switch_backend(self._renderer)
        plt.ioff()
        plt.close("all")
        logger.debug("Activated matplotlib renderer %s", self._renderer)

    def example_namespace(self) -> dict[str, Any]:
        namespace = super().example_namespace()
        namespace.update({"matplotlib": matplotlib, "plt": plt, "np": np})
        return namespace

    def save_figure(self, destination: Path, dpi: int) -> None:
        if not plt.get_fignums():
            raise CaptureError(
                "The example did not draw anything: no open matplotlib figure "
                "to save."
            )
        try:
            plt.gcf().savefig(destination, dpi=dpi)
        finally:
            plt.close("all")

    def save_animation(self, animation: Any, destination: Path, fps: int) -> None:
        if not is_matplotlib_animation(animation):
            received_type = type(animation).__name__
            raise CaptureError(
                f"Expected a matplotlib Animation, got {received_type}. "
                "Animated examples must assign their FuncAnimation to the "
                "example's animation variable."
            )
        try:
            animation.save(str(destination), writer=PillowWriter(fps=fps))
        finally:
            plt.close("all")

    def release_example_state(self) -> None:
        plt.close("all")

    def supported_attributes(self) -> frozenset[str]:
        return self._line_setters

    def supported_series_types(self) -> frozenset[str]:
        return self._native_series_types

    def supported_styles(self) -> frozenset[str]:
        return _non_blank_strings(mlines.lineStyles)

    def supported_markers(self) -> frozenset[str]:
        return _non_blank_strings(mmarkers.MarkerStyle.markers)

    def supported_scales(self) -> frozenset[str]:
        return frozenset(mscale.get_scale_names())

    def series_recipes(self) -> Mapping[str, tuple[str, ...]]:
        return SERIES_RECIPES

    @cached_property
    def _line_setters(self) -> frozenset[str]:
        return frozenset(ArtistInspector(mlines.Line2D).get_setters())

    @cached_property
    def _native_series_types(self) -> frozenset[str]:
        return frozenset(
            series_type
            for series_type in CANDIDATE_SERIES_TYPES
            if callable(getattr(Axes, series_type, None))
        )

    def __repr__(self) -> str:
        return f"<MatplotlibBackend (backend={self.name}) renderer={self._renderer}>"


backend_registry.add("matplotlib", MatplotlibBackend)
