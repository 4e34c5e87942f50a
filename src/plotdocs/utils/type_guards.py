"""
Type guard utilities for captured example output.

These functions detect matplotlib types without importing the modules
that define them, so a check never triggers a backend switch or pulls in
the animation machinery for static examples.
"""

from __future__ import annotations

from typing import Any


def _class_hierarchy_names(candidate: Any) -> set[str]:
    return {cls.__name__ for cls in type(candidate).__mro__}


def is_matplotlib_animation(candidate: Any) -> bool:
    """
    Check if the object is a matplotlib animation.

    Parameters
    ----------
    candidate : Any
        Object an animated example left in its animation variable.

    Returns
    -------
    bool
        True if the object derives from ``matplotlib.animation.Animation``.
    """
    is_from_matplotlib = str(type(candidate).__module__).startswith("matplotlib")
    return is_from_matplotlib and "Animation" in _class_hierarchy_names(candidate)
