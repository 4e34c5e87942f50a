"""
Shared utility functions.
"""

from plotdocs.utils.type_guards import is_matplotlib_animation

__all__ = [
    "is_matplotlib_animation",
]
