"""
Attribute registry read from matplotlib's rcParams.

Each attribute kind maps to one rcParams group; attribute names are the
full rcParams keys so the same setting name in two groups stays distinct.
Short aliases come from the ``Line2D`` property aliases (``lw``, ``ls``,
...) and only apply to the series group.
Series descriptions use the summary line of the matching ``Line2D`` setter
where one exists.
"""

from __future__ import annotations

import inspect
from typing import Any, Mapping

import matplotlib
from matplotlib import lines as mlines
from matplotlib.artist import ArtistInspector

from plotdocs.tables.attribute_table import AttributeRegistry

RC_PARAM_GROUPS = {
    "lines": "Series",
    "axes": "Subplot",
    "figure": "Plot",
    "xtick": "Axis",
}


def line_property_aliases(group: str = "lines") -> dict[str, str]:
    """Alias -> ``"<group>.<property>"`` for every aliased Line2D property."""
    aliases: dict[str, str] = {}
    for property_name, property_aliases in ArtistInspector(mlines.Line2D).aliasd.items():
        for alias in property_aliases:
            aliases[alias] = f"{group}.{property_name}"
    return aliases


def line_property_summaries() -> dict[str, str]:
    """Property name -> first paragraph of its ``Line2D`` setter docstring."""
    summaries: dict[str, str] = {}
    for property_name in ArtistInspector(mlines.Line2D).get_setters():
        setter = getattr(mlines.Line2D, f"set_{property_name}", None)
        docstring = inspect.getdoc(setter) if setter is not None else None
        if not docstring:
            continue
        first_paragraph = docstring.split("\n\n", 1)[0]
        summaries[property_name] = " ".join(first_paragraph.split())
    return summaries


def matplotlib_attribute_registry(
    rc_params: Mapping[str, Any] | None = None,
) -> AttributeRegistry:
    """
    Build an AttributeRegistry from rcParams.

    Parameters
    ----------
    rc_params : mapping, optional
        Settings to document. Defaults to ``matplotlib.rcParamsDefault``.
    """
    if rc_params is None:
        rc_params = matplotlib.rcParamsDefault

    defaults: dict[str, dict[str, Any]] = {kind: {} for kind in RC_PARAM_GROUPS.values()}
    descriptions: dict[str, str] = {}
    series_summaries = line_property_summaries()
    for rc_key in sorted(rc_params):
        group, _, setting = rc_key.partition(".")
        kind = RC_PARAM_GROUPS.get(group)
        if kind is None or not setting:
            continue
        default_value = rc_params[rc_key]
        defaults[kind][rc_key] = default_value
        description = f"Default from rcParams['{rc_key}']."
        if group == "lines" and setting in series_summaries:
            description = f"{series_summaries[setting]} {description}"
        descriptions[rc_key] = f"{type(default_value).__name__}. {description}"

    known_keys = {rc_key for kind_defaults in defaults.values() for rc_key in kind_defaults}
    aliases = {
        alias: target
        for alias, target in line_property_aliases().items()
        if target in known_keys
    }
    return AttributeRegistry(aliases=aliases, descriptions=descriptions, defaults=defaults)
