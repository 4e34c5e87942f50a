"""
Attribute tables: one row per attribute with its default, aliases and help.

The raw material is an AttributeRegistry: defaults grouped by attribute
kind, a description string per attribute of the form
``"<type label>. <free text>"``, and an alias-to-attribute mapping.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from plotdocs.renderers.html_table_renderer import HtmlTableRenderer, TableStyle
from plotdocs.tables.rendered_table import RenderedTable

logger = logging.getLogger(__name__)

ATTRIBUTE_KINDS = ("Series", "Subplot", "Plot", "Axis")
ATTRIBUTE_COLUMNS = ("Attribute", "Default", "Aliases", "Type", "Description")


def _freeze(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class AttributeRegistry:
    """
    Read-only attribute metadata of one graphics library.

    Parameters
    ----------
    aliases : mapping of str to str
        Alternate name -> canonical attribute name.
    descriptions : mapping of str to str
        Attribute name -> raw ``"Type. Description"`` string.
    defaults : mapping of str to mapping
        Attribute kind (``"Series"``, ``"Subplot"``, ...) -> attribute
        name -> default value.
    """

    aliases: Mapping[str, str] = field(default_factory=dict)
    descriptions: Mapping[str, str] = field(default_factory=dict)
    defaults: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "aliases", _freeze(self.aliases))
        object.__setattr__(self, "descriptions", _freeze(self.descriptions))
        object.__setattr__(
            self,
            "defaults",
            _freeze({kind: _freeze(values) for kind, values in self.defaults.items()}),
        )

    @classmethod
    def from_json(cls, path: Path) -> AttributeRegistry:
        """
        Load a registry from a JSON file with ``aliases``, ``descriptions``
        and ``defaults`` objects. Missing sections are empty.
        """
        with Path(path).open(encoding="utf-8") as registry_file:
            payload = json.load(registry_file)
        return cls(
            aliases=payload.get("aliases", {}),
            descriptions=payload.get("descriptions", {}),
            defaults=payload.get("defaults", {}),
        )

    def defaults_for(self, kind: str) -> Mapping[str, Any]:
        """Defaults of one attribute kind; unknown kinds have none."""
        return self.defaults.get(kind, MappingProxyType({}))


@dataclass(frozen=True, slots=True)
class AttributeRow:
    """One documented attribute."""
    name: str
    default: Any
    aliases: tuple[str, ...]
    type_label: str
    description: str

    @property
    def aliases_text(self) -> str:
        return ", ".join(self.aliases)

    def as_cells(self) -> tuple[str, ...]:
        """Display strings in ATTRIBUTE_COLUMNS order."""
        return (
            self.name,
            repr(self.default),
            self.aliases_text,
            self.type_label,
            self.description,
        )


def split_description(raw_description: str) -> tuple[str, str]:
    """
    Split ``"Type. Free text"`` at its first period.

    Text without a period has no type label: the whole string, trimmed,
    becomes the description.

    >>> split_description("Bool. Show the legend.")
    ('Bool', 'Show the legend.')
    >>> split_description("no period here")
    ('', 'no period here')
    """
    type_label, period, description = raw_description.partition(".")
    if not period:
        return "", raw_description.strip()
    return type_label, description.strip()


def aliases_for(attribute_name: str, aliases: Mapping[str, str]) -> tuple[str, ...]:
    """Every alias pointing at `attribute_name`, sorted and unique."""
    return tuple(sorted({alias for alias, target in aliases.items() if target == attribute_name}))


def build_attribute_table(
    kind: str,
    defaults: Mapping[str, Any],
    registry: AttributeRegistry,
) -> list[AttributeRow]:
    """
    Rows for every attribute of one kind, sorted by name.

    Attributes without a description get an empty type label and an
    empty description.
    """
    rows = []
    for attribute_name, default_value in defaults.items():
        raw_description = registry.descriptions.get(attribute_name, "")
        type_label, description = split_description(raw_description)
        rows.append(
            AttributeRow(
                name=attribute_name,
                default=default_value,
                aliases=aliases_for(attribute_name, registry.aliases),
                type_label=type_label,
                description=description,
            )
        )
    logger.debug("Built %d %s attribute rows", len(rows), kind)
    return sorted(rows, key=lambda row: row.name)


def attribute_rows_to_table(rows: Iterable[AttributeRow]) -> RenderedTable:
    return RenderedTable(
        column_names=ATTRIBUTE_COLUMNS,
        rows=tuple(row.as_cells() for row in rows),
    )


def save_attr_html_files(
    registry: AttributeRegistry,
    output_dir: Path,
    renderer: HtmlTableRenderer | None = None,
    kinds: Iterable[str] = ATTRIBUTE_KINDS,
) -> list[Path]:
    """
    Write ``<kind>_attr.html`` for every attribute kind.

    Returns the written paths in kind order.
    """
    renderer = renderer or HtmlTableRenderer()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written_paths: list[Path] = []
    for kind in kinds:
        rows = build_attribute_table(kind, registry.defaults_for(kind), registry)
        destination = output_dir / f"{kind.lower()}_attr.html"
        renderer.save(attribute_rows_to_table(rows), destination, TableStyle.ATTRIBUTE)
        logger.info("Wrote html file for %s: %s", kind, destination)
        written_paths.append(destination)
    return written_paths
