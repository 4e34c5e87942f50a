"""
Support matrices: which backend supports which capability value, and how.

Rows are the values of one capability dimension (series types, line
styles, markers, ...), columns are the non-deprecated backends, and every
cell holds a SupportLevel. Whether a dimension distinguishes recipes from
native support is decided by the query the caller passes in, never by the
builder.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Mapping

from plotdocs.backends.base_backend import BaseBackend, SupportLevel
from plotdocs.backends.registry import BackendRegistry
from plotdocs.renderers.html_table_renderer import HtmlTableRenderer, TableStyle
from plotdocs.tables.rendered_table import RenderedTable

logger = logging.getLogger(__name__)

# Header of the first column of every support table
ROW_KEY_COLUMN = "keys"

CapabilityLookup = Callable[[BaseBackend], Iterable[str]]


class CapabilityQuery(ABC):
    """Classifies one (backend, value) pair."""

    @abstractmethod
    def classify(self, backend: BaseBackend, value: str) -> SupportLevel:
        ...

    @abstractmethod
    def known_values(self, backend: BaseBackend) -> frozenset[str]:
        """Every value this backend has an opinion about, for building universes."""
        ...


class TwoStateQuery(CapabilityQuery):
    """
    Native when the value is in the backend's supported set, else unsupported.

    Used for arguments, styles, markers and scales, where a backend either
    implements a value or does not.
    """

    def __init__(self, lookup: CapabilityLookup) -> None:
        self._lookup = lookup

    def classify(self, backend: BaseBackend, value: str) -> SupportLevel:
        if value in frozenset(self._lookup(backend)):
            return SupportLevel.NATIVE
        return SupportLevel.UNSUPPORTED

    def known_values(self, backend: BaseBackend) -> frozenset[str]:
        return frozenset(self._lookup(backend))


class ThreeStateQuery(CapabilityQuery):
    """Series-type classification: native, recipe or unsupported."""

    def classify(self, backend: BaseBackend, value: str) -> SupportLevel:
        return backend.series_type_support(value)

    def known_values(self, backend: BaseBackend) -> frozenset[str]:
        return backend.supported_series_types() | frozenset(backend.series_recipes())


@dataclass(frozen=True)
class SupportMatrix:
    """
    Dense (value x backend) table of support levels.

    Build with `build_support_matrix`, which sorts and deduplicates both
    key sets and fills every cell.
    """

    dimension: str
    row_keys: tuple[str, ...]
    column_keys: tuple[str, ...]
    cells: Mapping[tuple[str, str], SupportLevel]

    def cell(self, row_key: str, column_key: str) -> SupportLevel:
        return self.cells[(row_key, column_key)]

    def to_table(self) -> RenderedTable:
        """Display form: value column first, then one column per backend."""
        return RenderedTable(
            column_names=(ROW_KEY_COLUMN, *self.column_keys),
            rows=tuple(
                (
                    row_key,
                    *(self.cell(row_key, column_key).display_text for column_key in self.column_keys),
                )
                for row_key in self.row_keys
            ),
        )


def build_support_matrix(
    values: Iterable[str],
    backends: Iterable[BaseBackend],
    query: CapabilityQuery,
    dimension: str = "",
) -> SupportMatrix:
    """
    Classify every value against every non-deprecated backend.

    Parameters
    ----------
    values : iterable of str
        Universe of values; duplicates are dropped and rows are sorted.
    backends : iterable of BaseBackend
        Candidate columns. Deprecated backends are skipped; columns are
        sorted by name and a name appearing twice is kept once.
    query : CapabilityQuery
        Two- or three-state classification chosen by the caller.
    dimension : str, optional
        Label of the capability dimension, kept for reporting.
    """
    row_keys = tuple(sorted(set(values)))

    backends_by_name: dict[str, BaseBackend] = {}
    for backend in backends:
        if not backend.deprecated:
            backends_by_name.setdefault(backend.name, backend)
    column_keys = tuple(sorted(backends_by_name))

    cells = {
        (row_key, column_key): query.classify(backends_by_name[column_key], row_key)
        for row_key in row_keys
        for column_key in column_keys
    }
    return SupportMatrix(
        dimension=dimension,
        row_keys=row_keys,
        column_keys=column_keys,
        cells=cells,
    )


# One entry per published support table, keyed by file-name suffix
SUPPORT_DIMENSIONS: dict[str, CapabilityQuery] = {
    "args": TwoStateQuery(lambda backend: backend.supported_attributes()),
    "types": ThreeStateQuery(),
    "styles": TwoStateQuery(lambda backend: backend.supported_styles()),
    "markers": TwoStateQuery(lambda backend: backend.supported_markers()),
    "scales": TwoStateQuery(lambda backend: backend.supported_scales()),
}


def collect_values(backends: Iterable[BaseBackend], query: CapabilityQuery) -> frozenset[str]:
    """Union of the values every backend knows about for one dimension."""
    known: set[str] = set()
    for backend in backends:
        known |= query.known_values(backend)
    return frozenset(known)


def make_support_matrix(
    dimension: str,
    registry: BackendRegistry,
    values: Iterable[str] | None = None,
) -> SupportMatrix:
    """
    Support matrix of one named dimension over a registry's backends.

    When `values` is omitted, the universe is every value known to any
    registered backend, deprecated ones included, so a value only a
    deprecated backend knew still shows up as an all-unsupported row.
    """
    if dimension not in SUPPORT_DIMENSIONS:
        available = ", ".join(sorted(SUPPORT_DIMENSIONS))
        raise KeyError(f"Unknown support dimension '{dimension}'. Available: {available}.")

    query = SUPPORT_DIMENSIONS[dimension]
    if values is None:
        values = collect_values(registry.backends(include_deprecated=True), query)
    return build_support_matrix(values, registry.backends(), query, dimension=dimension)


def create_support_tables(
    registry: BackendRegistry,
    output_dir: Path,
    renderer: HtmlTableRenderer | None = None,
) -> list[Path]:
    """
    Write ``supported_<dimension>.html`` for every support dimension.

    Returns the written paths in dimension order. Failing to write a file
    raises OSError; tables written before it are left in place.
    """
    renderer = renderer or HtmlTableRenderer()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written_paths: list[Path] = []
    for dimension in SUPPORT_DIMENSIONS:
        matrix = make_support_matrix(dimension, registry)
        destination = output_dir / f"supported_{dimension}.html"
        renderer.save(matrix.to_table(), destination, TableStyle.SUPPORT)
        logger.info("Wrote support table for %s: %s", dimension, destination)
        written_paths.append(destination)
    return written_paths
