"""
Plain column/row table handed to the renderers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


class TableShapeError(ValueError):
    """Raised when a row does not have exactly one cell per column."""
    pass


@dataclass(frozen=True, slots=True)
class RenderedTable:
    """
    Ordered column names plus ordered rows of display strings.

    Built by the support and attribute builders, consumed once by a
    renderer and then discarded.
    """

    column_names: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    def __post_init__(self) -> None:
        column_count = len(self.column_names)
        for row_position, row in enumerate(self.rows):
            if len(row) != column_count:
                raise TableShapeError(
                    f"Row {row_position} has {len(row)} cells but the table has "
                    f"{column_count} columns: {row!r}"
                )

    @classmethod
    def from_rows(
        cls,
        column_names: Sequence[str],
        rows: Iterable[Sequence[object]],
    ) -> RenderedTable:
        """Build a table, converting every cell to its display string."""
        return cls(
            column_names=tuple(str(name) for name in column_names),
            rows=tuple(tuple(str(cell) for cell in row) for row in rows),
        )

    @property
    def shape(self) -> tuple[int, int]:
        """(row count, column count)."""
        return len(self.rows), len(self.column_names)

    def column(self, column_name: str) -> tuple[str, ...]:
        """All cells of one column, in row order."""
        position = self.column_names.index(column_name)
        return tuple(row[position] for row in self.rows)
