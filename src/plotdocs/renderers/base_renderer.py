"""
Abstract base class for table renderers.

Renderers consume RenderedTable objects and produce a text document
(HTML today). This base class owns writing the document to disk so
subclasses only deal with markup.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from plotdocs.tables.rendered_table import RenderedTable


class BaseRenderer(ABC):
    """
    Abstract base class for table output formats.

    Subclasses implement `render()`; `save()` renders and writes the
    result in one step.
    """

    @abstractmethod
    def render(
        self,
        table_to_render: RenderedTable,
        **render_options: Any,
    ) -> str:
        """
        Render a table as a complete document.

        Parameters
        ----------
        table_to_render : RenderedTable
            Column names and rows of display strings.
        **render_options
            Renderer-specific options (cell styling, stylesheet, ...).

        Returns
        -------
        str
            The rendered document.
        """
        ...

    def save(
        self,
        table_to_render: RenderedTable,
        destination: str | Path,
        *args: Any,
        **render_options: Any,
    ) -> Path:
        """
        Render `table_to_render` and write it to `destination`.

        The parent directory must exist. Errors opening or writing the
        file propagate to the caller unchanged.
        """
        destination = Path(destination)
        document = self.render(table_to_render, *args, **render_options)
        with destination.open("w", encoding="utf-8") as output_file:
            output_file.write(document)
        return destination

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
