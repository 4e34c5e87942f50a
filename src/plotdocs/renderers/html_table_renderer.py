"""
HTML renderer for attribute and support tables.

Produces a single self-contained table document; the look comes from an
external stylesheet keyed on the cell classes assigned here.
"""

from __future__ import annotations

import html
from enum import Enum
from typing import TYPE_CHECKING, Any

from plotdocs.renderers.base_renderer import BaseRenderer

if TYPE_CHECKING:
    from plotdocs.tables.rendered_table import RenderedTable


DEFAULT_STYLESHEET = "tables.css"

# Cell classes, matched by the stylesheet
ATTRIBUTE_NAME_CLASS = "attr"
DESCRIPTION_CLASS = "desc"
SUPPORT_CLASSES = {
    "native": "supported_native",
    "recipe": "supported_recipe",
}
NOT_SUPPORTED_CLASS = "supported_not"


class TableStyle(str, Enum):
    """Cell styling policy of a rendered table."""

    ATTRIBUTE = "attribute"
    SUPPORT = "support"


def _attribute_cell_class(column_position: int, column_count: int, cell_text: str) -> str | None:
    if column_position == 0:
        return ATTRIBUTE_NAME_CLASS
    if column_position == column_count - 1:
        return DESCRIPTION_CLASS
    return None


def _support_cell_class(column_position: int, column_count: int, cell_text: str) -> str | None:
    if column_position == 0:
        return ATTRIBUTE_NAME_CLASS
    return SUPPORT_CLASSES.get(cell_text, NOT_SUPPORTED_CLASS)


_CELL_CLASSIFIERS = {
    TableStyle.ATTRIBUTE: _attribute_cell_class,
    TableStyle.SUPPORT: _support_cell_class,
}


class HtmlTableRenderer(BaseRenderer):
    """
    Render a RenderedTable as an HTML document.

    Example
    -------
    >>> renderer = HtmlTableRenderer()
    >>> renderer.save(matrix.to_table(), "supported_types.html", TableStyle.SUPPORT)

    Parameters
    ----------
    stylesheet : str or None, default="tables.css"
        Href of the stylesheet linked from the document head. None leaves
        the head empty.
    """

    def __init__(self, stylesheet: str | None = DEFAULT_STYLESHEET) -> None:
        self._stylesheet = stylesheet

    def render(
        self,
        table_to_render: RenderedTable,
        style: TableStyle = TableStyle.ATTRIBUTE,
        **render_options: Any,
    ) -> str:
        """
        Render the table; every header and cell is HTML-escaped.

        In attribute style the first column is classed ``attr`` and the
        last ``desc``. In support style the first column is ``attr`` and
        the others get ``supported_native``, ``supported_recipe`` or
        ``supported_not`` from their text.
        """
        classify_cell = _CELL_CLASSIFIERS[TableStyle(style)]
        column_count = len(table_to_render.column_names)

        parts = [self._head(), "<body><table>", '<tr class="headerrow">']
        for column_name in table_to_render.column_names:
            parts.append(f"<th>{html.escape(column_name)}</th>")
        parts.append("</tr>")

        for row in table_to_render.rows:
            parts.append("<tr>")
            for column_position, cell_text in enumerate(row):
                css_class = classify_cell(column_position, column_count, cell_text)
                class_attribute = f' class="{css_class}"' if css_class else ""
                parts.append(f"<td{class_attribute}>{html.escape(cell_text)}</td>")
            parts.append("</tr>")

        parts.append("</table></body>")
        return "".join(parts)

    def _head(self) -> str:
        if self._stylesheet is None:
            return "<head></head>"
        href = html.escape(self._stylesheet)
        return f'<head><link type="text/css" rel="stylesheet" href="{href}" /></head>'

    def __repr__(self) -> str:
        return f"<HtmlTableRenderer stylesheet={self._stylesheet!r}>"
