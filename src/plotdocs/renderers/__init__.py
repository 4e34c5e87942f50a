"""
Output formats for the generated documentation.

Table renderers turn a RenderedTable into a document; the Markdown
renderer drives a whole backend page.
"""

from plotdocs.renderers.base_renderer import BaseRenderer
from plotdocs.renderers.html_table_renderer import HtmlTableRenderer, TableStyle
from plotdocs.renderers.markdown_renderer import MarkdownDocRenderer, MarkdownReport

__all__ = [
    "BaseRenderer",
    "HtmlTableRenderer",
    "MarkdownDocRenderer",
    "MarkdownReport",
    "TableStyle",
]
