"""
PlotDocs: build static documentation for a plotting library.

This package runs a catalog of examples on a backend and writes a
Markdown page with the captured images, and renders attribute and
backend-support tables as HTML.

Example
-------
>>> from pathlib import Path
>>> from plotdocs import DocsConfig, MarkdownDocRenderer, MatplotlibBackend, EXAMPLES
>>>
>>> renderer = MarkdownDocRenderer(DocsConfig(docs_dir=Path("docs/examples")))
>>> report = renderer.render(MatplotlibBackend(), EXAMPLES)
>>> report.warnings
()
"""

__version__ = "0.1.0"

# Catalog entries and execution
from plotdocs.core.example_spec import (
    ExampleSpec,
    ExampleSpecError,
    MediaKind,
    SourceMarker,
)
from plotdocs.core.example_runner import (
    ExampleCapture,
    ExampleExecutionError,
    ExampleFailure,
    ExampleRunner,
)
from plotdocs.core.expression_normalizer import normalize_statement
from plotdocs.config import DocsConfig

# Backends
from plotdocs.backends.base_backend import BaseBackend, CaptureError, SupportLevel
from plotdocs.backends.registry import BackendRegistry, UnknownBackendError, backend_registry
from plotdocs.backends.matplotlib_backend import MatplotlibBackend

# Output
from plotdocs.renderers.html_table_renderer import HtmlTableRenderer, TableStyle
from plotdocs.renderers.markdown_renderer import (
    MarkdownDocRenderer,
    MarkdownReport,
    generate_markdown,
)
from plotdocs.tables.attribute_table import AttributeRegistry, save_attr_html_files
from plotdocs.tables.support_matrix import build_support_matrix, create_support_tables
from plotdocs.catalog import EXAMPLES

__all__ = [
    # Version
    "__version__",
    # Core
    "DocsConfig",
    "ExampleCapture",
    "ExampleExecutionError",
    "ExampleFailure",
    "ExampleRunner",
    "ExampleSpec",
    "ExampleSpecError",
    "MediaKind",
    "SourceMarker",
    "normalize_statement",
    # Backends
    "BackendRegistry",
    "BaseBackend",
    "CaptureError",
    "MatplotlibBackend",
    "SupportLevel",
    "UnknownBackendError",
    "backend_registry",
    # Output
    "AttributeRegistry",
    "HtmlTableRenderer",
    "MarkdownDocRenderer",
    "MarkdownReport",
    "TableStyle",
    "build_support_matrix",
    "create_support_tables",
    "generate_markdown",
    "save_attr_html_files",
    # Catalog
    "EXAMPLES",
]
