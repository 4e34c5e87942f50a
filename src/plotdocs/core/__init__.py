"""
Example model, statement normalization and execution.
"""

from plotdocs.core.example_spec import (
    CodeStatement,
    ExampleSpec,
    ExampleSpecError,
    MediaKind,
    SourceMarker,
)
from plotdocs.core.expression_normalizer import (
    format_code_block,
    is_source_marker,
    normalize_statement,
    strip_source_markers,
)
from plotdocs.core.example_runner import (
    ExampleCapture,
    ExampleExecutionError,
    ExampleFailure,
    ExampleOutcome,
    ExampleRunner,
)

__all__ = [
    "CodeStatement",
    "ExampleCapture",
    "ExampleExecutionError",
    "ExampleFailure",
    "ExampleOutcome",
    "ExampleRunner",
    "ExampleSpec",
    "ExampleSpecError",
    "MediaKind",
    "SourceMarker",
    "format_code_block",
    "is_source_marker",
    "normalize_statement",
    "strip_source_markers",
]
