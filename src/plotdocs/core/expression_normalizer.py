"""
Turn parsed example statements into display text.

Source markers are dropped at every depth and the remaining nodes are
printed with ``ast.unparse``. The catalog's statements are never touched:
every operation here works on a deep copy.
"""

from __future__ import annotations

import ast
import copy
from typing import Iterable

from plotdocs.core.example_spec import CodeStatement, SourceMarker


def is_source_marker(node: object) -> bool:
    """True if the node only records a source position."""
    return isinstance(node, SourceMarker)


def _drop_markers_in_place(node: ast.AST) -> None:
    """Filter markers out of every list field of node and its descendants."""
    for field_name, value in ast.iter_fields(node):
        if isinstance(value, list):
            kept_children = [child for child in value if not is_source_marker(child)]
            setattr(node, field_name, kept_children)
            for child in kept_children:
                if isinstance(child, ast.AST):
                    _drop_markers_in_place(child)
        elif isinstance(value, ast.AST):
            _drop_markers_in_place(value)


def strip_source_markers(statement: ast.AST) -> ast.AST:
    """
    Return a copy of the statement without any SourceMarker.

    Parameters
    ----------
    statement : ast.AST
        Parsed node, possibly holding markers in its child lists.

    Returns
    -------
    ast.AST
        A deep copy that can be unparsed or compiled.
    """
    stripped_copy = copy.deepcopy(statement)
    _drop_markers_in_place(stripped_copy)
    return stripped_copy


def normalize_statement(statement: CodeStatement) -> list[str]:
    """
    Render one statement as a list of display lines.

    The children of an ``ast.Module`` are rendered one per entry; any other
    node is rendered as a whole. A bare marker renders to nothing.
    """
    if is_source_marker(statement):
        return []

    stripped = strip_source_markers(statement)  # type: ignore[arg-type]
    if isinstance(stripped, ast.Module):
        top_level_children = stripped.body
    else:
        top_level_children = [stripped]
    return [ast.unparse(child) for child in top_level_children]


def format_code_block(statements: Iterable[CodeStatement]) -> str:
    """Normalized text of every statement, one newline-terminated line each."""
    rendered_lines: list[str] = []
    for statement in statements:
        rendered_lines.extend(normalize_statement(statement))
    return "".join(f"{line}\n" for line in rendered_lines)
