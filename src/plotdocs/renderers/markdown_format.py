"""
Small Markdown formatting helpers for the backend pages.
"""

from __future__ import annotations

from typing import Iterable


def markdown_code_list(values: Iterable[object], prefix: str = "") -> str:
    """
    Sorted values as inline code, comma separated.

    >>> markdown_code_list(["b", "a"], prefix=":")
    '`:a`, `:b`'
    """
    rendered_values = sorted(str(value) for value in values)
    if not rendered_values:
        return ""
    return ", ".join(f"`{prefix}{value}`" for value in rendered_values)


def markdown_symbol_list(values: Iterable[object], sigil: str = ":") -> str:
    """Like `markdown_code_list` with every value written as a symbol."""
    return markdown_code_list(values, prefix=sigil)


def fenced_code_block(code: str, language: str = "python") -> str:
    """Fence `code`, which must already end with a newline if non-empty."""
    return f"```{language}\n{code}```\n\n"
