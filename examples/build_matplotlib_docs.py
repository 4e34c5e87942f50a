#!/usr/bin/env python
"""
PlotDocs Build Demo

This script builds every documentation artifact for matplotlib:
1. Run the built-in example catalog and write docs/examples/matplotlib.md
2. Write the backend support tables (supported_*.html)
3. Write the attribute tables read from rcParams (*_attr.html)

Run with: python examples/build_matplotlib_docs.py
"""

import logging
from pathlib import Path

from plotdocs import (
    EXAMPLES,
    DocsConfig,
    MarkdownDocRenderer,
    backend_registry,
    create_support_tables,
    save_attr_html_files,
)
from plotdocs.backends.matplotlib_attributes import matplotlib_attribute_registry


DOCS_ROOT = Path("docs")


def main():
    """Run the full documentation build."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("PlotDocs Build Demo")
    print("=" * 60)

    # Step 1: Example page
    print("\n[Step 1] Rendering the example catalog...")
    config = DocsConfig(docs_dir=DOCS_ROOT / "examples")
    backend = backend_registry.create("matplotlib")
    report = MarkdownDocRenderer(config).render(backend, EXAMPLES)
    print(f"  ✓ Wrote {report.markdown_path}")
    print(f"  ✓ Rendered examples: {list(report.rendered_indices)}")
    for warning in report.warnings:
        print(f"  ✗ {warning}")

    # Step 2: Support tables
    print("\n[Step 2] Writing backend support tables...")
    for table_path in create_support_tables(backend_registry, DOCS_ROOT):
        print(f"  ✓ {table_path}")

    # Step 3: Attribute tables
    print("\n[Step 3] Writing attribute tables...")
    for table_path in save_attr_html_files(matplotlib_attribute_registry(), DOCS_ROOT):
        print(f"  ✓ {table_path}")

    print("\n" + "=" * 60)
    print(f"Build complete! Open '{report.markdown_path}' to see the result.")
    print("=" * 60)


if __name__ == "__main__":
    main()
