"""
Attribute tables and backend support matrices.
"""

from plotdocs.tables.rendered_table import RenderedTable, TableShapeError
from plotdocs.tables.attribute_table import (
    ATTRIBUTE_KINDS,
    AttributeRegistry,
    AttributeRow,
    build_attribute_table,
    save_attr_html_files,
    split_description,
)
from plotdocs.tables.support_matrix import (
    SUPPORT_DIMENSIONS,
    CapabilityQuery,
    SupportMatrix,
    ThreeStateQuery,
    TwoStateQuery,
    build_support_matrix,
    create_support_tables,
    make_support_matrix,
)

__all__ = [
    "ATTRIBUTE_KINDS",
    "AttributeRegistry",
    "AttributeRow",
    "CapabilityQuery",
    "RenderedTable",
    "SUPPORT_DIMENSIONS",
    "SupportMatrix",
    "TableShapeError",
    "ThreeStateQuery",
    "TwoStateQuery",
    "build_attribute_table",
    "build_support_matrix",
    "create_support_tables",
    "make_support_matrix",
    "save_attr_html_files",
    "split_description",
]
