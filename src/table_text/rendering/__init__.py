"""
Rendering Package

Render node builder and HTML serialization.
"""

from .builder import (
    build_field,
    build_row,
    build_rows,
    render_table_value,
    math_context_config,
)
from .html import bem, render_html, render_document

__all__ = [
    "build_field",
    "build_row",
    "build_rows",
    "render_table_value",
    "math_context_config",
    "bem",
    "render_html",
    "render_document",
]
