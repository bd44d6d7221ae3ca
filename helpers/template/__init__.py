"""
Template helpers for the sortable table.

Data structures, formatters, sanitization and rendering used by
helpers.table. All functions and classes are re-exported here.
"""

# Data structures
from .data_structures import (
    Column,
    HeaderCell,
    RenderedTable
)

# Formatters
from .formatters import (
    format_attrs,
    format_fragment,
    format_sanitized,
    format_tag
)

# Sanitization
from .sanitization import (
    sanitize_html
)

# Rendering
from .rendering import (
    render_symbol,
    render_header_cell,
    render_body,
    render_table_html,
    render_table_page,
    create_status_message
)

__all__ = [
    # Data structures
    'Column',
    'HeaderCell',
    'RenderedTable',
    # Formatters
    'format_attrs',
    'format_fragment',
    'format_sanitized',
    'format_tag',
    # Sanitization
    'sanitize_html',
    # Rendering
    'render_symbol',
    'render_header_cell',
    'render_body',
    'render_table_html',
    'render_table_page',
    'create_status_message',
]
