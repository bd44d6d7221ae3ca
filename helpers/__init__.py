"""
Sortable table helpers.
Centralizes order state, option layering, navigation and table assembly.
"""

# Export the public API for easy importing
from .options import default_opts, deep_merge, merge_opts
from .order import (
    Direction,
    OrderState,
    order_index,
    order_direction,
    resolve,
    aria_sort,
    push_order
)
from .schema import TableSchema, is_sortable
from .navigation import (
    ClickEvent,
    PathNavigation,
    EventNavigation,
    resolve_navigation,
    build_path
)
from .table import (
    Meta,
    TableRequest,
    build_header_cell,
    build_body_rows,
    build_table,
    render_table
)
from .template import Column, HeaderCell, RenderedTable

__all__ = [
    # Options
    'default_opts',
    'deep_merge',
    'merge_opts',
    # Order state
    'Direction',
    'OrderState',
    'order_index',
    'order_direction',
    'resolve',
    'aria_sort',
    'push_order',
    # Schema
    'TableSchema',
    'is_sortable',
    # Navigation
    'ClickEvent',
    'PathNavigation',
    'EventNavigation',
    'resolve_navigation',
    'build_path',
    # Table
    'Meta',
    'TableRequest',
    'build_header_cell',
    'build_body_rows',
    'build_table',
    'render_table',
    'Column',
    'HeaderCell',
    'RenderedTable',
]
