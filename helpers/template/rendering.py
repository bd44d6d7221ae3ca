"""
Rendering functions for the sortable table.

Turns a RenderedTable into HTML, and renders full pages with Flask.
"""

from typing import Any, Dict, List, Optional
from flask import render_template
from markupsafe import Markup

from .data_structures import HeaderCell, RenderedTable
from .formatters import format_attrs, format_fragment, format_tag


def render_symbol(direction, opts: Dict[str, Any]) -> str:
    """Direction indicator for a sorted column; empty when unsorted."""
    if direction is None:
        return ''
    if direction.is_ascending:
        return format_tag('span', format_fragment(opts.get('symbol_asc')), opts.get('symbol_attrs'))
    if direction.is_descending:
        return format_tag('span', format_fragment(opts.get('symbol_desc')), opts.get('symbol_attrs'))
    return ''


def render_header_cell(cell: HeaderCell, opts: Dict[str, Any]) -> str:
    """
    Render one <th>.

    Plain columns render the label only. Sortable columns wrap a sort link
    and the direction symbol, and carry aria-sort on the primary sort column.
    """
    th_attrs = opts.get('thead_th_attrs') or {}
    if not cell.sortable:
        return format_tag('th', cell.label, th_attrs)

    th_attrs = dict(th_attrs)
    th_attrs['aria-sort'] = cell.aria_sort
    link = format_tag('a', cell.label, cell.link_attrs)
    wrapper = format_tag('span', link + render_symbol(cell.direction, opts),
                         opts.get('th_wrapper_attrs'))
    return format_tag('th', wrapper, th_attrs)


def render_body(rows: List[List[str]], opts: Dict[str, Any]) -> str:
    tr_attrs = opts.get('tbody_tr_attrs')
    td_attrs = opts.get('tbody_td_attrs')
    return ''.join(
        format_tag('tr', ''.join(format_tag('td', cell, td_attrs) for cell in row), tr_attrs)
        for row in rows
    )


def render_table_html(table: RenderedTable) -> Markup:
    """
    Render a RenderedTable to HTML.

    An empty table renders the `no_results_content` option instead.
    """
    opts = table.opts
    if table.is_empty:
        return Markup(format_fragment(opts.get('no_results_content')))

    header_row = format_tag(
        'tr',
        ''.join(render_header_cell(cell, opts) for cell in table.headers),
        opts.get('thead_tr_attrs')
    )
    html = (
        format_tag('thead', header_row)
        + format_tag('tbody', render_body(table.rows, opts))
    )
    if table.footer is not None:
        html += format_tag('tfoot', table.footer)
    html = format_tag('table', html, opts.get('table_attrs'))

    if opts.get('container'):
        html = format_tag('div', html, opts.get('container_attrs'))

    return Markup(html)


def render_table_page(
    title: str,
    table_html: Markup,
    status_message: str = '',
    table_data: Optional[RenderedTable] = None,
    sort_event: Optional[str] = None,
    current_order=None
):
    """
    Render a full page around a table with the table_page.html template.

    Args:
        title: Page title
        table_html: Output of render_table / render_table_html
        status_message: Optional status line shown above the table
        table_data: Optional structured table, exposed to the template as a dict
        sort_event: Event name emitted by event-mode headers; the page
            re-sorts by updating the query string when it fires
        current_order: OrderState in effect, used by the sort_event handler

    Returns:
        Rendered template response
    """
    return render_template(
        'table_page.html',
        title=title,
        table_html=table_html,
        status_message=status_message,
        table_data=table_data.to_dict() if table_data else None,
        sort_event=sort_event,
        current_order=current_order.to_query() if current_order is not None else {}
    )


def create_status_message(items_count: int, total_count: int = None,
                         item_type: str = 'items') -> str:
    """
    Create a standardized status message for table displays.

    Args:
        items_count: Number of items currently displayed
        total_count: Total number of items available (if different from displayed)
        item_type: Type of items being displayed (e.g., 'pets')

    Returns:
        Formatted status message
    """
    if total_count and total_count > items_count:
        return f"Showing {items_count:,} of {total_count:,} {item_type}"
    else:
        return f"Showing {items_count:,} {item_type}"
