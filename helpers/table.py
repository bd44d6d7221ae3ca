"""
Sortable table assembly.

Validates a render request, merges options, resolves each column header's
sort state and link, and renders body rows and the optional footer.

Usage:
    from helpers.table import Meta, render_table
    from helpers.template import Column
    from helpers.validation_helpers import validate_order_params

    order, error = validate_order_params(request.args, PET_SCHEMA)
    html = render_table(
        items=pets,
        meta=Meta(order, PET_SCHEMA),
        columns=[Column('Name', field='name', content=lambda pet: pet['name'])],
        path_helper=(url_for, ['pets.index']),
    )
"""
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

from markupsafe import Markup

from config import get_global_opts
from error_handler import TableConfigError
from helpers.navigation import resolve_navigation
from helpers.options import merge_opts
from helpers.order import OrderState, aria_sort, push_order, resolve
from helpers.schema import is_sortable
from helpers.template.data_structures import Column, HeaderCell, RenderedTable
from helpers.template.formatters import format_fragment, format_sanitized
from helpers.template.rendering import render_table_html
from logger import logger

EXAMPLE = """\
Example:

    render_table(
        items=pets,
        meta=meta,
        columns=[Column('Name', field='name', content=lambda pet: pet.name)],
        path_helper=(url_for, ['pets.index']),
    )
"""

MISSING_COLUMNS_MESSAGE = f"""\
You need to pass at least one column when rendering the table.

{EXAMPLE}"""

MISSING_ITEMS_MESSAGE = f"""\
The items assign is required when rendering the table. The value is the query
result list. Each item in the list results in one table row.

{EXAMPLE}"""

MISSING_META_MESSAGE = f"""\
The meta assign is required when rendering the table. The value is the Meta
object holding the current order state.

{EXAMPLE}"""


class Meta:
    """
    Pagination and sort metadata for the rendered items.

    Args:
        order: Current OrderState
        schema: Optional schema capability (see helpers.schema.TableSchema)
    """

    def __init__(self, order: Optional[OrderState] = None, schema=None):
        self.order = order if order is not None else OrderState()
        self.schema = schema

    def to_dict(self):
        return {
            'order': self.order.to_dict(),
            'schema': self.schema.to_dict() if hasattr(self.schema, 'to_dict') else None
        }


class TableRequest:
    """
    Everything needed to render one table.

    Validation happens here, once, before any rendering. Check `error`
    before using `navigation`.

    Args:
        items: Row data, one row per item (required, may be empty)
        meta: Meta with the current order state (required)
        columns: Non-empty sequence of Column (required)
        path_helper: Path mode target; mutually exclusive with `event`
        event: Event mode name; mutually exclusive with `path_helper`
        target: Delivery scope for event mode
        foot: Optional callable returning footer content
        opts: Per-call option overrides
        global_opts: Global option snapshot; defaults to config.get_global_opts()
        order_pusher: Order-toggle function used in path mode
    """

    def __init__(self, items: Optional[Sequence[Any]] = None, meta: Optional[Meta] = None,
                 columns: Optional[Sequence[Column]] = None, path_helper=None,
                 event: Optional[str] = None, target: Optional[str] = None,
                 foot: Optional[Callable[[], Any]] = None, opts: Optional[Mapping] = None,
                 global_opts: Optional[Mapping] = None,
                 order_pusher: Callable = push_order):
        self.items = list(items) if items is not None else None
        self.meta = meta
        self.columns = list(columns) if columns else []
        self.path_helper = path_helper
        self.event = event
        self.target = target
        self.foot = foot
        self.opts = opts
        self.global_opts = global_opts
        self.navigation = None
        self.error = self._validate(order_pusher)

    def _validate(self, order_pusher: Callable) -> Optional[TableConfigError]:
        if not self.columns:
            return TableConfigError('missing_columns', MISSING_COLUMNS_MESSAGE)
        if self.items is None:
            return TableConfigError('missing_items', MISSING_ITEMS_MESSAGE)
        if self.meta is None:
            return TableConfigError('missing_meta', MISSING_META_MESSAGE)

        self.navigation, error = resolve_navigation(
            self.path_helper, self.event, self.target, order_pusher
        )
        return error


def build_header_cell(column: Column, meta: Meta, navigation) -> HeaderCell:
    """Resolve one column's sortability, sort state and link target."""
    label = format_fragment(column.label)
    if not is_sortable(column.field, meta.schema):
        return HeaderCell(label, field=column.field)

    index, direction = resolve(meta.order, column.field)
    target = navigation.sort_target(meta.order, column.field, for_=meta.schema)
    link_attrs = navigation.link_attrs(target)

    return HeaderCell(
        label,
        field=column.field,
        sortable=True,
        aria_sort=aria_sort(index, direction),
        direction=direction,
        order_index=index,
        target=target,
        link_attrs=link_attrs
    )


def build_body_rows(items: Sequence[Any], columns: Sequence[Column]) -> List[List[str]]:
    """One list of formatted cells per item. Content errors propagate."""
    return [[format_cell(column, column.render(item)) for column in columns] for item in items]


def format_cell(column: Column, value: Any) -> str:
    if column.sanitize:
        return format_sanitized(value)
    return format_fragment(value)


def build_table(request: Optional[TableRequest] = None, **kwargs) -> Tuple[Optional[RenderedTable], Optional[TableConfigError]]:
    """
    Build the structured table for a request.

    Accepts either a TableRequest or the TableRequest keyword arguments.

    Returns:
        Tuple of (table, error)
        - (RenderedTable, None) on success
        - (None, TableConfigError) if the request is misconfigured
    """
    if request is None:
        request = TableRequest(**kwargs)

    if request.error is not None:
        logger.warning(f"Table configuration error ({request.error.kind})")
        return None, request.error

    global_opts = request.global_opts if request.global_opts is not None else get_global_opts()
    opts = merge_opts(request.opts, global_opts)

    headers = [build_header_cell(column, request.meta, request.navigation)
               for column in request.columns]
    rows = build_body_rows(request.items, request.columns)
    footer = format_fragment(request.foot()) if request.foot is not None else None

    logger.debug(
        f"Built table: {len(headers)} columns, {len(rows)} rows, "
        f"{request.navigation.mode} navigation"
    )
    return RenderedTable(headers, rows, footer, opts), None


def render_table(request: Optional[TableRequest] = None, **kwargs) -> Markup:
    """
    Render a table to HTML.

    Same arguments as build_table.

    Raises:
        TableConfigError: If the request is misconfigured
    """
    table, error = build_table(request, **kwargs)
    if error is not None:
        raise error
    return render_table_html(table)
