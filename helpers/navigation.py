"""
Sort link targets for table headers.

A table navigates either by path (each header links to a URL carrying the
toggled order) or by event (each header emits an abstract click event
carrying the field). Exactly one mode is configured per table.
"""
from typing import Any, Callable, Dict, Optional, Tuple
from urllib.parse import urlencode

from constants import EVENT_CLICK_ATTR, EVENT_TARGET_ATTR, EVENT_VALUE_ATTR
from error_handler import TableConfigError
from helpers.order import OrderState, push_order

NAVIGATION_ERROR_MESSAGE = """\
The table requires either the `path_helper` or the `event` argument to be set.
The `path_helper` needs to be passed either as a `(function, args)` tuple, an
`(object, "function_name", args)` tuple, or a base path string.

Example:

    render_table(items=pets, meta=meta, columns=columns,
                 path_helper=(url_for, ['pets.index']))

or

    render_table(items=pets, meta=meta, columns=columns,
                 path_helper='/pets')

or

    render_table(items=pets, meta=meta, columns=columns,
                 event='sort-table')
"""


class ClickEvent:
    """
    Abstract UI event emitted when a sortable header is clicked.

    Args:
        event: Event name delivered to the client-side handler
        field: Field the user asked to sort by
        target: Optional delivery scope for the event
    """

    def __init__(self, event: str, field: str, target: Optional[str] = None):
        self.event = event
        self.field = field
        self.target = target

    @property
    def params(self) -> Dict[str, str]:
        return {'order': self.field}

    def to_attrs(self) -> Dict[str, Any]:
        attrs = {
            'href': '#',
            EVENT_CLICK_ATTR: self.event,
            EVENT_VALUE_ATTR: self.field,
        }
        if self.target is not None:
            attrs[EVENT_TARGET_ATTR] = self.target
        return attrs

    def to_dict(self) -> Dict[str, Any]:
        return {'event': self.event, 'params': self.params, 'target': self.target}


class PathNavigation:
    """
    Path mode: headers link to URLs built from the toggled order state.

    Args:
        path_helper: (function, args), (object, "function_name", args) or a
            base path string
        order_pusher: Computes the order state that results from selecting a
            field
    """
    mode = 'path'

    def __init__(self, path_helper, order_pusher: Callable = push_order):
        self.path_helper = path_helper
        self.order_pusher = order_pusher

    def sort_target(self, order_state: OrderState, field: str, for_=None) -> str:
        return build_path(self.path_helper, self.order_pusher(order_state, field), for_=for_)

    def link_attrs(self, target: str) -> Dict[str, Any]:
        return {'href': target}


class EventNavigation:
    """
    Event mode: headers emit a ClickEvent; no URL is built.

    Args:
        event: Event name
        target: Optional delivery scope
    """
    mode = 'event'

    def __init__(self, event: str, target: Optional[str] = None):
        self.event = event
        self.target = target

    def sort_target(self, order_state: OrderState, field: str, for_=None) -> ClickEvent:
        return ClickEvent(self.event, field, self.target)

    def link_attrs(self, target: ClickEvent) -> Dict[str, Any]:
        return target.to_attrs()


def is_valid_path_helper(path_helper) -> bool:
    """Check a path helper against the accepted shapes."""
    if isinstance(path_helper, str):
        return bool(path_helper)
    if not isinstance(path_helper, tuple):
        return False
    if len(path_helper) == 2:
        function, args = path_helper
        return callable(function) and isinstance(args, (list, tuple))
    if len(path_helper) == 3:
        obj, function_name, args = path_helper
        return (isinstance(function_name, str)
                and callable(getattr(obj, function_name, None))
                and isinstance(args, (list, tuple)))
    return False


def resolve_navigation(
    path_helper=None,
    event: Optional[str] = None,
    target: Optional[str] = None,
    order_pusher: Callable = push_order
) -> Tuple[Optional[Any], Optional[TableConfigError]]:
    """
    Validate the navigation arguments and pick the navigation mode.

    Returns:
        Tuple of (navigation, error)
        - (PathNavigation or EventNavigation, None) if exactly one mode is set
        - (None, TableConfigError) otherwise
    """
    if path_helper is not None and event is None and is_valid_path_helper(path_helper):
        return PathNavigation(path_helper, order_pusher), None

    if path_helper is None and isinstance(event, str) and event:
        return EventNavigation(event, target), None

    return None, TableConfigError('invalid_navigation', NAVIGATION_ERROR_MESSAGE)


def build_path(path_helper, order_state: OrderState, for_=None) -> str:
    """
    Build the URL for an order state.

    Callable helpers receive `*args, **query_params`, which matches
    `flask.url_for(endpoint, **values)`. When `for_` is a schema whose
    default order equals `order_state`, the order params are left out.

    Examples:
        >>> build_path('/pets', OrderState(['name'], ['asc']))
        '/pets?order_by=name&order_directions=asc'

        >>> build_path('/pets', OrderState())
        '/pets'
    """
    params = order_state.to_query()
    default_order = getattr(for_, 'default_order', None)
    if default_order is not None and default_order == order_state:
        params = {}

    if isinstance(path_helper, str):
        if not params:
            return path_helper
        separator = '&' if '?' in path_helper else '?'
        return f"{path_helper}{separator}{urlencode(params, doseq=True)}"

    if len(path_helper) == 2:
        function, args = path_helper
    else:
        obj, function_name, args = path_helper
        function = getattr(obj, function_name)

    return function(*args, **params)
