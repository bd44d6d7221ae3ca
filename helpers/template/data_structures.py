"""
Data structures for the sortable table.

Provides classes for column configuration and the structured render result.
"""

from typing import Any, Callable, Dict, List, Optional


class Column:
    """
    A table column supplied by the caller.

    Args:
        label: Header text
        field: Field used as sort key; columns without one are never sortable
        content: Callable invoked with each item to produce the cell content.
            Defaults to looking up `field` on the item.
        sanitize: Treat string content as HTML and keep its safe formatting
            tags (see sanitize_html) instead of escaping it
    """

    def __init__(self, label: Any, field: Optional[str] = None,
                 content: Optional[Callable[[Any], Any]] = None,
                 sanitize: bool = False):
        self.label = label
        self.field = field
        self.content = content
        self.sanitize = sanitize

    def render(self, item: Any) -> Any:
        if self.content is not None:
            return self.content(item)
        if self.field is None:
            return None
        if isinstance(item, dict):
            return item.get(self.field)
        return getattr(item, self.field, None)

    def to_dict(self) -> Dict[str, Any]:
        return {'label': str(self.label), 'field': self.field}


class HeaderCell:
    """
    Resolved header state for one column.

    Args:
        label: Formatted label HTML
        field: Column field (None for unsortable columns)
        sortable: Whether the header links to a sort target
        aria_sort: ARIA sort value, set only on the primary sort column
        direction: Current Direction of this column, if ordered
        order_index: Position of the field in the current order, if ordered
        target: URL string (path mode) or ClickEvent (event mode)
        link_attrs: Anchor attributes for the target
    """

    def __init__(self, label: str, field: Optional[str] = None, sortable: bool = False,
                 aria_sort: Optional[str] = None, direction=None,
                 order_index: Optional[int] = None, target=None,
                 link_attrs: Optional[Dict[str, Any]] = None):
        self.label = label
        self.field = field
        self.sortable = sortable
        self.aria_sort = aria_sort
        self.direction = direction
        self.order_index = order_index
        self.target = target
        self.link_attrs = link_attrs or {}

    def to_dict(self) -> Dict[str, Any]:
        target = self.target
        if target is not None and hasattr(target, 'to_dict'):
            target = target.to_dict()
        return {
            'label': self.label,
            'field': self.field,
            'sortable': self.sortable,
            'aria_sort': self.aria_sort,
            'direction': self.direction.value if self.direction else None,
            'order_index': self.order_index,
            'target': target
        }


class RenderedTable:
    """
    Structured result of a table render.

    Args:
        headers: HeaderCell per column
        rows: One list of formatted cell HTML per item
        footer: Formatted footer HTML, or None
        opts: The merged render options
    """

    def __init__(self, headers: List[HeaderCell], rows: List[List[str]],
                 footer: Optional[str], opts: Dict[str, Any]):
        self.headers = headers
        self.rows = rows
        self.footer = footer
        self.opts = opts

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def to_dict(self) -> Dict[str, Any]:
        return {
            'headers': [header.to_dict() for header in self.headers],
            'rows': self.rows,
            'footer': self.footer,
            'empty': self.is_empty
        }
