"""
Schema capability: which fields of a data type may be sorted on.
"""
from typing import Iterable, Optional, Set

from helpers.order import OrderState


class TableSchema:
    """
    Describes the sortable fields of a data type.

    Any object with a `sortable_fields()` method can stand in for this
    class; `default_order` is optional and only used when building paths.

    Args:
        sortable: Field names that may be used as sort keys
        default_order: Order applied when the request carries none
    """

    def __init__(self, sortable: Iterable[str] = (),
                 default_order: Optional[OrderState] = None):
        self.sortable = frozenset(sortable)
        self.default_order = default_order

    def sortable_fields(self) -> Set[str]:
        return set(self.sortable)

    def to_dict(self):
        return {
            'sortable': sorted(self.sortable),
            'default_order': self.default_order.to_dict() if self.default_order else None
        }


def is_sortable(field: Optional[str], schema=None) -> bool:
    """
    Whether a column's field may be used as a sort key.

    A column without a field is never sortable. Without a schema every
    field is assumed sortable.
    """
    if field is None:
        return False
    if schema is None:
        return True
    return field in schema.sortable_fields()
