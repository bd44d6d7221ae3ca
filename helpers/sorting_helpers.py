"""
In-memory sorting of table rows by an order state.
"""
from typing import Any, Callable, List, Optional

from helpers.order import Direction, OrderState, order_direction

# Plain asc/desc follow the usual SQL default: nulls sort as the largest value
_NULLS_FIRST = {Direction.ASC_NULLS_FIRST, Direction.DESC_NULLS_FIRST, Direction.DESC}


def _default_key(item: Any, field: str) -> Any:
    if isinstance(item, dict):
        return item.get(field)
    return getattr(item, field, None)


def sort_table_data(data: list, order_state: OrderState,
                    key_fn: Optional[Callable[[Any, str], Any]] = None) -> List[Any]:
    """
    Sort table rows by every field of an order state.

    Args:
        data: Rows (dicts or objects)
        order_state: Current order; the first field is the primary key
        key_fn: Optional function (item, field) -> value; defaults to dict or
            attribute lookup

    Returns:
        New sorted list; `data` is left untouched
    """
    key_fn = key_fn or _default_key
    rows = list(data)
    if not order_state or not order_state.order_by:
        return rows

    # Stable sorts applied from the least to the most significant field
    for index in reversed(range(len(order_state.order_by))):
        field = order_state.order_by[index]
        direction = order_direction(order_state.order_directions, index)

        def sort_fn(x, field=field):
            val = key_fn(x, field)
            if isinstance(val, str):
                return val.lower()
            return val

        nulls = [row for row in rows if key_fn(row, field) is None]
        values = sorted(
            (row for row in rows if key_fn(row, field) is not None),
            key=sort_fn,
            reverse=direction.is_descending
        )
        rows = nulls + values if direction in _NULLS_FIRST else values + nulls

    return rows
