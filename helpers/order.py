"""
Sort order state and per-column sort state resolution.

An order state is the aligned pair of `order_by` (field names) and
`order_directions` (Direction values). Index i in one list belongs to
index i in the other.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from constants import ORDER_BY_PARAM, ORDER_DIRECTIONS_PARAM
from logger import logger


class Direction(str, Enum):
    """Sort directions, including null placement."""
    ASC = 'asc'
    ASC_NULLS_FIRST = 'asc_nulls_first'
    ASC_NULLS_LAST = 'asc_nulls_last'
    DESC = 'desc'
    DESC_NULLS_FIRST = 'desc_nulls_first'
    DESC_NULLS_LAST = 'desc_nulls_last'

    @property
    def is_ascending(self) -> bool:
        return self in ASCENDING_DIRECTIONS

    @property
    def is_descending(self) -> bool:
        return self in DESCENDING_DIRECTIONS

    @property
    def aria(self) -> str:
        return 'ascending' if self.is_ascending else 'descending'

    @classmethod
    def parse(cls, value: Any) -> Optional['Direction']:
        """Return the Direction for a value, or None if it isn't one."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


ASCENDING_DIRECTIONS = frozenset({
    Direction.ASC, Direction.ASC_NULLS_FIRST, Direction.ASC_NULLS_LAST
})
DESCENDING_DIRECTIONS = frozenset({
    Direction.DESC, Direction.DESC_NULLS_FIRST, Direction.DESC_NULLS_LAST
})

# Reversal keeps nulls at the same visual end of the list
_TOGGLED = {
    Direction.ASC: Direction.DESC,
    Direction.ASC_NULLS_FIRST: Direction.DESC_NULLS_LAST,
    Direction.ASC_NULLS_LAST: Direction.DESC_NULLS_FIRST,
    Direction.DESC: Direction.ASC,
    Direction.DESC_NULLS_FIRST: Direction.ASC_NULLS_LAST,
    Direction.DESC_NULLS_LAST: Direction.ASC_NULLS_FIRST,
}


class OrderState:
    """
    Current multi-column sort.

    Args:
        order_by: Field names in priority order, or None for unordered
        order_directions: Directions aligned with order_by, or None
    """

    def __init__(self, order_by: Optional[Sequence[str]] = None,
                 order_directions: Optional[Sequence[Any]] = None):
        self.order_by = list(order_by) if order_by is not None else None
        if order_directions is None:
            self.order_directions = None
        else:
            self.order_directions = [Direction(d) for d in order_directions]

    def __eq__(self, other):
        if not isinstance(other, OrderState):
            return NotImplemented
        return (self.order_by == other.order_by
                and self.order_directions == other.order_directions)

    def __repr__(self):
        return f"OrderState(order_by={self.order_by!r}, order_directions={self.order_directions!r})"

    def to_query(self) -> Dict[str, List[str]]:
        """
        Encode as query parameters.

        Examples:
            >>> OrderState(['name'], ['desc']).to_query()
            {'order_by': ['name'], 'order_directions': ['desc']}

            >>> OrderState().to_query()
            {}
        """
        params = {}
        if self.order_by:
            params[ORDER_BY_PARAM] = list(self.order_by)
        if self.order_by and self.order_directions:
            params[ORDER_DIRECTIONS_PARAM] = [d.value for d in self.order_directions]
        return params

    def to_dict(self) -> Dict[str, Any]:
        return {
            'order_by': self.order_by,
            'order_directions': [d.value for d in self.order_directions]
            if self.order_directions is not None else None
        }

    @classmethod
    def from_args(cls, args) -> 'OrderState':
        """
        Parse an order state from request arguments.

        Accepts a werkzeug MultiDict (request.args) or a plain mapping of
        lists. Fields and directions are paired by position; pairs with an
        empty field are dropped and fields without a direction sort
        ascending. Directions that don't parse invalidate the whole direction
        list, which then falls back to ascending for every field.
        """
        raw_order_by = _getlist(args, ORDER_BY_PARAM)
        raw_directions = _getlist(args, ORDER_DIRECTIONS_PARAM)
        directions = [Direction.parse(d) for d in raw_directions]

        pairs = [
            (field, directions[i] if i < len(directions) else None)
            for i, field in enumerate(raw_order_by)
            if field
        ]
        if not pairs:
            return cls()

        order_by = [field for field, _ in pairs]
        if not raw_directions or None in directions:
            if raw_directions:
                logger.debug(f"Ignoring invalid order directions: {raw_directions}")
            return cls(order_by)

        return cls(order_by, [direction or Direction.ASC for _, direction in pairs])


def _getlist(args, key: str) -> List[str]:
    if hasattr(args, 'getlist'):
        return args.getlist(key)
    value = args.get(key)
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def order_index(order_state: OrderState, field: str) -> Optional[int]:
    """Position of `field` in the order, or None when it isn't ordered."""
    if order_state is None or order_state.order_by is None:
        return None
    try:
        return order_state.order_by.index(field)
    except ValueError:
        return None


def order_direction(order_directions: Optional[Sequence[Direction]],
                    index: Optional[int]) -> Optional[Direction]:
    """
    Direction recorded at `index`.

    An ordered field with no recorded direction counts as ascending.
    """
    if index is None:
        return None
    if order_directions is None or index >= len(order_directions):
        return Direction.ASC
    return Direction(order_directions[index])


def resolve(order_state: OrderState, field: str) -> Tuple[Optional[int], Optional[Direction]]:
    """Return the (index, direction) of a column's field in the current order."""
    index = order_index(order_state, field)
    directions = order_state.order_directions if order_state is not None else None
    return index, order_direction(directions, index)


def aria_sort(index: Optional[int], direction: Optional[Direction]) -> Optional[str]:
    """ARIA sort value; only the primary sort column reports one."""
    if index != 0 or direction is None:
        return None
    return direction.aria


def push_order(order_state: OrderState, field: str) -> OrderState:
    """
    Return the order state that results from selecting `field`.

    Selecting the primary sort field reverses its direction. Any other field
    moves to the front in ascending order. The remaining fields keep their
    relative order and directions.
    """
    order_by = list(order_state.order_by or []) if order_state is not None else []
    old_directions = order_state.order_directions if order_state is not None else None
    directions = [order_direction(old_directions, i) for i in range(len(order_by))]

    index = order_index(order_state, field)
    if index == 0:
        new_direction = _TOGGLED[directions[0]]
    else:
        new_direction = Direction.ASC

    if index is not None:
        del order_by[index]
        del directions[index]

    return OrderState([field] + order_by, [new_direction] + directions)
