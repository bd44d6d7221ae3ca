"""
Parameter validation helper utilities.

Provides reusable validation of sort parameters for table routes.
"""
from typing import Tuple, Optional
from flask import Response

from constants import ORDER_BY_PARAM
from helpers.order import OrderState
from helpers.response_helpers import error_response as create_error_response
from helpers.schema import is_sortable


def validate_order_params(
    request_args,
    schema=None
) -> Tuple[Optional[OrderState], Optional[Response]]:
    """
    Validate the order parameters from request arguments.

    Args:
        request_args: Flask request.args object
        schema: Optional schema capability; order_by fields must be sortable

    Returns:
        Tuple of (order_state, error_response)
        - (OrderState, None) if validation succeeds
        - (None, Response) if a field cannot be sorted on

    Usage:
        order, error = validate_order_params(request.args, PET_SCHEMA)
        if error:
            return error

    Requests without an order fall back to the schema's default order, if
    it has one.
    """
    order = OrderState.from_args(request_args)

    for field in order.order_by or []:
        if not is_sortable(field, schema):
            return None, create_error_response(
                f'Invalid {ORDER_BY_PARAM} field', 400, {'field': field}
            )

    if order.order_by is None and getattr(schema, 'default_order', None) is not None:
        order = schema.default_order

    return order, None
