"""
Response formatting helper utilities.

Provides standardized JSON responses for the table routes.
"""
from typing import Any, Dict, Optional, Tuple
from flask import jsonify, Response


def error_response(
    message: str,
    status_code: int = 400,
    extra_data: Optional[Dict[str, Any]] = None
) -> Tuple[Response, int]:
    """
    Create a standardized error response.

    Args:
        message: Error message to return to client
        status_code: HTTP status code (default: 400)
        extra_data: Optional additional data to include in response

    Returns:
        Tuple of (Response, status_code)

    Usage:
        return error_response("Invalid order_by field", 400, {"field": field})
    """
    response_data = {
        'success': False,
        'error': message
    }

    if extra_data:
        response_data.update(extra_data)

    return jsonify(response_data), status_code


def success_response(
    data: Optional[Any] = None,
    message: Optional[str] = None,
    status_code: int = 200
) -> Tuple[Response, int]:
    """
    Create a standardized success response.

    Dict data is merged at the top level; anything else goes under 'data'.

    Examples:
        >>> success_response({"table": {...}})
        # Returns: {'success': True, 'table': {...}}

        >>> success_response([1, 2, 3], "Results")
        # Returns: {'success': True, 'message': 'Results', 'data': [1, 2, 3]}
    """
    response_data = {'success': True}

    if message:
        response_data['message'] = message

    if data is not None:
        if isinstance(data, dict):
            response_data.update(data)
        else:
            response_data['data'] = data

    return jsonify(response_data), status_code
