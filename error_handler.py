"""
Standardized error handling utilities for consistent error management.
"""

import os
from typing import Optional, Any, Callable
from logger import logger


class SortableTableError(Exception):
    """Base exception for all sortable table errors."""
    pass


class ConfigurationError(SortableTableError):
    """Configuration-related errors."""
    pass


class TableConfigError(ConfigurationError):
    """
    A table render call was configured incorrectly.

    Raised (or returned, see helpers.table.build_table) before any markup is
    produced. These are programmer errors and are never retried.

    Args:
        kind: Machine-readable error kind (e.g. 'missing_items')
        message: Human-readable message with usage guidance
    """

    def __init__(self, kind: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_dict(self):
        return {'kind': self.kind, 'message': self.message}


def validate_environment_variable(
    var_name: str,
    default: Any,
    validator: Optional[Callable[[Any], bool]] = None,
    converter: Optional[Callable[[str], Any]] = None
) -> Any:
    """
    Safely get and validate an environment variable.

    Args:
        var_name: Name of the environment variable
        default: Default value if not set or invalid
        validator: Optional validation function
        converter: Optional conversion function (e.g., int, json.loads)

    Returns:
        The validated and converted environment variable value
    """
    raw_value = os.getenv(var_name)

    if raw_value is None:
        logger.debug(f"Environment variable {var_name} not set, using default: {default}")
        return default

    # Try to convert the value
    if converter:
        try:
            value = converter(raw_value)
        except (ValueError, TypeError) as exc:
            logger.warning(
                f"Invalid {var_name}='{raw_value}': {exc}. Using default: {default}"
            )
            return default
    else:
        value = raw_value

    # Validate the converted value
    if validator and not validator(value):
        logger.warning(
            f"Invalid {var_name}='{value}' failed validation. Using default: {default}"
        )
        return default

    logger.debug(f"Using {var_name}={value}")
    return value
