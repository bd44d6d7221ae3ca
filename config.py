"""
Global table option configuration.

The global layer sits between the library defaults and per-call options.
It is held as an immutable snapshot that is swapped atomically, so readers
always see either the old or the new options, never a partial update.

A Flask app can own its snapshot instead by setting
`app.config['TABLE_OPTS']`; inside an app context that takes precedence.
"""
import copy
import json
import threading
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from flask import current_app, has_app_context

from constants import TABLE_OPTION_KEYS, TABLE_OPTS_CONFIG_KEY, TABLE_OPTS_ENV
from error_handler import validate_environment_variable
from logger import logger


def _freeze(opts: Optional[Mapping]) -> Mapping:
    frozen = {}
    for key, value in (opts or {}).items():
        frozen[key] = _freeze(value) if isinstance(value, Mapping) else copy.deepcopy(value)
    return MappingProxyType(frozen)


class GlobalOptions:
    """Thread-safe holder for the process-wide global options snapshot."""

    def __init__(self, opts: Optional[Mapping] = None):
        self._lock = threading.Lock()
        self._snapshot = _freeze(opts)

    def get(self) -> Mapping:
        return self._snapshot

    def set(self, opts: Optional[Mapping]) -> None:
        snapshot = _freeze(opts)
        unknown = set(snapshot) - set(TABLE_OPTION_KEYS)
        if unknown:
            logger.warning(f"Unknown table options in global config: {sorted(unknown)}")
        with self._lock:
            self._snapshot = snapshot


_global_options = GlobalOptions()


def set_global_opts(opts: Optional[Mapping]) -> None:
    """Replace the process-wide global table options."""
    _global_options.set(opts)


def reset_global_opts() -> None:
    _global_options.set(None)


def get_global_opts() -> Mapping:
    """
    Current global table options.

    Inside a Flask app context, `app.config['TABLE_OPTS']` wins over the
    process-wide snapshot.
    """
    if has_app_context():
        app_opts = current_app.config.get(TABLE_OPTS_CONFIG_KEY)
        if app_opts is not None:
            return app_opts
    return _global_options.get()


def load_global_opts_from_env() -> Dict[str, Any]:
    """
    Load global table options from the TABLE_OPTS environment variable.

    The value is a JSON object, e.g. '{"table_attrs": {"class": "table"}}'.
    Invalid JSON or a non-object value is ignored with a warning.
    """
    opts = validate_environment_variable(
        TABLE_OPTS_ENV,
        default={},
        validator=lambda value: isinstance(value, dict),
        converter=json.loads
    )
    set_global_opts(opts)
    return opts
