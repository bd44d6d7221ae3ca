"""
Render option layering for the sortable table.

Options come from three layers, merged left to right:
library defaults -> global overrides -> per-call overrides.
"""
from typing import Any, Dict, Mapping, Optional

from markupsafe import Markup


def default_opts() -> Dict[str, Any]:
    """Return a fresh copy of the library default options."""
    return {
        'container': False,
        'container_attrs': {'class': 'table-container'},
        'no_results_content': Markup('<p>No results.</p>'),
        'symbol_asc': '▴',
        'symbol_attrs': {'class': 'order-direction'},
        'symbol_desc': '▾',
        'table_attrs': {},
        'tbody_td_attrs': {},
        'tbody_tr_attrs': {},
        'th_wrapper_attrs': {},
        'thead_th_attrs': {},
        'thead_tr_attrs': {},
    }


def deep_merge(base: Optional[Mapping], override: Optional[Mapping]) -> Dict[str, Any]:
    """
    Deep merge two option mappings into a new dict.

    Nested mappings present in both layers are merged key by key; any other
    value in `override` replaces the one in `base`. Neither input is mutated.

    Examples:
        >>> deep_merge({'a': {'x': 1, 'y': 2}}, {'a': {'y': 3}})
        {'a': {'x': 1, 'y': 3}}

        >>> deep_merge({'a': {'x': 1}}, {'a': 'flat'})
        {'a': 'flat'}
    """
    result = {}
    for key, value in (base or {}).items():
        result[key] = deep_merge(value, None) if isinstance(value, Mapping) else value

    for key, value in (override or {}).items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        elif isinstance(value, Mapping):
            result[key] = deep_merge({}, value)
        else:
            result[key] = value

    return result


def merge_opts(opts: Optional[Mapping] = None,
               global_opts: Optional[Mapping] = None) -> Dict[str, Any]:
    """
    Merge the per-call options over the global options over the defaults.

    Args:
        opts: Per-call overrides
        global_opts: Global overrides snapshot (see config.get_global_opts)

    Returns:
        A fresh options dict
    """
    return deep_merge(deep_merge(default_opts(), global_opts), opts)
