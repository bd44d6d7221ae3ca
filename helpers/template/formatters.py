"""
Formatting functions for table markup.

Provides utilities to turn attribute maps and caller content into HTML.
"""

import html
from typing import Any, Mapping, Optional

from .sanitization import sanitize_html


def format_attrs(attrs: Optional[Mapping[str, Any]]) -> str:
    """
    Format an attribute map as an HTML attribute string.

    `True` renders a bare attribute, `False` and `None` are left out and
    lists are joined with spaces (handy for class lists).

    Example:
        >>> format_attrs({'class': 'table', 'hidden': True, 'id': None})
        ' class="table" hidden'
    """
    if not attrs:
        return ''

    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f' {html.escape(str(name))}')
            continue
        if isinstance(value, (list, tuple)):
            value = ' '.join(str(v) for v in value)
        parts.append(f' {html.escape(str(name))}="{html.escape(str(value), quote=True)}"')
    return ''.join(parts)


def format_fragment(value: Any) -> str:
    """
    Format caller-supplied content for insertion into the table.

    Objects implementing `__html__` (e.g. markupsafe.Markup) are trusted and
    inserted as-is. Anything else is converted to text and escaped.

    Example:
        >>> format_fragment('<Bob>')
        '&lt;Bob&gt;'
    """
    if value is None:
        return ''
    if hasattr(value, '__html__'):
        return str(value.__html__())
    return html.escape(str(value))


def format_sanitized(value: Any) -> str:
    """
    Format content that may hold untrusted HTML.

    Strings keep the safe formatting tags allowed by sanitize_html; other
    values are formatted like format_fragment.
    """
    if isinstance(value, str) and not hasattr(value, '__html__'):
        return sanitize_html(value)
    return format_fragment(value)


def format_tag(tag: str, content: str = '', attrs: Optional[Mapping[str, Any]] = None) -> str:
    """Wrap already-formatted content in a tag."""
    return f'<{tag}{format_attrs(attrs)}>{content}</{tag}>'
