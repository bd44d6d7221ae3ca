"""
HTML sanitization functions for table content.

Provides utilities to sanitize caller-supplied HTML fragments to prevent XSS.
"""

import bleach

# Safe formatting elements allowed in cells, labels and no-results content
ALLOWED_TAGS = frozenset({
    'a', 'abbr', 'b', 'br', 'code', 'em', 'i', 'p', 'pre', 'small', 'span',
    'strong', 'time'
})
ALLOWED_ATTRIBUTES = {
    'a': ['href', 'target', 'rel', 'title'],
    'span': ['class', 'title'],
    'time': ['datetime'],
    '*': ['class', 'title']
}
ALLOWED_PROTOCOLS = frozenset({'http', 'https', 'mailto'})


def sanitize_html(html_content: str) -> str:
    """
    Sanitize HTML content to prevent XSS attacks.

    Only safe tags and attributes are kept; everything else is stripped and
    bare text is escaped.

    Args:
        html_content: Raw HTML content to sanitize

    Returns:
        Sanitized HTML content safe for rendering
    """
    if not html_content:
        return ''

    return bleach.clean(
        html_content,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True
    )
