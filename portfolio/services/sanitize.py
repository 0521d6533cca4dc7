"""
Input sanitization applied before anything user-supplied is stored.
"""

import re

# An ``&`` that does not already start one of our own escapes.
_BARE_AMPERSAND = re.compile(r'&(?!(?:amp|lt|gt|quot|#x27|#39);)')

_ESCAPES = (
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&#x27;'),
)


def sanitize_input(value):
    """Trim surrounding whitespace and HTML-escape ``< > & " '``.

    Nothing else is decoded or rewritten. An ``&`` that already begins one of
    the escapes produced here is left as is, so sanitizing twice is the same
    as sanitizing once.
    """
    if value is None:
        return ''
    value = _BARE_AMPERSAND.sub('&amp;', value.strip())
    for char, entity in _ESCAPES:
        value = value.replace(char, entity)
    return value
