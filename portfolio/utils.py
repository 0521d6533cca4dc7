"""
Small helpers shared across the portfolio package
"""

from datetime import datetime, timezone


def utcnow():
    """Naive UTC timestamp, matching what SQLite DateTime columns round-trip."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def split_csv(value, sep=','):
    """Split a delimited string into trimmed, non-empty parts.

    Used at render time for `Project.tech_used`, which is stored as a single
    comma-joined string.
    """
    if not value:
        return []
    return [part.strip() for part in value.split(sep) if part.strip()]
