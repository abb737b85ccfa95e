"""Relative time formatting ("3 days ago")."""

from datetime import datetime, timezone
from typing import Optional

from models.data_models import parse_timestamp

# Checked in order; the first bucket with a whole count wins
INTERVALS = (
    ("year", 31536000),
    ("month", 2592000),
    ("week", 604800),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


def time_ago(created_at: str, now: Optional[datetime] = None) -> str:
    """Render the time elapsed since created_at, e.g. "1 day ago".

    Only the largest non-zero unit is shown. Anything under a second,
    or in the future, is "just now". A naive now is taken as UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    diff_in_seconds = int((now - parse_timestamp(created_at)).total_seconds())

    for name, seconds in INTERVALS:
        count = diff_in_seconds // seconds
        if count >= 1:
            return f"{count} {name}{'s' if count > 1 else ''} ago"
    return "just now"
