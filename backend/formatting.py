"""Display helpers for the wall view."""

from datetime import datetime, tzinfo
from typing import Optional


def format_post_date(value: datetime, tz: Optional[tzinfo] = None) -> str:
    """Render a post timestamp as ``dd/mm/yyyy, HH:MM`` in ``tz`` (local time when omitted)."""
    local = value.astimezone(tz) if tz else value.astimezone()
    return local.strftime("%d/%m/%Y, %H:%M")
