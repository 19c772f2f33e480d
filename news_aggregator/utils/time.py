"""Timestamp normalization for heterogeneous provider formats.

Providers report publication time as ISO 8601 strings, RFC 822 dates (RSS),
``YYYY-MM-DD HH:MM:SS`` strings or epoch seconds. Everything is converted to
an aware UTC ``datetime``; anything unrecognizable becomes ``None`` rather
than a made-up time.
"""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any


def to_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime, assuming UTC when naive."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a provider timestamp into an aware UTC datetime.

    Args:
        value: datetime, epoch seconds, or a date string in ISO 8601,
            RFC 822 or ``YYYY-MM-DD HH:MM:SS`` form

    Returns:
        Parsed datetime in UTC, or None if the value is missing or unparsable
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        try:
            return to_utc(value)
        except OverflowError:
            return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    # ISO 8601, including a trailing "Z" and the space-separated variant
    try:
        iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
        parsed = datetime.fromisoformat(iso_text)
    except ValueError:
        parsed = None
    if parsed is not None:
        try:
            return to_utc(parsed)
        except OverflowError:
            # Valid local time that falls outside the UTC range
            return None

    # RFC 822 (RSS pubDate)
    try:
        return to_utc(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError, OverflowError):
        return None
