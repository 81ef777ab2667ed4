"""Best-effort date parsing for feed timestamps.

Feeds carry dates in ISO 8601 (Atom, Sitemap), RFC 822 (RSS) and a long
tail of hand-written variants. Parsing tries the strict formats first
and falls back to dateutil for everything else.
"""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from dateutil import parser as dateutil_parser

from unifeed.core.exceptions import DateParseError

# Abbreviations dateutil does not resolve on its own
_TZINFOS = {
    "UT": 0,
    "UTC": 0,
    "GMT": 0,
    "Z": 0,
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
}


def _to_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_date(value: str) -> datetime:
    """Parse a feed date string into an aware UTC datetime.

    Args:
        value: Raw date text from the feed

    Returns:
        The instant normalized to UTC

    Raises:
        DateParseError: If no known format matches
    """
    candidate = (value or "").strip()
    if not candidate:
        raise DateParseError("empty date string", value=value)

    try:
        return _to_utc(datetime.fromisoformat(candidate.replace("Z", "+00:00")))
    except ValueError:
        pass

    try:
        return _to_utc(parsedate_to_datetime(candidate))
    except (TypeError, ValueError, IndexError):
        pass

    try:
        return _to_utc(dateutil_parser.parse(candidate, tzinfos=_TZINFOS))
    except (ValueError, OverflowError) as e:
        raise DateParseError(f"unrecognised date format: {candidate!r}", value=value) from e
