"""HTTP-date formatting and parsing (RFC 9110 section 5.6.7)."""

import email.utils
from datetime import UTC


def http_date(timestamp: float) -> str:
    """Format an epoch timestamp as an IMF-fixdate.

    >>> http_date(0)
    'Thu, 01 Jan 1970 00:00:00 GMT'
    """
    return email.utils.formatdate(timestamp, usegmt=True)


def parse_http_date(value: str | None) -> int:
    """Parse an HTTP date header into whole epoch seconds.

    Accepts IMF-fixdate, RFC 850 and asctime forms. Returns ``0`` for a
    missing, empty or malformed value; never raises. Dates without a
    zone are taken as UTC.
    """
    if not value:
        return 0
    try:
        parsed = email.utils.parsedate_to_datetime(value.strip())
    except (TypeError, ValueError, IndexError, OverflowError):
        return 0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    try:
        seconds = int(parsed.timestamp())
    except (OverflowError, OSError, ValueError):
        return 0
    return max(seconds, 0)
