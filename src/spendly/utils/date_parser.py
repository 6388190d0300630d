"""Date parsing utilities."""

import os
from datetime import datetime, tzinfo, UTC
from dateutil import parser as date_parser
from dateutil import tz

# Bangladesh Standard Time; banks print local times in their messages
DEFAULT_BANK_TIMEZONE = "Asia/Dhaka"


def get_timezone(name: str | None = None) -> tzinfo:
    """Return the timezone bank messages are written in.

    Args:
        name: IANA zone name. If None, checks SPENDLY_TIMEZONE environment
            variable, then defaults to Asia/Dhaka

    Raises:
        ValueError: If the zone name is unknown
    """
    if name is None:
        name = os.environ.get("SPENDLY_TIMEZONE") or DEFAULT_BANK_TIMEZONE

    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown timezone '{name}'")
    return zone


def resolve_timestamp(
    timestamp: str, received_at: datetime, zone: tzinfo | None = None
) -> datetime:
    """Resolve a timestamp extracted from an SMS into a full datetime.

    Bank messages carry either a bare time of day ("07:58 PM") or a day-first
    date with a time ("07/05/25 20:07"), both in the bank's local time. The
    arrival time is first converted to that zone, then any component missing
    from the text is taken from it, so a bare time lands on the local day the
    message arrived.

    Args:
        timestamp: Timestamp text as extracted from the message
        received_at: Arrival time of the message
        zone: Zone the message is written in, defaults to ``get_timezone()``

    Returns:
        Timezone-aware datetime in the bank's zone

    Raises:
        ValueError: If the timestamp cannot be parsed
    """
    local = received_at.astimezone(zone or get_timezone())
    default = local.replace(second=0, microsecond=0)
    try:
        return date_parser.parse(timestamp.strip(), dayfirst=True, default=default)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse timestamp '{timestamp}': {e}")


def parse_received_at(value: int | float | str) -> datetime:
    """Parse a message arrival time from a device export.

    Numbers are epoch milliseconds (the Android SMS provider format);
    strings are parsed as ISO-8601 or any format dateutil understands.
    Naive results are assumed to be UTC.

    Raises:
        ValueError: If the value cannot be interpreted as a datetime
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid message date: {value!r}")

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, UTC)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Invalid message date {value!r}: {e}")

    try:
        dt = date_parser.parse(value)
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Could not parse message date '{value}': {e}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt
