"""
utils/timestamps.py
-------------------
Conversion between stored start times and the wire timestamp.

The wire timestamp is a timezone-aware datetime normalized to UTC.
Stored values are RFC 3339 text; values without an offset are read as local time.
"""

from datetime import datetime, timezone
from typing import Any

from dateutil.parser import isoparse

from repositories.exceptions import TimestampConversionError

_WIRE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def to_wire_timestamp(value: Any) -> datetime:
    """
    Convert a stored start-time value into a UTC wire timestamp.

    Args:
        value: RFC 3339 text or a datetime, as returned by the driver.

    Returns:
        An aware datetime in UTC.

    Raises:
        TimestampConversionError: If the value is missing or unparsable.
    """
    if value is None:
        raise TimestampConversionError(value, "start time is missing")

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError) as e:
            raise TimestampConversionError(value, str(e)) from e
    else:
        raise TimestampConversionError(value, f"unsupported type {type(value).__name__}")

    try:
        # astimezone() on a naive datetime assumes local time
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise TimestampConversionError(value, str(e)) from e


def format_wire_timestamp(value: datetime) -> str:
    """Render a wire timestamp as RFC 3339 text with a 'Z' suffix."""
    utc = value.astimezone(timezone.utc)
    text = utc.strftime(_WIRE_FORMAT)
    if utc.microsecond:
        text += f".{utc.microsecond:06d}".rstrip("0")
    return text + "Z"
