"""
ISO-8601 timestamp parsing and formatting.
"""

import re
from datetime import datetime, timedelta, timezone

# Internet date-time profile: date, 'T', time, optional fraction, mandatory zone.
_ISO8601_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<zone>Z|[+-]\d{2}:?\d{2})",
    re.ASCII,
)


def _parse_zone(zone: str) -> timezone:
    if zone == "Z":
        return timezone.utc

    sign = -1 if zone[0] == "-" else 1
    digits = zone[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if hours > 23 or minutes > 59:
        raise ValueError(f"Zone offset out of range: {zone}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_iso8601(text: str) -> datetime:
    """
    Parse an ISO-8601 timestamp such as ``2026-01-15T10:30:00Z``.

    Date, time and zone designator are all required. Fractional seconds
    are accepted and truncated to microseconds.

    Args:
        text: Timestamp text

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the text is not a valid ISO-8601 timestamp
    """
    match = _ISO8601_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"Not an ISO-8601 timestamp: {text!r}")

    fraction = match.group("fraction") or ""
    microsecond = int(fraction[:6].ljust(6, "0"))

    # datetime() rejects out-of-range components such as month 13
    return datetime(
        int(match.group("year")),
        int(match.group("month")),
        int(match.group("day")),
        int(match.group("hour")),
        int(match.group("minute")),
        int(match.group("second")),
        microsecond,
        tzinfo=_parse_zone(match.group("zone")),
    )


def format_iso8601(value: datetime) -> str:
    """
    Format a timezone-aware datetime as ISO-8601 text.

    UTC is written with the ``Z`` designator, other offsets as ``+HH:MM``.

    Raises:
        ValueError: If the datetime is naive
    """
    offset = value.utcoffset()
    if offset is None:
        raise ValueError("Cannot format a naive datetime as ISO-8601")

    timespec = "microseconds" if value.microsecond else "seconds"
    text = value.isoformat(timespec=timespec)
    if not offset:
        text = text[: -len("+00:00")] + "Z"
    return text
