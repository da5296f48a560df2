"""
Date-time values in the two ISO 8601 layouts used by the iCalendar
encodings.

The compact ("basic") layout, 20150101T103000Z, is what the plain text
format uses.  xCal and jCal use the extended layout with punctuation,
2015-01-01T10:30:00Z.  Both layouts are accepted when parsing,
regardless of where the text comes from.
"""

import re
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from datetime import tzinfo
from typing import Optional

from periodcodec.lib.error import InvalidDateTime
from periodcodec.lib.timezone import local_timezone

utc_tz = timezone.utc

_COMPACT_RE = re.compile(
    r"^(\d{4})(\d{2})(\d{2})"
    r"(?:T(\d{2})(\d{2})(\d{2})(Z|[+-]\d{2}(?:\d{2})?)?)?$",
    re.ASCII,
)
_EXTENDED_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})"
    r"(?:T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,6})\d*)?(Z|[+-]\d{2}(?::?\d{2})?)?)?$",
    re.ASCII,
)


def _offset(designator: str) -> tzinfo:
    if designator == "Z":
        return utc_tz
    sign = -1 if designator[0] == "-" else 1
    digits = designator[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:] or 0)
    if hours > 23 or minutes > 59:
        raise ValueError("offset out of range: %s" % designator)
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse(text: str, tz: Optional[tzinfo] = None) -> datetime:
    """
    Parse a compact or extended date-time.

    Args:
        text: the value, e.g. 20150101T000000Z or 2015-01-01T00:00:00Z
        tz: used when the value carries neither "Z" nor an offset.  If
            not given, the value is taken as system local time.

    Returns:
        A timezone-aware datetime.  Date-only values give midnight.

    Raises:
        InvalidDateTime: the text matches neither layout, a field is
            out of range, or the instant falls outside the datetime range
            once converted to UTC
    """
    if not isinstance(text, str):
        raise InvalidDateTime(repr(text), "expected a string")
    value = text.strip()
    micro = None
    match = _COMPACT_RE.match(value)
    if match:
        year, month, day, hour, minute, second, designator = match.groups()
    else:
        match = _EXTENDED_RE.match(value)
        if not match:
            raise InvalidDateTime(text)
        year, month, day, hour, minute, second, micro, designator = match.groups()

    try:
        if hour is None:
            ret = datetime(int(year), int(month), int(day))
        else:
            ret = datetime(
                int(year),
                int(month),
                int(day),
                int(hour),
                int(minute),
                int(second),
                int(micro.ljust(6, "0")) if micro else 0,
            )
        if designator:
            ret = ret.replace(tzinfo=_offset(designator))
        else:
            ret = ret.replace(tzinfo=tz if tz is not None else local_timezone())
        ## the instant must have a UTC form, or write() could not handle it
        ret.astimezone(utc_tz)
    except (ValueError, OverflowError) as e:
        raise InvalidDateTime(text, str(e)) from e
    return ret


def try_parse(text: str, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Like parse(), but returns None instead of raising InvalidDateTime"""
    try:
        return parse(text, tz)
    except InvalidDateTime:
        return None


def write(instant: datetime, extended: bool = False) -> str:
    """
    Write an instant in UTC.

    A naive datetime is assumed to be in system local time.  Sub-second
    precision is dropped.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=local_timezone())
    instant = instant.astimezone(utc_tz)
    ## strftime does not zero-pad years before 1000 on all platforms
    if extended:
        fmt = "{0.year:04d}-{0.month:02d}-{0.day:02d}T{0.hour:02d}:{0.minute:02d}:{0.second:02d}Z"
    else:
        fmt = "{0.year:04d}{0.month:02d}{0.day:02d}T{0.hour:02d}{0.minute:02d}{0.second:02d}Z"
    return fmt.format(instant)
