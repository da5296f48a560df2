"""
RFC 5545 durations (section 3.3.6).

    dur-value = (["+"] / "-") "P" (dur-date / dur-time / dur-week)

A duration is either a number of weeks, or days and/or a time part.
The two forms cannot be combined.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta

from periodcodec.lib.error import InvalidDuration

_DURATION_RE = re.compile(
    r"^([+-])?P(?:"
    r"(\d+)W"
    r"|(\d+)D(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?)?"
    r"|T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?"
    r")$",
    re.ASCII,
)


@dataclass(frozen=True)
class Duration:
    """
    A signed length of time.

    All magnitudes are non-negative; the sign is carried by ``negative``.
    ``weeks`` cannot be combined with any of the other fields.

    The other fields are normalised on construction, carrying seconds
    into minutes, minutes into hours and hours into days, so
    ``Duration(minutes=90) == Duration(hours=1, minutes=30)``.  Days are
    never carried into weeks.
    """

    negative: bool = False
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        fields = (self.weeks, self.days, self.hours, self.minutes, self.seconds)
        if any(not isinstance(x, int) or x < 0 for x in fields):
            raise ValueError("duration fields must be non-negative integers")
        if self.weeks and any(fields[1:]):
            raise ValueError("weeks cannot be combined with days or time")
        minutes, seconds = divmod(self.seconds, 60)
        hours, minutes = divmod(self.minutes + minutes, 60)
        days, hours = divmod(self.hours + hours, 24)
        object.__setattr__(self, "days", self.days + days)
        object.__setattr__(self, "hours", hours)
        object.__setattr__(self, "minutes", minutes)
        object.__setattr__(self, "seconds", seconds)

    @classmethod
    def from_timedelta(cls, td: timedelta) -> Duration:
        """
        Weeks are used only when the length is a whole number of weeks.
        Sub-second precision is dropped.
        """
        total_seconds = int(td.total_seconds())
        negative = total_seconds < 0
        total_seconds = abs(total_seconds)
        if total_seconds and total_seconds % 604800 == 0:
            return cls(negative=negative, weeks=total_seconds // 604800)
        days, rem = divmod(total_seconds, 86400)
        hours, rem = divmod(rem, 3600)
        minutes, seconds = divmod(rem, 60)
        return cls(
            negative=negative,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
        )

    def to_timedelta(self) -> timedelta:
        td = timedelta(
            weeks=self.weeks,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
        )
        return -td if self.negative else td

    def __str__(self) -> str:
        return write(self)


def parse(text: str) -> Duration:
    """
    Parse a duration token such as ``PT1H``, ``-P2W`` or ``P1DT12H30M``.

    Raises:
        InvalidDuration: the text does not follow the grammar
    """
    if not isinstance(text, str):
        raise InvalidDuration(repr(text), "expected a string")
    match = _DURATION_RE.match(text.strip())
    if not match:
        raise InvalidDuration(text)
    sign, weeks, days, d_hours, d_minutes, d_seconds, hours, minutes, seconds = (
        match.groups()
    )
    if weeks is not None:
        return Duration(negative=sign == "-", weeks=int(weeks))
    if days is None:
        ## a bare "T" must be followed by at least one time component
        if hours is None and minutes is None and seconds is None:
            raise InvalidDuration(text, "empty time part")
    else:
        hours, minutes, seconds = d_hours, d_minutes, d_seconds
        if "T" in text and hours is None and minutes is None and seconds is None:
            raise InvalidDuration(text, "empty time part")
    return Duration(
        negative=sign == "-",
        days=int(days or 0),
        hours=int(hours or 0),
        minutes=int(minutes or 0),
        seconds=int(seconds or 0),
    )


def try_parse(text: str) -> Duration | None:
    """Like parse(), but returns None instead of raising InvalidDuration"""
    try:
        return parse(text)
    except InvalidDuration:
        return None


def write(duration: Duration) -> str:
    """
    Canonical form of a duration.  Zero components are left out; a zero
    length duration is written as ``PT0S``.  PT90M is written as PT1H30M,
    since the fields are already carried.
    """
    sign = "-" if duration.negative else ""
    if duration.weeks:
        return f"{sign}P{duration.weeks}W"

    day_part = f"{duration.days}D" if duration.days else ""
    time_parts = []
    if duration.hours:
        time_parts.append(f"{duration.hours}H")
    if duration.minutes:
        time_parts.append(f"{duration.minutes}M")
    if duration.seconds:
        time_parts.append(f"{duration.seconds}S")
    time_part = ("T" + "".join(time_parts)) if time_parts else ""

    body = day_part + time_part or "T0S"
    return f"{sign}P{body}"
