from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from .durations import Duration

PeriodEnd = Union[datetime, Duration, None]


@dataclass(frozen=True)
class Period:
    """
    One busy/free interval.

    ``end`` says how the interval ends: a datetime is an explicit end,
    a Duration is a length counted from ``start``, and None means the
    period is open.  There is no way of carrying both an end date and a
    duration.  Date-times must be timezone aware.
    """

    start: datetime
    end: PeriodEnd = None

    def __post_init__(self) -> None:
        if not isinstance(self.start, datetime):
            raise TypeError("period start must be a datetime, got %r" % (self.start,))
        if self.end is not None and not isinstance(self.end, (datetime, Duration)):
            raise TypeError(
                "period end must be a datetime, a Duration or None, got %r"
                % (self.end,)
            )
        for instant in (self.start, self.end_date):
            if instant is not None and instant.utcoffset() is None:
                raise ValueError(
                    "period date-times must be timezone aware, got %r" % (instant,)
                )

    @property
    def end_date(self) -> datetime | None:
        return self.end if isinstance(self.end, datetime) else None

    @property
    def duration(self) -> Duration | None:
        return self.end if isinstance(self.end, Duration) else None

    @property
    def is_open(self) -> bool:
        return self.end is None
