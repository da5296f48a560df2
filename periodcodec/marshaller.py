"""
Reading and writing of period tokens.

A period token is ``start "/" (end / duration)``, the form shared by the
text and JSON encodings of a PERIOD value (RFC 5545 section 3.3.9).  The
functions here know nothing about any wire syntax.  The format adapters
in periodcodec.formats extract the tokens and hand them over.

All functions are pure.  Problems with a single token are recorded in
the Diagnostics given by the caller and the token is dropped, the rest
of the list is still processed.
"""

import logging
from datetime import datetime
from datetime import tzinfo
from typing import Iterable
from typing import List
from typing import Optional
from typing import Union

from periodcodec.diagnostics import DiagnosticCode
from periodcodec.diagnostics import Diagnostics
from periodcodec.lib.timezone import resolve_timezone
from periodcodec.values import dates
from periodcodec.values import durations
from periodcodec.values.durations import Duration
from periodcodec.values.period import Period

log = logging.getLogger(__name__)

TimezoneArg = Union[str, tzinfo, None]


def render_one(period: Period, extended: bool = False) -> str:
    """
    Write a single period token.

    Args:
        period: the period to write
        extended: use the extended date-time layout (xCal/jCal) instead
            of the compact one (plain text)

    Returns:
        ``start/end``, ``start/duration``, or ``start/`` for an open period
    """
    token = dates.write(period.start, extended) + "/"
    if period.end_date is not None:
        token += dates.write(period.end_date, extended)
    elif period.duration is not None:
        token += durations.write(period.duration)
    return token


def parse_end(text: str, tz: Optional[tzinfo] = None) -> Union[datetime, Duration, None]:
    """
    Interpret the part of a token after the slash.

    A date-time is tried first, and only if that fails is the text tried
    as a duration.  Returns None if it is neither.
    """
    end = dates.try_parse(text, tz)
    if end is not None:
        return end
    return durations.try_parse(text)


def parse_one(
    token: str,
    timezone: TimezoneArg = None,
    diagnostics: Optional[Diagnostics] = None,
) -> Optional[Period]:
    """
    Parse a single period token.

    Args:
        token: ``start/end``, ``start/duration`` or ``start/``
        timezone: timezone identifier or tzinfo for date-times without
            a UTC designator or offset
        diagnostics: receives a notice for every dropped token

    Returns:
        The Period, or None if the token was dropped
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    tz = resolve_timezone(timezone, diagnostics)

    start_text, slash, end_text = token.partition("/")
    if not slash:
        diagnostics.add(DiagnosticCode.MALFORMED_PERIOD, token or None)
        return None

    start = dates.try_parse(start_text, tz)
    if start is None:
        diagnostics.add(DiagnosticCode.INVALID_START, start_text)
        return None

    if not end_text.strip():
        return Period(start)

    end = parse_end(end_text, tz)
    if end is None:
        diagnostics.add(DiagnosticCode.INVALID_PERIOD_END, end_text)
        return None
    return Period(start, end)


def parse_list(
    tokens: Iterable[str],
    timezone: TimezoneArg = None,
    diagnostics: Optional[Diagnostics] = None,
) -> List[Period]:
    """
    Parse every token, keeping the document order.

    Never fails as a whole; a list without a single valid token gives
    an empty list and whatever diagnostics were recorded.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    ## resolve once, so an unknown identifier is reported once per value
    tz = resolve_timezone(timezone, diagnostics)

    periods = []
    for token in tokens:
        period = parse_one(token, tz, diagnostics)
        if period is not None:
            periods.append(period)
    log.debug(
        "parsed %d period(s), %d diagnostic(s) recorded",
        len(periods),
        len(diagnostics),
    )
    return periods
