"""
Timezone identifier lookup.

The identifiers come from the TZID parameter of a property.  Only IANA
names are understood; anything else is reported and interpreted as
system local time.
"""

import logging
from datetime import tzinfo
from typing import Optional
from typing import Union
from zoneinfo import ZoneInfo
from zoneinfo import ZoneInfoNotFoundError

import tzlocal

from periodcodec.diagnostics import DiagnosticCode

log = logging.getLogger(__name__)


def local_timezone() -> tzinfo:
    return tzlocal.get_localzone()


def resolve_timezone(
    timezone: Union[str, tzinfo, None], diagnostics=None
) -> Optional[tzinfo]:
    """
    Turn a timezone identifier into a tzinfo.

    Args:
        timezone: an IANA identifier, an already resolved tzinfo, or None
        diagnostics: sink for an UNKNOWN_TIMEZONE notice

    Returns:
        The tzinfo, or None if no identifier was given (callers then use
        local time).
    """
    if timezone is None or isinstance(timezone, tzinfo):
        return timezone
    tzid = timezone.strip()
    if not tzid:
        return None
    try:
        return ZoneInfo(tzid)
    except (ZoneInfoNotFoundError, ValueError):
        ## ValueError is raised for keys that are not valid paths, like "../x"
        log.info("Could not resolve timezone identifier %r", tzid)
        if diagnostics is not None:
            diagnostics.add(DiagnosticCode.UNKNOWN_TIMEZONE, tzid)
        return local_timezone()
