"""
Plain text iCalendar (RFC 5545) encoding of a period list.

The value is a comma separated list of period tokens using the compact
date-time layout:

    FREEBUSY;FBTYPE=BUSY:19970308T160000Z/PT8H30M,19970308T230000Z/19970309T000000Z
"""

from __future__ import annotations

import logging
from typing import Mapping
from typing import Union

from icalendar import Parameters
from icalendar.parser import Contentline
from icalendar.prop import vInline

from periodcodec.diagnostics import Diagnostics
from periodcodec.lib.python_utilities import to_normal_str
from periodcodec.marshaller import TimezoneArg
from periodcodec.marshaller import parse_list
from periodcodec.marshaller import render_one
from periodcodec.values.period import Period

log = logging.getLogger(__name__)

DELIMITER = ","
PROPERTY_NAME = "FREEBUSY"


class TextFormat:
    name = "text"

    def write(self, periods: list[Period]) -> str:
        return DELIMITER.join(render_one(p, extended=False) for p in periods)

    def read(
        self,
        raw: Union[str, bytes],
        timezone: TimezoneArg = None,
        diagnostics: Diagnostics | None = None,
    ) -> list[Period]:
        value = to_normal_str(raw).strip()
        if not value:
            return []
        return parse_list(value.split(DELIMITER), timezone, diagnostics)

    def write_line(
        self,
        periods: list[Period],
        parameters: Mapping[str, str] | None = None,
        name: str = PROPERTY_NAME,
    ) -> str:
        """
        Write a complete, unfolded content line,
        ``NAME[;PARAM=VALUE...]:VALUE``.
        """
        params = Parameters(dict(parameters or {}))
        return str(Contentline.from_parts(name, params, vInline(self.write(periods))))

    def read_line(
        self,
        line: Union[str, bytes],
        diagnostics: Diagnostics | None = None,
    ) -> tuple[str, Parameters, list[Period]]:
        """
        Split a content line and read its value.  The TZID parameter, if
        any, is used for date-times without a UTC designator.

        Returns:
            the property name, its parameters and the periods

        Raises:
            ValueError: the line is not a content line at all
        """
        contentline = Contentline.from_ical(to_normal_str(line).strip())
        name, params, value = contentline.parts()
        log.debug("reading %s value with parameters %r", name, dict(params))
        periods = self.read(value, params.get("TZID"), diagnostics)
        return name, params, periods


TEXT = TextFormat()
