"""
jCal (RFC 7265) encoding of a period list.

The value is a list of period tokens with the extended date-time
layout.  A complete jCal property is an array of name, parameters,
value type and the values:

    ["freebusy", {"fbtype": "BUSY"}, "period",
     "1997-03-08T16:00:00Z/PT8H30M", "1997-03-08T23:00:00Z/1997-03-09T00:00:00Z"]
"""

from __future__ import annotations

import json
import logging
from typing import Any
from typing import Mapping
from typing import Sequence
from typing import Union

from icalendar import Parameters

from periodcodec.diagnostics import Diagnostics
from periodcodec.marshaller import TimezoneArg
from periodcodec.marshaller import parse_list
from periodcodec.marshaller import render_one
from periodcodec.values.period import Period

log = logging.getLogger(__name__)

PROPERTY_NAME = "freebusy"
VALUE_TYPE = "period"


class JCalFormat:
    name = "json"

    def write(self, periods: list[Period]) -> list[str]:
        """
        An empty list is written as ``[""]`` so that a property without
        a value still carries one.
        """
        if not periods:
            return [""]
        return [render_one(p, extended=True) for p in periods]

    def read(
        self,
        raw: Union[str, Sequence[str]],
        timezone: TimezoneArg = None,
        diagnostics: Diagnostics | None = None,
    ) -> list[Period]:
        if isinstance(raw, str):
            raw = [raw]
        return parse_list([str(x) for x in raw], timezone, diagnostics)

    def write_property(
        self,
        periods: list[Period],
        parameters: Mapping[str, Any] | None = None,
    ) -> list[Any]:
        params = {k.lower(): v for k, v in (parameters or {}).items()}
        return [PROPERTY_NAME, params, VALUE_TYPE] + self.write(periods)

    def read_property(
        self,
        array: Sequence[Any],
        diagnostics: Diagnostics | None = None,
    ) -> tuple[str, Parameters, list[Period]]:
        """
        Read a jCal property array.  The tzid parameter, if any, is used
        for date-times without a UTC designator.

        Raises:
            ValueError: the array does not have the name, parameters and
                value type members
        """
        if len(array) < 3 or not isinstance(array[1], dict):
            raise ValueError("Not a jCal property: %r" % (array,))
        name, params, value_type = array[0], array[1], array[2]
        if value_type != VALUE_TYPE:
            log.info("Reading %s value of type %r as period", name, value_type)
        parameters = Parameters({k.upper(): v for k, v in params.items()})
        periods = self.read(list(array[3:]), parameters.get("TZID"), diagnostics)
        return name, parameters, periods

    def dumps(
        self, periods: list[Period], parameters: Mapping[str, Any] | None = None
    ) -> str:
        return json.dumps(self.write_property(periods, parameters))

    def loads(
        self, text: Union[str, bytes], diagnostics: Diagnostics | None = None
    ) -> tuple[str, Parameters, list[Period]]:
        return self.read_property(json.loads(text), diagnostics)


JCAL = JCalFormat()
