"""
The FREEBUSY property (RFC 5545 section 3.8.2.6) and the marshaller that
moves it between the three encodings.
"""

from __future__ import annotations

from datetime import datetime
from datetime import timedelta
from typing import Any
from typing import Iterable
from typing import Mapping
from typing import Optional
from typing import Union

from icalendar import Parameters
from lxml.etree import _Element

from periodcodec.diagnostics import Diagnostics
from periodcodec.formats import JCAL
from periodcodec.formats import TEXT
from periodcodec.formats import XCAL
from periodcodec.values.durations import Duration
from periodcodec.values.period import Period


class FreeBusy:
    """
    A FREEBUSY property: a list of periods plus the property parameters.

    The FBTYPE parameter says what kind of time the periods are
    (BUSY, FREE, BUSY-UNAVAILABLE, BUSY-TENTATIVE), TZID says how
    date-times without a UTC designator are interpreted.
    """

    def __init__(
        self,
        values: Optional[Iterable[Period]] = None,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.values: list[Period] = list(values or [])
        self.parameters = Parameters(dict(parameters or {}))

    def add_value(
        self,
        start: datetime,
        end: Union[datetime, Duration, timedelta, None] = None,
    ) -> Period:
        if isinstance(end, timedelta):
            end = Duration.from_timedelta(end)
        period = Period(start, end)
        self.values.append(period)
        return period

    @property
    def fbtype(self) -> Optional[str]:
        return self.parameters.get("FBTYPE")

    @fbtype.setter
    def fbtype(self, value: Optional[str]) -> None:
        self._set_parameter("FBTYPE", value)

    @property
    def tzid(self) -> Optional[str]:
        return self.parameters.get("TZID")

    @tzid.setter
    def tzid(self, value: Optional[str]) -> None:
        self._set_parameter("TZID", value)

    def _set_parameter(self, name: str, value: Optional[str]) -> None:
        if value is None:
            self.parameters.pop(name, None)
        else:
            self.parameters[name] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FreeBusy):
            return NotImplemented
        return self.values == other.values and dict(self.parameters) == dict(
            other.parameters
        )

    def __repr__(self) -> str:
        return "FreeBusy(%r, %r)" % (self.values, dict(self.parameters))


class FreeBusyMarshaller:
    """
    Writes and parses FreeBusy properties in the text, xCal and jCal
    encodings.

    The parse methods never fail on a malformed period; they skip it and
    record a notice in ``diagnostics``.  The one exception is an xCal
    element without any <period> child, see parse_xml().
    """

    name = "FREEBUSY"
    data_type = "period"

    def write_text(self, prop: FreeBusy) -> str:
        return TEXT.write(prop.values)

    def parse_text(
        self,
        value: Union[str, bytes],
        parameters: Optional[Mapping[str, Any]] = None,
        diagnostics: Optional[Diagnostics] = None,
    ) -> FreeBusy:
        prop = FreeBusy(parameters=parameters)
        prop.values = TEXT.read(value, prop.tzid, diagnostics)
        return prop

    def write_text_line(self, prop: FreeBusy) -> str:
        return TEXT.write_line(prop.values, prop.parameters, self.name)

    def parse_text_line(
        self, line: Union[str, bytes], diagnostics: Optional[Diagnostics] = None
    ) -> FreeBusy:
        _, params, periods = TEXT.read_line(line, diagnostics)
        return FreeBusy(periods, params)

    def write_xml(self, prop: FreeBusy, element: Optional[_Element] = None) -> _Element:
        if element is None:
            return XCAL.write_property(prop.values, prop.parameters)
        return XCAL.write(prop.values, element)

    def parse_xml(
        self,
        element: Union[_Element, str, bytes],
        parameters: Optional[Mapping[str, Any]] = None,
        diagnostics: Optional[Diagnostics] = None,
    ) -> FreeBusy:
        """
        Parameters found in the element are merged with, and overridden
        by, the ones given by the caller.

        Raises:
            MissingXmlElements: the element has no <period> child
        """
        params = XCAL.read_parameters(element)
        params.update(parameters or {})
        prop = FreeBusy(parameters=params)
        prop.values = XCAL.read(element, prop.tzid, diagnostics)
        return prop

    def write_json(self, prop: FreeBusy) -> list[str]:
        return JCAL.write(prop.values)

    def parse_json(
        self,
        value: Union[str, list[str]],
        parameters: Optional[Mapping[str, Any]] = None,
        diagnostics: Optional[Diagnostics] = None,
    ) -> FreeBusy:
        prop = FreeBusy(parameters=parameters)
        prop.values = JCAL.read(value, prop.tzid, diagnostics)
        return prop

    def write_json_property(self, prop: FreeBusy) -> list[Any]:
        return JCAL.write_property(prop.values, prop.parameters)

    def parse_json_property(
        self, array: list[Any], diagnostics: Optional[Diagnostics] = None
    ) -> FreeBusy:
        _, params, periods = JCAL.read_property(array, diagnostics)
        return FreeBusy(periods, params)
