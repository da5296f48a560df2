"""
xCal (RFC 6321) encoding of a period list.

Every period is a <period> element with <start> and either <end> or
<duration> children, using the extended date-time layout:

    <freebusy xmlns="urn:ietf:params:xml:ns:icalendar-2.0">
      <period>
        <start>1997-03-08T16:00:00Z</start>
        <duration>PT8H30M</duration>
      </period>
    </freebusy>

xCal has no way of writing an open period.  Such periods are written
with a <start> only, and they are skipped with a diagnostic when read
back.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Mapping
from typing import Optional
from typing import Union

from icalendar import Parameters
from lxml import etree
from lxml.etree import _Element

from periodcodec.diagnostics import DiagnosticCode
from periodcodec.diagnostics import Diagnostics
from periodcodec.elements import xcal
from periodcodec.lib import error
from periodcodec.lib.debug import xmlstring
from periodcodec.lib.timezone import resolve_timezone
from periodcodec.marshaller import TimezoneArg
from periodcodec.values import dates
from periodcodec.values import durations
from periodcodec.values.period import Period

log = logging.getLogger(__name__)


def _localname(element: _Element) -> Optional[str]:
    ## comments and processing instructions have a non-string tag
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def _children(element: _Element, name: str) -> list[_Element]:
    return [x for x in element if _localname(x) == name]


def _first_text(element: _Element, name: str) -> Optional[str]:
    """Text of the first child with the given local name, or None if there is no such child"""
    for child in _children(element, name):
        return (child.text or "").strip()
    return None


def _to_element(raw: Union[_Element, str, bytes]) -> _Element:
    if isinstance(raw, (str, bytes)):
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        return etree.fromstring(raw)
    return raw


def period_element(period: Period) -> xcal.Period:
    ret = xcal.Period()
    ret += xcal.Start(dates.write(period.start, extended=True))
    if period.end_date is not None:
        ret += xcal.End(dates.write(period.end_date, extended=True))
    elif period.duration is not None:
        ret += xcal.Duration(durations.write(period.duration))
    return ret


class XCalFormat:
    name = "xml"

    def write(
        self, periods: list[Period], element: Optional[_Element] = None
    ) -> _Element:
        """
        Append one <period> per period to the property element, which is
        created if not given.  Returns the property element.
        """
        if element is None:
            element = xcal.FreeBusy().xmlelement()
        for period in periods:
            element.append(period_element(period).xmlelement())
        return element

    def write_property(
        self,
        periods: list[Period],
        parameters: Mapping[str, Any] | None = None,
    ) -> _Element:
        """Write a complete <freebusy> element, including <parameters>"""
        prop = xcal.FreeBusy()
        if parameters:
            prop += xcal.Parameters() + [
                xcal.Parameter(name, value) for name, value in parameters.items()
            ]
        return self.write(periods, prop.xmlelement())

    def read(
        self,
        raw: Union[_Element, str, bytes],
        timezone: TimezoneArg = None,
        diagnostics: Diagnostics | None = None,
    ) -> list[Period]:
        """
        Read the <period> children of a property element.

        Raises:
            MissingXmlElements: the element has no <period> child at all
            lxml.etree.XMLSyntaxError: raw is a string that is not XML
        """
        if diagnostics is None:
            diagnostics = Diagnostics()
        element = _to_element(raw)

        period_elements = _children(element, "period")
        if not period_elements:
            log.warning(
                "No period elements found in property element %s", xmlstring(element)
            )
            raise error.MissingXmlElements(["period"], value=_localname(element))

        tz = resolve_timezone(timezone, diagnostics)
        periods = []
        for period_element in period_elements:
            period = self._read_period(period_element, tz, diagnostics)
            if period is not None:
                periods.append(period)
        return periods

    def _read_period(self, element, tz, diagnostics) -> Optional[Period]:
        start_text = _first_text(element, "start")
        if start_text is None:
            diagnostics.add(DiagnosticCode.MISSING_START)
            return None
        start = dates.try_parse(start_text, tz)
        if start is None:
            diagnostics.add(DiagnosticCode.INVALID_START, start_text)
            return None

        end_text = _first_text(element, "end")
        duration_text = _first_text(element, "duration")
        if end_text is not None:
            if duration_text is not None:
                error.weirdness(
                    "period has both an end and a duration, ignoring the duration",
                    element,
                )
            end = dates.try_parse(end_text, tz)
            if end is None:
                diagnostics.add(DiagnosticCode.INVALID_END, end_text)
                return None
            return Period(start, end)

        if duration_text is not None:
            duration = durations.try_parse(duration_text)
            if duration is None:
                diagnostics.add(DiagnosticCode.INVALID_DURATION, duration_text)
                return None
            return Period(start, duration)

        diagnostics.add(DiagnosticCode.MALFORMED_PERIOD)
        return None

    def read_parameters(self, raw: Union[_Element, str, bytes]) -> Parameters:
        """
        Collect <parameters> of a property element.  Each parameter
        element holds its values in typed children, like <text>; a
        parameter with more than one value is read as a list.
        """
        element = _to_element(raw)
        params = Parameters()
        for container in _children(element, "parameters"):
            for param in container:
                name = _localname(param)
                if name is None:
                    continue
                values = [(x.text or "") for x in param if _localname(x) is not None]
                if values:
                    params[name.upper()] = values[0] if len(values) == 1 else values
        return params


XCAL = XCalFormat()
