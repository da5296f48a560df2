import datetime
from zoneinfo import ZoneInfo

import pytest
from lxml import etree
from periodcodec import DiagnosticCode
from periodcodec import Diagnostics
from periodcodec import Duration
from periodcodec import Period
from periodcodec.formats import FORMATS
from periodcodec.formats import XCAL
from periodcodec.lib.error import MissingXmlElements
from periodcodec.lib.namespace import ns

utc = datetime.timezone.utc
START = datetime.datetime(2015, 1, 1, tzinfo=utc)
END = datetime.datetime(2015, 1, 1, 1, tzinfo=utc)

XCAL_NS = "urn:ietf:params:xml:ns:icalendar-2.0"


def freebusy(*periods):
    return '<freebusy xmlns="%s">%s</freebusy>' % (XCAL_NS, "".join(periods))


def period(start=None, end=None, duration=None):
    ret = "<period>"
    if start is not None:
        ret += "<start>%s</start>" % start
    if end is not None:
        ret += "<end>%s</end>" % end
    if duration is not None:
        ret += "<duration>%s</duration>" % duration
    return ret + "</period>"


def test_registered():
    assert FORMATS["xml"] is XCAL


class TestWrite:
    def test_creates_property_element(self):
        element = XCAL.write([Period(START, END)])
        assert element.tag == ns("X", "freebusy")
        periods = element.findall(ns("X", "period"))
        assert len(periods) == 1
        assert periods[0].findtext(ns("X", "start")) == "2015-01-01T00:00:00Z"
        assert periods[0].findtext(ns("X", "end")) == "2015-01-01T01:00:00Z"
        assert periods[0].find(ns("X", "duration")) is None

    def test_duration(self):
        element = XCAL.write([Period(START, Duration(minutes=90))])
        p = element.find(ns("X", "period"))
        assert p.findtext(ns("X", "duration")) == "PT1H30M"
        assert p.find(ns("X", "end")) is None

    def test_open_period_has_start_only(self):
        element = XCAL.write([Period(START)])
        p = element.find(ns("X", "period"))
        assert [etree.QName(x).localname for x in p] == ["start"]

    def test_appends_to_given_element(self):
        element = etree.Element(ns("X", "freebusy"))
        ret = XCAL.write([Period(START, END), Period(START, END)], element)
        assert ret is element
        assert len(element) == 2

    def test_write_property_with_parameters(self):
        element = XCAL.write_property([Period(START, END)], {"FBTYPE": "BUSY"})
        assert element[0].tag == ns("X", "parameters")
        assert element.findtext(
            "%s/%s/%s" % (ns("X", "parameters"), ns("X", "fbtype"), ns("X", "text"))
        ) == "BUSY"
        assert element[1].tag == ns("X", "period")


class TestRead:
    def test_end(self):
        xml = freebusy(period("2015-01-01T00:00:00Z", end="2015-01-01T01:00:00Z"))
        assert XCAL.read(xml) == [Period(START, END)]

    def test_duration(self):
        xml = freebusy(period("2015-01-01T00:00:00Z", duration="PT1H"))
        assert XCAL.read(xml) == [Period(START, Duration(hours=1))]

    def test_bytes_and_element(self):
        xml = freebusy(period("2015-01-01T00:00:00Z", duration="PT1H"))
        assert XCAL.read(xml.encode("utf-8")) == XCAL.read(etree.fromstring(xml))

    def test_missing_start(self):
        diagnostics = Diagnostics()
        xml = freebusy(period(end="2015-01-01T01:00:00Z"))
        assert XCAL.read(xml, diagnostics=diagnostics) == []
        assert diagnostics.codes() == [DiagnosticCode.MISSING_START]

    def test_invalid_start(self):
        diagnostics = Diagnostics()
        xml = freebusy(period("yesterday", end="2015-01-01T01:00:00Z"))
        assert XCAL.read(xml, diagnostics=diagnostics) == []
        assert diagnostics.codes() == [DiagnosticCode.INVALID_START]
        assert diagnostics[0].context == "yesterday"

    def test_invalid_end(self):
        diagnostics = Diagnostics()
        xml = freebusy(period("2015-01-01T00:00:00Z", end="PT1H"))
        assert XCAL.read(xml, diagnostics=diagnostics) == []
        assert diagnostics.codes() == [DiagnosticCode.INVALID_END]

    def test_invalid_duration(self):
        diagnostics = Diagnostics()
        xml = freebusy(period("2015-01-01T00:00:00Z", duration="2015-01-01T01:00:00Z"))
        assert XCAL.read(xml, diagnostics=diagnostics) == []
        assert diagnostics.codes() == [DiagnosticCode.INVALID_DURATION]

    def test_incomplete_period(self):
        diagnostics = Diagnostics()
        xml = freebusy(period("2015-01-01T00:00:00Z"))
        assert XCAL.read(xml, diagnostics=diagnostics) == []
        assert diagnostics.codes() == [DiagnosticCode.MALFORMED_PERIOD]

    def test_end_wins_over_duration(self):
        xml = freebusy(
            period("2015-01-01T00:00:00Z", end="2015-01-01T01:00:00Z", duration="PT5H")
        )
        assert XCAL.read(xml) == [Period(START, END)]

    def test_broken_periods_do_not_affect_the_others(self):
        diagnostics = Diagnostics()
        xml = freebusy(
            period(end="2015-01-01T01:00:00Z"),
            period("2015-01-01T00:00:00Z", duration="PT1H"),
            period("2015-01-01T00:00:00Z"),
            period("2015-01-01T00:00:00Z", end="2015-01-01T01:00:00Z"),
        )
        assert XCAL.read(xml, diagnostics=diagnostics) == [
            Period(START, Duration(hours=1)),
            Period(START, END),
        ]
        assert diagnostics.codes() == [
            DiagnosticCode.MISSING_START,
            DiagnosticCode.MALFORMED_PERIOD,
        ]

    def test_no_period_elements_is_fatal(self):
        diagnostics = Diagnostics()
        with pytest.raises(MissingXmlElements) as excinfo:
            XCAL.read(freebusy(), diagnostics=diagnostics)
        assert excinfo.value.elements == ("period",)
        assert "period" in str(excinfo.value)
        assert not diagnostics

    def test_other_children_only_is_fatal(self):
        xml = '<freebusy xmlns="%s"><parameters/><text>x</text></freebusy>' % XCAL_NS
        with pytest.raises(MissingXmlElements):
            XCAL.read(xml)

    def test_floating_uses_timezone(self):
        xml = freebusy(period("2015-01-01T12:00:00", duration="PT1H"))
        assert XCAL.read(xml, "Europe/Oslo") == [
            Period(datetime.datetime(2015, 1, 1, 11, tzinfo=utc), Duration(hours=1))
        ]

    def test_read_parameters(self):
        xml = (
            '<freebusy xmlns="%s"><parameters><fbtype><text>FREE</text></fbtype>'
            "<tzid><text>Europe/Oslo</text></tzid></parameters>%s</freebusy>"
            % (XCAL_NS, period("2015-01-01T00:00:00Z", duration="PT1H"))
        )
        params = XCAL.read_parameters(xml)
        assert params["FBTYPE"] == "FREE"
        assert params["TZID"] == "Europe/Oslo"


class TestRoundTrip:
    def test_end_and_duration(self):
        periods = [Period(START, END), Period(START, Duration(weeks=2))]
        diagnostics = Diagnostics()
        assert XCAL.read(XCAL.write(periods), diagnostics=diagnostics) == periods
        assert not diagnostics

    def test_other_zone(self):
        oslo = ZoneInfo("Europe/Oslo")
        start = datetime.datetime(2015, 6, 1, 12, tzinfo=oslo)
        periods = [
            Period(start, datetime.datetime(2015, 6, 1, 13, 30, tzinfo=oslo)),
            Period(start, Duration(minutes=90)),
        ]
        element = XCAL.write(periods)
        assert [x.text for x in element.iter(ns("X", "start"))] == [
            "2015-06-01T10:00:00Z",
            "2015-06-01T10:00:00Z",
        ]
        diagnostics = Diagnostics()
        assert XCAL.read(element, diagnostics=diagnostics) == periods
        assert not diagnostics

    def test_serialized(self):
        periods = [Period(START, END), Period(START, Duration(hours=1))]
        text = etree.tostring(XCAL.write(periods))
        assert XCAL.read(text) == periods

    def test_open_period_is_lost(self):
        diagnostics = Diagnostics()
        periods = [Period(START), Period(START, END)]
        assert XCAL.read(XCAL.write(periods), diagnostics=diagnostics) == [
            Period(START, END)
        ]
        assert diagnostics.codes() == [DiagnosticCode.MALFORMED_PERIOD]
