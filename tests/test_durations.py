from datetime import timedelta

import icalendar
import pytest
from periodcodec.lib.error import InvalidDuration
from periodcodec.values import durations
from periodcodec.values.durations import Duration


@pytest.mark.parametrize(
    "text,expected",
    [
        ("PT1H", Duration(hours=1)),
        ("P2W", Duration(weeks=2)),
        ("-P2W", Duration(negative=True, weeks=2)),
        ("P1D", Duration(days=1)),
        ("P1DT2H3M4S", Duration(days=1, hours=2, minutes=3, seconds=4)),
        ("-P1DT2H", Duration(negative=True, days=1, hours=2)),
        ("+PT15M", Duration(minutes=15)),
        ("PT1H1S", Duration(hours=1, seconds=1)),
        ("PT0S", Duration()),
        ("P0D", Duration()),
    ],
)
def test_parse(text, expected):
    assert durations.parse(text) == expected
    assert durations.try_parse(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "P",
        "PT",
        "P1DT",
        "P1W2D",
        "P1WT1H",
        "1H",
        "P1H",
        "PT1D",
        "P1.5D",
        "PT1M1H",
        "20150101T000000Z",
        "--PT1H",
    ],
)
def test_parse_invalid(text):
    with pytest.raises(InvalidDuration):
        durations.parse(text)
    assert durations.try_parse(text) is None


def test_invalid_duration_is_value_error():
    with pytest.raises(ValueError):
        durations.parse("P1Y")


@pytest.mark.parametrize(
    "duration,text",
    [
        (Duration(hours=1), "PT1H"),
        (Duration(days=1, hours=2), "P1DT2H"),
        (Duration(negative=True, minutes=15), "-PT15M"),
        (Duration(weeks=3), "P3W"),
        (Duration(days=2), "P2D"),
        (Duration(hours=1, seconds=30), "PT1H30S"),
        (Duration(), "PT0S"),
    ],
)
def test_write(duration, text):
    assert durations.write(duration) == text
    assert str(duration) == text


def test_write_is_understood_by_icalendar():
    for duration in (
        Duration(days=1, hours=2, minutes=3, seconds=4),
        Duration(negative=True, weeks=2),
        Duration(minutes=90),
    ):
        assert (
            icalendar.vDuration.from_ical(durations.write(duration))
            == duration.to_timedelta()
        )


def test_write_is_canonical_not_verbatim():
    assert durations.write(durations.parse("+P0DT1H")) == "PT1H"


def test_from_timedelta():
    assert Duration.from_timedelta(timedelta(hours=1, minutes=30)) == Duration(
        hours=1, minutes=30
    )
    assert Duration.from_timedelta(timedelta(days=14)) == Duration(weeks=2)
    assert Duration.from_timedelta(timedelta(days=15)) == Duration(days=15)
    assert Duration.from_timedelta(timedelta(seconds=-900)) == Duration(
        negative=True, minutes=15
    )
    assert Duration.from_timedelta(timedelta(0)) == Duration()


def test_to_timedelta():
    assert Duration(weeks=1).to_timedelta() == timedelta(days=7)
    assert Duration(negative=True, days=1, seconds=1).to_timedelta() == -timedelta(
        days=1, seconds=1
    )


def test_weeks_exclude_other_fields():
    with pytest.raises(ValueError):
        Duration(weeks=1, days=1)
    with pytest.raises(ValueError):
        Duration(weeks=1, hours=1)


def test_negative_magnitudes_rejected():
    with pytest.raises(ValueError):
        Duration(hours=-1)


def test_fields_are_carried():
    assert Duration(minutes=90) == Duration(hours=1, minutes=30)
    assert Duration(seconds=3600) == Duration(hours=1)
    assert Duration(hours=25) == Duration(days=1, hours=1)
    assert Duration(days=14) != Duration(weeks=2)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("PT90M", "PT1H30M"),
        ("PT3600S", "PT1H"),
        ("PT25H", "P1DT1H"),
        ("-PT86400S", "-P1D"),
        ("P1DT24H", "P2D"),
        ("P14D", "P14D"),
    ],
)
def test_write_carries_overflow(text, expected):
    assert durations.write(durations.parse(text)) == expected


def test_parse_rejects_non_ascii_digits():
    with pytest.raises(InvalidDuration):
        durations.parse("PT１H")
    assert durations.try_parse("P２W") is None
