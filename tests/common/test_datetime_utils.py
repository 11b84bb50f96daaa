from __future__ import annotations

from datetime import date, time, timedelta

import pytest

from worktime.common.datetime_utils import (
    format_duration,
    format_hours_hhmm,
    iter_days,
    parse_duration,
    parse_iso_date,
    parse_time_of_day,
)
from worktime.common.validators import parse_hours, parse_weekday_hours
from worktime.core.exceptions import ValidationError


def test_parse_time_of_day_accepts_seconds():
    assert parse_time_of_day("08:05") == time(8, 5)
    assert parse_time_of_day(" 17:30:15 ") == time(17, 30, 15)


@pytest.mark.parametrize("value", ["", "8", "25:00", "12:60", "noon"])
def test_parse_time_of_day_rejects(value):
    with pytest.raises(ValidationError):
        parse_time_of_day(value)


def test_parse_duration():
    assert parse_duration("01:30") == timedelta(hours=1, minutes=30)
    assert parse_duration("00:00") == timedelta(0)
    with pytest.raises(ValidationError):
        parse_duration("00:75")


def test_parse_iso_date():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)
    with pytest.raises(ValidationError):
        parse_iso_date("2023-02-29")


def test_iter_days_is_inclusive_and_empty_when_inverted():
    assert list(iter_days(date(2024, 1, 30), date(2024, 2, 1))) == [
        date(2024, 1, 30),
        date(2024, 1, 31),
        date(2024, 2, 1),
    ]
    assert list(iter_days(date(2024, 1, 2), date(2024, 1, 1))) == []


@pytest.mark.parametrize(
    "hours, expected",
    [(0.0, "+00:00"), (1.5, "+01:30"), (-0.25, "-00:15"), (-10.0, "-10:00"), (7.999, "+08:00")],
)
def test_format_hours_hhmm(hours, expected):
    assert format_hours_hhmm(hours) == expected


def test_format_duration():
    assert format_duration(timedelta(minutes=45)) == "00:45"
    assert format_duration(timedelta(hours=1, minutes=5)) == "01:05"


def test_parse_hours_blank_means_zero():
    assert parse_hours("", "Mon") == 0.0
    assert parse_hours(None, "Mon") == 0.0
    assert parse_hours("7,5", "Mon") == 7.5
    with pytest.raises(ValidationError):
        parse_hours("-1", "Mon")


def test_parse_weekday_hours_needs_seven_values():
    assert parse_weekday_hours(["8"] * 5 + ["", ""]) == (8.0,) * 5 + (0.0, 0.0)
    with pytest.raises(ValidationError):
        parse_weekday_hours(["8"] * 6)
