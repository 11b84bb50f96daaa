from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from worktime.core.enums import EventKind
from worktime.core.exceptions import ValidationError
from worktime.events.model import TimeEvent
from worktime.events.service import EventService
from worktime.shifts.model import Shift
from worktime.shifts.service import ShiftService


class InMemoryEvents:
    def __init__(self, events=None):
        self._events = list(events or [])

    def list_all(self):
        return tuple(self._events)

    def append(self, event):
        self._events.append(event)

    def replace_all(self, events):
        self._events = list(events)


DAY = date(2024, 1, 2)


@pytest.fixture
def service():
    events = [
        TimeEvent(datetime(2024, 1, 2, 8, 58, 30), EventKind.OPEN),
        TimeEvent(datetime(2024, 1, 2, 17, 2), EventKind.CLOSE),
        TimeEvent(datetime(2024, 1, 2, 9, 0), EventKind.OPEN, generated=True),
    ]
    return ShiftService(EventService(InMemoryEvents(events)))


def test_times_matching_real_events_are_not_overrides(service):
    shift = service.build(for_date=DAY, start_text="08:58", end_text="17:02", lunch_text="00:30")

    assert not shift.is_manual
    assert shift.lunch_break == timedelta(minutes=30)
    assert shift.worked_hours == pytest.approx(7 + 34 / 60)


def test_generated_event_times_do_not_count_as_recorded(service):
    shift = service.build(for_date=DAY, start_text="09:00", end_text="17:02")

    assert shift.manual_start_override
    assert not shift.manual_end_override
    assert shift.is_manual


def test_blank_or_invalid_lunch_becomes_zero(service):
    blank = service.build(for_date=DAY, start_text="09:00", end_text="17:00", lunch_text="")
    bad = service.build(for_date=DAY, start_text="09:00", end_text="17:00", lunch_text="lunch")

    assert blank.lunch_break == timedelta(0)
    assert bad.lunch_break == timedelta(0)
    assert bad.lunch_display == ""


@pytest.mark.parametrize(
    "start, end, message",
    [
        ("9am", "17:00", "Invalid start time. Use HH:MM format."),
        ("09:00", "", "Invalid end time. Use HH:MM format."),
        ("17:00", "09:00", "End time must be after start time."),
        ("09:00", "09:00", "End time must be after start time."),
    ],
)
def test_invalid_input_messages(service, start, end, message):
    with pytest.raises(ValidationError) as exc:
        service.build(for_date=DAY, start_text=start, end_text=end)
    assert str(exc.value) == message


def test_lunch_longer_than_span_clamps_to_zero():
    shift = Shift(date=DAY, start=time(9, 0), end=time(9, 30), lunch_break=timedelta(hours=1))

    assert shift.worked_hours == 0.0


def test_display_strings():
    shift = Shift(
        date=DAY,
        start=time(8, 0),
        end=time(16, 45),
        lunch_break=timedelta(minutes=45),
        day_mode="Home office",
        description="Release prep",
    )

    assert shift.display == "08:00 - 16:45 (8.00h) Release prep"
    assert shift.lunch_display == "Lunch: 00:45"
    assert shift.day_mode_display == "Mode: Home office"
    assert Shift(date=DAY, start=time(8, 0), end=time(9, 0)).display == "08:00 - 09:00 (1.00h)"
    assert Shift(date=DAY, start=time(8, 0), end=time(9, 0)).day_mode_display == ""
