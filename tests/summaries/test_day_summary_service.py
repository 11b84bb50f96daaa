from __future__ import annotations

from datetime import date, datetime, time

import pytest

from worktime.core.enums import EventKind
from worktime.core.exceptions import ValidationError
from worktime.events.model import TimeEvent
from worktime.events.service import EventService
from worktime.summaries.calculator.first_last_calculator import FirstInLastOutCalculator
from worktime.summaries.service import DaySummaryService
from worktime.templates.model import TimeTemplate
from worktime.templates.service import TemplateRegistry


class InMemoryEvents:
    def __init__(self, events=None):
        self._events = list(events or [])

    def list_all(self):
        return tuple(self._events)

    def append(self, event):
        self._events.append(event)

    def replace_all(self, events):
        self._events = list(events)


class InMemoryTemplates:
    def __init__(self, templates=None):
        self._items = list(templates or [])

    def list_all(self):
        return tuple(self._items)

    def get_by_id(self, template_id):
        return next((t for t in self._items if t.template_id == template_id), None)

    def upsert(self, template):
        self._items = [t for t in self._items if t.template_id != template.template_id] + [template]


def _ev(y, m, d, hh, mm, kind, generated=False):
    return TimeEvent(datetime(y, m, d, hh, mm), kind, generated)


def _service(events, templates=()):
    return DaySummaryService(EventService(InMemoryEvents(events)), TemplateRegistry(InMemoryTemplates(templates)))


WEEKDAYS_8H = TimeTemplate(template_id="std", start_date=date(2024, 1, 1), weekday_hours=(8, 8, 8, 8, 8, 0, 0))


def test_one_summary_per_day_including_empty_days():
    svc = _service([], [WEEKDAYS_8H])

    days = svc.summarize(date(2024, 1, 1), date(2024, 1, 7))

    assert [s.date for s in days] == [date(2024, 1, d) for d in range(1, 8)]
    assert all(s.worked_hours is None and s.delta_hours is None for s in days)
    assert [s.standard_hours for s in days] == [8, 8, 8, 8, 8, 0, 0]


def test_worked_and_delta_for_a_full_day():
    svc = _service(
        [_ev(2024, 1, 2, 9, 0, EventKind.OPEN), _ev(2024, 1, 2, 17, 30, EventKind.CLOSE)],
        [WEEKDAYS_8H],
    )

    (s,) = svc.summarize(date(2024, 1, 2), date(2024, 1, 2))

    assert s.open_time == time(9, 0)
    assert s.close_time == time(17, 30)
    assert s.worked_hours == pytest.approx(8.5)
    assert s.delta_hours == pytest.approx(0.5)


def test_open_without_close_has_no_worked_hours():
    svc = _service([_ev(2024, 1, 2, 9, 0, EventKind.OPEN)], [WEEKDAYS_8H])

    (s,) = svc.summarize(date(2024, 1, 2), date(2024, 1, 2))

    assert s.open_time == time(9, 0)
    assert s.close_time is None
    assert s.worked_hours is None
    assert s.standard_hours == 8


def test_close_before_open_has_no_worked_hours():
    svc = _service([_ev(2024, 1, 2, 8, 0, EventKind.CLOSE), _ev(2024, 1, 2, 9, 0, EventKind.OPEN)])

    (s,) = svc.summarize(date(2024, 1, 2), date(2024, 1, 2))

    assert s.worked_hours is None
    assert s.delta_hours is None


def test_several_shifts_collapse_to_first_open_last_close():
    svc = _service(
        [
            _ev(2024, 1, 2, 13, 0, EventKind.OPEN),
            _ev(2024, 1, 2, 17, 0, EventKind.CLOSE),
            _ev(2024, 1, 2, 8, 0, EventKind.OPEN),
            _ev(2024, 1, 2, 12, 0, EventKind.CLOSE),
        ]
    )

    (s,) = svc.summarize(date(2024, 1, 2), date(2024, 1, 2))

    assert (s.open_time, s.close_time) == (time(8, 0), time(17, 0))
    assert s.worked_hours == pytest.approx(9.0)


def test_generated_events_count_as_worked_time():
    svc = _service(
        [_ev(2024, 1, 3, 9, 0, EventKind.OPEN, True), _ev(2024, 1, 3, 17, 0, EventKind.CLOSE, True)],
        [WEEKDAYS_8H],
    )

    (s,) = svc.summarize(date(2024, 1, 3), date(2024, 1, 3))

    assert s.delta_hours == pytest.approx(0.0)


def test_weekend_work_is_all_overtime():
    svc = _service(
        [_ev(2024, 1, 6, 10, 0, EventKind.OPEN), _ev(2024, 1, 6, 12, 0, EventKind.CLOSE)],
        [WEEKDAYS_8H],
    )

    (s,) = svc.summarize(date(2024, 1, 6), date(2024, 1, 6))

    assert s.standard_hours == 0
    assert s.delta_hours == pytest.approx(2.0)


def test_totals_only_count_worked_days_for_delta():
    svc = _service(
        [_ev(2024, 1, 1, 9, 0, EventKind.OPEN), _ev(2024, 1, 1, 16, 0, EventKind.CLOSE)],
        [WEEKDAYS_8H],
    )

    totals = svc.totals(svc.summarize(date(2024, 1, 1), date(2024, 1, 2)))

    assert totals.worked_hours == pytest.approx(7.0)
    assert totals.standard_hours == pytest.approx(16.0)
    assert totals.delta_hours == pytest.approx(-1.0)
    assert totals.days_with_work == 1


def test_inverted_range_is_rejected():
    with pytest.raises(ValidationError):
        _service([]).summarize(date(2024, 1, 2), date(2024, 1, 1))


def test_calculator_ignores_generated_flag():
    span = FirstInLastOutCalculator().worked_span(
        [_ev(2024, 1, 2, 9, 0, EventKind.OPEN, True), _ev(2024, 1, 2, 10, 30, EventKind.CLOSE)]
    )

    assert span.worked_hours == pytest.approx(1.5)


def test_no_template_means_zero_standard_hours():
    svc = _service([_ev(2024, 1, 2, 9, 0, EventKind.OPEN), _ev(2024, 1, 2, 17, 0, EventKind.CLOSE)])

    (s,) = svc.summarize(date(2024, 1, 2), date(2024, 1, 2))

    assert s.worked_hours == pytest.approx(8.0)
    assert s.standard_hours == 0
    assert s.delta_hours == pytest.approx(8.0)
