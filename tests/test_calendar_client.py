"""Tests for calendar provisioning and event import."""

import pytest

from bdayimport.birthdays import BirthdayRecord, PartialDate
from bdayimport.calendar_client import (
    CalendarClient,
    CalendarRef,
    ImportEvent,
    build_event,
    import_birthdays,
    provision_calendar,
)
from bdayimport.config import CalendarSettings
from bdayimport.errors import CalendarAPIError, ProvisionError
from fakes import FakeService, http_error


def record(name, day, month, year=0):
    date = PartialDate(day, month, year)
    return BirthdayRecord(name, date, date.canonical())


class FakeCalendarClient:
    """Calendar client that fails for the configured event titles."""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.events = []

    def create_event(self, calendar_id, body):
        self.events.append((calendar_id, body))
        if body['summary'] in self.failing:
            raise CalendarAPIError("HTTP 400: invalid date", status=400)
        return {'id': f"evt{len(self.events)}"}


class TestCalendarClient:
    def test_create_calendar(self):
        service = FakeService({'id': 'abc@group.calendar.google.com', 'summary': 'B'})
        client = CalendarClient("tok", service=service)

        assert client.create_calendar("B", "desc", "UTC")['id'] == 'abc@group.calendar.google.com'
        assert service.calls == [
            ('calendars.insert', {'body': {'summary': 'B', 'description': 'desc', 'timeZone': 'UTC'}}),
        ]

    def test_create_event(self):
        service = FakeService({'id': 'e1'})
        CalendarClient("tok", service=service).create_event('abc@group.calendar.google.com', {'summary': 'x'})
        assert service.calls == [
            ('events.insert', {'calendarId': 'abc@group.calendar.google.com', 'body': {'summary': 'x'}}),
        ]

    def test_http_error_carries_status(self):
        service = FakeService(http_error(403, 'quota exceeded'))
        with pytest.raises(CalendarAPIError) as excinfo:
            CalendarClient("tok", service=service).create_event('cal', {})
        assert excinfo.value.status == 403
        assert 'quota exceeded' in str(excinfo.value)

    def test_transport_error(self, connection_error):
        with pytest.raises(CalendarAPIError) as excinfo:
            CalendarClient("tok", service=FakeService(connection_error)).create_event('cal', {})
        assert excinfo.value.status is None


class TestProvisionCalendar:
    def test_always_creates(self):
        service = FakeService({'id': 'cal1', 'summary': 'Family birthdays'})
        settings = CalendarSettings(summary='Family birthdays', description='From contacts')

        calendar = provision_calendar(CalendarClient("tok", service=service), settings)

        assert calendar == CalendarRef(id='cal1', summary='Family birthdays')
        assert len(service.calls) == 1
        assert service.calls[0][1]['body']['timeZone'] == 'UTC'

    def test_rejection_is_fatal(self):
        service = FakeService(http_error(401, 'invalid credentials'))
        with pytest.raises(ProvisionError) as excinfo:
            provision_calendar(CalendarClient("tok", service=service), CalendarSettings())
        assert str(excinfo.value).startswith("provision: Unable to create calendar")
        assert 'invalid credentials' in str(excinfo.value)

    def test_missing_id_is_fatal(self):
        with pytest.raises(ProvisionError):
            provision_calendar(CalendarClient("tok", service=FakeService({'summary': 'x'})), CalendarSettings())


class TestBuildEvent:
    def test_all_day_yearly_event(self):
        event = build_event(record("Alice", 5, 3, 1990))
        assert event == ImportEvent(title="Alice", date="1990-03-05")
        assert event.to_body() == {
            'summary': 'Alice',
            'description': 'Birthday',
            'start': {'date': '1990-03-05', 'timeZone': 'UTC'},
            'end': {'date': '1990-03-05', 'timeZone': 'UTC'},
            'recurrence': ['RRULE:FREQ=YEARLY;COUNT=100'],
        }


class TestImportBirthdays:
    def test_all_succeed(self):
        client = FakeCalendarClient()
        records = [record("Alice", 5, 3, 1990), record("Bob", 12, 7)]

        report = import_birthdays(client, CalendarRef('cal1', 'B'), records)

        assert (report.attempted, report.succeeded, report.failed) == (2, 2, 0)
        assert [body['start']['date'] for _, body in client.events] == ["1990-03-05", "1970-07-12"]
        assert all(cal_id == 'cal1' for cal_id, _ in client.events)

    def test_failures_do_not_stop_the_batch(self):
        client = FakeCalendarClient(failing={"B", "D"})
        records = [record(name, 1, 1) for name in "ABCDE"]

        report = import_birthdays(client, CalendarRef('cal1', 'B'), records)

        assert [body['summary'] for _, body in client.events] == list("ABCDE")
        assert (report.attempted, report.succeeded, report.failed) == (5, 3, 2)
        assert [f.name for f in report.failures] == ["B", "D"]
        assert all("invalid date" in f.reason for f in report.failures)

    def test_no_records(self):
        report = import_birthdays(FakeCalendarClient(), CalendarRef('cal1', 'B'), [])
        assert (report.attempted, report.succeeded, report.failed) == (0, 0, 0)
