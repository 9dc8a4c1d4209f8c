"""
Calendar API client for creating the birthday calendar and its events
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .birthdays import BirthdayRecord
from .config import CalendarSettings, DEFAULT_REQUEST_TIMEOUT, DEFAULT_TIMEZONE
from .errors import CalendarAPIError, ProvisionError
from .google_services import TRANSPORT_ERRORS, build_service, http_status

logger = logging.getLogger(__name__)

EVENT_DESCRIPTION = "Birthday"
RECURRENCE_COUNT = 100
YEARLY_RULE = f"RRULE:FREQ=YEARLY;COUNT={RECURRENCE_COUNT}"


@dataclass(frozen=True)
class CalendarRef:
    id: str
    summary: str


@dataclass(frozen=True)
class ImportEvent:
    """A yearly recurring all-day event for one birthday"""

    title: str
    date: str
    description: str = EVENT_DESCRIPTION
    timezone: str = DEFAULT_TIMEZONE
    recurrence: Tuple[str, ...] = (YEARLY_RULE,)

    def to_body(self) -> Dict:
        """Calendar API event resource"""
        return {
            'summary': self.title,
            'description': self.description,
            'start': {'date': self.date, 'timeZone': self.timezone},
            'end': {'date': self.date, 'timeZone': self.timezone},
            'recurrence': list(self.recurrence),
        }


@dataclass(frozen=True)
class ImportFailure:
    name: str
    reason: str


@dataclass(frozen=True)
class ImportReport:
    """Outcome of submitting one event per birthday"""

    attempted: int = 0
    succeeded: int = 0
    failures: Tuple[ImportFailure, ...] = field(default_factory=tuple)

    @property
    def failed(self) -> int:
        return len(self.failures)


class CalendarClient:
    """Client for writing calendars and events to Google Calendar"""

    def __init__(self, token: str, timeout: int = DEFAULT_REQUEST_TIMEOUT, service=None):
        self.service = service or build_service("calendar", "v3", token, timeout)

    def create_calendar(self, summary: str, description: str, timezone: str = DEFAULT_TIMEZONE) -> Dict:
        """Create a new secondary calendar"""
        body = {
            'summary': summary,
            'description': description,
            'timeZone': timezone,
        }
        return self._execute(self.service.calendars().insert(body=body))

    def create_event(self, calendar_id: str, body: Dict) -> Dict:
        """Insert an event into the given calendar"""
        return self._execute(self.service.events().insert(calendarId=calendar_id, body=body))

    def _execute(self, request) -> Dict:
        try:
            return request.execute()
        except TRANSPORT_ERRORS as e:
            raise CalendarAPIError(str(e), status=http_status(e)) from e


def provision_calendar(client: CalendarClient, settings: CalendarSettings) -> CalendarRef:
    """Create a fresh calendar for this run; existing calendars are never reused"""
    logger.info("Creating a new calendar for birthdays.")
    try:
        created = client.create_calendar(settings.summary, settings.description, settings.timezone)
    except CalendarAPIError as e:
        raise ProvisionError(f"Unable to create calendar: {e}") from e

    calendar_id = created.get('id')
    if not calendar_id:
        raise ProvisionError("Unable to create calendar: response has no calendar id")

    calendar = CalendarRef(id=calendar_id, summary=created.get('summary', settings.summary))
    logger.info(f"Created calendar: {calendar.summary}")
    return calendar


def build_event(record: BirthdayRecord, timezone: str = DEFAULT_TIMEZONE) -> ImportEvent:
    return ImportEvent(title=record.display_name, date=record.canonical_date, timezone=timezone)


def import_birthdays(client: CalendarClient, calendar: CalendarRef,
                     records: Iterable[BirthdayRecord],
                     timezone: str = DEFAULT_TIMEZONE) -> ImportReport:
    """Submit one event per record in order; a failed event is recorded and skipped"""
    attempted = 0
    succeeded = 0
    failures: List[ImportFailure] = []

    for record in records:
        attempted += 1
        event = build_event(record, timezone)
        try:
            client.create_event(calendar.id, event.to_body())
        except CalendarAPIError as e:
            logger.warning(f"Unable to create event for {record.display_name}: {e}")
            failures.append(ImportFailure(name=record.display_name, reason=str(e)))
            continue
        succeeded += 1
        logger.info(f"Created event for {record.display_name}")

    return ImportReport(attempted=attempted, succeeded=succeeded, failures=tuple(failures))
