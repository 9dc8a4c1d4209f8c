"""
Import run: fetch contacts, extract birthdays, create calendar and events
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .birthdays import BirthdayRecord, extract_birthdays
from .calendar_client import CalendarClient, CalendarRef, ImportReport, import_birthdays, provision_calendar
from .config import CalendarSettings
from .errors import FatalSetupError
from .people_client import PeopleClient

logger = logging.getLogger(__name__)


class SyncState(Enum):
    START = "start"
    FETCHING = "fetching"
    EXTRACTED = "extracted"
    DRY_RUN_STOP = "dry_run_stop"
    PROVISIONING = "provisioning"
    IMPORTING = "importing"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class SyncResult:
    """Final state of one import run"""

    state: SyncState
    records: Tuple[BirthdayRecord, ...] = ()
    calendar: Optional[CalendarRef] = None
    report: Optional[ImportReport] = None
    error: Optional[FatalSetupError] = None

    @property
    def ok(self) -> bool:
        return self.state is not SyncState.FAILED


class SyncOrchestrator:
    """Runs one birthday import from contacts into a new calendar"""

    def __init__(self, people: PeopleClient, calendar: CalendarClient,
                 settings: Optional[CalendarSettings] = None, dry_run: bool = False):
        self.people = people
        self.calendar = calendar
        self.settings = settings or CalendarSettings()
        self.dry_run = dry_run
        self.state = SyncState.START

    def _enter(self, state: SyncState):
        logger.debug(f"Import state: {self.state.value} -> {state.value}")
        self.state = state

    def _fail(self, error: FatalSetupError, **partial) -> SyncResult:
        logger.error(f"Import failed during {error}")
        self._enter(SyncState.FAILED)
        return SyncResult(state=self.state, error=error, **partial)

    def run(self) -> SyncResult:
        """Run the import and return its final state"""
        self._enter(SyncState.FETCHING)
        logger.info("Fetching contacts with birthdays...")
        try:
            connections = self.people.get_connections()
        except FatalSetupError as e:
            return self._fail(e)

        records = extract_birthdays(connections)
        self._enter(SyncState.EXTRACTED)
        self._report_records(records)

        if self.dry_run:
            logger.info("Dry run: no calendar or events will be created")
            self._enter(SyncState.DRY_RUN_STOP)
            return SyncResult(state=self.state, records=records)

        self._enter(SyncState.PROVISIONING)
        try:
            calendar = provision_calendar(self.calendar, self.settings)
        except FatalSetupError as e:
            return self._fail(e, records=records)

        self._enter(SyncState.IMPORTING)
        report = import_birthdays(self.calendar, calendar, records, self.settings.timezone)

        self._enter(SyncState.DONE)
        result = SyncResult(state=self.state, records=records, calendar=calendar, report=report)
        self._report_summary(result)
        return result

    def _report_records(self, records: Tuple[BirthdayRecord, ...]):
        """Print the extracted birthdays"""
        logger.info(f"Found {len(records)} contacts with birthdays")
        print(f"Birthdays found: {len(records)}")
        for record in records:
            print(f"  - {record.display_name} ({record.canonical_date})")

    def _report_summary(self, result: SyncResult):
        report = result.report
        logger.info(f"Calendar: {result.calendar.summary} ({result.calendar.id})")
        logger.info(f"Events created: {report.succeeded}, failed: {report.failed}")
        for failure in report.failures:
            logger.warning(f"  - {failure.name}: {failure.reason}")
