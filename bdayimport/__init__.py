"""
Birthday Import Package
Google Contacts to Google Calendar birthday import
"""

__version__ = "1.0.0"
__description__ = "Import contact birthdays into a dedicated Google Calendar"

from .birthdays import BirthdayRecord, PartialDate, extract_birthdays, normalize_date
from .calendar_client import CalendarClient, CalendarRef, ImportReport, import_birthdays, provision_calendar
from .config import CalendarSettings, setup_logging
from .people_client import PeopleClient
from .sync import SyncOrchestrator, SyncResult, SyncState

__all__ = [
    'BirthdayRecord',
    'PartialDate',
    'extract_birthdays',
    'normalize_date',
    'CalendarClient',
    'CalendarRef',
    'ImportReport',
    'import_birthdays',
    'provision_calendar',
    'CalendarSettings',
    'setup_logging',
    'PeopleClient',
    'SyncOrchestrator',
    'SyncResult',
    'SyncState',
]
