"""
Birthday extraction from People API connections
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

# The calendar sink needs a year on every all-day date
SENTINEL_YEAR = 1970
UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class PartialDate:
    """Day and month of a birthday, year 0 when unknown"""

    day: int
    month: int
    year: int = 0

    @classmethod
    def from_api(cls, date: Dict) -> "PartialDate":
        """Build from a People API date object, which omits zero fields"""
        return cls(
            day=int(date.get('day') or 0),
            month=int(date.get('month') or 0),
            year=int(date.get('year') or 0),
        )

    def canonical(self) -> str:
        return normalize_date(self.day, self.month, self.year)


@dataclass(frozen=True)
class BirthdayRecord:
    """A contact's display name and birthday"""

    display_name: str
    date: PartialDate
    canonical_date: str


def normalize_date(day: int, month: int, year: int = 0) -> str:
    """Format a partial date as YYYY-MM-DD, using SENTINEL_YEAR when the year is 0"""
    if not 1 <= day <= 31:
        raise ValueError(f"day out of range: {day}")
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    if not 0 <= year <= 9999:
        raise ValueError(f"year out of range: {year}")

    if year == 0:
        year = SENTINEL_YEAR
    return f"{year:04d}-{month:02d}-{day:02d}"


def _display_name(person: Dict) -> str:
    names = person.get('names') or []
    if not names:
        return UNKNOWN_NAME
    return (names[0].get('displayName') or '').strip() or UNKNOWN_NAME


def _first_birthday_date(person: Dict) -> Optional[Dict]:
    birthdays = person.get('birthdays') or []
    if not birthdays:
        return None
    return birthdays[0].get('date')


def extract_birthdays(connections: Iterable[Dict]) -> Tuple[BirthdayRecord, ...]:
    """Build one BirthdayRecord per contact that has a dated birthday, in input order"""
    records: List[BirthdayRecord] = []

    for person in connections:
        date = _first_birthday_date(person)
        if date is None:
            continue

        name = _display_name(person)
        try:
            partial = PartialDate.from_api(date)
            canonical = partial.canonical()
        except ValueError as e:
            logger.debug(f"Skipping birthday for {name} ({person.get('resourceName', 'no resource')}): {e}")
            continue

        logger.info(f"Found birthday for {name} - on {partial.day}/{partial.month}/{partial.year}")
        records.append(BirthdayRecord(display_name=name, date=partial, canonical_date=canonical))

    return tuple(records)
