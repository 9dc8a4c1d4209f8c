"""
Configuration management and logging setup
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from .errors import MissingTokenError

DEFAULT_CALENDAR_NAME = "Birthdays from Contacts"
DEFAULT_CALENDAR_DESCRIPTION = "Calendar containing birthdays imported from Google Contacts"
DEFAULT_TIMEZONE = "UTC"

MAX_PAGE_SIZE = 1000
DEFAULT_REQUEST_TIMEOUT = 10


@dataclass(frozen=True)
class CalendarSettings:
    """Name and timezone of the calendar created for each import"""

    summary: str = DEFAULT_CALENDAR_NAME
    description: str = DEFAULT_CALENDAR_DESCRIPTION
    timezone: str = DEFAULT_TIMEZONE


def setup_logging():
    """Setup logging configuration from environment variables"""
    log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
    log_file = os.getenv('LOG_FILE', '')
    debug_mode = os.getenv('DEBUG', 'false').lower() == 'true'

    if debug_mode:
        log_level = 'DEBUG'

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    simple_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s'
    )

    handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(simple_formatter)
    handlers.append(console_handler)

    if log_file:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(detailed_formatter)
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not create log file: {e}")

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        handlers=handlers,
        force=True
    )

    # Suppress noisy third-party loggers unless in debug mode
    if not debug_mode:
        logging.getLogger('googleapiclient').setLevel(logging.WARNING)
        logging.getLogger('google_auth_httplib2').setLevel(logging.WARNING)


def validate_token(token: Optional[str]) -> str:
    """Return the access token, falling back to GOOGLE_ACCESS_TOKEN"""
    token = (token or os.getenv('GOOGLE_ACCESS_TOKEN', '')).strip()
    if not token:
        raise MissingTokenError("Access token is required (use --token or GOOGLE_ACCESS_TOKEN)")
    return token


def _int_from_env(name: str, default: int) -> int:
    logger = logging.getLogger(__name__)
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw}, using default: {default}")
        return default


def get_calendar_settings() -> CalendarSettings:
    """Get target calendar settings from environment"""
    return CalendarSettings(
        summary=os.getenv('BIRTHDAY_CALENDAR_NAME', DEFAULT_CALENDAR_NAME),
        description=os.getenv('BIRTHDAY_CALENDAR_DESCRIPTION', DEFAULT_CALENDAR_DESCRIPTION)
    )


def get_import_config():
    """Get contact fetch and HTTP configuration from environment"""
    page_size = _int_from_env('CONTACTS_PAGE_SIZE', MAX_PAGE_SIZE)
    return {
        'page_size': max(1, min(page_size, MAX_PAGE_SIZE)),
        'request_timeout': _int_from_env('REQUEST_TIMEOUT', DEFAULT_REQUEST_TIMEOUT),
    }
