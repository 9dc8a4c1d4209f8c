#!/usr/bin/env python3
"""
Google Contacts to Google Calendar Birthday Import
Main entry point with argument parsing
"""

import os
import sys
import logging
import argparse
from datetime import datetime

from . import __version__
from .calendar_client import CalendarClient
from .config import get_calendar_settings, get_import_config, setup_logging, validate_token
from .errors import FatalSetupError
from .people_client import PeopleClient
from .sync import SyncOrchestrator

BANNER = """
+--------------------------------------------------------------+
|                                                              |
|                   Birthday Import                            |
|       Google Contacts -> Google Calendar birthdays           |
|                                                              |
+--------------------------------------------------------------+
"""


def print_banner():
    """Print the banner"""
    print(BANNER)
    print(f"Version: {os.getenv('VERSION', __version__)}")
    print(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("-" * 64)
    print()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Import contact birthdays into a new Google Calendar')
    parser.add_argument('--token', default=None,
                        help='Access token for Google APIs (default: $GOOGLE_ACCESS_TOKEN)')
    parser.add_argument('--dry-run', action='store_true',
                        help='List the birthdays found without creating a calendar or events')
    parser.add_argument('--no-banner', action='store_true', help='Skip banner')
    return parser.parse_args(argv)


def main(argv=None):
    """Main function with argument parsing"""
    args = parse_args(argv)

    setup_logging()
    logger = logging.getLogger(__name__)

    if not args.no_banner:
        print_banner()

    try:
        token = validate_token(args.token)
    except FatalSetupError as e:
        logger.error(str(e))
        sys.exit(1)

    import_config = get_import_config()
    people = PeopleClient(
        token,
        page_size=import_config['page_size'],
        timeout=import_config['request_timeout']
    )
    calendar = CalendarClient(token, timeout=import_config['request_timeout'])

    orchestrator = SyncOrchestrator(people, calendar, get_calendar_settings(), dry_run=args.dry_run)
    result = orchestrator.run()
    sys.exit(0 if result.ok else 1)


if __name__ == "__main__":
    main()
