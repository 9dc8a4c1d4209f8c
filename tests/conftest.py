"""Shared fixtures for the bdayimport tests."""

import logging

import httplib2
import pytest

QUIETED_LOGGERS = ('googleapiclient', 'google_auth_httplib2')


@pytest.fixture
def connection_error():
    return httplib2.ServerNotFoundError("Unable to find the server at people.googleapis.com")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        'GOOGLE_ACCESS_TOKEN',
        'BIRTHDAY_CALENDAR_NAME',
        'BIRTHDAY_CALENDAR_DESCRIPTION',
        'CONTACTS_PAGE_SIZE',
        'REQUEST_TIMEOUT',
        'LOG_LEVEL',
        'LOG_FILE',
        'DEBUG',
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_logging():
    """Undo setup_logging() changes to the root and library loggers."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in QUIETED_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
