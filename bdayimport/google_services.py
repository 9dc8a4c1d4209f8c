"""
Google API service construction from a caller-supplied access token
"""

from typing import Optional

import google_auth_httplib2
import httplib2
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .config import DEFAULT_REQUEST_TIMEOUT

# Errors raised by execute() when a request is rejected or never completes
TRANSPORT_ERRORS = (HttpError, httplib2.HttpLib2Error, OSError)


def build_service(api: str, version: str, token: str, timeout: int = DEFAULT_REQUEST_TIMEOUT):
    """Build an API service authorized with a static access token"""
    credentials = Credentials(token=token)
    http = google_auth_httplib2.AuthorizedHttp(credentials, http=httplib2.Http(timeout=timeout))
    # cache_discovery=False avoids file writes
    return build(api, version, http=http, cache_discovery=False)


def http_status(exc: Exception) -> Optional[int]:
    response = getattr(exc, "resp", None)
    return int(response.status) if response is not None and getattr(response, "status", None) else None
