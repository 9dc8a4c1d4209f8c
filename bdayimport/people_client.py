"""
People API client for fetching contacts with birthdays
"""

import logging
from typing import Dict, List, Set

from .config import DEFAULT_REQUEST_TIMEOUT, MAX_PAGE_SIZE
from .errors import DirectoryError
from .google_services import TRANSPORT_ERRORS, build_service, http_status

logger = logging.getLogger(__name__)

PERSON_FIELDS = "names,birthdays"


class PeopleClient:
    """Client for reading the authenticated user's contacts"""

    def __init__(self, token: str, page_size: int = MAX_PAGE_SIZE,
                 timeout: int = DEFAULT_REQUEST_TIMEOUT,
                 service=None, owner: str = "people/me"):
        self.owner = owner
        self.page_size = max(1, min(page_size, MAX_PAGE_SIZE))
        self.service = service or build_service("people", "v1", token, timeout)

    def get_connections(self) -> List[Dict]:
        """Fetch every connection, following nextPageToken until the last page"""
        connections: List[Dict] = []
        seen_tokens: Set[str] = set()
        page_token = None
        page = 0

        while True:
            page += 1
            logger.debug(f"Fetching contacts page {page} for {self.owner}")
            data = self._get_page(page_token)

            batch = data.get('connections') or []
            connections.extend(batch)
            logger.debug(f"Page {page}: {len(batch)} contacts")

            page_token = data.get('nextPageToken')
            if not page_token:
                break
            if page_token in seen_tokens:
                raise DirectoryError(f"Unable to retrieve contacts: page token repeated on page {page}")
            seen_tokens.add(page_token)

        logger.info(f"Fetched {len(connections)} contacts in {page} page(s)")
        return connections

    def _get_page(self, page_token=None) -> Dict:
        params = {
            'resourceName': self.owner,
            'personFields': PERSON_FIELDS,
            'pageSize': self.page_size,
        }
        if page_token:
            params['pageToken'] = page_token

        try:
            return self.service.people().connections().list(**params).execute()
        except TRANSPORT_ERRORS as e:
            status = http_status(e)
            prefix = f"HTTP {status}: " if status else ""
            raise DirectoryError(f"Unable to retrieve contacts: {prefix}{e}") from e
