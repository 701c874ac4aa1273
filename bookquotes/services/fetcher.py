from __future__ import annotations

import logging
from typing import Protocol

from bookquotes.exceptions import TransportError

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Fetch a URL and return the document text.

    Implementations never retry; retry/skip policy belongs to the caller.
    """

    def fetch(self, url: str) -> str: ...


class HttpServiceFetcher:
    def __init__(self, http_service):
        self._http_service = http_service

    def fetch(self, url: str) -> str:
        response = self._http_service.fetch(url)
        if not response.ok:
            logger.warning("Non-success status for %s: %s", url, response.status_code)
            raise TransportError(url, status_code=response.status_code)
        return response.text
