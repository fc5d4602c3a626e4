import logging

import requests
from django.conf import settings

from .exceptions import FetchError

logger = logging.getLogger(__name__)


class FeedClient:
    """
    Fetches the feed document and product images.

    Every call is attempted exactly once. No retries, no rate limiting and
    no timeout beyond FEED_REQUEST_TIMEOUT (None leaves the requests default).
    """

    def __init__(self, session: requests.Session = None):
        self._timeout = getattr(settings, 'FEED_REQUEST_TIMEOUT', None)
        self._session = session or requests.Session()
        self._session.headers.update({'User-Agent': settings.FEED_USER_AGENT})

    def fetch(self, url: str) -> bytes:
        """Return the response body for `url`, raising FetchError on any failure."""
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.debug("GET %s failed: %s", url, exc)
            raise FetchError(f"Failed to fetch content from {url}: {exc}") from exc

        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(response.content))
        return response.content
