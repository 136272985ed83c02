"""GitHub REST search client with page-based pagination."""

import logging
from typing import Any, Dict, Iterator, List

import requests

from portfolio_index.config import SyncConfig
from portfolio_index.domain.errors import AuthError, TransportError
from portfolio_index.domain.repository import Record

logger = logging.getLogger(__name__)


class GitHubSearchClient:
    """Client for the GitHub repository search endpoint.

    Pages are requested one at a time, most recently updated first.
    There is no retry: any failed page aborts the whole fetch.
    """

    SEARCH_PATH = "/search/repositories"
    ACCEPT = "application/vnd.github+json"

    def __init__(self, config: SyncConfig):
        """
        Initialize GitHub search client.

        Args:
            config: Run configuration carrying the token, query window and page limits.

        Raises:
            AuthError: If the configuration has no token.
        """
        if not config.token:
            raise AuthError("GITHUB_TOKEN is missing.")

        self.config = config
        self.url = f"{config.api_url}{self.SEARCH_PATH}"
        self.headers = {
            "Authorization": f"Bearer {config.token}",
            "Accept": self.ACCEPT,
        }

    def _get_page(self, page: int) -> Dict[str, Any]:
        """
        Request a single result page.

        Raises:
            TransportError: On a non-2xx status or when the request cannot complete.
        """
        params = {
            "q": self.config.query,
            "sort": "updated",
            "order": "desc",
            "per_page": self.config.page_size,
            "page": page,
        }

        try:
            response = requests.get(
                self.url,
                params=params,
                headers=self.headers,
                timeout=self.config.request_timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(None, f"{type(e).__name__}: {e}") from e

        if not 200 <= response.status_code < 300:
            raise TransportError(response.status_code, response.text)

        remaining = response.headers.get("X-RateLimit-Remaining")
        if remaining is not None:
            logger.debug(f"Rate limit remaining after page {page}: {remaining}")

        return response.json()

    def iter_pages(self) -> Iterator[List[Record]]:
        """
        Yield fetched records page by page, starting from page 1.

        Stops after an empty page, a short page, or ``max_pages`` pages.
        """
        page = 1
        while True:
            data = self._get_page(page)
            items = data.get("items") or []
            if not items:
                logger.info(f"Page {page} is empty, stopping")
                break

            records = [Record.from_search_item(item) for item in items]
            logger.info(f"Fetched page {page}: {len(records)} repositories")
            yield records

            if len(items) < self.config.page_size:
                break
            if page >= self.config.max_pages:
                logger.info(f"Reached page cap of {self.config.max_pages} pages")
                break
            page += 1

    def fetch_all(self) -> List[Record]:
        """Fetch every page and return the records in fetch order."""
        records: List[Record] = []
        for page_records in self.iter_pages():
            records.extend(page_records)
        return records
