# shelf/metadata/google_books.py
import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from shelf.config import google_books_api_key, google_books_base_url, google_books_timeout
from shelf.models.book import VolumeInfo

logger = logging.getLogger(__name__)


class MetadataLookupError(Exception):
    """The catalog could not be reached or answered with an error"""
    pass


class GoogleBooksClient:
    """Searches the Google Books volumes API."""

    def __init__(self,
                 api_key: Optional[str] = None,
                 base_url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        """
        Args:
            api_key: API key; falls back to GOOGLE_BOOKS_API_KEY, omitted from requests when unset
            base_url: Volumes endpoint; falls back to GOOGLE_BOOKS_BASE_URL
            timeout: Request timeout in seconds; falls back to GOOGLE_BOOKS_TIMEOUT
            session: requests session to reuse, a new one is created otherwise
        """
        self.api_key = api_key or google_books_api_key()
        self.base_url = base_url or google_books_base_url()
        self.timeout = timeout if timeout is not None else google_books_timeout()
        self.session = session or requests.Session()

    def search_by_title(self, title: str) -> List[VolumeInfo]:
        return self.search(title)

    def search_by_title_and_author(self, title: str, author_surname: str) -> List[VolumeInfo]:
        return self.search(f"{title} inauthor:{author_surname}")

    def search(self, query: str) -> List[VolumeInfo]:
        """
        Run a volumes query.

        Args:
            query: Free-text query, e.g. "Dune" or "Dune inauthor:Herbert"

        Returns:
            Matching volumes in catalog order; empty when nothing matched

        Raises:
            MetadataLookupError: On transport failure or a non-2xx response
        """
        params = {'q': query}
        if self.api_key:
            params['key'] = self.api_key

        logger.debug(f"Searching catalog for '{query}'")
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.error(f"Catalog lookup failed for '{query}': {str(e)}")
            raise MetadataLookupError(f"Catalog lookup failed for '{query}': {str(e)}") from e
        except ValueError as e:
            raise MetadataLookupError(f"Catalog returned invalid JSON for '{query}'") from e

        return self._parse_items(payload)

    def _parse_items(self, payload: Dict[str, Any]) -> List[VolumeInfo]:
        volumes = []
        for item in payload.get('items', []) or []:
            volume_data = item.get('volumeInfo') or {}
            if not volume_data.get('title'):
                continue
            try:
                volumes.append(VolumeInfo.model_validate(volume_data))
            except ValidationError as e:
                logger.warning(f"Skipping malformed volume '{volume_data.get('title')}': {str(e)}")
        return volumes
