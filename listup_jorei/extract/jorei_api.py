"""
Jorei API Client - Pure I/O Operations

This module handles all calls to the reiki search API with no business logic.
Returns validated raw structures that the transform layer normalizes.

The host presents a broken TLS certificate, so the client's own session
skips certificate verification. That session is never shared with other
HTTP code.
"""

import time
from typing import Optional

import requests
from pydantic import ValidationError

from ..coreutils.config import DEFAULT_TIMEOUT
from ..coreutils.errors import DecodeError, NotFoundError
from ..coreutils.request import get_json, new_session
from .schemas import DetailEnvelope, JoreiDoc, ListEnvelope, ListPage
import logging

logger = logging.getLogger(__name__)


class JoreiAPIClient:
    """Pure API client for the reiki search endpoint"""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create HTTP session that does not verify the server certificate"""
        return new_session(verify_tls=False)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def fetch_list(self, url: str) -> ListPage:
        """
        Fetch one page of search results

        Args:
            url: Search URL built by build_list_query

        Returns:
            ListPage: Total hit count and the ordered summaries on this page
        """
        logger.debug(f"Fetching list page from {url}")
        start_time = time.time()

        data = get_json(self.session, url, timeout=self.timeout)
        try:
            page = ListEnvelope.model_validate(data).response
        except ValidationError as e:
            raise DecodeError(url, f"unexpected list response shape: {e}") from e

        logger.debug(
            f"Fetched {len(page.docs)} ids (start={page.start}) "
            f"in {time.time() - start_time:.2f} seconds"
        )
        return page

    def fetch_detail(self, url: str) -> JoreiDoc:
        """
        Fetch the full document for one record

        Args:
            url: Detail URL built by build_detail_query

        Returns:
            JoreiDoc: The single matching document

        Raises:
            NotFoundError: If the response holds no document
        """
        logger.debug(f"Fetching detail from {url}")

        data = get_json(self.session, url, timeout=self.timeout)
        try:
            response = DetailEnvelope.model_validate(data).response
        except ValidationError as e:
            raise DecodeError(url, f"unexpected detail response shape: {e}") from e

        if not response.docs:
            raise NotFoundError(url, "no document in detail response")
        if len(response.docs) > 1:
            logger.warning(
                f"Detail query returned {len(response.docs)} documents, using the first"
            )
        return response.docs[0]
