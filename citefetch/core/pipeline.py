"""Resolve-then-fetch pipeline: journal/volume/page → PMID → citation record."""

import logging
from typing import Optional, Union

from citefetch.core.config import ServiceConfig
from citefetch.core.errors import ValidationError
from citefetch.search.clients import RecordClient, SearchClient
from citefetch.search.extractor import extract_identifier
from citefetch.search.models import (
    CitationQuery,
    Found,
    NotFound,
    Resolution,
    Retrieval,
    as_resolution,
)

logger = logging.getLogger(__name__)


class CitationFetcher:
    """Composes the search and record clients into the two workflows.

    Holds nothing between calls except the endpoint configuration and the
    two clients.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        search_client: Optional[SearchClient] = None,
        record_client: Optional[RecordClient] = None,
    ):
        self.config = config or ServiceConfig()
        self.search_client = search_client or SearchClient(self.config)
        self.record_client = record_client or RecordClient(self.config)

    # ── Direct Retrieval ─────────────────────────────────────────

    def retrieve_by_id(
        self,
        identifier: Union[str, Found, NotFound],
        timeout: Optional[float] = None,
    ) -> Retrieval:
        """Fetch the record for a PMID; NotFound short-circuits with no request."""
        resolution = as_resolution(identifier)
        if isinstance(resolution, NotFound):
            return Retrieval.no_matches()

        record = self.record_client.fetch(resolution.pmid, timeout=timeout)
        return Retrieval(pmid=resolution.pmid, record=record)

    # ── Resolution ───────────────────────────────────────────────

    def resolve(
        self, query: CitationQuery, timeout: Optional[float] = None
    ) -> Resolution:
        """Map a citation query to its first matching PMID."""
        blank = query.blank_fields()
        if blank:
            raise ValidationError(blank)

        response = self.search_client.search(query, timeout=timeout)
        resolution = extract_identifier(response)
        if isinstance(resolution, Found):
            logger.info("Resolved to PMID %s", resolution.pmid)
        else:
            logger.info("No PMID matched the query")
        return resolution

    def retrieve_by_query(
        self, query: CitationQuery, timeout: Optional[float] = None
    ) -> Retrieval:
        return self.retrieve_by_id(self.resolve(query, timeout=timeout), timeout=timeout)

    # ── Lifecycle ────────────────────────────────────────────────

    def close(self) -> None:
        self.search_client.close()
        self.record_client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


# ── Convenience Functions ────────────────────────────────────────────


def retrieve_by_id(
    identifier: Union[str, Found, NotFound],
    config: Optional[ServiceConfig] = None,
    timeout: Optional[float] = None,
) -> Retrieval:
    with CitationFetcher(config) as fetcher:
        return fetcher.retrieve_by_id(identifier, timeout=timeout)


def retrieve_by_query(
    query: CitationQuery,
    config: Optional[ServiceConfig] = None,
    timeout: Optional[float] = None,
) -> Retrieval:
    with CitationFetcher(config) as fetcher:
        return fetcher.retrieve_by_query(query, timeout=timeout)
